import random

import pytest

from engine import GameEngine, TileAlreadyExploredError
from generator import ContentGenerator
from models import CellKind, Direction, ItemCategory, LocationOption
from tables import START_DISCOVERY, START_THEME, ContentTables


def make_engine(seed: int = 1, threshold: float = 0.6) -> GameEngine:
    rng = random.Random(seed)
    return GameEngine(rng=rng, generator=ContentGenerator(rng, item_find_threshold=threshold))


def explore_first(engine: GameEngine, direction: Direction):
    return engine.explore(direction, engine.generate_location_options()[0])


def test_fresh_game_state(engine):
    start = engine.get_tile(0, 0)
    assert start is not None
    assert start.theme == START_THEME
    assert (engine.current_x, engine.current_y) == (0, 0)
    assert engine.turn_count == 1
    assert engine.journal_log == (f"Day 1: {START_DISCOVERY}",)
    assert engine.items == ()


def test_missing_tile_is_none(engine):
    assert engine.get_tile(5, -5) is None


def test_isolated_start_has_full_frontier(engine):
    assert engine.adjacent_directions() == [Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST]


def test_frontier_excludes_explored_neighbours(engine):
    explore_first(engine, Direction.NORTH)
    assert Direction.SOUTH not in engine.adjacent_directions()
    explore_first(engine, Direction.EAST)
    explore_first(engine, Direction.SOUTH)
    # standing at (1, 0): west is the start tile
    assert engine.adjacent_directions() == [Direction.SOUTH, Direction.EAST]


def test_explore_creates_tile_from_chosen_option(engine):
    option = LocationOption(theme="Crystal Pool", description="An enchanted crystal pool.")
    engine.explore(Direction.WEST, option)
    tile = engine.get_tile(-1, 0)
    assert tile.theme == "Crystal Pool"
    assert tile.description == "An enchanted crystal pool."
    assert tile.visited
    assert "Crystal Pool" in tile.discovery
    assert engine.current_tile is tile


def test_turn_count_tracks_explores():
    engine = make_engine(seed=3)
    path = [Direction.NORTH, Direction.NORTH, Direction.WEST, Direction.SOUTH, Direction.SOUTH]
    for n, direction in enumerate(path, 1):
        explore_first(engine, direction)
        assert engine.turn_count == 1 + n
    assert len(engine.tiles) == 1 + len(path)


def test_exploring_into_existing_tile_fails_without_side_effects(engine):
    explore_first(engine, Direction.EAST)
    snapshot = (dict(engine.tiles), engine.current_x, engine.current_y, engine.turn_count,
                list(engine.journal), list(engine.inventory))
    with pytest.raises(TileAlreadyExploredError):
        explore_first(engine, Direction.WEST)
    assert snapshot == (dict(engine.tiles), engine.current_x, engine.current_y, engine.turn_count,
                        list(engine.journal), list(engine.inventory))


def test_journal_gains_found_line_when_item_found():
    engine = make_engine(threshold=-1.0)
    item = explore_first(engine, Direction.NORTH)
    assert item is not None
    assert len(engine.journal) == 3
    assert engine.journal[1].startswith("Day 2: ")
    assert engine.journal[2] == f"  → Found: {item.name}"
    assert engine.inventory == [item]


def test_journal_gains_one_line_without_item():
    engine = make_engine(threshold=1.0)
    assert explore_first(engine, Direction.NORTH) is None
    assert len(engine.journal) == 2
    assert engine.inventory == []
    assert engine.get_tile(0, 1).item is None


def test_inventory_items_are_owned_by_exactly_one_tile():
    engine = make_engine(seed=8, threshold=0.3)
    chooser = random.Random(8)
    for _ in range(30):
        directions = engine.adjacent_directions()
        if not directions:
            break
        turn = engine.turn_count
        item = engine.explore(chooser.choice(directions), chooser.choice(engine.generate_location_options()))
        if item is not None:
            assert item.found_day == turn
    assert engine.inventory
    for item in engine.inventory:
        owners = [tile for tile in engine.tiles.values() if tile.item is item]
        assert len(owners) == 1
        assert owners[0].theme == item.found_at


def test_bounds_after_north_north_east(engine):
    for direction in (Direction.NORTH, Direction.NORTH, Direction.EAST):
        explore_first(engine, direction)
    bounds = engine.compute_bounds()
    assert (bounds.min_x, bounds.max_x, bounds.min_y, bounds.max_y) == (0, 1, 0, 2)
    stats = engine.statistics()
    assert (stats.width, stats.height) == (2, 3)
    assert (stats.furthest_north, stats.furthest_south, stats.furthest_east, stats.furthest_west) == (2, 0, 1, 0)


def test_bounds_of_fresh_game_is_origin(engine):
    bounds = engine.compute_bounds()
    assert (bounds.min_x, bounds.max_x, bounds.min_y, bounds.max_y) == (0, 0, 0, 0)


def test_detailed_location_list_order(engine):
    for direction in (Direction.NORTH, Direction.EAST, Direction.SOUTH):
        explore_first(engine, direction)
    assert [t.coordinates for t in engine.detailed_location_list()] == [(1, 1), (0, 1), (1, 0), (0, 0)]


def test_cell_classification():
    engine = make_engine(threshold=1.0)
    explore_first(engine, Direction.NORTH)
    assert engine.classify_cell(0, 1) == CellKind.CURRENT
    assert engine.classify_cell(0, 0) == CellKind.EXPLORED
    assert engine.classify_cell(1, 0) == CellKind.FRONTIER
    assert engine.classify_cell(2, 2) == CellKind.UNKNOWN

    finder = make_engine(threshold=-1.0)
    explore_first(finder, Direction.EAST)
    explore_first(finder, Direction.EAST)
    assert finder.classify_cell(1, 0) == CellKind.ITEM


def test_map_rows_cover_padded_bounds():
    engine = make_engine(threshold=1.0)
    explore_first(engine, Direction.NORTH)
    rows = engine.map_rows(padding=1)
    U, F, C, E = CellKind.UNKNOWN, CellKind.FRONTIER, CellKind.CURRENT, CellKind.EXPLORED
    assert rows == [
        [U, F, U],
        [F, C, F],
        [F, E, F],
        [U, F, U],
    ]


def test_statistics_and_grouping():
    engine = make_engine(seed=21, threshold=-1.0)
    for direction in (Direction.NORTH, Direction.NORTH, Direction.NORTH, Direction.NORTH):
        explore_first(engine, direction)
    stats = engine.statistics()
    assert stats.days_traveled == 5
    assert stats.locations_discovered == 5
    assert stats.items_collected == 4
    assert sum(stats.category_counts.values()) == 4

    grouped = engine.inventory_by_category()
    assert list(grouped) == list(ItemCategory)
    assert sum(len(items) for items in grouped.values()) == 4


def test_initialize_resets_journey(engine):
    explore_first(engine, Direction.SOUTH)
    engine.initialize()
    assert list(engine.tiles) == [(0, 0)]
    assert engine.turn_count == 1
    assert len(engine.journal) == 1


def test_same_seed_replays_identically():
    def play(seed: int) -> GameEngine:
        engine = GameEngine(rng=random.Random(seed))
        for direction, pick in [(Direction.NORTH, 0), (Direction.EAST, 2), (Direction.EAST, 1),
                                (Direction.SOUTH, 0), (Direction.SOUTH, 2), (Direction.WEST, 1)]:
            engine.explore(direction, engine.generate_location_options()[pick])
        return engine

    first, second = play(99), play(99)
    assert first.tiles == second.tiles
    assert first.journal == second.journal
    assert first.inventory == second.inventory


def test_passed_generator_supplies_rng_and_tables():
    rng = random.Random(4)
    tables = ContentTables(start_theme="Tiny Garden")
    generator = ContentGenerator(rng, tables)
    engine = GameEngine(rng=random.Random(99), generator=generator)

    assert engine.rng is rng
    assert engine.tables is tables
    assert engine.current_tile.theme == "Tiny Garden"


def test_rng_and_tables_build_default_generator():
    rng = random.Random(4)
    tables = ContentTables(start_theme="Tiny Garden")
    engine = GameEngine(rng=rng, tables=tables)

    assert engine.generator.rng is rng
    assert engine.generator.tables is tables
