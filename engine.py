import logging
import random
from typing import Dict, List, Optional, Tuple

from config import settings
from generator import ContentGenerator
from models import (
    CellKind, Direction, GameStatistics, Item, ItemCategory,
    LocationOption, MapBounds, Tile,
)
from tables import ContentTables, DEFAULT_TABLES

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]

class TileAlreadyExploredError(ValueError):
    """Raised when exploring toward a coordinate that already has a tile."""
    def __init__(self, x: int, y: int):
        super().__init__(f"Location ({x}, {y}) has already been explored.")
        self.x = x
        self.y = y

class GameEngine:
    """Core game engine that owns the tile map, position, journal and inventory.

    A ``generator`` passed in brings its own rng and tables, and those
    replace ``rng`` and ``tables``.
    """
    def __init__(self, rng: Optional[random.Random] = None, tables: ContentTables = DEFAULT_TABLES,
                 generator: Optional[ContentGenerator] = None):
        if generator is None:
            rng = rng if rng is not None else random.Random(settings.seed)
            generator = ContentGenerator(rng, tables)
        self.generator = generator
        self.rng = generator.rng
        self.tables = generator.tables
        self.tiles: Dict[Coordinate, Tile] = {}
        self.current_x = 0
        self.current_y = 0
        self.turn_count = 1
        self.journal: List[str] = []
        self.inventory: List[Item] = []
        self.initialize()

    def initialize(self) -> None:
        """Reset to a fresh journey standing on the starting tile at (0, 0)."""
        start = Tile(
            x=0,
            y=0,
            theme=self.tables.start_theme,
            description=self.tables.start_description,
            discovery=self.tables.start_discovery,
        )
        self.tiles = {start.coordinates: start}
        self.current_x, self.current_y = 0, 0
        self.turn_count = 1
        self.journal = [f"Day 1: {start.discovery}"]
        self.inventory = []

    # ── Read-only views ───────────────────────────────────────────────
    @property
    def journal_log(self) -> Tuple[str, ...]:
        return tuple(self.journal)

    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(self.inventory)

    @property
    def current_tile(self) -> Tile:
        return self.tiles[(self.current_x, self.current_y)]

    def get_tile(self, x: int, y: int) -> Optional[Tile]:
        return self.tiles.get((x, y))

    def adjacent_directions(self) -> List[Direction]:
        """Directions from the current position that lead somewhere unexplored."""
        return [
            direction for direction in Direction
            if self.get_tile(*direction.apply(self.current_x, self.current_y)) is None
        ]

    # ── Generation ────────────────────────────────────────────────────
    def generate_location_options(self) -> List[LocationOption]:
        return self.generator.generate_location_options()

    def generate_discovery(self, theme: str) -> str:
        return self.generator.generate_discovery(theme)

    def generate_item(self, theme: str, turn: int) -> Optional[Item]:
        return self.generator.generate_item(theme, turn)

    # ── State transition ──────────────────────────────────────────────
    def explore(self, direction: Direction, option: LocationOption) -> Optional[Item]:
        """Step into an unexplored neighbour, turning the chosen option into a tile.

        The option is trusted as one of those just offered. Returns the item
        found there, if any.
        """
        direction = Direction(direction)
        new_x, new_y = direction.apply(self.current_x, self.current_y)
        if self.get_tile(new_x, new_y) is not None:
            raise TileAlreadyExploredError(new_x, new_y)

        discovery = self.generate_discovery(option.theme)
        item = self.generate_item(option.theme, self.turn_count)

        tile = Tile(
            x=new_x,
            y=new_y,
            theme=option.theme,
            description=option.description,
            discovery=discovery,
            visited=True,
            item=item,
        )
        self.tiles[tile.coordinates] = tile
        self.current_x, self.current_y = new_x, new_y
        self.turn_count += 1

        self.journal.append(f"Day {self.turn_count}: {discovery}")
        if item is not None:
            self.journal.append(f"  → Found: {item.name}")
            self.inventory.append(item)
            logger.info(f"Found {item.category.value} '{item.name}' at {option.theme} ({new_x}, {new_y})")

        logger.debug(f"Explored {direction.value} to ({new_x}, {new_y}) '{option.theme}', now day {self.turn_count}")
        return item

    # ── Bounds and map ────────────────────────────────────────────────
    def compute_bounds(self) -> MapBounds:
        if not self.tiles:
            return MapBounds()
        xs = [x for x, _ in self.tiles]
        ys = [y for _, y in self.tiles]
        return MapBounds(min_x=min(xs), max_x=max(xs), min_y=min(ys), max_y=max(ys))

    def classify_cell(self, x: int, y: int) -> CellKind:
        tile = self.get_tile(x, y)
        if tile is not None:
            if (x, y) == (self.current_x, self.current_y):
                return CellKind.CURRENT
            return CellKind.ITEM if tile.item is not None else CellKind.EXPLORED
        if any(self.get_tile(*d.apply(x, y)) is not None for d in Direction):
            return CellKind.FRONTIER
        return CellKind.UNKNOWN

    def map_rows(self, padding: int = 1) -> List[List[CellKind]]:
        """Classified cells, north row first, each row running west to east."""
        bounds = self.compute_bounds().padded(padding)
        return [
            [self.classify_cell(x, y) for x in range(bounds.min_x, bounds.max_x + 1)]
            for y in range(bounds.max_y, bounds.min_y - 1, -1)
        ]

    def detailed_location_list(self) -> List[Tile]:
        return sorted(self.tiles.values(), key=lambda t: (t.y, t.x), reverse=True)

    # ── Inventory and statistics ──────────────────────────────────────
    def inventory_by_category(self) -> Dict[ItemCategory, List[Item]]:
        grouped: Dict[ItemCategory, List[Item]] = {category: [] for category in ItemCategory}
        for item in self.inventory:
            grouped[item.category].append(item)
        return grouped

    def statistics(self) -> GameStatistics:
        counts = {category: len(items) for category, items in self.inventory_by_category().items() if items}
        return GameStatistics(
            days_traveled=self.turn_count,
            locations_discovered=len(self.tiles),
            items_collected=len(self.inventory),
            category_counts=counts,
            bounds=self.compute_bounds(),
        )
