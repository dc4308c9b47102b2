"""
Automated playtest script for Gentle Wanderings.
Walks a seeded engine through a random journey without a terminal and checks
the map, journal and inventory bookkeeping after every step.
Reports bugs, crashes, and gameplay observations.
"""
import argparse
import random
import sys
import traceback
from typing import Dict, List, Optional

from engine import GameEngine
from models import Direction

# ============================================================================
# Playtest Runner
# ============================================================================
class PlaytestReport:
    def __init__(self, seed: Optional[int] = None, steps: int = 0):
        self.seed = seed
        self.steps = steps
        self.steps_taken = 0
        self.replay_matched: Optional[bool] = None
        self.bugs: List[Dict[str, str]] = []
        self.crashes: List[Dict[str, str]] = []
        self.warnings: List[str] = []
        self.actions_taken: List[str] = []
        self.observations: List[str] = []

    @property
    def ok(self) -> bool:
        return not (self.bugs or self.crashes)

    def bug(self, title: str, detail: str):
        self.bugs.append({"title": title, "detail": detail})

    def crash(self, title: str, detail: str):
        self.crashes.append({"title": title, "detail": detail})

    def warn(self, msg: str):
        self.warnings.append(msg)

    def action(self, msg: str):
        self.actions_taken.append(msg)

    def observe(self, msg: str):
        self.observations.append(msg)

    def print_report(self):
        sep = "=" * 70
        print(f"\n{sep}")
        print("  PLAYTEST REPORT")
        print(sep)
        replay = {True: "matched", False: "diverged", None: "not run"}[self.replay_matched]
        print(f"\n  Seed: {self.seed}  Steps: {self.steps_taken}/{self.steps}  Replay: {replay}")

        for heading, entries in (("CRASHES", self.crashes), ("BUGS", self.bugs)):
            print(f"\n  {heading} ({len(entries)}):")
            if not entries:
                print("    None!")
            for i, entry in enumerate(entries, 1):
                print(f"    {i}. [{entry['title']}]")
                for line in entry['detail'].split('\n'):
                    print(f"       {line}")

        print(f"\n  WARNINGS ({len(self.warnings)}):")
        if self.warnings:
            for i, w in enumerate(self.warnings, 1):
                print(f"    {i}. {w}")
        else:
            print("    None!")

        print(f"\n  ACTIONS LOG ({len(self.actions_taken)} actions):")
        for a in self.actions_taken:
            print(f"    - {a}")

        print(f"\n  OBSERVATIONS ({len(self.observations)}):")
        for o in self.observations:
            print(f"    - {o}")

        print(f"\n{sep}")
        total_issues = len(self.crashes) + len(self.bugs) + len(self.warnings)
        print(f"  TOTAL ISSUES: {total_issues} ({len(self.crashes)} crashes, {len(self.bugs)} bugs, {len(self.warnings)} warnings)")
        print(sep)


def check_invariants(engine: GameEngine, explores: int, journal_before: int, report: PlaytestReport):
    """Record a bug for every broken bookkeeping rule after ``explores`` steps."""
    if (engine.current_x, engine.current_y) not in engine.tiles:
        report.bug("Position off the map", f"({engine.current_x}, {engine.current_y}) has no tile")
    if engine.get_tile(0, 0) is None:
        report.bug("Start tile missing", "(0, 0) no longer has a tile")
    if engine.turn_count != 1 + explores:
        report.bug("Turn drift", f"turn_count={engine.turn_count} after {explores} explores")
    if len(engine.journal) <= journal_before:
        report.bug("Journal did not grow", f"length stayed at {len(engine.journal)}")
    for coords, tile in engine.tiles.items():
        if coords != tile.coordinates:
            report.bug("Tile keyed wrongly", f"{tile.theme} stored under {coords} but sits at {tile.coordinates}")
    for item in engine.inventory:
        owners = [t for t in engine.tiles.values() if t.item is item]
        if len(owners) != 1:
            report.bug("Orphaned item", f"{item.name} is attached to {len(owners)} tiles")
        elif owners[0].theme != item.found_at:
            report.bug("Item origin mismatch", f"{item.name} says {item.found_at}, tile is {owners[0].theme}")


def walk(engine: GameEngine, chooser: random.Random, steps: int, report: Optional[PlaytestReport] = None) -> List[str]:
    """Explore up to ``steps`` times, picking frontier and option with ``chooser``."""
    choices: List[str] = []
    for step in range(steps):
        directions = engine.adjacent_directions()
        if not directions:
            if report:
                report.observe(f"Boxed in at ({engine.current_x}, {engine.current_y}) after {step} steps")
            break
        direction = chooser.choice(directions)
        options = engine.generate_location_options()
        option = chooser.choice(options)
        journal_before = len(engine.journal)
        found = engine.explore(direction, option)
        choices.append(f"{direction.value}:{option.theme}")
        if report:
            report.action(f"Day {engine.turn_count}: went {direction.label} to {option.theme}"
                          + (f", found {found.name}" if found else ""))
            check_invariants(engine, step + 1, journal_before, report)
    return choices


def run_playtest(seed: int = 7, steps: int = 40) -> PlaytestReport:
    report = PlaytestReport(seed, steps)

    # ====================================================================
    # PHASE 1: Fresh journey
    # ====================================================================
    print("\n--- PHASE 1: Fresh Journey ---")
    try:
        engine = GameEngine(rng=random.Random(seed))
        report.action(f"Created engine with seed {seed}")
        if engine.journal != [f"Day 1: {engine.current_tile.discovery}"]:
            report.bug("Unexpected opening journal", repr(engine.journal))
        if engine.adjacent_directions() != list(Direction):
            report.bug("Start frontier incomplete", repr(engine.adjacent_directions()))
    except Exception as e:
        report.crash("Game creation failed", f"{type(e).__name__}: {e}\n{traceback.format_exc()}")
        return report

    # ====================================================================
    # PHASE 2: Random walk
    # ====================================================================
    print("\n--- PHASE 2: Exploration ---")
    try:
        path = walk(engine, random.Random(seed + 1), steps, report)
        report.steps_taken = len(path)
        stats = engine.statistics()
        report.observe(f"Explored {len(path)} locations, collected {stats.items_collected} items")
        report.observe(f"Map is {stats.width} x {stats.height}")
        if stats.locations_discovered != len(path) + 1:
            report.bug("Tile count mismatch", f"{stats.locations_discovered} tiles after {len(path)} explores")
        if len(path) < steps:
            report.warn(f"Walk ended early after {len(path)} of {steps} steps")
    except Exception as e:
        report.crash("Exploration failed", f"{type(e).__name__}: {e}\n{traceback.format_exc()}")
        return report

    # ====================================================================
    # PHASE 3: Deterministic replay
    # ====================================================================
    print("\n--- PHASE 3: Replay ---")
    try:
        replay = GameEngine(rng=random.Random(seed))
        replay_path = walk(replay, random.Random(seed + 1), steps)
        same_state = (replay.tiles == engine.tiles and replay.journal == engine.journal
                      and replay.inventory == engine.inventory)
        report.replay_matched = replay_path == path and same_state
        if replay_path != path:
            report.bug("Replay diverged", "Same seeds chose a different path")
        if not same_state:
            report.bug("Replay state differs", "Same seeds produced a different map, journal or inventory")
        if report.replay_matched:
            report.observe("Replay matched the first journey")
    except Exception as e:
        report.crash("Replay failed", f"{type(e).__name__}: {e}\n{traceback.format_exc()}")

    return report


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run an automated Gentle Wanderings playtest.")
    parser.add_argument("--seed", type=int, default=7)
    parser.add_argument("--steps", type=int, default=40)
    args = parser.parse_args(argv)

    print("=" * 70)
    print("  GENTLE WANDERINGS AUTOMATED PLAYTEST")
    print("=" * 70)

    report = run_playtest(args.seed, args.steps)
    report.print_report()
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
