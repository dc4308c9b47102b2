# Gentle Wanderings - terminal front end
# Reads commands, asks the engine for options and renders what it returns.

import logging
import sys
from typing import List, Optional

from config import settings
from engine import GameEngine
from models import CellKind, Direction, Item, LocationOption, Tile
from utils import Colors, RULE, banner, center_text

# ============================================================================
# Logging Configuration
# ============================================================================
def configure_logging() -> None:
    if settings.log_file:
        handler = logging.FileHandler(settings.log_file, encoding='utf-8')
    else:
        handler = logging.StreamHandler(sys.stderr)
    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler],
    )

# ============================================================================
# Command Line Interface
# ============================================================================
MAP_SYMBOLS = {
    CellKind.CURRENT: "@",
    CellKind.ITEM: "*",
    CellKind.EXPLORED: "#",
    CellKind.FRONTIER: ".",
    CellKind.UNKNOWN: " ",
}

MENU_ENTRIES = [
    "View Map",
    "Detailed Map",
    "Inventory",
    "Journal",
    "Current Location",
    "Statistics",
    "Back to Journey",
]

def parse_choice(raw: str, upper: int) -> Optional[int]:
    """The 1-based choice in ``raw`` if it is a number in 1..upper, else None."""
    try:
        choice = int(raw)
    except ValueError:
        return None
    return choice if 1 <= choice <= upper else None

class GameCLI:
    """Command line interface for the game"""
    def __init__(self, engine: Optional[GameEngine] = None):
        self.engine = engine or GameEngine()
        self.running = False

    def read(self, prompt: str) -> Optional[str]:
        """One line of input, or None once input is exhausted."""
        try:
            return input(prompt).strip()
        except EOFError:
            return None

    def read_choice(self, prompt: str, upper: int) -> Optional[int]:
        """Keep asking until a number in 1..upper arrives; None on end of input."""
        while True:
            raw = self.read(prompt)
            if raw is None:
                return None
            choice = parse_choice(raw, upper)
            if choice is not None:
                return choice
            print("Let's try that again...")

    # ── Views ─────────────────────────────────────────────────────────
    def display_header(self):
        print("\n".join(banner(["Welcome to Gentle Wanderings", "A Cozy Map-Making Adventure"])))
        print()

    def display_tile(self, tile: Tile):
        print()
        print("\n".join(banner([tile.theme])))
        print(f"\n{tile.description}")
        print(f"\n{tile.discovery}")

    def display_found_item(self, item: Item):
        print(f"\n{RULE}")
        print(f"\n{Colors.YELLOW}✨ You found something! ✨{Colors.ENDC}\n")
        print(f"🎁 {item.name}")
        print(f"   {item.description}")

    def display_directions(self, directions: List[Direction]):
        print("\n" + RULE)
        if not directions:
            print("\nYou have explored all directions from here!")
            print("Commands: [menu] | [m]ap | [i]nventory | [j]ournal | [q]uit")
            return
        print("\nWhere would you like to wander?")
        for i, direction in enumerate(directions, 1):
            print(f"  {i}. Explore {direction.label}")
        print("\nOther: [menu] | [m]ap | [i]nventory | [j]ournal | [q]uit")

    def display_options(self, direction: Direction, options: List[LocationOption]):
        print(f"\n✨ As you head {direction.label}, {len(options)} paths reveal themselves:\n")
        for i, option in enumerate(options, 1):
            print(f"{i}. {option.theme}\n   {option.description}\n")

    def display_map(self):
        rows = self.engine.map_rows(padding=1)
        inner = len(rows[0]) * 2 + 1
        print()
        print("╔" + "═" * inner + "╗")
        print("║" + center_text("Your Map", inner) + "║")
        print("╠" + "═" * inner + "╣")
        for row in rows:
            print("║ " + " ".join(MAP_SYMBOLS[cell] for cell in row) + " ║")
        print("╚" + "═" * inner + "╝")
        print("\nLegend: @ You  # Explored  * Has Item  . Unexplored\n")

    def display_detailed_map(self):
        print()
        print("\n".join(banner(["Detailed Map"])))
        print()
        here = (self.engine.current_x, self.engine.current_y)
        for tile in self.engine.detailed_location_list():
            marker = "@" if tile.coordinates == here else "#"
            print(f"{marker} {tile.theme} ({tile.x},{tile.y})")
            if tile.item:
                print(f"   🎁 Contains: {tile.item.name}")
        print()

    def show_inventory(self):
        print()
        print("\n".join(banner(["Your Collection"])))
        if not self.engine.inventory:
            print("\nYour pack is empty. Perhaps you'll find something as you wander...\n")
            return

        for category, items in self.engine.inventory_by_category().items():
            if not items:
                continue
            print(f"\n{category.icon} {category.display_name} ({len(items)})")
            print(RULE)
            for i, item in enumerate(items, 1):
                print(f"{i}. {item.name}")
                print(f"   {item.description}")
                print(f"   Found at {item.found_at} on Day {item.found_day}")
        print(f"\n{RULE} Total items collected: {len(self.engine.inventory)}\n")

    def show_journal(self):
        print()
        print("\n".join(banner(["Your Journal"])))
        print()
        for entry in self.engine.journal_log:
            print(entry)
        print()

    def show_current_location(self):
        tile = self.engine.current_tile
        print()
        print("\n".join(banner(["Current Location"])))
        print(f"\n🌿 {tile.theme}")
        print(f"📍 Position: ({tile.x}, {tile.y})\n")
        print(f"{tile.description}\n")
        if tile.item:
            print(f"🎁 You found: {tile.item.name}")
            print(f"   {tile.item.description}")
        else:
            print("This location holds no items, just peaceful presence.")
        print()

    def show_statistics(self):
        stats = self.engine.statistics()
        print()
        print("\n".join(banner(["Journey Statistics"])))
        print(f"\n🗓️  Days Traveled: {stats.days_traveled}")
        print(f"🗺️  Locations Discovered: {stats.locations_discovered}")
        print(f"🎒 Items Collected: {stats.items_collected}")
        if stats.category_counts:
            print("\nCollection breakdown:")
            for category, count in stats.category_counts.items():
                print(f"  {category.icon} {category.display_name}: {count}")
        print(f"\n🧭 Map Dimensions: {stats.width} × {stats.height}")
        print(f"📏 Furthest North: {stats.furthest_north}, South: {stats.furthest_south}, "
              f"East: {stats.furthest_east}, West: {stats.furthest_west}")
        print()

    def display_summary(self):
        print()
        print("\n".join(banner(["Journey Summary"])))
        print(f"\n🗓️  Days traveled: {self.engine.turn_count}")
        print(f"🗺️  Locations discovered: {len(self.engine.tiles)}")
        print(f"🎒 Items collected: {len(self.engine.inventory)}\n")
        print("Thank you for wandering with us. Until next time... 🌙✨\n")

    def show_menu(self):
        views = [
            self.display_map, self.display_detailed_map, self.show_inventory,
            self.show_journal, self.show_current_location, self.show_statistics,
        ]
        while True:
            print()
            print("\n".join(banner(["Menu"])))
            for i, entry in enumerate(MENU_ENTRIES, 1):
                print(f"  {i}. {entry}")
            choice = self.read("\n> ")
            if choice is None:
                return
            if choice == str(len(MENU_ENTRIES)):
                print("\nReturning to your journey...")
                return
            picked = parse_choice(choice, len(views))
            if picked is not None:
                views[picked - 1]()
            else:
                print("\nInvalid choice. Please try again.")
            if self.read("\nPress Enter to continue...") is None:
                return

    # ── Commands ──────────────────────────────────────────────────────
    def handle_explore(self, direction: Direction) -> bool:
        """Offer options toward ``direction`` and commit the player's pick."""
        options = self.engine.generate_location_options()
        self.display_options(direction, options)
        choice = self.read_choice(f"Which path calls to you? (1-{len(options)}): ", len(options))
        if choice is None:
            return False

        found = self.engine.explore(direction, options[choice - 1])
        self.display_tile(self.engine.current_tile)
        if found:
            self.display_found_item(found)
        return True

    def process_command(self, command: str) -> bool:
        command = command.strip().lower()
        if not command: return True
        directions = self.engine.adjacent_directions()
        picked = parse_choice(command, len(directions))

        if command in ["q", "quit", "exit"]:
            self.display_summary()
            return False
        elif command == "menu": self.show_menu()
        elif command in ["m", "map"]: self.display_map()
        elif command in ["i", "inv", "inventory"]: self.show_inventory()
        elif command in ["j", "journal"]: self.show_journal()
        elif picked is not None:
            return self.handle_explore(directions[picked - 1])
        else:
            print("Invalid choice. Please try again.")
        return True

    def main_loop(self):
        self.display_header()
        start = self.engine.current_tile
        print(f"🌿 {start.theme}")
        print(start.description)
        print(f"\n{start.discovery}")

        self.running = True
        while self.running:
            self.display_directions(self.engine.adjacent_directions())
            try:
                command = self.read("\n> ")
                if command is None or not self.process_command(command):
                    self.running = False
            except KeyboardInterrupt:
                print("\n\nGoodbye!"); self.running = False
            except Exception as e:
                print(f"\nAn unexpected error occurred: {e}")
                logging.exception("An unexpected error occurred in the main loop")

# ============================================================================
# Main Entry Point
# ============================================================================
def main():
    configure_logging()
    GameCLI().main_loop()

if __name__ == "__main__":
    main()
