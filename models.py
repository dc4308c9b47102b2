from __future__ import annotations
from enum import Enum
from typing import Dict, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

# ============================================================================
# Base Models and Enums
# ============================================================================
class Direction(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def offset(self) -> Tuple[int, int]:
        return _DIRECTION_OFFSETS[self]

    @property
    def label(self) -> str:
        return self.value.title()

    def apply(self, x: int, y: int) -> Tuple[int, int]:
        """Coordinate one step from (x, y) in this direction."""
        dx, dy = self.offset
        return x + dx, y + dy

_DIRECTION_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.SOUTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

# ============================================================================
# Item Models
# ============================================================================
class ItemCategory(str, Enum):
    KEEPSAKE = "keepsake"
    TREASURE = "treasure"
    CURIOSITY = "curiosity"

    @property
    def display_name(self) -> str:
        return _CATEGORY_TITLES[self]

    @property
    def icon(self) -> str:
        return _CATEGORY_ICONS[self]

_CATEGORY_TITLES = {
    ItemCategory.KEEPSAKE: "Keepsakes",
    ItemCategory.TREASURE: "Treasures",
    ItemCategory.CURIOSITY: "Curiosities",
}

_CATEGORY_ICONS = {
    ItemCategory.KEEPSAKE: "🍃",
    ItemCategory.TREASURE: "💎",
    ItemCategory.CURIOSITY: "❓",
}

class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    category: ItemCategory
    found_at: str  # theme of the tile it was found on
    found_day: int

# ============================================================================
# Location Models
# ============================================================================
class Tile(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    theme: str
    description: str
    discovery: str
    visited: bool = True
    item: Optional[Item] = None

    @property
    def coordinates(self) -> Tuple[int, int]:
        return (self.x, self.y)

class LocationOption(BaseModel):
    """A candidate location offered to the player before it becomes a Tile."""
    model_config = ConfigDict(frozen=True)

    theme: str
    description: str

# ============================================================================
# Map and Statistics Models
# ============================================================================
class CellKind(str, Enum):
    CURRENT = "current"
    ITEM = "item"
    EXPLORED = "explored"
    FRONTIER = "frontier"  # unexplored, but next to an explored tile
    UNKNOWN = "unknown"

class MapBounds(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_x: int = 0
    max_x: int = 0
    min_y: int = 0
    max_y: int = 0

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    def padded(self, amount: int = 1) -> MapBounds:
        return MapBounds(
            min_x=self.min_x - amount,
            max_x=self.max_x + amount,
            min_y=self.min_y - amount,
            max_y=self.max_y + amount,
        )

class GameStatistics(BaseModel):
    days_traveled: int
    locations_discovered: int
    items_collected: int
    category_counts: Dict[ItemCategory, int] = Field(default_factory=dict)
    bounds: MapBounds

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    @property
    def furthest_north(self) -> int:
        return self.bounds.max_y

    @property
    def furthest_south(self) -> int:
        return self.bounds.min_y

    @property
    def furthest_east(self) -> int:
        return self.bounds.max_x

    @property
    def furthest_west(self) -> int:
        return self.bounds.min_x
