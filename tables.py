"""
Static content tables for the procedural generator.

Every draw space lives here once, so each call samples from the same tables.
Tests can swap in a smaller ``ContentTables`` instead of patching constants.
"""
from typing import Dict, Tuple
from pydantic import BaseModel, ConfigDict, Field

from models import ItemCategory

# ============================================================================
# Starting Location
# ============================================================================
START_THEME = "Quiet Grove"
START_DESCRIPTION = (
    "A peaceful clearing surrounded by ancient trees, "
    "dappled sunlight filtering through the leaves."
)
START_DISCOVERY = "You begin your journey here, where the world feels safe and full of possibility."

# ============================================================================
# Location Options
# ============================================================================
THEMES: Tuple[str, ...] = (
    "Mushroom Circle", "Mossy Stones", "Babbling Brook", "Wildflower Meadow",
    "Hollow Tree", "Crystal Pool", "Foggy Hollow", "Sunlit Glade",
    "Berry Thicket", "Stone Circle", "Whispering Willows", "Hidden Grotto",
    "Autumn Vale", "Morning Mist", "Starlit Clearing", "Gentle Waterfall",
)

ADJECTIVES: Tuple[str, ...] = ("ancient", "forgotten", "peaceful", "mysterious", "enchanted")
DETAILS: Tuple[str, ...] = (
    "soft light dances across", "shadows play among",
    "gentle sounds echo from", "a strange calm pervades",
)
FEELINGS: Tuple[str, ...] = (
    "You feel drawn here", "Something calls to you",
    "A sense of wonder fills you", "Time seems to slow",
)

DESCRIPTION_TEMPLATE = "An {adjective} {theme} where {detail} the space. {feeling}."

DISCOVERY_TEMPLATES: Tuple[str, ...] = (
    "You discover {theme} and feel a deep connection to this place.",
    "As you arrive at {theme}, you notice details you hadn't expected.",
    "The {theme} reveals itself slowly, inviting you to linger.",
    "{theme} feels like it has been waiting for you.",
    "You find yourself drawn deeper into {theme}.",
)

# ============================================================================
# Items
# ============================================================================
ITEM_NAMES: Dict[ItemCategory, Tuple[str, ...]] = {
    ItemCategory.KEEPSAKE: (
        "Smooth River Stone", "Pressed Flower", "Acorn Cap", "Bird Feather",
        "Seashell Fragment", "Dried Leaf", "Pinecone", "Lucky Pebble",
        "Glass Bead", "Carved Twig", "Moss Sample", "Butterfly Wing",
    ),
    ItemCategory.TREASURE: (
        "Ancient Coin", "Crystal Shard", "Silver Locket", "Brass Key",
        "Jade Figurine", "Pearl", "Golden Ring", "Copper Medallion",
        "Gemstone", "Amber", "Moonstone", "Opal",
    ),
    ItemCategory.CURIOSITY: (
        "Strange Map Fragment", "Mysterious Note", "Odd Compass", "Faded Photograph",
        "Old Journal Page", "Weathered Letter", "Riddle Scroll", "Poetry Fragment",
        "Sheet Music", "Recipe Card", "Star Chart", "Encrypted Message",
    ),
}

ITEM_DESCRIPTIONS: Dict[ItemCategory, Tuple[str, ...]] = {
    ItemCategory.KEEPSAKE: (
        "A simple treasure that reminds you of this moment.",
        "Something small but meaningful.",
        "A gentle reminder of your journey.",
        "It feels right to carry this with you.",
    ),
    ItemCategory.TREASURE: (
        "It glimmers softly in your hand, valuable yet mysterious.",
        "Worth keeping safe - who knows its story?",
        "A prize from your wanderings.",
        "Something precious, left behind long ago.",
    ),
    ItemCategory.CURIOSITY: (
        "This raises more questions than it answers.",
        "You sense there's a story here, waiting to unfold.",
        "Strange and intriguing - you must learn more.",
        "A puzzle piece from someone else's tale.",
    ),
}

# ============================================================================
# Table Bundle
# ============================================================================
class ContentTables(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_theme: str = START_THEME
    start_description: str = START_DESCRIPTION
    start_discovery: str = START_DISCOVERY
    themes: Tuple[str, ...] = THEMES
    adjectives: Tuple[str, ...] = ADJECTIVES
    details: Tuple[str, ...] = DETAILS
    feelings: Tuple[str, ...] = FEELINGS
    description_template: str = DESCRIPTION_TEMPLATE
    discovery_templates: Tuple[str, ...] = DISCOVERY_TEMPLATES
    item_names: Dict[ItemCategory, Tuple[str, ...]] = Field(default_factory=lambda: dict(ITEM_NAMES))
    item_descriptions: Dict[ItemCategory, Tuple[str, ...]] = Field(default_factory=lambda: dict(ITEM_DESCRIPTIONS))

DEFAULT_TABLES = ContentTables()
