import logging
import random
from typing import List, Optional

from config import settings
from models import Item, ItemCategory, LocationOption
from tables import ContentTables, DEFAULT_TABLES

logger = logging.getLogger(__name__)

OPTIONS_PER_CHOICE = 3

class GenerationError(ValueError):
    """Raised when the content tables cannot satisfy a generation request."""

class ContentGenerator:
    """Draws location options, discovery text and items from the content tables.

    All randomness comes from the injected ``rng`` so a seeded generator
    replays the same content for the same sequence of calls.
    """
    def __init__(self, rng: random.Random, tables: ContentTables = DEFAULT_TABLES,
                 item_find_threshold: Optional[float] = None):
        self.rng = rng
        self.tables = tables
        self.item_find_threshold = (
            settings.item_find_threshold if item_find_threshold is None else item_find_threshold
        )

    def generate_location_options(self, count: int = OPTIONS_PER_CHOICE) -> List[LocationOption]:
        """Offer ``count`` locations whose themes are pairwise distinct."""
        distinct = len(set(self.tables.themes))
        if distinct < count:
            raise GenerationError(
                f"Cannot offer {count} distinct themes from a table of {distinct}."
            )

        options: List[LocationOption] = []
        used_themes = set()
        for _ in range(count):
            # Reject repeats; terminates because the table has enough distinct themes.
            while True:
                theme = self.rng.choice(self.tables.themes)
                if theme not in used_themes:
                    used_themes.add(theme)
                    break

            description = self.tables.description_template.format(
                adjective=self.rng.choice(self.tables.adjectives),
                theme=theme.lower(),
                detail=self.rng.choice(self.tables.details),
                feeling=self.rng.choice(self.tables.feelings),
            )
            options.append(LocationOption(theme=theme, description=description))

        logger.debug(f"Offered location options: {[o.theme for o in options]}")
        return options

    def generate_discovery(self, theme: str) -> str:
        template = self.rng.choice(self.tables.discovery_templates)
        return template.format(theme=theme)

    def generate_item(self, theme: str, turn: int) -> Optional[Item]:
        """Maybe find an item at ``theme`` on day ``turn``; None most of the time."""
        draw = self.rng.random()
        if draw <= self.item_find_threshold:
            return None

        category = self.rng.choice(list(ItemCategory))
        name = self.rng.choice(self.tables.item_names[category])
        description = self.rng.choice(self.tables.item_descriptions[category])
        logger.debug(f"Item draw {draw:.3f} produced {category.value} '{name}' at {theme}")
        return Item(
            name=name,
            description=description,
            category=category,
            found_at=theme,
            found_day=turn,
        )
