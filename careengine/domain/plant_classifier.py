"""
Plant Classifier
================
Maps free-text botanical identifiers to a watering-behavior category.

Usage:
    category = classify_plant(["Swiss Cheese Plant"], "Araceae", "Monstera deliciosa")
"""

import logging
from collections.abc import Iterable

from careengine.constants import CATEGORY_KEYWORDS, DEFAULT_CATEGORY
from careengine.enums import WateringCategory

logger = logging.getLogger(__name__)


def classify_plant(
    common_names: Iterable[str] | None = None,
    family: str | None = "",
    scientific_name: str | None = "",
) -> WateringCategory:
    """
    Resolve the watering category for a plant.

    All text is joined and lowercased, then tested against the keyword sets
    in priority order (succulent, cactus, fern, orchid, herb, flowering,
    tropical). The first set with a substring hit wins; no hit means foliage.

    Args:
        common_names: Common names, possibly empty
        family: Botanical family
        scientific_name: Scientific (binomial) name

    Returns:
        WateringCategory
    """
    parts = [name for name in (common_names or []) if name]
    parts.extend([family or "", scientific_name or ""])
    text = " ".join(parts).lower()

    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category

    logger.debug("No category keyword in %r, defaulting to %s", text, DEFAULT_CATEGORY)
    return DEFAULT_CATEGORY
