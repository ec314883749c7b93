"""
Study categories and their plant predicates.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

from core.schemas import PlantRecord

logger = logging.getLogger(__name__)


class Category(str, Enum):
    """Topical tags used to filter the dataset."""
    FRICTION_FIRE = "friction_fire"
    TINDER = "tinder"
    CORDAGE = "cordage"
    WOOD = "wood"
    EDIBILITY = "edibility"
    MEDICINAL = "medicinal"


CATEGORY_LABELS: dict[Category, str] = {
    Category.FRICTION_FIRE: "Friction Fire",
    Category.TINDER: "Tinder",
    Category.CORDAGE: "Cordage",
    Category.WOOD: "Wood",
    Category.EDIBILITY: "Edible Plants",
    Category.MEDICINAL: "Medicinal",
}


def matches_category(plant: PlantRecord, category: object) -> bool:
    """
    Return True if the plant belongs to the category.

    Unknown categories never match.
    """
    if category == Category.FRICTION_FIRE:
        return plant.friction_fire.spindle or plant.friction_fire.hearth
    if category == Category.TINDER:
        return plant.tinder.usable
    if category == Category.CORDAGE:
        return plant.cordage.usable
    if category == Category.WOOD:
        return plant.wood.usable
    if category == Category.EDIBILITY:
        return len(plant.edibility.edible_parts) > 0
    if category == Category.MEDICINAL:
        return len(plant.medicinal.uses) > 0
    return False


def category_label(category: Category) -> str:
    return CATEGORY_LABELS.get(category, str(category))


def parse_categories(values: Iterable[str]) -> list[Category]:
    """
    Convert category names (e.g. from config) to Category members.

    Unknown names are skipped, duplicates keep their first position.
    """
    categories: list[Category] = []
    for value in values:
        try:
            category = Category(value.strip().lower())
        except ValueError:
            logger.warning("Ignoring unknown category %r", value)
            continue
        if category not in categories:
            categories.append(category)
    return categories
