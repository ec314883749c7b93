"""
Deck building for study sessions.

A deck is a filtered copy of the dataset for one category, optionally
shuffled. Inputs are never mutated.
"""

from __future__ import annotations

import random
from typing import Iterable, Optional, Sequence, TypeVar

from core.categories import Category, matches_category
from core.schemas import PlantRecord


T = TypeVar("T")


def shuffle_cards(cards: Iterable[T], rng: Optional[random.Random] = None) -> list[T]:
    """
    Return a uniformly random permutation of cards (Fisher-Yates on a copy).
    """
    rng = rng or random.Random()
    shuffled = list(cards)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def filter_plants(plants: Iterable[PlantRecord], category: Category) -> list[PlantRecord]:
    """Plants matching the category, in dataset order."""
    return [plant for plant in plants if matches_category(plant, category)]


def build_deck(
    plants: Sequence[PlantRecord],
    category: Category,
    shuffle: bool,
    rng: Optional[random.Random] = None
) -> list[PlantRecord]:
    """
    Build the deck for one category.

    Args:
        plants: Full dataset
        category: Category to filter by
        shuffle: If True, return a random permutation of the matches
        rng: Optional random source (for reproducible shuffles)

    Returns:
        New list of matching plants
    """
    deck = filter_plants(plants, category)
    if shuffle:
        return shuffle_cards(deck, rng)
    return deck


def count_cards(plants: Sequence[PlantRecord], categories: Iterable[Category]) -> int:
    """
    Total cards across the given categories.

    A plant matching two categories is counted once per category.
    """
    return sum(len(filter_plants(plants, category)) for category in categories)
