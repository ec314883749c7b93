"""Tests for deck building."""

import random
from collections import Counter

from core.categories import Category, matches_category
from core.deck_builder import build_deck, count_cards, filter_plants, shuffle_cards


def _names(deck) -> list[str]:
    return [plant.common_name for plant in deck]


class TestBuildDeck:
    """Test suite for build_deck."""

    def test_contains_exactly_matching_plants(self, plants) -> None:
        """Every category deck holds exactly the plants its predicate accepts."""
        for category in Category:
            deck = build_deck(plants, category, shuffle=False)
            expected = [p for p in plants if matches_category(p, category)]
            assert deck == expected

    def test_unshuffled_keeps_dataset_order(self, plants) -> None:
        deck = build_deck(plants, Category.CORDAGE, shuffle=False)
        assert _names(deck) == ["Basswood", "Cattail", "Dogbane"]

    def test_shuffled_is_permutation(self, plants, rng) -> None:
        """Shuffling keeps the same multiset of cards."""
        for category in Category:
            plain = build_deck(plants, category, shuffle=False)
            shuffled = build_deck(plants, category, shuffle=True, rng=rng)
            assert Counter(_names(shuffled)) == Counter(_names(plain))

    def test_does_not_mutate_input(self, plants, rng) -> None:
        before = list(plants)
        build_deck(plants, Category.FRICTION_FIRE, shuffle=True, rng=rng)
        assert plants == before

    def test_returns_new_list(self, plants) -> None:
        deck = build_deck(plants, Category.FRICTION_FIRE, shuffle=False)
        deck.clear()
        assert len(build_deck(plants, Category.FRICTION_FIRE, shuffle=False)) == 3

    def test_empty_category(self, plants, rng) -> None:
        only_oak = [plants[0]]
        assert build_deck(only_oak, Category.MEDICINAL, shuffle=True, rng=rng) == []

    def test_seeded_shuffle_is_reproducible(self, plants) -> None:
        first = build_deck(plants, Category.CORDAGE, shuffle=True, rng=random.Random(7))
        second = build_deck(plants, Category.CORDAGE, shuffle=True, rng=random.Random(7))
        assert first == second


class TestShuffleCards:
    """Test suite for the Fisher-Yates helper."""

    def test_permutation_of_input(self, rng) -> None:
        cards = list(range(50))
        shuffled = shuffle_cards(cards, rng)
        assert sorted(shuffled) == cards
        assert cards == list(range(50))

    def test_produces_different_orders(self) -> None:
        """Over many seeds, more than one ordering shows up."""
        orders = {tuple(shuffle_cards([1, 2, 3], random.Random(seed))) for seed in range(50)}
        assert len(orders) > 1

    def test_single_and_empty(self, rng) -> None:
        assert shuffle_cards([], rng) == []
        assert shuffle_cards(["only"], rng) == ["only"]

    def test_accepts_tuples(self, rng) -> None:
        assert sorted(shuffle_cards((3, 1, 2), rng)) == [1, 2, 3]


class TestCounting:
    """Test suite for count_cards and filter_plants."""

    def test_count_sums_per_category(self, plants) -> None:
        """A plant in two selected categories counts once per category."""
        assert count_cards(plants, [Category.FRICTION_FIRE]) == 3
        assert count_cards(plants, [Category.FRICTION_FIRE, Category.WOOD]) == 5

    def test_count_no_categories(self, plants) -> None:
        assert count_cards(plants, []) == 0

    def test_filter_plants(self, plants) -> None:
        assert _names(filter_plants(plants, Category.EDIBILITY)) == ["Cattail", "Nettle"]
