"""Shared fixtures for plant flashcard tests."""

import random

import pytest

from core.schemas import PlantRecord


def make_plant(
    name: str,
    spindle: bool = False,
    hearth: bool = False,
    tinder: bool = False,
    cordage: bool = False,
    wood: bool = False,
    edible_parts: list[str] | None = None,
    medicinal_uses: list[str] | None = None,
    **extra,
) -> PlantRecord:
    """Build a PlantRecord with only the flags a test cares about."""
    return PlantRecord(
        common_name=name,
        scientific_name=f"{name} sp.",
        friction_fire={"spindle": spindle, "hearth": hearth},
        tinder={"usable": tinder},
        cordage={"usable": cordage},
        wood={"usable": wood},
        edibility={"edible_parts": edible_parts or []},
        medicinal={"uses": medicinal_uses or []},
        **extra,
    )


@pytest.fixture
def plants() -> list[PlantRecord]:
    """
    Small dataset.

    friction_fire: Oak, Cedar, Basswood
    tinder: Cedar
    cordage: Basswood, Cattail, Dogbane
    wood: Oak, Basswood
    edibility: Cattail, Nettle
    medicinal: Nettle
    """
    return [
        make_plant("Oak", hearth=True, wood=True),
        make_plant("Cedar", spindle=True, tinder=True),
        make_plant("Basswood", spindle=True, hearth=True, cordage=True, wood=True),
        make_plant("Cattail", cordage=True, edible_parts=["shoots", "roots"]),
        make_plant("Nettle", edible_parts=["leaves"], medicinal_uses=["tea"]),
        make_plant("Dogbane", cordage=True),
    ]


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
