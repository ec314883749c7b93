"""
Pydantic models for the plant dataset.

These models define the structure of records in data/plants.json and are
used to validate rows produced by the CSV import.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Section(BaseModel):
    """Base for the per-topic sections of a plant record."""
    model_config = ConfigDict(frozen=True)


# ---- Topic Sections ----

class FrictionFire(_Section):
    """Friction fire roles for the plant's wood."""
    spindle: bool = False
    hearth: bool = False
    notes: str = ""


class Tinder(_Section):
    usable: bool = False
    notes: str = ""


class Cordage(_Section):
    usable: bool = False
    material: str = ""


class Wood(_Section):
    usable: bool = False
    notes: str = ""


class Edibility(_Section):
    """Edible parts plus preparation and lookalike cautions."""
    edible_parts: list[str] = Field(default_factory=list)
    preparation: str = ""
    cautions: str = ""


class Medicinal(_Section):
    uses: list[str] = Field(default_factory=list)
    preparation: str = ""
    cautions: str = ""


# ---- Main Plant Record ----

class PlantRecord(_Section):
    """
    A single plant card.

    common_name is the identity key (the dataset has no id field).
    """
    common_name: str = Field(..., min_length=1, description="Common name, used as identity key")
    scientific_name: str = Field(default="", description="Scientific name / taxon")
    uses: list[str] = Field(default_factory=list)

    friction_fire: FrictionFire = Field(default_factory=FrictionFire)
    tinder: Tinder = Field(default_factory=Tinder)
    cordage: Cordage = Field(default_factory=Cordage)
    wood: Wood = Field(default_factory=Wood)
    edibility: Edibility = Field(default_factory=Edibility)
    medicinal: Medicinal = Field(default_factory=Medicinal)

    image_url: Optional[str] = None
