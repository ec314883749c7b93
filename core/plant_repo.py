"""
Plant dataset repository.

Loads data/plants.json once per process and provides lookups.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd
from pydantic import ValidationError

from core import config
from core.categories import Category, matches_category
from core.schemas import PlantRecord

logger = logging.getLogger(__name__)


class PlantDatasetError(ValueError):
    """Raised when the dataset file exists but cannot be used."""


# Loaded once, never mutated
_plants: Optional[list[PlantRecord]] = None


# ---- Loading ----

def load_plants(path: Path | str | None = None) -> list[PlantRecord]:
    """
    Read and validate the plant dataset.

    Args:
        path: JSON file to read (default: config.PLANTS_DATA_PATH)

    Returns:
        Plant records in file order
    """
    path = Path(path) if path is not None else config.PLANTS_DATA_PATH
    if not path.exists():
        raise FileNotFoundError(f"Plant dataset not found: {path}")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PlantDatasetError(f"{path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, list):
        raise PlantDatasetError(f"{path} must contain a JSON array of plants")

    plants: list[PlantRecord] = []
    for position, item in enumerate(raw):
        try:
            plants.append(PlantRecord.model_validate(item))
        except ValidationError as exc:
            raise PlantDatasetError(f"Invalid plant record at index {position}: {exc}") from exc

    logger.info("Loaded %d plants from %s", len(plants), path)
    return plants


def get_all_plants() -> list[PlantRecord]:
    """
    Get the cached dataset, loading it on first use.
    """
    global _plants

    if _plants is None:
        _plants = load_plants()
    return list(_plants)


def clear_cache() -> None:
    global _plants
    _plants = None


# ---- Query Functions ----

def get_plant_by_name(common_name: str, plants: Optional[Iterable[PlantRecord]] = None) -> Optional[PlantRecord]:
    """
    Find a plant by common name (case-insensitive).
    """
    plants = plants if plants is not None else get_all_plants()
    wanted = common_name.strip().lower()
    for plant in plants:
        if plant.common_name.lower() == wanted:
            return plant
    return None


def plants_to_dataframe(plants: Iterable[PlantRecord]) -> pd.DataFrame:
    """
    Flatten plants into a table, one boolean column per category.
    """
    rows = []
    for plant in plants:
        row = {
            "Common name": plant.common_name,
            "Scientific name": plant.scientific_name,
        }
        for category in Category:
            row[category.value] = matches_category(plant, category)
        row["Cautions"] = plant.edibility.cautions
        rows.append(row)

    columns = ["Common name", "Scientific name"] + [c.value for c in Category] + ["Cautions"]
    return pd.DataFrame(rows, columns=columns)
