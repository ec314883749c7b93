"""
Convert the plant spreadsheet export (CSV) into data/plants.json.

The sheet has a few title/notes lines above the real header, so the header
row index is fixed in config (IMPORT_HEADER_ROW) rather than detected.

Rules:
- Header cells are normalized to snake_case keys
- Rows with every cell blank are dropped
- Rows without a common name are dropped
- Boolean columns accept yes/y/true/1/x (case-insensitive)
- Any other failure aborts the run and nothing is written

Usage:
    python -m scripts.data.import_plants [--input PATH] [--output PATH] [--header-row N] [--dry-run]
"""

from __future__ import annotations

import argparse
import json
import os
import re
import sys
import tempfile
from pathlib import Path
from typing import Any

import pandas as pd
from pydantic import ValidationError

from core import config
from core.config import parse_bool
from core.schemas import PlantRecord


# Placeholder list entry for yes/no columns that have no detail text yet
SEE_NOTES = "see notes"

COMMON_NAME_COL = "common_name"


class CSVImportError(ValueError):
    """Raised when the CSV cannot be converted."""


def clean(value: Any) -> str:
    """Trim whitespace and surrounding double quotes."""
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip().strip('"')


def normalize_header(value: Any) -> str:
    """'Scientific Name (Taxon)' -> 'scientific_name_taxon'"""
    key = re.sub(r"[^a-z0-9]+", "_", clean(value).lower())
    return key.strip("_")


def read_table(csv_path: Path, header_row: int) -> pd.DataFrame:
    """
    Read the CSV and return data rows keyed by normalized header.
    """
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")
    if header_row < 0:
        raise CSVImportError(f"Header row must be >= 0, got {header_row}")

    try:
        raw = pd.read_csv(
            csv_path,
            header=None,
            skiprows=header_row,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError as exc:
        raise CSVImportError(f"No header row at index {header_row} in {csv_path}") from exc
    except pd.errors.ParserError as exc:
        raise CSVImportError(f"Could not parse {csv_path}: {exc}") from exc

    if raw.empty:
        raise CSVImportError(f"No header row at index {header_row} in {csv_path}")

    headers = [normalize_header(h) for h in raw.iloc[0]]
    if COMMON_NAME_COL not in headers:
        raise CSVImportError(
            f"Header row {header_row} must contain '{COMMON_NAME_COL}'. Found: {headers}"
        )

    table = raw.iloc[1:].fillna("").copy()
    table.columns = headers
    # Later columns win when two headers normalize to the same key
    table = table.loc[:, ~table.columns.duplicated(keep="last")]

    cleaned = table.apply(lambda col: col.map(clean))
    non_blank = cleaned.ne("").any(axis=1)
    return table[non_blank].reset_index(drop=True)


def row_to_plant(row: dict[str, Any]) -> PlantRecord:
    """
    Map one spreadsheet row to a PlantRecord.
    """
    fire_wood = parse_bool(row.get("friction_fire_wood"))
    image_url = clean(row.get("image_url")) or None

    return PlantRecord(
        common_name=clean(row.get(COMMON_NAME_COL)),
        scientific_name=clean(row.get("scientific_name_taxon")),
        uses=[],
        friction_fire={
            "spindle": fire_wood,
            "hearth": fire_wood,
            "notes": clean(row.get("friction_fire_notes")),
        },
        tinder={"usable": False, "notes": ""},
        cordage={"usable": parse_bool(row.get("cordage_fiber")), "material": ""},
        wood={"usable": fire_wood, "notes": ""},
        edibility={
            "edible_parts": [SEE_NOTES] if parse_bool(row.get("edible")) else [],
            "preparation": "",
            "cautions": clean(row.get("key_cautions_lookalikes")),
        },
        medicinal={
            "uses": [SEE_NOTES] if parse_bool(row.get("medicinal")) else [],
            "preparation": "",
            "cautions": "",
        },
        image_url=image_url,
    )


def convert_rows(table: pd.DataFrame) -> list[PlantRecord]:
    plants: list[PlantRecord] = []
    for row in table.to_dict("records"):
        if not clean(row.get(COMMON_NAME_COL)):
            continue
        plants.append(row_to_plant(row))
    return plants


def write_plants(plants: list[PlantRecord], output_path: Path) -> None:
    """
    Write the dataset atomically (temp file, then replace).
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [plant.model_dump(exclude_none=True) for plant in plants]

    fd, tmp_name = tempfile.mkstemp(dir=output_path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp_name, output_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def import_plants(
    csv_path: Path = config.PLANTS_IMPORT_CSV,
    output_path: Path = config.PLANTS_DATA_PATH,
    header_row: int = config.IMPORT_HEADER_ROW,
    dry_run: bool = False
) -> list[PlantRecord]:
    """
    Convert the CSV to the JSON dataset.

    Args:
        csv_path: Spreadsheet export to read
        output_path: JSON dataset to write
        header_row: 0-based index of the header line
        dry_run: If True, parse and validate but don't write

    Returns:
        Imported plant records
    """
    table = read_table(Path(csv_path), header_row)
    plants = convert_rows(table)

    if not dry_run:
        write_plants(plants, Path(output_path))

    return plants


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Convert the plant spreadsheet CSV into the JSON dataset"
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=config.PLANTS_IMPORT_CSV,
        help=f"CSV to import (default: {config.PLANTS_IMPORT_CSV})"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=config.PLANTS_DATA_PATH,
        help=f"JSON dataset to write (default: {config.PLANTS_DATA_PATH})"
    )
    parser.add_argument(
        "--header-row",
        type=int,
        default=config.IMPORT_HEADER_ROW,
        help=f"0-based header line index (default: {config.IMPORT_HEADER_ROW})"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse and validate only, don't write the dataset"
    )

    args = parser.parse_args()

    try:
        plants = import_plants(
            csv_path=args.input,
            output_path=args.output,
            header_row=args.header_row,
            dry_run=args.dry_run
        )
    except (FileNotFoundError, CSVImportError, ValidationError) as e:
        print(f"✗ Import failed: {e}")
        sys.exit(1)

    if args.dry_run:
        print(f"[DRY RUN] Parsed {len(plants)} plants (nothing written)")
    else:
        print(f"Imported {len(plants)} plants → {args.output}")


if __name__ == "__main__":
    main()
