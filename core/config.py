"""
App configuration.

Values come from the environment (a local .env file is loaded first).
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment
load_dotenv()


# ---- Truthy Vocabulary ----
# Shared with the CSV import so a spreadsheet "x" and an env "x" mean the same

TRUTHY_TOKENS = ("yes", "y", "true", "1", "x")


def parse_bool(value: object) -> bool:
    """Return True if value is one of the truthy tokens (case-insensitive)."""
    if value is None:
        return False
    return str(value).strip().strip('"').strip().lower() in TRUTHY_TOKENS


def parse_list(value: str | None) -> list[str]:
    """Parse a comma-separated setting into a list of non-empty names."""
    if not value:
        return []
    items = [item.strip() for item in value.split(",")]
    return [item for item in items if item]


# ---- Paths ----

PLANTS_DATA_PATH = Path(os.getenv("PLANTS_DATA_PATH", "data/plants.json"))
PLANTS_IMPORT_CSV = Path(os.getenv("PLANTS_IMPORT_CSV", "data/import/plants_import.csv"))


# ---- Import ----

IMPORT_HEADER_ROW = int(os.getenv("IMPORT_HEADER_ROW", "3"))  # line 4 of the sheet export


# ---- Study Defaults ----

DEFAULT_CATEGORIES = parse_list(os.getenv("DEFAULT_CATEGORIES", "friction_fire"))
SHUFFLE_DEFAULT = parse_bool(os.getenv("SHUFFLE_DEFAULT", "true"))


# ---- Logging ----

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
