"""Tests for the CSV -> JSON plant import."""

import json
from pathlib import Path

import pytest

from core.plant_repo import load_plants
from scripts.data.import_plants import (
    CSVImportError,
    clean,
    import_plants,
    normalize_header,
    read_table,
    row_to_plant,
)

REPO_ROOT = Path(__file__).resolve().parent.parent

HEADER = (
    "Common Name,Scientific Name (Taxon),Friction Fire Wood,Friction Fire Notes,"
    "Cordage Fiber,Edible,Key Cautions / Lookalikes,Medicinal"
)
PREAMBLE = "Plant list\nNotes line\n,\n"


def _csv(tmp_path: Path, body: str, preamble: str = PREAMBLE) -> Path:
    path = tmp_path / "plants.csv"
    path.write_text(preamble + HEADER + "\n" + body, encoding="utf-8")
    return path


class TestHelpers:
    """Test suite for cell and header cleanup."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Common Name", "common_name"),
            ("Scientific Name (Taxon)", "scientific_name_taxon"),
            ("Key Cautions / Lookalikes", "key_cautions_lookalikes"),
            ("  Friction-Fire  Wood ", "friction_fire_wood"),
        ],
    )
    def test_normalize_header(self, raw: str, expected: str) -> None:
        assert normalize_header(raw) == expected

    def test_clean(self) -> None:
        assert clean('  "Oak"  ') == "Oak"
        assert clean(None) == ""
        assert clean(float("nan")) == ""

    @pytest.mark.parametrize("token", ["yes", "Y", "TRUE", "1", "x", " X "])
    def test_truthy_tokens(self, token: str) -> None:
        plant = row_to_plant({"common_name": "Oak", "cordage_fiber": token})
        assert plant.cordage.usable is True

    @pytest.mark.parametrize("token", ["no", "", "maybe", "0", "n"])
    def test_falsy_tokens(self, token: str) -> None:
        plant = row_to_plant({"common_name": "Oak", "cordage_fiber": token})
        assert plant.cordage.usable is False


class TestRowMapping:
    """Test suite for row_to_plant."""

    def test_column_mapping(self) -> None:
        plant = row_to_plant({
            "common_name": "Basswood",
            "scientific_name_taxon": "Tilia americana",
            "friction_fire_wood": "yes",
            "friction_fire_notes": "Hand drill",
            "cordage_fiber": "yes",
            "edible": "yes",
            "key_cautions_lookalikes": "None known",
            "medicinal": "no",
        })
        assert plant.scientific_name == "Tilia americana"
        assert plant.friction_fire.spindle and plant.friction_fire.hearth
        assert plant.friction_fire.notes == "Hand drill"
        assert plant.wood.usable is True
        assert plant.cordage.usable is True
        assert plant.tinder.usable is False
        assert plant.uses == []
        assert plant.edibility.edible_parts == ["see notes"]
        assert plant.edibility.cautions == "None known"
        assert plant.medicinal.uses == []
        assert plant.image_url is None

    def test_optional_image_url(self) -> None:
        plant = row_to_plant({"common_name": "Oak", "image_url": " https://example.org/oak.jpg "})
        assert plant.image_url == "https://example.org/oak.jpg"


class TestImportPlants:
    """Test suite for the full import."""

    def test_writes_dataset(self, tmp_path: Path) -> None:
        csv_path = _csv(tmp_path, "Oak,Quercus alba,yes,,no,no,,no\nCattail,Typha,no,,yes,yes,Iris lookalike,no\n")
        out = tmp_path / "out" / "plants.json"

        plants = import_plants(csv_path, out, header_row=3)

        assert [p.common_name for p in plants] == ["Oak", "Cattail"]
        data = json.loads(out.read_text(encoding="utf-8"))
        assert [row["common_name"] for row in data] == ["Oak", "Cattail"]
        assert "image_url" not in data[0]
        assert load_plants(out) == plants

    def test_drops_blank_and_nameless_rows(self, tmp_path: Path) -> None:
        body = (
            "Oak,Quercus alba,yes,,,,,\n"
            ",,,,,,,\n"
            "\n"
            ",Nameless,yes,,,,,\n"
            '"  ",Also nameless,yes,,,,,\n'
            "Cedar,Juniperus,x,,,,,\n"
        )
        plants = import_plants(_csv(tmp_path, body), tmp_path / "plants.json", header_row=3)
        assert [p.common_name for p in plants] == ["Oak", "Cedar"]

    def test_quoted_fields(self, tmp_path: Path) -> None:
        """Commas and doubled quotes inside quoted cells survive."""
        body = 'Oak,Quercus alba,yes,"Hearth, spindle; the ""white"" oak",no,no,,no\n'
        plants = import_plants(_csv(tmp_path, body), tmp_path / "plants.json", header_row=3)
        assert plants[0].friction_fire.notes == 'Hearth, spindle; the "white" oak'

    def test_short_rows_padded(self, tmp_path: Path) -> None:
        plants = import_plants(_csv(tmp_path, "Oak,Quercus alba,yes\n"), tmp_path / "plants.json", header_row=3)
        assert plants[0].friction_fire.hearth is True
        assert plants[0].edibility.cautions == ""

    def test_header_row_zero(self, tmp_path: Path) -> None:
        csv_path = _csv(tmp_path, "Oak,Quercus alba,yes,,,,,\n", preamble="")
        plants = import_plants(csv_path, tmp_path / "plants.json", header_row=0)
        assert plants[0].common_name == "Oak"

    def test_dry_run_writes_nothing(self, tmp_path: Path) -> None:
        out = tmp_path / "plants.json"
        plants = import_plants(_csv(tmp_path, "Oak,Quercus alba,yes,,,,,\n"), out, header_row=3, dry_run=True)
        assert len(plants) == 1
        assert not out.exists()

    def test_missing_common_name_column_aborts(self, tmp_path: Path) -> None:
        """A header without common_name aborts and leaves old output alone."""
        csv_path = tmp_path / "plants.csv"
        csv_path.write_text("Name,Taxon\nOak,Quercus alba\n", encoding="utf-8")
        out = tmp_path / "plants.json"
        out.write_text("[]", encoding="utf-8")

        with pytest.raises(CSVImportError, match="common_name"):
            import_plants(csv_path, out, header_row=0)
        assert out.read_text(encoding="utf-8") == "[]"

    def test_wrong_header_row_aborts(self, tmp_path: Path) -> None:
        out = tmp_path / "plants.json"
        with pytest.raises(CSVImportError):
            import_plants(_csv(tmp_path, "Oak,Quercus alba,yes,,,,,\n"), out, header_row=1)
        assert not out.exists()

    def test_header_row_past_end(self, tmp_path: Path) -> None:
        with pytest.raises(CSVImportError):
            read_table(_csv(tmp_path, ""), header_row=50)

    def test_ragged_row_aborts(self, tmp_path: Path) -> None:
        body = "Oak,Quercus alba,yes,,,,,,,,extra\n"
        with pytest.raises(CSVImportError):
            import_plants(_csv(tmp_path, body), tmp_path / "plants.json", header_row=3)

    def test_missing_csv(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            import_plants(tmp_path / "missing.csv", tmp_path / "plants.json", header_row=3)

    def test_shipped_csv_matches_shipped_dataset(self) -> None:
        """data/plants.json is what the import produces from the shipped CSV."""
        imported = import_plants(
            REPO_ROOT / "data" / "import" / "plants_import.csv",
            REPO_ROOT / "data" / "plants.json",
            header_row=3,
            dry_run=True,
        )
        assert imported == load_plants(REPO_ROOT / "data" / "plants.json")
