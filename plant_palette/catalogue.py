#!/usr/bin/env python3
# catalogue.py – load the fixed plant catalogue from CSV into Plant records
from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from .models import FoliageType, LightRequirement, Plant, PlantCategory, SoilType

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_CSV = DATA_DIR / "plants.csv"
DEFAULT_STYLE = DATA_DIR / "style_rules.yaml"

TAG_SEP = "|"
TRUE_VALUES = {"true", "yes", "y", "1"}

COLUMN_ORDER = [
    "id", "name", "scientificName", "category", "native", "nativeDetails",
    "foliage", "dimensions", "appearance", "conditions", "lightTags",
    "soilTags", "ecologicalImportance", "limitations", "notRecommended",
]
REQUIRED = COLUMN_ORDER[:13]  # last two columns are optional


class CatalogueError(ValueError):
    """Raised when the catalogue file breaks one of its load-time guarantees."""


def _split_tags(cell: str) -> list[str]:
    return [t.strip() for t in cell.split(TAG_SEP) if t.strip()]


def _enum_value(enum_cls, raw: str, plant_id: str, column: str):
    try:
        return enum_cls(raw.strip())
    except ValueError:
        raise CatalogueError(f"{plant_id}: '{raw}' is not a valid {column}") from None


def _flag(raw: str) -> bool:
    return raw.strip().lower() in TRUE_VALUES


def row_to_plant(row) -> Plant:
    pid = row["id"].strip()
    light = tuple(_enum_value(LightRequirement, t, pid, "lightTags") for t in _split_tags(row["lightTags"]))
    if not light:
        raise CatalogueError(f"{pid}: lightTags must not be empty")
    soil_raw = _split_tags(row.get("soilTags", ""))
    soil = tuple(_enum_value(SoilType, t, pid, "soilTags") for t in soil_raw) or None
    return Plant(
        id=pid,
        name=row["name"].strip(),
        scientific_name=row["scientificName"].strip(),
        category=_enum_value(PlantCategory, row["category"], pid, "category"),
        native=_flag(row["native"]),
        native_details=row["nativeDetails"].strip(),
        foliage=_enum_value(FoliageType, row["foliage"], pid, "foliage"),
        dimensions=row["dimensions"].strip(),
        appearance=row["appearance"].strip(),
        conditions=row["conditions"].strip(),
        ecological_importance=row["ecologicalImportance"].strip(),
        light_tags=light,
        soil_tags=soil,
        limitations=row.get("limitations", "").strip() or None,
        not_recommended=_flag(row.get("notRecommended", "")),
    )


def load_catalogue(csv_path: Path = DEFAULT_CSV) -> tuple[Plant, ...]:
    """
    Read the catalogue CSV and return it as an ordered, immutable tuple.

    Tag columns hold ``|``-separated values. Raises ``CatalogueError`` for a
    missing file, missing columns, duplicate ids, empty light tags or values
    outside the fixed vocabularies.
    """
    csv_path = Path(csv_path)
    try:
        df = pd.read_csv(csv_path, dtype=str, encoding="utf-8-sig", keep_default_na=False).fillna("")
    except FileNotFoundError as e:
        raise CatalogueError(f"Catalogue not found: {e.filename}") from e

    missing = [c for c in REQUIRED if c not in df.columns]
    if missing:
        raise CatalogueError(f"{csv_path.name} is missing column(s): {', '.join(missing)}")
    df = df.reindex(columns=COLUMN_ORDER + [c for c in df.columns if c not in COLUMN_ORDER]).fillna("")

    dupes = df.loc[df["id"].duplicated(), "id"].tolist()
    if dupes:
        raise CatalogueError(f"Duplicate plant id(s): {', '.join(dupes)}")

    plants = tuple(row_to_plant(row) for _, row in df.iterrows())
    logging.info("Loaded %d plants from %s", len(plants), csv_path.name)
    return plants
