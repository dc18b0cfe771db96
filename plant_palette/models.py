#!/usr/bin/env python3
# models.py – plant record, closed vocabularies and the active filter state
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

ALL = "All"  # "no constraint" value shared by every filter field


class PlantCategory(str, Enum):
    # LM: declaration order is the section order of the PDF export
    FLOWERS_PERENNIALS = "Flowers & Perennials"
    HERBS = "Herbs"
    SHRUBS = "Shrubs"
    SMALL_TREES = "Small Trees"
    BULBS_SPRING = "Spring Bulbs"
    BULBS_SUMMER = "Summer/Autumn Bulbs"
    GRASSES = "Grasses"
    FERNS = "Ferns"
    SUCCULENTS = "Succulents"
    CLIMBERS = "Vines & Climbers"
    CLIMBERS_LARGE = "Large Climbers (5m+)"


class LightRequirement(str, Enum):
    SUN = "Sun"
    PARTIAL_SHADE = "Partial Shade"
    SHADE = "Shade"


class FoliageType(str, Enum):
    EVERGREEN = "Evergreen"
    SEMI_EVERGREEN = "Semi-evergreen"
    DECIDUOUS = "Deciduous"
    BIENNIAL = "Biennial"
    ANNUAL = "Annual/Tender"


class SoilType(str, Enum):
    MOIST = "Moist/Damp"
    WELL_DRAINED = "Well Drained"
    GRITTY = "Gritty/Sandy"
    ERICACEOUS = "Acidic/Ericaceous"
    FERTILE = "Rich/Fertile"


@dataclass(frozen=True)
class Plant:
    """One catalogue entry. Read-only once the catalogue is loaded."""

    id: str
    name: str
    scientific_name: str
    category: PlantCategory
    native: bool
    native_details: str
    foliage: FoliageType
    dimensions: str
    appearance: str
    conditions: str
    ecological_importance: str
    light_tags: tuple[LightRequirement, ...]
    soil_tags: Optional[tuple[SoilType, ...]] = None
    limitations: Optional[str] = None
    not_recommended: bool = False


@dataclass(frozen=True)
class FilterState:
    """Active query. Frozen so a change is always one whole-state transition."""

    search_term: str = ""
    category: Union[PlantCategory, str] = ALL
    native_only: Union[bool, str] = ALL
    light: Union[LightRequirement, str] = ALL
    foliage: Union[FoliageType, str] = ALL
    soil: Union[SoilType, str] = ALL

    def with_changes(self, **changes) -> "FilterState":
        return replace(self, **changes)

    def is_default(self) -> bool:
        return self == FilterState()
