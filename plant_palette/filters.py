#!/usr/bin/env python3
# filters.py – conjunctive filter over the plant catalogue
from __future__ import annotations

from typing import Iterable

from .models import ALL, FilterState, Plant


def matches_search(plant: Plant, term: str) -> bool:
    """Case-insensitive substring match on common or scientific name."""
    if not term:
        return True
    term = term.lower()
    return term in plant.name.lower() or term in plant.scientific_name.lower()


def matches(plant: Plant, state: FilterState) -> bool:
    if not matches_search(plant, state.search_term):
        return False
    if state.category != ALL and plant.category != state.category:
        return False
    if state.native_only != ALL and plant.native != state.native_only:
        return False
    if state.light != ALL and state.light not in plant.light_tags:
        return False
    if state.foliage != ALL and plant.foliage != state.foliage:
        return False
    # untagged plants never satisfy a specific soil filter
    if state.soil != ALL and not (plant.soil_tags and state.soil in plant.soil_tags):
        return False
    return True


def filter_plants(catalogue: Iterable[Plant], state: FilterState) -> tuple[Plant, ...]:
    """
    Return the plants of ``catalogue`` that pass every active clause of ``state``.

    Pure and stable: one linear pass, input order kept, nothing cached.
    """
    return tuple(p for p in catalogue if matches(p, state))


def plants_in_category(plants: Iterable[Plant], category) -> list[Plant]:
    return [p for p in plants if p.category == category]
