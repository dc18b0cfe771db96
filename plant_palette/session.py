#!/usr/bin/env python3
# session.py – single owner of the filter state, re-filters on every change
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional

from .pdf_export import export_pdf
from .filters import filter_plants
from .models import FilterState, Plant


@dataclass
class PaletteSession:
    """
    Holds the catalogue and the active filter state for one run.

    Every mutation swaps in a new ``FilterState`` and recomputes ``filtered``
    in the same call, so the filtered view is never observed stale.
    """

    catalogue: tuple[Plant, ...]
    state: FilterState = field(default_factory=FilterState)
    filtered: tuple[Plant, ...] = field(init=False, default=())

    def __post_init__(self):
        self.catalogue = tuple(self.catalogue)
        self._recompute()

    def _recompute(self) -> None:
        self.filtered = filter_plants(self.catalogue, self.state)
        logging.debug("Filter %s -> %d of %d plants", self.state, len(self.filtered), len(self.catalogue))

    def set_filter(self, **changes) -> tuple[Plant, ...]:
        self.state = self.state.with_changes(**changes)
        self._recompute()
        return self.filtered

    def reset(self) -> tuple[Plant, ...]:
        self.state = FilterState()
        self._recompute()
        return self.filtered

    def replace_catalogue(self, catalogue) -> tuple[Plant, ...]:
        self.catalogue = tuple(catalogue)
        self._recompute()
        return self.filtered

    def export(self, out_dir: Path, *, style_rules=None, generated_at: Optional[datetime] = None) -> Path:
        return export_pdf(
            self.filtered,
            self.state,
            out_dir=out_dir,
            style_rules=style_rules,
            generated_at=generated_at,
        )
