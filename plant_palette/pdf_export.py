#!/usr/bin/env python3
# pdf_export.py – printable PDF of the current plant selection (fpdf2)
# Title block, active-filter line, one section per category (header band +
# data table), then "Page i of n" stamped on every page.
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Sequence

from fpdf import FPDF
from fpdf.enums import TextEmphasis, XPos, YPos
from fpdf.fonts import FontFace

from .filters import plants_in_category
from .models import ALL, FilterState, Plant, PlantCategory
from .text import Rule, safe_lines, safe_text

OUTPUT_NAME = "container-garden-palette.pdf"
TITLE = "Plant Palette for Containers (UK)"
ATTRIBUTION = "Container Garden Palette. Plant list by Denis J Vickers. App by Marco Mak"
FOOTER_TEXT = "Page {page} of {total} - " + ATTRIBUTION

# * COLOURS (RGB)
LEAF_800 = (22, 101, 52)
LEAF_600 = (22, 163, 74)
LEAF_50 = (240, 253, 244)
STONE_600 = (87, 83, 78)
STONE_50 = (250, 250, 249)
WARNING_RED = (185, 28, 28)
FOOTER_GREY = (150, 150, 150)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

# * LAYOUT (mm on A4 portrait)
MARGIN = 14
TITLE_Y = 20
META_Y = 28
FILTERS_Y = 34
BODY_START_Y = 40
HEADER_BREAK_Y = 250  # LM: a category header starting below this goes to a new page
PAGE_TOP_Y = 20
HEADER_GAP = 2
SECTION_GAP = 10
FOOTER_OFFSET = 10
BOTTOM_MARGIN = 15

# * DATA TABLE
TABLE_HEAD = ["Name", "Native", "Light", "Soil", "Dimensions", "Ecological Value"]
COL_WIDTHS = (38, 14, 25, 25, 25, None)  # None takes the rest of the line
SECTION_STYLE = {"size": 12, "bold": True, "color": LEAF_800, "fill": LEAF_50}
HEAD_STYLE = {"size": 9, "bold": True, "color": WHITE, "fill": LEAF_600}
BODY_STYLE = {"size": 9, "padding": 1.5}
COLUMN_STYLES = {0: {"bold": True}, 1: {"align": "CENTER"}}
NOT_RECOMMENDED_STYLE = {"color": WARNING_RED}
FOOTER_STYLE = {"size": 8, "color": FOOTER_GREY}
SOIL_PLACEHOLDER = "-"
NOT_RECOMMENDED_MARK = "[NOT RECOMMENDED]"


@dataclass
class ExportCursor:
    """Vertical write position, threaded through the composer."""

    y: float = BODY_START_Y
    sections: list[str] = field(default_factory=list)

    def needs_page_break(self) -> bool:
        return self.y > HEADER_BREAK_Y

    def move_below(self, final_y: float, gap: float) -> None:
        self.y = final_y + gap


# * Row / summary helpers
def active_filter_summary(state: FilterState) -> str:
    """One line describing the active filters (search term and foliage are not listed)."""
    active = []
    if state.category != ALL:
        active.append(f"Category: {_label(state.category)}")
    if state.native_only != ALL:
        active.append(f"Origin: {'Native' if state.native_only else 'Non-native'}")
    if state.light != ALL:
        active.append(f"Light: {_label(state.light)}")
    if state.soil != ALL:
        active.append(f"Soil: {_label(state.soil)}")
    if active:
        return f"Filters: {', '.join(active)}"
    return "Full Catalogue"


def _label(value) -> str:
    return getattr(value, "value", value)


def categories_to_export(state: FilterState) -> list:
    if state.category == ALL:
        return list(PlantCategory)
    return [state.category]


def plant_row(plant: Plant, rules: Iterable[Rule] = ()) -> list[str]:
    name = f"{plant.name}\n({plant.scientific_name})"
    if plant.not_recommended:
        name += f"\n{NOT_RECOMMENDED_MARK}"
    soil = ", ".join(_label(s) for s in plant.soil_tags) if plant.soil_tags else SOIL_PLACEHOLDER
    return [
        safe_lines(name, rules),
        "Yes" if plant.native else "No",
        safe_text(", ".join(_label(t) for t in plant.light_tags), rules),
        safe_text(soil, rules),
        safe_text(plant.dimensions, rules),
        safe_text(plant.ecological_importance, rules),
    ]


def row_styles(plants: Sequence[Plant]) -> dict[int, dict]:
    # LM: the only row-level rule, not-recommended rows in warning red
    return {i: NOT_RECOMMENDED_STYLE for i, p in enumerate(plants) if p.not_recommended}


# * Composer
def compose(
    renderer,
    plants: Sequence[Plant],
    state: FilterState,
    *,
    generated_at: Optional[datetime] = None,
    rules: Iterable[Rule] = (),
) -> ExportCursor:
    """
    Lay out the whole report on ``renderer``.

    ``renderer`` needs set_footer, draw_text, draw_heading, draw_table and
    add_page (see ``FpdfRenderer``). The footer is registered first and the
    renderer stamps it on every page as that page is finished, filling in
    ``{page}`` and ``{total}``. Tables are expected to paginate themselves;
    only their final Y is read back.
    """
    rules = list(rules)
    generated_at = generated_at or datetime.today()
    cursor = ExportCursor()

    renderer.set_footer(FOOTER_TEXT, FOOTER_STYLE)
    renderer.draw_text(MARGIN, TITLE_Y, TITLE, size=22, bold=True, color=LEAF_800)
    renderer.draw_text(
        MARGIN, META_Y, f"Plant Selection Export | {generated_at:%d/%m/%Y}", size=10, color=STONE_600
    )
    renderer.draw_text(MARGIN, FILTERS_Y, safe_text(active_filter_summary(state), rules), size=10, color=STONE_600)

    for category in categories_to_export(state):
        group = plants_in_category(plants, category)
        if not group:
            continue

        if cursor.needs_page_break():
            renderer.add_page()
            cursor.y = PAGE_TOP_Y

        header_y = renderer.draw_heading(cursor.y, safe_text(_label(category).upper(), rules), SECTION_STYLE)
        cursor.move_below(header_y, HEADER_GAP)

        table_y = renderer.draw_table(
            cursor.y,
            TABLE_HEAD,
            [plant_row(p, rules) for p in group],
            col_widths=COL_WIDTHS,
            head_style=HEAD_STYLE,
            body_style=BODY_STYLE,
            column_styles=COLUMN_STYLES,
            row_styles=row_styles(group),
            alternate_fill=STONE_50,
        )
        cursor.move_below(table_y, SECTION_GAP)
        cursor.sections.append(_label(category))

    return cursor


def export_pdf(
    plants: Sequence[Plant],
    state: FilterState,
    *,
    out_dir: Path,
    style_rules: Optional[Iterable[Rule]] = None,
    generated_at: Optional[datetime] = None,
) -> Path:
    """Build the report for ``plants`` and write it to ``out_dir/container-garden-palette.pdf``."""
    out_path = Path(out_dir) / OUTPUT_NAME
    out_path.parent.mkdir(parents=True, exist_ok=True)

    pdf = FpdfRenderer()
    cursor = compose(pdf, plants, state, generated_at=generated_at, rules=style_rules or ())
    pdf.save(out_path)
    logging.info(
        "Exported %d plant(s) in %d section(s) on %d page(s)", len(plants), len(cursor.sections), pdf.page_count
    )
    return out_path


# * fpdf2 renderer
def font_face(style: dict) -> FontFace:
    return FontFace(
        emphasis=TextEmphasis.B if style.get("bold") else None,
        size_pt=style.get("size"),
        color=style.get("color"),
        fill_color=style.get("fill"),
    )


class FpdfRenderer(FPDF):
    def __init__(self):
        super().__init__(orientation="portrait", unit="mm", format="A4")
        self.footer_text = None
        self.footer_style = {}
        self.alias_nb_pages()  # LM: "{nb}" becomes the page total when the file is written
        self.set_margins(MARGIN, PAGE_TOP_Y, MARGIN)
        self.set_auto_page_break(auto=True, margin=BOTTOM_MARGIN)  # LM: tables break rows onto new pages
        self.add_page()

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def set_footer(self, template: str, style: dict) -> None:
        self.footer_text = template
        self.footer_style = style

    # * Footer: called by fpdf2 as each page is closed, and for the last page on output
    def footer(self):
        if not self.footer_text:
            return
        style = self.footer_style
        self.set_font("helvetica", "B" if style.get("bold") else "", style.get("size", 8))
        self.set_text_color(*style.get("color", BLACK))
        # LM: cell() rather than text() so fpdf2 swaps "{nb}" for the total; baseline sits FOOTER_OFFSET up
        self.set_xy(self.l_margin, self.h - FOOTER_OFFSET - self.font_size)
        txt = self.footer_text.format(page=self.page_no(), total=self.str_alias_nb_pages)
        self.cell(self.epw, self.font_size * 1.25, txt, align="C")
        self.set_text_color(*BLACK)

    def draw_text(self, x, y, txt, *, size=10, bold=False, color=BLACK, align="LEFT"):
        self.set_font("helvetica", "B" if bold else "", size)
        self.set_text_color(*color)
        if align == "CENTER":
            x -= self.get_string_width(txt) / 2
        self.text(x, y, txt)
        self.set_text_color(*BLACK)

    def draw_heading(self, y, txt, style: dict) -> float:
        """Full-width filled band with one line of text. Returns the Y below it."""
        self.set_xy(self.l_margin, y)
        self.set_font("helvetica", "B" if style.get("bold") else "", style.get("size", 12))
        self.set_text_color(*style.get("color", BLACK))
        self.set_fill_color(*style.get("fill", WHITE))
        self.cell(self.epw, self.font_size * 2.2, txt, fill=True, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_text_color(*BLACK)
        return self.get_y()

    def draw_table(
        self,
        y,
        head,
        rows,
        *,
        col_widths,
        head_style: dict,
        body_style: dict,
        column_styles: Optional[dict] = None,
        row_styles: Optional[dict] = None,
        alternate_fill=None,
    ) -> float:
        """Draw ``rows`` under ``head`` starting at ``y``. Returns the Y below the table."""
        column_styles = column_styles or {}
        row_styles = row_styles or {}
        fixed = sum(w for w in col_widths if w)
        flexible = sum(1 for w in col_widths if not w) or 1
        widths = tuple(w or (self.epw - fixed) / flexible for w in col_widths)
        align = tuple(column_styles.get(i, {}).get("align", "LEFT") for i in range(len(widths)))

        self.set_xy(self.l_margin, y)
        self.set_font("helvetica", "", body_style.get("size", 10))
        self.set_text_color(*BLACK)
        with self.table(
            width=self.epw,
            col_widths=widths,
            text_align=align,
            headings_style=font_face(head_style),
            borders_layout="NONE",
            cell_fill_color=alternate_fill,
            cell_fill_mode="ROWS" if alternate_fill else "NONE",
            line_height=self.font_size * 1.4,
            padding=body_style.get("padding", 1),
            v_align="TOP",
        ) as table:
            heading = table.row()
            for label in head:
                heading.cell(label)
            for r, values in enumerate(rows):
                row = table.row()
                for c, value in enumerate(values):
                    style = {**column_styles.get(c, {}), **row_styles.get(r, {})}
                    style.pop("align", None)
                    row.cell(value, style=font_face(style) if style else None)
        return self.get_y()

    def save(self, path: Path) -> None:
        self.output(str(path))
