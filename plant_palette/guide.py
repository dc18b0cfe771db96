#!/usr/bin/env python3
# guide.py – the "About & Guide" text: introduction, preamble, growing tips, credits
from __future__ import annotations

import logging
import textwrap
from pathlib import Path

import yaml

from .catalogue import DATA_DIR

DEFAULT_GUIDE = DATA_DIR / "guide.yaml"
WIDTH = 78


def load_guide(path: Path = DEFAULT_GUIDE) -> dict:
    """Read the guide YAML. Unlike style rules the guide is required, so a missing file raises."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Guide not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        guide = yaml.safe_load(f) or {}
    if not guide.get("sections"):
        raise ValueError(f"{path.name} has no sections")
    logging.debug("Loaded guide with %d section(s) from %s", len(guide["sections"]), path.name)
    return guide


def guide_text(guide: dict, width: int = WIDTH) -> str:
    lines = [guide.get("title", "Garden Guide Info"), ""]
    for section in guide["sections"]:
        heading = section["heading"]
        lines += [heading, "-" * len(heading)]
        for para in section.get("paragraphs", []):
            lines += [textwrap.fill(para, width), ""]
        tips = section.get("tips") or {}
        if tips:
            lines.append(f"{section.get('tips_heading', 'Tips')}:")
            # LM: tip label in front, continuation lines indented under the text
            for label, tip in tips.items():
                lines.append(
                    textwrap.fill(f"{label}: {tip}", width, initial_indent="  * ", subsequent_indent="    ")
                )
            lines.append("")
    for credit in guide.get("credits", []):
        lines.append(textwrap.fill(credit, width))
    return "\n".join(lines).rstrip() + "\n"
