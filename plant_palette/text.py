#!/usr/bin/env python3
# text.py – clean catalogue text for the PDF core fonts + optional style rules
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable, Iterable, Union

import yaml

Rule = tuple[re.Pattern, Union[str, Callable[[re.Match], str]]]

# * Characters the Latin-1 core fonts cannot draw, mapped to printable stand-ins
REPLACEMENTS = {
    "–": "-",
    "—": "-",
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
    "…": "...",
    "•": "-",
}


def load_style_rules(path: Path) -> list[Rule]:
    """
    Read regex substitutions from a YAML file.

    The file is either a flat ``pattern: replacement`` map or has them under a
    ``substitutions:`` key. ``<<lower>>`` as replacement lowercases the match.
    A missing file is not an error; the export just runs without rules.
    """
    path = Path(path)
    if not path.exists():
        logging.warning("Style file not found: %s (continuing without it)", path)
        return []
    with open(path, "r", encoding="utf-8") as f:
        subs = yaml.safe_load(f) or {}
        subs = subs.get("substitutions", subs)
    rules: list[Rule] = []
    for pattern, repl in subs.items():
        rules.append(
            (re.compile(pattern), (lambda m: m.group(0).lower()) if repl == "<<lower>>" else str(repl))
        )
    logging.info("Loaded %d style rule(s) from %s", len(rules), path.name)
    return rules


def apply_style(text: str, rules: Iterable[Rule] = ()) -> str:
    for pat, repl in rules:
        text = pat.sub(repl, text)
    return text


def safe_text(text, rules: Iterable[Rule] = ()) -> str:
    """Clean one line of text for PDF core fonts (Latin-1)."""
    text = str(text).replace("\x00", "").replace("\r", "")
    for src, dst in REPLACEMENTS.items():
        text = text.replace(src, dst)
    text = re.sub(r"\s*\n\s*", " ", text)
    text = re.sub(r"[^\x20-\x7E\xA0-\xFF]+", "", text)
    text = text.strip()
    if text.upper() == "NA":
        return ""
    return apply_style(text, rules)


def safe_lines(text, rules: Iterable[Rule] = ()) -> str:
    # multi-line cells keep their breaks; each line is cleaned on its own
    return "\n".join(safe_text(line, rules) for line in str(text).split("\n"))


def name_slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", text.lower()).strip("_")
