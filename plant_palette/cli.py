#!/usr/bin/env python3
# cli.py – browse, filter and export the container plant palette
# Each run starts from the default (unfiltered) state; flags narrow it.
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .catalogue import DEFAULT_CSV, DEFAULT_STYLE, CatalogueError, load_catalogue
from .guide import DEFAULT_GUIDE, guide_text, load_guide
from .images import download_images
from .models import ALL, FoliageType, LightRequirement, Plant, PlantCategory, SoilType
from .session import PaletteSession
from .text import load_style_rules

NATIVE_CHOICES = {"all": ALL, "native": True, "non-native": False}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plant-palette", description="Browse and export the container garden plant palette"
    )
    parser.add_argument("--in_csv", default=str(DEFAULT_CSV), help="Plant catalogue CSV")
    parser.add_argument("--search", default="", help="Match common or scientific name (case-insensitive)")
    parser.add_argument("--category", default=ALL, choices=[ALL] + [c.value for c in PlantCategory])
    parser.add_argument("--origin", default="all", choices=list(NATIVE_CHOICES), help="Native to Britain or not")
    parser.add_argument("--light", default=ALL, choices=[ALL] + [v.value for v in LightRequirement])
    parser.add_argument("--foliage", default=ALL, choices=[ALL] + [v.value for v in FoliageType])
    parser.add_argument("--soil", default=ALL, choices=[ALL] + [v.value for v in SoilType])
    parser.add_argument("--list", action="store_true", help="Print the selection as plant cards")
    parser.add_argument("--export", action="store_true", help="Write the selection to a PDF")
    parser.add_argument("--out_dir", default="Outputs", help="Folder for container-garden-palette.pdf")
    parser.add_argument(
        "--style_yaml", default=str(DEFAULT_STYLE), help="YAML file of text substitutions for the PDF"
    )
    parser.add_argument("--img_dir", default=None, help="Download one image per selected plant into this folder")
    parser.add_argument("--about", action="store_true", help="Print the introduction, growing tips and credits")
    parser.add_argument("--guide_yaml", default=str(DEFAULT_GUIDE), help=argparse.SUPPRESS)
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def state_changes(args: argparse.Namespace) -> dict:
    """Translate CLI flags into FilterState field values."""
    return {
        "search_term": args.search,
        "category": ALL if args.category == ALL else PlantCategory(args.category),
        "native_only": NATIVE_CHOICES[args.origin],
        "light": ALL if args.light == ALL else LightRequirement(args.light),
        "foliage": ALL if args.foliage == ALL else FoliageType(args.foliage),
        "soil": ALL if args.soil == ALL else SoilType(args.soil),
    }


# * Text cards for --list
def plant_card(plant: Plant) -> str:
    lines = []
    if plant.not_recommended:
        lines.append("!! NOT RECOMMENDED FOR CONTAINERS !!")
    lines.append(f"{plant.name}  ({plant.scientific_name})" + ("  [UK Native]" if plant.native else ""))
    lines.append(f"  {plant.category.value} | {plant.foliage.value} | {plant.light_tags[0].value}")
    if plant.soil_tags:
        lines.append(f"  Soil: {', '.join(s.value for s in plant.soil_tags)}")
    lines.append(f"  Dimensions: {plant.dimensions}")
    lines.append(f"  {plant.appearance}")
    lines.append(f"  Ecology: {plant.ecological_importance}")
    if plant.limitations:
        lines.append(f"  {'Not suitable' if plant.not_recommended else 'Caution'}: {plant.limitations}")
    return "\n".join(lines)


def print_listing(plants) -> None:
    print(f"Showing {len(plants)} varieties")
    if not plants:
        print("No plants found. Try adjusting your filters or search terms.")
        return
    for plant in plants:
        print()
        print(plant_card(plant))


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s: %(message)s"
    )

    if args.about:
        try:
            print(guide_text(load_guide(Path(args.guide_yaml))))
        except (FileNotFoundError, ValueError) as e:
            sys.exit(f"❌ {e}")
        return 0

    try:
        catalogue = load_catalogue(Path(args.in_csv))
    except CatalogueError as e:
        sys.exit(f"❌ {e}")

    session = PaletteSession(catalogue)
    session.set_filter(**state_changes(args))

    if args.list or not (args.export or args.img_dir):
        print_listing(session.filtered)

    if args.export:
        rules = load_style_rules(Path(args.style_yaml))
        out_path = session.export(Path(args.out_dir), style_rules=rules)
        print(f"[OK] Exported PDF -> {out_path.resolve()}")

    if args.img_dir:
        sources = download_images(session.filtered, Path(args.img_dir))
        print(f"[OK] Images for {len(sources)} plant(s) -> {Path(args.img_dir).resolve()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
