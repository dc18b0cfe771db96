#!/usr/bin/env python3
# images.py – best-effort illustrative image per plant, placeholder on failure
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Iterable, Optional
from urllib.parse import quote

import requests
from PIL import Image, UnidentifiedImageError
from tqdm import tqdm

from .models import Plant
from .text import name_slug

SEARCH_URL = "https://tse2.mm.bing.net/th?q={query}&w=500&h=400&c=7&rs=1&p=0"
PLACEHOLDER_URL = "https://placehold.co/400x300/e2e8f0/475569?text={text}"
TIMEOUT = 12

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
    ),
    "Accept-Language": "en-GB,en;q=0.9",
}


def image_url(plant: Plant) -> str:
    return SEARCH_URL.format(query=quote(f"{plant.scientific_name} {plant.name} plant", safe=""))


def placeholder_url(plant: Plant) -> str:
    return PLACEHOLDER_URL.format(text=quote(plant.name, safe=""))


def fetch_image(url: str, session=None) -> Optional[bytes]:
    """Return the image bytes at ``url``, or None if it cannot be loaded as an image."""
    http = session or requests
    try:
        r = http.get(url, headers=HEADERS, timeout=TIMEOUT)
    except requests.RequestException as e:
        logging.debug("Image request failed for %s: %s", url, e)
        return None
    if not r.ok:
        return None
    try:
        with Image.open(io.BytesIO(r.content)) as im:
            im.verify()
    except (UnidentifiedImageError, OSError):
        return None
    return r.content


def resolve_image(plant: Plant, session=None) -> tuple[str, Optional[bytes]]:
    """
    Load the search image for ``plant``; fall back to its placeholder.

    Returns the URL that was used and its bytes. The bytes are None only when
    the placeholder could not be fetched either; the URL is then still the
    placeholder address, so callers always have something to show.
    """
    url = image_url(plant)
    data = fetch_image(url, session)
    if data is not None:
        return url, data
    logging.warning("No image for %s, using placeholder", plant.scientific_name)
    fallback = placeholder_url(plant)
    return fallback, fetch_image(fallback, session)


def download_images(plants: Iterable[Plant], out_dir: Path, session=None) -> dict[str, str]:
    """Save one image per plant as ``<slug>.jpg`` and return {plant id: source URL}."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    plants = list(plants)
    sources = {}
    for plant in tqdm(plants, total=len(plants), desc="Images"):
        url, data = resolve_image(plant, session)
        sources[plant.id] = url
        if data is None:
            continue
        with Image.open(io.BytesIO(data)) as im:
            im.convert("RGB").save(out_dir / f"{name_slug(plant.scientific_name)}.jpg", "JPEG")
    return sources
