"""Fetching and decoding video thumbnails."""

from __future__ import annotations

from io import BytesIO

import requests
from PIL import Image

TIMEOUT = 30


def thumbnail_url(video_id: str) -> str:
    """Return the address of the high-quality thumbnail for a video."""
    return f"https://img.youtube.com/vi/{video_id}/hqdefault.jpg"


def fetch_thumbnail(video_id: str) -> Image.Image | None:
    """Download and decode a thumbnail as an RGBA image, or None on failure."""
    try:
        data = requests.get(thumbnail_url(video_id), timeout=TIMEOUT).content
    except requests.RequestException:
        return None
    try:
        with Image.open(BytesIO(data)) as img:
            return img.convert("RGBA")
    except (OSError, ValueError, Image.DecompressionBombError):
        return None