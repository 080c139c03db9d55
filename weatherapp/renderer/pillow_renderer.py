from __future__ import annotations
import math
from functools import lru_cache
from pathlib import Path

import numpy as np
from PIL import Image, ImageFont

_PREFERRED_FONT: str | None = None
_WARNED = False

_INTER = {
    "regular": ["Inter-Regular.ttf"],
    "medium": ["Inter-Medium.ttf", "Inter-Regular.ttf"],
    "bold": ["Inter-Bold.ttf", "Inter-SemiBold.ttf", "Inter-Regular.ttf"],
}

_SYSTEM = {
    "regular": [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/Library/Fonts/Arial.ttf",
        "/System/Library/Fonts/Supplemental/Arial.ttf",
    ],
    "medium": [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/System/Library/Fonts/Supplemental/Arial.ttf",
    ],
    "bold": [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "/Library/Fonts/Arial Bold.ttf",
        "/System/Library/Fonts/Supplemental/Arial Bold.ttf",
    ],
}


def set_preferred_font(path: str | None) -> None:
    global _PREFERRED_FONT
    _PREFERRED_FONT = path or None
    load_font.cache_clear()


# ---------- font helpers ----------
@lru_cache(maxsize=32)
def load_font(size: int, weight: str = "regular"):
    global _WARNED
    weight = weight if weight in _INTER else "regular"
    candidates: list[Path] = []
    if _PREFERRED_FONT:
        candidates.append(Path(_PREFERRED_FONT))

    here = Path(__file__).resolve()
    # Try repo assets
    for up in range(1, 5):
        for name in _INTER[weight]:
            candidates.append(here.parents[up - 1] / "assets" / "fonts" / name)

    candidates += [Path(p) for p in _SYSTEM[weight]]

    for p in candidates:
        try:
            if p.exists():
                return ImageFont.truetype(str(p), size=size)
        except OSError:
            continue

    if not _WARNED:
        print("[fonts] WARNING: No TTF font found; using ImageFont.load_default()", flush=True)
        _WARNED = True
    return ImageFont.load_default(size=size)


def text_width(font, text: str) -> int:
    return int(math.ceil(font.getlength(text)))


def line_height(font) -> int:
    if hasattr(font, "getmetrics"):
        ascent, descent = font.getmetrics()
        return ascent + descent
    # bitmap fonts only report boxes
    return font.getbbox("Ag°")[3]


# ---------- surface helpers ----------
def paste_centered(surface: Image.Image, image: Image.Image | None, y: int, x: int = 0, width: int | None = None) -> None:
    """Alpha-composite `image` horizontally centred in [x, x+width) at row y."""
    if image is None:
        return
    width = surface.width - x if width is None else width
    left = x + (width - image.width) // 2
    surface.alpha_composite(image, dest=(max(0, left), max(0, y)))


def to_ndarray(image: Image.Image) -> np.ndarray:
    return np.array(image.convert("RGBA"), dtype=np.uint8)
