from __future__ import annotations
import math
from functools import lru_cache
from pathlib import Path
from typing import Callable, Dict

from PIL import Image, ImageDraw

from weatherapp import theme
from weatherapp.renderer.pillow_renderer import load_font

DAY_ICON = "cloud.sun.fill"
NIGHT_ICON = "moon.stars.fill"

# Glyphs are painted at this multiple of the target size, then downsampled.
_SUPERSAMPLE = 4


def main_icon(is_night: bool) -> str:
    return NIGHT_ICON if is_night else DAY_ICON


def find_icon_path(name: str) -> Path | None:
    """
    Looks upward from this file for assets/icons/<name>.png
    """
    here = Path(__file__).resolve()
    for up in range(1, 5):
        p = here.parents[up-1] / "assets" / "icons" / f"{name}.png"
        if p.exists():
            return p
    return None


@lru_cache(maxsize=64)
def _open_icon(path_str: str, size: int) -> Image.Image:
    im = Image.open(path_str).convert("RGBA")
    if im.width != size or im.height != size:
        im = im.resize((size, size), Image.LANCZOS)
    return im


# ---------- primitives (unit coordinates scaled by S) ----------
def _sun(d: ImageDraw.ImageDraw, S: int, cx: float, cy: float, r: float, color, rays: int = 8):
    d.ellipse(((cx - r) * S, (cy - r) * S, (cx + r) * S, (cy + r) * S), fill=color)
    inner, outer = r * 1.35, r * 1.95
    for i in range(rays):
        a = 2 * math.pi * i / rays
        d.line(
            ((cx + inner * math.cos(a)) * S, (cy + inner * math.sin(a)) * S,
             (cx + outer * math.cos(a)) * S, (cy + outer * math.sin(a)) * S),
            fill=color, width=max(1, int(0.055 * S)),
        )


def _cloud(d: ImageDraw.ImageDraw, S: int, x0: float, y0: float, x1: float, y1: float, color):
    w, h = x1 - x0, y1 - y0
    base_top = y0 + h * 0.45
    d.rounded_rectangle((x0 * S, base_top * S, x1 * S, y1 * S), radius=int(h * 0.28 * S), fill=color)
    d.ellipse(((x0 + w * 0.10) * S, (y0 + h * 0.25) * S, (x0 + w * 0.50) * S, (y0 + h * 0.85) * S), fill=color)
    d.ellipse(((x0 + w * 0.30) * S, y0 * S, (x0 + w * 0.85) * S, (y0 + h * 0.80) * S), fill=color)


def _flake(d: ImageDraw.ImageDraw, S: int, cx: float, cy: float, r: float, color):
    width = max(1, int(r * 0.22 * S))
    for k in range(3):
        a = math.pi * k / 3
        dx, dy = r * math.cos(a), r * math.sin(a)
        d.line(((cx - dx) * S, (cy - dy) * S, (cx + dx) * S, (cy + dy) * S), fill=color, width=width)


def _star(d: ImageDraw.ImageDraw, S: int, cx: float, cy: float, r: float, color):
    k = r * 0.3
    pts = [(cx, cy - r), (cx + k, cy - k), (cx + r, cy), (cx + k, cy + k),
           (cx, cy + r), (cx - k, cy + k), (cx - r, cy), (cx - k, cy - k)]
    d.polygon([(x * S, y * S) for x, y in pts], fill=color)


# ---------- glyphs ----------
def _sun_max(d, S):
    _sun(d, S, 0.5, 0.5, 0.22, theme.SUN_YELLOW)


def _cloud_sun(d, S):
    _sun(d, S, 0.64, 0.36, 0.15, theme.SUN_YELLOW)
    _cloud(d, S, 0.06, 0.40, 0.80, 0.86, theme.CLOUD_WHITE)


def _cloud_only(d, S):
    _cloud(d, S, 0.08, 0.22, 0.92, 0.80, theme.CLOUD_WHITE)


def _cloud_rain(d, S):
    _cloud(d, S, 0.08, 0.10, 0.92, 0.60, theme.CLOUD_WHITE)
    for x in (0.32, 0.50, 0.68):
        d.line((x * S, 0.68 * S, (x - 0.05) * S, 0.88 * S), fill=theme.RAIN_BLUE, width=max(1, int(0.06 * S)))


def _moon_stars(d, S):
    d.ellipse((0.10 * S, 0.22 * S, 0.74 * S, 0.86 * S), fill=theme.MOON_CREAM)
    # cut the crescent
    d.ellipse((0.30 * S, 0.10 * S, 0.86 * S, 0.66 * S), fill=(0, 0, 0, 0))
    _star(d, S, 0.76, 0.20, 0.10, theme.CLOUD_WHITE)
    _star(d, S, 0.88, 0.46, 0.06, theme.CLOUD_WHITE)


def _sunset(d, S):
    cx, cy, r = 0.5, 0.70, 0.22
    d.pieslice(((cx - r) * S, (cy - r) * S, (cx + r) * S, (cy + r) * S), 180, 360, fill=theme.SUNSET_ORANGE)
    for i in range(1, 6):
        a = math.pi + math.pi * i / 6
        d.line(
            ((cx + r * 1.3 * math.cos(a)) * S, (cy + r * 1.3 * math.sin(a)) * S,
             (cx + r * 1.8 * math.cos(a)) * S, (cy + r * 1.8 * math.sin(a)) * S),
            fill=theme.SUNSET_ORANGE, width=max(1, int(0.05 * S)),
        )
    d.line((0.06 * S, cy * S, 0.94 * S, cy * S), fill=theme.CLOUD_WHITE, width=max(1, int(0.05 * S)))
    d.polygon([(0.42 * S, 0.80 * S), (0.58 * S, 0.80 * S), (0.50 * S, 0.92 * S)], fill=theme.CLOUD_WHITE)


def _snow(d, S):
    _flake(d, S, 0.5, 0.5, 0.38, theme.SNOW_ICE)


def _wind_snow(d, S):
    width = max(1, int(0.055 * S))
    d.line((0.08 * S, 0.22 * S, 0.66 * S, 0.22 * S), fill=theme.CLOUD_WHITE, width=width)
    d.arc((0.58 * S, 0.08 * S, 0.86 * S, 0.36 * S), 200, 90, fill=theme.CLOUD_WHITE, width=width)
    d.line((0.08 * S, 0.40 * S, 0.80 * S, 0.40 * S), fill=theme.CLOUD_WHITE, width=width)
    _flake(d, S, 0.30, 0.72, 0.14, theme.SNOW_ICE)
    _flake(d, S, 0.70, 0.72, 0.14, theme.SNOW_ICE)


def _placeholder(d, S):
    inset = 0.12
    d.rounded_rectangle((inset * S, inset * S, (1 - inset) * S, (1 - inset) * S),
                        radius=int(0.16 * S), outline=theme.PLACEHOLDER_GRAY, width=max(1, int(0.06 * S)))
    font = load_font(max(1, int(0.5 * S)), "bold")
    box = d.textbbox((0, 0), "?", font=font)
    tw, th = box[2] - box[0], box[3] - box[1]
    d.text(((S - tw) / 2 - box[0], (S - th) / 2 - box[1]), "?", font=font, fill=theme.PLACEHOLDER_GRAY)


GLYPHS: Dict[str, Callable[[ImageDraw.ImageDraw, int], None]] = {
    "sun.max.fill": _sun_max,
    "cloud.sun.fill": _cloud_sun,
    "cloud.fill": _cloud_only,
    "cloud.rain.fill": _cloud_rain,
    "moon.stars.fill": _moon_stars,
    "sunset.fill": _sunset,
    "snow": _snow,
    "wind.snow": _wind_snow,
}


@lru_cache(maxsize=64)
def render_icon(icon_id: str | None, size: int) -> Image.Image | None:
    """
    Returns a size x size RGBA glyph in its native colours.
    None for an unset id; a placeholder glyph for an unknown one.
    """
    if not icon_id or size <= 0:
        return None

    path = find_icon_path(icon_id)
    if path:
        try:
            return _open_icon(str(path), size)
        except (OSError, ValueError) as e:
            print(f"[WeatherApp] WARNING: could not read icon {path}: {e!r}; using built-in glyph", flush=True)

    painter = GLYPHS.get(icon_id, _placeholder)
    S = size * _SUPERSAMPLE
    big = Image.new("RGBA", (S, S), (0, 0, 0, 0))
    painter(ImageDraw.Draw(big), S)
    return big.resize((size, size), Image.LANCZOS)
