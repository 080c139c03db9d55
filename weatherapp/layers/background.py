from __future__ import annotations
from typing import Callable, Tuple

import numpy as np
from PIL import Image

from weatherapp import theme
from weatherapp.core.layer import Layer


def gradient_colors(is_night: bool) -> Tuple[theme.RGBA, theme.RGBA]:
    return theme.NIGHT_PALETTE if is_night else theme.DAY_PALETTE


def diagonal_gradient(w: int, h: int, start: theme.RGBA, end: theme.RGBA) -> Image.Image:
    """
    Top-leading -> bottom-trailing in pixel space: colour bands run at right
    angles to the (0,0)->(w-1,h-1) line, whose ends hold `start` and `end` exactly.
    """
    dx, dy = max(0, w - 1), max(0, h - 1)
    denom = float(dx * dx + dy * dy) or 1.0
    x = np.arange(w, dtype=np.float64)
    y = np.arange(h, dtype=np.float64)
    t = (x[None, :] * dx + y[:, None] * dy) / denom
    a = np.asarray(start, dtype=np.float64)
    b = np.asarray(end, dtype=np.float64)
    px = a + (b - a) * t[..., None]
    return Image.fromarray(np.rint(px).astype(np.uint8))


class BackgroundLayer(Layer):
    """Full-bleed gradient, safe-area insets included."""

    name = "background"

    def __init__(self, *, width: int, height: int, get_is_night: Callable[[], bool], scale: float = 1.0):
        super().__init__(0, 0, width, height, scale=scale)
        self.get_is_night = get_is_night
        self._state: bool | None = None

    @property
    def colors(self) -> Tuple[theme.RGBA, theme.RGBA]:
        return gradient_colors(bool(self.get_is_night()))

    def tick(self, now: float):
        is_night = bool(self.get_is_night())
        if is_night == self._state:
            return []
        self._state = is_night
        start, end = gradient_colors(is_night)
        w, h = self.surface.size
        self.surface.paste(diagonal_gradient(w, h, start, end), (0, 0))
        return self._mark_all_dirty_if_changed()
