from __future__ import annotations
from typing import List, Tuple
from PIL import Image

from .rect import Rect, contains

DirtyRect = Tuple[int, int, int, int]  # x, y, w, h

class Layer:
    """Base class for an on-screen view that owns an offscreen RGBA surface."""
    z: int = 0

    def __init__(self, x: int, y: int, w: int, h: int, scale: float = 1.0):
        self.bounds: Rect = (x, y, w, h)
        self.surface = Image.new("RGBA", (max(1, w), max(1, h)), (0, 0, 0, 0))
        self._last_hash: int | None = None
        try:
            self.scale = float(scale or 1.0)
        except (TypeError, ValueError):
            self.scale = 1.0

    def s(self, value: float, minimum: int = 0) -> int:
        scaled = int(round(value * self.scale))
        return max(minimum, scaled)

    def tick(self, now: float) -> List[DirtyRect]:
        """Subclasses: redraw self.surface if needed and return dirty rects (layer-local)."""
        return []

    # Layout helpers -------------------------------------------------------
    @property
    def size(self) -> Tuple[int, int]:
        return self.bounds[2], self.bounds[3]

    def move_to(self, x: int, y: int) -> None:
        _, _, w, h = self.bounds
        self.bounds = (int(x), int(y), w, h)

    def resize(self, w: int, h: int) -> None:
        x, y, _, _ = self.bounds
        self.bounds = (x, y, w, h)
        self.surface = Image.new("RGBA", (max(1, w), max(1, h)), (0, 0, 0, 0))
        self._last_hash = None

    def contains(self, x: float, y: float) -> bool:
        return contains(self.bounds, x, y)

    # Helpers
    def _clear(self) -> None:
        self.surface.paste((0, 0, 0, 0), (0, 0, *self.surface.size))

    def _mark_all_dirty_if_changed(self) -> List[DirtyRect]:
        h = hash(self.surface.tobytes())
        if h != self._last_hash:
            self._last_hash = h
            w, hgt = self.surface.size
            return [(0, 0, w, hgt)]
        return []
