from __future__ import annotations
import time
from typing import List, Tuple

from PIL import Image

from .layer import Layer
from .compositor import Compositor

class FrameLoop:
    """Ticks every layer on demand; recomposes only when one of them changed."""
    def __init__(self, layers: List[Layer], compositor: Compositor):
        self.layers = sorted(layers, key=lambda L: getattr(L, "z", 0))
        self.compositor = compositor
        self.frames_presented = 0

    def step(self, now: float | None = None) -> Tuple[Image.Image, bool]:
        now = time.time() if now is None else now
        dirty = []
        for L in self.layers:
            for r in L.tick(now):
                dirty.append((L, r))

        if not dirty and self.frames_presented:
            return self.compositor.front, False

        self.compositor.compose(self.layers)
        self.frames_presented += 1
        return self.compositor.present(), True
