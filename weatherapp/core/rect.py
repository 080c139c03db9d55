from __future__ import annotations
from typing import Tuple

Rect = Tuple[int, int, int, int]  # x, y, w, h

def contains(r: Rect, x: float, y: float) -> bool:
    rx, ry, rw, rh = r
    return rx <= x < rx + rw and ry <= y < ry + rh
