from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Type, TypeVar, Union

from weatherapp.core.layer import Layer

L = TypeVar("L", bound=Layer)

@dataclass
class Page:
    name: str
    layers: List[Layer]  # z-order is the list order; later items draw above earlier items

    def layers_of(self, kind: Type[L]) -> List[L]:
        return [lyr for lyr in self.layers if isinstance(lyr, kind)]

# --- Layout helpers ----------------------------------------------------------

def safe_bounds(cfg) -> tuple[int, int, int, int]:
    """
    The content box inside the safe-area insets, in pixels.
    Returns (x, y, w, h).
    """
    width, height = cfg.render_size
    top = int(round(cfg.safe_top * cfg.scale))
    bottom = int(round(cfg.safe_bottom * cfg.scale))
    return 0, top, width, max(0, height - top - bottom)

def vstack(items: List[Optional[Union[Layer, int]]], *, x: int, y: int, w: int, h: int, spacing: int) -> List[int]:
    """
    Position layers top-to-bottom, centred horizontally in (x, w).
    Bare ints reserve a block of that height; None entries are flexible spacers
    sharing the leftover height. Returns the top y of every item.
    """
    n_flex = sum(1 for it in items if it is None)
    fixed = sum(it.size[1] if isinstance(it, Layer) else (it or 0) for it in items)
    fixed += spacing * max(0, len(items) - 1)
    flex = max(0, h - fixed) // n_flex if n_flex else 0

    tops: List[int] = []
    yy = y
    for it in items:
        tops.append(yy)
        if isinstance(it, Layer):
            it.move_to(x + (w - it.size[0]) // 2, yy)
            yy += it.size[1]
        elif it is None:
            yy += flex
        else:
            yy += it
        yy += spacing
    return tops

def row_height(layers: List[Layer]) -> int:
    return max((lyr.size[1] for lyr in layers), default=0)

def hstack(layers: List[Layer], *, x: int, y: int, w: int, spacing: int) -> None:
    """Lay out a row centred in (x, w), each item centred vertically."""
    total = sum(lyr.size[0] for lyr in layers) + spacing * max(0, len(layers) - 1)
    row_h = row_height(layers)
    xx = x + (w - total) // 2
    for lyr in layers:
        lyr.move_to(xx, y + (row_h - lyr.size[1]) // 2)
        xx += lyr.size[0] + spacing
