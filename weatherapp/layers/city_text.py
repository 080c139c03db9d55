from __future__ import annotations

from PIL import ImageDraw

from weatherapp import theme
from weatherapp.core.layer import Layer
from weatherapp.renderer.pillow_renderer import load_font, line_height, text_width


class CityTextLayer(Layer):
    """Single-line city label with top padding."""

    name = "city"

    def __init__(self, *, city_name: str, width: int, scale: float = 1.0):
        super().__init__(0, 0, width, 1, scale=scale)
        self.city_name = city_name or ""
        self.font = load_font(self.s(32, 1), "medium")
        self.pad_top = self.s(16)
        self.resize(width, self.pad_top + line_height(self.font))
        self._drawn = False

    def tick(self, now: float):
        if self._drawn:
            return []
        self._drawn = True
        self._clear()
        if self.city_name:
            draw = ImageDraw.Draw(self.surface)
            x = (self.surface.width - text_width(self.font, self.city_name)) // 2
            draw.text((x, self.pad_top), self.city_name, font=self.font, fill=theme.WHITE)
        return self._mark_all_dirty_if_changed()
