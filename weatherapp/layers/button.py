from __future__ import annotations

from PIL import ImageDraw

from weatherapp import theme
from weatherapp.core.layer import Layer
from weatherapp.renderer.pillow_renderer import load_font, line_height, text_width


class WeatherButtonLayer(Layer):
    """Rounded 280x50 label used as the day/night toggle's tap target."""

    name = "button"

    def __init__(
        self,
        *,
        title: str,
        text_color: theme.RGBA = theme.BLUE,
        background_color: theme.RGBA = theme.WHITE,
        scale: float = 1.0,
    ):
        super().__init__(0, 0, 1, 1, scale=scale)
        self.title = title
        self.text_color = text_color
        self.background_color = background_color
        self.font = load_font(self.s(20, 1), "bold")
        self.radius = self.s(10, 1)
        self.resize(self.s(280, 1), self.s(50, 1))
        self._drawn = False

    def tick(self, now: float):
        if self._drawn:
            return []
        self._drawn = True
        self._clear()
        draw = ImageDraw.Draw(self.surface)
        w, h = self.surface.size
        draw.rounded_rectangle((0, 0, w - 1, h - 1), radius=self.radius, fill=self.background_color)
        x = (w - text_width(self.font, self.title)) // 2
        y = (h - line_height(self.font)) // 2
        draw.text((x, y), self.title, font=self.font, fill=self.text_color)
        return self._mark_all_dirty_if_changed()
