from __future__ import annotations

from PIL import ImageDraw

from weatherapp import theme
from weatherapp.core.layer import Layer
from weatherapp.icons import render_icon
from weatherapp.layers.main_status import format_temperature
from weatherapp.renderer.pillow_renderer import load_font, line_height, paste_centered, text_width


class WeatherDayLayer(Layer):
    """Narrow forecast column: day label, 40x40 icon, temperature."""

    name = "weather_day"

    def __init__(self, *, day_of_week: str, icon_id: str | None, temperature: int, scale: float = 1.0):
        super().__init__(0, 0, 1, 1, scale=scale)
        self.day_of_week = day_of_week
        self.icon_id = icon_id
        self.temperature = temperature
        self.f_day = load_font(self.s(16, 1), "medium")
        self.f_temp = load_font(self.s(28, 1), "medium")
        self.icon_size = self.s(40, 1)
        self.spacing = self.s(1)

        w = max(text_width(self.f_day, day_of_week), self.icon_size, text_width(self.f_temp, self.temperature_text))
        h = line_height(self.f_day) + self.icon_size + line_height(self.f_temp) + 2 * self.spacing
        self.resize(w, h)
        self._drawn = False

    @property
    def temperature_text(self) -> str:
        return format_temperature(self.temperature)

    def tick(self, now: float):
        if self._drawn:
            return []
        self._drawn = True
        self._clear()
        draw = ImageDraw.Draw(self.surface)
        w = self.surface.width

        y = 0
        draw.text(((w - text_width(self.f_day, self.day_of_week)) // 2, y), self.day_of_week,
                  font=self.f_day, fill=theme.WHITE)
        y += line_height(self.f_day) + self.spacing
        paste_centered(self.surface, render_icon(self.icon_id, self.icon_size), y=y)
        y += self.icon_size + self.spacing
        text = self.temperature_text
        draw.text(((w - text_width(self.f_temp, text)) // 2, y), text, font=self.f_temp, fill=theme.WHITE)
        return self._mark_all_dirty_if_changed()
