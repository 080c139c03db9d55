from __future__ import annotations
from typing import Callable

from PIL import ImageDraw

from weatherapp import theme
from weatherapp.core.layer import Layer
from weatherapp.icons import render_icon
from weatherapp.renderer.pillow_renderer import load_font, line_height, paste_centered, text_width


def format_temperature(value: int) -> str:
    # str(int) never applies locale grouping
    return f"{int(value)}°"


class MainWeatherStatusLayer(Layer):
    """
    Today's block: a 180x180 icon above the large temperature, 40 units of bottom padding.
    get_icon(): icon id for the current theme, re-read on every tick.
    """

    name = "main_status"

    def __init__(self, *, get_icon: Callable[[], str | None], temperature: int, width: int, scale: float = 1.0):
        super().__init__(0, 0, width, 1, scale=scale)
        self.get_icon = get_icon
        self.temperature = temperature
        self.font = load_font(self.s(70, 1), "medium")
        self.icon_size = self.s(180, 1)
        self.spacing = self.s(8)
        self.pad_bottom = self.s(40)
        self.resize(width, self.icon_size + self.spacing + line_height(self.font) + self.pad_bottom)
        self.icon_id: str | None = None
        self._state: tuple | None = None

    @property
    def temperature_text(self) -> str:
        return format_temperature(self.temperature)

    def tick(self, now: float):
        icon_id = self.get_icon()
        state = (icon_id, self.temperature)
        if state == self._state:
            return []
        self._state = state
        self.icon_id = icon_id

        self._clear()
        paste_centered(self.surface, render_icon(icon_id, self.icon_size), y=0)
        text = self.temperature_text
        draw = ImageDraw.Draw(self.surface)
        x = (self.surface.width - text_width(self.font, text)) // 2
        draw.text((x, self.icon_size + self.spacing), text, font=self.font, fill=theme.WHITE)
        return self._mark_all_dirty_if_changed()
