from __future__ import annotations
from typing import Callable, List, Optional

from PIL import Image

from weatherapp.config import Config
from weatherapp.core.compositor import Compositor
from weatherapp.core.scheduler import FrameLoop
from weatherapp.core.state import DisplayState
from weatherapp.layers.background import BackgroundLayer
from weatherapp.layers.button import WeatherButtonLayer
from weatherapp.layers.main_status import MainWeatherStatusLayer
from weatherapp.layers.weather_day import WeatherDayLayer
from weatherapp.pages import page_weather
from weatherapp.renderer.pillow_renderer import set_preferred_font


class WeatherApp:
    """
    Owns the DisplayState and the root page. A press on the button flips
    `is_night` and re-renders synchronously; `on_present` receives every new frame.
    """

    def __init__(self, cfg: Config | None = None, on_present: Optional[Callable[[Image.Image], None]] = None):
        self.cfg = cfg or Config()
        set_preferred_font(self.cfg.font_path)
        self.state = DisplayState()
        self.page = page_weather.build(self.cfg, self.state)
        w, h = self.cfg.render_size
        self.compositor = Compositor(w=w, h=h)
        self.loop = FrameLoop(self.page.layers, self.compositor)
        self.on_present = on_present
        self.state.subscribe(lambda _state: self.render())

    # Views ------------------------------------------------------------------
    @property
    def background(self) -> BackgroundLayer:
        return self.page.layers_of(BackgroundLayer)[0]

    @property
    def main_status(self) -> MainWeatherStatusLayer:
        return self.page.layers_of(MainWeatherStatusLayer)[0]

    @property
    def forecast(self) -> List[WeatherDayLayer]:
        return self.page.layers_of(WeatherDayLayer)

    @property
    def button(self) -> WeatherButtonLayer:
        return self.page.layers_of(WeatherButtonLayer)[0]

    # Rendering --------------------------------------------------------------
    def render(self) -> Image.Image:
        """Returns a copy of the current frame, presenting a new one if anything changed."""
        frame, changed = self.loop.step()
        if changed and self.on_present:
            self.on_present(frame)
        return frame.copy()

    # Input ------------------------------------------------------------------
    def press(self, x: float, y: float) -> bool:
        """Pixel-space tap. Only the button reacts; returns whether the state toggled."""
        if not self.button.contains(x, y):
            return False
        self.state.toggle()
        return True

    def press_button(self) -> bool:
        x, y, w, h = self.button.bounds
        return self.press(x + w / 2, y + h / 2)
