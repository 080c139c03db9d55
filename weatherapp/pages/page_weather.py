from __future__ import annotations

from weatherapp.core.state import DisplayState
from weatherapp.data.forecast import BUTTON_TITLE, CITY_NAME, CURRENT_TEMPERATURE, FORECAST
from weatherapp.icons import main_icon
from weatherapp.layers.background import BackgroundLayer
from weatherapp.layers.button import WeatherButtonLayer
from weatherapp.layers.city_text import CityTextLayer
from weatherapp.layers.main_status import MainWeatherStatusLayer
from weatherapp.layers.weather_day import WeatherDayLayer
from weatherapp.pages import Page, hstack, row_height, safe_bounds, vstack

STACK_SPACING = 8
FORECAST_SPACING = 20


def build(cfg, state: DisplayState) -> Page:
    """The single root screen: gradient behind a vertical stack of views."""
    scale = cfg.scale
    width, height = cfg.render_size

    def _s(val: float, minimum: int = 0) -> int:
        return max(minimum, int(round(val * scale)))

    background = BackgroundLayer(width=width, height=height, get_is_night=lambda: state.is_night, scale=scale)
    background.z = 0

    city = CityTextLayer(city_name=CITY_NAME, width=width, scale=scale)
    status = MainWeatherStatusLayer(
        get_icon=lambda: main_icon(state.is_night),
        temperature=CURRENT_TEMPERATURE,
        width=width,
        scale=scale,
    )
    days = [
        WeatherDayLayer(day_of_week=d.day_of_week, icon_id=d.icon_id, temperature=d.temperature, scale=scale)
        for d in FORECAST
    ]
    button = WeatherButtonLayer(title=BUTTON_TITLE, scale=scale)

    x, y, w, h = safe_bounds(cfg)
    # city, status, forecast row, spacer, button, spacer
    tops = vstack(
        [city, status, row_height(days), None, button, None],
        x=x, y=y, w=w, h=h, spacing=_s(STACK_SPACING),
    )
    hstack(days, x=x, y=tops[2], w=w, spacing=_s(FORECAST_SPACING))

    foreground = [city, status, *days, button]
    for lyr in foreground:
        lyr.z = 50
    return Page("weather", [background, *foreground])
