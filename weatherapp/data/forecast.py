from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ForecastDay:
    day_of_week: str
    icon_id: str
    temperature: int


CITY_NAME = "Cupertino, CA"
CURRENT_TEMPERATURE = 76
BUTTON_TITLE = "Change Day Time"

FORECAST: Tuple[ForecastDay, ...] = (
    ForecastDay("TUE", "sunset.fill", 70),
    ForecastDay("WED", "sun.max.fill", 82),
    ForecastDay("THU", "wind.snow", 55),
    ForecastDay("FRI", "sunset.fill", 72),
    ForecastDay("SAT", "snow", 34),
)
