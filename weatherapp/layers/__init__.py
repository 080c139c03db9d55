from .background import BackgroundLayer
from .city_text import CityTextLayer
from .main_status import MainWeatherStatusLayer
from .weather_day import WeatherDayLayer
from .button import WeatherButtonLayer
# Namespace package for on-screen layers
