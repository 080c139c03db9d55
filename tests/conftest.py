import pytest

from weatherapp.app import WeatherApp
from weatherapp.config import Config


@pytest.fixture
def cfg():
    # scale 1 keeps the frames small
    return Config(scale=1.0)


@pytest.fixture
def app(cfg):
    return WeatherApp(cfg)
