"""Weather package - holds API clients, presenter, models, and errors."""

from .api import WeatherAPI
from .async_api import AsyncWeatherAPI
from .errors import ErrorKind, WeatherError
from .models import (
    Clouds,
    Coord,
    DisplayWeather,
    MainMetrics,
    Sys,
    WeatherCondition,
    WeatherResponse,
    Wind,
)
from .presenter import WeatherPresenter
from .query import format_city_query
from .result import FetchResult
from .service import AsyncWeatherService, WeatherService
from .utils import UnitConverter, WeatherIcons

# Define what gets imported with: from cityweather.weather import *
__all__ = [
    "AsyncWeatherAPI",
    "AsyncWeatherService",
    "Clouds",
    "Coord",
    "DisplayWeather",
    "ErrorKind",
    "FetchResult",
    "MainMetrics",
    "Sys",
    "UnitConverter",
    "WeatherAPI",
    "WeatherCondition",
    "WeatherError",
    "WeatherIcons",
    "WeatherPresenter",
    "WeatherResponse",
    "WeatherService",
    "Wind",
    "format_city_query",
]
