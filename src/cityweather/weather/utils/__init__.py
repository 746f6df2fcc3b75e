"""Weather utility classes."""

from cityweather.weather.utils.icons import WeatherIcons
from cityweather.weather.utils.units import UnitConverter

__all__ = ["UnitConverter", "WeatherIcons"]
