"""Typed models for the OpenWeather 2.5 current weather response.

Field names follow the JSON keys so payloads validate without aliases.
Optional fields that nothing displays yet (sea level, gust, station ids) are
carried through as-is.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from cityweather.models.base import FrozenModel, TimeStampModel

# ─────────────────────────── primitives ──────────────────────────────────────


class Coord(FrozenModel):
    """Geographic coordinates (latitude, longitude)."""

    lat: float
    lon: float


class WeatherCondition(FrozenModel):
    """Weather condition information from OpenWeather."""

    id: int
    main: str
    description: str
    icon: str


# ─────────────────────────── composite blocks ────────────────────────────────


class MainMetrics(FrozenModel):
    """Temperature, pressure and humidity readings."""

    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int
    humidity: int
    sea_level: int | None = None
    grnd_level: int | None = None


class Wind(FrozenModel):
    """Wind speed (mph with imperial units) and bearing in degrees."""

    speed: float
    deg: int
    gust: float | None = None


class Clouds(FrozenModel):
    """Cloud cover percentage."""

    all: int


class Sys(TimeStampModel):
    """Country code and sun timings."""

    type: int | None = None
    id: int | None = None
    country: str
    sunrise: datetime
    sunset: datetime

    _validate_sun = TimeStampModel.epoch_fields("sunrise", "sunset")


# ─────────────────────────── top-level response ──────────────────────────────


class WeatherResponse(TimeStampModel):
    """Current conditions for one location as returned by OpenWeather.

    ``timezone`` is the location's offset from UTC in seconds, ``cod`` the
    response code echoed by the provider.
    """

    coord: Coord
    weather: list[WeatherCondition]
    base: str | None = None
    main: MainMetrics
    visibility: int = 10000
    wind: Wind
    clouds: Clouds
    dt: datetime
    sys: Sys
    timezone: int
    id: int
    name: str
    cod: int

    _validate_dt = TimeStampModel.epoch_fields("dt")

    @property
    def current_weather(self) -> WeatherCondition | None:
        """Get the primary weather condition.

        Returns:
            First weather condition in the list or None if not available
        """
        return self.weather[0] if self.weather else None


class DisplayWeather(BaseModel):
    """Display-ready projection of a :class:`WeatherResponse`.

    Every value is a string with its unit already applied.
    """

    model_config = ConfigDict(frozen=True)

    city_name: str
    country: str
    temperature: str
    feels_like: str
    temp_min: str
    temp_max: str
    humidity: str
    pressure: str
    wind_speed: str
    wind_direction: str
    description: str
    main_condition: str
    icon_url: str
    visibility: str
    cloudiness: str
    sunrise: str
    sunset: str
    last_updated: str

    @property
    def location_label(self) -> str:
        """City and country as shown in the search box (e.g. "Austin, US")."""
        return f"{self.city_name}, {self.country}"
