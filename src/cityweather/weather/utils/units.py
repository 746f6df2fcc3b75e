"""Weather unit conversion utilities."""

from __future__ import annotations

import math
from typing import ClassVar

from cityweather.utils.formatting import round_half_away


class UnitConverter:
    """Weather unit conversion utilities.

    OpenWeather already converts to imperial units server side, so apart
    from visibility these helpers only round and label values:
    - Temperature (°F)
    - Wind speed (mph) and bearing (16-point compass)
    - Pressure (hPa)
    - Visibility (m → mi)
    """

    # Wind direction constants
    DIRECTIONS: ClassVar[list[str]] = [
        "N",
        "NNE",
        "NE",
        "ENE",
        "E",
        "ESE",
        "SE",
        "SSE",
        "S",
        "SSW",
        "SW",
        "WSW",
        "W",
        "WNW",
        "NW",
        "NNW",
    ]

    METERS_PER_MILE: ClassVar[float] = 1609.34

    @classmethod
    def deg_to_cardinal(cls, deg: float) -> str:
        """Convert wind bearing to 16-point compass direction.

        Bearings outside 0-359 (including negative ones) wrap around.
        """
        index = math.floor((deg + 11.25) / 22.5) % 16
        return cls.DIRECTIONS[index]

    @classmethod
    def meters_to_miles(cls, meters: float) -> float:
        """Convert a distance in meters to miles."""
        return meters / cls.METERS_PER_MILE

    @classmethod
    def format_visibility(cls, meters: float) -> str:
        """Format visibility in miles with one decimal (e.g. "10.0 mi")."""
        return f"{cls.meters_to_miles(meters):.1f} mi"

    @staticmethod
    def format_wind_speed(speed_mph: float) -> str:
        """Format wind speed rounded to whole mph."""
        return f"{round_half_away(speed_mph)} mph"

    @staticmethod
    def format_pressure(hpa: int) -> str:
        """Format pressure in hectopascals."""
        return f"{hpa} hPa"
