"""Location providers used for "weather here" lookups."""

from __future__ import annotations

from typing import Final, Protocol, runtime_checkable

from cityweather.settings import UserSettings
from cityweather.weather.errors import WeatherError
from cityweather.weather.models import Coord
from cityweather.weather.result import FetchResult

PERMISSION_DENIED_MESSAGE: Final = "Location permission not granted"


@runtime_checkable
class LocationProvider(Protocol):
    """Protocol for a device location capability."""

    def has_location_permission(self) -> bool:
        """Whether the provider may be asked for a location."""
        ...

    def get_current_location(self) -> FetchResult[Coord]:
        """Return the current coordinates or a ``LOCATION_ERROR``."""
        ...


class ConfiguredLocationProvider:
    """Reports a fixed coordinate pair, typically from config.yaml."""

    def __init__(self, lat: float, lon: float) -> None:
        self.coord = Coord(lat=lat, lon=lon)

    def has_location_permission(self) -> bool:
        return True

    def get_current_location(self) -> FetchResult[Coord]:
        return FetchResult.success(self.coord)


class NoLocationProvider:
    """Used when no location source is configured."""

    def has_location_permission(self) -> bool:
        return False

    def get_current_location(self) -> FetchResult[Coord]:
        return FetchResult.failure(WeatherError.location(PERMISSION_DENIED_MESSAGE))


# Factory function to create appropriate provider
def create_location_provider(settings: UserSettings) -> LocationProvider:
    """Create a location provider based on configuration.

    Args:
        settings: User settings, possibly carrying lat/lon

    Returns:
        A LocationProvider implementation
    """
    if settings.lat is None or settings.lon is None:
        return NoLocationProvider()
    return ConfiguredLocationProvider(settings.lat, settings.lon)
