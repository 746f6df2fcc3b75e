# filepath: src/cityweather/controller.py
"""Search/location state machine sitting between the CLI and the service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Final

from cityweather.location import LocationProvider
from cityweather.storage import LastCityStore
from cityweather.weather.models import DisplayWeather
from cityweather.weather.result import FetchResult
from cityweather.weather.service import WeatherService

logger: Final = logging.getLogger(__name__)

EMPTY_QUERY_MESSAGE: Final = "Please enter a city name"
UNEXPECTED_ERROR_MESSAGE: Final = "An unexpected error occurred"


class Status(Enum):
    """Lifecycle of a weather lookup as seen by the user."""

    INITIAL = "initial"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class UiState:
    """Current screen state; ``weather`` is set on success, ``message`` on error."""

    status: Status
    weather: DisplayWeather | None = None
    message: str | None = None

    @classmethod
    def initial(cls) -> UiState:
        return cls(Status.INITIAL)

    @classmethod
    def loading(cls) -> UiState:
        return cls(Status.LOADING)

    @classmethod
    def success(cls, weather: DisplayWeather) -> UiState:
        return cls(Status.SUCCESS, weather=weather)

    @classmethod
    def error(cls, message: str) -> UiState:
        return cls(Status.ERROR, message=message)


class WeatherController:
    """Coordinates searches, location lookups and the remembered city.

    Startup order in :meth:`initialize`:
    1. location permission granted → weather for the current location
    2. otherwise a remembered city → weather for that city
    3. otherwise stay in the initial state

    Each successful lookup replaces the previous result and updates the
    remembered city. Errors are shown with the message of the classified
    error.
    """

    def __init__(
        self,
        service: WeatherService,
        store: LastCityStore,
        location: LocationProvider,
        on_state_change: Callable[[UiState], None] | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            service: Fetch-and-present pipeline
            store: Remembers the last successful search
            location: Device location capability
            on_state_change: Called with every new state
        """
        self.service = service
        self.store = store
        self.location = location
        self.on_state_change = on_state_change
        self.search_query = ""
        self.location_permission_denied = False
        self._state = UiState.initial()

    @property
    def state(self) -> UiState:
        return self._state

    def _set_state(self, state: UiState) -> None:
        self._state = state
        if self.on_state_change is not None:
            self.on_state_change(state)

    # ---- entry points ----
    def initialize(self) -> UiState:
        """Load weather from the location, or else from the remembered city."""
        if self.location.has_location_permission():
            return self.fetch_weather_by_location()
        self.load_last_searched_city()
        return self._state

    def load_last_searched_city(self) -> None:
        """Fetch the remembered city, if any; otherwise leave the state alone."""
        last_city = self.store.get()
        if last_city and last_city.strip():
            self.search_query = last_city
            self.fetch_weather_by_city(last_city)

    def on_search_query_change(self, query: str) -> None:
        self.search_query = query

    def on_search_submit(self) -> UiState:
        """Search for the current query; blank queries become an error."""
        query = self.search_query.strip()
        if not query:
            self._set_state(UiState.error(EMPTY_QUERY_MESSAGE))
            return self._state
        return self.fetch_weather_by_city(query)

    def search(self, city: str) -> UiState:
        """Shortcut for typing *city* and submitting it."""
        self.on_search_query_change(city)
        return self.on_search_submit()

    def fetch_weather_by_city(self, city: str) -> UiState:
        """Fetch *city* and remember it when the lookup succeeds."""
        self._set_state(UiState.loading())
        result = self.service.get_weather_by_city(city)
        self._show(result)
        if result.ok:
            self.store.set(city)
        return self._state

    def fetch_weather_by_location(self) -> UiState:
        """Fetch weather for the device location.

        When the location cannot be determined the remembered city is used
        instead; with no remembered city the location error is shown.
        """
        self._set_state(UiState.loading())

        location = self.location.get_current_location()
        if not location.ok:
            assert location.error is not None
            logger.info("Location unavailable: %s", location.error.message)
            last_city = self.store.get()
            if last_city and last_city.strip():
                return self.fetch_weather_by_city(last_city)
            self._set_state(UiState.error(location.error.message))
            return self._state

        coord = location.unwrap()
        result = self.service.get_weather_by_coordinates(coord.lat, coord.lon)
        self._show(result)
        if result.ok:
            label = result.unwrap().location_label
            self.search_query = label
            self.store.set(label)
        return self._state

    def on_location_permission_granted(self) -> UiState:
        self.location_permission_denied = False
        return self.fetch_weather_by_location()

    def on_location_permission_denied(self) -> UiState:
        self.location_permission_denied = True
        self.load_last_searched_city()
        return self._state

    def refresh(self) -> UiState:
        """Re-run the lookup behind the current screen."""
        if self._state.status is Status.SUCCESS and self._state.weather is not None:
            return self.fetch_weather_by_city(self._state.weather.location_label)
        if self.search_query.strip():
            return self.fetch_weather_by_city(self.search_query)
        if self.location.has_location_permission():
            return self.fetch_weather_by_location()
        return self._state

    def clear_error(self) -> None:
        """Return from an error to the initial state."""
        if self._state.status is Status.ERROR:
            self._set_state(UiState.initial())

    def forget_last_city(self) -> None:
        self.store.clear()

    # ---- helpers ----
    def _show(self, result: FetchResult[DisplayWeather]) -> None:
        if result.ok:
            self._set_state(UiState.success(result.unwrap()))
        else:
            message = result.error.message if result.error else UNEXPECTED_ERROR_MESSAGE
            logger.error("Weather lookup failed: %s", message)
            self._set_state(UiState.error(message or UNEXPECTED_ERROR_MESSAGE))
