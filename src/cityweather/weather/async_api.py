"""Cancellable asyncio client for OpenWeather current conditions."""

from __future__ import annotations

import logging
from typing import Any, Final

import httpx

from cityweather.settings import UserSettings

from .api import UNITS, parse_response, redact
from .errors import WeatherError
from .models import WeatherResponse
from .query import format_city_query
from .result import FetchResult

logger: Final = logging.getLogger(__name__)


class AsyncWeatherAPI:
    """Async twin of :class:`~cityweather.weather.api.WeatherAPI`.

    Built on ``httpx.AsyncClient``: cancelling the task that awaits a fetch
    aborts the in-flight request and returns its connection to the pool.
    ``asyncio.CancelledError`` is never turned into a classified error.
    Calls share no state beyond the connection pool and may run concurrently.
    """

    def __init__(
        self,
        config: UserSettings,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Settings with API key and endpoint
            timeout: Connect/read/write/pool timeout in seconds (default from config)
            client: Optional preconfigured httpx client, mainly for tests
        """
        self.config = config
        self.timeout = timeout if timeout is not None else config.timeout
        self.client = client or httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))

    async def __aenter__(self) -> AsyncWeatherAPI:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def fetch_by_city(self, city_query: str) -> FetchResult[WeatherResponse]:
        """Retrieve current weather for a free-text city."""
        return await self._fetch({"q": format_city_query(city_query)})

    async def fetch_by_coordinates(
        self, lat: float, lon: float
    ) -> FetchResult[WeatherResponse]:
        """Retrieve current weather for a coordinate pair."""
        return await self._fetch({"lat": lat, "lon": lon})

    async def _fetch(self, location: dict[str, Any]) -> FetchResult[WeatherResponse]:
        try:
            return FetchResult.success(await self._request(location))
        except WeatherError as err:
            return FetchResult.failure(err)
        except Exception as exc:
            logger.warning(
                "Unexpected error fetching weather: %s",
                redact(repr(exc), self.config.api_key),
            )
            return FetchResult.failure(WeatherError.network())

    async def _request(self, location: dict[str, Any]) -> WeatherResponse:
        params = {**location, "appid": self.config.api_key, "units": UNITS}
        try:
            resp = await self.client.get(self.config.weather_url, params=params)
        except httpx.HTTPError as exc:
            logger.warning(
                "Weather API network error: %s", redact(str(exc), self.config.api_key)
            )
            raise WeatherError.network() from exc

        return parse_response(resp.status_code, resp.content)
