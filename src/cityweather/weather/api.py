"""Weather API client for OpenWeather current conditions."""

from __future__ import annotations

import json
import logging
from typing import Any, Final

import requests

from cityweather.settings import UserSettings

from .errors import WeatherError
from .models import WeatherResponse
from .query import format_city_query
from .result import FetchResult

logger: Final = logging.getLogger(__name__)

# OpenWeather converts to °F and mph server side
UNITS: Final = "imperial"
DEFAULT_TIMEOUT: Final = 30.0


def redact(text: str, secret: str) -> str:
    """Mask *secret* in *text* so request URLs can be logged safely."""
    return text.replace(secret, "***") if secret else text


def parse_response(status_code: int, body: bytes | str) -> WeatherResponse:
    """Classify an HTTP response and validate a successful payload.

    Shared by the sync and async clients. Checks run in a fixed order: a
    non-2xx status is classified by :meth:`WeatherError.from_status`, a 2xx
    without a body is an empty response, and an undecodable or invalid body
    counts as a transport failure.

    Args:
        status_code: HTTP status of the response
        body: Raw response body

    Returns:
        Validated WeatherResponse

    Raises:
        WeatherError: For every failure
    """
    if not 200 <= status_code < 300:
        error = WeatherError.from_status(status_code)
        logger.error("Weather API error: %s - %s", status_code, error.kind.name)
        raise error

    if not body or not body.strip():
        logger.warning("Weather API returned %s with an empty body", status_code)
        raise WeatherError.empty_response(status_code)

    try:
        data: Any = json.loads(body)
        if data is None:
            raise WeatherError.empty_response(status_code)
        return WeatherResponse.model_validate(data)
    except ValueError as exc:
        # Covers JSONDecodeError and pydantic ValidationError
        logger.warning("Could not parse weather response: %s", exc)
        raise WeatherError.network() from exc


class WeatherAPI:
    """OpenWeather client for the 2.5 current weather endpoint.

    Each lookup issues exactly one GET request and never retries. Failures
    are classified into :class:`WeatherError` values and returned inside a
    :class:`FetchResult`; nothing is raised to the caller. Transport errors
    always carry the same fixed message so exception details stay in the log.

    The client owns a ``requests.Session``; call :meth:`close` or use it as a
    context manager to release pooled connections.
    """

    def __init__(
        self,
        config: UserSettings,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the weather API client.

        Args:
            config: Settings with API key and endpoint
            timeout: Connect and read timeout in seconds (default from config)
            session: Optional preconfigured session, mainly for tests
        """
        self.config = config
        self.timeout = timeout if timeout is not None else config.timeout
        self.session = session or requests.Session()

    def __enter__(self) -> WeatherAPI:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def fetch_by_city(self, city_query: str) -> FetchResult[WeatherResponse]:
        """Retrieve current weather for a free-text city.

        The query gets the US country code appended when it does not name a
        country already (see :func:`format_city_query`).

        Args:
            city_query: City, optionally followed by state and country

        Returns:
            FetchResult with the payload or a classified error
        """
        return self._fetch({"q": format_city_query(city_query)})

    def fetch_by_coordinates(self, lat: float, lon: float) -> FetchResult[WeatherResponse]:
        """Retrieve current weather for a coordinate pair.

        Args:
            lat: Latitude
            lon: Longitude

        Returns:
            FetchResult with the payload or a classified error
        """
        return self._fetch({"lat": lat, "lon": lon})

    def build_params(self, location: dict[str, Any]) -> dict[str, Any]:
        """Merge location parameters with the credential and unit system."""
        return {**location, "appid": self.config.api_key, "units": UNITS}

    def _fetch(self, location: dict[str, Any]) -> FetchResult[WeatherResponse]:
        try:
            return FetchResult.success(self._request(location))
        except WeatherError as err:
            return FetchResult.failure(err)
        except Exception as exc:
            logger.warning(
                "Unexpected error fetching weather: %s",
                redact(repr(exc), self.config.api_key),
            )
            return FetchResult.failure(WeatherError.network())

    def _request(self, location: dict[str, Any]) -> WeatherResponse:
        params = self.build_params(location)
        try:
            resp = self.session.get(
                self.config.weather_url,
                params=params,
                timeout=(self.timeout, self.timeout),
            )
        except requests.RequestException as exc:
            logger.warning(
                "Weather API network error: %s", redact(str(exc), self.config.api_key)
            )
            raise WeatherError.network() from exc

        return parse_response(resp.status_code, resp.content)
