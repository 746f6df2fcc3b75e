"""Error taxonomy for weather lookups.

Every failure the pipeline can report is a :class:`WeatherError` carrying one
of the :class:`ErrorKind` values and a message meant for direct display.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class ErrorKind(Enum):
    """Closed set of failure kinds surfaced to callers."""

    NETWORK_ERROR = "network_error"
    CITY_NOT_FOUND = "city_not_found"
    API_KEY_ERROR = "api_key_error"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    SERVER_ERROR = "server_error"
    EMPTY_RESPONSE = "empty_response"
    LOCATION_ERROR = "location_error"


NETWORK_ERROR_MESSAGE: Final = (
    "Unable to fetch weather data. Please check your internet connection."
)
EMPTY_RESPONSE_MESSAGE: Final = "No weather data available"

# User-facing explanations for the statuses OpenWeather is known to return
HTTP_ERROR_MAP: Final = {
    404: (
        ErrorKind.CITY_NOT_FOUND,
        "City not found. Please check the city name and try again.",
    ),
    401: (
        ErrorKind.API_KEY_ERROR,
        "API authentication error. Please try again later.",
    ),
    429: (
        ErrorKind.RATE_LIMIT_EXCEEDED,
        "Too many requests. Please wait a moment and try again.",
    ),
}


class WeatherError(Exception):
    """A classified weather lookup failure."""

    def __init__(self, kind: ErrorKind, message: str, status: int | None = None) -> None:
        """Initialize the error.

        Args:
            kind: Failure classification
            message: Human-readable message, safe to show to the user
            status: HTTP status code when the failure came from the provider
        """
        super().__init__(message)
        self.kind: ErrorKind = kind
        self.message: str = message
        self.status: int | None = status

    def __repr__(self) -> str:
        return f"WeatherError({self.kind.name}, {self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeatherError):
            return NotImplemented
        return (self.kind, self.message, self.status) == (
            other.kind,
            other.message,
            other.status,
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.message, self.status))

    @classmethod
    def network(cls) -> WeatherError:
        """Create the fixed transport failure error."""
        return cls(ErrorKind.NETWORK_ERROR, NETWORK_ERROR_MESSAGE)

    @classmethod
    def empty_response(cls, status: int | None = None) -> WeatherError:
        """Create the error for a successful status without a body."""
        return cls(ErrorKind.EMPTY_RESPONSE, EMPTY_RESPONSE_MESSAGE, status)

    @classmethod
    def location(cls, message: str) -> WeatherError:
        """Create a location capability failure."""
        return cls(ErrorKind.LOCATION_ERROR, message)

    @classmethod
    def from_status(cls, status_code: int) -> WeatherError:
        """Classify a non-success HTTP status.

        Args:
            status_code: HTTP status returned by the provider

        Returns:
            WeatherError with the matching kind; unknown statuses are
            server errors whose message names the code
        """
        if status_code in HTTP_ERROR_MAP:
            kind, message = HTTP_ERROR_MAP[status_code]
            return cls(kind, message, status_code)
        return cls(
            ErrorKind.SERVER_ERROR,
            f"Server error ({status_code}). Please try again later.",
            status_code,
        )
