"""Success-or-error container returned by every lookup operation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from cityweather.weather.errors import WeatherError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Holds either a value or a :class:`WeatherError`, never both."""

    value: T | None = None
    error: WeatherError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("FetchResult needs exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> FetchResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: WeatherError) -> FetchResult[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """Whether this result carries a value."""
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the carried error."""
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value

    def map(self, func: Callable[[T], U]) -> FetchResult[U]:
        """Apply *func* to a successful value; errors pass through unchanged."""
        if self.error is not None:
            return FetchResult(error=self.error)
        assert self.value is not None
        return FetchResult(value=func(self.value))
