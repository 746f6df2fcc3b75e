"""Common utility functions and helpers for the cityweather package."""

from cityweather.utils.formatting import (
    capitalize_words,
    format_percentage,
    format_temperature,
    round_half_away,
)
from cityweather.utils.time import TimeUtils

__all__ = [
    "TimeUtils",
    "capitalize_words",
    "format_percentage",
    "format_temperature",
    "round_half_away",
]
