"""Text and number formatting utilities."""

from __future__ import annotations

import math


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def format_temperature(temp: float, unit: str = "°F") -> str:
    """Format temperature value with unit.

    Args:
        temp: Temperature value
        unit: Temperature unit

    Returns:
        Formatted temperature string
    """
    return f"{round_half_away(temp)}{unit}"


def format_percentage(value: int) -> str:
    """Format an integer percentage such as humidity or cloud cover."""
    return f"{value}%"


def capitalize_words(text: str) -> str:
    """Upper-case the first letter of every space-separated word.

    The rest of each word is left as is, so ``"heavy DRIZZLE"`` becomes
    ``"Heavy DRIZZLE"``.
    """
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))
