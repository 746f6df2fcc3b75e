from datetime import UTC, datetime

import pytest

from cityweather.utils.formatting import (
    capitalize_words,
    format_percentage,
    format_temperature,
    round_half_away,
)
from cityweather.utils.time import TimeUtils


@pytest.mark.parametrize(
    "value, expected",
    [(0.5, 1), (1.5, 2), (2.5, 3), (-2.5, -3), (77.8, 78), (80.9, 81), (75.4, 75), (-0.4, 0)],
)
def test_round_half_away(value: float, expected: int) -> None:
    assert round_half_away(value) == expected


def test_format_temperature() -> None:
    assert format_temperature(77.8) == "78°F"
    assert format_temperature(-3.5) == "-4°F"


def test_format_percentage() -> None:
    assert format_percentage(65) == "65%"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("clear sky", "Clear Sky"),
        ("light intensity drizzle", "Light Intensity Drizzle"),
        ("heavy DRIZZLE", "Heavy DRIZZLE"),
        ("mIxed case", "MIxed Case"),
        ("two  spaces", "Two  Spaces"),
        ("", ""),
    ],
)
def test_capitalize_words(text: str, expected: str) -> None:
    assert capitalize_words(text) == expected


@pytest.mark.parametrize(
    "timestamp, offset, expected",
    [
        (1609416000, -21600, "6:00 AM"),  # 12:00 UTC at UTC-6
        (1609455600, -21600, "5:00 PM"),
        (1609459200, 0, "12:00 AM"),
        (1609459200 + 12 * 3600, 0, "12:00 PM"),
        (1609459200, 19800, "5:30 AM"),  # UTC+5:30
        (1609459200, -36000, "2:00 PM"),  # previous day, UTC-10
    ],
)
def test_format_local_time(timestamp: int, offset: int, expected: str) -> None:
    dt = TimeUtils.epoch_to_datetime(timestamp)
    assert TimeUtils.format_local_time(dt, offset) == expected


def test_naive_datetimes_are_treated_as_utc() -> None:
    naive = datetime(2021, 1, 1, 15, 45)
    aware = naive.replace(tzinfo=UTC)
    assert TimeUtils.format_local_time(naive, 3600) == "4:45 PM"
    assert TimeUtils.format_local_time(aware, 3600) == "4:45 PM"


@pytest.mark.parametrize(
    "offset, expected",
    [(10**12, "1:46 AM"), (-(10**12), "10:13 PM"), (86400 * 3 + 3600, "1:00 AM")],
)
def test_out_of_range_offsets_wrap_to_time_of_day(offset: int, expected: str) -> None:
    midnight = TimeUtils.epoch_to_datetime(1609459200)
    assert TimeUtils.format_local_time(midnight, offset) == expected
