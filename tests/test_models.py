"""Tests for weather data models and response parsing.

These tests verify that:
1. The sample response from OpenWeather parses correctly
2. Model validation catches malformed responses
3. Optional fields are handled properly
4. Timestamps become UTC datetimes
"""

from datetime import UTC, datetime
from typing import Any

import pytest
from pydantic import ValidationError

from cityweather.weather.models import DisplayWeather, WeatherResponse


def test_weather_response_validation(weather_response: WeatherResponse) -> None:
    """WeatherResponse should parse the sample without errors."""
    wx = weather_response
    assert wx.name == "Austin"
    assert wx.id == 4671654
    assert wx.cod == 200
    assert wx.timezone == -21600
    assert wx.coord.lat == pytest.approx(30.2672)
    assert wx.main.temp == pytest.approx(75.4)
    assert wx.wind.deg == 315
    assert wx.clouds.all == 5
    assert wx.sys.country == "US"


def test_timestamps_are_utc(weather_response: WeatherResponse) -> None:
    assert weather_response.dt == datetime(2021, 1, 1, tzinfo=UTC)
    assert weather_response.sys.sunrise == datetime(2020, 12, 31, 12, tzinfo=UTC)


def test_optional_fields_default(payload_dict: dict[str, Any]) -> None:
    payload_dict["wind"].pop("gust")
    payload_dict["sys"].pop("type")
    payload_dict["sys"].pop("id")
    payload_dict.pop("base")
    payload_dict.pop("visibility")
    payload_dict["main"]["sea_level"] = 1015
    wx = WeatherResponse.model_validate(payload_dict)
    assert wx.wind.gust is None
    assert wx.sys.type is None
    assert wx.base is None
    assert wx.visibility == 10000
    assert wx.main.sea_level == 1015
    assert wx.main.grnd_level is None


def test_empty_condition_list_is_valid(payload_dict: dict[str, Any]) -> None:
    payload_dict["weather"] = []
    wx = WeatherResponse.model_validate(payload_dict)
    assert wx.current_weather is None


def test_missing_required_field_fails(payload_dict: dict[str, Any]) -> None:
    payload_dict.pop("main")
    with pytest.raises(ValidationError):
        WeatherResponse.model_validate(payload_dict)


def test_payload_is_frozen(weather_response: WeatherResponse) -> None:
    with pytest.raises(ValidationError):
        weather_response.name = "Dallas"  # type: ignore[misc]


def test_first_condition_is_current(weather_response: WeatherResponse) -> None:
    condition = weather_response.current_weather
    assert condition is not None
    assert condition.icon == "01d"


def test_display_weather_location_label() -> None:
    values = {name: "x" for name in DisplayWeather.model_fields}
    values.update(city_name="Austin", country="US")
    assert DisplayWeather(**values).location_label == "Austin, US"
