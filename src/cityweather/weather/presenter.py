"""Maps raw OpenWeather payloads to display strings."""

from __future__ import annotations

from cityweather.utils.formatting import (
    capitalize_words,
    format_percentage,
    format_temperature,
)
from cityweather.utils.time import TimeUtils
from cityweather.weather.models import DisplayWeather, WeatherResponse
from cityweather.weather.utils import UnitConverter, WeatherIcons

UNKNOWN = "Unknown"


class WeatherPresenter:
    """Turns a :class:`WeatherResponse` into a :class:`DisplayWeather`.

    Mapping never fails: a missing condition record falls back to
    ``"Unknown"`` texts and the default icon, while a present record's icon
    code is used verbatim, even when blank. Times are shown at the fixed
    UTC offset reported with the payload, without daylight-saving rules.
    """

    def __init__(self, icon_base_url: str | None = None) -> None:
        """Initialize the presenter.

        Args:
            icon_base_url: Override for the icon host, mainly for tests
        """
        self.icon_base_url = icon_base_url

    def map_to_display(self, payload: WeatherResponse) -> DisplayWeather:
        """Build the display model for *payload*.

        Args:
            payload: Validated provider response

        Returns:
            Display model with units applied to every value
        """
        condition = payload.current_weather
        main = payload.main
        offset = payload.timezone

        return DisplayWeather(
            city_name=payload.name,
            country=payload.sys.country,
            temperature=format_temperature(main.temp),
            feels_like=format_temperature(main.feels_like),
            temp_min=format_temperature(main.temp_min),
            temp_max=format_temperature(main.temp_max),
            humidity=format_percentage(main.humidity),
            pressure=UnitConverter.format_pressure(main.pressure),
            wind_speed=UnitConverter.format_wind_speed(payload.wind.speed),
            wind_direction=UnitConverter.deg_to_cardinal(payload.wind.deg),
            description=capitalize_words(condition.description if condition else UNKNOWN),
            main_condition=condition.main if condition else UNKNOWN,
            icon_url=WeatherIcons.get_icon_url(condition, self.icon_base_url),
            visibility=UnitConverter.format_visibility(payload.visibility),
            cloudiness=format_percentage(payload.clouds.all),
            sunrise=TimeUtils.format_local_time(payload.sys.sunrise, offset),
            sunset=TimeUtils.format_local_time(payload.sys.sunset, offset),
            last_updated=TimeUtils.format_local_time(payload.dt, offset),
        )
