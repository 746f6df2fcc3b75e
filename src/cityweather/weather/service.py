"""Fetch-then-present pipelines returning display models."""

from __future__ import annotations

from cityweather.weather.api import WeatherAPI
from cityweather.weather.async_api import AsyncWeatherAPI
from cityweather.weather.models import DisplayWeather
from cityweather.weather.presenter import WeatherPresenter
from cityweather.weather.result import FetchResult


class WeatherService:
    """Combines :class:`WeatherAPI` and :class:`WeatherPresenter`."""

    def __init__(self, api: WeatherAPI, presenter: WeatherPresenter | None = None) -> None:
        self.api = api
        self.presenter = presenter or WeatherPresenter(api.config.icon_url)

    def get_weather_by_city(self, city: str) -> FetchResult[DisplayWeather]:
        return self.api.fetch_by_city(city).map(self.presenter.map_to_display)

    def get_weather_by_coordinates(self, lat: float, lon: float) -> FetchResult[DisplayWeather]:
        return self.api.fetch_by_coordinates(lat, lon).map(self.presenter.map_to_display)


class AsyncWeatherService:
    """Coroutine version of :class:`WeatherService`; cancellation propagates."""

    def __init__(
        self, api: AsyncWeatherAPI, presenter: WeatherPresenter | None = None
    ) -> None:
        self.api = api
        self.presenter = presenter or WeatherPresenter(api.config.icon_url)

    async def get_weather_by_city(self, city: str) -> FetchResult[DisplayWeather]:
        result = await self.api.fetch_by_city(city)
        return result.map(self.presenter.map_to_display)

    async def get_weather_by_coordinates(
        self, lat: float, lon: float
    ) -> FetchResult[DisplayWeather]:
        result = await self.api.fetch_by_coordinates(lat, lon)
        return result.map(self.presenter.map_to_display)
