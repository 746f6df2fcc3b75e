"""Weather icon utilities."""

from __future__ import annotations

from typing import ClassVar, Protocol, runtime_checkable


@runtime_checkable
class IconSource(Protocol):
    """Anything exposing an OpenWeather icon code, e.g. a WeatherCondition."""

    icon: str


class WeatherIcons:
    """Builds OpenWeather icon URLs for condition records.

    OpenWeather serves each icon code (``01d``, ``10n``...) as a PNG; the
    ``@2x`` variant is the high-resolution one.
    """

    BASE_URL: ClassVar[str] = "https://openweathermap.org/img/wn/"
    DEFAULT_ICON: ClassVar[str] = "01d"
    SUFFIX: ClassVar[str] = "@2x.png"

    @classmethod
    def icon_url(cls, icon_code: str | None = None, base_url: str | None = None) -> str:
        """Get the high-resolution icon URL for an icon code.

        Args:
            icon_code: OpenWeather icon code; the clear-sky day icon when None
            base_url: Override for the icon host

        Returns:
            Absolute icon URL
        """
        code = cls.DEFAULT_ICON if icon_code is None else icon_code
        return f"{base_url or cls.BASE_URL}{code}{cls.SUFFIX}"

    @classmethod
    def get_icon_url(cls, weather_item: IconSource | None, base_url: str | None = None) -> str:
        """Get the icon URL for an OpenWeather condition record.

        The default icon stands in only when there is no record at all; a
        record's icon code is used exactly as the provider sent it.
        """
        return cls.icon_url(weather_item.icon if weather_item is not None else None, base_url)
