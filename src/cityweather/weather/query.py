"""City query formatting for the OpenWeather ``q`` parameter."""

from __future__ import annotations

from typing import Final

COUNTRY_CODE: Final = "US"


def format_city_query(city: str) -> str:
    """Append the US country code unless the query already names a country.

    Examples:
        ``"Austin"`` -> ``"Austin,US"``
        ``"Austin, TX"`` -> ``"Austin,TX,US"``
        ``"Austin,TX,US"`` -> unchanged
    """
    parts = [part.strip() for part in city.split(",")]
    if len(parts) == 1:
        return f"{city},{COUNTRY_CODE}"
    if len(parts) == 2:
        return f"{parts[0]},{parts[1]},{COUNTRY_CODE}"
    return city
