"""Current weather lookups for US cities backed by OpenWeather."""

__version__ = "0.1.0"
