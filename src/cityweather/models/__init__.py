"""Base models shared by the OpenWeather payload types."""
