"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class UserSettings(BaseModel):
    """Settings for talking to OpenWeather and remembering the last city.

    Values come from config.yaml; ``${VAR}`` placeholders are replaced with
    environment variables (including ones defined in a ``.env`` file) so the
    API key does not have to live in the file itself.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/cityweather/config.yaml").expanduser(),
        Path("/etc/cityweather/config.yaml"),
    ]
    CONFIG_ENV_VAR: ClassVar[str] = "CITYWEATHER_CONFIG"

    # Provider settings
    api_key: str = Field(..., min_length=10, description="OpenWeather API key")
    base_url: str = Field(
        "https://api.openweathermap.org/",
        description="OpenWeather API root; the current weather path is appended",
    )
    icon_url: str = Field(
        "https://openweathermap.org/img/wn/",
        description="Prefix for condition icon URLs",
    )
    timeout: float = Field(
        30.0, gt=0, description="Connect/read timeout for API requests (seconds)"
    )

    # Device location stand-in
    lat: float | None = Field(None, description="Latitude used for location lookups")
    lon: float | None = Field(None, description="Longitude used for location lookups")

    # Persistence
    state_file: Path = Field(
        Path("~/.config/cityweather/state.yaml").expanduser(),
        description="File that remembers the last searched city",
    )

    # ---- validators ----
    @field_validator("state_file")
    @classmethod
    def expand_state_file(cls, v: Path) -> Path:
        return v.expanduser()

    @model_validator(mode="after")
    def check_location_pair(self) -> UserSettings:
        if (self.lat is None) != (self.lon is None):
            raise ValueError("lat and lon must be set together")
        return self

    # ---- convenience methods ----
    @property
    def has_location(self) -> bool:
        """Whether fixed coordinates are configured."""
        return self.lat is not None and self.lon is not None

    @property
    def weather_url(self) -> str:
        """Full URL of the current weather endpoint."""
        return self.base_url.rstrip("/") + "/data/2.5/weather"

    @classmethod
    def find_config(cls) -> Path:
        """Locate the config file from the environment or default paths.

        Raises:
            FileNotFoundError: If no config file is found
        """
        env_path = os.environ.get(cls.CONFIG_ENV_VAR)
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise FileNotFoundError(
                    f"Config file from {cls.CONFIG_ENV_VAR} not found: {path}"
                )
            return path

        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        raise FileNotFoundError(
            f"No configuration file found. Create config.yaml or set {cls.CONFIG_ENV_VAR}."
        )

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated UserSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            path = cls.find_config()

        # Load and parse config
        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw)
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data or {})
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
