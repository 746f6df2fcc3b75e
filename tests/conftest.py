import copy
import json
from pathlib import Path
from typing import Any

import pytest

from cityweather.settings.user import UserSettings
from cityweather.weather.models import WeatherResponse

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def payload_dict() -> dict[str, Any]:
    """Austin sample as returned by /data/2.5/weather (fresh copy per test)."""
    raw = json.loads((DATA_DIR / "current_sample.json").read_text())
    return copy.deepcopy(raw)


@pytest.fixture
def weather_response(payload_dict: dict[str, Any]) -> WeatherResponse:
    return WeatherResponse.model_validate(payload_dict)


@pytest.fixture
def settings(tmp_path: Path) -> UserSettings:
    return UserSettings(
        api_key="test-api-key-123",
        state_file=tmp_path / "state.yaml",
    )
