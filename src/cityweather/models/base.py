"""Pydantic bases shared by the OpenWeather payload models."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from cityweather.utils.time import TimeUtils

EpochValidator = Callable[[type[Any], Any], Any]


class FrozenModel(BaseModel):
    """Base for provider payload models, which never change once parsed."""

    model_config = ConfigDict(frozen=True)


class TimeStampModel(FrozenModel):
    """Payload model carrying UNIX-second instants.

    Subclasses declare their instant fields as ``datetime`` and attach
    :meth:`epoch_fields` so raw integers arrive as aware UTC datetimes.
    """

    @staticmethod
    def epoch_fields(*names: str) -> EpochValidator:
        """Build a ``before`` validator for the given epoch-second fields.

        Already-parsed datetimes and ISO strings are left for pydantic.
        """

        @field_validator(*names, mode="before")
        def _from_epoch(cls: type[Any], raw: Any) -> Any:
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                return raw
            return TimeUtils.epoch_to_datetime(int(raw))

        return _from_epoch
