"""Persistence of the last searched city."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final, Protocol, runtime_checkable

import yaml

logger: Final = logging.getLogger(__name__)

LAST_CITY_KEY: Final = "last_searched_city"


@runtime_checkable
class LastCityStore(Protocol):
    """Protocol for remembering the most recent successful search."""

    def get(self) -> str | None: ...
    def set(self, city: str) -> None: ...
    def clear(self) -> None: ...


class FileLastCityStore:
    """Keeps the last city in a small YAML state file.

    Other keys already present in the file are preserved. I/O errors are not
    caught; they surface as ``OSError``.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")

    def get(self) -> str | None:
        value = self._read().get(LAST_CITY_KEY)
        return str(value) if value is not None else None

    def set(self, city: str) -> None:
        data = self._read()
        data[LAST_CITY_KEY] = city
        self._write(data)
        logger.debug("Saved last city %r to %s", city, self.path)

    def clear(self) -> None:
        data = self._read()
        if data.pop(LAST_CITY_KEY, None) is not None:
            self._write(data)
