from pathlib import Path

import yaml

from cityweather.storage import LAST_CITY_KEY, FileLastCityStore, LastCityStore


def test_missing_file_returns_none(tmp_path: Path) -> None:
    store = FileLastCityStore(tmp_path / "state.yaml")
    assert store.get() is None


def test_set_then_get(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "state.yaml"
    store = FileLastCityStore(path)

    store.set("Austin,TX")

    assert path.exists()
    assert store.get() == "Austin,TX"
    assert FileLastCityStore(path).get() == "Austin,TX"


def test_set_overwrites_previous_city(tmp_path: Path) -> None:
    store = FileLastCityStore(tmp_path / "state.yaml")
    store.set("Austin")
    store.set("Denver")
    assert store.get() == "Denver"


def test_other_keys_are_preserved(tmp_path: Path) -> None:
    path = tmp_path / "state.yaml"
    path.write_text("theme: dark\n", encoding="utf-8")
    store = FileLastCityStore(path)

    store.set("Boston")
    store.clear()

    assert yaml.safe_load(path.read_text()) == {"theme": "dark"}


def test_clear(tmp_path: Path) -> None:
    path = tmp_path / "state.yaml"
    store = FileLastCityStore(path)
    store.set("Austin")
    store.clear()
    assert store.get() is None
    assert LAST_CITY_KEY not in (yaml.safe_load(path.read_text()) or {})


def test_clear_without_file_does_not_create_it(tmp_path: Path) -> None:
    path = tmp_path / "state.yaml"
    FileLastCityStore(path).clear()
    assert not path.exists()


def test_non_mapping_file_is_treated_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "state.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    assert FileLastCityStore(path).get() is None


def test_satisfies_protocol(tmp_path: Path) -> None:
    assert isinstance(FileLastCityStore(tmp_path / "s.yaml"), LastCityStore)
