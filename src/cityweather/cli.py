"""City weather CLI application.

This module provides the command-line interface for looking up current
conditions by city or location, managing the remembered city, and
configuration utilities.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Final

import typer
import yaml
from pydantic import ValidationError

from cityweather.controller import Status, UiState, WeatherController
from cityweather.location import create_location_provider
from cityweather.settings import UserSettings
from cityweather.storage import FileLastCityStore
from cityweather.weather.api import WeatherAPI
from cityweather.weather.models import DisplayWeather
from cityweather.weather.service import WeatherService

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Current weather for US cities", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "cityweather.cli"

CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
CITY_ARGUMENT = typer.Argument(None, help='City, e.g. "Austin" or "Austin,TX"')
HERE_OPTION = typer.Option(False, "--here", help="Use the configured location")
DST_ARGUMENT = typer.Argument(..., help="Output config.yaml")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _load_settings(config: Path | None) -> UserSettings:
    try:
        return UserSettings.load(config)
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc


def build_controller(settings: UserSettings) -> WeatherController:
    """Wire the controller from settings."""
    service = WeatherService(WeatherAPI(settings))
    return WeatherController(
        service,
        FileLastCityStore(settings.state_file),
        create_location_provider(settings),
    )


def format_weather(weather: DisplayWeather) -> str:
    """Render a display model as plain text lines."""
    lines = [
        f"{weather.city_name}, {weather.country}",
        f"{weather.main_condition} - {weather.description}",
    ]
    rows = [
        ("Temperature", weather.temperature),
        ("Feels like", weather.feels_like),
        ("Low / High", f"{weather.temp_min} / {weather.temp_max}"),
        ("Humidity", weather.humidity),
        ("Pressure", weather.pressure),
        ("Wind", f"{weather.wind_speed} {weather.wind_direction}"),
        ("Visibility", weather.visibility),
        ("Cloudiness", weather.cloudiness),
        ("Sunrise", weather.sunrise),
        ("Sunset", weather.sunset),
        ("Updated", weather.last_updated),
        ("Icon", weather.icon_url),
    ]
    lines.extend(f"  {label:<12} {value}" for label, value in rows)
    return "\n".join(lines)


def _report(state: UiState) -> None:
    if state.status is Status.SUCCESS and state.weather is not None:
        typer.echo(format_weather(state.weather))
        return
    if state.status is Status.ERROR:
        typer.secho(state.message or "Lookup failed", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.echo("No city yet. Run `cityweather show CITY` to search.")


@app.command()
def show(
    city: str | None = CITY_ARGUMENT,
    here: bool = HERE_OPTION,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show current weather for a city, the configured location, or the last city."""
    _configure_logging(debug)
    controller = build_controller(_load_settings(config))
    try:
        if city is not None:
            state = controller.search(city)
        elif here:
            state = controller.fetch_weather_by_location()
        else:
            state = controller.initialize()
    finally:
        controller.service.api.close()
    _report(state)


@app.command()
def forget(
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Forget the remembered city."""
    _configure_logging(debug)
    settings = _load_settings(config)
    FileLastCityStore(settings.state_file).clear()
    typer.echo("Last city cleared")


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        UserSettings.load(file)
        typer.echo("✅ Config valid")
    except RuntimeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("wizard")
def wizard(dst: Path = DST_ARGUMENT):
    """Interactive prompt to create a config file."""
    typer.echo("Interactive config builder - press Enter for defaults.")

    while True:
        data: dict[str, Any] = {
            "api_key": typer.prompt("OpenWeather API key", hide_input=True),
        }
        lat = typer.prompt("Latitude (blank to skip)", default="", show_default=False)
        lon = typer.prompt("Longitude (blank to skip)", default="", show_default=False)
        if lat or lon:
            data["lat"] = lat
            data["lon"] = lon
        try:
            cfg = UserSettings(**data)
            break  # valid → exit loop
        except ValidationError as err:
            typer.secho("\nConfig error(s):", fg=typer.colors.RED, err=True)
            for e in err.errors():
                loc = e["loc"][0] if e["loc"] else "config"
                typer.secho(f"  • {loc} - {e['msg']}", fg=typer.colors.RED, err=True)
            typer.echo("Please re-enter the values.\n")

    dst.write_text(
        yaml.safe_dump(cfg.model_dump(mode="json", exclude_none=True), sort_keys=False),
        encoding="utf-8",
    )
    typer.secho(f"Config written to {dst}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
