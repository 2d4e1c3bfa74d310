"""Heat index calculator CLI application.

This module provides the command-line interface for evaluating heat
index queries, either from individual options or from a URL query
string, plus configuration utilities.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Final
from urllib.parse import parse_qsl

import typer

from heatindex.calculator import evaluate
from heatindex.constants import AIR_TEMP, AIR_UOM, DEW_TEMP, DEW_UOM, RELATIVE_HUMIDITY
from heatindex.settings import HeatIndexSettings

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Heat index calculator CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "heatindex.cli"

CONFIG_OPTION = typer.Option(None, "--config", "-c", dir_okay=False, help="Settings YAML")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
AIR_TEMP_OPTION = typer.Option(None, "--air-temp", help="Air temperature")
AIR_UOM_OPTION = typer.Option(None, "--air-uom", help="Air temperature unit (C or F)")
DEW_TEMP_OPTION = typer.Option(None, "--dew-temp", help="Dewpoint temperature")
DEW_UOM_OPTION = typer.Option(None, "--dew-uom", help="Dewpoint unit (C or F)")
RH_OPTION = typer.Option(None, "--relative-humidity", "--rh", help="Relative humidity (%)")
QUERY_ARGUMENT = typer.Argument(..., help="Query string, e.g. 'air_temp=90&air_uom=F'")


def _load_settings(config: Path | None, debug: bool) -> HeatIndexSettings:
    try:
        settings = HeatIndexSettings.load_or_default(config)
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc

    logging.basicConfig(
        level=logging.DEBUG if debug else settings.logging_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    return settings


def _report(params: dict[str, str], settings: HeatIndexSettings) -> None:
    document, valid = evaluate(params, settings)
    typer.echo(json.dumps(document, indent=2))
    if not valid:
        raise typer.Exit(code=1)


@app.command()
def calc(
    air_temp: str | None = AIR_TEMP_OPTION,
    air_uom: str | None = AIR_UOM_OPTION,
    dew_temp: str | None = DEW_TEMP_OPTION,
    dew_uom: str | None = DEW_UOM_OPTION,
    relative_humidity: str | None = RH_OPTION,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Calculate the heat index from individual parameters.

    Options that are not given are left out of the query entirely;
    pass an empty string to send an empty value.
    """
    settings = _load_settings(config, debug)
    given = {
        AIR_TEMP: air_temp,
        AIR_UOM: air_uom,
        DEW_TEMP: dew_temp,
        DEW_UOM: dew_uom,
        RELATIVE_HUMIDITY: relative_humidity,
    }
    _report({k: v for k, v in given.items() if v is not None}, settings)


@app.command()
def query(
    query_string: str = QUERY_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Calculate the heat index from a URL query string."""
    settings = _load_settings(config, debug)
    # Repeated keys: the last occurrence wins
    params = dict(parse_qsl(query_string.lstrip("?"), keep_blank_values=True))
    logger.debug("Parsed query: %s", params)
    _report(params, settings)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        HeatIndexSettings.load(file)
        typer.echo("✅ Config valid")
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
