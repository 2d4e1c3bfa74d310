import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from heatindex.cli import app
from heatindex.settings import HeatIndexSettings

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HEATINDEX_CONFIG", raising=False)
    monkeypatch.setattr(HeatIndexSettings, "DEFAULT_CONFIG_PATHS", [tmp_path / "config.yaml"])


def _document(output: str) -> dict:
    return json.loads(output[output.index("{") :])


def test_calc_relative_humidity() -> None:
    result = runner.invoke(
        app, ["calc", "--air-temp", "90", "--air-uom", "F", "--relative-humidity", "50"]
    )
    assert result.exit_code == 0
    doc = _document(result.stdout)
    assert doc["status"] == "success"
    assert doc["data"]["absolute_humidity"]["uom"] == "deg F"


def test_calc_dewpoint() -> None:
    result = runner.invoke(
        app, ["calc", "--air-temp", "90", "--air-uom", "F", "--dew-temp", "60", "--dew-uom", "F"]
    )
    assert result.exit_code == 0


def test_calc_missing_air_temp_exits_nonzero() -> None:
    result = runner.invoke(app, ["calc", "--rh", "50"])
    assert result.exit_code == 1
    doc = _document(result.stdout)
    assert doc["message"] == "Required input parameter not specified."
    assert doc["actual"] is None


def test_calc_empty_value_is_sent() -> None:
    result = runner.invoke(app, ["calc", "--air-temp", ""])
    assert result.exit_code == 1
    assert _document(result.stdout)["actual"] == ""


def test_query_string() -> None:
    result = runner.invoke(app, ["query", "?air_temp=90&air_uom=F&dew_temp=60&dew_uom=F"])
    assert result.exit_code == 0
    assert _document(result.stdout)["status"] == "success"


def test_query_string_keeps_blank_values() -> None:
    result = runner.invoke(app, ["query", "air_temp="])
    assert result.exit_code == 1
    assert _document(result.stdout)["message"] == "No value provided for air_temp input parameter."


def test_query_string_conflicting_inputs() -> None:
    result = runner.invoke(app, ["query", "air_temp=90&air_uom=F&relative_humidity=50&dew_temp=60"])
    assert result.exit_code == 1
    assert _document(result.stdout)["message"] == "Requires rh or dew_temp, not both."


def test_calc_with_config(tmp_path: Path) -> None:
    cfg = tmp_path / "strict.yaml"
    cfg.write_text("air_temp_min_c: 40\n")
    result = runner.invoke(app, ["calc", "--air-temp", "35", "--config", str(cfg)])
    assert result.exit_code == 1


def test_calc_with_missing_config(tmp_path: Path) -> None:
    result = runner.invoke(app, ["calc", "--air-temp", "35", "--config", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 2


def test_config_validate_ok(tmp_path: Path) -> None:
    cfg = tmp_path / "config.yaml"
    cfg.write_text("relative_humidity_min: 30\n")
    result = runner.invoke(app, ["config", "validate", str(cfg)])
    assert result.exit_code == 0
    assert "Config valid" in result.stdout


def test_config_validate_invalid(tmp_path: Path) -> None:
    cfg = tmp_path / "config.yaml"
    cfg.write_text("relative_humidity_min: 300\n")
    result = runner.invoke(app, ["config", "validate", str(cfg)])
    assert result.exit_code == 1
