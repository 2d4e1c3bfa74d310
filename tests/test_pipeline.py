"""Tests for the validation pipeline.

These tests verify that:
1. Every validator runs, even after an earlier one failed
2. The last violated rule is the one reported
3. The parsed input record is kept in Celsius
"""

import pytest

from heatindex.validation import validate


def test_fahrenheit_air_temp_stored_as_celsius() -> None:
    response = validate({"air_temp": "90", "air_uom": "F"})
    assert response.valid is True
    assert response.status == "success"
    assert response.input.air_temp == pytest.approx(32.22, abs=0.01)


def test_relative_humidity_query_valid() -> None:
    response = validate({"air_temp": "90", "air_uom": "F", "relative_humidity": "50"})
    assert response.valid is True
    assert response.input.relative_humidity == 50.0


def test_dewpoint_query_valid() -> None:
    response = validate({"air_temp": "90", "air_uom": "F", "dew_temp": "60", "dew_uom": "F"})
    assert response.valid is True
    assert response.input.dew_temp == pytest.approx(15.56, abs=0.01)


def test_missing_air_temp() -> None:
    response = validate({})
    assert response.valid is False
    assert response.status == "error"
    assert response.message == "Required input parameter not specified."
    assert response.actual is None


def test_empty_air_temp() -> None:
    response = validate({"air_temp": ""})
    assert response.valid is False
    assert response.message == "No value provided for air_temp input parameter."
    assert response.actual == ""


def test_air_temp_below_floor() -> None:
    response = validate({"air_temp": "20", "air_uom": "C"})
    assert response.valid is False
    assert "air temperature" in response.message


def test_conflicting_inputs_reported_last() -> None:
    response = validate({"relative_humidity": "50", "dew_temp": "60"})
    assert response.valid is False
    assert response.message == "Requires rh or dew_temp, not both."


def test_later_error_overwrites_earlier() -> None:
    response = validate({"air_temp": "abc", "air_uom": "K"})
    assert response.valid is False
    assert response.message == "Unknown unit of measure provided."
    assert response.actual == "K"


def test_status_set_on_unit_error() -> None:
    response = validate({"air_temp": "90", "air_uom": "K"})
    assert response.status == "error"


def test_range_error_overwrites_field_error() -> None:
    response = validate({"air_temp": "20", "air_uom": "K"})
    assert response.message.startswith("The valid input limits for air temperature")
    assert response.actual == "20"


def test_exclusion_rule_reported_last() -> None:
    params = {"air_temp": "90", "air_uom": "F", "relative_humidity": "oops", "dew_temp": "100"}
    response = validate(params)
    assert response.message == "Requires rh or dew_temp, not both."


def test_validity_never_restored() -> None:
    response = validate({"air_temp": "", "dew_temp": "20"})
    assert response.valid is False
    assert response.message == "No value provided for air_temp input parameter."
