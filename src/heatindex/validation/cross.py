"""Validators that look at more than one field at a time."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from heatindex.constants import (
    AIR_TEMP,
    AIR_TEMP_EMPTY_EXPECTED,
    DEW_TEMP,
    DEW_TEMP_EXPECTED,
    EXCLUSIVE_EXPECTED,
    RELATIVE_HUMIDITY,
    RELATIVE_HUMIDITY_EXPECTED,
)
from heatindex.errors import ConflictingInputsError, OutOfRangeError, QueryParameterError
from heatindex.models import InputRecord
from heatindex.settings import HeatIndexSettings

RangeCheck = Callable[[Mapping[str, str], InputRecord, HeatIndexSettings], None]


def check_air_temp_range(
    params: Mapping[str, str], record: InputRecord, settings: HeatIndexSettings
) -> None:
    if record.has(AIR_TEMP) and record.air_temp < settings.air_temp_min_c:
        raise OutOfRangeError(
            AIR_TEMP,
            "The valid input limits for air temperature is greater than "
            "80 deg Fahrenheit or 26.66667 deg Celsius.",
            expected=AIR_TEMP_EMPTY_EXPECTED,
            actual=params.get(AIR_TEMP),
        )


def check_dewpoint_range(
    params: Mapping[str, str], record: InputRecord, settings: HeatIndexSettings
) -> None:
    if not record.has(DEW_TEMP):
        return
    above_air = record.has(AIR_TEMP) and record.dew_temp > record.air_temp
    if record.dew_temp < settings.dew_temp_min_c or above_air:
        raise OutOfRangeError(
            DEW_TEMP,
            "The valid input limits for dewpoint temperature are between "
            "-243C and the input air temperature.",
            expected=DEW_TEMP_EXPECTED,
            actual=params.get(DEW_TEMP),
        )


def check_relative_humidity_range(
    params: Mapping[str, str], record: InputRecord, settings: HeatIndexSettings
) -> None:
    if record.has(RELATIVE_HUMIDITY) and record.relative_humidity < settings.relative_humidity_min:
        raise OutOfRangeError(
            RELATIVE_HUMIDITY,
            "The valid input limits for relative humidity is greater than 40.",
            expected=RELATIVE_HUMIDITY_EXPECTED,
            actual=params.get(RELATIVE_HUMIDITY),
        )


RANGE_CHECKS: tuple[RangeCheck, ...] = (
    check_air_temp_range,
    check_dewpoint_range,
    check_relative_humidity_range,
)


def validate_input_values(
    params: Mapping[str, str], record: InputRecord, settings: HeatIndexSettings
) -> list[QueryParameterError]:
    """Run every range check against the parsed values.

    Checks only apply to fields that were parsed from the query, so an
    absent optional field is never reported as out of range.

    Returns:
        Violations in check order; empty when all values are in range
    """
    violations: list[QueryParameterError] = []
    for check in RANGE_CHECKS:
        try:
            check(params, record, settings)
        except OutOfRangeError as err:
            violations.append(err)
    return violations


def validate_dew_rel_hum(params: Mapping[str, str]) -> None:
    """Relative humidity and dewpoint are alternatives; reject both at once.

    Raises:
        ConflictingInputsError: If both are present with non-empty values
    """
    rh = params.get(RELATIVE_HUMIDITY)
    dew = params.get(DEW_TEMP)
    if rh and dew:
        raise ConflictingInputsError(
            RELATIVE_HUMIDITY,
            "Requires rh or dew_temp, not both.",
            expected=EXCLUSIVE_EXPECTED,
            actual=rh,
        )
