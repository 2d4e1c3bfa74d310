"""Heat index calculation for validated queries."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any, Final

from heatindex.constants import (
    AIR_TEMP,
    AIR_TEMP_EMPTY_EXPECTED,
    HEAT_INDEX_FIELD,
    HEAT_INDEX_UOM,
    RELATIVE_HUMIDITY,
)
from heatindex.errors import OutOfRangeError
from heatindex.models import InputRecord, Measurement, QueryResponse
from heatindex.physics import heat_index, relative_humidity_from, vapor_pressure
from heatindex.settings import HeatIndexSettings
from heatindex.utils import UnitConverter
from heatindex.validation import validate

logger: Final = logging.getLogger(__name__)


def heat_index_from_vapor_pressures(record: InputRecord) -> float:
    """Heat index with relative humidity derived from the two temperatures.

    The air temperature gives the actual vapor pressure and the dewpoint
    the saturation vapor pressure.
    """
    actual = vapor_pressure(record.air_temp)
    saturation = vapor_pressure(record.dew_temp)
    rh = relative_humidity_from(actual, saturation)
    logger.debug("Derived relative humidity %.2f%% from vapor pressures", rh)
    return heat_index(UnitConverter.c_to_f(record.air_temp), rh)


def heat_index_from_record(record: InputRecord) -> float:
    """Heat index using the stored relative humidity as-is."""
    return heat_index(UnitConverter.c_to_f(record.air_temp), record.relative_humidity)


def calculate(params: Mapping[str, str], response: QueryResponse) -> QueryResponse:
    """Compute the heat index for a validated query.

    Args:
        params: Raw query parameters, used to pick the calculation path
        response: Result of :func:`heatindex.validation.validate`

    Returns:
        Response with ``data`` filled in; invalid responses are returned
        unchanged, and a heat index that overflows marks the response invalid
    """
    if not response.valid:
        return response

    if params.get(RELATIVE_HUMIDITY):
        logger.debug("relative_humidity supplied, deriving it from vapor pressures")
        value = heat_index_from_vapor_pressures(response.input)
    else:
        logger.debug("relative_humidity not supplied, using stored value")
        value = heat_index_from_record(response.input)

    if not math.isfinite(value):
        # Values near the float limit overflow inside the regression
        return response.with_error(
            OutOfRangeError(
                AIR_TEMP,
                "The heat index cannot be computed for the input values.",
                expected=AIR_TEMP_EMPTY_EXPECTED,
                actual=params.get(AIR_TEMP),
            )
        )

    return response.with_data(HEAT_INDEX_FIELD, Measurement(uom=HEAT_INDEX_UOM, value=value))


def evaluate(
    params: Mapping[str, str], settings: HeatIndexSettings | None = None
) -> tuple[dict[str, Any], bool]:
    """Validate a query and compute its heat index.

    Args:
        params: Raw query parameters
        settings: Validation limits (defaults when None)

    Returns:
        Tuple of (response document, validity flag)
    """
    response = calculate(params, validate(params, settings))
    if response.valid:
        logger.info("Heat index %.2f %s", response.data[HEAT_INDEX_FIELD].value, HEAT_INDEX_UOM)
    else:
        logger.info("Query rejected: %s", response.message)
    return response.to_document(), response.valid
