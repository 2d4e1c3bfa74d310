"""Validation pipeline: runs every validator and folds the results."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Final

from heatindex.errors import QueryParameterError
from heatindex.models import InputRecord, QueryResponse
from heatindex.settings import HeatIndexSettings
from heatindex.validation.cross import validate_dew_rel_hum, validate_input_values
from heatindex.validation.fields import (
    validate_air_temp,
    validate_air_temp_uom,
    validate_dewpoint,
    validate_dewpoint_uom,
    validate_relative_humidity,
)

logger: Final = logging.getLogger(__name__)

FieldValidator = Callable[[Mapping[str, str], InputRecord], InputRecord]

# Order matters: unit validators convert what the value validator before them stored
FIELD_VALIDATORS: Final[tuple[FieldValidator, ...]] = (
    validate_air_temp,
    validate_air_temp_uom,
    validate_dewpoint,
    validate_dewpoint_uom,
    validate_relative_humidity,
)


def _reject(response: QueryResponse, error: QueryParameterError) -> QueryResponse:
    logger.debug("Rejected %s (%s): %s", error.parameter, error.kind, error.message)
    return response.with_error(error)


def validate(
    params: Mapping[str, str], settings: HeatIndexSettings | None = None
) -> QueryResponse:
    """Validate a query and collect its values.

    Every validator runs even after one has failed. When several rules are
    violated the response reports the last one in validation order:
    field validators, then range checks, then the dewpoint/humidity
    exclusion.

    Args:
        params: Raw query parameters
        settings: Validation limits (defaults when None)

    Returns:
        Response holding the parsed input record; ``valid`` is False if
        any rule was violated
    """
    settings = settings or HeatIndexSettings()
    response = QueryResponse()
    record = response.input

    for validator in FIELD_VALIDATORS:
        try:
            record = validator(params, record)
        except QueryParameterError as err:
            response = _reject(response, err)

    for violation in validate_input_values(params, record, settings):
        response = _reject(response, violation)

    try:
        validate_dew_rel_hum(params)
    except QueryParameterError as err:
        response = _reject(response, err)

    return response.with_input(record)
