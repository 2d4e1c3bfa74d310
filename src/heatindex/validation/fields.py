"""Per-parameter validators.

Each validator inspects the raw query for one field, and either returns
an updated :class:`InputRecord` or raises a :class:`QueryParameterError`.
None of them look at the outcome of the others.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Final

from heatindex.constants import (
    AIR_TEMP,
    AIR_TEMP_EMPTY_EXPECTED,
    AIR_TEMP_EXPECTED,
    AIR_UOM,
    AIR_UOM_EXPECTED,
    DEW_TEMP,
    DEW_TEMP_EXPECTED,
    DEW_UOM,
    RELATIVE_HUMIDITY,
    RELATIVE_HUMIDITY_EXPECTED,
)
from heatindex.errors import (
    EmptyValueError,
    MissingParameterError,
    NonNumericValueError,
    UnknownUnitError,
)
from heatindex.models import InputRecord
from heatindex.utils import UnitConverter, is_numeric

logger: Final = logging.getLogger(__name__)


def _parse_number(
    params: Mapping[str, str],
    record: InputRecord,
    field: str,
    expected: str,
    empty_expected: str | None = None,
    required: bool = False,
) -> InputRecord:
    """Read ``field`` as a float into the record.

    An absent optional field leaves the record untouched.
    """
    if field not in params:
        if required:
            raise MissingParameterError(field)
        return record

    value = params[field]
    if not value:
        raise EmptyValueError(field, empty_expected or expected)
    if not is_numeric(value):
        raise NonNumericValueError(field, expected, value)
    return record.with_value(field, float(value))


def _apply_unit(
    params: Mapping[str, str],
    record: InputRecord,
    uom_field: str,
    field: str,
    expected: str | None = None,
) -> InputRecord:
    """Convert ``field`` to Celsius according to ``uom_field``.

    Only the first character of the unit is significant, case-insensitive.
    """
    if uom_field not in params:
        return record

    uom = params[uom_field]
    unit = uom[:1].upper()
    if unit == "F":
        celsius = UnitConverter.f_to_c(getattr(record, field))
        logger.debug("%s: %.2f deg F -> %.2f deg C", field, getattr(record, field), celsius)
        return record.converted(field, celsius)
    if unit == "C":
        return record
    raise UnknownUnitError(uom_field, uom, expected)


def validate_air_temp(params: Mapping[str, str], record: InputRecord) -> InputRecord:
    """Air temperature is required and must be numeric; unit still pending."""
    return _parse_number(
        params,
        record,
        AIR_TEMP,
        AIR_TEMP_EXPECTED,
        empty_expected=AIR_TEMP_EMPTY_EXPECTED,
        required=True,
    )


def validate_air_temp_uom(params: Mapping[str, str], record: InputRecord) -> InputRecord:
    return _apply_unit(params, record, AIR_UOM, AIR_TEMP, AIR_UOM_EXPECTED)


def validate_dewpoint(params: Mapping[str, str], record: InputRecord) -> InputRecord:
    return _parse_number(params, record, DEW_TEMP, DEW_TEMP_EXPECTED)


def validate_dewpoint_uom(params: Mapping[str, str], record: InputRecord) -> InputRecord:
    return _apply_unit(params, record, DEW_UOM, DEW_TEMP)


def validate_relative_humidity(params: Mapping[str, str], record: InputRecord) -> InputRecord:
    """Relative humidity is optional and stored directly as percent."""
    return _parse_number(params, record, RELATIVE_HUMIDITY, RELATIVE_HUMIDITY_EXPECTED)
