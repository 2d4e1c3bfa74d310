"""Query validation package.

This package provides:
- Field validators, one per query parameter
- Range checks and the dewpoint/humidity exclusion rule
- validate(): the pipeline that runs them all in order
"""

from heatindex.validation.cross import validate_dew_rel_hum, validate_input_values
from heatindex.validation.fields import (
    validate_air_temp,
    validate_air_temp_uom,
    validate_dewpoint,
    validate_dewpoint_uom,
    validate_relative_humidity,
)
from heatindex.validation.pipeline import validate

__all__ = [
    "validate",
    "validate_air_temp",
    "validate_air_temp_uom",
    "validate_dew_rel_hum",
    "validate_dewpoint",
    "validate_dewpoint_uom",
    "validate_input_values",
    "validate_relative_humidity",
]
