"""Heat index package - query validation, physics and calculation."""

__version__ = "0.1.0"

from .calculator import calculate, evaluate
from .errors import QueryParameterError
from .models import InputRecord, Measurement, QueryResponse
from .settings import HeatIndexSettings
from .utils import UnitConverter, is_numeric
from .validation import validate

# Define what gets imported with: from heatindex import *
__all__ = [
    "HeatIndexSettings",
    "InputRecord",
    "Measurement",
    "QueryParameterError",
    "QueryResponse",
    "UnitConverter",
    "calculate",
    "evaluate",
    "is_numeric",
    "validate",
]
