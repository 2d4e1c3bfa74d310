"""Conversion and parsing utilities."""

from heatindex.utils.numeric import is_numeric
from heatindex.utils.units import UnitConverter

__all__ = ["UnitConverter", "is_numeric"]
