"""Strict numeric parsing of query parameter values."""

from __future__ import annotations

import math
import re
from typing import Final

# Decimal literal only: no inf/nan, no digit separators, no hex
_FLOAT_RE: Final = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$")


def is_numeric(value: str) -> bool:
    """Check whether the whole string is a floating point literal.

    Surrounding whitespace is tolerated, anything else left over after the
    number is not, so ``"12abc"`` is rejected rather than read as 12.

    Args:
        value: Raw parameter value

    Returns:
        True if the string is a decimal literal whose value is finite;
        literals that overflow to infinity, such as ``"1e400"``, are rejected
    """
    return bool(_FLOAT_RE.match(value)) and math.isfinite(float(value))
