"""Temperature unit conversion utilities."""

from __future__ import annotations


class UnitConverter:
    """Temperature unit conversion utilities.

    Converts between Fahrenheit and Celsius. Both conversions are pure and
    total; values are not rounded so that a round trip returns the input
    within floating-point tolerance.
    """

    @staticmethod
    def f_to_c(f: float) -> float:
        """Convert degrees Fahrenheit → degrees Celsius."""
        return (f - 32) * 5 / 9

    @staticmethod
    def c_to_f(c: float) -> float:
        """Convert degrees Celsius → degrees Fahrenheit."""
        return c * 9 / 5 + 32
