"""Pure physical formulas for humidity and apparent temperature.

All functions are synchronous, side-effect free and total over finite
input; they can be tested without any mocking.
"""

from __future__ import annotations

import math

# Magnus coefficients (Bolton 1980), vapor pressure in hPa
MAGNUS_E0 = 6.112
MAGNUS_A = 17.67
MAGNUS_B = 243.5

# Below this the simple Steadman estimate is used instead of the regression
REGRESSION_THRESHOLD_F = 80.0


def vapor_pressure(temp_c: float) -> float:
    """Saturation vapor pressure over water.

    Evaluated at the dewpoint this is the actual vapor pressure of the air.

    Args:
        temp_c: Temperature in degrees Celsius

    Returns:
        Vapor pressure in hPa
    """
    return MAGNUS_E0 * math.exp((MAGNUS_A * temp_c) / (temp_c + MAGNUS_B))


def relative_humidity_from(actual: float, saturation: float) -> float:
    """Relative humidity (%) from actual and saturation vapor pressure."""
    return 100.0 * actual / saturation


def heat_index(temp_f: float, relative_humidity: float) -> float:
    """Calculate the heat index using the NWS algorithm.

    The Steadman estimate is averaged with the air temperature first; if
    that is 80 deg F or more the Rothfusz regression is used instead, with
    the NWS adjustments for very dry and very humid air.

    Args:
        temp_f: Air temperature in degrees Fahrenheit
        relative_humidity: Relative humidity in percent

    Returns:
        Apparent temperature in degrees Fahrenheit
    """
    t = temp_f
    rh = relative_humidity

    simple = 0.5 * (t + 61.0 + ((t - 68.0) * 1.2) + (rh * 0.094))
    hi = (simple + t) / 2.0
    if hi < REGRESSION_THRESHOLD_F:
        return hi

    hi = (
        -42.379
        + 2.04901523 * t
        + 10.14333127 * rh
        - 0.22475541 * t * rh
        - 0.00683783 * t * t
        - 0.05481717 * rh * rh
        + 0.00122874 * t * t * rh
        + 0.00085282 * t * rh * rh
        - 0.00000199 * t * t * rh * rh
    )

    if rh < 13.0 and 80.0 <= t <= 112.0:
        hi -= ((13.0 - rh) / 4.0) * math.sqrt((17.0 - abs(t - 95.0)) / 17.0)
    elif rh > 85.0 and 80.0 <= t <= 87.0:
        hi += ((rh - 85.0) / 10.0) * ((87.0 - t) / 5.0)

    return hi
