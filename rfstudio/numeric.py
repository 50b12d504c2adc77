"""
Numeric helpers shared by the calculation engines.

Every engine evaluates its closed-form formulas on numpy scalars so that a
zero divisor or an out-of-domain argument produces inf/nan instead of an
exception. Callers wrap the arithmetic in ``np.errstate(all='ignore')``.
"""

from typing import Union

import numpy as np

Number = Union[int, float, np.floating]

# Reference impedance for reflection-coefficient conversions (Ohms)
Z0_REFERENCE = 50.0

# Ambient temperature used by all thermal estimates (°C)
AMBIENT_TEMP_C = 25.0


def real(value: Number) -> np.float64:
    """Coerce a scalar to float64 so division follows IEEE-754 rules."""
    return np.float64(value)


def cplx(value: Union[complex, Number]) -> np.complex128:
    """Coerce a scalar to complex128 (S-parameters, reflection coefficients)."""
    return np.complex128(value)


def round_half_up(value: Number) -> np.float64:
    """
    Round to the nearest integer, ties toward +inf.

    Python's round() uses banker's rounding and raises on nan; this keeps
    non-finite values untouched.
    """
    return np.floor(np.float64(value) + 0.5)


def as_count(value: Number) -> Union[int, float]:
    """Return an int for finite counts (turns, gauges), float otherwise."""
    value = np.float64(value)
    if np.isfinite(value):
        return int(value)
    return float(value)


def db20(ratio: Number) -> np.float64:
    """Voltage ratio → dB."""
    return 20.0 * np.log10(np.float64(ratio))
