"""
Standard component values and engineering notation.

Nearest-preferred-value lookup for the inductors, capacitors and resistors
the converter sizer produces, and SI-prefixed formatting for result tables.
"""

import math
from typing import Dict, Tuple

# IEC 60063 preferred values per decade. E12/E24 are historical tables;
# E48 and E96 follow round(10^(i/n), 2).
E12_BASE = (1.0, 1.2, 1.5, 1.8, 2.2, 2.7, 3.3, 3.9, 4.7, 5.6, 6.8, 8.2)

E24_BASE = (
    1.0, 1.1, 1.2, 1.3, 1.5, 1.6, 1.8, 2.0, 2.2, 2.4, 2.7, 3.0,
    3.3, 3.6, 3.9, 4.3, 4.7, 5.1, 5.6, 6.2, 6.8, 7.5, 8.2, 9.1,
)

E48_BASE = tuple(round(10 ** (i / 48), 2) for i in range(48))

E96_BASE = tuple(round(10 ** (i / 96), 2) for i in range(96))

E_SERIES: Dict[str, Tuple[float, ...]] = {
    'E12': E12_BASE,
    'E24': E24_BASE,
    'E48': E48_BASE,
    'E96': E96_BASE,
}

_SI_PREFIXES = {
    -5: 'f', -4: 'p', -3: 'n', -2: 'µ', -1: 'm',
    0: '', 1: 'k', 2: 'M', 3: 'G',
}


def snap_to_e_series(value: float, series: str = 'E24') -> Tuple[float, float]:
    """
    Snap a value to the nearest preferred value of an E-series.

    Distance is measured on a log scale, and the neighbouring decades are
    considered so 9.6 snaps to 10 rather than 9.1.

    Args:
        value: Target value in base units (Ω, F, H).
        series: 'E12', 'E24', 'E48' or 'E96'.

    Returns:
        (snapped_value, error_pct), error positive when the snapped value
        is higher than the target.
    """
    if series not in E_SERIES:
        raise ValueError(f"Unknown series '{series}'. Must be one of: {list(E_SERIES)}")
    if not value > 0 or math.isinf(value):
        raise ValueError(f"Value must be positive and finite, got {value}")

    decade = math.floor(math.log10(value))
    log_mantissa = math.log10(value) - decade

    base = E_SERIES[series]
    candidates = [base[-1] / 10] + list(base) + [10.0]
    nearest = min(candidates, key=lambda v: abs(math.log10(v) - log_mantissa))

    snapped = nearest * 10 ** decade
    error_pct = (snapped - value) / value * 100
    return snapped, round(error_pct, 4)


def engineering_notation(value: float, unit: str = '', precision: int = 3) -> str:
    """
    Format a value with an SI prefix.

    Examples:
        engineering_notation(4700, 'Ω')       → '4.7kΩ'
        engineering_notation(2.9167e-4, 'H')  → '292µH'
        engineering_notation(0.1, 'Ω')        → '100mΩ'
    """
    if math.isnan(value) or math.isinf(value):
        return f"{value}{unit}"
    if value == 0:
        return f"0{unit}"

    exponent = math.floor(math.log10(abs(value)) / 3)
    exponent = max(min(exponent, max(_SI_PREFIXES)), min(_SI_PREFIXES))
    if exponent >= 0:
        scaled = value / 1000 ** exponent
    else:
        scaled = value * 1000 ** -exponent

    if scaled == int(scaled):
        digits = str(int(scaled))
    else:
        digits = f"{scaled:.{precision}g}"
    return f"{digits}{_SI_PREFIXES[exponent]}{unit}"
