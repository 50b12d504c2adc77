"""
Two-port stability and gain analysis from S-parameters.

Rollett stability factor and maximum gain of an RF transistor at a single
frequency point:

    Δ   = S11·S22 - S12·S21
    K   = (1 - |S11|² - |S22|² + |Δ|²) / (2·|S12|·|S21|)
    MAG = |S21|/|S12| · (K - √(K² - 1))      when K > 1
    MSG = |S21|/|S12|                        otherwise

Port impedances use the legacy closed form below, which is not the
bilinear transform Z0·(1+Γ)/(1-Γ):

    Re = Z0·(1 - |Γ|²)/(1 - Γr)² + Γi²
    Im = Z0·(-2·Γi)/(1 - Γr)² + Γi²

Both agree for a purely real Γ. The exact bilinear values are reported
next to the legacy ones so the two can be compared.

References:
- Gonzalez, "Microwave Transistor Amplifiers" (2nd ed.), ch. 3
- Pozar, "Microwave Engineering" (4th ed.), §12.3
"""

from dataclasses import dataclass

import numpy as np

from rfstudio.numeric import AMBIENT_TEMP_C, Z0_REFERENCE, cplx, db20, real
from rfstudio.tables import DeviceType, thermal_resistance

STABLE = 'Unconditionally Stable'
POTENTIALLY_UNSTABLE = 'Potentially Unstable'


@dataclass(frozen=True)
class TwoPortDevice:
    device_type: DeviceType
    s11: complex
    s12: complex
    s21: complex
    s22: complex
    frequency: float = 1000.0           # MHz, informational
    power_dissipation: float = 1.0      # W


@dataclass(frozen=True)
class TransistorResult:
    stability_factor: float
    max_gain_db: float
    gain_kind: str                      # 'MAG' or 'MSG'
    delta_magnitude: float
    input_impedance: complex            # Ω, legacy closed form
    output_impedance: complex
    input_impedance_bilinear: complex   # Ω, Z0·(1+Γ)/(1-Γ)
    output_impedance_bilinear: complex
    power_gain_db: float
    thermal_resistance: float           # °C/W
    junction_temperature: float         # °C

    @property
    def is_unconditionally_stable(self) -> bool:
        return self.stability_factor > 1

    @property
    def stability_status(self) -> str:
        return STABLE if self.is_unconditionally_stable else POTENTIALLY_UNSTABLE


def legacy_port_impedance(gamma: complex, z0: float = Z0_REFERENCE) -> complex:
    """
    Port impedance from a reflection coefficient, legacy closed form.

    The Γi² term is added after the division rather than appearing in the
    denominator |1 - Γ|².
    """
    gamma = cplx(gamma)
    gr, gi = gamma.real, gamma.imag
    with np.errstate(all='ignore'):
        denominator = (1 - gr) ** 2
        r = z0 * (1 - abs(gamma) ** 2) / denominator + gi ** 2
        x = z0 * (-2 * gi) / denominator + gi ** 2
    return complex(r, x)


def bilinear_port_impedance(gamma: complex, z0: float = Z0_REFERENCE) -> complex:
    """Port impedance Z0·(1+Γ)/(1-Γ)."""
    gamma = cplx(gamma)
    gr, gi = gamma.real, gamma.imag
    with np.errstate(all='ignore'):
        # (1+Γ)/(1-Γ) expanded so Γ = 1 gives inf/nan instead of raising
        denominator = (1 - gr) ** 2 + gi ** 2
        r = z0 * (1 - gr ** 2 - gi ** 2) / denominator
        x = z0 * (2 * gi) / denominator
    return complex(r, x)


def compute_transistor_stability(device: TwoPortDevice) -> TransistorResult:
    """
    Analyze stability, gain and thermal operating point of a two-port device.

    Args:
        device: S-parameters (complex, 50 Ω), device family and dissipation (W).

    Returns:
        TransistorResult. Gains are in dB; S12 = 0 or S21 = 0 give inf/nan
        fields rather than an exception.
    """
    s11, s12, s21, s22 = (cplx(s) for s in (device.s11, device.s12, device.s21, device.s22))
    s11_mag, s12_mag, s21_mag, s22_mag = (np.abs(s) for s in (s11, s12, s21, s22))

    delta = s11 * s22 - s12 * s21
    delta_mag = np.abs(delta)

    with np.errstate(all='ignore'):
        k = (1 - s11_mag ** 2 - s22_mag ** 2 + delta_mag ** 2) / (2 * s12_mag * s21_mag)

        if k > 1:
            gain = s21_mag / s12_mag * (k - np.sqrt(k ** 2 - 1))
            gain_kind = 'MAG'
        else:
            gain = s21_mag / s12_mag
            gain_kind = 'MSG'

        max_gain_db = db20(gain)
        # Reported as 20·log10|S21|, not 10·log10|S21|²
        power_gain_db = db20(s21_mag)

    rth = thermal_resistance(device.device_type)
    tj = AMBIENT_TEMP_C + real(device.power_dissipation) * rth

    return TransistorResult(
        stability_factor=float(k),
        max_gain_db=float(max_gain_db),
        gain_kind=gain_kind,
        delta_magnitude=float(delta_mag),
        input_impedance=legacy_port_impedance(s11),
        output_impedance=legacy_port_impedance(s22),
        input_impedance_bilinear=bilinear_port_impedance(s11),
        output_impedance_bilinear=bilinear_port_impedance(s22),
        power_gain_db=float(power_gain_db),
        thermal_resistance=rth,
        junction_temperature=float(tj),
    )
