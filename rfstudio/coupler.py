"""
Microstrip coupler and power-divider dimensioning.

Quick first-cut layout numbers for the four common planar hybrids. Only the
directional coupler derives its strip width and gap from the inputs; the
3 dB hybrids use strip widths proportional to the substrate height and
report nominal catalogue performance.

Effective permittivity (Hammerstad, wide-strip limit, h in mm):
    εeff = (εr + 1)/2 + (εr - 1)/2 · (1 + 12·h)^-0.5

Physical line length is quoted against a fixed FR4 permittivity
(√4.5), independent of the selected substrate.

References:
- Pozar, "Microwave Engineering" (4th ed.), §3.8 and ch. 7
- Wheeler, "Transmission-Line Properties of a Strip on a Dielectric Sheet
  on a Plane" (IEEE MTT, 1977)
"""

from dataclasses import dataclass
from typing import Callable, Dict

import numpy as np

from rfstudio.numeric import real
from rfstudio.tables import CouplerType, Substrate, dielectric_constant

SPEED_OF_LIGHT = 299_792_458.0      # m/s
LENGTH_REFERENCE_ER = 4.5           # permittivity used for physical length


@dataclass(frozen=True)
class CouplerSpec:
    coupler_type: CouplerType
    coupling_db: float = -20.0          # only used by the directional coupler
    frequency_mhz: float = 1000.0
    impedance: float = 50.0             # Ω
    substrate: Substrate = Substrate.FR4
    substrate_height_mm: float = 1.6

    def __post_init__(self):
        object.__setattr__(self, 'coupler_type', CouplerType(self.coupler_type))


@dataclass(frozen=True)
class CouplerResult:
    strip_width_mm: float
    strip_gap_mm: float
    electrical_length_deg: float
    coupling_db: float
    isolation_db: float
    return_loss_db: float
    vswr: float
    bandwidth_pct: float                # ± %
    dielectric_constant: float
    effective_dielectric_constant: float
    guided_wavelength_mm: float
    physical_length_mm: float
    center_frequency_mhz: float


@dataclass(frozen=True)
class _Layout:
    """Per-topology dimensions and nominal performance."""
    strip_width: float
    strip_gap: float
    electrical_length: float
    coupling: float
    isolation: float
    return_loss: float
    vswr: float
    bandwidth: float


def effective_dielectric_constant(er: float, height_mm: float) -> float:
    """Microstrip εeff from substrate εr and height (mm)."""
    er, h = real(er), real(height_mm)
    with np.errstate(all='ignore'):
        return float((er + 1) / 2 + (er - 1) / 2 * (1 + 12 * h) ** -0.5)


def physical_length_mm(frequency_mhz: float, electrical_length_deg: float) -> float:
    """
    Line length in mm for an electrical length at a frequency.

    Uses a fixed εr of 4.5 whatever the substrate; the effective
    permittivity of the chosen substrate is not applied here.
    """
    f = real(frequency_mhz)
    with np.errstate(all='ignore'):
        wavelength_m = 299.792 / (f * np.sqrt(LENGTH_REFERENCE_ER))
        return float(wavelength_m * real(electrical_length_deg) / 360 * 1000)


def _directional(spec: CouplerSpec, h, z0, er_eff) -> _Layout:
    # Wheeler-style width estimate; gap widens with weaker coupling
    a = np.exp(z0 * np.sqrt(er_eff + 1.41) / 87)
    coupling = real(spec.coupling_db)
    return _Layout(
        strip_width=h * (8 * a / (a + 2)),
        strip_gap=0.2 + np.abs(coupling) / 40,
        electrical_length=90,
        coupling=coupling,
        isolation=np.abs(coupling) + 20,
        return_loss=25,
        vswr=1.2,
        bandwidth=30,
    )


def _rat_race(spec: CouplerSpec, h, z0, er_eff) -> _Layout:
    # 3λ/4 ring
    return _Layout(h * 2.5, 0, 270, -3, 20, 20, 1.3, 25)


def _wilkinson(spec: CouplerSpec, h, z0, er_eff) -> _Layout:
    # 70.7 Ω quarter-wave arms
    return _Layout(h * 1.8, 0, 90, -3, 25, 30, 1.1, 40)


def _branch_line(spec: CouplerSpec, h, z0, er_eff) -> _Layout:
    return _Layout(h * 2.2, 0, 90, -3, 25, 25, 1.2, 35)


_LAYOUTS: Dict[CouplerType, Callable[..., _Layout]] = {
    CouplerType.DIRECTIONAL: _directional,
    CouplerType.RAT_RACE: _rat_race,
    CouplerType.WILKINSON: _wilkinson,
    CouplerType.BRANCH_LINE: _branch_line,
}
assert set(_LAYOUTS) == set(CouplerType), "every coupler type needs a layout"


def compute_coupler(spec: CouplerSpec) -> CouplerResult:
    """
    Dimension a microstrip coupler or divider.

    Args:
        spec: Coupler type, coupling (dB), frequency (MHz), line impedance (Ω),
              substrate and substrate height (mm).

    Returns:
        CouplerResult with dimensions in mm and nominal performance figures.
    """
    er = dielectric_constant(spec.substrate)
    er_eff = effective_dielectric_constant(er, spec.substrate_height_mm)
    h = real(spec.substrate_height_mm)
    z0 = real(spec.impedance)
    f_hz = real(spec.frequency_mhz) * 1e6

    with np.errstate(all='ignore'):
        guided_wavelength = SPEED_OF_LIGHT / (f_hz * np.sqrt(er_eff))
        layout = _LAYOUTS[spec.coupler_type](spec, h, z0, real(er_eff))

    return CouplerResult(
        strip_width_mm=float(layout.strip_width),
        strip_gap_mm=float(layout.strip_gap),
        electrical_length_deg=float(layout.electrical_length),
        coupling_db=float(layout.coupling),
        isolation_db=float(layout.isolation),
        return_loss_db=float(layout.return_loss),
        vswr=float(layout.vswr),
        bandwidth_pct=float(layout.bandwidth),
        dielectric_constant=er,
        effective_dielectric_constant=er_eff,
        guided_wavelength_mm=float(guided_wavelength * 1000),     # m → mm
        physical_length_mm=physical_length_mm(spec.frequency_mhz, layout.electrical_length),
        center_frequency_mhz=float(spec.frequency_mhz),
    )
