"""
Transformer winding and loss design.

Turns from Faraday's law for a sinusoidal winding voltage,

    V = 4.44 · f · N · Bmax · Ae

wire size from a fixed current density, core loss from the Steinmetz
equation and copper loss from the DC winding resistance. Losses feed a
single lumped thermal resistance to estimate the operating temperature.

Inductor design is not implemented.

References:
- McLyman, "Transformer and Inductor Design Handbook" (4th ed.)
- Steinmetz, "On the Law of Hysteresis" (AIEE, 1892)
"""

import logging
from dataclasses import dataclass
from typing import Union

import numpy as np

from rfstudio.numeric import AMBIENT_TEMP_C, as_count, real, round_half_up
from rfstudio.tables import (
    CoreMaterial,
    CoreSize,
    MagneticKind,
    core_geometry,
    steinmetz_coefficients,
)

logger = logging.getLogger(__name__)

CURRENT_DENSITY = 4.0           # A/mm²
AWG_36_AREA = 0.0507            # mm², area reference for the gauge estimate
MIN_AWG = 10

COPPER_RESISTIVITY = 1.7e-8     # Ω·m
MEAN_TURN_LENGTH = 0.02         # m
# Core volume estimate from the effective area: Ae(mm²) · 20 / 1000
CORE_PATH_FACTOR = 20 / 1000

THERMAL_RESISTANCE = 40.0       # °C/W, small ferrite transformers


@dataclass(frozen=True)
class MagneticSpec:
    kind: MagneticKind = MagneticKind.TRANSFORMER
    core_material: CoreMaterial = CoreMaterial.FERRITE
    core_size: CoreSize = CoreSize.E3230
    frequency: float = 100_000.0        # Hz
    primary_voltage: float = 12.0       # V
    secondary_voltage: float = 5.0      # V
    power: float = 10.0                 # W
    max_flux_density: float = 0.3       # T

    def __post_init__(self):
        object.__setattr__(self, 'kind', MagneticKind(self.kind))


@dataclass(frozen=True)
class MagneticResult:
    primary_turns: Union[int, float]
    secondary_turns: Union[int, float]
    turns_ratio: float                  # N1/N2
    primary_current: float              # A
    secondary_current: float            # A
    wire_gauge_primary: Union[int, float]       # AWG, never below MIN_AWG
    wire_gauge_secondary: Union[int, float]
    flux_density: float                 # T, achieved with rounded turns
    saturation_margin_pct: float        # (Bmax - B) / Bmax
    core_loss: float                    # W
    copper_loss: float                  # W
    total_loss: float                   # W
    efficiency: float                   # %
    temperature: float                  # °C


def awg_from_area(area_mm2: float) -> Union[int, float]:
    """
    Approximate AWG for a copper cross-section, floored at AWG 10.

    Raw estimate: round(36 - 20·log10(√(A / 0.0507))). Heavier conductors
    than AWG 10 are still reported as 10.
    """
    with np.errstate(all='ignore'):
        gauge = round_half_up(36 - 20 * np.log10(np.sqrt(real(area_mm2) / AWG_36_AREA)))
        return as_count(np.maximum(gauge, MIN_AWG))


def winding_resistance(turns: float, area_mm2: float) -> float:
    """DC resistance of a winding (Ω) from turns and wire area (mm²)."""
    with np.errstate(all='ignore'):
        return float(COPPER_RESISTIVITY * MEAN_TURN_LENGTH * real(turns) / (real(area_mm2) * 1e-6))


def compute_magnetics(spec: MagneticSpec) -> MagneticResult:
    """
    Design a two-winding transformer.

    Args:
        spec: Core choice, frequency (Hz), winding voltages (V), power (W)
              and flux limit (T).

    Returns:
        MagneticResult. Turns are rounded half up; degenerate inputs give
        inf/nan fields.

    Raises:
        NotImplementedError: for MagneticKind.INDUCTOR.
    """
    if spec.kind is MagneticKind.INDUCTOR:
        raise NotImplementedError("Inductor design is not implemented")

    core = core_geometry(spec.core_size)
    steinmetz = steinmetz_coefficients(spec.core_material)

    f = real(spec.frequency)
    v_pri = real(spec.primary_voltage)
    v_sec = real(spec.secondary_voltage)
    power = real(spec.power)
    b_max = real(spec.max_flux_density)
    ae = real(core.ae_mm2) * 1e-6   # mm² → m²

    with np.errstate(all='ignore'):
        n_pri = round_half_up(v_pri / (4.44 * f * b_max * ae))
        n_sec = round_half_up(n_pri * (v_sec / v_pri))
        turns_ratio = n_pri / n_sec

        i_pri = power / v_pri
        i_sec = power / v_sec
        area_pri = i_pri / CURRENT_DENSITY     # mm²
        area_sec = i_sec / CURRENT_DENSITY

        flux = v_pri / (4.44 * f * n_pri * ae)
        margin = (b_max - flux) / b_max * 100
        core_loss = (
            steinmetz.k
            * (f / 1000) ** steinmetz.alpha
            * flux ** steinmetz.beta
            * (core.ae_mm2 * CORE_PATH_FACTOR)
        )

        copper_loss = (
            i_pri ** 2 * winding_resistance(n_pri, area_pri)
            + i_sec ** 2 * winding_resistance(n_sec, area_sec)
        )

        total_loss = core_loss + copper_loss
        efficiency = power / (power + total_loss) * 100
        temperature = AMBIENT_TEMP_C + total_loss * THERMAL_RESISTANCE

    logger.debug("Transformer %s/%s: N1=%s N2=%s B=%.4gT", spec.core_size, spec.core_material,
                 n_pri, n_sec, flux)

    return MagneticResult(
        primary_turns=as_count(n_pri),
        secondary_turns=as_count(n_sec),
        turns_ratio=float(turns_ratio),
        primary_current=float(i_pri),
        secondary_current=float(i_sec),
        wire_gauge_primary=awg_from_area(area_pri),
        wire_gauge_secondary=awg_from_area(area_sec),
        flux_density=float(flux),
        saturation_margin_pct=float(margin),
        core_loss=float(core_loss),
        copper_loss=float(copper_loss),
        total_loss=float(total_loss),
        efficiency=float(efficiency),
        temperature=float(temperature),
    )
