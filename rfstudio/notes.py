"""
Design notes and threshold warnings for calculator results.

Each calculator carries a static advisory note. check_design() turns the
limits quoted in those notes into concrete warnings for a given result.
"""

from dataclasses import dataclass
from typing import Dict, List

import numpy as np

from rfstudio.coupler import CouplerResult, CouplerSpec
from rfstudio.magnetics import MagneticResult, MagneticSpec
from rfstudio.power_supply import ConverterResult, ConverterSpec
from rfstudio.transistor import TransistorResult, TwoPortDevice

MAX_JUNCTION_TEMP_C = 150.0
MAX_WINDING_TEMP_C = 100.0
SKIN_EFFECT_FREQ_HZ = 100_000.0
MIN_SATURATION_MARGIN_PCT = 20.0
MIN_FEATURE_MM = 0.1


DESIGN_NOTES: Dict[str, str] = {
    'power_supply': (
        "Values are calculated using standard power electronics formulas. "
        "Consider component tolerances, temperature coefficients, and safety margins "
        "in your final design. Always verify calculations with simulation before prototyping."
    ),
    'rf_transistor': (
        "Ensure proper heat sinking if junction temperature exceeds 150°C. "
        "For K-factor < 1, additional stability analysis and compensation networks "
        "may be required."
    ),
    'coupler': (
        "Consider PCB fabrication tolerances (±10%) for strip width and gap. "
        "Use ground plane on the opposite side and via stitching for proper grounding. "
        "Verify performance with EM simulation before fabrication."
    ),
    'magnetics': (
        "Ensure adequate core saturation margin (>20%). "
        "Monitor operating temperature (<100°C for most applications). "
        "Consider skin effect at high frequencies (>100kHz). "
        "Use Litz wire for better efficiency at high frequencies."
    ),
}


@dataclass(frozen=True)
class DesignWarning:
    code: str
    message: str


def design_notes(calculator: str) -> str:
    """Static advisory note for a calculator."""
    if calculator not in DESIGN_NOTES:
        raise ValueError(f"Unknown calculator '{calculator}'. Available: {list(DESIGN_NOTES)}")
    return DESIGN_NOTES[calculator]


def _converter_warnings(spec: ConverterSpec, r: ConverterResult) -> List[DesignWarning]:
    warnings = []
    if not 0 < r.duty_cycle < 1:
        warnings.append(DesignWarning(
            'duty_cycle_range',
            f"Duty cycle {r.duty_cycle:.3f} is outside 0-1; "
            f"{spec.topology.value} cannot produce {spec.output_voltage} V from {spec.input_voltage} V",
        ))
    if not r.inductance_uh > 0:
        warnings.append(DesignWarning('inductance', "Computed inductance is not positive"))
    return warnings


def _transistor_warnings(device: TwoPortDevice, r: TransistorResult) -> List[DesignWarning]:
    warnings = []
    if not r.is_unconditionally_stable:
        warnings.append(DesignWarning(
            'stability',
            f"K = {r.stability_factor:.3f}: potentially unstable, "
            "check stability circles and add stabilization",
        ))
    if r.junction_temperature > MAX_JUNCTION_TEMP_C:
        warnings.append(DesignWarning(
            'junction_temperature',
            f"Junction temperature {r.junction_temperature:.1f}°C exceeds "
            f"{MAX_JUNCTION_TEMP_C:.0f}°C, heat sinking required",
        ))
    return warnings


def _coupler_warnings(spec: CouplerSpec, r: CouplerResult) -> List[DesignWarning]:
    warnings = []
    if r.strip_width_mm < MIN_FEATURE_MM:
        warnings.append(DesignWarning(
            'strip_width',
            f"Strip width {r.strip_width_mm:.3f} mm is below typical PCB etching limits",
        ))
    if 0 < r.strip_gap_mm < MIN_FEATURE_MM:
        warnings.append(DesignWarning(
            'strip_gap',
            f"Strip gap {r.strip_gap_mm:.3f} mm is below typical PCB etching limits",
        ))
    return warnings


def _magnetics_warnings(spec: MagneticSpec, r: MagneticResult) -> List[DesignWarning]:
    warnings = []
    if not r.saturation_margin_pct >= MIN_SATURATION_MARGIN_PCT:
        warnings.append(DesignWarning(
            'saturation_margin',
            f"Saturation margin {r.saturation_margin_pct:.1f}% is below "
            f"{MIN_SATURATION_MARGIN_PCT:.0f}%",
        ))
    if r.temperature >= MAX_WINDING_TEMP_C:
        warnings.append(DesignWarning(
            'temperature',
            f"Operating temperature {r.temperature:.1f}°C exceeds {MAX_WINDING_TEMP_C:.0f}°C",
        ))
    if spec.frequency > SKIN_EFFECT_FREQ_HZ:
        warnings.append(DesignWarning(
            'skin_effect',
            "Above 100 kHz skin effect raises copper loss; consider Litz wire",
        ))
    if np.isfinite(r.secondary_turns) and r.secondary_turns < 1:
        warnings.append(DesignWarning('secondary_turns', "Secondary winding rounds to fewer than one turn"))
    return warnings


_CHECKS = {
    ConverterResult: _converter_warnings,
    TransistorResult: _transistor_warnings,
    CouplerResult: _coupler_warnings,
    MagneticResult: _magnetics_warnings,
}


def check_design(spec, result) -> List[DesignWarning]:
    """
    Warnings for a computed design.

    Args:
        spec: Engine input the result was computed from (ConverterSpec,
              TwoPortDevice, CouplerSpec or MagneticSpec).
        result: Output of the matching compute_* function.

    Returns:
        List of DesignWarning, empty when nothing is flagged.
    """
    try:
        check = _CHECKS[type(result)]
    except KeyError:
        raise ValueError(f"No design checks for {type(result).__name__}") from None
    return check(spec, result)
