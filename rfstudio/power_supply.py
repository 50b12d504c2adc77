"""
Switch-mode converter component sizing.

First-pass values for buck, boost, flyback and forward converters from the
usual continuous-conduction design equations:

    Buck:    D = Vout/Vin        L = (Vin - Vout)·D / (ΔIL·f)
    Boost:   D = 1 - Vin/Vout    L = Vin·D / (ΔIL·f)
    Isolated topologies run at a fixed D = 0.5 with the boost-form inductor.

    Cout = ΔIL / (8·f·ΔVo)
    Cin  = Iout·D / (f·Vin·0.01)     (1% input ripple)

References:
- Erickson & Maksimovic, "Fundamentals of Power Electronics" (2nd ed.)
- TI SLVA477, "Basic Calculation of a Buck Converter's Power Stage"
"""

from dataclasses import dataclass
from typing import Dict

import numpy as np

from rfstudio.numeric import real
from rfstudio.tables import Topology

# Feedback divider: regulator reference and fixed bottom resistor
V_REF = 1.25            # V
FEEDBACK_R2 = 10_000.0  # Ω

CURRENT_SENSE_R = 0.1   # Ω, typical, not derived

# Loss model constants
CONDUCTION_RESISTANCE = 0.1     # Ω, lumped switch + inductor resistance
SWITCHING_COEFFICIENT = 1e-9    # s, effective overlap time per transition
INPUT_RIPPLE_FRACTION = 0.01


@dataclass(frozen=True)
class ConverterSpec:
    topology: Topology
    input_voltage: float        # V
    output_voltage: float       # V
    output_current: float       # A
    frequency: float            # Hz
    ripple_percent: float       # % of output current / voltage

    def __post_init__(self):
        # Unknown topologies are rejected here; the engine dispatches on the enum
        object.__setattr__(self, 'topology', Topology(self.topology))


@dataclass(frozen=True)
class ConverterResult:
    inductance_uh: float
    output_capacitance_uf: float
    input_capacitance_uf: float
    feedback_r1: float          # Ω
    feedback_r2: float          # Ω
    current_sense_r: float      # Ω
    efficiency: float           # %
    ripple_voltage: float       # V
    ripple_current: float       # A
    duty_cycle: float
    output_power: float         # W
    conduction_loss: float      # W
    switching_loss: float       # W


def _buck_duty(vin, vout):
    return vout / vin


def _boost_duty(vin, vout):
    return 1 - vin / vout


def _isolated_duty(vin, vout):
    return np.float64(0.5)


def _buck_inductance(vin, vout, duty, delta_il, f):
    return (vin - vout) * duty / (delta_il * f)


def _boost_inductance(vin, vout, duty, delta_il, f):
    return vin * duty / (delta_il * f)


# One entry per topology: (duty-cycle rule, inductor rule)
_TOPOLOGY_RULES: Dict[Topology, tuple] = {
    Topology.BUCK: (_buck_duty, _buck_inductance),
    Topology.BOOST: (_boost_duty, _boost_inductance),
    Topology.FLYBACK: (_isolated_duty, _boost_inductance),
    Topology.FORWARD: (_isolated_duty, _boost_inductance),
}
assert set(_TOPOLOGY_RULES) == set(Topology), "every topology needs sizing rules"


def compute_converter(spec: ConverterSpec) -> ConverterResult:
    """
    Size the power stage of a switching converter.

    Never raises for numeric input: a zero frequency or voltage propagates
    as inf/nan into the affected fields.

    Args:
        spec: Converter requirements (V, A, Hz, %).

    Returns:
        ConverterResult with L in µH and capacitances in µF.
    """
    vin = real(spec.input_voltage)
    vout = real(spec.output_voltage)
    iout = real(spec.output_current)
    f = real(spec.frequency)
    ripple = real(spec.ripple_percent) / 100
    duty_rule, inductor_rule = _TOPOLOGY_RULES[spec.topology]

    with np.errstate(all='ignore'):
        d = duty_rule(vin, vout)

        delta_il = iout * ripple
        inductance = inductor_rule(vin, vout, d, delta_il, f)

        delta_vo = vout * ripple
        c_out = delta_il / (8 * f * delta_vo)
        c_in = iout * d / (f * vin * INPUT_RIPPLE_FRACTION)

        r1 = FEEDBACK_R2 * (vout / V_REF - 1)

        p_out = vout * iout
        conduction = iout ** 2 * CONDUCTION_RESISTANCE
        switching = 0.5 * vin * iout * SWITCHING_COEFFICIENT * f
        efficiency = p_out / (p_out + conduction + switching) * 100

        # H → µH, F → µF
        inductance, c_out, c_in = inductance * 1e6, c_out * 1e6, c_in * 1e6

    return ConverterResult(
        inductance_uh=float(inductance),
        output_capacitance_uf=float(c_out),
        input_capacitance_uf=float(c_in),
        feedback_r1=float(r1),
        feedback_r2=FEEDBACK_R2,
        current_sense_r=CURRENT_SENSE_R,
        efficiency=float(efficiency),
        ripple_voltage=float(delta_vo),
        ripple_current=float(delta_il),
        duty_cycle=float(d),
        output_power=float(p_out),
        conduction_loss=float(conduction),
        switching_loss=float(switching),
    )
