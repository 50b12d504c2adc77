"""
Tests for converter power-stage sizing.

Validates:
1. Duty cycle per topology
2. Inductor, capacitor and feedback values for a reference buck design
3. Loss and efficiency model
4. Degenerate inputs give inf/nan instead of raising
"""

import math

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from rfstudio.power_supply import (
    ConverterSpec,
    compute_converter,
    FEEDBACK_R2,
    CURRENT_SENSE_R,
)
from rfstudio.tables import Topology


# 12 V → 5 V, 2 A, 100 kHz, 5% ripple
BUCK = ConverterSpec(
    topology=Topology.BUCK,
    input_voltage=12.0,
    output_voltage=5.0,
    output_current=2.0,
    frequency=100_000.0,
    ripple_percent=5.0,
)


def _spec(**overrides):
    params = dict(
        topology=BUCK.topology,
        input_voltage=BUCK.input_voltage,
        output_voltage=BUCK.output_voltage,
        output_current=BUCK.output_current,
        frequency=BUCK.frequency,
        ripple_percent=BUCK.ripple_percent,
    )
    params.update(overrides)
    return ConverterSpec(**params)


class TestDutyCycle:
    """Duty cycle selection by topology."""

    @pytest.mark.parametrize('vin,vout', [(12, 5), (48, 3.3), (5, 5), (100, 1)])
    def test_buck(self, vin, vout):
        """Buck: D = Vout/Vin."""
        result = compute_converter(_spec(input_voltage=vin, output_voltage=vout))
        assert result.duty_cycle == vout / vin

    def test_boost(self):
        """Boost: D = 1 - Vin/Vout."""
        result = compute_converter(_spec(topology=Topology.BOOST, input_voltage=5.0, output_voltage=12.0))
        assert result.duty_cycle == pytest.approx(1 - 5.0 / 12.0)

    @pytest.mark.parametrize('topology', [Topology.FLYBACK, Topology.FORWARD])
    def test_isolated_fixed(self, topology):
        """Flyback and forward run at D = 0.5 whatever the voltages."""
        result = compute_converter(_spec(topology=topology, input_voltage=48.0, output_voltage=3.3))
        assert result.duty_cycle == 0.5


class TestBuckReference:
    """The 12 V → 5 V reference design."""

    def test_ripple_targets(self):
        result = compute_converter(BUCK)
        assert result.ripple_current == pytest.approx(0.1)
        assert result.ripple_voltage == pytest.approx(0.25)

    def test_inductance(self):
        """L = (Vin - Vout)·D / (ΔIL·f) ≈ 291.67 µH."""
        result = compute_converter(BUCK)
        expected_h = (12 - 5) * (5 / 12) / (0.1 * 100_000)
        assert expected_h == pytest.approx(2.9167e-4, rel=1e-4)
        assert result.inductance_uh == pytest.approx(291.67, abs=0.01)

    def test_output_capacitance(self):
        """Cout = ΔIL / (8·f·ΔVo) = 0.5 µF."""
        result = compute_converter(BUCK)
        assert result.output_capacitance_uf == pytest.approx(0.5)

    def test_input_capacitance(self):
        """Cin = Iout·D / (f·Vin·0.01)."""
        result = compute_converter(BUCK)
        expected_f = 2.0 * (5 / 12) / (100_000 * 12.0 * 0.01)
        assert result.input_capacitance_uf == pytest.approx(expected_f * 1e6)

    def test_feedback_divider(self):
        """R1 = R2·(Vout/1.25 - 1) with R2 = 10 kΩ."""
        result = compute_converter(BUCK)
        assert result.feedback_r2 == FEEDBACK_R2 == 10_000
        assert result.feedback_r1 == pytest.approx(30_000)

    def test_feedback_r1_zero_at_reference(self):
        """Vout equal to the 1.25 V reference needs no top resistor."""
        result = compute_converter(_spec(output_voltage=1.25))
        assert result.feedback_r1 == 0

    def test_current_sense_fixed(self):
        result = compute_converter(BUCK)
        assert result.current_sense_r == CURRENT_SENSE_R == 0.1

    def test_efficiency(self):
        """η = Pout / (Pout + Iout²·0.1 + 0.5·Vin·Iout·1e-9·f)."""
        result = compute_converter(BUCK)
        assert result.conduction_loss == pytest.approx(0.4)
        assert result.switching_loss == pytest.approx(1.2e-3)
        assert result.output_power == pytest.approx(10.0)
        assert result.efficiency == pytest.approx(10.0 / 10.4012 * 100)


class TestOtherTopologies:

    def test_boost_inductance(self):
        """Non-buck topologies use L = Vin·D / (ΔIL·f)."""
        result = compute_converter(_spec(
            topology=Topology.BOOST, input_voltage=5.0, output_voltage=12.0,
            output_current=1.0, ripple_percent=10.0,
        ))
        expected_h = 5.0 * (1 - 5 / 12) / (0.1 * 100_000)
        assert result.inductance_uh == pytest.approx(expected_h * 1e6)

    def test_flyback_inductance(self):
        result = compute_converter(_spec(topology=Topology.FLYBACK))
        expected_h = 12.0 * 0.5 / (0.1 * 100_000)
        assert result.inductance_uh == pytest.approx(expected_h * 1e6)

    def test_topology_from_string(self):
        """Topology accepts its string value."""
        spec = _spec(topology='forward')
        assert spec.topology is Topology.FORWARD

    def test_unknown_topology_raises(self):
        with pytest.raises(ValueError):
            _spec(topology='sepic')


class TestDegenerateInputs:
    """The engine is total: no exceptions for any numeric input."""

    def test_zero_frequency_gives_infinity(self):
        result = compute_converter(_spec(frequency=0.0))
        assert math.isinf(result.inductance_uh)
        assert math.isinf(result.output_capacitance_uf)
        assert math.isinf(result.input_capacitance_uf)
        assert result.switching_loss == 0

    def test_zero_input_voltage(self):
        result = compute_converter(_spec(input_voltage=0.0))
        assert math.isinf(result.duty_cycle)

    def test_zero_current_efficiency_nan(self):
        """No output power and no losses: 0/0."""
        result = compute_converter(_spec(output_current=0.0))
        assert math.isnan(result.efficiency)


class TestIdempotence:

    def test_repeat_calls_identical(self):
        assert compute_converter(BUCK) == compute_converter(BUCK)
