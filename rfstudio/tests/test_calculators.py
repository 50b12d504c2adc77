"""
Tests for the calculator registry.

Validates:
1. Registry listing and lookup
2. run_calculator end to end for all four calculators
3. BOM series taken from settings or the environment
"""

import pytest
import sys
import os

from pydantic import ValidationError

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from rfstudio.calculators import CALCULATORS, get_calculator, list_calculators, run_calculator
from rfstudio.config import Settings


class TestRegistry:

    def test_list(self):
        names = [c['name'] for c in list_calculators()]
        assert names == ['power_supply', 'rf_transistor', 'coupler', 'magnetics']

    def test_inputs_include_defaults(self):
        power = next(c for c in list_calculators() if c['name'] == 'power_supply')
        inputs = {i['name']: i for i in power['inputs']}
        assert inputs['input_voltage']['default'] == 12.0
        assert inputs['input_voltage']['description'] == 'Input voltage (V)'
        assert 'topology' in inputs

    def test_get(self):
        calc = get_calculator('coupler')
        assert calc.title == 'Coupler & Divider'
        assert not calc.has_bom

    def test_get_unknown(self):
        with pytest.raises(ValueError):
            get_calculator('antenna')

    def test_only_power_supply_has_bom(self):
        assert [name for name, c in CALCULATORS.items() if c.has_bom] == ['power_supply']


class TestRunCalculator:

    def test_power_supply_defaults(self):
        output = run_calculator('power_supply', settings=Settings())
        assert output['calculator'] == 'power_supply'
        assert output['result'].inductance_uh == pytest.approx(291.67, abs=0.01)
        assert output['rows'][0].label == 'Inductor'
        assert output['warnings'] == []
        assert 'simulation' in output['notes']
        assert output['bom'][0]['e_series_snapped']['series'] == 'E24'

    def test_bom_series_from_settings(self):
        output = run_calculator('power_supply', settings=Settings(e_series='E12'))
        assert output['bom'][0]['e_series_snapped']['actual'] == pytest.approx(270e-6)

    def test_bom_series_from_environment(self, monkeypatch):
        monkeypatch.setenv('RFSTUDIO_E_SERIES', 'e96')
        output = run_calculator('power_supply')
        assert output['bom'][0]['e_series_snapped']['series'] == 'E96'

    def test_transistor(self):
        output = run_calculator('rf_transistor', {'device_type': 'HEMT', 'power_dissipation': 0.2})
        assert output['result'].thermal_resistance == 300
        assert output['result'].junction_temperature == pytest.approx(85.0)
        assert 'bom' not in output

    def test_coupler(self):
        output = run_calculator('coupler', {'coupler_type': 'wilkinson'})
        assert output['result'].coupling_db == -3
        assert output['spec'].coupler_type.value == 'wilkinson'

    def test_magnetics(self):
        output = run_calculator('magnetics', {'frequency': 10_000.0})
        assert output['result'].primary_turns == 6
        assert [w.code for w in output['warnings']] == ['saturation_margin']

    def test_inductor_not_implemented(self):
        with pytest.raises(NotImplementedError):
            run_calculator('magnetics', {'kind': 'inductor'})

    def test_invalid_params(self):
        with pytest.raises(ValidationError):
            run_calculator('power_supply', {'input_voltage': 0})

    def test_unknown_calculator(self):
        with pytest.raises(ValueError):
            run_calculator('antenna')
