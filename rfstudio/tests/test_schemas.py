"""
Tests for the pydantic input forms.

Validates:
1. Form defaults build the default engine specs
2. Range validation and unknown-field rejection
"""

import pytest
import sys
import os

from pydantic import ValidationError

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from rfstudio.coupler import CouplerSpec
from rfstudio.magnetics import MagneticSpec
from rfstudio.power_supply import ConverterSpec
from rfstudio.schemas import ConverterForm, CouplerForm, MagneticsForm, TransistorForm
from rfstudio.tables import CouplerType, DeviceType, Substrate, Topology


class TestDefaults:

    def test_converter(self):
        assert ConverterForm().to_spec() == ConverterSpec(Topology.BUCK, 12.0, 5.0, 2.0, 100_000.0, 5.0)

    def test_transistor(self):
        device = TransistorForm().to_spec()
        assert device.device_type is DeviceType.BJT
        assert device.s11 == 0.5 - 0.3j
        assert device.s21 == 3.0 + 1.5j
        assert device.s12 == 0.05 + 0.02j
        assert device.s22 == 0.4 - 0.6j
        assert device.power_dissipation == 1.0

    def test_coupler(self):
        assert CouplerForm().to_spec() == CouplerSpec(CouplerType.DIRECTIONAL)

    def test_magnetics(self):
        assert MagneticsForm().to_spec() == MagneticSpec()


class TestValidation:

    def test_enum_from_string(self):
        form = ConverterForm(topology='flyback')
        assert form.topology is Topology.FLYBACK
        assert CouplerForm(substrate='Alumina').substrate is Substrate.ALUMINA

    @pytest.mark.parametrize('field,value', [
        ('input_voltage', 0),
        ('output_current', -1),
        ('frequency', 0),
        ('ripple_percent', 150),
    ])
    def test_converter_ranges(self, field, value):
        with pytest.raises(ValidationError):
            ConverterForm(**{field: value})

    def test_unknown_topology(self):
        with pytest.raises(ValidationError):
            ConverterForm(topology='cuk')

    def test_positive_coupling_rejected(self):
        with pytest.raises(ValidationError):
            CouplerForm(coupling_db=10)

    def test_flux_limit(self):
        with pytest.raises(ValidationError):
            MagneticsForm(max_flux_density=3.0)

    def test_negative_dissipation(self):
        with pytest.raises(ValidationError):
            TransistorForm(power_dissipation=-0.5)

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            ConverterForm(inductance=100)

    def test_frozen(self):
        form = ConverterForm()
        with pytest.raises(ValidationError):
            form.input_voltage = 24.0
