"""
Tests for the material and geometry lookup tables.

Validates:
1. Known keys return their table entries
2. Unknown keys fall back to the default and log a warning
3. Tables are read-only
"""

import logging

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from rfstudio.tables import (
    CORE_MATERIALS,
    CORE_SIZES,
    DIELECTRIC_CONSTANTS,
    CoreMaterial,
    CoreSize,
    DeviceType,
    Substrate,
    core_geometry,
    dielectric_constant,
    steinmetz_coefficients,
    thermal_resistance,
)


class TestDielectricConstants:

    @pytest.mark.parametrize('substrate,er', [
        (Substrate.FR4, 4.5),
        (Substrate.ROGERS_4003, 3.55),
        (Substrate.ALUMINA, 9.8),
        (Substrate.PTFE, 2.1),
        (Substrate.DUROID_5880, 2.2),
    ])
    def test_known(self, substrate, er):
        assert dielectric_constant(substrate) == er

    def test_string_key(self):
        assert dielectric_constant('Rogers4003') == 3.55

    def test_unknown_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING, logger='rfstudio.tables'):
            assert dielectric_constant('Kapton') == 4.5
        assert 'Kapton' in caplog.text


class TestCores:

    def test_sizes(self):
        assert core_geometry(CoreSize.E3230).ae_mm2 == 160
        assert core_geometry(CoreSize.E4728).aw_mm2 == 280
        assert core_geometry(CoreSize.E5542).al_nh == 4100

    def test_unknown_size_is_e3230(self, caplog):
        with caplog.at_level(logging.WARNING, logger='rfstudio.tables'):
            assert core_geometry('EE13') == CORE_SIZES['E3230']
        assert 'EE13' in caplog.text

    def test_materials(self):
        ferrite = steinmetz_coefficients(CoreMaterial.FERRITE)
        assert (ferrite.k, ferrite.alpha, ferrite.beta) == (0.0012, 1.24, 2.1)
        nano = steinmetz_coefficients(CoreMaterial.NANOCRYSTALLINE)
        assert (nano.k, nano.alpha, nano.beta) == (0.0005, 1.4, 2.0)

    def test_unknown_material_is_ferrite(self):
        assert steinmetz_coefficients('sendust') == CORE_MATERIALS['ferrite']


class TestThermalResistance:

    def test_families(self):
        assert thermal_resistance(DeviceType.BJT) == 150
        assert thermal_resistance(DeviceType.FET) == 200
        assert thermal_resistance(DeviceType.HEMT) == 300

    def test_ldmos_default_without_warning(self, caplog):
        """LDMOS is a valid choice that simply has no table entry."""
        with caplog.at_level(logging.WARNING, logger='rfstudio.tables'):
            assert thermal_resistance(DeviceType.LDMOS) == 100
        assert not caplog.records

    def test_unknown_family_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger='rfstudio.tables'):
            assert thermal_resistance('SiC') == 100
        assert 'SiC' in caplog.text


class TestReadOnly:

    def test_tables_cannot_be_modified(self):
        with pytest.raises(TypeError):
            DIELECTRIC_CONSTANTS['FR4'] = 4.3
        with pytest.raises(TypeError):
            CORE_SIZES['E3230'] = None
