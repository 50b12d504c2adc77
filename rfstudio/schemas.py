"""Pydantic input forms for the calculators, with the default design values."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from rfstudio.coupler import CouplerSpec
from rfstudio.magnetics import MagneticSpec
from rfstudio.power_supply import ConverterSpec
from rfstudio.tables import (
    CoreMaterial,
    CoreSize,
    CouplerType,
    DeviceType,
    MagneticKind,
    Substrate,
    Topology,
)
from rfstudio.transistor import TwoPortDevice


class _Form(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)


class ConverterForm(_Form):
    """Switching converter requirements."""
    topology: Topology = Topology.BUCK
    input_voltage: float = Field(12.0, gt=0, description="Input voltage (V)")
    output_voltage: float = Field(5.0, gt=0, description="Output voltage (V)")
    output_current: float = Field(2.0, gt=0, description="Output current (A)")
    frequency: float = Field(100_000.0, gt=0, description="Switching frequency (Hz)")
    ripple_percent: float = Field(5.0, gt=0, le=100, description="Ripple (%)")

    def to_spec(self) -> ConverterSpec:
        return ConverterSpec(**self.model_dump())


class TransistorForm(_Form):
    """Two-port S-parameters as real/imaginary parts (50 Ω)."""
    device_type: DeviceType = DeviceType.BJT
    frequency: float = Field(1000.0, gt=0, description="Frequency (MHz)")
    s11_real: float = 0.5
    s11_imag: float = -0.3
    s21_real: float = 3.0
    s21_imag: float = 1.5
    s12_real: float = 0.05
    s12_imag: float = 0.02
    s22_real: float = 0.4
    s22_imag: float = -0.6
    power_dissipation: float = Field(1.0, ge=0, description="Power dissipation (W)")

    def to_spec(self) -> TwoPortDevice:
        return TwoPortDevice(
            device_type=self.device_type,
            s11=complex(self.s11_real, self.s11_imag),
            s12=complex(self.s12_real, self.s12_imag),
            s21=complex(self.s21_real, self.s21_imag),
            s22=complex(self.s22_real, self.s22_imag),
            frequency=self.frequency,
            power_dissipation=self.power_dissipation,
        )


class CouplerForm(_Form):
    """Microstrip coupler / divider requirements."""
    coupler_type: CouplerType = CouplerType.DIRECTIONAL
    coupling_db: float = Field(-20.0, le=0, description="Coupling (dB), directional only")
    frequency_mhz: float = Field(1000.0, gt=0, description="Center frequency (MHz)")
    impedance: float = Field(50.0, gt=0, description="Characteristic impedance (Ω)")
    substrate: Substrate = Substrate.FR4
    substrate_height_mm: float = Field(1.6, gt=0, description="Substrate height (mm)")

    def to_spec(self) -> CouplerSpec:
        return CouplerSpec(**self.model_dump())


class MagneticsForm(_Form):
    """Transformer requirements."""
    kind: MagneticKind = MagneticKind.TRANSFORMER
    core_material: CoreMaterial = CoreMaterial.FERRITE
    core_size: CoreSize = CoreSize.E3230
    frequency: float = Field(100_000.0, gt=0, description="Frequency (Hz)")
    primary_voltage: float = Field(12.0, gt=0, description="Primary voltage (V)")
    secondary_voltage: float = Field(5.0, gt=0, description="Secondary voltage (V)")
    power: float = Field(10.0, gt=0, description="Power rating (W)")
    max_flux_density: float = Field(0.3, gt=0, le=2.0, description="Max flux density (T)")

    def to_spec(self) -> MagneticSpec:
        return MagneticSpec(**self.model_dump())
