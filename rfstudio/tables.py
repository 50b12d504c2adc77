"""
Static lookup tables and categorical choices.

Material and geometry constants consumed by the coupler, magnetics and
transistor engines. Tables are read-only mappings built once at import.

Lookups with an open key (substrate, core size, core material, device type)
fall back to a documented default and log a warning.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)


# --- Closed choices ---

class Topology(str, Enum):
    BUCK = "buck"
    BOOST = "boost"
    FLYBACK = "flyback"
    FORWARD = "forward"


class CouplerType(str, Enum):
    DIRECTIONAL = "directional"
    RAT_RACE = "rat-race"
    WILKINSON = "wilkinson"
    BRANCH_LINE = "branch-line"


class MagneticKind(str, Enum):
    TRANSFORMER = "transformer"
    INDUCTOR = "inductor"


# --- Open choices (unknown keys fall back to a default) ---

class DeviceType(str, Enum):
    BJT = "BJT"
    FET = "FET"
    HEMT = "HEMT"
    LDMOS = "LDMOS"


class Substrate(str, Enum):
    FR4 = "FR4"
    ROGERS_4003 = "Rogers4003"
    ALUMINA = "Alumina"
    PTFE = "PTFE"
    DUROID_5880 = "Duroid5880"


class CoreSize(str, Enum):
    E3230 = "E3230"
    E4728 = "E4728"
    E5542 = "E5542"


class CoreMaterial(str, Enum):
    FERRITE = "ferrite"
    IRON_POWDER = "iron_powder"
    AMORPHOUS = "amorphous"
    NANOCRYSTALLINE = "nanocrystalline"


@dataclass(frozen=True)
class CoreGeometry:
    """Effective core parameters for a core size."""
    ae_mm2: float   # effective cross-section area (mm²)
    aw_mm2: float   # window area (mm²)
    al_nh: float    # inductance factor (nH/turn²)


@dataclass(frozen=True)
class SteinmetzCoefficients:
    """Pv = k · f^alpha · B^beta (f in kHz, B in T)."""
    k: float
    alpha: float
    beta: float


# Relative permittivity of common microstrip substrates
DIELECTRIC_CONSTANTS: Mapping[str, float] = MappingProxyType({
    Substrate.FR4.value: 4.5,
    Substrate.ROGERS_4003.value: 3.55,
    Substrate.ALUMINA.value: 9.8,
    Substrate.PTFE.value: 2.1,
    Substrate.DUROID_5880.value: 2.2,
})
DEFAULT_DIELECTRIC_CONSTANT = 4.5

CORE_SIZES: Mapping[str, CoreGeometry] = MappingProxyType({
    CoreSize.E3230.value: CoreGeometry(ae_mm2=160, aw_mm2=150, al_nh=2500),
    CoreSize.E4728.value: CoreGeometry(ae_mm2=240, aw_mm2=280, al_nh=3200),
    CoreSize.E5542.value: CoreGeometry(ae_mm2=350, aw_mm2=420, al_nh=4100),
})
DEFAULT_CORE_SIZE = CoreSize.E3230.value

CORE_MATERIALS: Mapping[str, SteinmetzCoefficients] = MappingProxyType({
    CoreMaterial.FERRITE.value: SteinmetzCoefficients(k=0.0012, alpha=1.24, beta=2.1),
    CoreMaterial.IRON_POWDER.value: SteinmetzCoefficients(k=0.0035, alpha=1.1, beta=1.8),
    CoreMaterial.AMORPHOUS.value: SteinmetzCoefficients(k=0.0008, alpha=1.3, beta=2.3),
    CoreMaterial.NANOCRYSTALLINE.value: SteinmetzCoefficients(k=0.0005, alpha=1.4, beta=2.0),
})
DEFAULT_CORE_MATERIAL = CoreMaterial.FERRITE.value

# Junction-to-ambient thermal resistance by device family (°C/W).
# LDMOS has no entry of its own and takes the default.
THERMAL_RESISTANCE: Mapping[str, float] = MappingProxyType({
    DeviceType.BJT.value: 150.0,
    DeviceType.FET.value: 200.0,
    DeviceType.HEMT.value: 300.0,
})
DEFAULT_THERMAL_RESISTANCE = 100.0


def _key(choice) -> str:
    return choice.value if isinstance(choice, Enum) else str(choice)


def dielectric_constant(substrate) -> float:
    """Relative permittivity for a substrate, 4.5 (FR4) when unknown."""
    key = _key(substrate)
    if key not in DIELECTRIC_CONSTANTS:
        logger.warning("Unknown substrate %r, using er=%s", key, DEFAULT_DIELECTRIC_CONSTANT)
        return DEFAULT_DIELECTRIC_CONSTANT
    return DIELECTRIC_CONSTANTS[key]


def core_geometry(size) -> CoreGeometry:
    """Core parameters for a size, E32/30 when unknown."""
    key = _key(size)
    if key not in CORE_SIZES:
        logger.warning("Unknown core size %r, using %s", key, DEFAULT_CORE_SIZE)
        return CORE_SIZES[DEFAULT_CORE_SIZE]
    return CORE_SIZES[key]


def steinmetz_coefficients(material) -> SteinmetzCoefficients:
    """Steinmetz coefficients for a core material, ferrite when unknown."""
    key = _key(material)
    if key not in CORE_MATERIALS:
        logger.warning("Unknown core material %r, using %s", key, DEFAULT_CORE_MATERIAL)
        return CORE_MATERIALS[DEFAULT_CORE_MATERIAL]
    return CORE_MATERIALS[key]


def thermal_resistance(device_type) -> float:
    """
    Thermal resistance for a device family.

    LDMOS and unlisted families share the 100 °C/W default. Only keys that
    are not valid DeviceType values are logged as unknown.
    """
    key = _key(device_type)
    if key in THERMAL_RESISTANCE:
        return THERMAL_RESISTANCE[key]
    if key not in {d.value for d in DeviceType}:
        logger.warning("Unknown device type %r, using %s °C/W", key, DEFAULT_THERMAL_RESISTANCE)
    return DEFAULT_THERMAL_RESISTANCE
