"""
RF Design Studio Compute Engine

Closed-form calculators for RF and power-electronics design: converter
sizing, transistor stability, microstrip couplers and transformer design.

Every calculation is a pure function of its input spec.
"""

from rfstudio.power_supply import ConverterSpec, ConverterResult, compute_converter
from rfstudio.transistor import TwoPortDevice, TransistorResult, compute_transistor_stability
from rfstudio.coupler import CouplerSpec, CouplerResult, compute_coupler
from rfstudio.magnetics import MagneticSpec, MagneticResult, compute_magnetics
from rfstudio.tables import Topology, CouplerType, MagneticKind, DeviceType, Substrate, CoreSize, CoreMaterial
from rfstudio.components import snap_to_e_series, engineering_notation
from rfstudio.report import result_rows, format_table
from rfstudio.notes import check_design, design_notes
from rfstudio.calculators import get_calculator, list_calculators, run_calculator

__version__ = "0.1.0"
