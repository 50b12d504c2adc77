"""
Result tables for the calculators.

Turns an engine result into the rows shown to the user (label, value,
unit, display precision) and renders or exports them.
"""

import csv
import io
import json
import math
from dataclasses import asdict, dataclass
from typing import Callable, Dict, List, Optional, Union

from rfstudio.coupler import CouplerResult
from rfstudio.magnetics import MagneticResult
from rfstudio.power_supply import ConverterResult
from rfstudio.transistor import TransistorResult


@dataclass(frozen=True)
class ResultRow:
    label: str
    value: Union[float, int, str]
    unit: str = ''
    precision: Optional[int] = None     # decimals; None prints the value as is
    section: str = ''

    @property
    def display(self) -> str:
        if isinstance(self.value, str):
            return self.value
        if self.precision is None:
            return f"{self.value:g}"
        return f"{self.value:.{self.precision}f}"


def _converter_rows(r: ConverterResult) -> List[ResultRow]:
    parts = 'Component Values'
    perf = 'Performance Analysis'
    return [
        ResultRow('Inductor', r.inductance_uh, 'µH', 2, parts),
        ResultRow('Output Capacitor', r.output_capacitance_uf, 'µF', 2, parts),
        ResultRow('Input Capacitor', r.input_capacitance_uf, 'µF', 2, parts),
        ResultRow('Feedback R1', r.feedback_r1, 'Ω', 0, parts),
        ResultRow('Feedback R2', r.feedback_r2, 'Ω', None, parts),
        ResultRow('Current Sense R', r.current_sense_r, 'Ω', None, parts),
        ResultRow('Duty Cycle', r.duty_cycle * 100, '%', 1, perf),
        ResultRow('Efficiency', r.efficiency, '%', 1, perf),
        ResultRow('Output Ripple Voltage', r.ripple_voltage, 'V', 3, perf),
        ResultRow('Inductor Ripple Current', r.ripple_current, 'A', 3, perf),
        ResultRow('Power Output', r.output_power, 'W', 1, perf),
    ]


def _transistor_rows(r: TransistorResult) -> List[ResultRow]:
    rf = 'RF Performance'
    thermal = 'Thermal Analysis'
    gain_label = 'Max Available Gain' if r.gain_kind == 'MAG' else 'Max Stable Gain'
    return [
        ResultRow('Stability Factor (K)', r.stability_factor, '', 3, rf),
        ResultRow(gain_label, r.max_gain_db, 'dB', 1, rf),
        ResultRow('Power Gain (|S21|²)', r.power_gain_db, 'dB', 1, rf),
        ResultRow('Input Impedance (Real)', r.input_impedance.real, 'Ω', 1, rf),
        ResultRow('Input Impedance (Imag)', r.input_impedance.imag, 'Ω', 1, rf),
        ResultRow('Output Impedance (Real)', r.output_impedance.real, 'Ω', 1, rf),
        ResultRow('Output Impedance (Imag)', r.output_impedance.imag, 'Ω', 1, rf),
        ResultRow('Thermal Resistance', r.thermal_resistance, '°C/W', None, thermal),
        ResultRow('Junction Temperature', r.junction_temperature, '°C', 1, thermal),
        ResultRow('Stability Status', r.stability_status, '', None, thermal),
    ]


def _coupler_rows(r: CouplerResult) -> List[ResultRow]:
    dims = 'Physical Dimensions'
    perf = 'Performance Specifications'
    rows = [ResultRow('Strip Width', r.strip_width_mm, 'mm', 2, dims)]
    if r.strip_gap_mm > 0:
        rows.append(ResultRow('Strip Gap', r.strip_gap_mm, 'mm', 2, dims))
    rows += [
        ResultRow('Electrical Length', r.electrical_length_deg, 'degrees', None, dims),
        ResultRow('Physical Length', r.physical_length_mm, 'mm', 1, dims),
        ResultRow('Effective Dielectric Constant', r.effective_dielectric_constant, '', 3, dims),
        ResultRow('Coupling Value', r.coupling_db, 'dB', 1, perf),
        ResultRow('Isolation', r.isolation_db, 'dB', 1, perf),
        ResultRow('Return Loss', r.return_loss_db, 'dB', 1, perf),
        ResultRow('VSWR', f"{r.vswr:.2f}:1", '', None, perf),
        ResultRow('Bandwidth', f"±{r.bandwidth_pct:g}%", '', None, perf),
        ResultRow('Center Frequency', r.center_frequency_mhz, 'MHz', None, perf),
    ]
    return rows


def _magnetics_rows(r: MagneticResult) -> List[ResultRow]:
    design = 'Design Results'
    losses = 'Loss Analysis'
    return [
        ResultRow('Primary Turns', r.primary_turns, '', None, design),
        ResultRow('Secondary Turns', r.secondary_turns, '', None, design),
        ResultRow('Primary Wire Gauge', f"AWG {r.wire_gauge_primary}", '', None, design),
        ResultRow('Secondary Wire Gauge', f"AWG {r.wire_gauge_secondary}", '', None, design),
        ResultRow('Actual Flux Density', r.flux_density, 'T', 3, design),
        ResultRow('Turns Ratio', f"{r.turns_ratio:.2f}:1", '', None, design),
        ResultRow('Core Loss', r.core_loss, 'W', 3, losses),
        ResultRow('Copper Loss', r.copper_loss, 'W', 3, losses),
        ResultRow('Total Loss', r.total_loss, 'W', 3, losses),
        ResultRow('Efficiency', r.efficiency, '%', 1, losses),
        ResultRow('Operating Temperature', r.temperature, '°C', 1, losses),
        ResultRow('Saturation Margin', r.saturation_margin_pct, '%', 1, losses),
    ]


_ROW_BUILDERS: Dict[type, Callable] = {
    ConverterResult: _converter_rows,
    TransistorResult: _transistor_rows,
    CouplerResult: _coupler_rows,
    MagneticResult: _magnetics_rows,
}


def result_rows(result) -> List[ResultRow]:
    """Display rows for any engine result."""
    try:
        builder = _ROW_BUILDERS[type(result)]
    except KeyError:
        raise ValueError(f"No result table for {type(result).__name__}") from None
    return builder(result)


def format_table(rows: List[ResultRow]) -> str:
    """Render rows as an aligned plain-text table, grouped by section."""
    label_width = max((len(row.label) for row in rows), default=0)
    value_width = max((len(row.display) for row in rows), default=0)

    lines = []
    section = None
    for row in rows:
        if row.section != section:
            if lines:
                lines.append('')
            section = row.section
            if section:
                lines.append(section)
                lines.append('-' * len(section))
        lines.append(f"{row.label:<{label_width}}  {row.display:>{value_width}} {row.unit}".rstrip())
    return '\n'.join(lines)


def rows_to_csv(rows: List[ResultRow]) -> str:
    """Export rows as CSV text with displayed values."""
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(['Section', 'Parameter', 'Value', 'Unit'])
    for row in rows:
        writer.writerow([row.section, row.label, row.display, row.unit])
    return output.getvalue()


def rows_to_json(rows: List[ResultRow]) -> str:
    """Export rows as JSON text with raw values. Non-finite values become null."""
    entries = []
    for row in rows:
        entry = asdict(row)
        if isinstance(row.value, float) and not math.isfinite(row.value):
            entry['value'] = None
        entry['display'] = row.display
        entries.append(entry)
    return json.dumps({'results': entries}, indent=2, ensure_ascii=False)
