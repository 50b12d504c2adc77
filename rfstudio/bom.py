"""
Bill of materials for a sized converter power stage.

Lists the passive parts of a ConverterResult in base SI units with a
nearest-standard-value suggestion, and exports the list as CSV or JSON.
"""

import csv
import io
import json
import math
from typing import Dict, List

from rfstudio.components import engineering_notation, snap_to_e_series
from rfstudio.power_supply import ConverterResult


def _bom_parts(result: ConverterResult) -> List[tuple]:
    # (ref, type, value in base units, unit, description)
    return [
        ('L1', 'inductor', result.inductance_uh * 1e-6, 'H', 'Power inductor'),
        ('C1', 'capacitor', result.output_capacitance_uf * 1e-6, 'F', 'Output capacitor'),
        ('C2', 'capacitor', result.input_capacitance_uf * 1e-6, 'F', 'Input capacitor'),
        ('R1', 'resistor', result.feedback_r1, 'Ω', 'Feedback divider, top'),
        ('R2', 'resistor', result.feedback_r2, 'Ω', 'Feedback divider, bottom'),
        ('R3', 'resistor', result.current_sense_r, 'Ω', 'Current sense'),
    ]


def generate_bom(result: ConverterResult, snap_series: str = 'E24') -> List[Dict]:
    """
    Build the converter part list.

    Parts whose value is zero, negative or not finite (e.g. R1 when
    Vout equals the reference) are listed without an E-series suggestion.

    Args:
        result: Output of compute_converter().
        snap_series: E-series for the suggestions ('E12', 'E24', 'E48', 'E96').

    Returns:
        List of entry dicts: ref, type, value, unit, value_display,
        description and e_series_snapped (or None).
    """
    bom = []
    for ref, comp_type, value, unit, description in _bom_parts(result):
        snap_info = None
        if value > 0 and math.isfinite(value):
            snapped, error_pct = snap_to_e_series(value, snap_series)
            snap_info = {
                'target': value,
                'actual': snapped,
                'actual_display': engineering_notation(snapped, unit),
                'error_pct': error_pct,
                'series': snap_series,
            }

        bom.append({
            'ref': ref,
            'type': comp_type,
            'value': value,
            'unit': unit,
            'value_display': engineering_notation(value, unit),
            'description': description,
            'e_series_snapped': snap_info,
        })

    return bom


def export_csv(bom: List[Dict]) -> str:
    """Export a BOM as CSV text."""
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(['Reference', 'Type', 'Value', 'Standard Value', 'Error (%)', 'Description'])

    for entry in bom:
        snap = entry['e_series_snapped']
        writer.writerow([
            entry['ref'],
            entry['type'],
            entry['value_display'],
            snap['actual_display'] if snap else '',
            f"{snap['error_pct']:+.2f}" if snap else '',
            entry['description'],
        ])

    return output.getvalue()


def export_json(bom: List[Dict]) -> str:
    """Export a BOM as JSON text. Non-finite values are written as null."""
    def _clean(value):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return value

    entries = [{key: _clean(val) for key, val in entry.items()} for entry in bom]
    return json.dumps({'bom': entries, 'generated_by': 'RF Design Studio'}, indent=2)
