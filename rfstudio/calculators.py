"""
Calculator registry.

Each calculator pairs an input form with its engine. run_calculator()
performs one complete recomputation from raw parameters: validate, compute,
tabulate and check. Nothing is cached between calls.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Type

from pydantic import BaseModel

from rfstudio.bom import generate_bom
from rfstudio.config import Settings, load_settings
from rfstudio.coupler import compute_coupler
from rfstudio.magnetics import compute_magnetics
from rfstudio.notes import check_design, design_notes
from rfstudio.power_supply import compute_converter
from rfstudio.report import result_rows
from rfstudio.schemas import ConverterForm, CouplerForm, MagneticsForm, TransistorForm
from rfstudio.transistor import compute_transistor_stability

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculatorDefinition:
    """A calculator: its input form and the engine that evaluates it."""
    name: str
    title: str
    description: str
    form: Type[BaseModel]
    compute: Callable
    has_bom: bool = False


CALCULATORS: Dict[str, CalculatorDefinition] = {
    'power_supply': CalculatorDefinition(
        name='power_supply',
        title='Power Supply Design',
        description='Buck, boost, flyback and forward converter power-stage sizing',
        form=ConverterForm,
        compute=compute_converter,
        has_bom=True,
    ),
    'rf_transistor': CalculatorDefinition(
        name='rf_transistor',
        title='RF Transistor Analyzer',
        description='S-parameter stability factor, maximum gain and junction temperature',
        form=TransistorForm,
        compute=compute_transistor_stability,
    ),
    'coupler': CalculatorDefinition(
        name='coupler',
        title='Coupler & Divider',
        description='Microstrip directional, rat-race, Wilkinson and branch-line dimensions',
        form=CouplerForm,
        compute=compute_coupler,
    ),
    'magnetics': CalculatorDefinition(
        name='magnetics',
        title='Magnetics Calculator',
        description='Transformer turns, wire gauge, core and copper loss',
        form=MagneticsForm,
        compute=compute_magnetics,
    ),
}


def get_calculator(name: str) -> CalculatorDefinition:
    """Get a calculator definition by name."""
    if name not in CALCULATORS:
        raise ValueError(f"Unknown calculator '{name}'. Available: {list(CALCULATORS.keys())}")
    return CALCULATORS[name]


def list_calculators() -> List[Dict]:
    """List the available calculators with their input fields and defaults."""
    result = []
    for name, calc in CALCULATORS.items():
        result.append({
            'name': name,
            'title': calc.title,
            'description': calc.description,
            'inputs': [
                {'name': field, 'default': info.default, 'description': info.description}
                for field, info in calc.form.model_fields.items()
            ],
        })
    return result


def run_calculator(
    name: str,
    params: Optional[Dict] = None,
    settings: Optional[Settings] = None,
) -> Dict:
    """
    Validate parameters and run one calculator.

    Args:
        name: Calculator name ('power_supply', 'rf_transistor', 'coupler', 'magnetics').
        params: Input values; missing fields take the form defaults.
        settings: Library settings, read from the environment when omitted.

    Returns:
        Dict with spec, result, rows, notes, warnings and, for the power
        supply, the BOM.

    Raises:
        ValueError: unknown calculator name.
        pydantic.ValidationError: parameters out of range.
    """
    calc = get_calculator(name)
    form = calc.form.model_validate(params or {})
    spec = form.to_spec()
    result = calc.compute(spec)
    logger.debug("Calculated %s: %s", name, result)

    output = {
        'calculator': name,
        'spec': spec,
        'result': result,
        'rows': result_rows(result),
        'notes': design_notes(name),
        'warnings': check_design(spec, result),
    }
    if calc.has_bom:
        settings = settings or load_settings()
        output['bom'] = generate_bom(result, settings.e_series)
    return output
