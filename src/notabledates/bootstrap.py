from __future__ import annotations
from notabledates.core.calculator import CalculatorRegistry
from notabledates.calculators.specs import ALL_SPECS
from notabledates.calculators.factory import make_calculator

def build_registry() -> CalculatorRegistry:
    calculators = {}
    for name, spec in ALL_SPECS.items():
        calculators[name] = make_calculator(spec)
    return CalculatorRegistry(calculators)
