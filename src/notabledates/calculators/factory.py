"""
notabledates.calculators.factory
--------------------------------
Transforms pure data specifications into live calculator objects.
"""

from __future__ import annotations
from typing import Optional

from notabledates.calculators.cache import DateCache
from notabledates.calculators.easter import EasterParams, EasterSundayCalculator
from notabledates.calculators.lunar_new_year import LunarNewYearCalculator, LunarNewYearParams
from notabledates.calculators.specs import CalculatorSpec
from notabledates.core.calculator import NotableDateCalculator


def make_calculator(spec: CalculatorSpec, *, cache: Optional[DateCache] = None) -> NotableDateCalculator:
    """The universal entry point. `cache` is only used by memoizing calculators."""
    if isinstance(spec.params, EasterParams):
        calc = EasterSundayCalculator(spec.params, cache=cache)
    elif isinstance(spec.params, LunarNewYearParams):
        calc = LunarNewYearCalculator(spec.params)
    else:
        raise TypeError(f"Unknown calculator params type: {type(spec.params)}")
    # Registry name comes from CalculatorSpec.name so tweaked variants can coexist.
    calc.name = spec.name
    return calc
