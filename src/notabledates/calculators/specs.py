"""
notabledates.calculators.specs
------------------------------
Pure data specifications for the built-in calculators. Live calculators are
built from these by `notabledates.calculators.factory`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Literal

from .easter import EasterParams
from .lunar_new_year import LunarNewYearParams

CalculatorKind = Literal["easter", "lunar_new_year"]


@dataclass(frozen=True)
class CalculatorSpec:
    kind: CalculatorKind
    name: str
    params: Any  # EasterParams | LunarNewYearParams

    @staticmethod
    def like(name: str) -> "CalculatorSpec":
        if name not in ALL_SPECS:
            raise KeyError(f"Unknown base spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs) -> "CalculatorSpec":
        return replace(self, params=replace(self.params, **kwargs))


EASTER_SUNDAY = CalculatorSpec(kind="easter", name="easter-sunday", params=EasterParams())
LUNAR_NEW_YEAR = CalculatorSpec(kind="lunar_new_year", name="lunar-new-year", params=LunarNewYearParams())

ALL_SPECS: Dict[str, CalculatorSpec] = {
    EASTER_SUNDAY.name: EASTER_SUNDAY,
    LUNAR_NEW_YEAR.name: LUNAR_NEW_YEAR,
}
