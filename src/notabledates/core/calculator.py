from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Protocol

from .errors import InvalidArgumentError, NotSupportedError

class NotableDateCalculator(Protocol):
    name: str

    def info(self) -> Dict[str, Any]: ...
    def get_date(self, year: int, calendar: Optional[Any] = None) -> Optional[date]: ...

def check_year(year: int) -> int:
    if year < 1:
        raise InvalidArgumentError(f"Year must be greater than or equal to 1; got {year}.")
    return year

def check_calculator(name: str, calculator: Any) -> None:
    """A calculator is registered under its own `name` and must expose `get_date`."""
    if not callable(getattr(calculator, "get_date", None)):
        raise NotSupportedError(f"'{type(calculator).__name__}' has no get_date method")
    own = getattr(calculator, "name", None)
    if own != name:
        raise InvalidArgumentError(f"Calculator named '{own}' cannot be registered as '{name}'")

@dataclass
class CalculatorRegistry:
    _calculators: Dict[str, NotableDateCalculator]

    def __post_init__(self) -> None:
        for name, calculator in self._calculators.items():
            check_calculator(name, calculator)

    def get(self, name: str) -> NotableDateCalculator:
        if name not in self._calculators:
            raise KeyError(f"Unknown calculator '{name}'. Available: {sorted(self._calculators)}")
        return self._calculators[name]

    def list(self) -> List[str]:
        return sorted(self._calculators.keys())

    def register(self, name: str, calculator: NotableDateCalculator, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calculators):
            raise KeyError(f"Calculator '{name}' already exists. Use overwrite=True to replace.")
        check_calculator(name, calculator)
        self._calculators[name] = calculator
