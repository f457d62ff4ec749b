from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from .core.calculator import CalculatorRegistry, NotableDateCalculator
from .calendars.interfaces import CalendarSystem
from .core.time import is_weekend  # noqa: F401  re-exported
from .definitions import DEFAULT_DEFINITIONS, NotableDate, NotableDateDefinition
from .resolver import NotableDateResolver

_registry: Optional[CalculatorRegistry] = None

def set_registry(reg: CalculatorRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalculatorRegistry:
    if _registry is None:
        raise RuntimeError("Calculator registry not initialized")
    return _registry

def list_calculators() -> List[str]:
    return _reg().list()

def calculator_info(name: str) -> Dict[str, Any]:
    return _reg().get(name).info()

def get_calculator(name: str) -> NotableDateCalculator:
    return _reg().get(name)

def register_calculator(name: str, calculator: NotableDateCalculator, *, overwrite: bool = False) -> None:
    _reg().register(name, calculator, overwrite=overwrite)

def notable_date(name: str, year: int, calendar: Optional[CalendarSystem] = None) -> Optional[date]:
    """Date produced by the calculator registered as `name`, or None if it has no result for `year`."""
    return _reg().get(name).get_date(year, calendar)

def easter_sunday(year: int, calendar: Optional[CalendarSystem] = None) -> date:
    return notable_date("easter-sunday", year, calendar)

def lunar_new_year(year: int, calendar: Optional[CalendarSystem] = None) -> Optional[date]:
    return notable_date("lunar-new-year", year, calendar)

def notable_dates(year: int, definitions: Optional[Sequence[NotableDateDefinition]] = None) -> List[NotableDate]:
    """Resolve a definition table (DEFAULT_DEFINITIONS if omitted) for one year."""
    defs = DEFAULT_DEFINITIONS if definitions is None else definitions
    return NotableDateResolver(defs, _reg()).resolve_year(year)

def notable_dates_between(
    start: date, end: date, definitions: Optional[Sequence[NotableDateDefinition]] = None
) -> List[NotableDate]:
    """Entries of a definition table (DEFAULT_DEFINITIONS if omitted) dated within start..end inclusive."""
    defs = DEFAULT_DEFINITIONS if definitions is None else definitions
    return NotableDateResolver(defs, _reg()).resolve_between(start, end)
