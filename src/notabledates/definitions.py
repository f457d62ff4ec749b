"""
notabledates.definitions
------------------------
Data payloads describing how a named notable date is derived for a year.

Four kinds are supported:
  fixed    -> month/day every year
  rule     -> n-th weekday of a month (ordinal -1 = last)
  offset   -> a number of days from another named definition
  dynamic  -> a registered calculator (e.g. 'easter-sunday')

A definition may carry adjustment rules. Each rule that fires on the resolved
date adds an observed entry next to the base one (e.g. Christmas observed on
the Monday when it falls on a weekend).
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, List, Literal, Optional, Tuple

DefinitionKind = Literal["fixed", "rule", "offset", "dynamic"]
AdjustmentCondition = Literal["always", "if_weekend", "if_weekday", "if_leap_year", "if_day_of_week"]
AdjustmentAction = Literal["none", "add_days", "next_weekday", "previous_weekday"]

_CONDITIONS = ("always", "if_weekend", "if_weekday", "if_leap_year", "if_day_of_week")
_ACTIONS = ("none", "add_days", "next_weekday", "previous_weekday")


def _check_year_bounds(owner: str, first_year: Optional[int], last_year: Optional[int]) -> None:
    if first_year is not None and last_year is not None and first_year > last_year:
        raise ValueError(f"'{owner}': first_year > last_year")

def _in_year_bounds(year: int, first_year: Optional[int], last_year: Optional[int]) -> bool:
    if first_year is not None and year < first_year:
        return False
    if last_year is not None and year > last_year:
        return False
    return True


@dataclass(frozen=True)
class AdjustmentRule:
    """
    Moves a resolved date when `when` holds.

    Rules of one definition are applied in ascending `priority`, each to the
    unadjusted date. `non_working` overrides the definition's flag on the
    observed entry.
    """
    when: AdjustmentCondition = "always"
    action: AdjustmentAction = "none"
    weekday: Optional[int] = None  # for if_day_of_week
    offset_days: int = 0           # for add_days
    priority: int = 100
    first_year: Optional[int] = None
    last_year: Optional[int] = None
    non_working: Optional[bool] = None

    def __post_init__(self) -> None:
        if self.when not in _CONDITIONS:
            raise ValueError(f"Unknown adjustment condition '{self.when}'")
        if self.action not in _ACTIONS:
            raise ValueError(f"Unknown adjustment action '{self.action}'")
        if self.when == "if_day_of_week" and (self.weekday is None or not (0 <= self.weekday <= 6)):
            raise ValueError("if_day_of_week needs weekday in 0..6")
        _check_year_bounds("adjustment", self.first_year, self.last_year)

    def applies_to(self, year: int) -> bool:
        return _in_year_bounds(year, self.first_year, self.last_year)

@dataclass(frozen=True)
class NotableDateDefinition:
    name: str
    kind: DefinitionKind
    month: Optional[int] = None
    day: Optional[int] = None
    weekday: Optional[int] = None  # 0=Mon..6=Sun
    ordinal: Optional[int] = None
    base: Optional[str] = None
    offset_days: Optional[int] = None
    calculator: Optional[str] = None
    calendar: Any = None  # CalendarSystem for fixed and dynamic kinds
    first_year: Optional[int] = None
    last_year: Optional[int] = None
    comment: Optional[str] = None
    non_working: bool = False
    adjustments: Tuple[AdjustmentRule, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name must not be empty")
        if self.kind == "fixed":
            if self.month is None or self.day is None:
                raise ValueError(f"'{self.name}': fixed definitions need month and day")
        elif self.kind == "rule":
            if self.month is None or self.weekday is None or self.ordinal is None:
                raise ValueError(f"'{self.name}': rule definitions need month, weekday and ordinal")
            if not (1 <= self.month <= 12):
                raise ValueError(f"'{self.name}': month must be 1..12")
            if not (0 <= self.weekday <= 6):
                raise ValueError(f"'{self.name}': weekday must be 0..6")
            if self.ordinal == 0 or not (-1 <= self.ordinal <= 5):
                raise ValueError(f"'{self.name}': ordinal must be 1..5 or -1")
            # Weekday rules are evaluated on the Gregorian calendar only
            if self.calendar is not None:
                raise ValueError(f"'{self.name}': rule definitions do not take a calendar")
        elif self.kind == "offset":
            if not self.base or self.offset_days is None:
                raise ValueError(f"'{self.name}': offset definitions need base and offset_days")
        elif self.kind == "dynamic":
            if not self.calculator:
                raise ValueError(f"'{self.name}': dynamic definitions need a calculator name")
        else:
            raise ValueError(f"Unknown definition kind '{self.kind}'")
        _check_year_bounds(self.name, self.first_year, self.last_year)
        # Accept any iterable of rules but store an immutable tuple
        object.__setattr__(self, "adjustments", tuple(self.adjustments))

    def applies_to(self, year: int) -> bool:
        return _in_year_bounds(year, self.first_year, self.last_year)

@dataclass(frozen=True)
class NotableDate:
    name: str
    date: date
    kind: DefinitionKind
    calendar: Any = None
    comment: Optional[str] = None
    non_working: bool = False
    original_date: Optional[date] = None  # set on observed (adjusted) entries

    @property
    def is_adjusted(self) -> bool:
        return self.original_date is not None


def _offset(name: str, days: int, base: str = "Easter Sunday", **kw) -> NotableDateDefinition:
    return NotableDateDefinition(name=name, kind="offset", base=base, offset_days=days, **kw)

DEFAULT_DEFINITIONS: List[NotableDateDefinition] = [
    NotableDateDefinition(name="New Year's Day", kind="fixed", month=1, day=1, non_working=True),
    NotableDateDefinition(name="Easter Sunday", kind="dynamic", calculator="easter-sunday"),
    _offset("Good Friday", -2),
    _offset("Easter Saturday", -1),
    _offset("Easter Monday", 1),
    _offset("Ascension Day", 39),
    _offset("Pentecost", 49),
    NotableDateDefinition(
        name="Lunar New Year", kind="dynamic", calculator="lunar-new-year",
        comment="Chinese lunisolar calendar; 1901-2100 only",
    ),
    _offset("Lunar New Year's Eve", -1, base="Lunar New Year"),
    NotableDateDefinition(name="Memorial Day", kind="rule", month=5, weekday=0, ordinal=-1, first_year=1971),
    NotableDateDefinition(name="Thanksgiving Day", kind="rule", month=11, weekday=3, ordinal=4, first_year=1942),
    NotableDateDefinition(
        name="Christmas Day", kind="fixed", month=12, day=25, non_working=True,
        adjustments=(AdjustmentRule(when="if_weekend", action="next_weekday"),),
    ),
    NotableDateDefinition(name="Boxing Day", kind="fixed", month=12, day=26),
]
