from __future__ import annotations

import logging
from dataclasses import replace
from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from .adjustments import apply_adjustment
from .core.calculator import CalculatorRegistry
from .core.errors import CalendarConversionError, InvalidArgumentError, ResolutionError
from .core.time import WEEKEND, is_weekend, nth_weekday_of_month
from .definitions import NotableDate, NotableDateDefinition

logger = logging.getLogger(__name__)

WEEKDAYS = frozenset(range(7))


class NotableDateResolver:
    """
    Resolves notable date definitions to dates for a given year.

    Offset definitions look up their base by name (case-insensitive, first match
    wins); dynamic definitions dispatch to a calculator from the registry.
    Offsets are taken from the unadjusted base date. `weekend` holds the
    weekday numbers (0=Mon..6=Sun) the adjustment rules treat as weekend.
    """

    def __init__(
        self,
        definitions: Sequence[NotableDateDefinition],
        registry: CalculatorRegistry,
        *,
        weekend: Iterable[int] = WEEKEND,
    ):
        if registry is None:
            raise InvalidArgumentError("A calculator registry is required.")
        self._weekend = frozenset(weekend)
        if not self._weekend <= WEEKDAYS or self._weekend == WEEKDAYS:
            raise InvalidArgumentError(f"weekend must be a proper subset of 0..6; got {sorted(self._weekend)}")
        self._definitions: List[NotableDateDefinition] = list(definitions)
        self._by_name: Dict[str, NotableDateDefinition] = {}
        for d in self._definitions:
            self._by_name.setdefault(d.name.casefold(), d)
        self._registry = registry

    @property
    def definitions(self) -> List[NotableDateDefinition]:
        return list(self._definitions)

    def find(self, name: str) -> Optional[NotableDateDefinition]:
        return self._by_name.get(name.casefold())

    def resolve(self, definition: NotableDateDefinition, year: int) -> Optional[date]:
        return self._resolve(definition, year, [])

    def _resolve(self, definition: NotableDateDefinition, year: int, chain: List[str]) -> Optional[date]:
        if not definition.applies_to(year):
            return None

        if definition.name.casefold() in (n.casefold() for n in chain):
            raise ResolutionError(f"Circular dependency detected: {' -> '.join(chain + [definition.name])}")

        chain.append(definition.name)
        try:
            out = self._resolve_kind(definition, year, chain)
        finally:
            chain.pop()
        logger.debug("resolved '%s' for %d -> %s", definition.name, year, out)
        return out

    def _resolve_kind(self, definition: NotableDateDefinition, year: int, chain: List[str]) -> Optional[date]:
        if definition.kind == "fixed":
            cal = definition.calendar
            if cal is not None:
                return cal.to_date(year, definition.month, definition.day)
            try:
                return date(year, definition.month, definition.day)
            except ValueError as e:
                raise CalendarConversionError(
                    f"'{definition.name}': {year}-{definition.month:02d}-{definition.day:02d} is not a valid date"
                ) from e

        if definition.kind == "rule":
            try:
                return nth_weekday_of_month(year, definition.month, definition.weekday, definition.ordinal)
            except ValueError as e:
                raise CalendarConversionError(f"'{definition.name}': {year} is outside the supported date range") from e

        if definition.kind == "offset":
            base = self.find(definition.base)
            if base is None:
                raise ResolutionError(f"Base notable date '{definition.base}' not found for '{definition.name}'.")
            base_date = self._resolve(base, year, chain)
            if base_date is None:
                return None
            try:
                return base_date + timedelta(days=definition.offset_days)
            except OverflowError as e:
                raise CalendarConversionError(f"'{definition.name}' falls outside the supported date range") from e

        if definition.kind == "dynamic":
            try:
                calc = self._registry.get(definition.calculator)
            except KeyError as e:
                raise ResolutionError(
                    f"Unknown calculator '{definition.calculator}' for '{definition.name}'."
                ) from e
            return calc.get_date(year, definition.calendar)

        raise ResolutionError(f"Unsupported definition kind '{definition.kind}' for '{definition.name}'.")

    @property
    def weekend(self) -> frozenset[int]:
        return self._weekend

    def is_weekend(self, d: date) -> bool:
        return is_weekend(d, self._weekend)

    def _entries_for(self, year: int) -> List[NotableDate]:
        out: List[NotableDate] = []
        for definition in self._definitions:
            d = self.resolve(definition, year)
            if d is None:
                continue
            base = NotableDate(
                name=definition.name,
                date=d,
                kind=definition.kind,
                calendar=definition.calendar,
                comment=definition.comment,
                non_working=definition.non_working,
            )
            for rule in sorted(definition.adjustments, key=lambda r: r.priority):
                if not rule.applies_to(year):
                    continue
                moved = apply_adjustment(rule, d, self._weekend)
                if moved is None or moved == d:
                    continue
                non_working = rule.non_working if rule.non_working is not None else definition.non_working
                logger.debug("'%s' %d: %s adjusted to %s (%s)", definition.name, year, d, moved, rule.action)
                out.append(replace(base, date=moved, original_date=d, non_working=non_working))
            out.append(base)
        return out

    def resolve_year(self, year: int) -> List[NotableDate]:
        """
        Every entry the definitions yield for `year`, sorted by date then name.

        Each adjustment rule that moves a date adds an observed entry (with
        `original_date` set) next to the unadjusted one. An observed date may
        fall outside `year`.
        """
        out = self._entries_for(year)
        out.sort(key=lambda n: (n.date, n.name))
        return out

    def _max_shift_days(self) -> int:
        shift = 0
        for definition in self._definitions:
            if definition.kind == "offset":
                shift += abs(definition.offset_days)
        rule_shift = max(
            (abs(r.offset_days) for definition in self._definitions for r in definition.adjustments),
            default=0,
        )
        # next/previous weekday moves stay within a week
        return shift + rule_shift + 7

    def resolve_between(self, start: date, end: date) -> List[NotableDate]:
        """
        Entries dated within `start`..`end` (inclusive), sorted by date then name.

        Neighbouring years are resolved too, so offsets and adjustments that
        cross a year boundary are picked up.
        """
        if start > end:
            raise InvalidArgumentError(f"start {start} is after end {end}")
        span = self._max_shift_days() // 365 + 1
        first = max(MINYEAR, start.year - span)
        last = min(MAXYEAR, end.year + span)
        out: List[NotableDate] = []
        for year in range(first, last + 1):
            out.extend(n for n in self._entries_for(year) if start <= n.date <= end)
        out.sort(key=lambda n: (n.date, n.name))
        return out
