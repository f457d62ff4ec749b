"""
notabledates.adjustments
------------------------
Applies an `AdjustmentRule` to a resolved date.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Optional

from .core.errors import CalendarConversionError
from .core.time import WEEKEND, is_weekend, next_weekday, previous_weekday
from .definitions import AdjustmentRule


def condition_holds(rule: AdjustmentRule, d: date, weekend: frozenset[int] = WEEKEND) -> bool:
    if rule.when == "always":
        return True
    if rule.when == "if_weekend":
        return is_weekend(d, weekend)
    if rule.when == "if_weekday":
        return not is_weekend(d, weekend)
    if rule.when == "if_leap_year":
        return calendar.isleap(d.year)
    if rule.when == "if_day_of_week":
        return d.weekday() == rule.weekday
    return False

def apply_adjustment(rule: AdjustmentRule, d: date, weekend: frozenset[int] = WEEKEND) -> Optional[date]:
    """
    The adjusted date, or None when the rule's condition does not hold for `d`.
    An action of "none" returns `d` unchanged.
    """
    if not condition_holds(rule, d, weekend):
        return None
    try:
        if rule.action == "add_days":
            return d + timedelta(days=rule.offset_days)
        if rule.action == "next_weekday":
            return next_weekday(d, weekend)
        if rule.action == "previous_weekday":
            return previous_weekday(d, weekend)
    except OverflowError as e:
        raise CalendarConversionError(f"Adjusting {d} with '{rule.action}' leaves the supported date range") from e
    return d
