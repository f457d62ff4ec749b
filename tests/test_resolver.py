# tests/test_resolver.py

from datetime import date

import pytest

from notabledates.bootstrap import build_registry
from notabledates.calendars import JulianCalendar
from notabledates.core.errors import CalendarConversionError, InvalidArgumentError, ResolutionError
from notabledates.definitions import DEFAULT_DEFINITIONS, AdjustmentRule, NotableDateDefinition
from notabledates.resolver import NotableDateResolver


@pytest.fixture
def registry():
    return build_registry()

@pytest.fixture
def resolver(registry):
    return NotableDateResolver(DEFAULT_DEFINITIONS, registry)


def _by_name(notables):
    return {n.name: n.date for n in notables}

def test_default_table_2024(resolver):
    got = _by_name(resolver.resolve_year(2024))
    assert got["Easter Sunday"] == date(2024, 3, 31)
    assert got["Good Friday"] == date(2024, 3, 29)
    assert got["Easter Saturday"] == date(2024, 3, 30)
    assert got["Easter Monday"] == date(2024, 4, 1)
    assert got["Ascension Day"] == date(2024, 5, 9)
    assert got["Pentecost"] == date(2024, 5, 19)
    assert got["Lunar New Year"] == date(2024, 2, 10)
    assert got["Lunar New Year's Eve"] == date(2024, 2, 9)
    assert got["Memorial Day"] == date(2024, 5, 27)
    assert got["Thanksgiving Day"] == date(2024, 11, 28)
    assert got["Christmas Day"] == date(2024, 12, 25)

def test_results_are_sorted(resolver):
    notables = resolver.resolve_year(2024)
    keys = [(n.date, n.name) for n in notables]
    assert keys == sorted(keys)
    assert notables[0].name == "New Year's Day"

def test_absent_results_are_skipped(resolver):
    got = _by_name(resolver.resolve_year(1800))
    # outside the lunisolar table, and before the rule-based dates existed
    assert "Lunar New Year" not in got
    assert "Lunar New Year's Eve" not in got
    assert "Memorial Day" not in got
    assert "Thanksgiving Day" not in got
    assert got["Easter Sunday"] == date(1800, 4, 13)

def test_year_bounds(registry):
    d = NotableDateDefinition(name="Once", kind="fixed", month=6, day=1, first_year=2000, last_year=2000)
    r = NotableDateResolver([d], registry)
    assert r.resolve(d, 1999) is None
    assert r.resolve(d, 2000) == date(2000, 6, 1)
    assert r.resolve(d, 2001) is None

def test_offset_base_lookup_is_case_insensitive(registry):
    defs = [
        NotableDateDefinition(name="Easter Sunday", kind="dynamic", calculator="easter-sunday"),
        NotableDateDefinition(name="Palm Sunday", kind="offset", base="EASTER SUNDAY", offset_days=-7),
    ]
    r = NotableDateResolver(defs, registry)
    assert r.resolve(defs[1], 2024) == date(2024, 3, 24)

def test_dynamic_with_calendar(registry):
    d = NotableDateDefinition(
        name="Orthodox-style Easter", kind="dynamic", calculator="easter-sunday", calendar=JulianCalendar()
    )
    r = NotableDateResolver([d], registry)
    assert r.resolve(d, 2024) == date(2024, 4, 13)

def test_circular_dependency(registry):
    defs = [
        NotableDateDefinition(name="A", kind="offset", base="B", offset_days=1),
        NotableDateDefinition(name="B", kind="offset", base="A", offset_days=1),
    ]
    r = NotableDateResolver(defs, registry)
    with pytest.raises(ResolutionError, match="Circular"):
        r.resolve(defs[0], 2024)

def test_missing_base(registry):
    d = NotableDateDefinition(name="Orphan", kind="offset", base="Nowhere", offset_days=3)
    with pytest.raises(ResolutionError):
        NotableDateResolver([d], registry).resolve(d, 2024)

def test_unknown_calculator(registry):
    d = NotableDateDefinition(name="Mystery", kind="dynamic", calculator="no-such-calculator")
    with pytest.raises(ResolutionError):
        NotableDateResolver([d], registry).resolve(d, 2024)

def test_fixed_invalid_day(registry):
    d = NotableDateDefinition(name="Leap Day", kind="fixed", month=2, day=29)
    r = NotableDateResolver([d], registry)
    assert r.resolve(d, 2024) == date(2024, 2, 29)
    with pytest.raises(CalendarConversionError):
        r.resolve(d, 2023)

def test_registry_required():
    with pytest.raises(InvalidArgumentError):
        NotableDateResolver(DEFAULT_DEFINITIONS, None)

@pytest.mark.parametrize("kwargs", [
    dict(name="x", kind="fixed", month=1),
    dict(name="x", kind="rule", month=1, weekday=0),
    dict(name="x", kind="rule", month=1, weekday=0, ordinal=0),
    dict(name="x", kind="rule", month=13, weekday=0, ordinal=1),
    dict(name="x", kind="rule", month=1, weekday=7, ordinal=1),
    dict(name="x", kind="rule", month=1, weekday=0, ordinal=1, calendar=JulianCalendar()),
    dict(name="x", kind="offset", base="y"),
    dict(name="x", kind="dynamic"),
    dict(name="x", kind="lunar"),
    dict(name="", kind="fixed", month=1, day=1),
    dict(name="x", kind="fixed", month=1, day=1, first_year=2001, last_year=2000),
])
def test_definition_validation(kwargs):
    with pytest.raises(ValueError):
        NotableDateDefinition(**kwargs)

def test_rule_outside_date_range(registry):
    d = NotableDateDefinition(name="Memorial Day", kind="rule", month=5, weekday=0, ordinal=-1)
    with pytest.raises(CalendarConversionError):
        NotableDateResolver([d], registry).resolve(d, 10000)

# --- Adjustments ---

def _christmas(*rules, **kw):
    return NotableDateDefinition(name="Christmas Day", kind="fixed", month=12, day=25, adjustments=rules, **kw)

def _dates(registry, definition, year):
    return [(n.date, n.original_date) for n in NotableDateResolver([definition], registry).resolve_year(year)]

def test_observed_on_next_weekday(registry):
    d = _christmas(AdjustmentRule(when="if_weekend", action="next_weekday"))
    # 2021-12-25 is a Saturday, 2022-12-25 a Sunday, 2024-12-25 a Wednesday
    assert _dates(registry, d, 2021) == [(date(2021, 12, 25), None), (date(2021, 12, 27), date(2021, 12, 25))]
    assert _dates(registry, d, 2022) == [(date(2022, 12, 25), None), (date(2022, 12, 26), date(2022, 12, 25))]
    assert _dates(registry, d, 2024) == [(date(2024, 12, 25), None)]

def test_if_weekday_previous_weekday(registry):
    d = _christmas(AdjustmentRule(when="if_weekday", action="previous_weekday"))
    assert _dates(registry, d, 2024) == [(date(2024, 12, 24), date(2024, 12, 25)), (date(2024, 12, 25), None)]
    assert _dates(registry, d, 2022) == [(date(2022, 12, 25), None)]

def test_always_add_days(registry):
    d = _christmas(AdjustmentRule(when="always", action="add_days", offset_days=1))
    assert _dates(registry, d, 2024)[-1] == (date(2024, 12, 26), date(2024, 12, 25))

def test_if_leap_year(registry):
    d = _christmas(AdjustmentRule(when="if_leap_year", action="add_days", offset_days=-1))
    assert len(_dates(registry, d, 2024)) == 2
    assert _dates(registry, d, 2023) == [(date(2023, 12, 25), None)]

def test_if_day_of_week(registry):
    d = _christmas(AdjustmentRule(when="if_day_of_week", weekday=5, action="previous_weekday"))
    assert _dates(registry, d, 2021) == [(date(2021, 12, 24), date(2021, 12, 25)), (date(2021, 12, 25), None)]
    assert _dates(registry, d, 2022) == [(date(2022, 12, 25), None)]

def test_action_none_adds_nothing(registry):
    d = _christmas(AdjustmentRule(when="always", action="none"))
    assert _dates(registry, d, 2024) == [(date(2024, 12, 25), None)]

def test_every_firing_rule_adds_an_entry(registry):
    d = _christmas(
        AdjustmentRule(when="always", action="add_days", offset_days=2, priority=20),
        AdjustmentRule(when="always", action="add_days", offset_days=1, priority=10),
    )
    assert [x for x, _ in _dates(registry, d, 2024)] == [date(2024, 12, 25), date(2024, 12, 26), date(2024, 12, 27)]

def test_adjustment_year_bounds(registry):
    d = _christmas(AdjustmentRule(when="if_weekend", action="next_weekday", first_year=2022))
    assert len(_dates(registry, d, 2021)) == 1
    assert len(_dates(registry, d, 2022)) == 2

def test_non_working_flags(registry):
    d = _christmas(
        AdjustmentRule(when="if_weekend", action="next_weekday", non_working=False),
        non_working=True,
    )
    actual, observed = NotableDateResolver([d], registry).resolve_year(2022)
    assert actual.non_working and not actual.is_adjusted
    assert observed.is_adjusted and not observed.non_working

def test_offsets_use_unadjusted_base(registry):
    defs = [
        _christmas(AdjustmentRule(when="if_weekend", action="next_weekday")),
        NotableDateDefinition(name="Boxing Day", kind="offset", base="Christmas Day", offset_days=1),
    ]
    got = NotableDateResolver(defs, registry).resolve_year(2022)
    assert [n.date for n in got if n.name == "Boxing Day"] == [date(2022, 12, 26)]

def test_custom_weekend(registry):
    d = _christmas(AdjustmentRule(when="if_weekend", action="next_weekday"))
    # Friday/Saturday weekend; 2020-12-25 is a Friday
    r = NotableDateResolver([d], registry, weekend={4, 5})
    assert r.is_weekend(date(2020, 12, 25))
    assert [n.date for n in r.resolve_year(2020)] == [date(2020, 12, 25), date(2020, 12, 27)]

@pytest.mark.parametrize("weekend", [range(7), {7}, {-1, 6}])
def test_invalid_weekend(registry, weekend):
    with pytest.raises(InvalidArgumentError):
        NotableDateResolver([], registry, weekend=weekend)

def test_default_table_observes_christmas(resolver):
    christmas = [n for n in resolver.resolve_year(2022) if n.name == "Christmas Day"]
    assert [(n.date, n.original_date) for n in christmas] == [
        (date(2022, 12, 25), None),
        (date(2022, 12, 26), date(2022, 12, 25)),
    ]
    assert all(n.non_working for n in christmas)

@pytest.mark.parametrize("kwargs", [
    dict(when="if_raining"),
    dict(action="teleport"),
    dict(when="if_day_of_week"),
    dict(when="if_day_of_week", weekday=7),
    dict(first_year=2001, last_year=2000),
])
def test_adjustment_rule_validation(kwargs):
    with pytest.raises(ValueError):
        AdjustmentRule(**kwargs)

# --- Date ranges ---

def test_resolve_between_filters_by_date(resolver):
    got = resolver.resolve_between(date(2024, 3, 1), date(2024, 4, 30))
    assert [n.name for n in got] == ["Good Friday", "Easter Saturday", "Easter Sunday", "Easter Monday"]

def test_resolve_between_crosses_year_boundary(registry):
    d = NotableDateDefinition(
        name="New Year's Day", kind="fixed", month=1, day=1,
        adjustments=(AdjustmentRule(when="if_weekend", action="previous_weekday"),),
    )
    # 2022-01-01 is a Saturday, observed on Friday 2021-12-31
    [observed] = NotableDateResolver([d], registry).resolve_between(date(2021, 12, 1), date(2021, 12, 31))
    assert observed.date == date(2021, 12, 31)
    assert observed.original_date == date(2022, 1, 1)

def test_resolve_between_single_day_and_bad_range(resolver):
    [christmas] = resolver.resolve_between(date(2024, 12, 25), date(2024, 12, 25))
    assert christmas.name == "Christmas Day"
    with pytest.raises(InvalidArgumentError):
        resolver.resolve_between(date(2024, 2, 1), date(2024, 1, 1))
