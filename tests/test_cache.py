# tests/test_cache.py

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from notabledates.calculators.cache import DateCache


def test_get_or_add_computes_once():
    cache = DateCache()
    calls = []

    def factory():
        calls.append(1)
        return date(2024, 3, 31)

    assert cache.get_or_add((2024, "g"), factory) == date(2024, 3, 31)
    assert cache.get_or_add((2024, "g"), factory) == date(2024, 3, 31)
    assert len(calls) == 1
    assert (2024, "g") in cache
    assert len(cache) == 1

def test_entries_are_write_once():
    cache = DateCache()
    cache.get_or_add("k", lambda: date(2000, 1, 1))
    assert cache.get_or_add("k", lambda: date(1999, 1, 1)) == date(2000, 1, 1)

def test_failed_factory_stores_nothing():
    cache = DateCache()

    def boom():
        raise ValueError("bad")

    with pytest.raises(ValueError):
        cache.get_or_add("k", boom)
    assert "k" not in cache
    assert cache.get("k") is None

def test_racing_callers_see_one_value():
    cache = DateCache()
    counter = {"n": 0}
    gate = threading.Barrier(8)

    def factory():
        counter["n"] += 1
        return date(2024, 1, 1)

    def worker(_):
        gate.wait()
        return cache.get_or_add("race", factory)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(worker, range(8)))

    assert results == [date(2024, 1, 1)] * 8
    assert counter["n"] == 1
