"""Shared fixtures for interval algebra tests."""
from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Callable, Iterable

import pytest

from dayspan.domain.date_range import DateRange

# Fixed seed so the randomized checks are reproducible across runs
SEED = 42

BASE = date(2020, 1, 1)


def _random_range(rng: random.Random, span_days: int = 60, max_len: int = 10) -> DateRange:
    start = BASE + timedelta(days=rng.randrange(span_days))
    return DateRange(start, start + timedelta(days=rng.randrange(max_len)))


@pytest.fixture
def rng() -> random.Random:
    return random.Random(SEED)


@pytest.fixture
def random_range(rng: random.Random) -> Callable[[], DateRange]:
    """Factory producing short ranges scattered over the first 60 days of 2020."""
    return lambda: _random_range(rng)


@pytest.fixture
def days_of() -> Callable[[Iterable[DateRange]], set[date]]:
    """Set of every date covered by a collection of ranges."""
    def _days(ranges: Iterable[DateRange]) -> set[date]:
        covered: set[date] = set()
        for r in ranges:
            covered.update(r.as_period())
        return covered
    return _days
