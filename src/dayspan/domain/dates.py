"""Normalization of endpoint inputs to day-resolution dates.

Everything in dayspan works on ``datetime.date``: it is immutable, totally
ordered and supports whole-day arithmetic, so a DateRange can hand out its
endpoints without copying them.

Parsing of textual dates is delegated to dateutil.  Epoch seconds are read
in UTC, the same way a Unix timestamp is defined.
"""
from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from dayspan.domain.types import DateInput

ONE_DAY = timedelta(days=1)

_DURATION_RE = re.compile(
    r"^P(?:(?P<years>\d+)Y)?(?:(?P<months>\d+)M)?(?:(?P<weeks>\d+)W)?(?:(?P<days>\d+)D)?$"
)


def to_date(value: DateInput) -> date:
    """Normalize an endpoint input to a ``date``.

    Accepts:
      - int: Unix epoch seconds (UTC)
      - str: ISO calendar date, optionally with a time part ("2020-01-05T10:00")
      - datetime: time of day is dropped
      - date: returned as is

    Malformed strings raise dateutil's ValueError unchanged.
    """
    # datetime is a subclass of date, so it has to be checked first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # bool is an int subclass but never a meaningful timestamp
    if isinstance(value, int) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc).date()
    if isinstance(value, str):
        return date_parser.isoparse(value.strip()).date()
    raise TypeError(
        f"Cannot build a date from {type(value).__name__}: {value!r}"
    )


def days_between(start: date, end: date) -> int:
    """Signed number of whole days from *start* to *end*."""
    return (end - start).days


def parse_step(token: str) -> relativedelta:
    """Parse an ISO-8601 date duration such as "P1D", "P2W" or "P1Y6M".

    Only date components are supported; a time part ("PT12H") or a
    duration that adds up to nothing is rejected.
    """
    match = _DURATION_RE.match(token.strip().upper())
    if match is None or not any(match.groupdict().values()):
        raise ValueError(
            f"Unsupported step {token!r}: expected an ISO-8601 date duration like 'P1D'"
        )
    parts = {k: int(v) for k, v in match.groupdict().items() if v is not None}
    step = relativedelta(
        years=parts.get("years", 0),
        months=parts.get("months", 0),
        weeks=parts.get("weeks", 0),
        days=parts.get("days", 0),
    )
    if not step:
        raise ValueError(f"Step {token!r} must be longer than zero days")
    return step
