"""DateRange value object: a closed, day-granularity interval [start, end].

Both endpoints are inclusive, so a range with start == end covers exactly
one day.  Instances are frozen and their endpoints are ``datetime.date``
values, which are immutable themselves; nothing handed out by a DateRange
can be used to change it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterator

from dateutil.relativedelta import relativedelta

from dayspan.domain.dates import ONE_DAY, days_between, parse_step, to_date
from dayspan.domain.types import (
    DAY_END_TIME,
    DAY_START_TIME,
    DEFAULT_STEP,
    ISO_DATE_FORMAT,
    RANGE_SEPARATOR,
    DateInput,
)


class InvalidRangeError(ValueError):
    """Raised when a DateRange is built with start after end."""


@dataclass(frozen=True, slots=True, eq=False)
class DatePeriod:
    """Restartable sequence of dates from *start*, advancing by *step*.

    Dates are produced while they fall on or before *last*; ``end`` is the
    exclusive bound (the day after *last*, None if that would pass
    ``date.max``).  Every iteration starts over,
    and the n-th date is computed as ``start + n * step`` so month and year
    steps keep their day of month instead of drifting.
    """
    start: date
    last: date
    step: relativedelta = field(default_factory=lambda: relativedelta(days=1))

    @property
    def end(self) -> date | None:
        """Exclusive bound, or None when *last* is ``date.max``."""
        if self.last == date.max:
            return None
        return self.last + ONE_DAY

    def __iter__(self) -> Iterator[date]:
        n = 0
        while True:
            try:
                current = self.start + self.step * n
            except (OverflowError, ValueError):
                # stepped past year 9999
                return
            if current > self.last:
                return
            yield current
            if current == self.last:
                return
            n += 1


@dataclass(frozen=True, slots=True, order=True)
class DateRange:
    """Closed date interval [start, end], ordered by (start, end).

    Endpoints may be given as epoch seconds, ISO date strings, dates or
    datetimes; they are normalized to ``date`` before validation.

    Raises:
        InvalidRangeError: if start is after end.
    """
    start: date
    end: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", to_date(self.start))
        object.__setattr__(self, "end", to_date(self.end))
        if self.start > self.end:
            raise InvalidRangeError(
                f"start ({self.start.isoformat()}) must be <= end ({self.end.isoformat()})"
            )

    @classmethod
    def parse(cls, text: str) -> DateRange:
        """Build a range from its text form "2020-01-01|2020-01-10".

        A lone date ("2020-01-01") is read as a one-day range.
        """
        parts = text.split(RANGE_SEPARATOR)
        if len(parts) == 1:
            return cls(parts[0], parts[0])
        if len(parts) != 2:
            raise ValueError(
                f"Expected 'start{RANGE_SEPARATOR}end', got {text!r}"
            )
        return cls(parts[0], parts[1])

    def __str__(self) -> str:
        return f"{self.iso_start}{RANGE_SEPARATOR}{self.iso_end}"

    def get_start(self) -> date:
        return self.start

    def get_end(self) -> date:
        return self.end

    @property
    def iso_start(self) -> str:
        return self.start.strftime(ISO_DATE_FORMAT)

    @property
    def iso_end(self) -> str:
        return self.end.strftime(ISO_DATE_FORMAT)

    @property
    def iso_start_time(self) -> str:
        """Start date at the first second of the day, "YYYY-MM-DD 00:00:00"."""
        return f"{self.iso_start} {DAY_START_TIME}"

    @property
    def iso_end_time(self) -> str:
        """End date at the last second of the day, "YYYY-MM-DD 23:59:59"."""
        return f"{self.iso_end} {DAY_END_TIME}"

    def as_period(self, step: str = DEFAULT_STEP) -> DatePeriod:
        """Dates from start through end, advancing by an ISO-8601 duration."""
        return DatePeriod(start=self.start, last=self.end, step=parse_step(step))

    def is_equivalent_to(self, other: DateRange) -> bool:
        return self.start == other.start and self.end == other.end

    def count_days(self) -> int:
        """Number of days covered, both ends included. Always >= 1."""
        return days_between(self.start, self.end) + 1

    def includes(self, day: DateInput) -> bool:
        """Check whether a date falls within this range (inclusive)."""
        return self.start <= to_date(day) <= self.end

    def __len__(self) -> int:
        return self.count_days()

    def __contains__(self, day: DateInput) -> bool:
        return self.includes(day)
