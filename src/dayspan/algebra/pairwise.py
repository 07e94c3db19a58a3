"""Pairwise operations on two DateRanges: intersect, join, subtract.

All three are pure functions.  "No result" is spelled out explicitly:
intersect and join return None, subtract returns an empty list.

Ranges are closed at both ends and measured in whole days, so two ranges
that touch with no day between them ([1..5] and [6..10]) count as
adjacent and join into a single range.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from dayspan.domain.date_range import DateRange
from dayspan.domain.dates import ONE_DAY, days_between


class SubtractOutcome(Enum):
    DISJOINT = auto()   # nothing in common, minuend unchanged
    CONSUMED = auto()   # minuend fully covered, nothing left
    TRIMMED = auto()    # one edge cut off, one piece left
    SPLIT = auto()      # hole punched in the middle, two pieces left


@dataclass(frozen=True, slots=True)
class Subtraction:
    """Result of difference(): what happened and what is left."""
    outcome: SubtractOutcome
    remainder: tuple[DateRange, ...] = ()


def intersect(a: DateRange, b: DateRange) -> DateRange | None:
    """Days covered by both ranges, or None if they share none."""
    if a.end < b.start or a.start > b.end:
        return None
    return DateRange(max(a.start, b.start), min(a.end, b.end))


def join(a: DateRange, b: DateRange) -> DateRange | None:
    """Merge two overlapping or adjacent ranges into one.

    Returns None when at least one full day separates them.
    """
    if a.start > b.start:
        a, b = b, a
    # a.end + 1 day >= b.start, written so it cannot overflow at date.max
    if days_between(a.end, b.start) <= 1 and a.end <= b.end:
        return DateRange(a.start, b.end)
    if a.end >= b.start and a.start <= b.start and a.end >= b.end:
        # b sits inside a
        return DateRange(a.start, a.end)
    return None


def difference(minuend: DateRange, subtrahend: DateRange) -> Subtraction:
    """Remove the days of *subtrahend* from *minuend*.

    Unlike subtract(), tells apart "nothing removed" (DISJOINT, remainder
    is the minuend itself) from "everything removed" (CONSUMED).
    """
    m, s = minuend, subtrahend
    if m.end < s.start or m.start > s.end:
        return Subtraction(SubtractOutcome.DISJOINT, (m,))
    if m.start >= s.start and m.end <= s.end:
        return Subtraction(SubtractOutcome.CONSUMED)
    if s.start > m.start and s.end >= m.end:
        # tail cut off
        return Subtraction(
            SubtractOutcome.TRIMMED,
            (DateRange(m.start, s.start - ONE_DAY),),
        )
    if s.start <= m.start:
        # head cut off
        return Subtraction(
            SubtractOutcome.TRIMMED,
            (DateRange(s.end + ONE_DAY, m.end),),
        )
    return Subtraction(
        SubtractOutcome.SPLIT,
        (
            DateRange(m.start, s.start - ONE_DAY),
            DateRange(s.end + ONE_DAY, m.end),
        ),
    )


def subtract(minuend: DateRange, subtrahend: DateRange) -> list[DateRange]:
    """Remove the days of *subtrahend* from *minuend*.

    Returns 0, 1 or 2 ranges.  An empty list means either the minuend was
    fully covered or the two ranges do not overlap at all; call difference()
    when the two cases need to be told apart.
    """
    result = difference(minuend, subtrahend)
    if result.outcome is SubtractOutcome.DISJOINT:
        return []
    return list(result.remainder)
