"""Operations over collections of DateRanges.

join_ranges flattens a list of possibly overlapping, adjacent or unsorted
ranges into the smallest equivalent list: disjoint, sorted by (start, end),
and with no two entries that join() could still merge.

The merge is a pairwise scan, quadratic in the number of ranges.  That is
fine for the tens of ranges this is meant for; nothing here is tuned for
large inputs.
"""
from __future__ import annotations

import logging
from typing import Iterable

from dayspan.algebra.pairwise import intersect, join
from dayspan.domain.date_range import DateRange

log = logging.getLogger(__name__)


def cleanup_sort(ranges: Iterable[DateRange | None]) -> list[DateRange]:
    """Drop empty (None) results and sort ascending by (start, end)."""
    return sorted(r for r in ranges if r is not None)


def join_ranges(ranges: Iterable[DateRange | None]) -> list[DateRange]:
    """Merge every pair of overlapping or adjacent ranges.

    Each position absorbs all later entries it can join with, repeating
    until nothing more merges, before moving on.  Absorbed entries are
    marked inactive and never looked at again.
    """
    merged = [r for r in ranges if r is not None]
    active = [True] * len(merged)

    for i in range(len(merged)):
        if not active[i]:
            continue
        changed = True
        while changed:
            changed = False
            for j in range(i + 1, len(merged)):
                if not active[j]:
                    continue
                result = join(merged[i], merged[j])
                if result is not None:
                    log.debug("joined %s and %s into %s", merged[i], merged[j], result)
                    merged[i] = result
                    active[j] = False
                    changed = True

    return cleanup_sort(r for r, keep in zip(merged, active) if keep)


def intersect_ranges(
    left: Iterable[DateRange], right: Iterable[DateRange]
) -> list[DateRange]:
    """Intersect two collections: the days covered by both.

    Every left range is intersected with every right range, and the
    fragments are joined so adjacent pieces come back as one range.
    """
    right = list(right)
    pieces = [intersect(a, b) for a in left for b in right]
    return join_ranges(cleanup_sort(pieces))
