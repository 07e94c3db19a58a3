"""Build DateRanges from a list of individual dates.

Each run of consecutive days becomes one range:

    ["2020-01-01", "2020-01-02", "2020-01-03", "2020-01-05"]
        -> [2020-01-01|2020-01-03, 2020-01-05|2020-01-05]

The input is expected in ascending order without duplicates.  Dates are
scanned in the order given, so out-of-order input still yields valid
ranges, just not the minimal set; pass normalize=True to sort and
de-duplicate first.
"""
from __future__ import annotations

import logging
from typing import Iterable

from dayspan.domain.date_range import DateRange
from dayspan.domain.dates import days_between, to_date
from dayspan.domain.types import DateInput

log = logging.getLogger(__name__)


def extract_ranges(
    dates: Iterable[DateInput], normalize: bool = False
) -> list[DateRange]:
    """Group dates into ranges of consecutive days."""
    days = [to_date(d) for d in dates]
    if normalize:
        days = sorted(set(days))
    if not days:
        return []

    ranges: list[DateRange] = []
    run_start = prev = days[0]
    out_of_order = False
    for day in days[1:]:
        if days_between(prev, day) == 1:
            prev = day
            continue
        if day <= prev:
            out_of_order = True
        ranges.append(DateRange(run_start, prev))
        run_start = prev = day
    ranges.append(DateRange(run_start, prev))

    if out_of_order:
        log.warning(
            "extract_ranges got dates that are not strictly ascending; "
            "%d ranges may not be minimal (use normalize=True)", len(ranges),
        )
    return ranges
