"""dayspan: closed day-granularity date ranges and their algebra.

    from dayspan import DateRange, intersect, join_ranges
"""
from dayspan.algebra import (
    SubtractOutcome,
    Subtraction,
    cleanup_sort,
    difference,
    extract_ranges,
    intersect,
    intersect_ranges,
    join,
    join_ranges,
    subtract,
)
from dayspan.domain import DatePeriod, DateRange, InvalidRangeError

__all__ = [
    "DatePeriod",
    "DateRange",
    "InvalidRangeError",
    "SubtractOutcome",
    "Subtraction",
    "cleanup_sort",
    "difference",
    "extract_ranges",
    "intersect",
    "intersect_ranges",
    "join",
    "join_ranges",
    "subtract",
]
