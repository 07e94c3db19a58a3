"""Interval algebra over DateRanges.

Public API:
    intersect, join, subtract, difference: operations on two ranges
    join_ranges, intersect_ranges, cleanup_sort: operations on collections
    extract_ranges: runs of consecutive days from a list of dates
"""

from dayspan.algebra.extraction import extract_ranges
from dayspan.algebra.pairwise import (
    SubtractOutcome,
    Subtraction,
    difference,
    intersect,
    join,
    subtract,
)
from dayspan.algebra.range_sets import cleanup_sort, intersect_ranges, join_ranges

__all__ = [
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
