"""Domain model for dayspan.

Re-exports the public value types for convenient access:
    from dayspan.domain import DateRange, InvalidRangeError
"""
from dayspan.domain.date_range import DatePeriod, DateRange, InvalidRangeError
from dayspan.domain.dates import days_between, parse_step, to_date
from dayspan.domain.types import DEFAULT_STEP, ISO_DATE_FORMAT, DateInput

__all__ = [
    "DatePeriod",
    "DateRange",
    "InvalidRangeError",
    "days_between",
    "parse_step",
    "to_date",
    "DEFAULT_STEP",
    "ISO_DATE_FORMAT",
    "DateInput",
]
