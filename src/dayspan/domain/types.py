"""Shared type aliases and constants used across the domain."""
from __future__ import annotations

from datetime import date
from typing import TypeAlias

# Anything DateRange accepts as an endpoint: Unix epoch seconds,
# an ISO calendar-date string, or a date/datetime.
DateInput: TypeAlias = int | str | date

ISO_DATE_FORMAT = "%Y-%m-%d"
DAY_START_TIME = "00:00:00"
DAY_END_TIME = "23:59:59"
DEFAULT_STEP = "P1D"
RANGE_SEPARATOR = "|"
