"""Calendar dates as stored in the school records."""

from __future__ import annotations

import re
from dataclasses import dataclass

MIN_YEAR = 1900
MAX_YEAR = 2100

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})
_DATE_PATTERN = re.compile(r"\s*(\d{1,2})/\s*(\d{1,2})/\s*(\d{1,4})")


@dataclass(frozen=True)
class Date:
    """A day, month and year; an all-zero date stands for "unknown"."""

    day: int = 0
    month: int = 0
    year: int = 0

    def __str__(self) -> str:
        return format_date(self)


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _days_in_month(month: int, year: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def is_date_valid(date: Date) -> bool:
    """Check that the date exists and its year lies between 1900 and 2100."""
    if not 1 <= date.day <= 31:
        return False
    if not 1 <= date.month <= 12:
        return False
    if not MIN_YEAR <= date.year <= MAX_YEAR:
        return False
    return date.day <= _days_in_month(date.month, date.year)


def parse_date(text: str) -> Date:
    """Parse a ``DD/MM/YYYY`` prefix of *text*; trailing text is ignored."""
    match = _DATE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"not a DD/MM/YYYY date: {text!r}")
    day, month, year = (int(group) for group in match.groups())
    return Date(day=day, month=month, year=year)


def format_date(date: Date) -> str:
    """Render a date as zero-padded ``DD/MM/YYYY``."""
    return f"{date.day:02d}/{date.month:02d}/{date.year:04d}"