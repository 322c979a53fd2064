"""Calendar dates and the day arithmetic used to age movies."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass
class Date:
    """A day/month/year calendar date."""

    day: int = 1
    month: int = 1
    year: int = 2000

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"

    def display(self) -> str:
        """Write the date as ``day/month/year`` to stdout, with no newline, and return it."""
        text = str(self)
        sys.stdout.write(text)
        return text


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in ``month`` of ``year``; unknown months have 31."""
    if month in (4, 6, 9, 11):
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 31


def days_since(release: Date, today: Date) -> int:
    """Return the day count the catalogue uses for a release seen from ``today``.

    Releases after ``today`` count as zero, and the result is never negative.
    """
    if (release.year, release.month, release.day) > (today.year, today.month, today.day):
        return 0

    days = sum(366 if is_leap_year(year) else 365 for year in range(release.year, today.year))
    days += sum(days_in_month(month, today.year) for month in range(1, today.month))
    days += today.day

    days -= days_in_month(release.month, release.year) - release.day
    days -= sum(days_in_month(month, release.year) for month in range(release.month + 1, 13))

    return max(days, 0)