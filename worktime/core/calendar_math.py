# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Date utilities shared by every calendar computation.

Calendar dates travel through the engine as canonical ISO ``YYYY-MM-DD``
strings. ``format_date`` is the single normalization point: every date must
pass through it before being compared, hashed or used as a mapping key.
"""

from __future__ import annotations

from calendar import monthrange
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from worktime.core.errors import InvalidDateError

CalendarDate = str

MIN_YEAR = 2020
MAX_YEAR = 2030

MONTH_NAMES = [
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

# Indexed by day_of_week (0 = Sunday)
DAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]

SUNDAY = 0
SATURDAY = 6


@dataclass(frozen=True)
class DateInterval:
    """Inclusive interval of calendar days."""

    start: CalendarDate
    end: CalendarDate

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidDateError(f"{self.start}..{self.end}")

    @classmethod
    def of(cls, start: date | str, end: date | str | None = None) -> DateInterval:
        """Build an interval from date-like values (single day if no end)."""
        start_str = format_date(start)
        end_str = format_date(end) if end is not None else start_str
        return cls(start=start_str, end=end_str)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, (str, date)):
            return False
        return self.start <= format_date(value) <= self.end

    @property
    def day_count(self) -> int:
        """Number of calendar days in the interval."""
        return (parse_date(self.end) - parse_date(self.start)).days + 1


def parse_date(value: date | datetime | str) -> date:
    """Parse a date-like value into a ``date``.

    Accepts ``date``/``datetime`` objects and ISO strings; an ISO timestamp
    is truncated to its date part.

    Raises:
        InvalidDateError: If the value is empty or not a valid date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(value)

    text = value.strip()
    if "T" in text:
        text = text.split("T", 1)[0]
    elif " " in text:
        text = text.split(" ", 1)[0]
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise InvalidDateError(value) from e


def format_date(value: date | datetime | str) -> CalendarDate:
    """Canonicalize a date-like value to ``YYYY-MM-DD``."""
    return parse_date(value).isoformat()


def day_of_week(value: date | str) -> int:
    """Return the day of week with 0 = Sunday and 6 = Saturday."""
    return (parse_date(value).weekday() + 1) % 7


def is_weekend(value: date | str) -> bool:
    """Check if a date falls on Saturday or Sunday."""
    return day_of_week(value) in (SUNDAY, SATURDAY)


def clamp_year_month(year: int, month: int) -> tuple[int, int]:
    """Clamp year and month into the supported window."""
    return max(MIN_YEAR, min(MAX_YEAR, year)), max(1, min(12, month))


def resolve_year_month(
    year: int | None, month: int | None, today: date
) -> tuple[int, int]:
    """Default missing year/month to today's, then clamp."""
    return clamp_year_month(
        today.year if year is None else year,
        today.month if month is None else month,
    )


def month_range(year: int, month: int) -> DateInterval:
    """Get the first-to-last-day interval of a month.

    Out-of-range input is clamped to the nearest valid year/month rather
    than rejected.
    """
    year, month = clamp_year_month(year, month)
    _, last_day = monthrange(year, month)
    return DateInterval(
        start=date(year, month, 1).isoformat(),
        end=date(year, month, last_day).isoformat(),
    )


def iter_dates(interval: DateInterval) -> Iterator[CalendarDate]:
    """Yield every canonical date of an interval in ascending order."""
    current = parse_date(interval.start)
    last = parse_date(interval.end)
    while current <= last:
        yield current.isoformat()
        current += timedelta(days=1)


def days_in_month(year: int, month: int) -> list[CalendarDate]:
    """List all canonical dates of a month.

    Unlike ``month_range`` the year is not clamped, so calendar windows that
    reach past the supported range still show the right days.
    """
    _, last_day = monthrange(year, month)
    return [date(year, month, day).isoformat() for day in range(1, last_day + 1)]


def weekday_count_in_month(year: int, month: int) -> int:
    """Count Monday-to-Friday days in a month."""
    return sum(1 for d in iter_dates(month_range(year, month)) if not is_weekend(d))


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Move a year/month pair by ``offset`` months, wrapping across years."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def month_name(month: int) -> str:
    """Get the English name of a month (1-12)."""
    return MONTH_NAMES[month]


def day_of_week_name(value: date | str) -> str:
    """Get the English weekday name of a date."""
    return DAY_NAMES[day_of_week(value)]


def format_day_and_month(value: date | str) -> str:
    """Format a date as e.g. ``1 May``."""
    d = parse_date(value)
    return f"{d.day} {MONTH_NAMES[d.month]}"

