# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Business day generation: weekends and public holidays excluded."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from datetime import date

from worktime.core.calendar_math import (
    CalendarDate,
    DateInterval,
    format_date,
    is_weekend,
    iter_dates,
)


class PublicHolidaySet:
    """Set of public holiday dates with optional display names.

    The set is expected to be pre-filtered to the relevant range by the
    caller; it only answers membership questions.
    """

    def __init__(self, holidays: Mapping[CalendarDate, str | None] | None = None) -> None:
        self._holidays: dict[CalendarDate, str | None] = {}
        for holiday_date, name in (holidays or {}).items():
            self._holidays[format_date(holiday_date)] = name

    @classmethod
    def from_dates(cls, dates: Iterable[date | str]) -> PublicHolidaySet:
        """Build a set from bare dates without names."""
        return cls({format_date(d): None for d in dates})

    @classmethod
    def from_records(cls, records: Iterable[object]) -> PublicHolidaySet:
        """Build a set from records exposing ``holiday_date`` and ``name``."""
        return cls(
            {
                format_date(record.holiday_date): getattr(record, "name", None)
                for record in records
            }
        )

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, (str, date)):
            return False
        return format_date(value) in self._holidays

    def __iter__(self) -> Iterator[CalendarDate]:
        return iter(sorted(self._holidays))

    def __len__(self) -> int:
        return len(self._holidays)

    def name_of(self, value: date | str) -> str | None:
        """Get the display name of a holiday, or None."""
        return self._holidays.get(format_date(value))


def is_business_day(value: date | str, public_holidays: PublicHolidaySet) -> bool:
    """Check if a date is neither a weekend nor a public holiday."""
    return not is_weekend(value) and value not in public_holidays


def generate_business_days(
    interval: DateInterval,
    public_holidays: PublicHolidaySet,
) -> list[CalendarDate]:
    """Generate the effective business days of an interval.

    Args:
        interval: Inclusive date interval.
        public_holidays: Public holidays to exclude.

    Returns:
        Ascending list of canonical dates; empty when the interval holds
        only weekends and public holidays.
    """
    return [d for d in iter_dates(interval) if is_business_day(d, public_holidays)]
