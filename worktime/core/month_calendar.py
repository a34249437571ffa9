# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Multi-month location calendars for a single user."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from worktime.core.business_days import PublicHolidaySet
from worktime.core.calendar_math import (
    CalendarDate,
    DateInterval,
    days_in_month,
    format_date,
    is_weekend,
    month_name,
    parse_date,
    shift_month,
)


@dataclass
class DayCell:
    """Classification of one calendar day for one user."""

    day: int
    date: CalendarDate
    is_weekend: bool
    is_holiday: bool
    is_public_holiday: bool
    is_onsite: bool | None = None

    @property
    def is_remote(self) -> bool:
        """Explicitly declared remote; an undeclared day is not remote."""
        return self.is_onsite is False


@dataclass
class MonthCalendar:
    """All day cells of one month."""

    month: int
    year: int
    month_name: str
    days: list[DayCell] = field(default_factory=list)


class RestrictionReason(str, Enum):
    """Why a day does not accept a location declaration."""

    PUBLIC_HOLIDAY = "public holiday"
    PERSONAL_HOLIDAY = "personal holiday"
    WEEKEND = "weekend"


@dataclass
class TodayStatus:
    """Whether today accepts a location declaration."""

    is_restricted: bool = False
    reason: RestrictionReason | None = None


def window_months(
    center_year: int,
    center_month: int,
    span_before: int = 1,
    span_after: int = 2,
) -> list[tuple[int, int]]:
    """List the (year, month) pairs of a window around a center month."""
    return [
        shift_month(center_year, center_month, offset)
        for offset in range(-span_before, span_after + 1)
    ]


def window_range(
    center_year: int,
    center_month: int,
    span_before: int = 1,
    span_after: int = 2,
) -> DateInterval:
    """Get the interval covering a whole month window.

    Used to fetch records once for the entire window.
    """
    months = window_months(center_year, center_month, span_before, span_after)
    first_year, first_month = months[0]
    last_year, last_month = months[-1]
    return DateInterval(
        start=days_in_month(first_year, first_month)[0],
        end=days_in_month(last_year, last_month)[-1],
    )


def build_month(
    year: int,
    month: int,
    holiday_dates: set[CalendarDate],
    public_holidays: PublicHolidaySet,
    locations: Mapping[CalendarDate, bool],
) -> MonthCalendar:
    """Build the day cells of one month."""
    cells = []
    for day_str in days_in_month(year, month):
        cells.append(
            DayCell(
                day=parse_date(day_str).day,
                date=day_str,
                is_weekend=is_weekend(day_str),
                is_holiday=day_str in holiday_dates,
                is_public_holiday=day_str in public_holidays,
                is_onsite=locations.get(day_str),
            )
        )
    return MonthCalendar(
        month=month,
        year=year,
        month_name=month_name(month),
        days=cells,
    )


def build_window(
    center_year: int,
    center_month: int,
    span_before: int,
    span_after: int,
    holiday_dates: Iterable[date | str],
    public_holidays: PublicHolidaySet,
    locations: Mapping[date | str, bool],
) -> list[MonthCalendar]:
    """Build calendars for a contiguous window of months.

    Args:
        center_year: Year of the center month.
        center_month: Center month (1-12).
        span_before: Number of months before the center.
        span_after: Number of months after the center.
        holiday_dates: Personal holiday dates of the user in the window.
        public_holidays: Public holidays covering the window.
        locations: Declared location per date (True = onsite).

    Returns:
        Month calendars in chronological order.
    """
    holiday_set = {format_date(d) for d in holiday_dates}
    location_map = {format_date(d): is_onsite for d, is_onsite in locations.items()}

    return [
        build_month(year, month, holiday_set, public_holidays, location_map)
        for year, month in window_months(
            center_year, center_month, span_before, span_after
        )
    ]


def find_day(calendars: Iterable[MonthCalendar], day: date | str) -> DayCell | None:
    """Find the cell of a date within a list of month calendars."""
    target = format_date(day)
    for calendar in calendars:
        for cell in calendar.days:
            if cell.date == target:
                return cell
    return None


def classify_today(calendars: Iterable[MonthCalendar], today: date | str) -> TodayStatus:
    """Determine whether today accepts a location declaration.

    Reason priority: public holiday, then personal holiday, then weekend.
    """
    cell = find_day(calendars, today)
    if cell is None:
        return TodayStatus()

    if cell.is_public_holiday:
        reason = RestrictionReason.PUBLIC_HOLIDAY
    elif cell.is_holiday:
        reason = RestrictionReason.PERSONAL_HOLIDAY
    elif cell.is_weekend:
        reason = RestrictionReason.WEEKEND
    else:
        return TodayStatus()

    return TodayStatus(is_restricted=True, reason=reason)
