# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Holiday request validation against business day rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from worktime.core.business_days import PublicHolidaySet, generate_business_days
from worktime.core.calendar_math import (
    CalendarDate,
    DateInterval,
    format_date,
    is_weekend,
    iter_dates,
)
from worktime.core.errors import InvalidDateError


class HolidayRequestError(str, Enum):
    """Reasons a holiday request is rejected."""

    INVALID_DATE = "invalid_date"
    WEEKEND_NOT_ALLOWED = "weekend_not_allowed"
    PUBLIC_HOLIDAY_NOT_ALLOWED = "public_holiday_not_allowed"
    NO_VALID_DAYS = "no_valid_days"


@dataclass
class HolidayRequestResult:
    """Result of holiday request validation."""

    error: HolidayRequestError | None = None
    business_days: list[CalendarDate] = field(default_factory=list)
    has_excluded_days: bool = False
    has_excluded_weekends: bool = False
    has_excluded_public_holidays: bool = False

    @property
    def is_valid(self) -> bool:
        """True when the request produced at least one business day."""
        return self.error is None

    @classmethod
    def rejected(cls, error: HolidayRequestError) -> HolidayRequestResult:
        return cls(error=error)


def validate_holiday_request(
    start: date | str | None,
    end: date | str | None,
    public_holidays: PublicHolidaySet,
) -> HolidayRequestResult:
    """Validate a holiday request interval.

    Only the start date is checked against the weekend and public holiday
    rules; later days of the interval are silently excluded by business day
    generation. The first failing rule wins:

    1. start missing or unparseable -> INVALID_DATE
    2. start on a weekend -> WEEKEND_NOT_ALLOWED
    3. start is a public holiday -> PUBLIC_HOLIDAY_NOT_ALLOWED
    4. no business day in the interval -> NO_VALID_DAYS

    An unparseable end date is only reported (as INVALID_DATE) once the
    start date has passed rules 2 and 3.

    Args:
        start: First requested day.
        end: Last requested day; defaults to ``start``.
        public_holidays: Public holidays covering the interval.

    Returns:
        HolidayRequestResult with the business days and exclusion flags.
    """
    if start is None or start == "":
        return HolidayRequestResult.rejected(HolidayRequestError.INVALID_DATE)

    try:
        start_str = format_date(start)
    except InvalidDateError:
        return HolidayRequestResult.rejected(HolidayRequestError.INVALID_DATE)

    if is_weekend(start_str):
        return HolidayRequestResult.rejected(HolidayRequestError.WEEKEND_NOT_ALLOWED)

    if start_str in public_holidays:
        return HolidayRequestResult.rejected(
            HolidayRequestError.PUBLIC_HOLIDAY_NOT_ALLOWED
        )

    try:
        end_str = format_date(end) if end not in (None, "") else start_str
    except InvalidDateError:
        return HolidayRequestResult.rejected(HolidayRequestError.INVALID_DATE)

    if end_str < start_str:
        return HolidayRequestResult.rejected(HolidayRequestError.NO_VALID_DAYS)

    interval = DateInterval(start=start_str, end=end_str)
    business_days = generate_business_days(interval, public_holidays)
    if not business_days:
        return HolidayRequestResult.rejected(HolidayRequestError.NO_VALID_DAYS)

    has_weekends = False
    has_public_holidays = False
    if interval.day_count > len(business_days):
        for d in iter_dates(interval):
            if is_weekend(d):
                has_weekends = True
            if d in public_holidays:
                has_public_holidays = True

    return HolidayRequestResult(
        business_days=business_days,
        has_excluded_days=interval.day_count > len(business_days),
        has_excluded_weekends=has_weekends,
        has_excluded_public_holidays=has_public_holidays,
    )
