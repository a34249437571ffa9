# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Per-user home page aggregates: monthly stats and location calendars."""

import logging
from dataclasses import dataclass, field
from datetime import date

from sqlalchemy.orm import Session

from worktime.core.business_days import PublicHolidaySet
from worktime.core.calendar_math import (
    DateInterval,
    format_date,
    is_weekend,
    resolve_year_month,
)
from worktime.core.errors import AggregationInputMissing
from worktime.core.month_calendar import (
    MonthCalendar,
    TodayStatus,
    build_window,
    classify_today,
    window_range,
)
from worktime.core.monthly_stats import MonthlyStats, compute_monthly_stats
from worktime.models import PublicHoliday
from worktime.services import (
    holiday_service,
    public_holiday_service,
    work_hours_service,
    work_location_service,
)
from worktime.services.fetching import fetch

logger = logging.getLogger(__name__)


@dataclass
class MonthSummary:
    """Monthly stats plus the weekday public holidays they account for."""

    year: int
    month: int
    stats: MonthlyStats
    public_holidays_on_workdays: list[PublicHoliday] = field(default_factory=list)


@dataclass
class LocationWindow:
    """Location planning calendars around a center month."""

    window: DateInterval | None = None
    calendars: list[MonthCalendar] = field(default_factory=list)
    today: str | None = None
    today_location: bool | None = None
    today_status: TodayStatus = field(default_factory=TodayStatus)


def get_month_summary(
    db: Session,
    user_id: int,
    year: int | None = None,
    month: int | None = None,
) -> MonthSummary:
    """Get the required-vs-actual hours summary for a user and month.

    Falls back to zeroed stats when any input cannot be fetched.
    """
    year, month = resolve_year_month(year, month, date.today())

    try:
        worked = fetch(
            "work hours",
            lambda: work_hours_service.get_total_monthly_hours(db, user_id, year, month),
        )
        holiday_count = fetch(
            "holidays",
            lambda: holiday_service.count_monthly_holidays(db, user_id, year, month),
        )
        public_holidays = fetch(
            "public holidays",
            lambda: public_holiday_service.find_by_month(db, year, month),
        )
    except AggregationInputMissing as e:
        logger.warning(f"Monthly stats degraded for user {user_id}: {e}")
        return MonthSummary(year=year, month=month, stats=MonthlyStats.empty())

    stats = compute_monthly_stats(
        year,
        month,
        worked,
        holiday_count,
        [h.holiday_date for h in public_holidays],
    )
    return MonthSummary(
        year=year,
        month=month,
        stats=stats,
        public_holidays_on_workdays=[
            h for h in public_holidays if not is_weekend(h.holiday_date)
        ],
    )


def get_location_window(
    db: Session,
    user_id: int,
    today: date | None = None,
    span_before: int = 1,
    span_after: int = 2,
) -> LocationWindow:
    """Build location calendars around the current month.

    Holidays, public holidays and locations are each fetched once for the
    whole window. Falls back to an empty window when any fetch fails.
    """
    today = today or date.today()
    window = window_range(today.year, today.month, span_before, span_after)

    try:
        locations = fetch(
            "work locations",
            lambda: work_location_service.find_by_user_and_range(db, user_id, window),
        )
        holidays = fetch(
            "holidays",
            lambda: holiday_service.find_by_user_and_range(db, user_id, window),
        )
        public_holidays = fetch(
            "public holidays",
            lambda: public_holiday_service.find_by_range(db, window),
        )
    except AggregationInputMissing as e:
        logger.warning(f"Location window degraded for user {user_id}: {e}")
        return LocationWindow(today=format_date(today))

    location_map = work_location_service.to_location_map(locations)
    calendars = build_window(
        today.year,
        today.month,
        span_before,
        span_after,
        [h.holiday_date for h in holidays],
        PublicHolidaySet.from_records(public_holidays),
        location_map,
    )
    today_str = format_date(today)
    return LocationWindow(
        window=window,
        calendars=calendars,
        today=today_str,
        today_location=location_map.get(today_str),
        today_status=classify_today(calendars, today_str),
    )
