# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Monthly required-vs-actual hours summary."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from worktime.core.calendar_math import format_date, is_weekend, weekday_count_in_month

HOURS_PER_DAY = 8


@dataclass
class MonthlyStats:
    """Hours summary for one user and month."""

    total_work_hours: float
    holiday_count: int
    total_holiday_hours: float
    public_holidays_count: int
    public_holiday_hours: float
    total_combined_hours: float
    required_monthly_hours: float
    remaining_hours: float

    @classmethod
    def empty(cls) -> MonthlyStats:
        """Zeroed stats used when upstream data is unavailable."""
        return cls(
            total_work_hours=0,
            holiday_count=0,
            total_holiday_hours=0,
            public_holidays_count=0,
            public_holiday_hours=0,
            total_combined_hours=0,
            required_monthly_hours=0,
            remaining_hours=0,
        )


def compute_monthly_stats(
    year: int,
    month: int,
    worked_hours: float,
    holiday_day_count: int,
    public_holiday_dates_in_month: Iterable[date | str],
) -> MonthlyStats:
    """Compute the monthly hours summary.

    Every public holiday passed in is subtracted from the required hours,
    whether or not it falls on a weekday; callers that want weekend public
    holidays ignored must filter them out beforehand. Public holiday hours
    only count weekday holidays and are not part of the combined total.

    Args:
        year: The year.
        month: The month (1-12).
        worked_hours: Hours logged by the user in the month.
        holiday_day_count: Personal holiday days in the month.
        public_holiday_dates_in_month: Public holiday dates of the month.

    Returns:
        MonthlyStats rounded to two decimals.
    """
    public_holidays = [format_date(d) for d in public_holiday_dates_in_month]
    weekday_public_holidays = [d for d in public_holidays if not is_weekend(d)]

    required = (weekday_count_in_month(year, month) - len(public_holidays)) * HOURS_PER_DAY
    total_holiday_hours = holiday_day_count * HOURS_PER_DAY
    public_holiday_hours = len(weekday_public_holidays) * HOURS_PER_DAY
    total_combined = worked_hours + total_holiday_hours
    remaining = max(0, required - total_combined)

    return MonthlyStats(
        total_work_hours=round(worked_hours, 2),
        holiday_count=holiday_day_count,
        total_holiday_hours=round(total_holiday_hours, 2),
        public_holidays_count=len(weekday_public_holidays),
        public_holiday_hours=round(public_holiday_hours, 2),
        total_combined_hours=round(total_combined, 2),
        required_monthly_hours=round(required, 2),
        remaining_hours=round(remaining, 2),
    )
