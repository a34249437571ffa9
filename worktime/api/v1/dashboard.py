# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Dashboard API endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from worktime.api.deps import get_current_user, get_db
from worktime.core.calendar_math import format_date
from worktime.models import User
from worktime.schemas.dashboard import (
    LocationCalendarResponse,
    MonthCalendarResponse,
    MonthlyStatsResponse,
    MonthSummaryResponse,
    PublicHolidayBrief,
    TodayStatusResponse,
)
from worktime.services import dashboard_service

router = APIRouter()


@router.get("/monthly-stats", response_model=MonthSummaryResponse)
def get_monthly_stats(
    year: int | None = Query(None),
    month: int | None = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MonthSummaryResponse:
    """Get required versus actual hours for the current user.

    Defaults to the current month; out-of-range values are clamped.
    """
    summary = dashboard_service.get_month_summary(db, current_user.id, year, month)
    return MonthSummaryResponse(
        year=summary.year,
        month=summary.month,
        stats=MonthlyStatsResponse.model_validate(summary.stats),
        public_holidays_on_workdays=[
            PublicHolidayBrief(date=format_date(h.holiday_date), name=h.name)
            for h in summary.public_holidays_on_workdays
        ],
    )


@router.get("/location-calendar", response_model=LocationCalendarResponse)
def get_location_calendar(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> LocationCalendarResponse:
    """Get location calendars from last month to two months ahead."""
    window = dashboard_service.get_location_window(db, current_user.id)
    status = window.today_status
    return LocationCalendarResponse(
        today=window.today,
        today_location=window.today_location,
        today_status=TodayStatusResponse(
            is_restricted=status.is_restricted,
            reason=status.reason.value if status.reason else None,
        ),
        calendars=[MonthCalendarResponse.model_validate(c) for c in window.calendars],
    )
