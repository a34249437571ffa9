# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Dashboard schemas."""

from pydantic import BaseModel, Field


class MonthlyStatsResponse(BaseModel):
    """Required versus actual working hours of a month."""

    total_work_hours: float
    holiday_count: int
    total_holiday_hours: float
    public_holidays_count: int
    public_holiday_hours: float
    total_combined_hours: float
    required_monthly_hours: float
    remaining_hours: float

    model_config = {"from_attributes": True}


class PublicHolidayBrief(BaseModel):
    """Public holiday shown next to the monthly stats."""

    date: str
    name: str | None = None


class MonthSummaryResponse(BaseModel):
    """Monthly stats plus the public holidays falling on weekdays."""

    year: int
    month: int
    stats: MonthlyStatsResponse
    public_holidays_on_workdays: list[PublicHolidayBrief] = Field(default_factory=list)


class DayCellResponse(BaseModel):
    """One classified calendar day."""

    day: int
    date: str
    is_weekend: bool
    is_holiday: bool
    is_public_holiday: bool
    is_onsite: bool | None = None
    is_remote: bool

    model_config = {"from_attributes": True}


class MonthCalendarResponse(BaseModel):
    """All classified days of one month."""

    month: int
    year: int
    month_name: str
    days: list[DayCellResponse]

    model_config = {"from_attributes": True}


class TodayStatusResponse(BaseModel):
    """Whether today accepts a location declaration."""

    is_restricted: bool
    reason: str | None = None


class LocationCalendarResponse(BaseModel):
    """Location calendars of a month window around today."""

    today: str | None = None
    today_location: bool | None = None
    today_status: TodayStatusResponse
    calendars: list[MonthCalendarResponse] = Field(default_factory=list)
