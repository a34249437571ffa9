# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Personal holiday schemas."""

import datetime

from pydantic import BaseModel, Field


class HolidayCreate(BaseModel):
    """Schema for requesting a holiday day or range.

    Dates are kept as text so malformed input is reported with the
    holiday error codes rather than a generic validation error.
    """

    start_date: str = Field(..., min_length=1, max_length=32)
    end_date: str | None = Field(None, max_length=32)


class HolidayResponse(BaseModel):
    """Schema for a stored holiday day."""

    id: int
    user_id: int
    holiday_date: datetime.date
    created_at: datetime.datetime

    model_config = {"from_attributes": True}


class HolidayAddResponse(BaseModel):
    """Outcome of a stored holiday request."""

    code: str
    message: str
    business_days: list[str]
    created_dates: list[str]
    has_excluded_weekends: bool
    has_excluded_public_holidays: bool


class HolidayHistoryMonth(BaseModel):
    """Past holiday dates of one month."""

    key: str
    name: str
    dates: list[str]
