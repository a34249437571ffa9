# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work hours schemas."""

import datetime

from pydantic import BaseModel, Field


class WorkHoursCreate(BaseModel):
    """Schema for logging hours worked on a day."""

    work_date: datetime.date
    hours: float = Field(..., gt=0, le=24)
    description: str | None = Field(None, max_length=1000)


class WorkHoursResponse(BaseModel):
    """Schema for a work hours entry."""

    id: int
    work_date: datetime.date
    hours: float
    description: str | None

    model_config = {"from_attributes": True}


class WorkHoursMonthResponse(BaseModel):
    """Entries of one month with their total."""

    year: int
    month: int
    total_hours: float
    entries: list[WorkHoursResponse]
