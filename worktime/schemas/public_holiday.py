# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public holiday directory schemas."""

import datetime

from pydantic import BaseModel, Field


class PublicHolidayResponse(BaseModel):
    """Schema for a public holiday."""

    id: int
    holiday_date: datetime.date
    name: str

    model_config = {"from_attributes": True}


class PublicHolidayImport(BaseModel):
    """Schema for seeding a year from the statutory calendar."""

    year: int = Field(..., ge=2020, le=2030)
    country: str | None = Field(None, min_length=2, max_length=3)
    subdivision: str | None = Field(None, max_length=10)


class PublicHolidayImportResult(BaseModel):
    """Rows added by an import."""

    year: int
    imported: int
    holidays: list[PublicHolidayResponse]


class PublicHolidayCreate(BaseModel):
    """Schema for adding a single public holiday."""

    holiday_date: datetime.date
    name: str = Field(..., min_length=1, max_length=200)
