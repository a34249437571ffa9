# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Cross-user holiday overview schemas."""

from pydantic import BaseModel, Field


class EmployeeRefResponse(BaseModel):
    """Employee identity in listings."""

    id: int
    name: str
    email: str

    model_config = {"from_attributes": True}


class DateGroupResponse(BaseModel):
    """Employees on holiday on one date."""

    display_date: str
    day_of_week_name: str
    employees: list[EmployeeRefResponse]

    model_config = {"from_attributes": True}


class ByDateResponse(BaseModel):
    """Holidays of a month grouped by date."""

    year: int
    month: int
    holidays_by_date: dict[str, DateGroupResponse] = Field(default_factory=dict)


class EmployeeSummaryResponse(BaseModel):
    """Holiday and remote work tallies of one employee."""

    id: int
    name: str
    email: str
    holiday_dates: list[str]
    holiday_count: int
    remote_dates: list[str]
    remote_days_count: int
    locations: dict[str, bool]

    model_config = {"from_attributes": True}


class GroupResponse(BaseModel):
    """Employees of one group."""

    id: int
    name: str
    employees: list[EmployeeSummaryResponse]

    model_config = {"from_attributes": True}


class ByPersonResponse(BaseModel):
    """Per-employee tallies of a month grouped by group."""

    year: int
    month: int
    days: list[str] = Field(default_factory=list)
    public_holidays: dict[str, str | None] = Field(default_factory=dict)
    groups: list[GroupResponse] = Field(default_factory=list)
    total_employees_with_holidays: int = 0
    total_employees_with_remote_work: int = 0
