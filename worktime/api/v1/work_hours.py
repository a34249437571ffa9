# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work hours API endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from worktime.api.deps import get_current_user, get_db
from worktime.core.calendar_math import resolve_year_month
from worktime.models import User
from worktime.schemas.common import ErrorDetail
from worktime.schemas.work_hours import (
    WorkHoursCreate,
    WorkHoursMonthResponse,
    WorkHoursResponse,
)
from worktime.services import work_hours_service

router = APIRouter()


@router.get("", response_model=WorkHoursMonthResponse)
def list_work_hours(
    year: int | None = Query(None),
    month: int | None = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> WorkHoursMonthResponse:
    """List the current user's entries of a month (default: current month)."""
    year, month = resolve_year_month(year, month, date.today())
    entries = work_hours_service.find_by_month(db, current_user.id, year, month)
    return WorkHoursMonthResponse(
        year=year,
        month=month,
        total_hours=sum(e.hours for e in entries),
        entries=[WorkHoursResponse.model_validate(e) for e in entries],
    )


@router.post(
    "",
    response_model=WorkHoursResponse,
    status_code=status.HTTP_201_CREATED,
)
def log_work_hours(
    data: WorkHoursCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> WorkHoursResponse:
    """Log hours worked on a recent day."""
    try:
        entry = work_hours_service.log_hours(
            db, current_user.id, data.work_date, data.hours, data.description
        )
    except work_hours_service.WorkHoursRejected as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ErrorDetail(code=e.code, message=str(e)).model_dump(),
        ) from e
    return WorkHoursResponse.model_validate(entry)
