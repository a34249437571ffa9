# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Personal holiday and employee overview API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from worktime.api.deps import get_current_user, get_db
from worktime.models import User
from worktime.schemas.common import ErrorDetail, MessageResponse
from worktime.schemas.holiday import (
    HolidayAddResponse,
    HolidayCreate,
    HolidayHistoryMonth,
    HolidayResponse,
)
from worktime.schemas.overview import (
    ByDateResponse,
    ByPersonResponse,
    DateGroupResponse,
    GroupResponse,
)
from worktime.services import holiday_overview_service, holiday_service, messages

router = APIRouter()


@router.get("", response_model=list[HolidayResponse])
def list_future_holidays(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[HolidayResponse]:
    """List the current user's holidays from today onwards."""
    holidays = holiday_service.find_future(db, current_user.id)
    return [HolidayResponse.model_validate(h) for h in holidays]


@router.post(
    "",
    response_model=HolidayAddResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_holidays(
    data: HolidayCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> HolidayAddResponse:
    """Request a holiday day or range.

    Weekends and public holidays inside the range are skipped; days the
    user already has are not stored twice.
    """
    try:
        result = holiday_service.add_holidays(
            db, current_user, data.start_date, data.end_date
        )
    except holiday_service.HolidayRequestRejected as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ErrorDetail(code=e.code, message=str(e)).model_dump(),
        ) from e
    except holiday_service.HolidayConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=ErrorDetail(
                code="conflict", message=messages.describe("conflict")
            ).model_dump(),
        ) from e

    return HolidayAddResponse(
        code=result.code,
        message=result.message,
        business_days=result.business_days,
        created_dates=result.created_dates,
        has_excluded_weekends=result.has_excluded_weekends,
        has_excluded_public_holidays=result.has_excluded_public_holidays,
    )


@router.delete("/{holiday_id}", response_model=MessageResponse)
def delete_holiday(
    holiday_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    """Delete one of the current user's holidays (admins: any holiday)."""
    try:
        holiday_service.delete_holiday(db, holiday_id, current_user)
    except holiday_service.HolidayNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Holiday not found",
        ) from e
    return MessageResponse(message=messages.describe("deleted"))


@router.get("/history", response_model=list[HolidayHistoryMonth])
def get_holiday_history(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[HolidayHistoryMonth]:
    """List the current user's past holidays grouped by month, newest first."""
    history = holiday_service.get_history(db, current_user.id)
    return [
        HolidayHistoryMonth(key=key, name=group.name, dates=group.dates)
        for key, group in history.items()
    ]


@router.get("/employees/by-date", response_model=ByDateResponse)
def get_employees_by_date(
    year: int | None = Query(None),
    month: int | None = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ByDateResponse:
    """List who is on holiday on each date of a month."""
    view = holiday_overview_service.get_by_date(db, year, month)
    return ByDateResponse(
        year=view.year,
        month=view.month,
        holidays_by_date={
            key: DateGroupResponse.model_validate(group)
            for key, group in view.holidays_by_date.items()
        },
    )


@router.get("/employees/by-person", response_model=ByPersonResponse)
def get_employees_by_person(
    year: int | None = Query(None),
    month: int | None = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ByPersonResponse:
    """Tally holidays and remote days per employee for a month."""
    view = holiday_overview_service.get_by_person(db, year, month)
    overview = view.overview
    return ByPersonResponse(
        year=view.year,
        month=view.month,
        days=view.days,
        public_holidays=view.public_holidays,
        groups=[GroupResponse.model_validate(g) for g in overview.groups],
        total_employees_with_holidays=overview.total_employees_with_holidays,
        total_employees_with_remote_work=overview.total_employees_with_remote_work,
    )
