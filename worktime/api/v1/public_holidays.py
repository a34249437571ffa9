# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public holiday directory API endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from worktime.api.deps import get_current_admin, get_current_user, get_db
from worktime.core.calendar_math import resolve_year_month
from worktime.models import User
from worktime.schemas.public_holiday import (
    PublicHolidayCreate,
    PublicHolidayImport,
    PublicHolidayImportResult,
    PublicHolidayResponse,
)
from worktime.services import public_holiday_service

router = APIRouter()


@router.get("", response_model=list[PublicHolidayResponse])
def list_public_holidays(
    year: int | None = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[PublicHolidayResponse]:
    """List the public holidays of a year (default: current year).

    Out-of-range years are clamped.
    """
    year, _ = resolve_year_month(year, None, date.today())
    rows = public_holiday_service.find_by_year(db, year)
    return [PublicHolidayResponse.model_validate(r) for r in rows]


@router.post(
    "/import",
    response_model=PublicHolidayImportResult,
    status_code=status.HTTP_201_CREATED,
)
def import_public_holidays(
    data: PublicHolidayImport,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> PublicHolidayImportResult:
    """Seed a year from the statutory holiday calendar (admin only)."""
    try:
        created = public_holiday_service.import_public_holidays(
            db, data.year, data.country, data.subdivision
        )
    except public_holiday_service.PublicHolidayServiceError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return PublicHolidayImportResult(
        year=data.year,
        imported=len(created),
        holidays=[PublicHolidayResponse.model_validate(r) for r in created],
    )


@router.post(
    "",
    response_model=PublicHolidayResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_public_holiday(
    data: PublicHolidayCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> PublicHolidayResponse:
    """Add a single public holiday (admin only)."""
    try:
        row = public_holiday_service.create_public_holiday(
            db, data.holiday_date, data.name
        )
    except public_holiday_service.PublicHolidayExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        ) from e
    return PublicHolidayResponse.model_validate(row)
