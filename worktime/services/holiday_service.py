# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Personal holiday reads and the validated holiday write path."""

import logging
from dataclasses import dataclass, field
from datetime import date

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from worktime.core.calendar_math import (
    CalendarDate,
    DateInterval,
    format_date,
    month_range,
    parse_date,
)
from worktime.core.errors import InvalidDateError
from worktime.core.grouping import MonthGroup, group_by_month
from worktime.core.holiday_validation import (
    HolidayRequestError,
    validate_holiday_request,
)
from worktime.core.records import HolidayRecord
from worktime.models import Holiday, User
from worktime.services import messages, public_holiday_service

logger = logging.getLogger(__name__)


class HolidayServiceError(Exception):
    """Base exception for holiday service errors."""


class HolidayRequestRejected(HolidayServiceError):
    """A holiday request failed validation; nothing was stored."""

    def __init__(self, error: HolidayRequestError) -> None:
        self.error = error
        super().__init__(messages.describe(error.value))

    @property
    def code(self) -> str:
        return self.error.value


class HolidayNotFoundError(HolidayServiceError):
    """Holiday does not exist or is not visible to the user."""


class HolidayConflictError(HolidayServiceError):
    """A concurrent request stored one of the same days first."""


@dataclass
class HolidayAddResult:
    """Outcome of a stored holiday request."""

    business_days: list[CalendarDate]
    created_dates: list[CalendarDate] = field(default_factory=list)
    has_excluded_weekends: bool = False
    has_excluded_public_holidays: bool = False

    @property
    def code(self) -> str:
        return messages.holiday_added_code(
            len(self.business_days),
            self.has_excluded_weekends,
            self.has_excluded_public_holidays,
        )

    @property
    def message(self) -> str:
        return messages.describe(self.code)


# --- Reads ---


def get_holiday(db: Session, holiday_id: int) -> Holiday | None:
    """Get a single holiday by ID."""
    return db.query(Holiday).filter(Holiday.id == holiday_id).first()


def find_by_user_and_range(
    db: Session, user_id: int, interval: DateInterval
) -> list[Holiday]:
    """Get one user's holidays within an interval."""
    return (
        db.query(Holiday)
        .filter(
            Holiday.user_id == user_id,
            Holiday.holiday_date >= parse_date(interval.start),
            Holiday.holiday_date <= parse_date(interval.end),
        )
        .order_by(Holiday.holiday_date)
        .all()
    )


def find_all_by_range(db: Session, interval: DateInterval) -> list[Holiday]:
    """Get every user's holidays within an interval."""
    return (
        db.query(Holiday)
        .filter(
            Holiday.holiday_date >= parse_date(interval.start),
            Holiday.holiday_date <= parse_date(interval.end),
        )
        .order_by(Holiday.user_id, Holiday.holiday_date)
        .all()
    )


def count_monthly_holidays(db: Session, user_id: int, year: int, month: int) -> int:
    """Count a user's holiday days in a month."""
    interval = month_range(year, month)
    return (
        db.query(func.count(Holiday.id))
        .filter(
            Holiday.user_id == user_id,
            Holiday.holiday_date >= parse_date(interval.start),
            Holiday.holiday_date <= parse_date(interval.end),
        )
        .scalar()
        or 0
    )


def find_future(db: Session, user_id: int, today: date | None = None) -> list[Holiday]:
    """Get holidays from today onwards, soonest first."""
    today = today or date.today()
    return (
        db.query(Holiday)
        .filter(Holiday.user_id == user_id, Holiday.holiday_date >= today)
        .order_by(Holiday.holiday_date.asc())
        .all()
    )


def find_past(db: Session, user_id: int, today: date | None = None) -> list[Holiday]:
    """Get holidays before today, most recent first."""
    today = today or date.today()
    return (
        db.query(Holiday)
        .filter(Holiday.user_id == user_id, Holiday.holiday_date < today)
        .order_by(Holiday.holiday_date.desc())
        .all()
    )


def get_history(
    db: Session, user_id: int, today: date | None = None
) -> dict[str, MonthGroup]:
    """Get past holidays grouped by month, most recent month first."""
    return group_by_month(h.holiday_date for h in find_past(db, user_id, today))


def to_records(holidays: list[Holiday]) -> list[HolidayRecord]:
    """Convert holiday rows into engine records."""
    return [
        HolidayRecord(user_id=h.user_id, date=format_date(h.holiday_date))
        for h in holidays
    ]


# --- Writes ---


def add_holidays(
    db: Session,
    user: User,
    start: date | str | None,
    end: date | str | None = None,
) -> HolidayAddResult:
    """Validate a holiday request and store one row per business day.

    Dates the user already has are skipped. All inserts are committed in one
    transaction; on any failure nothing is stored.

    Args:
        db: Database session.
        user: The requesting user.
        start: First requested day.
        end: Last requested day; defaults to ``start``.

    Returns:
        HolidayAddResult describing the stored days.

    Raises:
        HolidayRequestRejected: If validation fails.
        HolidayConflictError: If a concurrent request stored a day first.
    """
    bounds = []
    for value in (start, end or start):
        try:
            bounds.append(format_date(value))
        except InvalidDateError:
            continue
    bounds.sort()

    rows = []
    if bounds:
        rows = public_holiday_service.find_by_range(
            db, DateInterval(start=bounds[0], end=bounds[-1])
        )
    public_holidays = public_holiday_service.to_holiday_set(rows)

    result = validate_holiday_request(start, end, public_holidays)
    if not result.is_valid:
        logger.info(f"Holiday request of user {user.id} rejected: {result.error.value}")
        raise HolidayRequestRejected(result.error)

    created: list[CalendarDate] = []
    try:
        for day in result.business_days:
            holiday_date = parse_date(day)
            exists = (
                db.query(Holiday.id)
                .filter(Holiday.user_id == user.id, Holiday.holiday_date == holiday_date)
                .first()
            )
            if exists is None:
                db.add(Holiday(user_id=user.id, holiday_date=holiday_date))
                created.append(day)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Concurrent holiday insert for user {user.id}: {e}")
        raise HolidayConflictError("Holiday already recorded for one of the days") from e
    except Exception:
        db.rollback()
        logger.exception(f"Failed to store holidays for user {user.id}")
        raise

    return HolidayAddResult(
        business_days=result.business_days,
        created_dates=created,
        has_excluded_weekends=result.has_excluded_weekends,
        has_excluded_public_holidays=result.has_excluded_public_holidays,
    )


def delete_holiday(db: Session, holiday_id: int, user: User) -> None:
    """Delete a holiday owned by the user; admins may delete any holiday.

    Raises:
        HolidayNotFoundError: If the holiday is missing or belongs to someone
            else and the user is not an admin.
    """
    holiday = get_holiday(db, holiday_id)
    if holiday is None:
        raise HolidayNotFoundError(f"Holiday {holiday_id} not found")
    if holiday.user_id != user.id and not user.is_admin:
        raise HolidayNotFoundError(f"Holiday {holiday_id} not found")

    db.delete(holiday)
    db.commit()
