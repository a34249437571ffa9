# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work hours reads and logging."""

import logging
from datetime import date, timedelta

from sqlalchemy import func
from sqlalchemy.orm import Session

from worktime.core.calendar_math import month_range, parse_date
from worktime.models import Holiday, WorkHours
from worktime.services import messages

logger = logging.getLogger(__name__)

# Entries may be logged for today and this many days back
LOGGABLE_DAYS_BACK = 2


class WorkHoursRejected(Exception):
    """A work hours entry failed validation; nothing was stored."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(messages.describe(code))


def get_total_monthly_hours(db: Session, user_id: int, year: int, month: int) -> float:
    """Sum the hours a user logged in a month."""
    interval = month_range(year, month)
    total = (
        db.query(func.sum(WorkHours.hours))
        .filter(
            WorkHours.user_id == user_id,
            WorkHours.work_date >= parse_date(interval.start),
            WorkHours.work_date <= parse_date(interval.end),
        )
        .scalar()
    )
    return float(total or 0)


def find_by_month(db: Session, user_id: int, year: int, month: int) -> list[WorkHours]:
    """Get a user's entries of a month, ordered by date."""
    interval = month_range(year, month)
    return (
        db.query(WorkHours)
        .filter(
            WorkHours.user_id == user_id,
            WorkHours.work_date >= parse_date(interval.start),
            WorkHours.work_date <= parse_date(interval.end),
        )
        .order_by(WorkHours.work_date, WorkHours.id)
        .all()
    )


def log_hours(
    db: Session,
    user_id: int,
    work_date: date,
    hours: float,
    description: str | None = None,
    today: date | None = None,
) -> WorkHours:
    """Record hours worked on a day.

    Args:
        db: Database session.
        user_id: Owner of the entry.
        work_date: Day worked; today or up to ``LOGGABLE_DAYS_BACK`` days ago.
        hours: Hours worked, greater than zero.
        description: Optional note.
        today: Reference date, defaults to the current date.

    Raises:
        WorkHoursRejected: With code ``invalid_hours``, ``work_invalid_date``
            or ``holiday`` (the user is on holiday that day).
    """
    today = today or date.today()
    if hours <= 0:
        raise WorkHoursRejected("invalid_hours")
    if not today - timedelta(days=LOGGABLE_DAYS_BACK) <= work_date <= today:
        raise WorkHoursRejected("work_invalid_date")

    on_holiday = (
        db.query(Holiday.id)
        .filter(Holiday.user_id == user_id, Holiday.holiday_date == work_date)
        .first()
    )
    if on_holiday:
        raise WorkHoursRejected("holiday")

    entry = WorkHours(
        user_id=user_id,
        work_date=work_date,
        hours=hours,
        description=description,
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    logger.info(f"User {user_id} logged {hours} hours on {work_date}")
    return entry
