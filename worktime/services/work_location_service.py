# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work location reads."""

from sqlalchemy.orm import Session

from worktime.core.calendar_math import DateInterval, format_date, parse_date
from worktime.core.records import WorkLocationRecord
from worktime.models import WorkLocation


def find_by_user_and_range(
    db: Session, user_id: int, interval: DateInterval
) -> list[WorkLocation]:
    """Get one user's location declarations within an interval."""
    return (
        db.query(WorkLocation)
        .filter(
            WorkLocation.user_id == user_id,
            WorkLocation.work_date >= parse_date(interval.start),
            WorkLocation.work_date <= parse_date(interval.end),
        )
        .order_by(WorkLocation.work_date)
        .all()
    )


def find_all_by_range(db: Session, interval: DateInterval) -> list[WorkLocation]:
    """Get every user's location declarations within an interval."""
    return (
        db.query(WorkLocation)
        .filter(
            WorkLocation.work_date >= parse_date(interval.start),
            WorkLocation.work_date <= parse_date(interval.end),
        )
        .order_by(WorkLocation.user_id, WorkLocation.work_date)
        .all()
    )


def to_location_map(locations: list[WorkLocation]) -> dict[str, bool]:
    """Map canonical date to is_onsite for a single user's rows."""
    return {format_date(loc.work_date): loc.is_onsite for loc in locations}


def to_records(locations: list[WorkLocation]) -> list[WorkLocationRecord]:
    """Convert location rows into engine records."""
    return [
        WorkLocationRecord(
            user_id=loc.user_id,
            date=format_date(loc.work_date),
            is_onsite=loc.is_onsite,
        )
        for loc in locations
    ]
