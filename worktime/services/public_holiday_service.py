# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public holiday directory reads and seeding."""

import logging
from datetime import date

import holidays
from sqlalchemy import extract
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from worktime.config import settings
from worktime.core.business_days import PublicHolidaySet
from worktime.core.calendar_math import DateInterval, month_range, parse_date
from worktime.models import PublicHoliday

logger = logging.getLogger(__name__)


class PublicHolidayServiceError(Exception):
    """Base exception for public holiday directory errors."""


class PublicHolidayExistsError(PublicHolidayServiceError):
    """A public holiday is already recorded for the date."""


def find_by_year(db: Session, year: int) -> list[PublicHoliday]:
    """Get all public holidays of a year."""
    return (
        db.query(PublicHoliday)
        .filter(extract("year", PublicHoliday.holiday_date) == year)
        .order_by(PublicHoliday.holiday_date)
        .all()
    )


def find_by_range(db: Session, interval: DateInterval) -> list[PublicHoliday]:
    """Get public holidays within an interval."""
    return (
        db.query(PublicHoliday)
        .filter(
            PublicHoliday.holiday_date >= parse_date(interval.start),
            PublicHoliday.holiday_date <= parse_date(interval.end),
        )
        .order_by(PublicHoliday.holiday_date)
        .all()
    )


def find_by_month(db: Session, year: int, month: int) -> list[PublicHoliday]:
    """Get public holidays of a (clamped) month."""
    return find_by_range(db, month_range(year, month))


def to_holiday_set(rows: list[PublicHoliday]) -> PublicHolidaySet:
    """Convert rows into a membership set for the engine."""
    return PublicHolidaySet.from_records(rows)


def get_calendar_holidays(
    year: int,
    country: str | None = None,
    subdivision: str | None = None,
) -> dict[date, str]:
    """Get the statutory holidays of a country for a year.

    Args:
        year: The year.
        country: ISO country code; defaults to the configured country.
        subdivision: Optional state/region code.

    Returns:
        Dictionary mapping dates to holiday names.

    Raises:
        PublicHolidayServiceError: If the country is not supported.
    """
    country = country or settings.public_holiday_country
    subdivision = subdivision or settings.public_holiday_subdivision
    try:
        calendar = holidays.country_holidays(country, subdiv=subdivision, years=year)
    except NotImplementedError as e:
        raise PublicHolidayServiceError(
            f"No holiday calendar for country: {country}"
        ) from e
    return dict(sorted(calendar.items()))


def import_public_holidays(
    db: Session,
    year: int,
    country: str | None = None,
    subdivision: str | None = None,
) -> list[PublicHoliday]:
    """Seed the directory with a year's statutory holidays.

    Dates already present are left untouched.

    Returns:
        The newly created rows.
    """
    existing = {h.holiday_date for h in find_by_year(db, year)}
    created = []
    for holiday_date, name in get_calendar_holidays(year, country, subdivision).items():
        if holiday_date in existing:
            continue
        row = PublicHoliday(holiday_date=holiday_date, name=name)
        db.add(row)
        created.append(row)

    db.commit()
    for row in created:
        db.refresh(row)

    logger.info(f"Imported {len(created)} public holidays for {year}")
    return created


def create_public_holiday(db: Session, holiday_date: date, name: str) -> PublicHoliday:
    """Add a single public holiday to the directory.

    Raises:
        PublicHolidayExistsError: If the date is already a public holiday.
    """
    row = PublicHoliday(holiday_date=holiday_date, name=name)
    db.add(row)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise PublicHolidayExistsError(
            f"Public holiday already recorded for {holiday_date}"
        ) from e
    db.refresh(row)
    return row
