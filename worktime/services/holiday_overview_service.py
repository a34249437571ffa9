# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Cross-user holiday and remote work overviews for a month."""

import logging
from dataclasses import dataclass, field
from datetime import date

from sqlalchemy.orm import Session

from worktime.core.calendar_math import days_in_month, month_range, resolve_year_month
from worktime.core.errors import AggregationInputMissing
from worktime.core.grouping import (
    DateGroup,
    PersonOverview,
    group_by_date,
    group_by_person,
)
from worktime.services import (
    directory_service,
    holiday_service,
    public_holiday_service,
    work_location_service,
)
from worktime.services.fetching import fetch

logger = logging.getLogger(__name__)


@dataclass
class ByDateView:
    """Employees on holiday per date of a month."""

    year: int
    month: int
    holidays_by_date: dict[str, DateGroup] = field(default_factory=dict)


@dataclass
class ByPersonView:
    """Per-employee holiday and remote tallies of a month."""

    year: int
    month: int
    overview: PersonOverview = field(default_factory=PersonOverview)
    days: list[str] = field(default_factory=list)
    public_holidays: dict[str, str | None] = field(default_factory=dict)


def get_by_date(
    db: Session, year: int | None = None, month: int | None = None
) -> ByDateView:
    """Group all employees' holidays of a month by date.

    Dates are returned in chronological order.
    """
    year, month = resolve_year_month(year, month, date.today())
    interval = month_range(year, month)

    try:
        users = fetch("users", lambda: directory_service.list_users(db))
        holidays = fetch(
            "holidays", lambda: holiday_service.find_all_by_range(db, interval)
        )
    except AggregationInputMissing as e:
        logger.warning(f"By-date overview degraded for {year}-{month:02d}: {e}")
        return ByDateView(year=year, month=month)

    grouped = group_by_date(
        holiday_service.to_records(holidays),
        directory_service.to_directory_users(users),
    )
    return ByDateView(
        year=year,
        month=month,
        holidays_by_date={key: grouped[key] for key in sorted(grouped)},
    )


def get_by_person(
    db: Session, year: int | None = None, month: int | None = None
) -> ByPersonView:
    """Tally holidays and remote days per employee, grouped by group."""
    year, month = resolve_year_month(year, month, date.today())
    interval = month_range(year, month)

    try:
        users = fetch("users", lambda: directory_service.list_users(db))
        groups = fetch("groups", lambda: directory_service.list_groups(db))
        public_holidays = fetch(
            "public holidays",
            lambda: public_holiday_service.find_by_month(db, year, month),
        )
        holidays = fetch(
            "holidays", lambda: holiday_service.find_all_by_range(db, interval)
        )
        locations = fetch(
            "work locations",
            lambda: work_location_service.find_all_by_range(db, interval),
        )
    except AggregationInputMissing as e:
        logger.warning(f"By-person overview degraded for {year}-{month:02d}: {e}")
        return ByPersonView(year=year, month=month)

    holiday_set = public_holiday_service.to_holiday_set(public_holidays)
    days = days_in_month(year, month)
    overview = group_by_person(
        holiday_service.to_records(holidays),
        work_location_service.to_records(locations),
        holiday_set,
        directory_service.to_directory_users(users),
        directory_service.to_directory_groups(groups),
        days,
    )
    return ByPersonView(
        year=year,
        month=month,
        overview=overview,
        days=days,
        public_holidays={d: holiday_set.name_of(d) for d in holiday_set},
    )
