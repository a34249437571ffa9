# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Cross-user holiday and remote work aggregation.

Records are indexed by user once, so each view costs O(users + records)
instead of scanning every record for every user.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from worktime.core.business_days import PublicHolidaySet
from worktime.core.calendar_math import (
    CalendarDate,
    day_of_week_name,
    format_date,
    format_day_and_month,
    is_weekend,
    month_name,
    parse_date,
)
from worktime.core.records import (
    DirectoryGroup,
    DirectoryUser,
    HolidayRecord,
    WorkLocationRecord,
)

UNGROUPED_ID = 0
UNGROUPED_NAME = "no group"


@dataclass
class EmployeeRef:
    """Minimal employee identity for listings."""

    id: int
    name: str
    email: str


@dataclass
class DateGroup:
    """Employees on holiday on one date."""

    display_date: str
    day_of_week_name: str
    employees: list[EmployeeRef] = field(default_factory=list)


@dataclass
class EmployeeSummary:
    """Holiday and remote work tallies of one employee for a month."""

    id: int
    name: str
    email: str
    holiday_dates: list[CalendarDate]
    remote_dates: list[CalendarDate]
    locations: dict[CalendarDate, bool] = field(default_factory=dict)

    @property
    def holiday_count(self) -> int:
        return len(self.holiday_dates)

    @property
    def remote_days_count(self) -> int:
        return len(self.remote_dates)


@dataclass
class GroupAggregate:
    """Employees of one organizational group."""

    id: int
    name: str
    employees: list[EmployeeSummary] = field(default_factory=list)

    @property
    def is_ungrouped(self) -> bool:
        return self.id == UNGROUPED_ID


@dataclass
class PersonOverview:
    """By-person view with summary counters."""

    groups: list[GroupAggregate] = field(default_factory=list)
    total_employees_with_holidays: int = 0
    total_employees_with_remote_work: int = 0

    @classmethod
    def empty(cls) -> PersonOverview:
        return cls()


@dataclass
class MonthGroup:
    """Holiday dates of one month, used by the history view."""

    name: str
    dates: list[CalendarDate] = field(default_factory=list)


def index_by_user(records: Iterable[HolidayRecord]) -> dict[int, list[HolidayRecord]]:
    """Group holiday records by user id."""
    by_user: dict[int, list[HolidayRecord]] = defaultdict(list)
    for record in records:
        by_user[record.user_id].append(record)
    return by_user


def index_locations_by_user(
    records: Iterable[WorkLocationRecord],
) -> dict[int, dict[CalendarDate, bool]]:
    """Map user id to a date -> is_onsite lookup."""
    by_user: dict[int, dict[CalendarDate, bool]] = defaultdict(dict)
    for record in records:
        by_user[record.user_id][format_date(record.date)] = record.is_onsite
    return by_user


def group_by_date(
    holidays: Iterable[HolidayRecord],
    users: Iterable[DirectoryUser],
) -> dict[CalendarDate, DateGroup]:
    """Group holiday records by date.

    Keys are inserted in the order dates are first met while scanning users
    in directory order, which is not necessarily chronological. Callers that
    need chronological order must sort the keys.
    """
    holidays_by_user = index_by_user(holidays)
    by_date: dict[CalendarDate, DateGroup] = {}

    for user in users:
        for holiday in holidays_by_user.get(user.id, []):
            date_str = format_date(holiday.date)
            if date_str not in by_date:
                by_date[date_str] = DateGroup(
                    display_date=format_day_and_month(date_str),
                    day_of_week_name=day_of_week_name(date_str),
                )
            by_date[date_str].employees.append(
                EmployeeRef(id=user.id, name=user.display_name, email=user.email)
            )

    return by_date


def _remote_dates(
    days: Iterable[CalendarDate],
    locations: dict[CalendarDate, bool],
    holiday_dates: set[CalendarDate],
    public_holidays: PublicHolidaySet,
) -> list[CalendarDate]:
    """Declared remote days that are otherwise working days."""
    return [
        d
        for d in days
        if locations.get(d) is False
        and not is_weekend(d)
        and d not in public_holidays
        and d not in holiday_dates
    ]


def group_by_person(
    holidays: Iterable[HolidayRecord],
    locations: Iterable[WorkLocationRecord],
    public_holidays: PublicHolidaySet,
    users: Iterable[DirectoryUser],
    groups: Iterable[DirectoryGroup],
    days_in_month: Iterable[date | str],
) -> PersonOverview:
    """Build per-employee holiday and remote work tallies grouped by group.

    Users with neither holidays nor remote days are left out. Users without
    a group, or whose group is unknown, land in the ungrouped bucket. Empty
    groups are dropped; the rest are sorted by name with the ungrouped
    bucket last.

    Args:
        holidays: Holiday records of all users in the month.
        locations: Work location records of all users in the month.
        public_holidays: Public holidays of the month.
        users: User directory.
        groups: Group directory.
        days_in_month: Every date of the month.

    Returns:
        PersonOverview with the groups and summary counters.
    """
    holidays_by_user = index_by_user(holidays)
    locations_by_user = index_locations_by_user(locations)
    days = [format_date(d) for d in days_in_month]

    group_map: dict[int, GroupAggregate] = {
        group.id: GroupAggregate(id=group.id, name=group.name) for group in groups
    }
    ungrouped = GroupAggregate(id=UNGROUPED_ID, name=UNGROUPED_NAME)

    for user in users:
        holiday_dates = [format_date(h.date) for h in holidays_by_user.get(user.id, [])]
        user_locations = locations_by_user.get(user.id, {})
        remote_dates = _remote_dates(
            days, user_locations, set(holiday_dates), public_holidays
        )

        if not holiday_dates and not remote_dates:
            continue

        summary = EmployeeSummary(
            id=user.id,
            name=user.display_name,
            email=user.email,
            holiday_dates=holiday_dates,
            remote_dates=remote_dates,
            locations=dict(user_locations),
        )
        group_map.get(user.group_id or UNGROUPED_ID, ungrouped).employees.append(summary)

    non_empty = sorted(
        (g for g in group_map.values() if g.employees and not g.is_ungrouped),
        key=lambda g: g.name.casefold(),
    )
    if ungrouped.employees:
        non_empty.append(ungrouped)

    overview = PersonOverview(groups=non_empty)
    for group in non_empty:
        for employee in group.employees:
            if employee.holiday_count > 0:
                overview.total_employees_with_holidays += 1
            if employee.remote_days_count > 0:
                overview.total_employees_with_remote_work += 1

    return overview


def group_by_month(dates: Iterable[date | str]) -> dict[str, MonthGroup]:
    """Group dates by ``YYYY-MM`` month key, keeping input order."""
    by_month: dict[str, MonthGroup] = {}
    for value in dates:
        d = parse_date(value)
        key = f"{d.year:04d}-{d.month:02d}"
        if key not in by_month:
            by_month[key] = MonthGroup(name=f"{month_name(d.month)} {d.year}")
        by_month[key].dates.append(d.isoformat())
    return by_month
