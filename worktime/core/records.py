# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Plain input records consumed by the aggregation functions."""

from dataclasses import dataclass

from worktime.core.calendar_math import CalendarDate


@dataclass(frozen=True)
class HolidayRecord:
    """One personal holiday day of one user."""

    user_id: int
    date: CalendarDate


@dataclass(frozen=True)
class WorkLocationRecord:
    """Onsite/remote declaration of one user for one day."""

    user_id: int
    date: CalendarDate
    is_onsite: bool


@dataclass(frozen=True)
class DirectoryUser:
    """Entry of the user directory."""

    id: int
    email: str
    name: str | None = None
    group_id: int | None = None

    @property
    def display_name(self) -> str:
        """Name, falling back to the local part of the e-mail address."""
        return self.name or self.email.split("@")[0]


@dataclass(frozen=True)
class DirectoryGroup:
    """Entry of the organizational group directory."""

    id: int
    name: str
