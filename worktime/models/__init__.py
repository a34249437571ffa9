# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from worktime.models.base import Base, TimestampMixin
from worktime.models.enums import UserRole
from worktime.models.group import Group
from worktime.models.holiday import Holiday
from worktime.models.public_holiday import PublicHoliday
from worktime.models.user import User
from worktime.models.work_hours import WorkHours
from worktime.models.work_location import WorkLocation

__all__ = [
    "Base",
    "Group",
    "Holiday",
    "PublicHoliday",
    "TimestampMixin",
    "User",
    "UserRole",
    "WorkHours",
    "WorkLocation",
]
