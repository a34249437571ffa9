# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from worktime.models.base import Base, TimestampMixin
from worktime.models.enums import UserRole

if TYPE_CHECKING:
    from worktime.models.group import Group
    from worktime.models.holiday import Holiday
    from worktime.models.work_hours import WorkHours
    from worktime.models.work_location import WorkLocation


class User(Base, TimestampMixin):
    """Employee known to the system.

    Identity lives with the external provider; this row mirrors it and
    holds the organizational data (role, group, blocked flag).
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    external_id: Mapped[str | None] = mapped_column(
        String(255), unique=True, nullable=True
    )
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole), default=UserRole.USER, nullable=False
    )
    is_blocked: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    last_login: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    group_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("groups.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # Relationships
    group: Mapped[Group | None] = relationship("Group", back_populates="users")
    holidays: Mapped[list[Holiday]] = relationship(
        "Holiday",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    work_locations: Mapped[list[WorkLocation]] = relationship(
        "WorkLocation",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    work_hours: Mapped[list[WorkHours]] = relationship(
        "WorkHours",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def has_elevated_permissions(self) -> bool:
        return self.role in (UserRole.ADMIN, UserRole.MANAGER)
