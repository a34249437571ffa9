# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work location declaration model."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Date, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from worktime.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from worktime.models.user import User


class WorkLocation(Base, TimestampMixin):
    """Onsite (True) or remote (False) declaration for one day."""

    __tablename__ = "work_locations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    work_date: Mapped[date] = mapped_column(Date, nullable=False)
    is_onsite: Mapped[bool] = mapped_column(Boolean, nullable=False)

    user: Mapped[User] = relationship("User", back_populates="work_locations")

    __table_args__ = (
        UniqueConstraint("user_id", "work_date", name="uq_work_location_user_date"),
    )
