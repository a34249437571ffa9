# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Personal holiday model."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Index, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from worktime.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from worktime.models.user import User


class Holiday(Base, TimestampMixin):
    """One day of personal leave of one user.

    A multi-day request is stored as one row per business day.
    """

    __tablename__ = "holidays"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    holiday_date: Mapped[date] = mapped_column(Date, nullable=False)

    user: Mapped[User] = relationship("User", back_populates="holidays")

    __table_args__ = (
        UniqueConstraint("user_id", "holiday_date", name="uq_holiday_user_date"),
        Index("idx_holiday_date", "holiday_date"),
    )
