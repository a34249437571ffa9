# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User and group directory reads."""

from sqlalchemy.orm import Session

from worktime.core.records import DirectoryGroup, DirectoryUser
from worktime.models import Group, User


def list_users(db: Session) -> list[User]:
    """Get all users ordered by id (directory order)."""
    return db.query(User).order_by(User.id).all()


def list_groups(db: Session) -> list[Group]:
    """Get all groups ordered by name."""
    return db.query(Group).order_by(Group.name).all()


def get_user(db: Session, user_id: int) -> User | None:
    """Get a single user by ID."""
    return db.query(User).filter(User.id == user_id).first()


def to_directory_users(users: list[User]) -> list[DirectoryUser]:
    """Convert user rows into directory records."""
    return [
        DirectoryUser(id=u.id, email=u.email, name=u.name, group_id=u.group_id)
        for u in users
    ]


def to_directory_groups(groups: list[Group]) -> list[DirectoryGroup]:
    """Convert group rows into directory records."""
    return [DirectoryGroup(id=g.id, name=g.name) for g in groups]
