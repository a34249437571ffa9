# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User administration: provider sync, blocking and roles."""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from worktime.integrations.identity import IdentityDirectoryClient
from worktime.models import User, UserRole
from worktime.services import directory_service

logger = logging.getLogger(__name__)


class AdminServiceError(Exception):
    """Base exception for user administration errors."""


class UserNotFoundError(AdminServiceError):
    """User not found."""


class CannotDemoteSelfError(AdminServiceError):
    """An admin tried to give themselves a lower role."""


@dataclass
class SyncResult:
    """Counts of a provider sync."""

    created: int = 0
    updated: int = 0
    skipped: int = 0


async def sync_users(db: Session, client: IdentityDirectoryClient) -> SyncResult:
    """Mirror the identity provider's users into the local directory.

    Users are matched by provider ID first and by email second. New users
    get the ``user`` role; existing roles and groups are left alone.

    Raises:
        IdentityDirectoryError: If the provider cannot be read. Nothing is
            written in that case.
    """
    remote_users = await client.list_users()
    result = SyncResult()

    for remote in remote_users:
        external_id = remote.get("user_id")
        email = remote.get("email")
        if not external_id or not email:
            logger.debug(f"Skipping provider user without id or email: {remote}")
            result.skipped += 1
            continue

        user = db.query(User).filter(User.external_id == external_id).first()
        if user is None:
            user = db.query(User).filter(User.email == email).first()
        if user is None:
            user = User(external_id=external_id, email=email, role=UserRole.USER)
            db.add(user)
            result.created += 1
        else:
            result.updated += 1

        user.external_id = external_id
        user.email = email
        user.name = remote.get("name") or user.name
        user.is_blocked = bool(remote.get("blocked", False))

    db.commit()
    logger.info(
        f"Synced users from identity provider: {result.created} created, "
        f"{result.updated} updated, {result.skipped} skipped"
    )
    return result


def _get_user_or_raise(db: Session, user_id: int) -> User:
    user = directory_service.get_user(db, user_id)
    if not user:
        raise UserNotFoundError(f"User {user_id} not found")
    return user


async def set_user_blocked(
    db: Session,
    user_id: int,
    blocked: bool,
    client: IdentityDirectoryClient,
) -> User:
    """Block or unblock a user at the provider and locally.

    Users that were never synced (no provider ID) are only changed locally.

    Raises:
        UserNotFoundError: If the user does not exist.
        IdentityDirectoryError: If the provider rejects the change; the
            local flag is left unchanged.
    """
    user = _get_user_or_raise(db, user_id)

    if user.external_id:
        await client.set_blocked(user.external_id, blocked)

    user.is_blocked = blocked
    db.commit()
    db.refresh(user)
    logger.info(f"User {user.id} {'blocked' if blocked else 'unblocked'}")
    return user


def update_role(db: Session, user_id: int, role: UserRole, acting_user: User) -> User:
    """Change a user's role.

    Raises:
        UserNotFoundError: If the user does not exist.
        CannotDemoteSelfError: If ``acting_user`` targets themselves with a
            role other than admin.
    """
    user = _get_user_or_raise(db, user_id)
    if user.id == acting_user.id and role != UserRole.ADMIN:
        raise CannotDemoteSelfError("Admins cannot change their own role")

    user.role = role
    db.commit()
    db.refresh(user)
    logger.info(f"User {user.id} role set to {role.value} by user {acting_user.id}")
    return user
