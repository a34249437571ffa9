# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection.

Authentication happens upstream; the proxy in front of the API forwards
the local user ID in the ``X-User-Id`` header.
"""

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from worktime.database import get_db
from worktime.models import User
from worktime.services import directory_service

__all__ = ["get_current_admin", "get_current_manager", "get_current_user", "get_db"]


def get_current_user(
    db: Session = Depends(get_db),
    x_user_id: int | None = Header(default=None),
) -> User:
    """Get the authenticated user named by the forwarded header."""
    if x_user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    user = directory_service.get_user(db, x_user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    if user.is_blocked:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User is blocked",
        )

    return user


def get_current_admin(
    current_user: User = Depends(get_current_user),
) -> User:
    """Get current user and verify they are an admin."""
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


def get_current_manager(
    current_user: User = Depends(get_current_user),
) -> User:
    """Get current user and verify they are a manager or an admin."""
    if not current_user.has_elevated_permissions:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Manager access required",
        )
    return current_user
