# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User administration API endpoints."""

from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from worktime.api.deps import get_current_admin, get_current_manager, get_db
from worktime.integrations.identity import (
    IdentityDirectoryClient,
    IdentityDirectoryError,
)
from worktime.models import User
from worktime.schemas.admin import (
    AdminUserResponse,
    UserActionResponse,
    UserBlockUpdate,
    UserRoleUpdate,
    UserSyncResponse,
)
from worktime.schemas.common import ErrorDetail
from worktime.services import admin_service, directory_service, messages

router = APIRouter()


async def get_identity_client() -> AsyncIterator[IdentityDirectoryClient]:
    """Provide an identity provider client configured from settings."""
    client = IdentityDirectoryClient()
    try:
        yield client
    finally:
        await client.close()


def _error(status_code: int, code: str) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail=ErrorDetail(code=code, message=messages.describe(code)).model_dump(),
    )


def _action_response(code: str, user: User) -> UserActionResponse:
    return UserActionResponse(
        code=code,
        message=messages.describe(code),
        user=AdminUserResponse.model_validate(user),
    )


@router.get("/users", response_model=list[AdminUserResponse])
def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_manager),
) -> list[AdminUserResponse]:
    """List all users (managers and admins)."""
    users = directory_service.list_users(db)
    return [AdminUserResponse.model_validate(u) for u in users]


@router.post("/users/sync", response_model=UserSyncResponse)
async def sync_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
    client: IdentityDirectoryClient = Depends(get_identity_client),
) -> UserSyncResponse:
    """Import and update users from the identity provider (admin only)."""
    try:
        result = await admin_service.sync_users(db, client)
    except IdentityDirectoryError as e:
        raise _error(status.HTTP_502_BAD_GATEWAY, "identity_unavailable") from e

    return UserSyncResponse(
        code="users_synced",
        message=messages.describe("users_synced"),
        created=result.created,
        updated=result.updated,
        skipped=result.skipped,
    )


@router.post("/users/{user_id}/block", response_model=UserActionResponse)
async def set_user_blocked(
    user_id: int,
    data: UserBlockUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
    client: IdentityDirectoryClient = Depends(get_identity_client),
) -> UserActionResponse:
    """Block or unblock a user here and at the identity provider (admin only)."""
    try:
        user = await admin_service.set_user_blocked(db, user_id, data.blocked, client)
    except admin_service.UserNotFoundError as e:
        raise _error(status.HTTP_404_NOT_FOUND, "not_found") from e
    except IdentityDirectoryError as e:
        raise _error(status.HTTP_502_BAD_GATEWAY, "identity_unavailable") from e

    code = "user_blocked" if user.is_blocked else "user_unblocked"
    return _action_response(code, user)


@router.put("/users/{user_id}/role", response_model=UserActionResponse)
def update_user_role(
    user_id: int,
    data: UserRoleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> UserActionResponse:
    """Change a user's role (admin only).

    Admins cannot lower their own role.
    """
    try:
        user = admin_service.update_role(db, user_id, data.role, current_user)
    except admin_service.UserNotFoundError as e:
        raise _error(status.HTTP_404_NOT_FOUND, "not_found") from e
    except admin_service.CannotDemoteSelfError as e:
        raise _error(status.HTTP_400_BAD_REQUEST, "cannot_demote_self") from e

    return _action_response(f"role_changed_to_{user.role.value}", user)
