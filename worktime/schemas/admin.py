# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User administration schemas."""

from pydantic import BaseModel

from worktime.models.enums import UserRole


class AdminUserResponse(BaseModel):
    """Schema for a user as shown in the administration list."""

    id: int
    email: str
    name: str | None
    role: UserRole
    is_blocked: bool
    group_id: int | None

    model_config = {"from_attributes": True}


class UserBlockUpdate(BaseModel):
    """Schema for blocking or unblocking a user."""

    blocked: bool


class UserRoleUpdate(BaseModel):
    """Schema for changing a user's role."""

    role: UserRole


class UserActionResponse(BaseModel):
    """Result code of an administrative change with the updated user."""

    code: str
    message: str
    user: AdminUserResponse


class UserSyncResponse(BaseModel):
    """Result of a provider sync."""

    code: str
    message: str
    created: int
    updated: int
    skipped: int
