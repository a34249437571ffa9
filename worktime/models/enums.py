# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class UserRole(str, Enum):
    """User role enumeration.

    Managers may browse the user administration list. Admins additionally
    manage users and the public holiday directory, and may delete other
    users' entries.
    """

    USER = "user"
    MANAGER = "manager"
    ADMIN = "admin"
