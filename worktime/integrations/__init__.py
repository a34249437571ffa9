# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Clients for external systems."""

from worktime.integrations.identity import (
    IdentityDirectoryClient,
    IdentityDirectoryError,
    TokenCache,
)

__all__ = ["IdentityDirectoryClient", "IdentityDirectoryError", "TokenCache"]
