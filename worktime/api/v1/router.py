# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from worktime.api.v1 import admin, dashboard, holidays, public_holidays, work_hours

api_router = APIRouter()

# Dashboard routes
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])

# Personal holiday and employee overview routes
api_router.include_router(holidays.router, prefix="/holidays", tags=["holidays"])

# Work hours routes
api_router.include_router(
    work_hours.router, prefix="/work-hours", tags=["work-hours"]
)

# Public holiday directory routes
api_router.include_router(
    public_holidays.router, prefix="/public-holidays", tags=["public-holidays"]
)

# User administration routes
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
