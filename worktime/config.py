# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    Values are read from the environment (or a ``.env`` file); field names
    map to upper-case variable names, e.g. ``DATABASE_URL``.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite:///./worktime.db"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Public holiday directory seeding
    public_holiday_country: str = "PL"
    public_holiday_subdivision: str | None = None

    # Identity provider management API
    identity_domain: str | None = None
    identity_client_id: str | None = None
    identity_client_secret: str | None = None
    identity_audience: str | None = None
    identity_timeout_seconds: float = 10.0


settings = Settings()
