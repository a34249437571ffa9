# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Identity provider management API client.

Lists the provider's users and toggles their blocked flag using a
client-credentials token that is cached until shortly before it expires.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

from worktime.config import settings

logger = logging.getLogger(__name__)

# Users requested per page (provider maximum)
USERS_PER_PAGE = 100

# Hard stop for pagination
MAX_USER_PAGES = 10

# Tokens are treated as expired this many seconds early
TOKEN_EXPIRY_MARGIN_SECONDS = 5 * 60


class IdentityDirectoryError(Exception):
    """Identity provider call failed or the client is not configured."""


@dataclass
class TokenCache:
    """Cached management token with its effective expiry.

    ``expiry`` is a timestamp on the same scale as ``clock()``.
    """

    value: str | None = None
    expiry: float = 0.0
    clock: Callable[[], float] = time.monotonic

    def get(self) -> str | None:
        """Return the token if it is still valid."""
        if self.value and self.clock() < self.expiry:
            return self.value
        return None

    def store(self, value: str, expires_in: float) -> None:
        """Store a token valid for ``expires_in`` seconds, minus the margin."""
        self.value = value
        self.expiry = self.clock() + expires_in - TOKEN_EXPIRY_MARGIN_SECONDS

    def clear(self) -> None:
        self.value = None
        self.expiry = 0.0


class IdentityDirectoryClient:
    """Async client for the identity provider's user management API."""

    def __init__(
        self,
        domain: str | None = None,
        client_id: str | None = None,
        client_secret: str | None = None,
        audience: str | None = None,
        timeout: float | None = None,
        token_cache: TokenCache | None = None,
    ) -> None:
        """Initialize the client.

        Unset arguments fall back to the ``identity_*`` settings.

        Args:
            domain: Provider domain, e.g. ``tenant.example.com``.
            client_id: Management API client ID.
            client_secret: Management API client secret.
            audience: Token audience; defaults to ``https://<domain>/api/v2/``.
            timeout: Request timeout in seconds.
            token_cache: Token cache, injectable for tests.
        """
        self.domain = domain or settings.identity_domain
        self.client_id = client_id or settings.identity_client_id
        self.client_secret = client_secret or settings.identity_client_secret
        self.audience = audience or settings.identity_audience or (
            f"https://{self.domain}/api/v2/" if self.domain else None
        )
        self.timeout = timeout or settings.identity_timeout_seconds
        self.token_cache = token_cache or TokenCache()
        self._http_client: httpx.AsyncClient | None = None

    @property
    def is_configured(self) -> bool:
        return all((self.domain, self.client_id, self.client_secret, self.audience))

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(
                base_url=f"https://{self.domain}",
                timeout=self.timeout,
            )
        return self._http_client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def get_token(self) -> str:
        """Get a management API token, fetching a new one when needed.

        Raises:
            IdentityDirectoryError: If configuration is incomplete or the
                token request fails.
        """
        cached = self.token_cache.get()
        if cached:
            return cached

        if not self.is_configured:
            logger.error(
                f"Identity provider configuration is incomplete "
                f"(domain={bool(self.domain)}, client_id={bool(self.client_id)}, "
                f"client_secret={bool(self.client_secret)}, "
                f"audience={bool(self.audience)})"
            )
            raise IdentityDirectoryError(
                "Identity provider configuration is incomplete"
            )

        try:
            client = await self._get_client()
            response = await client.post(
                "/oauth/token",
                json={
                    "client_id": self.client_id,
                    "client_secret": self.client_secret,
                    "audience": self.audience,
                    "grant_type": "client_credentials",
                },
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            logger.error(f"Failed to obtain management token: {e}")
            raise IdentityDirectoryError(
                f"Could not obtain management token: {e}"
            ) from e

        self.token_cache.store(data["access_token"], float(data["expires_in"]))
        return data["access_token"]

    async def list_users(self) -> list[dict[str, Any]]:
        """Fetch all users, page by page.

        Stops when the provider reports no further users or after
        ``MAX_USER_PAGES`` pages.

        Returns:
            Raw user objects as returned by the provider.

        Raises:
            IdentityDirectoryError: If any request fails.
        """
        token = await self.get_token()
        users: list[dict[str, Any]] = []

        try:
            client = await self._get_client()
            for page in range(MAX_USER_PAGES):
                response = await client.get(
                    "/api/v2/users",
                    headers={"Authorization": f"Bearer {token}"},
                    params={
                        "page": page,
                        "per_page": USERS_PER_PAGE,
                        "include_totals": "true",
                    },
                )
                response.raise_for_status()
                data = response.json()

                batch = data.get("users", [])
                users.extend(batch)

                start = data.get("start", page * USERS_PER_PAGE)
                length = data.get("length", len(batch))
                total = data.get("total", 0)
                if start + length >= total or length < USERS_PER_PAGE:
                    break
            else:
                logger.warning(
                    f"Stopped listing identity users after {MAX_USER_PAGES} pages"
                )
        except httpx.HTTPError as e:
            logger.error(f"Failed to list identity users: {e}")
            raise IdentityDirectoryError(f"Could not fetch users: {e}") from e

        return users

    async def set_blocked(self, user_id: str, blocked: bool) -> dict[str, Any]:
        """Block or unblock a user at the provider.

        Args:
            user_id: Provider user ID, e.g. ``auth0|680e7367``.
            blocked: Whether the user should be blocked.

        Returns:
            The updated user object.

        Raises:
            IdentityDirectoryError: If the request fails.
        """
        token = await self.get_token()
        action = "block" if blocked else "unblock"

        try:
            client = await self._get_client()
            response = await client.patch(
                f"/api/v2/users/{quote(user_id, safe='')}",
                headers={"Authorization": f"Bearer {token}"},
                json={"blocked": bool(blocked)},
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to {action} identity user {user_id}: {e}")
            raise IdentityDirectoryError(f"Could not {action} user: {e}") from e

        logger.info(f"Identity user {user_id} {action}ed")
        return response.json()
