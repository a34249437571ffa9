# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the identity provider management client."""

import json

import pytest
import respx
from httpx import Response

from worktime.integrations.identity import (
    IdentityDirectoryClient,
    IdentityDirectoryError,
    TokenCache,
)

BASE_URL = "https://id.example.com"


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def identity_client(clock):
    """Create a fully configured client with an injected clock."""
    return IdentityDirectoryClient(
        domain="id.example.com",
        client_id="client",
        client_secret="secret",
        token_cache=TokenCache(clock=clock),
    )


def mock_token(expires_in: int = 3600):
    return respx.post(f"{BASE_URL}/oauth/token").mock(
        return_value=Response(
            200, json={"access_token": "tok-1", "expires_in": expires_in}
        )
    )


def users_page(start: int, length: int, total: int) -> dict:
    return {
        "users": [{"user_id": f"auth0|{i}"} for i in range(start, start + length)],
        "start": start,
        "length": length,
        "total": total,
    }


class TestTokenCache:
    """Tests for TokenCache."""

    def test_empty_cache_has_no_token(self, clock):
        assert TokenCache(clock=clock).get() is None

    def test_token_expires_five_minutes_early(self, clock):
        cache = TokenCache(clock=clock)
        cache.store("tok", expires_in=3600)

        clock.now += 3600 - 301
        assert cache.get() == "tok"

        clock.now += 1
        assert cache.get() is None

    def test_clear(self, clock):
        cache = TokenCache(clock=clock)
        cache.store("tok", expires_in=3600)
        cache.clear()
        assert cache.get() is None


class TestGetToken:
    """Tests for get_token."""

    @respx.mock
    @pytest.mark.asyncio
    async def test_requests_client_credentials_token(self, identity_client):
        route = mock_token()

        token = await identity_client.get_token()

        assert token == "tok-1"
        body = json.loads(route.calls[0].request.content)
        assert body["grant_type"] == "client_credentials"
        assert body["audience"] == "https://id.example.com/api/v2/"

    @respx.mock
    @pytest.mark.asyncio
    async def test_reuses_cached_token_until_expiry(self, identity_client, clock):
        route = mock_token(expires_in=600)

        await identity_client.get_token()
        await identity_client.get_token()
        assert route.call_count == 1

        clock.now += 600
        await identity_client.get_token()
        assert route.call_count == 2

    @pytest.mark.asyncio
    async def test_incomplete_configuration_raises(self, clock):
        client = IdentityDirectoryClient(
            domain="id.example.com",
            client_id=None,
            client_secret=None,
            token_cache=TokenCache(clock=clock),
        )
        client.client_id = None
        client.client_secret = None

        with pytest.raises(IdentityDirectoryError):
            await client.get_token()

    @respx.mock
    @pytest.mark.asyncio
    async def test_token_endpoint_error_raises(self, identity_client):
        respx.post(f"{BASE_URL}/oauth/token").mock(return_value=Response(401))

        with pytest.raises(IdentityDirectoryError):
            await identity_client.get_token()


class TestListUsers:
    """Tests for list_users."""

    @respx.mock
    @pytest.mark.asyncio
    async def test_pages_until_total_reached(self, identity_client):
        mock_token()
        route = respx.get(f"{BASE_URL}/api/v2/users").mock(
            side_effect=[
                Response(200, json=users_page(0, 100, 150)),
                Response(200, json=users_page(100, 50, 150)),
            ]
        )

        users = await identity_client.list_users()

        assert len(users) == 150
        assert route.call_count == 2
        assert route.calls[1].request.url.params["page"] == "1"
        assert route.calls[0].request.headers["Authorization"] == "Bearer tok-1"

    @respx.mock
    @pytest.mark.asyncio
    async def test_stops_after_page_limit(self, identity_client):
        mock_token()
        route = respx.get(f"{BASE_URL}/api/v2/users").mock(
            side_effect=[
                Response(200, json=users_page(i * 100, 100, 5000)) for i in range(12)
            ]
        )

        users = await identity_client.list_users()

        assert route.call_count == 10
        assert len(users) == 1000

    @respx.mock
    @pytest.mark.asyncio
    async def test_http_error_raises(self, identity_client):
        mock_token()
        respx.get(f"{BASE_URL}/api/v2/users").mock(return_value=Response(500))

        with pytest.raises(IdentityDirectoryError):
            await identity_client.list_users()


class TestSetBlocked:
    """Tests for set_blocked."""

    @respx.mock
    @pytest.mark.asyncio
    async def test_patches_encoded_user_id(self, identity_client):
        mock_token()
        route = respx.patch(f"{BASE_URL}/api/v2/users/auth0%7C42").mock(
            return_value=Response(200, json={"user_id": "auth0|42", "blocked": True})
        )

        result = await identity_client.set_blocked("auth0|42", True)

        assert result["blocked"] is True
        assert json.loads(route.calls[0].request.content) == {"blocked": True}

    @respx.mock
    @pytest.mark.asyncio
    async def test_failure_raises(self, identity_client):
        mock_token()
        respx.patch(f"{BASE_URL}/api/v2/users/auth0%7C42").mock(
            return_value=Response(404)
        )

        with pytest.raises(IdentityDirectoryError):
            await identity_client.set_blocked("auth0|42", False)
