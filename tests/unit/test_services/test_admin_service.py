# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for admin_service."""

import json

import pytest
import respx
from httpx import Response

from worktime.integrations.identity import (
    IdentityDirectoryClient,
    IdentityDirectoryError,
)
from worktime.models import User, UserRole
from worktime.services import admin_service

BASE_URL = "https://id.example.com"


@pytest.fixture
def identity_client():
    return IdentityDirectoryClient(
        domain="id.example.com", client_id="client", client_secret="secret"
    )


def mock_token():
    respx.post(f"{BASE_URL}/oauth/token").mock(
        return_value=Response(200, json={"access_token": "tok", "expires_in": 3600})
    )


class TestSyncUsers:
    """Tests for sync_users."""

    @respx.mock
    @pytest.mark.asyncio
    async def test_matches_by_provider_id_then_email(
        self, db_session, test_user, identity_client
    ):
        known = User(external_id="auth0|1", email="old@example.com", name="Old")
        db_session.add(known)
        db_session.commit()
        mock_token()
        respx.get(f"{BASE_URL}/api/v2/users").mock(
            return_value=Response(
                200,
                json={
                    "users": [
                        {"user_id": "auth0|1", "email": "new@example.com"},
                        {"user_id": "auth0|2", "email": "anna@example.com"},
                        {"user_id": "auth0|3", "email": "jan@example.com"},
                        {"user_id": "auth0|4"},
                    ],
                    "start": 0,
                    "length": 4,
                    "total": 4,
                },
            )
        )

        result = await admin_service.sync_users(db_session, identity_client)

        assert (result.created, result.updated, result.skipped) == (1, 2, 1)
        db_session.refresh(known)
        db_session.refresh(test_user)
        assert known.email == "new@example.com"
        assert known.name == "Old"
        assert test_user.external_id == "auth0|2"
        assert test_user.group_id is not None
        jan = db_session.query(User).filter(User.external_id == "auth0|3").one()
        assert jan.role == UserRole.USER

    @respx.mock
    @pytest.mark.asyncio
    async def test_provider_failure_writes_nothing(self, db_session, identity_client):
        mock_token()
        respx.get(f"{BASE_URL}/api/v2/users").mock(return_value=Response(503))

        with pytest.raises(IdentityDirectoryError):
            await admin_service.sync_users(db_session, identity_client)

        assert db_session.query(User).count() == 0


class TestSetUserBlocked:
    """Tests for set_user_blocked."""

    @respx.mock
    @pytest.mark.asyncio
    async def test_blocks_at_provider_first(
        self, db_session, test_user, identity_client
    ):
        test_user.external_id = "auth0|anna"
        db_session.commit()
        mock_token()
        route = respx.patch(f"{BASE_URL}/api/v2/users/auth0%7Canna").mock(
            return_value=Response(200, json={"user_id": "auth0|anna", "blocked": True})
        )

        user = await admin_service.set_user_blocked(
            db_session, test_user.id, True, identity_client
        )

        assert user.is_blocked is True
        assert json.loads(route.calls[0].request.content) == {"blocked": True}

    @pytest.mark.asyncio
    async def test_unknown_user_raises(self, db_session, identity_client):
        with pytest.raises(admin_service.UserNotFoundError):
            await admin_service.set_user_blocked(
                db_session, 9999, True, identity_client
            )


class TestUpdateRole:
    """Tests for update_role."""

    def test_changes_role(self, db_session, test_user, admin_user):
        user = admin_service.update_role(
            db_session, test_user.id, UserRole.MANAGER, admin_user
        )
        assert user.role == UserRole.MANAGER
        assert user.has_elevated_permissions

    def test_self_demotion_is_refused(self, db_session, admin_user):
        with pytest.raises(admin_service.CannotDemoteSelfError):
            admin_service.update_role(
                db_session, admin_user.id, UserRole.MANAGER, admin_user
            )

        db_session.refresh(admin_user)
        assert admin_user.role == UserRole.ADMIN

    def test_unknown_user_raises(self, db_session, admin_user):
        with pytest.raises(admin_service.UserNotFoundError):
            admin_service.update_role(db_session, 9999, UserRole.USER, admin_user)
