# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from worktime.database import get_db
from worktime.main import app
from worktime.models import Group, PublicHoliday, User, UserRole
from worktime.models.base import Base

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def test_group(db_session) -> Group:
    """Create a test group."""
    group = Group(name="Engineering")
    db_session.add(group)
    db_session.commit()
    db_session.refresh(group)
    return group


@pytest.fixture
def test_user(db_session, test_group) -> User:
    """Create a regular test user in the test group."""
    user = User(
        email="anna@example.com",
        name="Anna Nowak",
        role=UserRole.USER,
        group_id=test_group.id,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def admin_user(db_session) -> User:
    """Create an admin test user without a group."""
    user = User(email="admin@example.com", name="Admin", role=UserRole.ADMIN)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def may_public_holidays(db_session) -> list[PublicHoliday]:
    """Public holidays of May 2024 (1st on a Wednesday, 3rd on a Friday)."""
    rows = [
        PublicHoliday(holiday_date=date(2024, 5, 1), name="Labour Day"),
        PublicHoliday(holiday_date=date(2024, 5, 3), name="Constitution Day"),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


@pytest.fixture
def authenticated_client(client, test_user):
    """Create a client that sends the test user's forwarded identity."""
    client.headers.update({"X-User-Id": str(test_user.id)})
    return client


@pytest.fixture
def admin_client(client, admin_user):
    """Create a client that sends the admin user's forwarded identity."""
    client.headers.update({"X-User-Id": str(admin_user.id)})
    return client
