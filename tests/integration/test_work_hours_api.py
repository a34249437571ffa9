# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for work hours endpoints."""

from datetime import date, timedelta

from worktime.models import Holiday


class TestLogWorkHours:
    """Tests for POST /api/v1/work-hours."""

    def test_requires_authentication(self, client):
        response = client.post(
            "/api/v1/work-hours",
            json={"work_date": date.today().isoformat(), "hours": 8},
        )
        assert response.status_code == 401

    def test_log_today(self, authenticated_client):
        response = authenticated_client.post(
            "/api/v1/work-hours",
            json={
                "work_date": date.today().isoformat(),
                "hours": 7.5,
                "description": "Code review",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["hours"] == 7.5
        assert data["description"] == "Code review"

    def test_old_date_is_rejected(self, authenticated_client):
        response = authenticated_client.post(
            "/api/v1/work-hours",
            json={
                "work_date": (date.today() - timedelta(days=10)).isoformat(),
                "hours": 8,
            },
        )

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "work_invalid_date"

    def test_holiday_day_is_rejected(self, authenticated_client, db_session, test_user):
        db_session.add(Holiday(user_id=test_user.id, holiday_date=date.today()))
        db_session.commit()

        response = authenticated_client.post(
            "/api/v1/work-hours",
            json={"work_date": date.today().isoformat(), "hours": 8},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "holiday"

    def test_non_positive_hours_fail_validation(self, authenticated_client):
        response = authenticated_client.post(
            "/api/v1/work-hours",
            json={"work_date": date.today().isoformat(), "hours": 0},
        )
        assert response.status_code == 422


class TestListWorkHours:
    """Tests for GET /api/v1/work-hours."""

    def test_current_month_with_total(self, authenticated_client):
        today = date.today().isoformat()
        authenticated_client.post(
            "/api/v1/work-hours", json={"work_date": today, "hours": 3}
        )
        authenticated_client.post(
            "/api/v1/work-hours", json={"work_date": today, "hours": 4.5}
        )

        response = authenticated_client.get("/api/v1/work-hours")

        assert response.status_code == 200
        data = response.json()
        assert (data["year"], data["month"]) == (date.today().year, date.today().month)
        assert data["total_hours"] == 7.5
        assert len(data["entries"]) == 2
