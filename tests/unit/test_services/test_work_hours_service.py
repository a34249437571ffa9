# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for work_hours_service."""

from datetime import date

import pytest

from worktime.models import Holiday
from worktime.services import work_hours_service

TODAY = date(2024, 5, 8)


class TestLogHours:
    """Tests for log_hours."""

    def test_logs_entry_for_today(self, db_session, test_user):
        entry = work_hours_service.log_hours(
            db_session, test_user.id, TODAY, 7.5, "Sprint review", today=TODAY
        )

        assert entry.id is not None
        assert entry.hours == 7.5
        assert work_hours_service.get_total_monthly_hours(
            db_session, test_user.id, 2024, 5
        ) == 7.5

    def test_two_days_back_is_allowed(self, db_session, test_user):
        entry = work_hours_service.log_hours(
            db_session, test_user.id, date(2024, 5, 6), 8, today=TODAY
        )
        assert entry.work_date == date(2024, 5, 6)

    @pytest.mark.parametrize("work_date", [date(2024, 5, 5), date(2024, 5, 9)])
    def test_date_outside_window_is_rejected(self, db_session, test_user, work_date):
        with pytest.raises(work_hours_service.WorkHoursRejected) as exc_info:
            work_hours_service.log_hours(
                db_session, test_user.id, work_date, 8, today=TODAY
            )
        assert exc_info.value.code == "work_invalid_date"

    def test_zero_hours_are_rejected(self, db_session, test_user):
        with pytest.raises(work_hours_service.WorkHoursRejected) as exc_info:
            work_hours_service.log_hours(
                db_session, test_user.id, TODAY, 0, today=TODAY
            )
        assert exc_info.value.code == "invalid_hours"

    def test_holiday_day_is_rejected(self, db_session, test_user):
        db_session.add(Holiday(user_id=test_user.id, holiday_date=TODAY))
        db_session.commit()

        with pytest.raises(work_hours_service.WorkHoursRejected) as exc_info:
            work_hours_service.log_hours(
                db_session, test_user.id, TODAY, 8, today=TODAY
            )

        assert exc_info.value.code == "holiday"
        assert work_hours_service.find_by_month(db_session, test_user.id, 2024, 5) == []


class TestFindByMonth:
    """Tests for find_by_month."""

    def test_orders_entries_by_date(self, db_session, test_user):
        work_hours_service.log_hours(
            db_session, test_user.id, date(2024, 5, 8), 4, today=TODAY
        )
        work_hours_service.log_hours(
            db_session, test_user.id, date(2024, 5, 7), 6, today=TODAY
        )

        entries = work_hours_service.find_by_month(db_session, test_user.id, 2024, 5)

        assert [e.work_date for e in entries] == [date(2024, 5, 7), date(2024, 5, 8)]
        assert work_hours_service.find_by_month(db_session, test_user.id, 2024, 6) == []
