# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for holiday_service."""

from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError

from worktime.core.holiday_validation import HolidayRequestError
from worktime.models import Holiday, User
from worktime.services import holiday_service


def add_holiday_row(db_session, user: User, day: date) -> Holiday:
    holiday = Holiday(user_id=user.id, holiday_date=day)
    db_session.add(holiday)
    db_session.commit()
    db_session.refresh(holiday)
    return holiday


def stored_dates(db_session, user: User) -> list[date]:
    rows = (
        db_session.query(Holiday)
        .filter(Holiday.user_id == user.id)
        .order_by(Holiday.holiday_date)
        .all()
    )
    return [r.holiday_date for r in rows]


class TestAddHolidays:
    """Tests for add_holidays."""

    def test_single_day(self, db_session, test_user):
        result = holiday_service.add_holidays(db_session, test_user, "2024-05-06")

        assert result.business_days == ["2024-05-06"]
        assert result.created_dates == ["2024-05-06"]
        assert result.code == "added"
        assert stored_dates(db_session, test_user) == [date(2024, 5, 6)]

    def test_range_skips_weekends_and_public_holidays(
        self, db_session, test_user, may_public_holidays
    ):
        result = holiday_service.add_holidays(
            db_session, test_user, "2024-05-02", "2024-05-07"
        )

        assert result.business_days == ["2024-05-02", "2024-05-06", "2024-05-07"]
        assert result.code == "added_3_days_weekends_and_holidays_excluded"
        assert "skipped" in result.message
        assert stored_dates(db_session, test_user) == [
            date(2024, 5, 2),
            date(2024, 5, 6),
            date(2024, 5, 7),
        ]

    def test_existing_days_are_not_duplicated(self, db_session, test_user):
        add_holiday_row(db_session, test_user, date(2024, 5, 7))

        result = holiday_service.add_holidays(
            db_session, test_user, "2024-05-06", "2024-05-08"
        )

        assert result.business_days == ["2024-05-06", "2024-05-07", "2024-05-08"]
        assert result.created_dates == ["2024-05-06", "2024-05-08"]
        assert len(stored_dates(db_session, test_user)) == 3

    def test_start_on_public_holiday_is_rejected(
        self, db_session, test_user, may_public_holidays
    ):
        with pytest.raises(holiday_service.HolidayRequestRejected) as exc_info:
            holiday_service.add_holidays(db_session, test_user, "2024-05-01")

        assert exc_info.value.error == HolidayRequestError.PUBLIC_HOLIDAY_NOT_ALLOWED
        assert exc_info.value.code == "public_holiday_not_allowed"
        assert stored_dates(db_session, test_user) == []

    def test_public_holiday_start_with_bad_end_is_rejected_as_public_holiday(
        self, db_session, test_user, may_public_holidays
    ):
        with pytest.raises(holiday_service.HolidayRequestRejected) as exc_info:
            holiday_service.add_holidays(db_session, test_user, "2024-05-01", "later")
        assert exc_info.value.error == HolidayRequestError.PUBLIC_HOLIDAY_NOT_ALLOWED

    def test_weekend_start_is_rejected(self, db_session, test_user):
        with pytest.raises(holiday_service.HolidayRequestRejected) as exc_info:
            holiday_service.add_holidays(
                db_session, test_user, "2024-05-04", "2024-05-06"
            )
        assert exc_info.value.error == HolidayRequestError.WEEKEND_NOT_ALLOWED

    def test_invalid_date_is_rejected(self, db_session, test_user):
        with pytest.raises(holiday_service.HolidayRequestRejected) as exc_info:
            holiday_service.add_holidays(db_session, test_user, "tomorrow")
        assert exc_info.value.error == HolidayRequestError.INVALID_DATE

    def test_reversed_range_is_rejected(self, db_session, test_user):
        with pytest.raises(holiday_service.HolidayRequestRejected) as exc_info:
            holiday_service.add_holidays(
                db_session, test_user, "2024-05-10", "2024-05-06"
            )
        assert exc_info.value.error == HolidayRequestError.NO_VALID_DAYS

    def test_integrity_error_becomes_conflict_and_stores_nothing(
        self, db_session, test_user, monkeypatch
    ):
        def failing_commit():
            raise IntegrityError("INSERT", {}, Exception("duplicate"))

        monkeypatch.setattr(db_session, "commit", failing_commit)

        with pytest.raises(holiday_service.HolidayConflictError):
            holiday_service.add_holidays(
                db_session, test_user, "2024-05-06", "2024-05-08"
            )

        monkeypatch.undo()
        assert stored_dates(db_session, test_user) == []


class TestReads:
    """Tests for holiday reads."""

    def test_future_and_past_split_on_today(self, db_session, test_user):
        for day in (date(2024, 4, 8), date(2024, 5, 6), date(2024, 5, 20)):
            add_holiday_row(db_session, test_user, day)

        today = date(2024, 5, 6)
        future = holiday_service.find_future(db_session, test_user.id, today)
        past = holiday_service.find_past(db_session, test_user.id, today)

        assert [h.holiday_date for h in future] == [date(2024, 5, 6), date(2024, 5, 20)]
        assert [h.holiday_date for h in past] == [date(2024, 4, 8)]

    def test_history_groups_past_by_month_newest_first(self, db_session, test_user):
        for day in (date(2024, 3, 4), date(2024, 4, 8), date(2024, 4, 9)):
            add_holiday_row(db_session, test_user, day)

        history = holiday_service.get_history(
            db_session, test_user.id, date(2024, 5, 1)
        )

        assert list(history) == ["2024-04", "2024-03"]
        assert history["2024-04"].name == "April 2024"
        assert history["2024-04"].dates == ["2024-04-09", "2024-04-08"]

    def test_count_monthly_holidays(self, db_session, test_user, admin_user):
        add_holiday_row(db_session, test_user, date(2024, 2, 1))
        add_holiday_row(db_session, test_user, date(2024, 2, 29))
        add_holiday_row(db_session, test_user, date(2024, 3, 1))
        add_holiday_row(db_session, admin_user, date(2024, 2, 5))

        assert holiday_service.count_monthly_holidays(db_session, test_user.id, 2024, 2) == 2


class TestDeleteHoliday:
    """Tests for delete_holiday."""

    def test_owner_can_delete(self, db_session, test_user):
        holiday = add_holiday_row(db_session, test_user, date(2024, 5, 6))

        holiday_service.delete_holiday(db_session, holiday.id, test_user)

        assert holiday_service.get_holiday(db_session, holiday.id) is None

    def test_foreign_holiday_is_not_found(self, db_session, test_user, admin_user):
        holiday = add_holiday_row(db_session, admin_user, date(2024, 5, 6))

        with pytest.raises(holiday_service.HolidayNotFoundError):
            holiday_service.delete_holiday(db_session, holiday.id, test_user)

        assert holiday_service.get_holiday(db_session, holiday.id) is not None

    def test_admin_can_delete_any_holiday(self, db_session, test_user, admin_user):
        holiday = add_holiday_row(db_session, test_user, date(2024, 5, 6))

        holiday_service.delete_holiday(db_session, holiday.id, admin_user)

        assert holiday_service.get_holiday(db_session, holiday.id) is None

    def test_missing_holiday(self, db_session, test_user):
        with pytest.raises(holiday_service.HolidayNotFoundError):
            holiday_service.delete_holiday(db_session, 12345, test_user)
