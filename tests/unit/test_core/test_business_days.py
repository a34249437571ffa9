# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for business day generation."""

from datetime import date
from types import SimpleNamespace

from worktime.core.business_days import (
    PublicHolidaySet,
    generate_business_days,
    is_business_day,
)
from worktime.core.calendar_math import DateInterval, is_weekend


class TestPublicHolidaySet:
    """Tests for PublicHolidaySet."""

    def test_membership_normalizes_dates(self):
        holidays = PublicHolidaySet.from_dates([date(2024, 5, 1)])
        assert "2024-05-01" in holidays
        assert "2024-05-01T00:00:00" in holidays
        assert date(2024, 5, 1) in holidays
        assert "2024-05-02" not in holidays

    def test_from_records_keeps_names(self):
        rows = [
            SimpleNamespace(holiday_date=date(2024, 5, 3), name="Constitution Day"),
            SimpleNamespace(holiday_date=date(2024, 5, 1), name="Labour Day"),
        ]
        holidays = PublicHolidaySet.from_records(rows)
        assert holidays.name_of("2024-05-01") == "Labour Day"
        assert holidays.name_of("2024-05-02") is None
        assert list(holidays) == ["2024-05-01", "2024-05-03"]
        assert len(holidays) == 2


class TestGenerateBusinessDays:
    """Tests for generate_business_days."""

    def test_weekend_only_interval_is_empty(self):
        interval = DateInterval.of("2024-05-04", "2024-05-05")
        assert generate_business_days(interval, PublicHolidaySet()) == []

    def test_excludes_weekends_and_public_holidays(self):
        holidays = PublicHolidaySet.from_dates(["2024-05-01", "2024-05-03"])
        interval = DateInterval.of("2024-04-29", "2024-05-07")

        days = generate_business_days(interval, holidays)

        assert days == [
            "2024-04-29",
            "2024-04-30",
            "2024-05-02",
            "2024-05-06",
            "2024-05-07",
        ]

    def test_result_is_sorted_unique_and_within_interval(self):
        holidays = PublicHolidaySet.from_dates(["2024-12-25", "2024-12-26"])
        interval = DateInterval.of("2024-12-01", "2025-01-31")

        days = generate_business_days(interval, holidays)

        assert days == sorted(set(days))
        assert all(d in interval for d in days)
        assert not any(is_weekend(d) or d in holidays for d in days)

    def test_public_holiday_only_interval_is_empty(self):
        holidays = PublicHolidaySet.from_dates(["2024-05-01"])
        interval = DateInterval.of("2024-05-01")
        assert generate_business_days(interval, holidays) == []

    def test_is_business_day(self):
        holidays = PublicHolidaySet.from_dates(["2024-05-01"])
        assert is_business_day("2024-05-02", holidays)
        assert not is_business_day("2024-05-01", holidays)
        assert not is_business_day("2024-05-04", holidays)
