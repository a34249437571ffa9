# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Calendar and aggregation engine.

Pure computations over already-fetched records; nothing here performs I/O.
"""

from worktime.core.business_days import (
    PublicHolidaySet,
    generate_business_days,
    is_business_day,
)
from worktime.core.calendar_math import (
    CalendarDate,
    DateInterval,
    day_of_week,
    format_date,
    is_weekend,
    month_range,
    parse_date,
    shift_month,
    weekday_count_in_month,
)
from worktime.core.errors import AggregationInputMissing, CalendarError, InvalidDateError
from worktime.core.grouping import (
    GroupAggregate,
    PersonOverview,
    group_by_date,
    group_by_month,
    group_by_person,
)
from worktime.core.holiday_validation import (
    HolidayRequestError,
    HolidayRequestResult,
    validate_holiday_request,
)
from worktime.core.month_calendar import (
    DayCell,
    MonthCalendar,
    TodayStatus,
    build_window,
    classify_today,
)
from worktime.core.monthly_stats import HOURS_PER_DAY, MonthlyStats, compute_monthly_stats
from worktime.core.records import (
    DirectoryGroup,
    DirectoryUser,
    HolidayRecord,
    WorkLocationRecord,
)

__all__ = [
    "AggregationInputMissing",
    "CalendarDate",
    "CalendarError",
    "DateInterval",
    "DayCell",
    "DirectoryGroup",
    "DirectoryUser",
    "GroupAggregate",
    "HOURS_PER_DAY",
    "HolidayRecord",
    "HolidayRequestError",
    "HolidayRequestResult",
    "InvalidDateError",
    "MonthCalendar",
    "MonthlyStats",
    "PersonOverview",
    "PublicHolidaySet",
    "TodayStatus",
    "WorkLocationRecord",
    "build_window",
    "classify_today",
    "compute_monthly_stats",
    "day_of_week",
    "format_date",
    "generate_business_days",
    "group_by_date",
    "group_by_month",
    "group_by_person",
    "is_business_day",
    "is_weekend",
    "month_range",
    "parse_date",
    "shift_month",
    "validate_holiday_request",
    "weekday_count_in_month",
]
