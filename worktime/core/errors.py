# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Exceptions raised by the calendar engine."""


class CalendarError(Exception):
    """Base exception for calendar computation errors."""


class InvalidDateError(CalendarError, ValueError):
    """A date value could not be parsed into a calendar day."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid date: {value!r}")


class AggregationInputMissing(CalendarError):
    """A required upstream collection could not be fetched."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"Aggregation input unavailable: {source}")
