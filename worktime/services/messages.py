# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User-facing texts for result codes."""

import re

SUCCESS_MESSAGES = {
    "added": "Holiday added.",
    "deleted": "Holiday deleted.",
    "imported": "Public holidays imported.",
    "work_added": "Work hours entry added.",
    "users_synced": "Users synchronized with the identity provider.",
    "user_blocked": "User blocked.",
    "user_unblocked": "User unblocked.",
    "role_changed_to_admin": "User role changed to Administrator.",
    "role_changed_to_manager": "User role changed to Manager.",
    "role_changed_to_user": "User role changed to User.",
}

ERROR_MESSAGES = {
    "failed": "Something went wrong. Please try again.",
    "not_found": "Entry not found.",
    "unauthorized": "You are not allowed to perform this operation.",
    "admin_only": "This operation requires administrator permissions.",
    "cannot_demote_self": (
        "You cannot change your own role. "
        "Ask another administrator to make this change."
    ),
    "identity_unavailable": "The identity provider could not be reached.",
    "conflict": "Some of these days were recorded concurrently. Please try again.",
    "invalid_date": "Please choose a valid date.",
    "weekend_not_allowed": "A holiday cannot start on a weekend.",
    "public_holiday_not_allowed": "A holiday cannot start on a public holiday.",
    "no_valid_days": (
        "The selected range contains no working days "
        "(weekends and public holidays are excluded)."
    ),
    "invalid_hours": "Enter a valid number of hours (greater than 0).",
    "work_invalid_date": (
        "Entries can only be added for today and the two previous days."
    ),
    "holiday": "Hours cannot be logged on a holiday.",
}

_EXCLUSION_SUFFIXES = {
    "_weekends_and_holidays_excluded": "Weekends and public holidays were skipped.",
    "_holidays_excluded": "Public holidays were skipped.",
    "_weekends_excluded": "Weekends were skipped.",
}

_ADDED_DAYS = re.compile(r"^added_(\d+)_days")


def holiday_added_code(
    days_count: int,
    has_excluded_weekends: bool = False,
    has_excluded_public_holidays: bool = False,
) -> str:
    """Compose the success code of a holiday request.

    Examples: ``added``, ``added_5_days``,
    ``added_3_days_weekends_and_holidays_excluded``.
    """
    code = f"added_{days_count}_days" if days_count > 1 else "added"
    if has_excluded_weekends and has_excluded_public_holidays:
        code += "_weekends_and_holidays_excluded"
    elif has_excluded_weekends:
        code += "_weekends_excluded"
    elif has_excluded_public_holidays:
        code += "_holidays_excluded"
    return code


def describe(code: str) -> str:
    """Render the text of a success or error code.

    Unknown codes are returned unchanged.
    """
    if code in ERROR_MESSAGES:
        return ERROR_MESSAGES[code]
    if code in SUCCESS_MESSAGES:
        return SUCCESS_MESSAGES[code]
    if not code.startswith("added"):
        return code

    match = _ADDED_DAYS.match(code)
    text = f"Added {match.group(1)} holiday days." if match else SUCCESS_MESSAGES["added"]
    for suffix, extra in _EXCLUSION_SUFFIXES.items():
        if code.endswith(suffix):
            return f"{text} {extra}"
    return text
