"""Validation predicate for candidate teacher records."""

import json
import math
import re
from datetime import date, datetime
from email.utils import parsedate_to_datetime
from typing import Any

# Year, year-month or year-month-day with unpadded parts ("1990-5-3")
_PARTIAL_DATE = re.compile(r"([0-9]{4})(?:-([0-9]{1,2})(?:-([0-9]{1,2}))?)?")

# Textual date formats accepted in addition to ISO-8601 and RFC 2822
_DATE_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%a %b %d %Y",
)


def is_number(value: Any) -> bool:
    """Whether value is a finite JSON number. Booleans are not numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_standard_json(value: Any) -> bool:
    """Whether value encodes as strict JSON (no NaN or Infinity anywhere)."""
    try:
        json.dumps(value, allow_nan=False)
    except (TypeError, ValueError):
        return False
    return True


def _is_partial_date(text: str) -> bool:
    match = _PARTIAL_DATE.fullmatch(text)
    if not match:
        return False
    year, month, day = match.groups()
    try:
        date(int(year), int(month or 1), int(day or 1))
    except ValueError:
        return False
    return True


def _is_rfc2822_date(text: str) -> bool:
    try:
        return parsedate_to_datetime(text) is not None
    except (TypeError, ValueError, IndexError):
        return False


def is_valid_date(value: Any) -> bool:
    """Whether value is a string that parses as a calendar date.

    Accepted: ISO-8601 dates and date-times (trailing ``Z`` included),
    ``YYYY`` / ``YYYY-MM`` / unpadded ``Y-M-D``, RFC 2822
    (``Thu, 01 Jan 1970 00:00:00 GMT``) and a few month-name and
    slash-separated forms.

    Args:
        value: Candidate value.

    Returns:
        True if the value is a parseable date string.
    """
    if not isinstance(value, str) or not value.strip():
        return False
    text = value.strip()
    try:
        datetime.fromisoformat(text.replace("Z", "+00:00"))
        return True
    except ValueError:
        pass
    if _is_partial_date(text) or _is_rfc2822_date(text):
        return True
    for fmt in _DATE_FORMATS:
        try:
            datetime.strptime(text, fmt)
            return True
        except ValueError:
            continue
    return False


def is_valid_teacher(candidate: Any) -> bool:
    """Check a candidate record before it is accepted into storage.

    Presence is checked by truthiness, so ``age`` or ``numberOfClasses``
    equal to ``0`` and an empty ``fullName`` are rejected. Records holding
    ``NaN`` or ``Infinity`` anywhere are rejected since they cannot be
    stored as JSON.

    Args:
        candidate: Decoded JSON value supplied by the client.

    Returns:
        True if the candidate is valid.
    """
    if not isinstance(candidate, dict):
        return False

    full_name = candidate.get("fullName")
    if not full_name or not isinstance(full_name, str):
        return False

    age = candidate.get("age")
    if not age or not is_number(age):
        return False

    if not is_valid_date(candidate.get("dateOfBirth")):
        return False

    classes = candidate.get("numberOfClasses")
    if not classes or not is_number(classes):
        return False

    return is_standard_json(candidate)
