"""
Date/time well-formedness check used when callers ask for valid dates only.
"""
import re
from datetime import date, datetime
from typing import Any

# Offsets without a colon (e.g. +0000) are rewritten before parsing
_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")
_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_well_formed_datetime(value: Any) -> bool:
    """
    True if value reads as an ISO-8601 date or date-time.

    Accepts:
    - Date only: 2025-12-28
    - Date-time with T or space separator, optional seconds/fractions
    - Z, +HH:MM or +HHMM offsets

    Non-strings and blank strings are never well formed.
    """
    if not isinstance(value, str):
        return False

    text = value.strip()
    if not text:
        return False

    if _DATE_ONLY.match(text):
        try:
            date.fromisoformat(text)
            return True
        except ValueError:
            return False

    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    elif re.search(r"[T ]\d{2}:\d{2}(:\d{2}(\.\d+)?)?[+-]\d{4}$", text):
        text = _COMPACT_OFFSET.sub(r"\1:\2", text)

    try:
        datetime.fromisoformat(text)
    except (TypeError, ValueError):
        return False
    return True
