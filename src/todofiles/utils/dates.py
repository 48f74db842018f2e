"""
Date parsing utilities.

Todo.txt dates are always ISO 8601 calendar dates (YYYY-MM-DD). The looser
parse_date() is only used at the outer surfaces (CLI, REST, MCP) to read a
reference "today" from the user; it never consults the system clock itself.
"""

import re
from datetime import date, datetime, timedelta
from typing import Optional

ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")

_DAY_NAMES = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def parse_iso_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a strict YYYY-MM-DD literal.

    Returns None for anything else, including well-formed literals that are
    not real calendar dates (e.g. "2024-02-30").
    """
    if not value or not ISO_DATE_RE.match(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def format_date(value: Optional[date]) -> str:
    """ISO string for a date, or "" when unset."""
    return value.isoformat() if value is not None else ""


def days_between(start: date, end: date) -> int:
    """Signed whole-day difference ``end - start``."""
    return (end - start).days


def parse_date(date_str: str, today: date) -> Optional[date]:
    """
    Parse a user-supplied date relative to an explicit reference day.

    Supports:
    - ISO 8601: "2026-02-15"
    - Natural language: "today", "tomorrow", "yesterday", "Friday", "next Monday"
    - Relative: "in 3 days", "in 2 weeks"

    Returns:
        The parsed date, or None if unparseable
    """
    if not date_str:
        return None

    date_str = date_str.strip()
    lowered = date_str.lower()

    if lowered == "today":
        return today
    if lowered == "tomorrow":
        return today + timedelta(days=1)
    if lowered == "yesterday":
        return today - timedelta(days=1)

    parsed = parse_iso_date(date_str)
    if parsed is not None:
        return parsed

    is_next = lowered.startswith("next ")
    if is_next:
        lowered = lowered[5:].strip()

    for i, day_name in enumerate(_DAY_NAMES):
        if lowered == day_name:
            days_ahead = i - today.weekday()
            if days_ahead <= 0 or is_next:
                days_ahead += 7
            return today + timedelta(days=days_ahead)

    relative_match = re.match(r"in (\d+) (days?|weeks?)$", lowered)
    if relative_match:
        amount = int(relative_match.group(1))
        unit = relative_match.group(2)
        delta = timedelta(weeks=amount) if unit.startswith("week") else timedelta(days=amount)
        return today + delta

    return None
