"""Effective-date parsing and the denormalized date partition fields."""

from __future__ import annotations

import math
from datetime import date, datetime

from .models import DateParts


def parse_effective_date(value: object) -> date:
    """Accept a ``date``, a ``datetime`` or an ISO-8601 string.

    Raises ``ValueError`` for anything else.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            # fromisoformat before 3.11 does not understand a trailing "Z"
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    raise ValueError(f"invalid date: {value!r}")


def extract_date_parts(day: date) -> DateParts:
    jan_first = date(day.year, 1, 1)
    # Sunday-based weekday of January 1st (Sunday = 0)
    jan_first_weekday = (jan_first.weekday() + 1) % 7
    week = math.ceil(((day - jan_first).days + jan_first_weekday + 1) / 7)
    return DateParts(
        year=day.year,
        month=day.month,
        day=day.day,
        week=week,
        year_month=f"{day.year}-{day.month:02d}",
    )
