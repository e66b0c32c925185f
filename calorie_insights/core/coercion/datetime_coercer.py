"""
DateTimeCoercer - parses ISO-like date strings to datetime.
"""

from datetime import datetime
from typing import Any

from .base_coercer import BaseCoercer


class DateTimeCoercer(BaseCoercer):
    """
    Coerces an ISO-like calendar date string to datetime.

    Accepts "2022-11-01", "2022-11-01T08:30:00", "2022-11-01 08:30" and
    offsets such as "Z" or "+01:00". The time-of-day, when present, is kept
    on the value; reports only ever look at the calendar date.

    Fallback: datetime.min (0001-01-01T00:00:00)
    """

    def coerce(self, value: Any) -> datetime:
        if not isinstance(value, str):
            raise self._fail(value, "dates must be strings")

        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"

        try:
            return datetime.fromisoformat(text)
        except ValueError:
            raise self._fail(value, "not an ISO calendar date")

    @property
    def fallback(self) -> datetime:
        return datetime.min

    @property
    def rule_type(self) -> str:
        return "datetime"
