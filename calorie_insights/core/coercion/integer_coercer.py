"""
IntegerCoercer - converts numbers and numeric strings to int.
"""

import math
import re
from typing import Any

from .base_coercer import BaseCoercer

# Base-10 integer with optional leading sign, no separators
INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")


class IntegerCoercer(BaseCoercer):
    """
    Coerces a raw value to int.

    - JSON numbers are truncated toward zero (42.9 -> 42)
    - Strings are stripped and parsed as base-10 integers ("-7" -> -7)
    - Booleans, null, objects and arrays are rejected

    Fallback: 0
    """

    def coerce(self, value: Any) -> int:
        # bool is a subclass of int, reject it explicitly
        if isinstance(value, bool):
            raise self._fail(value, "booleans are not integers")

        if isinstance(value, int):
            return value

        if isinstance(value, float):
            if not math.isfinite(value):
                raise self._fail(value, "not a finite number")
            return int(value)

        if isinstance(value, str):
            text = value.strip()
            if not INTEGER_PATTERN.match(text):
                raise self._fail(value, "not a base-10 integer")
            try:
                return int(text)
            except ValueError:
                # Interpreter digit limit for str -> int conversion
                raise self._fail(value, "too many digits")

        raise self._fail(value, "unsupported JSON type")

    @property
    def fallback(self) -> int:
        return 0

    @property
    def rule_type(self) -> str:
        return "integer"
