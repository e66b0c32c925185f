"""
FloatCoercer - converts numbers and numeric strings to float.
"""

import math
from typing import Any

from .base_coercer import BaseCoercer


class FloatCoercer(BaseCoercer):
    """
    Coerces a raw value to float.

    Accepts JSON numbers and numeric strings ("99.99", "1.5e3").
    Non-finite results (nan, inf) are rejected.

    Fallback: 0.0
    """

    def coerce(self, value: Any) -> float:
        if isinstance(value, bool):
            raise self._fail(value, "booleans are not numbers")

        if isinstance(value, int | float):
            try:
                result = float(value)
            except OverflowError:
                raise self._fail(value, "out of float range")
        elif isinstance(value, str):
            try:
                result = float(value.strip())
            except ValueError:
                raise self._fail(value, "not a decimal number")
        else:
            raise self._fail(value, "unsupported JSON type")

        if not math.isfinite(result):
            raise self._fail(value, "not a finite number")
        return result

    @property
    def fallback(self) -> float:
        return 0.0

    @property
    def rule_type(self) -> str:
        return "float"
