"""
TextCoercer - passes text through and renders numeric scalars as text.
"""

from typing import Any

from .base_coercer import BaseCoercer


class TextCoercer(BaseCoercer):
    """
    Coerces a raw value to str.

    Strings pass through verbatim (no trimming). Integers and floats are
    rendered with str(). Booleans, objects and arrays are rejected.

    Parameters:
    - optional: When True the fallback is None (absent), otherwise ""
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        self.optional = bool(self.parameters.get("optional", False))

    def coerce(self, value: Any) -> str:
        if isinstance(value, str):
            return value

        if isinstance(value, bool):
            raise self._fail(value, "booleans are not text")

        if isinstance(value, int | float):
            try:
                return str(value)
            except ValueError:
                # Interpreter digit limit for int -> str conversion
                raise self._fail(value, "too many digits")

        raise self._fail(value, "unsupported JSON type")

    @property
    def fallback(self) -> str | None:
        return None if self.optional else ""

    @property
    def rule_type(self) -> str:
        return "text"
