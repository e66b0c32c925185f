"""
BooleanCoercer - converts JSON booleans, numbers and human-readable strings to bool.
"""

from typing import Any

from .base_coercer import BaseCoercer

DEFAULT_TRUTHY_TOKENS = frozenset({"true", "1", "yes", "y"})


class BooleanCoercer(BaseCoercer):
    """
    Coerces a raw value to bool.

    - true/false map directly
    - numbers: nonzero is True
    - strings: trimmed and lower-cased, True only for a truthy token
      (default: "true", "1", "yes", "y"); every other string is False
    - null, objects and arrays are rejected

    Parameters:
    - truthy_tokens: Iterable of accepted truthy strings (compared lower-cased)

    Fallback: False
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        tokens = self.parameters.get("truthy_tokens")
        if tokens is None:
            self.truthy_tokens = DEFAULT_TRUTHY_TOKENS
        else:
            self.truthy_tokens = frozenset(str(token).strip().lower() for token in tokens)

    def coerce(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value

        if isinstance(value, int | float):
            return value != 0

        if isinstance(value, str):
            return value.strip().lower() in self.truthy_tokens

        raise self._fail(value, "unsupported JSON type")

    @property
    def fallback(self) -> bool:
        return False

    @property
    def rule_type(self) -> str:
        return "boolean"
