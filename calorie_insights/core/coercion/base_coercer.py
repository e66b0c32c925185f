"""
Base coercer interface for all field coercion rules.

All coercers must inherit from BaseCoercer and implement coerce() and fallback.
"""

from abc import ABC, abstractmethod
from typing import Any


class CoercionError(Exception):
    """Raised when a raw value cannot be converted to the target type."""

    def __init__(self, rule_name: str, field_name: str, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name}: {message}")


class BaseCoercer(ABC):
    """
    Abstract base class for all coercers.

    A coercer converts one loosely-typed JSON value (str, int, float, bool,
    None, dict or list) into a strict Python value for a single field.
    ``coerce`` is strict and raises CoercionError; callers that need a total
    conversion use ``try_coerce`` or ``coerce_or_fallback``.
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        """
        Initialize coercer.

        Args:
            field_name: Name of the field to coerce
            parameters: Rule-specific parameters (e.g., truthy_tokens for boolean)
        """
        self.field_name = field_name
        self.parameters = parameters or {}

    @abstractmethod
    def coerce(self, value: Any) -> Any:
        """
        Convert a raw value to the target type.

        Args:
            value: The raw JSON value (None when the key is absent)

        Returns:
            The converted value

        Raises:
            CoercionError: If the value cannot be converted
        """
        pass

    @property
    @abstractmethod
    def fallback(self) -> Any:
        """Zero value used when coercion fails or the value is absent."""
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def try_coerce(self, value: Any) -> tuple[Any, CoercionError | None]:
        """
        Convert a raw value without raising.

        Returns:
            (converted value, None) on success, (fallback, error) on failure
        """
        try:
            return self.coerce(value), None
        except CoercionError as e:
            return self.fallback, e

    def coerce_or_fallback(self, value: Any) -> Any:
        """Convert a raw value, returning the fallback instead of raising."""
        return self.try_coerce(value)[0]

    def _fail(self, value: Any, reason: str) -> CoercionError:
        return CoercionError(
            rule_name=self.rule_type,
            field_name=self.field_name,
            message=f"Cannot coerce {type(value).__name__} {value!r}: {reason}",
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name}, params={self.parameters})"
