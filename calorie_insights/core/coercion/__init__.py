"""
Field coercion rules.

Provides coercers that turn loosely-typed JSON values into integers, floats,
booleans, datetimes and text, each with a defined zero-value fallback.
"""

from .base_coercer import BaseCoercer, CoercionError
from .boolean_coercer import DEFAULT_TRUTHY_TOKENS, BooleanCoercer
from .datetime_coercer import DateTimeCoercer
from .float_coercer import FloatCoercer
from .integer_coercer import IntegerCoercer
from .text_coercer import TextCoercer

__all__ = [
    "BaseCoercer",
    "CoercionError",
    "IntegerCoercer",
    "FloatCoercer",
    "BooleanCoercer",
    "DateTimeCoercer",
    "TextCoercer",
    "DEFAULT_TRUTHY_TOKENS",
]
