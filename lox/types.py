"""Runtime value helpers for Lox.

Lox values map directly onto Python objects: Number is `float`, String is
`str`, Boolean is `bool` and Nil is `None`. This module holds the rules
that differ from Python's own: truthiness, equality and how values are
displayed by `print`.
"""

from __future__ import annotations

import math
from typing import Any


def is_number(value: Any) -> bool:
    return isinstance(value, float)


def is_truthy(value: Any) -> bool:
    """`nil` and `false` are falsy; everything else, including 0 and "", is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(a: Any, b: Any) -> bool:
    # Python treats True == 1.0; Lox values of different kinds never compare equal
    if type(a) is not type(b):
        return False
    if isinstance(a, float):
        # numbers compare by identity of value: NaN equals NaN, 0 and -0 differ
        if math.isnan(a) or math.isnan(b):
            return math.isnan(a) and math.isnan(b)
        if a == 0.0 and b == 0.0:
            return math.copysign(1.0, a) == math.copysign(1.0, b)
    return a == b


def divide(a: float, b: float) -> float:
    """IEEE-754 division: dividing by zero yields an infinity or NaN."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def type_name(value: Any) -> str:
    """Return the Lox type name of a runtime value."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, float):
        return 'number'
    if isinstance(value, str):
        return 'string'
    return type(value).__name__


def to_string(value: Any) -> str:
    """Convert a Lox value to its string representation for printing."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        text = repr(value)
        if text.endswith('.0'):
            text = text[:-2]
        return text
    return str(value)
