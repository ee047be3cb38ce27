"""Runtime values of the language and the operations defined on them.

Values are plain Python objects: numbers are ``float``, strings are ``str``
and booleans are ``bool``.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Optional, Union

Value = Union[float, str, bool]


def _is_bool(value: object) -> bool:
    return isinstance(value, bool)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_string(value: object) -> bool:
    return isinstance(value, str)


def _unsupported(operation: str, *operands: object) -> TypeError:
    kinds = ", ".join(type(operand).__name__ for operand in operands)
    return TypeError(f"unsupported operand(s) for {operation}: {kinds}")


def try_boolean(word: str) -> Optional[bool]:
    """Return the boolean a literal word denotes, or None if it is not one."""
    if word == "true":
        return True
    if word == "false":
        return False
    return None


def truthy(value: Value) -> bool:
    """Return the truth of a boolean or number; strings have none."""
    if _is_bool(value):
        return value
    if _is_number(value):
        return value != 0.0
    raise _unsupported("truth test", value)


def _format_number(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_value(value: Value) -> str:
    """Render a value the way the language prints it."""
    if _is_bool(value):
        return "true" if value else "false"
    if _is_number(value):
        return _format_number(float(value))
    if _is_string(value):
        return value
    raise _unsupported("formatting", value)


def logical_type(a: Value, b: Value) -> bool:
    """Whether two values may meet in a logical or ordering operation."""
    return (_is_number(a) or _is_bool(a)) and (_is_number(b) or _is_bool(b))


def compare_type(a: Value, b: Value) -> bool:
    """Whether two values may be compared for equality."""
    return (_is_number(a) and _is_number(b)) or (_is_string(a) and _is_string(b))


def mul_div_type(a: Value, b: Value) -> bool:
    """Whether two values pass the type check for ``*`` and ``/``."""
    return (_is_number(a) and _is_number(b)) or (_is_string(a) and _is_string(b))


def add_sub_type(a: Value, b: Value) -> bool:
    """Whether two values pass the type check for ``+`` and ``-``."""
    if mul_div_type(a, b):
        return True
    return (_is_number(a) and _is_string(b)) or (_is_string(a) and _is_number(b))


def add(a: Value, b: Value) -> Value:
    """Add two numbers, or append the rendering of any value to a string."""
    if _is_number(a):
        if not _is_number(b):
            raise _unsupported("+", a, b)
        return float(a) + float(b)
    if _is_string(a):
        return a + format_value(b)
    raise _unsupported("+", a, b)


def sub(a: Value, b: Value) -> float:
    """Subtract two numbers."""
    if _is_number(a) and _is_number(b):
        return float(a) - float(b)
    raise _unsupported("-", a, b)


def mul(a: Value, b: Value) -> Value:
    """Multiply two numbers, or repeat a string a number of times."""
    if _is_number(a) and _is_number(b):
        return float(a) * float(b)
    if _is_string(a) and _is_number(b):
        count = float(b)
        if math.isnan(count) or count <= 0:
            return ""
        return a * int(count)
    raise _unsupported("*", a, b)


def div(a: Value, b: Value) -> float:
    """Divide two numbers with IEEE semantics for a zero divisor."""
    if not (_is_number(a) and _is_number(b)):
        raise _unsupported("/", a, b)
    left, right = float(a), float(b)
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def neg(value: Value) -> float:
    """Negate a number."""
    if _is_number(value):
        return -float(value)
    raise _unsupported("unary -", value)


def logical_not(value: Value) -> bool:
    """Invert the truth of a boolean or number."""
    if _is_string(value):
        raise _unsupported("!", value)
    return not truthy(value)


def logical_and(a: Value, b: Value) -> bool:
    """Logical conjunction; both operands are always evaluated."""
    left, right = truthy(a), truthy(b)
    return left and right


def logical_or(a: Value, b: Value) -> bool:
    """Logical disjunction; both operands are always evaluated."""
    left, right = truthy(a), truthy(b)
    return left or right