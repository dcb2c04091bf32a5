"""
Runtime values and the rules that apply to every value.

A Lox value is a Python float (number), str, bool or None (nil).
"""

import math
from decimal import Decimal
from typing import Any, Union

Value = Union[float, str, bool, None]


def is_number(value: Any) -> bool:
    # bool is an int subclass in Python but never a Lox number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def type_name(value: Any) -> str:
    """Lox name of a value's runtime type."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    raise TypeError(f"Not a Lox value: {value!r}")


def is_truthy(value: Any) -> bool:
    """nil and false are falsy; everything else, 0 and "" included, is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(a: Any, b: Any) -> bool:
    """Equal only when both values share a runtime type and a value. Never coerces."""
    if type_name(a) != type_name(b):
        return False
    return a == b


def stringify(value: Any) -> str:
    """
    Canonical text of a value, used for display and for '+' concatenation.

    Numbers are written positionally, never in exponent form, and integral
    values drop the ".0" suffix: 3.0 -> "3", 3.14 -> "3.14", 1e16 ->
    "10000000000000000".
    """
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return _format_number(float(value))
    return str(value)


def _format_number(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"

    # repr gives the shortest round-tripping digits; Decimal lays them out
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
