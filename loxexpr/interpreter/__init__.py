"""
Lox Interpreter Package

Tree-walking evaluation of expression trees.

Key Features:
- Number, string, boolean and nil values
- String concatenation with '+' when either operand is a string
- Type-strict equality and comparison
- Explicit division-by-zero detection

Author: xwest
"""

from .values import Value, is_truthy, is_equal, stringify
from .errors import LoxRuntimeError
from .interpreter import Interpreter

__all__ = [
    "Interpreter",
    "LoxRuntimeError",
    "Value",
    "is_truthy",
    "is_equal",
    "stringify",
]
