"""
Lox Parser Package

Recursive descent parser for Lox expressions.

Key Features:
- One method per precedence tier, comma loosest, unary tightest
- Conditional '?:' operator, right associative
- Error productions for binary operators missing a left operand
- Panic-mode recovery that keeps looking for further errors

Author: xwest
"""

from .ast_nodes import (
    Expr, Literal, Grouping, Unary, Binary, Ternary, strip_grouping, same_shape
)
from .parser import Parser, parse_string
from .errors import ParseError
from .printer import AstPrinter, RpnPrinter, SourcePrinter

__all__ = [
    # Core parser
    "Parser",
    "parse_string",

    # AST nodes
    "Expr", "Literal", "Grouping", "Unary", "Binary", "Ternary",
    "strip_grouping", "same_shape",

    # Printers
    "AstPrinter", "RpnPrinter", "SourcePrinter",

    # Error handling
    "ParseError",
]
