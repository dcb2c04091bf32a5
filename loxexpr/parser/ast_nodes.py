"""
Abstract Syntax Tree node definitions for Lox expressions.

The expression tree is a closed set of five immutable node types. Code that
consumes a tree (the printers, the interpreter) dispatches over ``Expr``
with isinstance checks and treats any other type as a defect.

Author: xwest
"""

from dataclasses import dataclass
from typing import Iterator, Union

from ..lexer.tokens import Token


@dataclass(frozen=True)
class Literal:
    """A number, string, boolean or nil (None) value."""
    value: Union[float, str, bool, None]


@dataclass(frozen=True)
class Grouping:
    """A parenthesized sub-expression."""
    expression: "Expr"


@dataclass(frozen=True)
class Unary:
    """Prefix '-' or '!' applied to an operand."""
    operator: Token
    right: "Expr"


@dataclass(frozen=True)
class Binary:
    """Infix arithmetic, comparison, equality or comma operation."""
    left: "Expr"
    operator: Token
    right: "Expr"


@dataclass(frozen=True)
class Ternary:
    """The conditional operator: condition ? then_branch : else_branch."""
    condition: "Expr"
    then_branch: "Expr"
    else_branch: "Expr"


Expr = Union[Literal, Grouping, Unary, Binary, Ternary]


def unknown_node(expr: object) -> TypeError:
    """Error for a value outside the closed set of expression nodes."""
    return TypeError(f"Unknown expression node: {type(expr).__name__}")


def children(expr: Expr) -> Iterator[Expr]:
    """Yield the direct sub-expressions of a node, left to right."""
    if isinstance(expr, Literal):
        return
    elif isinstance(expr, Grouping):
        yield expr.expression
    elif isinstance(expr, Unary):
        yield expr.right
    elif isinstance(expr, Binary):
        yield expr.left
        yield expr.right
    elif isinstance(expr, Ternary):
        yield expr.condition
        yield expr.then_branch
        yield expr.else_branch
    else:
        raise unknown_node(expr)


def strip_grouping(expr: Expr) -> Expr:
    """Return the same tree with every Grouping node replaced by its contents."""
    if isinstance(expr, Literal):
        return expr
    elif isinstance(expr, Grouping):
        return strip_grouping(expr.expression)
    elif isinstance(expr, Unary):
        return Unary(expr.operator, strip_grouping(expr.right))
    elif isinstance(expr, Binary):
        return Binary(strip_grouping(expr.left), expr.operator, strip_grouping(expr.right))
    elif isinstance(expr, Ternary):
        return Ternary(
            strip_grouping(expr.condition),
            strip_grouping(expr.then_branch),
            strip_grouping(expr.else_branch),
        )
    raise unknown_node(expr)


def same_shape(a: Expr, b: Expr) -> bool:
    """
    Compare two trees by node type, operator type and literal value.

    Token lexemes and source locations are ignored, so ``1`` and ``1.0``
    scanned from different text still compare equal.
    """
    if type(a) is not type(b):
        return False
    if isinstance(a, Literal):
        return type(a.value) is type(b.value) and a.value == b.value
    if isinstance(a, (Unary, Binary)) and a.operator.type != b.operator.type:
        return False
    return all(same_shape(x, y) for x, y in zip(children(a), children(b)))
