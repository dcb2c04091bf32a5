"""
Text renderings of expression trees.

- AstPrinter: parenthesized prefix form, ``(* (group (+ 1.0 2.0)) 3.0)``
- RpnPrinter: reverse Polish notation, ``1 2 + 3 *``
- SourcePrinter: fully parenthesized Lox source that parses back to the
  same tree (minus Grouping nodes)

Author: xwest
"""

from ..interpreter.values import stringify
from .ast_nodes import Expr, Literal, Grouping, Unary, Binary, Ternary, unknown_node


class AstPrinter:
    """Prints a tree as nested ``(operator operand...)`` forms."""

    def print(self, expr: Expr) -> str:
        if isinstance(expr, Literal):
            return self._literal(expr.value)
        elif isinstance(expr, Grouping):
            return self._parenthesize("group", expr.expression)
        elif isinstance(expr, Unary):
            return self._parenthesize(expr.operator.lexeme, expr.right)
        elif isinstance(expr, Binary):
            return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)
        elif isinstance(expr, Ternary):
            return self._parenthesize("?:", expr.condition, expr.then_branch, expr.else_branch)
        raise unknown_node(expr)

    def _literal(self, value) -> str:
        if value is None:
            return "nil"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return repr(float(value))
        return str(value)

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name] + [self.print(expr) for expr in exprs]
        return "(" + " ".join(parts) + ")"


class RpnPrinter:
    """Prints a tree in reverse Polish notation; grouping is implicit in the order."""

    def print(self, expr: Expr) -> str:
        if isinstance(expr, Literal):
            return stringify(expr.value)
        elif isinstance(expr, Grouping):
            return self.print(expr.expression)
        elif isinstance(expr, Unary):
            return f"{self.print(expr.right)} {expr.operator.lexeme}"
        elif isinstance(expr, Binary):
            return f"{self.print(expr.left)} {self.print(expr.right)} {expr.operator.lexeme}"
        elif isinstance(expr, Ternary):
            return (f"{self.print(expr.condition)} {self.print(expr.then_branch)} "
                    f"{self.print(expr.else_branch)} ?:")
        raise unknown_node(expr)


class SourcePrinter:
    """
    Prints a tree back to Lox source, parenthesizing every compound node.

    Strings are emitted between double quotes; Lox strings have no escapes,
    so a string literal containing '"' cannot be printed faithfully.
    """

    def print(self, expr: Expr) -> str:
        if isinstance(expr, Literal):
            if isinstance(expr.value, str):
                return f'"{expr.value}"'
            return stringify(expr.value)
        elif isinstance(expr, Grouping):
            return f"({self.print(expr.expression)})"
        elif isinstance(expr, Unary):
            return f"({expr.operator.lexeme}{self.print(expr.right)})"
        elif isinstance(expr, Binary):
            return f"({self.print(expr.left)} {expr.operator.lexeme} {self.print(expr.right)})"
        elif isinstance(expr, Ternary):
            return (f"({self.print(expr.condition)} ? {self.print(expr.then_branch)} : "
                    f"{self.print(expr.else_branch)})")
        raise unknown_node(expr)
