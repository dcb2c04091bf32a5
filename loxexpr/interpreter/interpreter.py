"""
Tree-walking evaluator for Lox expressions.

Evaluation is strict and left to right. The only branch that skips work
is the conditional operator, which evaluates just the selected branch.
A LoxRuntimeError aborts the whole evaluation.

Author: xwest
"""

import operator as op
from typing import Any

from ..lexer.tokens import Token, TokenType, make_token
from ..parser.ast_nodes import Expr, Literal, Grouping, Unary, Binary, Ternary, unknown_node
from .values import Value, is_number, is_truthy, is_equal, stringify
from .errors import (
    OPERAND_MUST_BE_NUMBER, OPERANDS_MUST_BE_NUMBERS, OPERANDS_MUST_BE_NUMBERS_OR_STRINGS,
    create_operand_type_error, create_division_by_zero_error, create_nesting_error
)


COMPARISONS = {
    TokenType.GREATER: op.gt,
    TokenType.GREATER_EQUAL: op.ge,
    TokenType.LESS: op.lt,
    TokenType.LESS_EQUAL: op.le,
}

ARITHMETIC = {
    TokenType.MINUS: op.sub,
    TokenType.STAR: op.mul,
    TokenType.SLASH: op.truediv,
}


class Interpreter:
    """
    Evaluates expression trees to runtime values.

    Holds no state between calls; one instance can evaluate any number
    of trees.
    """

    def evaluate(self, expr: Expr) -> Value:
        """
        Evaluate an expression tree.

        Raises:
            LoxRuntimeError: If an operator is applied to invalid operands,
                or the tree is nested too deeply for the Python stack
        """
        try:
            return self._evaluate(expr)
        except RecursionError:
            raise create_nesting_error(_anchor_token(expr)) from None

    def _evaluate(self, expr: Expr) -> Value:
        if isinstance(expr, Literal):
            return expr.value
        elif isinstance(expr, Grouping):
            return self._evaluate(expr.expression)
        elif isinstance(expr, Unary):
            return self._unary(expr)
        elif isinstance(expr, Binary):
            return self._binary(expr)
        elif isinstance(expr, Ternary):
            return self._ternary(expr)
        raise unknown_node(expr)

    def _unary(self, expr: Unary) -> Value:
        right = self._evaluate(expr.right)
        token_type = expr.operator.type

        if token_type == TokenType.BANG:
            return not is_truthy(right)
        if token_type == TokenType.MINUS:
            if not is_number(right):
                raise create_operand_type_error(expr.operator, OPERAND_MUST_BE_NUMBER, right)
            return -float(right)

        raise ValueError(f"Unsupported unary operator: {expr.operator.lexeme!r}")

    def _binary(self, expr: Binary) -> Value:
        # Walk the left spine so a long left-associative chain such as
        # 1 + 2 + ... + n takes one stack frame, not n
        spine = []
        while isinstance(expr, Binary):
            spine.append(expr)
            expr = expr.left

        value = self._evaluate(expr)
        for node in reversed(spine):
            right = self._evaluate(node.right)
            value = self._apply(node.operator, value, right)
        return value

    def _apply(self, operator: Token, left: Value, right: Value) -> Value:
        token_type = operator.type

        if token_type == TokenType.COMMA:
            return right

        if token_type == TokenType.EQUAL_EQUAL:
            return is_equal(left, right)
        if token_type == TokenType.BANG_EQUAL:
            return not is_equal(left, right)

        if token_type in COMPARISONS:
            return self._compare(operator, left, right)

        if token_type == TokenType.PLUS:
            return self._add(operator, left, right)

        if token_type in ARITHMETIC:
            self._check_number_operands(operator, left, right)
            if token_type == TokenType.SLASH and right == 0:
                raise create_division_by_zero_error(operator)
            return ARITHMETIC[token_type](float(left), float(right))

        raise ValueError(f"Unsupported binary operator: {operator.lexeme!r}")

    def _ternary(self, expr: Ternary) -> Value:
        if is_truthy(self._evaluate(expr.condition)):
            return self._evaluate(expr.then_branch)
        return self._evaluate(expr.else_branch)

    def _compare(self, operator: Token, left: Any, right: Any) -> bool:
        both_numbers = is_number(left) and is_number(right)
        both_strings = isinstance(left, str) and isinstance(right, str)
        if not (both_numbers or both_strings):
            raise create_operand_type_error(operator, OPERANDS_MUST_BE_NUMBERS, left, right)
        return COMPARISONS[operator.type](left, right)

    def _add(self, operator: Token, left: Any, right: Any) -> Value:
        if is_number(left) and is_number(right):
            return float(left) + float(right)
        if isinstance(left, str) or isinstance(right, str):
            return stringify(left) + stringify(right)
        raise create_operand_type_error(operator, OPERANDS_MUST_BE_NUMBERS_OR_STRINGS, left, right)

    def _check_number_operands(self, operator: Token, left: Any, right: Any):
        if not (is_number(left) and is_number(right)):
            raise create_operand_type_error(operator, OPERANDS_MUST_BE_NUMBERS, left, right)


def _anchor_token(expr: Expr) -> Token:
    """The outermost operator token of a tree, for locating whole-tree errors."""
    while True:
        if isinstance(expr, (Unary, Binary)):
            return expr.operator
        if isinstance(expr, Grouping):
            expr = expr.expression
        elif isinstance(expr, Ternary):
            expr = expr.condition
        else:
            return make_token(TokenType.EOF, "")
