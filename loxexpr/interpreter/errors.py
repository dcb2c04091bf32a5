"""
Runtime error handling for the Lox interpreter.

A LoxRuntimeError aborts the evaluation that raised it. It carries the
operator token so the error can be reported with its source line.

Author: xwest
"""

from typing import Optional

from ..lexer.tokens import Token
from ..lexer.errors import Diagnostic
from .values import type_name


OPERAND_MUST_BE_NUMBER = "Operand must be a number."
OPERANDS_MUST_BE_NUMBERS = "Operands must be numbers."
OPERANDS_MUST_BE_NUMBERS_OR_STRINGS = "Operands must be two numbers or two strings."
DIVISION_BY_ZERO = "Division by zero."
TOO_DEEPLY_NESTED = "Expression too deeply nested."


class LoxRuntimeError(Exception):
    """
    Exception raised when evaluation breaks a runtime rule.

    Contains the offending operator token and a diagnostic record.
    """

    def __init__(
        self,
        token: Token,
        message: str,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.token = token
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=token.location,
            severity="error",
            code=code,
            help_text=help_text,
        )

    @property
    def line(self) -> int:
        return self.token.line

    def __str__(self) -> str:
        return self.message


RUNTIME_ERROR_CODES = {
    "R001": "Operand type mismatch",
    "R002": "Division by zero",
    "R003": "Expression nested deeper than the evaluator can follow",
}


def create_operand_type_error(operator: Token, message: str, *operands) -> LoxRuntimeError:
    """Create an error for an operator applied to values of the wrong type."""
    kinds = ", ".join(type_name(operand) for operand in operands)
    return LoxRuntimeError(
        operator,
        message,
        code="R001",
        help_text=f"'{operator.lexeme}' was applied to: {kinds}.",
    )


def create_division_by_zero_error(operator: Token) -> LoxRuntimeError:
    return LoxRuntimeError(operator, DIVISION_BY_ZERO, code="R002")


def create_nesting_error(token: Token) -> LoxRuntimeError:
    return LoxRuntimeError(token, TOO_DEEPLY_NESTED, code="R003")
