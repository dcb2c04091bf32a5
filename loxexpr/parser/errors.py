"""
Error handling for the Lox expression parser.

Provides syntax error records with source location information and the
recovery helpers the parser uses to resynchronize after an error.

Author: xwest
"""

from typing import List, Optional

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    A syntax error found by the parser.

    The parser records these rather than raising them; ``parse_string``
    raises the first one for callers that want an exception.
    """

    def __init__(
        self,
        message: str,
        token: Token,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.token = token
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

    @property
    def where(self) -> str:
        if self.token.type == TokenType.EOF:
            return " at end"
        return f" at '{self.token.lexeme}'"

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"


class SyntaxErrorRecovery:
    """
    Utilities for error recovery in the parser.

    After an error the parser skips ahead to a token that can begin a new
    expression, so one malformed operand does not produce a cascade of
    follow-on errors.
    """

    # Token types that can start an expression
    EXPRESSION_STARTS = {
        TokenType.NUMBER,
        TokenType.STRING,
        TokenType.TRUE,
        TokenType.FALSE,
        TokenType.NIL,
        TokenType.LEFT_PAREN,
        TokenType.MINUS,
        TokenType.BANG,
    }

    @staticmethod
    def synchronize_to_expression_start(tokens: List[Token], current_pos: int) -> int:
        """
        Skip tokens until one that can start an expression, or EOF.

        Returns the position to resume parsing from.
        """
        while current_pos < len(tokens):
            token_type = tokens[current_pos].type
            if token_type == TokenType.EOF or token_type in SyntaxErrorRecovery.EXPRESSION_STARTS:
                return current_pos
            current_pos += 1

        return current_pos


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Expected expression",
    "P002": "Expected token not found",
    "P003": "Binary operator missing its left-hand operand",
    "P004": "Expression nested deeper than the parser can follow",
}


def create_expect_expression_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    return ParseError(
        message="Expect expression.",
        token=found,
        code="P001",
        help_text="Expressions start with a number, string, true, false, nil, '(', '-' or '!'.",
    )


def create_missing_token_error(found: Token, message: str) -> ParseError:
    """Create an error for a missing delimiter such as ')' or ':'."""
    return ParseError(message=message, token=found, code="P002")


def create_missing_operand_error(operator: Token) -> ParseError:
    """Create an error for a binary operator with nothing on its left."""
    return ParseError(
        message="Missing left-hand operand.",
        token=operator,
        code="P003",
        help_text=f"'{operator.lexeme}' is a binary operator and needs an operand on each side.",
    )


def create_nesting_error(found: Token) -> ParseError:
    """Create an error for input nested past Python's recursion limit."""
    return ParseError(message="Expression too deeply nested.", token=found, code="P004")
