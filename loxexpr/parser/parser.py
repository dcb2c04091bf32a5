"""
Lox Expression Parser

Recursive descent parser for Lox expressions, one method per precedence
tier, loosest first:

    expression → comma
    comma      → ternary ( "," ternary )*
    ternary    → equality ( "?" expression ":" ternary )?
    equality   → comparison ( ( "!=" | "==" ) comparison )*
    comparison → term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term       → factor ( ( "-" | "+" ) factor )*
    factor     → unary ( ( "/" | "*" ) unary )*
    unary      → ( "!" | "-" ) unary | primary
    primary    → NUMBER | STRING | "true" | "false" | "nil"
               | "(" expression ")"

Syntax errors are recorded, not raised. A binary operator with no left
operand is reported and parsing simply carries on with its right operand.
Any other error puts the parser in panic mode (later errors are dropped)
until parse() resynchronizes and starts over on the next plausible
expression.

Author: xwest
"""

import logging
from typing import List, Optional, Callable, TYPE_CHECKING

from ..lexer.tokens import Token, TokenType
from .ast_nodes import Expr, Literal, Grouping, Unary, Binary, Ternary
from .errors import (
    ParseError, SyntaxErrorRecovery, create_expect_expression_error,
    create_missing_token_error, create_missing_operand_error, create_nesting_error
)

if TYPE_CHECKING:
    from ..reporting import ErrorReporter


logger = logging.getLogger(__name__)


EQUALITY_OPERATORS = (TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)
COMPARISON_OPERATORS = (
    TokenType.GREATER, TokenType.GREATER_EQUAL,
    TokenType.LESS, TokenType.LESS_EQUAL,
)
TERM_OPERATORS = (TokenType.MINUS, TokenType.PLUS)
FACTOR_OPERATORS = (TokenType.SLASH, TokenType.STAR)
UNARY_OPERATORS = (TokenType.BANG, TokenType.MINUS)


class Parser:
    """
    Lox expression parser.

    Turns a token list (ending in EOF) into a single expression tree.
    Every error is kept in ``errors`` and forwarded to the reporter.
    """

    def __init__(self, tokens: List[Token], reporter: Optional["ErrorReporter"] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer, terminated by EOF
            reporter: Error channel that receives each syntax error
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("Token list must end with an EOF token")

        self.tokens = tokens
        self.reporter = reporter
        self.current = 0
        self.errors: List[ParseError] = []

        self._panicking = False
        self._error_pos = 0

        # Binary operators that are caught in operand position, mapped to
        # the tier that parses their right-hand side
        self._missing_operand_parsers: List[tuple] = [
            (EQUALITY_OPERATORS, self._equality),
            (COMPARISON_OPERATORS, self._comparison),
            ((TokenType.PLUS,), self._term),
            (FACTOR_OPERATORS, self._factor),
        ]

    def parse(self, require_end: bool = False) -> Optional[Expr]:
        """
        Parse one expression.

        Args:
            require_end: Report tokens left over after the expression
                as a syntax error

        Returns:
            The expression tree, or None if any syntax error was recorded.
            Input nested too deeply for the Python stack is reported as
            "Expression too deeply nested." rather than raised.
        """
        try:
            expr = self._parse_once(require_end)

            while self._panicking:
                self._synchronize()
                if self._is_at_end():
                    break
                self._panicking = False
                logger.debug("Resuming parse at %s", self._peek())
                self._parse_once(require_end)
        except RecursionError:
            self._panicking = False
            self._error(create_nesting_error(self._peek()))
            return None

        if self.errors:
            return None
        return expr

    def at_end(self) -> bool:
        """True when every token up to EOF has been consumed."""
        return self._is_at_end()

    def _parse_once(self, require_end: bool) -> Expr:
        expr = self._expression()
        if require_end and not self._panicking and not self._is_at_end():
            self._error(create_missing_token_error(self._peek(), "Expect end of expression."))
        return expr

    # Precedence tiers, loosest first

    def _expression(self) -> Expr:
        return self._comma()

    def _comma(self) -> Expr:
        return self._left_associative(self._ternary, (TokenType.COMMA,))

    def _ternary(self) -> Expr:
        expr = self._equality()

        if self._match(TokenType.QUESTION):
            # Any expression, commas included, may sit between ? and :
            then_branch = self._expression()
            self._consume(TokenType.COLON, "Expect ':' after then branch of conditional expression.")
            else_branch = self._ternary()
            expr = Ternary(expr, then_branch, else_branch)

        return expr

    def _equality(self) -> Expr:
        return self._left_associative(self._comparison, EQUALITY_OPERATORS)

    def _comparison(self) -> Expr:
        return self._left_associative(self._term, COMPARISON_OPERATORS)

    def _term(self) -> Expr:
        return self._left_associative(self._factor, TERM_OPERATORS)

    def _factor(self) -> Expr:
        return self._left_associative(self._unary, FACTOR_OPERATORS)

    def _left_associative(self, operand: Callable[[], Expr], operators: tuple) -> Expr:
        """Fold ``operand (op operand)*`` into a left-leaning Binary chain."""
        expr = operand()

        while self._match(*operators):
            operator = self._previous()
            right = operand()
            expr = Binary(expr, operator, right)

        return expr

    def _unary(self) -> Expr:
        if self._match(*UNARY_OPERATORS):
            operator = self._previous()
            right = self._unary()
            return Unary(operator, right)

        return self._primary()

    def _primary(self) -> Expr:
        if self._match(TokenType.FALSE):
            return Literal(False)
        if self._match(TokenType.TRUE):
            return Literal(True)
        if self._match(TokenType.NIL):
            return Literal(None)

        if self._match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self._previous().literal)

        if self._match(TokenType.LEFT_PAREN):
            expr = self._expression()
            self._consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        for operators, operand in self._missing_operand_parsers:
            if self._check(*operators):
                return self._missing_left_operand(operand)

        self._error(create_expect_expression_error(self._peek()))
        # Placeholder keeps the tree well-formed; parse() discards it
        return Literal(None)

    def _missing_left_operand(self, operand: Callable[[], Expr]) -> Expr:
        """Report a binary operator with no left operand, then parse its right side."""
        self._error(create_missing_operand_error(self._peek()), panic=False)
        self._advance()
        return operand()

    # Error handling

    def _error(self, error: ParseError, panic: bool = True):
        if self._panicking:
            logger.debug("Suppressed follow-on error: %s", error)
            return

        if panic:
            self._panicking = True
            self._error_pos = self.current
        self.errors.append(error)
        if self.reporter is not None:
            self.reporter.token_error(error.token, error.message)

    def _synchronize(self):
        """Move past the offending token, then on to the next expression start."""
        if self.current <= self._error_pos:
            self.current = min(self._error_pos + 1, len(self.tokens) - 1)
        self.current = SyntaxErrorRecovery.synchronize_to_expression_start(
            self.tokens, self.current
        )
        logger.debug("Synchronized to token %d", self.current)

    # Utility methods

    def _match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it has one of the given types."""
        if self._check(*token_types):
            self._advance()
            return True
        return False

    def _check(self, *token_types: TokenType) -> bool:
        """Check if current token has one of the given types without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type in token_types

    def _advance(self) -> Token:
        """Consume and return current token."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        return self.tokens[self.current]

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]

    def _consume(self, token_type: TokenType, message: str) -> Optional[Token]:
        """Consume token of expected type, or record an error and return None."""
        if self._check(token_type):
            return self._advance()

        self._error(create_missing_token_error(self._peek(), message))
        return None


def parse_string(source: str, filename: str = "<string>") -> Expr:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        Expression AST

    Raises:
        LexerError: If scanning fails
        ParseError: If parsing fails
    """
    from ..lexer import tokenize_string

    tokens = tokenize_string(source, filename)
    parser = Parser(tokens)
    expr = parser.parse()
    if expr is None:
        raise parser.errors[0]
    return expr
