"""
Lox Lexer - turns source text into a token list for the parser.

Scans the whole Lox token set even though the parser only consumes
expression tokens, so keywords like `var` reach the parser as keywords
and are rejected there with a proper syntax error.

xwest
"""

import logging
import re
from typing import List, Optional, TYPE_CHECKING

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, OPERATORS
from .errors import (
    LexerError, create_unexpected_character_error, create_unterminated_string_error
)

if TYPE_CHECKING:
    from ..reporting import ErrorReporter


logger = logging.getLogger(__name__)


class Lexer:
    """
    Lox lexical analyzer.

    Converts source code text into a list of tokens terminated by EOF.
    Bad characters are reported and skipped so a single pass collects
    every lexical error.
    """

    def __init__(self, source: str, filename: str = "<string>",
                 reporter: Optional["ErrorReporter"] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
            reporter: Error channel that receives each lexical error
        """
        self.source = source
        self.filename = filename
        self.reporter = reporter
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

        self._compile_patterns()

    def _compile_patterns(self):
        """Compile regex patterns used by the lexer."""
        self.number_pattern = re.compile(r'\d+(?:\.\d+)?')
        self.identifier_pattern = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens including EOF token
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens.clear()
        self.errors.clear()

        while self.pos < len(self.source):
            try:
                self._skip_whitespace_and_comments()

                if self.pos >= len(self.source):
                    break

                self.tokens.append(self._next_token())

            except LexerError as e:
                self._record(e)

        self.tokens.append(Token(TokenType.EOF, "", None, self._location()))
        logger.debug("Scanned %d tokens from %s", len(self.tokens), self.filename)

        return self.tokens

    def _record(self, error: LexerError):
        self.errors.append(error)
        if self.reporter is not None:
            self.reporter.error(error.line, error.message)

    def _next_token(self) -> Token:
        """Get the next token from the source."""
        location = self._location()
        current_char = self.source[self.pos]

        if current_char.isdigit():
            return self._tokenize_number(location)

        if current_char.isalpha() or current_char == '_':
            return self._tokenize_identifier_or_keyword(location)

        if current_char == '"':
            return self._tokenize_string(location)

        # Operators and punctuation (two-character first)
        for op_len in (2, 1):
            potential_op = self.source[self.pos:self.pos + op_len]
            if len(potential_op) == op_len and potential_op in OPERATORS:
                self._advance_by(op_len)
                return Token(OPERATORS[potential_op], potential_op, None, location)

        # Skip the offending character before raising so scanning moves on
        self._advance()
        raise create_unexpected_character_error(current_char, location)

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Tokenize a number literal; every Lox number is a float."""
        match = self.number_pattern.match(self.source, self.pos)
        lexeme = match.group(0)
        self._advance_by(len(lexeme))
        return Token(TokenType.NUMBER, lexeme, float(lexeme), location)

    def _tokenize_identifier_or_keyword(self, location: SourceLocation) -> Token:
        match = self.identifier_pattern.match(self.source, self.pos)
        if match is None:
            # Non-ASCII letter: consume it and report, Lox identifiers are ASCII
            char = self.source[self.pos]
            self._advance()
            raise create_unexpected_character_error(char, location)

        lexeme = match.group(0)
        self._advance_by(len(lexeme))
        return Token(KEYWORDS.get(lexeme, TokenType.IDENTIFIER), lexeme, None, location)

    def _tokenize_string(self, location: SourceLocation) -> Token:
        """Tokenize a string literal. Strings may span lines and have no escapes."""
        start_pos = self.pos
        self._advance()  # Skip opening quote

        while self.pos < len(self.source) and self.source[self.pos] != '"':
            self._advance()

        if self.pos >= len(self.source):
            raise create_unterminated_string_error(location)

        self._advance()  # Skip closing quote

        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.STRING, lexeme, lexeme[1:-1], location)

    def _skip_whitespace_and_comments(self):
        """Skip whitespace and // line comments."""
        while self.pos < len(self.source):
            if self.source[self.pos].isspace():
                self._advance()
                continue

            if self.source.startswith('//', self.pos):
                while self.pos < len(self.source) and self.source[self.pos] != '\n':
                    self._advance()
                continue

            break

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        raise lexer.errors[0]

    return tokens
