"""
Error handling for the Lox lexer.

Provides error reporting with source location information and the
Diagnostic record shared by the parser and interpreter error types.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base record for diagnostics (errors, warnings)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    @property
    def line(self) -> int:
        return self.location.line

    def __str__(self) -> str:
        result = f"{self.severity.upper()}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Error raised inside the lexer for a malformed lexeme.

    The lexer catches it, records it and keeps scanning.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
        )

    @property
    def line(self) -> int:
        return self.diagnostic.line

    def __str__(self) -> str:
        return str(self.diagnostic)


ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
}


def create_unexpected_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that starts no token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message="Unexpected character.",
        location=location,
        code="L001",
        help_text=help_text,
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for a string literal missing its closing quote."""
    return LexerError(
        message="Unterminated string.",
        location=location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
    )
