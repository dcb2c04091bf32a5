"""
Token definitions for the Lox expression lexer.

This module defines every token type the lexer can produce:
- Single-character punctuation, including the ternary's '?' and ':'
- One- and two-character operators
- Literals (numbers, strings) and identifiers
- Reserved keywords

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *
    QUESTION = auto()               # ? (conditional)
    COLON = auto()                  # : (conditional)

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()                    # End of input


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting.
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


DEFAULT_LOCATION = SourceLocation("<string>", 1, 1)


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Contains the token type, lexeme (raw text), literal value and
    source location for error reporting.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: Any = None             # float for NUMBER, str for STRING
    location: SourceLocation = DEFAULT_LOCATION

    @property
    def line(self) -> int:
        return self.location.line

    def __str__(self) -> str:
        if self.literal is not None:
            return f"{self.type.name}({self.lexeme!r} -> {self.literal!r})"
        return f"{self.type.name}({self.lexeme!r})"


KEYWORDS = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

# Longest match wins; the lexer tries two-character operators first
OPERATORS = {
    "!=": TokenType.BANG_EQUAL,
    "==": TokenType.EQUAL_EQUAL,
    "<=": TokenType.LESS_EQUAL,
    ">=": TokenType.GREATER_EQUAL,

    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "/": TokenType.SLASH,
    "*": TokenType.STAR,
    "?": TokenType.QUESTION,
    ":": TokenType.COLON,
    "!": TokenType.BANG,
    "=": TokenType.EQUAL,
    ">": TokenType.GREATER,
    "<": TokenType.LESS,
}


def make_token(token_type: TokenType, lexeme: str, literal: Any = None, line: int = 1) -> Token:
    """Build a token by hand, for callers that construct trees without the lexer."""
    return Token(token_type, lexeme, literal, SourceLocation("<string>", line, 1))
