"""
Lox Lexer Package

Implements the lexical analyzer (tokenizer) that feeds the expression parser.

Key Features:
- Full Lox token set, including '?' and ':' for the conditional operator
- Number literals as double-precision floats
- Error recovery: bad characters are reported and skipped
- Source location tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, make_token
from .lexer import Lexer, tokenize_string
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerError",
    "make_token",
    "tokenize_string",
]
