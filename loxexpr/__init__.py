"""
loxexpr Package

Front end and evaluator for Lox expressions: a lexer, a recursive descent
parser with comma and conditional operators, and a tree-walking
interpreter.

Architecture:
    loxexpr/
    ├── lexer/           # Tokenization
    ├── parser/          # Expression trees, parsing, printing
    ├── interpreter/     # Runtime values and evaluation
    ├── reporting.py     # Error channel
    ├── session.py       # Source-to-value pipelines
    └── cli.py           # Command line

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType
from .parser import Parser, AstPrinter, RpnPrinter, SourcePrinter
from .interpreter import Interpreter, LoxRuntimeError, stringify
from .reporting import ErrorReporter
from .session import Session, ParseResult, EvaluationResult, parse_source, evaluate_string

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "Parser",
    "Interpreter",
    "ErrorReporter",
    "Session",

    # Printers
    "AstPrinter",
    "RpnPrinter",
    "SourcePrinter",

    # Results and errors
    "ParseResult",
    "EvaluationResult",
    "LoxRuntimeError",

    # Helpers
    "stringify",
    "parse_source",
    "evaluate_string",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
