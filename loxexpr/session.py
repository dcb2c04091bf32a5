"""
One-call pipelines from source text to a tree or a value.

A Session bundles an ErrorReporter with the lexer, parser and interpreter.
Results come back with their errors attached, so callers never have to
consult shared state to learn whether a run failed.

Author: xwest
"""

import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import List, Optional

from .reporting import ErrorReporter
from .lexer import Lexer, LexerError
from .parser import Expr, Parser, ParseError
from .interpreter import Interpreter, LoxRuntimeError, Value, stringify


logger = logging.getLogger(__name__)

# Python frames allowed while parsing and evaluating. One level of
# parenthesized nesting costs the parser about fourteen frames.
RECURSION_LIMIT = 10000


@contextmanager
def recursion_limit(limit: int = RECURSION_LIMIT):
    """Raise Python's recursion limit to at least ``limit`` inside the block."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous, limit))
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


@dataclass
class ParseResult:
    """Outcome of scanning and parsing one source string."""
    expression: Optional[Expr]
    lexer_errors: List[LexerError] = field(default_factory=list)
    parse_errors: List[ParseError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.expression is not None and not self.lexer_errors and not self.parse_errors

    @property
    def errors(self) -> List[Exception]:
        return list(self.lexer_errors) + list(self.parse_errors)


@dataclass
class EvaluationResult:
    """Outcome of running one source string through the whole pipeline."""
    parse: ParseResult
    value: Value = None
    runtime_error: Optional[LoxRuntimeError] = None

    @property
    def ok(self) -> bool:
        return self.parse.ok and self.runtime_error is None

    def display(self) -> str:
        """The value as Lox prints it. Only meaningful when ``ok``."""
        return stringify(self.value)


class Session:
    """
    Runs source text through lexer, parser and interpreter.

    The reporter is reset at the start of each call, so every call is an
    independent session.
    """

    def __init__(self, reporter: Optional[ErrorReporter] = None, filename: str = "<string>",
                 require_end: bool = True):
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.filename = filename
        self.require_end = require_end
        self.interpreter = Interpreter()

    def parse(self, source: str) -> ParseResult:
        self.reporter.reset()
        with recursion_limit():
            return self._parse(source)

    def evaluate(self, source: str) -> EvaluationResult:
        self.reporter.reset()
        with recursion_limit():
            parsed = self._parse(source)
            if not parsed.ok:
                return EvaluationResult(parsed)

            try:
                value = self.interpreter.evaluate(parsed.expression)
            except LoxRuntimeError as error:
                self.reporter.runtime_error(error)
                return EvaluationResult(parsed, runtime_error=error)

        return EvaluationResult(parsed, value)

    def _parse(self, source: str) -> ParseResult:
        lexer = Lexer(source, self.filename, reporter=self.reporter)
        tokens = lexer.tokenize()

        parser = Parser(tokens, reporter=self.reporter)
        expression = parser.parse(require_end=self.require_end)
        if lexer.errors:
            # Tokens around a bad character are unreliable
            expression = None

        logger.debug("Parsed %r: %d lexer errors, %d syntax errors",
                     source, len(lexer.errors), len(parser.errors))
        return ParseResult(expression, list(lexer.errors), list(parser.errors))


def parse_source(source: str) -> ParseResult:
    """Parse a source string in a fresh session."""
    return Session().parse(source)


def evaluate_string(source: str) -> EvaluationResult:
    """Evaluate a source string in a fresh session."""
    return Session().evaluate(source)
