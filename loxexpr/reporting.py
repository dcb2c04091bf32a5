"""
Error reporting channel shared by the lexer, parser and interpreter.

Each session owns one ErrorReporter. The reporter records every
diagnostic, remembers whether a static or runtime error happened and
writes the Lox-style message to a text stream.

Author: xwest
"""

import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO, TYPE_CHECKING

from .lexer.tokens import Token, TokenType

if TYPE_CHECKING:
    from .interpreter.errors import LoxRuntimeError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Report:
    """One message that went through the channel."""
    line: int
    message: str
    where: str = ""
    runtime: bool = False

    def format(self) -> str:
        if self.runtime:
            return f"{self.message}\n[line {self.line}]"
        return f"[line {self.line}] Error{self.where}: {self.message}"


class ErrorReporter:
    """
    Sink for syntax and runtime errors.

    ``had_error`` is set by lexer and parser errors, ``had_runtime_error``
    by evaluation failures. Callers reset the reporter between
    independent sessions.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.reports: List[Report] = []
        self.had_error = False
        self.had_runtime_error = False

    def reset(self):
        """Clear both flags and the recorded reports."""
        self.reports.clear()
        self.had_error = False
        self.had_runtime_error = False

    def error(self, line: int, message: str):
        self._report(Report(line, message))

    def token_error(self, token: Token, message: str):
        if token.type == TokenType.EOF:
            where = " at end"
        else:
            where = f" at '{token.lexeme}'"
        self._report(Report(token.line, message, where))

    def runtime_error(self, error: "LoxRuntimeError"):
        self.had_runtime_error = True
        self._emit(Report(error.line, error.message, runtime=True))

    @property
    def messages(self) -> List[str]:
        return [report.format() for report in self.reports]

    def _report(self, report: Report):
        self.had_error = True
        self._emit(report)

    def _emit(self, report: Report):
        self.reports.append(report)
        text = report.format()
        logger.debug("Reported: %s", text)
        if self.stream is not None:
            print(text, file=self.stream)


def stderr_reporter() -> ErrorReporter:
    """Reporter that prints to standard error, as the command line uses."""
    return ErrorReporter(stream=sys.stderr)
