"""
Error handling for the Lox scanner.

Lexical errors are values: the scanner builds a Diagnostic for each problem,
hands it to an ErrorReporter and keeps scanning. LexerError exists only for
callers that want a failed scan to raise.

Author: xwest
"""

import sys
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import List, Optional, TextIO


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string",
}


@dataclass(frozen=True)
class Diagnostic:
    """A single lexical error keyed by source line."""
    line: int
    message: str
    code: Optional[str] = None

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


class LexerError(Exception):
    """
    Exception raised when a caller asks for a scan that must succeed.

    Wraps the first diagnostic of the failed scan.
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def line(self) -> int:
        return self.diagnostic.line

    def __str__(self) -> str:
        return str(self.diagnostic)


class LogLevel(IntEnum):
    '''Enumerates the different possible reporter log levels.'''

    SILENT = auto()
    ERROR = auto()


class ErrorReporter:
    """
    Centralized error reporting for a run of the scanner.

    Records every reported diagnostic and, unless silent, writes it to the
    output stream as soon as it is reported.
    """

    def __init__(self, log_level: LogLevel = LogLevel.ERROR, stream: Optional[TextIO] = None):
        """
        Args:
            log_level: SILENT records without printing, ERROR also prints
            stream: Where diagnostics are written (defaults to sys.stderr)
        """
        self.log_level = log_level
        self.stream = stream
        self.diagnostics: List[Diagnostic] = []

    def report(self, line: int, message: str, code: Optional[str] = None) -> Diagnostic:
        """Record an error at ``line`` and return the resulting diagnostic."""
        diagnostic = Diagnostic(line, message, code)
        self.diagnostics.append(diagnostic)

        if self.log_level != LogLevel.SILENT:
            self._write(diagnostic)

        return diagnostic

    @property
    def had_error(self) -> bool:
        """Check if any error has been reported."""
        return len(self.diagnostics) > 0

    def clear(self):
        """Forget all reported diagnostics."""
        self.diagnostics.clear()

    def print_errors(self):
        """Write every recorded diagnostic to the output stream."""
        for diagnostic in self.diagnostics:
            self._write(diagnostic)

    def _write(self, diagnostic: Diagnostic):
        print(str(diagnostic), file=self.stream or sys.stderr)
