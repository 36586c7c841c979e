"""
Runs a scan and forwards the resulting tokens to a sink.
"""

from typing import Optional

from .lexer.scanner import Scanner, ScanResult
from .lexer.errors import ErrorReporter
from .sinks import TokenSink, ConsoleSink


class Lox:
    """
    Drives one scan from source to sink.

    The returned ScanResult carries the diagnostics of this run only, so a
    caller running several sources (the prompt) never has state to reset.
    """

    def __init__(self, scanner: Scanner, sink: Optional[TokenSink] = None):
        self.scanner = scanner
        self.sink = sink if sink is not None else ConsoleSink()

    def run(self) -> ScanResult:
        """Scan the source and hand every token to the sink."""
        result = self.scanner.scan()

        for token in result.tokens:
            self.sink.receive(token)

        return result


def run_source(
    source: str,
    sink: Optional[TokenSink] = None,
    reporter: Optional[ErrorReporter] = None
) -> ScanResult:
    """
    Scan ``source`` with a fresh scanner and feed ``sink``.

    Args:
        source: Source code string
        sink: Token consumer (prints to stdout if omitted)
        reporter: Error reporter (silent if omitted)

    Returns:
        The outcome of the scan
    """
    return Lox(Scanner(source, reporter), sink).run()
