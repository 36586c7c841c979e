#!/usr/bin/env python3
"""
Lox command line interface.

With a script path, scans the file and prints its tokens. Without one,
starts an interactive prompt that scans each line as it is entered.
"""

import sys
import argparse
from typing import List, Optional

from . import __version__
from .lexer.errors import ErrorReporter, LogLevel
from .runner import run_source
from .sinks import ConsoleSink, CountingSink, TokenSink

# sysexits.h status codes
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66


class _ArgumentParser(argparse.ArgumentParser):
    """Exits with EX_USAGE instead of argparse's default status 2."""

    def error(self, message):
        self.print_usage(sys.stderr)
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        sys.exit(EX_USAGE)


def _make_sink(count: bool) -> TokenSink:
    return CountingSink() if count else ConsoleSink()


def _print_count(sink: CountingSink, lines: int):
    print(f"{sink.count} tokens, {lines} lines")


def run_file(path: str, count: bool = False) -> int:
    """Scan a source file and return the process exit status."""
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            source = f.read()
    except OSError as e:
        print(f"Error reading file '{path}': {e}", file=sys.stderr)
        return EX_NOINPUT
    except UnicodeDecodeError as e:
        print(f"Error decoding file '{path}': {e}", file=sys.stderr)
        return EX_DATAERR

    sink = _make_sink(count)
    result = run_source(source, sink, ErrorReporter(LogLevel.ERROR))

    if count:
        _print_count(sink, result.line)

    return EX_DATAERR if result.has_errors() else 0


def run_prompt(count: bool = False) -> int:
    """Scan lines from stdin until EOF; errors never end the session."""
    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        sink = _make_sink(count)
        result = run_source(line, sink, ErrorReporter(LogLevel.ERROR))

        if count:
            _print_count(sink, result.line)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the Lox CLI."""
    parser = _ArgumentParser(
        prog="lox",
        description="Lox scanner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                    # Start the prompt
  %(prog)s script.lox         # Print the tokens of a file
  %(prog)s --count script.lox # Print only the token and line counts
        """
    )

    parser.add_argument(
        'script',
        nargs='?',
        help='Lox source file to scan'
    )

    parser.add_argument(
        '--count',
        action='store_true',
        help='Print token and line counts instead of the tokens'
    )

    parser.add_argument(
        '-v', '--version',
        action='version',
        version=f"lox {__version__}"
    )

    args = parser.parse_args(argv)

    if args.script:
        return run_file(args.script, args.count)

    return run_prompt(args.count)


if __name__ == '__main__':
    sys.exit(main())
