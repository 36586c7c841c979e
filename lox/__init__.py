"""
Lox Toolchain Package

The lexical front end of the Lox scripting language: source text goes in,
an ordered stream of classified tokens comes out.

Architecture:
    lox/
    ├── lexer/           # Tokens, scanner and error reporting
    ├── sinks.py         # Token consumers (console, counting)
    ├── runner.py        # Scan a source and feed a sink
    └── cli.py           # `lox` command-line driver

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@lox-lang.org"
__license__ = "MIT"

from .lexer import Scanner, ScanResult, Token, TokenType, ErrorReporter
from .sinks import TokenSink, ConsoleSink, CountingSink
from .runner import Lox, run_source

__all__ = [
    # Core classes
    "Scanner",
    "ScanResult",
    "Token",
    "TokenType",
    "ErrorReporter",
    "TokenSink",
    "ConsoleSink",
    "CountingSink",
    "Lox",
    "run_source",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
