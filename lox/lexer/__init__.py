"""
Lox Lexer Package

Implements the scanner that turns Lox source text into tokens.

Key Features:
- Single pass with one or two characters of lookahead
- Line tracking for diagnostics
- Error recovery: bad characters and unterminated strings are reported and skipped
- Tagged literal values for STRING and NUMBER tokens

Author: xwest
"""

from .tokens import Token, TokenType, Literal, LiteralKind, NO_LITERAL, KEYWORDS
from .scanner import Scanner, ScanResult, scan_string, scan_file
from .errors import Diagnostic, ErrorReporter, LexerError, LogLevel

__all__ = [
    "Scanner",
    "ScanResult",
    "Token",
    "TokenType",
    "Literal",
    "LiteralKind",
    "NO_LITERAL",
    "KEYWORDS",
    "Diagnostic",
    "ErrorReporter",
    "LexerError",
    "LogLevel",
    "scan_string",
    "scan_file",
]
