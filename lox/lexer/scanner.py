"""
Lox Scanner - turns source text into tokens

Single pass, left to right, with one character of lookahead (two when
deciding whether a '.' belongs to a number). Lexical errors are reported
and skipped, so a scan always finishes with an EOF token.

xwest
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .tokens import (
    Token, TokenType, Literal, NO_LITERAL, KEYWORDS, SINGLE_CHAR_TOKENS,
    ONE_OR_TWO_CHAR_TOKENS
)
from .errors import Diagnostic, ErrorReporter, LexerError, LogLevel


@dataclass
class ScanResult:
    """Outcome of one scan: the tokens plus the errors reported on the way."""
    tokens: List[Token]
    diagnostics: List[Diagnostic] = field(default_factory=list)
    line: int = 1

    def has_errors(self) -> bool:
        return len(self.diagnostics) > 0


class Scanner:
    """
    Lox lexical analyzer.

    Each instance scans exactly one source string. Errors are forwarded to
    the reporter and also kept in ``errors`` for this scan alone.
    """

    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete, already decoded source text
            reporter: Collaborator that surfaces errors (silent if omitted)
        """
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter(LogLevel.SILENT)
        self.tokens: List[Token] = []
        self.errors: List[Diagnostic] = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1
        self._scanned = False

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens ending with a single EOF token
        """
        if self._scanned:
            return self.tokens

        while not self._is_at_end():
            # We are at the beginning of the next lexeme
            self.start = self.current
            self.start_line = self.line
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", NO_LITERAL, self.line, len(self.source)))
        self._scanned = True
        return self.tokens

    def scan(self) -> ScanResult:
        """Scan the source and package tokens and errors together."""
        tokens = self.scan_tokens()
        return ScanResult(tokens, list(self.errors), self.line)

    def has_errors(self) -> bool:
        """Check if the scan reported any errors."""
        return len(self.errors) > 0

    def _scan_token(self):
        c = self._advance()

        token_type = SINGLE_CHAR_TOKENS.get(c)
        if token_type is not None:
            self._add_token(token_type)
            return

        if c in ONE_OR_TWO_CHAR_TOKENS:
            alone, with_equal = ONE_OR_TWO_CHAR_TOKENS[c]
            self._add_token(with_equal if self._match('=') else alone)
        elif c == '/':
            if self._match('/'):
                # A comment goes until the end of the line
                while self._peek() != '\n' and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif c in ' \r\t':
            pass
        elif c == '\n':
            self.line += 1
        elif c == '"':
            self._string()
        elif _is_digit(c):
            self._number()
        elif _is_alpha(c):
            self._identifier()
        else:
            self._error(f"Unexpected character: '{c}'.", "L001")

    def _string(self):
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == '\n':
                self.line += 1
            self._advance()

        if self._is_at_end():
            self._error("Unterminated string.", "L002")
            return

        self._advance()  # The closing quote

        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, Literal.text(value))

    def _number(self):
        while _is_digit(self._peek()):
            self._advance()

        # A fractional part needs at least one digit after the dot
        if self._peek() == '.' and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        lexeme = self.source[self.start:self.current]
        self._add_token(TokenType.NUMBER, Literal.number(float(lexeme)))

    def _identifier(self):
        while _is_alpha_numeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _add_token(self, token_type: TokenType, literal: Literal = NO_LITERAL):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.start_line, self.start))

    def _error(self, message: str, code: str):
        self.errors.append(self.reporter.report(self.line, message, code))

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._is_at_end():
            return False
        if self.source[self.current] != expected:
            return False

        self.current += 1
        return True

    def _advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        return c

    def _peek(self) -> str:
        if self._is_at_end():
            return '\0'
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)


# str.isdigit/isalpha accept non-ASCII characters, Lox does not

def _is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def _is_alpha(c: str) -> bool:
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z' or c == '_'


def _is_alpha_numeric(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c)


def scan_string(source: str) -> List[Token]:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string

    Returns:
        List of tokens

    Raises:
        LexerError: If the scan reported any error
    """
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()

    if scanner.has_errors():
        # Raise the first error encountered
        raise LexerError(scanner.errors[0])

    return tokens


def scan_file(filepath: str) -> List[Token]:
    """
    Convenience function to scan a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If the scan reported any error
        OSError: If file cannot be read
    """
    # newline='' keeps \r characters as written
    with open(filepath, 'r', encoding='utf-8', newline='') as f:
        source = f.read()

    return scan_string(source)
