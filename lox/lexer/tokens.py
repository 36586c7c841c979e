"""
Token definitions for the Lox scanner.

This module defines everything the scanner emits:
- The closed set of token types (punctuation, operators, literals, keywords, EOF)
- Literal values carried by STRING and NUMBER tokens
- The Token record itself
- Lookup tables used by the scanner for fast recognition

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple, Union


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # name, _tmp, x1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.25

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    OR = auto()
    CLASS = auto()
    IF = auto()
    ELSE = auto()
    TRUE = auto()
    FALSE = auto()
    NIL = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    VAR = auto()
    FOR = auto()
    WHILE = auto()

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input


class LiteralKind(Enum):
    """Tag for the value carried by a Literal."""
    NONE = auto()
    TEXT = auto()
    NUMBER = auto()


@dataclass(frozen=True)
class Literal:
    """
    Literal value attached to a token.

    STRING tokens carry TEXT, NUMBER tokens carry NUMBER and every other
    token carries NONE. Consumers should dispatch on ``kind``.
    """
    kind: LiteralKind
    value: Union[str, float, None] = None

    @classmethod
    def none(cls) -> "Literal":
        return NO_LITERAL

    @classmethod
    def text(cls, value: str) -> "Literal":
        return cls(LiteralKind.TEXT, value)

    @classmethod
    def number(cls, value: float) -> "Literal":
        return cls(LiteralKind.NUMBER, float(value))

    @property
    def is_none(self) -> bool:
        return self.kind is LiteralKind.NONE

    def __str__(self) -> str:
        if self.kind is LiteralKind.NONE:
            return "null"
        if self.kind is LiteralKind.NUMBER:
            return repr(self.value)
        return self.value

    def __repr__(self) -> str:
        if self.kind is LiteralKind.NONE:
            return "Literal.none()"
        return f"Literal.{self.kind.name.lower()}({self.value!r})"


NO_LITERAL = Literal(LiteralKind.NONE)


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Contains the token type, lexeme (raw text), literal value, the line the
    token starts on and the offset of its first character in the source.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: Literal = NO_LITERAL   # Literal value (STRING and NUMBER only)
    line: int = 1                   # 1-based source line
    offset: int = 0                 # Index of the lexeme in the source

    def __str__(self) -> str:
        return f"{self.type.name} {self.lexeme} {self.literal}"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, line={self.line})")

    @property
    def end(self) -> int:
        """Offset one past the last character of the lexeme."""
        return self.offset + len(self.lexeme)

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in {
            TokenType.STRING, TokenType.NUMBER,
            TokenType.TRUE, TokenType.FALSE, TokenType.NIL
        }

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type in OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER


# Lookup tables for efficient token recognition
# These are shared read-only by every scanner instance

# Reserved words
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "or": TokenType.OR,
    "class": TokenType.CLASS,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "nil": TokenType.NIL,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "var": TokenType.VAR,
    "for": TokenType.FOR,
    "while": TokenType.WHILE,
})

KEYWORD_TYPES = frozenset(KEYWORDS.values())

# Characters that always form a token on their own.
# '/' is absent: it may open a comment.
SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType({
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
})

# Characters that become a two-character operator when followed by '='.
# Maps to (type alone, type with '=').
ONE_OR_TWO_CHAR_TOKENS: Mapping[str, Tuple[TokenType, TokenType]] = MappingProxyType({
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
})

OPERATOR_TYPES = frozenset({
    TokenType.MINUS, TokenType.PLUS, TokenType.SLASH, TokenType.STAR,
    TokenType.BANG, TokenType.BANG_EQUAL,
    TokenType.EQUAL, TokenType.EQUAL_EQUAL,
    TokenType.GREATER, TokenType.GREATER_EQUAL,
    TokenType.LESS, TokenType.LESS_EQUAL,
})
