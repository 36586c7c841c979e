"""
Tests for the token model: TokenType, Literal and Token.

Author: xwest
"""

import dataclasses
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer.tokens import (
    Token, TokenType, Literal, LiteralKind, NO_LITERAL, KEYWORDS,
    SINGLE_CHAR_TOKENS, ONE_OR_TWO_CHAR_TOKENS
)


class TestLiteral(unittest.TestCase):
    """Test cases for literal values."""

    def test_none_literal(self):
        self.assertIs(Literal.none(), NO_LITERAL)
        self.assertEqual(NO_LITERAL.kind, LiteralKind.NONE)
        self.assertIsNone(NO_LITERAL.value)
        self.assertTrue(NO_LITERAL.is_none)
        self.assertEqual(str(NO_LITERAL), "null")

    def test_text_literal(self):
        literal = Literal.text("abc")

        self.assertEqual(literal.kind, LiteralKind.TEXT)
        self.assertEqual(literal.value, "abc")
        self.assertFalse(literal.is_none)
        self.assertEqual(str(literal), "abc")

    def test_number_literal(self):
        """Numbers are always stored as floats."""
        literal = Literal.number(42)

        self.assertEqual(literal.kind, LiteralKind.NUMBER)
        self.assertIsInstance(literal.value, float)
        self.assertEqual(str(literal), "42.0")
        self.assertEqual(str(Literal.number(3.25)), "3.25")

    def test_structural_equality(self):
        self.assertEqual(Literal.text("a"), Literal.text("a"))
        self.assertNotEqual(Literal.text("1"), Literal.number(1))

    def test_repr(self):
        self.assertEqual(repr(Literal.text("a")), "Literal.text('a')")
        self.assertEqual(repr(Literal.number(2)), "Literal.number(2.0)")
        self.assertEqual(repr(NO_LITERAL), "Literal.none()")


class TestToken(unittest.TestCase):
    """Test cases for tokens."""

    def test_str_rendering(self):
        """str() combines type, lexeme and literal."""
        number = Token(TokenType.NUMBER, "3.25", Literal.number(3.25), 1)
        string = Token(TokenType.STRING, '"hi"', Literal.text("hi"), 2)
        name = Token(TokenType.IDENTIFIER, "foo", NO_LITERAL, 1)
        eof = Token(TokenType.EOF, "", NO_LITERAL, 3)

        self.assertEqual(str(number), "NUMBER 3.25 3.25")
        self.assertEqual(str(string), 'STRING "hi" hi')
        self.assertEqual(str(name), "IDENTIFIER foo null")
        self.assertEqual(str(eof), "EOF  null")

    def test_defaults(self):
        token = Token(TokenType.DOT, ".")

        self.assertIs(token.literal, NO_LITERAL)
        self.assertEqual(token.line, 1)
        self.assertEqual(token.offset, 0)

    def test_tokens_are_immutable(self):
        token = Token(TokenType.DOT, ".", NO_LITERAL, 1)

        with self.assertRaises(dataclasses.FrozenInstanceError):
            token.line = 2

    def test_structural_equality_and_hash(self):
        a = Token(TokenType.IDENTIFIER, "x", NO_LITERAL, 4, 10)
        b = Token(TokenType.IDENTIFIER, "x", NO_LITERAL, 4, 10)

        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertNotEqual(a, Token(TokenType.IDENTIFIER, "x", NO_LITERAL, 5, 10))

    def test_end(self):
        token = Token(TokenType.STRING, '"abc"', Literal.text("abc"), 1, 7)

        self.assertEqual(token.end, 12)

    def test_predicates(self):
        """Category helpers agree with the lookup tables."""
        self.assertTrue(Token(TokenType.STRING, '""', Literal.text("")).is_literal)
        self.assertTrue(Token(TokenType.NIL, "nil").is_literal)
        self.assertFalse(Token(TokenType.IDENTIFIER, "x").is_literal)

        self.assertTrue(Token(TokenType.WHILE, "while").is_keyword)
        self.assertFalse(Token(TokenType.IDENTIFIER, "whilst").is_keyword)

        self.assertTrue(Token(TokenType.BANG_EQUAL, "!=").is_operator)
        self.assertFalse(Token(TokenType.SEMICOLON, ";").is_operator)

        self.assertTrue(Token(TokenType.IDENTIFIER, "x").is_identifier)
        self.assertFalse(Token(TokenType.THIS, "this").is_identifier)


class TestLookupTables(unittest.TestCase):
    """Test cases for the scanner's lookup tables."""

    def test_keyword_table(self):
        words = "and or class if else true false nil print return super this var for while"

        self.assertEqual(sorted(KEYWORDS), sorted(words.split()))
        for word, token_type in KEYWORDS.items():
            self.assertEqual(token_type.name, word.upper())

    def test_keyword_table_is_read_only(self):
        with self.assertRaises(TypeError):
            KEYWORDS["fun"] = TokenType.IDENTIFIER

    def test_operator_tables_are_disjoint(self):
        self.assertFalse(set(SINGLE_CHAR_TOKENS) & set(ONE_OR_TWO_CHAR_TOKENS))
        self.assertNotIn("/", SINGLE_CHAR_TOKENS)


if __name__ == '__main__':
    unittest.main()
