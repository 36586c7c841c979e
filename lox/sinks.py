"""
Token sinks: consumers of a scanned token stream.

A sink receives every token exactly once, in order, EOF included.
"""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from .lexer.tokens import Token


class TokenSink(ABC):
    """Anything that can receive tokens."""

    @abstractmethod
    def receive(self, token: Token):
        pass


class ConsoleSink(TokenSink):
    """Prints each token on its own line."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def receive(self, token: Token):
        print(str(token), file=self.stream or sys.stdout)


class CountingSink(TokenSink):
    """Counts tokens without printing them."""

    def __init__(self):
        self.count = 0
        self.last: Optional[Token] = None

    def receive(self, token: Token):
        self.count += 1
        self.last = token
