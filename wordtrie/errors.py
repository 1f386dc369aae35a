"""Exceptions raised by wordtrie."""

from __future__ import annotations


class TrieError(Exception):
    """Base class for wordtrie errors."""


class EmptyInputError(TrieError, ValueError):
    """A word or prefix of length zero was passed to a trie operation."""

    def __init__(self, operation: str, argument: str = "word"):
        self.operation = operation
        super().__init__(f"{operation}() requires a non-empty {argument}")
