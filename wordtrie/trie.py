"""Prefix trie for word lookups and prefix expansion."""

from __future__ import annotations

from typing import Iterable

from wordtrie.errors import EmptyInputError


class Node:
    """Single node in the prefix trie."""

    __slots__ = ("letter", "terminal", "children")

    def __init__(self, letter: str):
        self.letter = letter
        self.terminal: bool = False
        self.children: dict[str, Node] = {}

    def __repr__(self) -> str:
        end = "*" if self.terminal else ""
        return f"Node({self.letter!r}{end}, {len(self.children)} children)"


class Trie:
    """Prefix trie supporting insertion, membership and prefix expansion.

    The top level is a mapping of first characters rather than a single
    sentinel node, so the empty string has no node and is rejected by
    every operation with :class:`EmptyInputError`.
    """

    def __init__(self):
        self.root: dict[str, Node] = {}
        self._size = 0

    # mutation

    def add(self, word: str) -> None:
        """Store *word*.  Adding a word twice is a no-op."""
        if not word:
            raise EmptyInputError("add")

        level = self.root
        node = None
        for ch in word:
            node = level.get(ch)
            if node is None:
                node = Node(ch)
                level[ch] = node
            level = node.children

        if not node.terminal:
            self._size += 1
        node.terminal = True

    def update(self, words: Iterable[str]) -> int:
        """Add every word in *words*; returns how many were processed."""
        n = 0
        for word in words:
            self.add(word)
            n += 1
        return n

    # queries

    def contains(self, word: str) -> bool:
        """True if *word* was added as a complete word."""
        if not word:
            raise EmptyInputError("contains")
        node = self._walk(word)
        return node is not None and node.terminal

    def is_prefix(self, prefix: str) -> bool:
        """True if some stored word starts with *prefix*."""
        if not prefix:
            raise EmptyInputError("is_prefix", "prefix")
        return self._walk(prefix) is not None

    def get(self, prefix: str) -> list[str]:
        """All stored words starting with *prefix*, in lexicographic order.

        The prefix part of each result is spelled from the letters held in
        the trie, not from the argument.
        """
        if not prefix:
            raise EmptyInputError("get", "prefix")

        path: list[str] = []
        level = self.root
        node = None
        for ch in prefix:
            node = level.get(ch)
            if node is None:
                return []
            path.append(node.letter)
            level = node.children

        words: list[str] = []
        self._collect(node, path, words)
        return words

    def _walk(self, s: str) -> Node | None:
        level = self.root
        node = None
        for ch in s:
            node = level.get(ch)
            if node is None:
                return None
            level = node.children
        return node

    def _collect(self, start: Node, path: list[str], words: list[str]) -> None:
        # path ends with start.letter; each entry records the path length
        # once its node's letter is appended.
        stack = [(start, len(path))]
        while stack:
            node, depth = stack.pop()
            del path[depth - 1:]
            path.append(node.letter)
            if node.terminal:
                words.append("".join(path))
            for ch in sorted(node.children, reverse=True):
                stack.append((node.children[ch], depth + 1))

    # dunder

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        return self.contains(word)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"Trie(size={self._size})"
