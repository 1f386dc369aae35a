"""Word list loaded from a text file into a trie."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator

from wordtrie.trie import Trie

log = logging.getLogger("wordtrie")

# Tried in order after an explicit path.
SEARCH_PATHS: list[str] = [
    "words.txt",
    "1000_families.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]

MINIMAL_WORDS: frozenset[str] = frozenset({
    "a", "about", "after", "all", "also", "an", "and", "any", "are", "as",
    "at", "be", "because", "but", "by", "can", "car", "card", "care", "cart",
    "come", "could", "day", "do", "even", "find", "first", "for", "from",
    "get", "give", "go", "have", "he", "her", "here", "him", "his", "how",
    "i", "if", "in", "into", "it", "its", "just", "know", "like", "look",
    "make", "man", "many", "me", "more", "my", "new", "no", "not", "now",
    "of", "on", "one", "only", "or", "other", "our", "out", "people", "say",
    "see", "she", "so", "some", "take", "tell", "than", "that", "the",
    "their", "them", "then", "there", "these", "they", "thing", "think",
    "this", "those", "time", "to", "two", "up", "use", "very", "want",
    "way", "we", "well", "what", "when", "which", "who", "will", "with",
    "woman", "would", "year", "you", "your",
})


def read_words(lines: Iterable[str]) -> Iterator[str]:
    """Yield every whitespace-separated token of *lines*, lowercased."""
    for line in lines:
        for token in line.split():
            yield token.lower()


class WordList:
    """Trie filled from the first word-list file found on the search path."""

    def __init__(self, path: str | None = None, fallback: bool = True):
        self.trie = Trie()
        self.count = 0
        self.source: str | None = None
        self._load(path, fallback)

    def _load(self, path: str | None, fallback: bool) -> None:
        search_paths: list[str] = []
        if path:
            if not os.path.exists(path):
                log.warning("Word list %s not found -- searching default locations.", path)
            search_paths.append(path)
        search_paths.extend(SEARCH_PATHS)

        for candidate in search_paths:
            if not os.path.isfile(candidate):
                continue
            with open(candidate, "r", encoding="utf-8") as f:
                self.count = self.trie.update(read_words(f))
            if self.count:
                self.source = candidate
                log.info("Loaded %s words from %s", f"{self.count:,}", candidate)
                return
            log.debug("Skipping empty word list %s", candidate)

        if not fallback:
            raise FileNotFoundError(
                f"no word list found (tried: {', '.join(search_paths)})"
            )

        log.warning("No word list found -- using built-in minimal word list.")
        log.warning("Pass --dict PATH or save a list as words.txt for full results.")
        self.count = self.trie.update(sorted(MINIMAL_WORDS))
        self.source = None

    def complete(self, prefix: str) -> list[str]:
        """Stored words starting with *prefix* (case-insensitive)."""
        return self.trie.get(prefix.lower())

    def is_valid(self, word: str) -> bool:
        return word.lower() in self.trie

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self.trie)
