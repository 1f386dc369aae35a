"""wordtrie -- in-memory prefix trie."""

from wordtrie.errors import EmptyInputError, TrieError
from wordtrie.trie import Node, Trie
from wordtrie.wordlist import WordList, read_words

__all__ = [
    "EmptyInputError",
    "Node",
    "Trie",
    "TrieError",
    "WordList",
    "read_words",
]
