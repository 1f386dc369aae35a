import pytest

from wordtrie import wordlist
from wordtrie.trie import Trie

CAR_WORDS = ["car", "cart", "cartier", "carter", "c", "cgombo"]


@pytest.fixture
def trie():
    t = Trie()
    t.update(CAR_WORDS)
    return t


@pytest.fixture
def no_default_paths(monkeypatch):
    """Keep WordList from picking up word lists installed on the machine."""
    monkeypatch.setattr(wordlist, "SEARCH_PATHS", [])
