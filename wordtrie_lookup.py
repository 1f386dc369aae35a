#!/usr/bin/env python3
"""
wordtrie lookup

Loads a word list into a prefix trie and prints every word starting
with the given prefixes, or opens an interactive prompt with --manual.
"""

from __future__ import annotations

import argparse
import logging

from wordtrie.cli import format_completions, run_cli
from wordtrie.wordlist import WordList


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("wordtrie")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="wordtrie -- word lookup and prefix completion over a word list",
    )
    parser.add_argument("prefixes", nargs="*",
                        help="Print every word starting with each prefix")
    parser.add_argument("--manual", action="store_true",
                        help="Interactive lookup prompt after loading")
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to word list file")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)
    if any(not p for p in args.prefixes):
        parser.error("prefixes must be non-empty")

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    words = WordList(args.dict)
    log.debug("%s distinct words from %s", f"{len(words):,}", words.source or "built-in list")

    for prefix in args.prefixes:
        print(format_completions(prefix.lower(), words.complete(prefix)))

    if args.manual:
        run_cli(words.trie)
    elif not args.prefixes:
        print(f"{len(words):,} words loaded.")


if __name__ == "__main__":
    main()
