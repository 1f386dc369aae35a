"""CLI / terminal mode for wordtrie."""

from __future__ import annotations

from wordtrie.trie import Trie

HELP = "\n".join([
    "Commands:",
    "  add WORD [WORD ...]   -- store one or more words",
    "  has WORD              -- check whether a word is stored",
    "  get PREFIX            -- list stored words starting with PREFIX",
    "  count                 -- number of stored words",
    "  help                  -- show this list",
    "  done                  -- quit",
])

_QUIT = {"done", "quit", "exit"}


def format_completions(prefix: str, words: list[str]) -> str:
    if not words:
        return f"  No words start with '{prefix}'."
    lines = [f"  {len(words)} word(s) starting with '{prefix}':"]
    lines.extend(f"    {w}" for w in words)
    return "\n".join(lines)


def handle_command(trie: Trie, line: str) -> str | None:
    """Run one command line against *trie*.

    Returns the text to show the user, or ``None`` for a quit command.
    """
    parts = line.split()
    if not parts:
        return ""

    cmd, args = parts[0].lower(), [a.lower() for a in parts[1:]]
    if cmd in _QUIT:
        return None
    if cmd == "help":
        return HELP
    if cmd == "count":
        return f"  {len(trie):,} word(s) stored."

    if cmd == "add":
        if not args:
            return "  Format: add WORD [WORD ...]"
        trie.update(args)
        return f"  Added {', '.join(args)}"
    if cmd == "has":
        if len(args) != 1:
            return "  Format: has WORD"
        word = args[0]
        return f"  '{word}' is stored." if trie.contains(word) else f"  '{word}' is not stored."
    if cmd == "get":
        if len(args) != 1:
            return "  Format: get PREFIX"
        return format_completions(args[0], trie.get(args[0]))

    return f"  Unknown command '{cmd}'.  Type 'help' for the list."


def run_cli(trie: Trie) -> None:
    """Run in terminal mode."""
    print("\n" + "=" * 60)
    print("  WORDTRIE -- Interactive Lookup")
    print("=" * 60)
    print()
    print(HELP)
    print()

    while True:
        try:
            inp = input("  trie> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        out = handle_command(trie, inp)
        if out is None:
            break
        if out:
            print(out)
