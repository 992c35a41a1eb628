"""Interactive terminal spell checker."""

from __future__ import annotations

from wordtrie.constants import EXIT_COMMAND, UNDERLINE_OFF, UNDERLINE_ON
from wordtrie.dictionary import Dictionary
from wordtrie.trie import InvalidWordError, Trie

PROMPT = f"Enter a word (or '{EXIT_COMMAND}' to quit): "


def print_help() -> None:
    print("Commands:")
    print("  WORD                  -- check a word and list completions")
    print("  /delete WORD          -- remove a word from the dictionary")
    print("  /update OLD NEW       -- replace OLD with NEW")
    print("  /help                 -- show this message")
    print(f"  {EXIT_COMMAND:<21} -- quit")


def check_word(trie: Trie, word: str) -> None:
    """One lookup turn: completions, exact match, then suggestions."""
    completions = trie.prefix_search(word)
    if completions:
        print(f"Suggestions for prefix '{word}': {' '.join(completions)}")

    if trie.search(word):
        print(f"Word found: {word}")
        return

    print(f"{UNDERLINE_ON}Word not found: {word}{UNDERLINE_OFF}")
    corrections = trie.suggest(word)
    if corrections:
        print(f"Did you mean: {' '.join(sorted(corrections))}")
    else:
        print("No suggestions found.")


def _run_command(trie: Trie, parts: list[str]) -> None:
    cmd, args = parts[0], parts[1:]
    if cmd == "/help":
        print_help()
    elif cmd == "/delete" and len(args) == 1:
        if trie.delete(args[0]):
            print(f"  Deleted '{args[0]}'")
        else:
            print(f"  Not found: {args[0]}")
    elif cmd == "/update" and len(args) == 2:
        if trie.update(args[0], args[1]):
            print(f"  Updated '{args[0]}' -> '{args[1]}'")
        else:
            print(f"  Not found: {args[0]}")
    else:
        print("  Format: /delete WORD  or  /update OLD NEW  (/help for more)")


def run_cli(dictionary: Dictionary) -> None:
    """Read words from the terminal until 'exit' or end of input."""
    trie = dictionary.trie
    while True:
        try:
            inp = input(PROMPT).strip().lower()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue
        if inp == EXIT_COMMAND:
            break

        parts = inp.split()
        try:
            if parts[0].startswith("/"):
                _run_command(trie, parts)
            elif len(parts) == 1:
                check_word(trie, parts[0])
            else:
                print("  One word at a time, please.")
        except InvalidWordError as exc:
            print(f"  Invalid input: {exc}. Use letters a-z only.")
