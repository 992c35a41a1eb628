#!/usr/bin/env python3
"""
Word Trie Spell Checker

Loads a word list into a prefix trie, then checks words typed at the
terminal: lists completions for each word, reports whether it is in
the dictionary and, when it is not, suggests words one edit away.

Run ``python bootstrap.py`` first if you have no dictionary.txt.
"""

from __future__ import annotations

import argparse
import logging

from wordtrie.cli import print_help, run_cli
from wordtrie.dictionary import Dictionary


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("wordtrie")


# Entry point

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Word Trie -- spell checker with prefix completion",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    print("WORD TRIE -- Spell Checker")

    dictionary = Dictionary(args.dict)
    log.debug("Dictionary ready: %d entries", dictionary.word_count)

    print_help()
    run_cli(dictionary)


if __name__ == "__main__":
    main()
