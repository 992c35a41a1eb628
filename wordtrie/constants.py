"""Shared constants for the word index."""

from __future__ import annotations

import os

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)  # 26

# Tried in order when no --dict path is given
DEFAULT_DICTIONARY_PATHS: list[str] = [
    "dictionary.txt",
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
    "/usr/share/dict/words",
]

EXIT_COMMAND = "exit"

UNDERLINE_ON = "\033[4m"
UNDERLINE_OFF = "\033[0m"
