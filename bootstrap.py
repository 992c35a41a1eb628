#!/usr/bin/env python3
"""
Setup script for the Word Trie spell checker.
Builds a lowercase a-z dictionary.txt from the system word list or a
downloaded one.
"""

from __future__ import annotations

import os
import urllib.request
from collections.abc import Iterable

from wordtrie.dictionary import normalize_word

DICT_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "dictionary.txt")
SYSTEM_DICT = "/usr/share/dict/words"
URLS = [
    "https://raw.githubusercontent.com/benhoyt/goawk/master/testdata/words",
]


def clean_words(lines: Iterable[str]) -> list[str]:
    """Normalized, de-duplicated, sorted words from raw lines."""
    words = set()
    for line in lines:
        word = normalize_word(line)
        if word is not None:
            words.add(word)
    return sorted(words)


def write_dictionary(path: str, words: list[str]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for word in words:
            f.write(word + "\n")


def download_dictionary(dict_path: str = DICT_PATH) -> bool:
    """Create *dict_path* if it does not exist. Returns True on success."""
    if os.path.exists(dict_path):
        with open(dict_path, encoding="utf-8") as f:
            count = sum(1 for _ in f)
        print(f"Dictionary already exists: {dict_path} ({count:,} words)")
        return True

    if os.path.exists(SYSTEM_DICT):
        print(f"  Using system dictionary: {SYSTEM_DICT}")
        with open(SYSTEM_DICT, encoding="utf-8", errors="replace") as f:
            words = clean_words(f)
        write_dictionary(dict_path, words)
        print(f"Dictionary created: {len(words):,} words -> {dict_path}")
        return True

    for url in URLS:
        try:
            print(f"  Trying {url}...")
            with urllib.request.urlopen(url, timeout=30) as resp:
                text = resp.read().decode("utf-8", errors="replace")
        except OSError as e:
            print(f"  Failed: {e}")
            continue
        words = clean_words(text.splitlines())
        write_dictionary(dict_path, words)
        print(f"Dictionary downloaded: {len(words):,} words")
        return True

    print("\nCould not find or download a word list.")
    print("  Save any one-word-per-line list as:")
    print(f"  {dict_path}")
    return False


def main():
    print("=" * 50)
    print("  Word Trie -- Setup")
    print("=" * 50)
    print()

    ok = download_dictionary()

    print()
    print("=" * 50)
    if ok:
        print("  Setup complete! Run the spell checker:")
        print()
        print("    python spell_checker.py")
        print("    python spell_checker.py --dict my_words.txt")
    else:
        print("  Setup incomplete -- no dictionary available.")
    print("=" * 50)


if __name__ == '__main__':
    main()
