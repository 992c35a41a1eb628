"""Dictionary / word list loader that fills a trie."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from wordtrie.constants import ALPHABET, DEFAULT_DICTIONARY_PATHS
from wordtrie.trie import Trie

log = logging.getLogger("wordtrie")


def normalize_word(line: str) -> str | None:
    """Strip and lowercase one dictionary line.

    Returns None for blank lines and for anything that is not made up
    solely of the letters ``a``-``z`` (apostrophes, accents, digits).
    """
    word = line.strip().lower()
    if not word or any(ch not in ALPHABET for ch in word):
        return None
    return word


class Dictionary:
    """Word list loaded into a :class:`Trie`.

    The first readable file among *dict_path* and the default search
    paths is used. If none can be read the trie is left empty.
    """

    def __init__(self, dict_path: str | None = None, trie: Trie | None = None,
                 search_defaults: bool = True):
        self.trie = trie if trie is not None else Trie()
        self.path: str | None = None
        self.word_count = 0
        self._load(dict_path, search_defaults)

    def _load(self, dict_path: str | None, search_defaults: bool) -> None:
        search_paths: list[str] = []
        if dict_path:
            search_paths.append(dict_path)
        if search_defaults:
            search_paths.extend(DEFAULT_DICTIONARY_PATHS)

        for path in search_paths:
            if not os.path.exists(path):
                continue
            try:
                with open(path, "r", encoding="utf-8", errors="replace") as f:
                    count = self.load_words(f)
            except OSError as exc:
                log.warning("Unable to read dictionary %s: %s", path, exc)
                continue
            if count:
                self.path = path
                log.info("Loaded %s words from %s", f"{count:,}", path)
                return
            log.debug("No usable words in %s", path)

        if dict_path:
            log.warning("Unable to open the dictionary file %s", dict_path)
        log.warning("No dictionary loaded -- every lookup will miss.")

    def load_words(self, words: Iterable[str]) -> int:
        """Insert each usable word; return how many were inserted."""
        inserted = skipped = 0
        for line in words:
            word = normalize_word(line)
            if word is None:
                if line.strip():
                    skipped += 1
                continue
            self.trie.insert(word)
            inserted += 1
        if skipped:
            log.debug("Skipped %d entries outside a-z", skipped)
        self.word_count += inserted
        return inserted

    def __contains__(self, word: str) -> bool:
        return self.trie.search(word)
