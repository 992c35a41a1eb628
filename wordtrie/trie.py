"""Prefix trie for exact lookup, prefix enumeration and spelling suggestions."""

from __future__ import annotations

from collections import deque

from wordtrie.constants import ALPHABET, ALPHABET_SIZE
from wordtrie.distance import is_one_edit

_ORD_A = ord("a")


class InvalidWordError(ValueError):
    """Raised when a word contains a character outside ``a``-``z``."""

    def __init__(self, word: str, position: int):
        self.word = word
        self.position = position
        self.char = word[position]
        super().__init__(
            f"invalid character {self.char!r} at position {position} in {word!r}"
        )


def _check(word: str) -> str:
    for pos, ch in enumerate(word):
        if ch not in ALPHABET:
            raise InvalidWordError(word, pos)
    return word


class TrieNode:
    """Single node in the prefix trie.

    ``children`` holds one slot per letter, ``'a'`` at index 0. Each
    present child is owned by this node alone.
    """

    __slots__ = ("children", "terminating")

    def __init__(self):
        self.children: list[TrieNode | None] = [None] * ALPHABET_SIZE
        self.terminating: bool = False


class Trie:
    """Prefix trie over the lowercase Latin alphabet.

    Every public method rejects words containing characters outside
    ``a``-``z`` with :class:`InvalidWordError`. Misses are reported as
    ``False`` or an empty list.
    """

    def __init__(self):
        self.root = TrieNode()

    # ── Mutation ────────────────────────────────────────────────────────

    def insert(self, word: str) -> None:
        """Add *word*, creating any missing nodes along its path."""
        node = self.root
        for ch in _check(word):
            idx = ord(ch) - _ORD_A
            child = node.children[idx]
            if child is None:
                child = node.children[idx] = TrieNode()
            node = child
        node.terminating = True

    def delete(self, word: str) -> bool:
        """Unmark *word* as a complete word.

        Returns True whenever the full letter path exists, even if it was
        only a prefix of other words and never stored itself. Returns
        False, without touching the trie, if the path is missing. Nodes
        are never pruned.
        """
        node = self._walk(_check(word))
        if node is None:
            return False
        node.terminating = False
        return True

    def update(self, old_word: str, new_word: str) -> bool:
        """Delete *old_word* and, if that succeeded, insert *new_word*.

        Both words are validated before anything is changed.
        """
        _check(new_word)
        deleted = self.delete(old_word)
        if deleted:
            self.insert(new_word)
        return deleted

    # ── Lookup ──────────────────────────────────────────────────────────

    def search(self, word: str) -> bool:
        node = self._walk(_check(word))
        return node is not None and node.terminating

    def __contains__(self, word: str) -> bool:
        return self.search(word)

    def prefix_search(self, prefix: str) -> list[str]:
        """All stored words starting with *prefix*, in lexicographic order."""
        node = self._walk(_check(prefix))
        if node is None:
            return []

        result: list[str] = []
        # Children pushed z..a so they pop a..z
        stack: list[tuple[TrieNode, str]] = [(node, prefix)]
        while stack:
            node, path = stack.pop()
            if node.terminating:
                result.append(path)
            for idx in range(ALPHABET_SIZE - 1, -1, -1):
                child = node.children[idx]
                if child is not None:
                    stack.append((child, path + ALPHABET[idx]))
        return result

    def suggest(self, word: str) -> list[str]:
        """Stored words within one edit of *word*.

        Scans the whole trie breadth-first. The order of the returned
        list is unspecified. A stored word equal to *word* is included.
        """
        _check(word)
        suggestions: set[str] = set()
        queue: deque[tuple[TrieNode, str]] = deque([(self.root, "")])
        while queue:
            node, path = queue.popleft()
            if node.terminating and is_one_edit(word, path):
                suggestions.add(path)
            for idx, child in enumerate(node.children):
                if child is not None:
                    queue.append((child, path + ALPHABET[idx]))
        return list(suggestions)

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children[ord(ch) - _ORD_A]
            if node is None:
                return None
        return node
