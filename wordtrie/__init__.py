"""Word Trie -- dictionary-backed word index with spelling suggestions."""

from wordtrie.constants import ALPHABET, ALPHABET_SIZE
from wordtrie.distance import is_one_edit
from wordtrie.trie import InvalidWordError, Trie, TrieNode
from wordtrie.dictionary import Dictionary, normalize_word

__all__ = [
    "ALPHABET",
    "ALPHABET_SIZE",
    "Dictionary",
    "InvalidWordError",
    "Trie",
    "TrieNode",
    "is_one_edit",
    "normalize_word",
]
