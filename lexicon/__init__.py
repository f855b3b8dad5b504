"""Lexicon -- a 26-ary trie set of lowercase words."""

from lexicon.constants import ALPHA_SIZE, ALPHABET, MAX_WORD_LEN
from lexicon.trie import Lexicon, LexiconDestroyedError, LexNode
from lexicon.loader import add_from_file, find_word_list

__all__ = [
    "ALPHA_SIZE",
    "ALPHABET",
    "MAX_WORD_LEN",
    "Lexicon",
    "LexiconDestroyedError",
    "LexNode",
    "add_from_file",
    "find_word_list",
]
