"""Alphabet and word-length limits for the lexicon."""

from __future__ import annotations

import string

ALPHABET = string.ascii_lowercase
ALPHA_SIZE = len(ALPHABET)  # 26

# Longest word in a major English dictionary
# (pneumonoultramicroscopicsilicovolcanoconiosis).
MAX_WORD_LEN = 45
