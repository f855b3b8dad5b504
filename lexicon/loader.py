"""Bulk loading of word lists into a Lexicon."""

from __future__ import annotations

import logging
import os
import re

from lexicon.constants import MAX_WORD_LEN
from lexicon.trie import Lexicon

log = logging.getLogger("lexicon")

# A line is letters and spaces only, at most MAX_WORD_LEN characters, and
# holds exactly one word once surrounding whitespace is trimmed.
_LINE = re.compile(rf"[ a-zA-Z]{{1,{MAX_WORD_LEN}}}")
_LOWER_LINE = re.compile(rf"[ a-z]{{1,{MAX_WORD_LEN}}}")
_WORD = re.compile(r"[a-zA-Z]+")


def find_word_list(path: str | None = None) -> str | None:
    """First existing word list among path and the usual locations."""
    search_paths: list[str] = []
    if path:
        search_paths.append(path)

    search_paths.extend([
        "dictionary.txt",
        "words.txt",
        os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
        "/usr/share/dict/words",
    ])

    for candidate in search_paths:
        if os.path.exists(candidate):
            return candidate
    return None


def add_from_file(lex: Lexicon, path: str, is_lower_case: bool = False) -> bool:
    """Insert every word of a one-word-per-line file into lex.

    Returns False if the file cannot be read or a line is malformed; the
    load stops at the first bad line and words inserted before it are kept.
    With ``is_lower_case`` the file must be lowercase already and case
    folding is skipped.
    """
    pattern = _LOWER_LINE if is_lower_case else _LINE
    add = lex.insert_lower if is_lower_case else lex.insert
    added = 0
    try:
        with open(path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, 1):
                line = line.rstrip("\r\n")
                word = line.strip()
                if not pattern.fullmatch(line) or not _WORD.fullmatch(word):
                    log.warning("%s:%d: malformed line %r", path, lineno, line)
                    return False
                if add(word):
                    added += 1
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("Could not read word list %s: %s", path, exc)
        return False

    log.info("Loaded %s words from %s", f"{added:,}", path)
    return True
