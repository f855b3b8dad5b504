#!/usr/bin/env python3
"""
Lexicon Shell

Interactive harness for the trie-backed Lexicon: preloads a word list
(one word per line) and then accepts add/has/prefix/remove commands
from the terminal.
"""

from __future__ import annotations

import argparse
import logging
import sys

from lexicon.cli import run_cli
from lexicon.loader import add_from_file, find_word_list
from lexicon.trie import Lexicon


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("lexicon")


# Entry point

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Lexicon Shell -- exercise a trie-backed word set from the terminal",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to a word list to preload (one word per line)")
    parser.add_argument("--lower", action="store_true",
                        help="Word list is already lowercase (skips case folding)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    lex = Lexicon()

    if args.dict:
        if not add_from_file(lex, args.dict, is_lower_case=args.lower):
            log.error("Failed to load word list %s", args.dict)
            return 1
    else:
        path = find_word_list()
        if path is None:
            log.warning("No word list found -- starting with an empty lexicon.")
        elif not add_from_file(lex, path, is_lower_case=args.lower):
            log.warning("Word list %s could not be loaded -- starting empty.", path)
            lex.clear()

    run_cli(lex)
    return 0


if __name__ == "__main__":
    sys.exit(main())
