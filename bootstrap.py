#!/usr/bin/env python3
"""
Setup script for the Lexicon Shell.
Builds a lowercase word list (dictionary.txt) the loader accepts.
"""

import os
import re
import urllib.request

from lexicon.constants import MAX_WORD_LEN

DICT_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'dictionary.txt')
SYSTEM_DICT = '/usr/share/dict/words'

URLS = [
    "https://raw.githubusercontent.com/benhoyt/goawk/master/testdata/words",
]

_WORD = re.compile(rf"[a-z]{{1,{MAX_WORD_LEN}}}")


def normalize_words(lines):
    """Lowercase, filter and deduplicate raw lines into a sorted word list.

    Lines that are not a single run of ASCII letters (possessives,
    hyphenated words, accented words) are dropped.
    """
    words = set()
    for line in lines:
        word = line.strip().lower()
        if _WORD.fullmatch(word):
            words.add(word)
    return sorted(words)


def write_word_list(words, path):
    with open(path, 'w', encoding='utf-8') as f:
        for word in words:
            f.write(word + '\n')


def download_dictionary(dict_path=DICT_PATH):
    """Create dictionary.txt from the system word list or a public source."""
    if os.path.exists(dict_path):
        with open(dict_path, encoding='utf-8') as f:
            count = sum(1 for _ in f)
        print(f"Dictionary already exists: {dict_path} ({count:,} words)")
        return True

    if os.path.exists(SYSTEM_DICT):
        print(f"  Using system dictionary: {SYSTEM_DICT}")
        with open(SYSTEM_DICT, encoding='utf-8', errors='ignore') as f:
            words = normalize_words(f)
        write_word_list(words, dict_path)
        print(f"✓ Dictionary created: {len(words):,} words → {dict_path}")
        return True

    print("Downloading word dictionary...")
    for url in URLS:
        try:
            print(f"  Trying {url}...")
            with urllib.request.urlopen(url, timeout=30) as resp:
                text = resp.read().decode('utf-8', errors='ignore')
        except OSError as e:
            print(f"  Failed: {e}")
            continue
        words = normalize_words(text.splitlines())
        write_word_list(words, dict_path)
        print(f"✓ Dictionary downloaded: {len(words):,} words")
        return True

    print("\n⚠ Could not build a dictionary automatically.")
    print("  Save any one-word-per-line list as:")
    print(f"  {dict_path}")
    return False


def main():
    print("=" * 50)
    print("  Lexicon Shell — Setup")
    print("=" * 50)
    print()

    ok = download_dictionary()

    print()
    print("=" * 50)
    if ok:
        print("  Setup complete! Run the shell:")
        print()
        print("    python lexicon_shell.py --lower")
    else:
        print("  Setup incomplete. Run the shell with --dict PATH.")
    print("=" * 50)


if __name__ == '__main__':
    main()
