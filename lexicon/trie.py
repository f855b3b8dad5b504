"""26-ary prefix trie holding a set of lowercase words."""

from __future__ import annotations

import logging
from typing import Iterator

from lexicon.constants import ALPHA_SIZE, ALPHABET

log = logging.getLogger("lexicon")

_ORD_A = ord("a")


class LexiconDestroyedError(RuntimeError):
    """Raised when a Lexicon is used after destroy()."""


class LexNode:
    """Single node in the trie: one child slot per letter plus a word flag."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: list[LexNode | None] = [None] * ALPHA_SIZE
        self.is_terminal: bool = False

    def has_children(self) -> bool:
        return any(child is not None for child in self.children)


def _slot(ch: str) -> int:
    """Child index of a lowercase letter, or -1 if ch is not a-z."""
    i = ord(ch) - _ORD_A
    return i if 0 <= i < ALPHA_SIZE else -1


def _count_terminals(node: LexNode) -> int:
    """Number of words stored in the subtree rooted at node."""
    total = 0
    stack = [node]
    while stack:
        current = stack.pop()
        if current.is_terminal:
            total += 1
        stack.extend(child for child in current.children if child is not None)
    return total


class Lexicon:
    """Set of words backed by a 26-ary trie, optimized for prefix queries.

    Every string is folded to lowercase before it touches the tree, so
    lookups are case-insensitive.  Removals prune dead branches as they go:
    a node that is neither a word nor on the way to one is never left in the
    tree, which is what keeps ``contains_prefix`` honest after deletions.

    >>> lex = Lexicon()
    >>> lex.insert("Apple")
    True
    >>> lex.contains_word("APPLE"), lex.contains_prefix("app")
    (True, True)
    >>> lex.remove("apple"), lex.contains_prefix("app")
    (True, False)
    """

    def __init__(self):
        self.root: LexNode | None = LexNode()
        self.count = 0

    # mutation

    def insert(self, word: str) -> bool:
        """Add word to the set.  Returns False if it was already a member."""
        return self.insert_lower(word.lower())

    def insert_lower(self, word: str) -> bool:
        """Add a word the caller guarantees is already lowercase."""
        root = self._live_root()
        if not word:
            raise ValueError("cannot insert an empty word")
        slots = [_slot(ch) for ch in word]
        if min(slots) < 0:
            raise ValueError(f"{word!r} contains characters outside a-z")

        node = root
        for i in slots:
            child = node.children[i]
            if child is None:
                child = node.children[i] = LexNode()
            node = child

        if node.is_terminal:
            return False
        node.is_terminal = True
        self.count += 1
        return True

    def remove(self, word: str) -> bool:
        """Remove word, pruning the branch it leaves behind.

        Returns False (and changes nothing) if word is not a member, even
        when it exists in the tree as the prefix of a longer word.
        """
        path = self._descend(word.lower())
        if not path:
            return False
        parent, i = path[-1]
        node = parent.children[i]
        if not node.is_terminal:
            return False

        node.is_terminal = False
        self.count -= 1
        self._prune(path)
        return True

    def remove_prefix(self, prefix: str) -> bool:
        """Remove every word beginning with prefix, including prefix itself.

        Returns False if no path for prefix exists.  The empty prefix matches
        every word, so it empties the set and reports whether anything was
        removed.
        """
        if not prefix:
            self._live_root()
            if self.count == 0:
                return False
            self.clear()
            return True

        path = self._descend(prefix.lower())
        if not path:
            return False
        parent, i = path[-1]
        subtree = parent.children[i]
        parent.children[i] = None
        self.count -= _count_terminals(subtree)
        self._prune(path[:-1])
        return True

    def clear(self) -> None:
        """Drop every word.  The lexicon stays usable."""
        self._live_root()
        self.root = LexNode()
        self.count = 0
        log.debug("Lexicon cleared")

    def destroy(self) -> None:
        """Release the whole tree.  Any later call raises LexiconDestroyedError."""
        self._live_root()
        self.root = None
        self.count = 0
        log.debug("Lexicon destroyed")

    # queries

    def contains_word(self, word: str) -> bool:
        node = self._walk(word.lower())
        return node is not None and node.is_terminal

    def contains_prefix(self, prefix: str) -> bool:
        if not prefix:
            # Every stored word starts with the empty prefix.
            self._live_root()
            return self.count > 0
        return self._walk(prefix.lower()) is not None

    def words_with_prefix(self, prefix: str) -> list[str]:
        """All members beginning with prefix, in alphabetical order."""
        prefix = prefix.lower()
        node = self._walk(prefix)
        if node is None:
            return []
        return list(self._iter_from(node, prefix))

    def is_empty(self) -> bool:
        self._live_root()
        return self.count == 0

    def size(self) -> int:
        self._live_root()
        return self.count

    @property
    def is_destroyed(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, word: str) -> bool:
        return self.contains_word(word)

    def __iter__(self) -> Iterator[str]:
        return self._iter_from(self._live_root(), "")

    def __repr__(self) -> str:
        if self.root is None:
            return "<Lexicon: destroyed>"
        return f"<Lexicon: {self.count} words>"

    # helpers

    def _live_root(self) -> LexNode:
        if self.root is None:
            raise LexiconDestroyedError("lexicon has been destroyed")
        return self.root

    def _walk(self, s: str) -> LexNode | None:
        node = self._live_root()
        for ch in s:
            i = _slot(ch)
            if i < 0:
                return None
            node = node.children[i]
            if node is None:
                return None
        return node

    def _descend(self, s: str) -> list[tuple[LexNode, int]] | None:
        """Walk s from the root, recording the (parent, slot) of every step.

        Returns None if the path is absent.
        """
        node = self._live_root()
        path: list[tuple[LexNode, int]] = []
        for ch in s:
            i = _slot(ch)
            if i < 0:
                return None
            child = node.children[i]
            if child is None:
                return None
            path.append((node, i))
            node = child
        return path

    @staticmethod
    def _prune(path: list[tuple[LexNode, int]]) -> None:
        """Unlink dead nodes bottom-up along a descent path."""
        for parent, i in reversed(path):
            node = parent.children[i]
            if node.is_terminal or node.has_children():
                break
            parent.children[i] = None

    @staticmethod
    def _iter_from(node: LexNode, prefix: str) -> Iterator[str]:
        # Children are pushed z..a so they pop in alphabetical order.
        stack = [(node, prefix)]
        while stack:
            current, acc = stack.pop()
            if current.is_terminal:
                yield acc
            for i in range(ALPHA_SIZE - 1, -1, -1):
                child = current.children[i]
                if child is not None:
                    stack.append((child, acc + ALPHABET[i]))
