"""Prefix tree over lower-case words."""

from __future__ import annotations

from collections.abc import Iterable


class _TrieNode:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.terminal = False


def _check(word: str) -> None:
    if any(not "a" <= ch <= "z" for ch in word):
        raise ValueError(f"only lower-case letters a-z are allowed: {word!r}")


class Trie:
    """Trie of words made of the letters a to z."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        for word in words:
            self.insert(word)

    def _walk(self, word: str) -> _TrieNode | None:
        _check(word)
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: str) -> None:
        """Store ``word``."""
        _check(word)
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.terminal = True

    def search(self, word: str) -> bool:
        """True when ``word`` itself was stored."""
        node = self._walk(word)
        return node is not None and node.terminal

    def starts_with(self, prefix: str) -> bool:
        """True when ``prefix`` begins a stored word but is not itself one."""
        node = self._walk(prefix)
        return node is not None and not node.terminal