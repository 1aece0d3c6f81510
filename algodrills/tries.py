"""Prefix trees and the word puzzles built on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from itertools import islice

SUGGESTION_LIMIT = 3


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    word: str | None = None
    count: int = 0


def _build(words: Iterable[str]) -> _Node:
    root = _Node()
    for word in words:
        node = root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.word = word
        node.count += 1
    return root


def _walk(node: _Node | None, text: str) -> _Node | None:
    for ch in text:
        if node is None:
            return None
        node = node.children.get(ch)
    return node


class Trie:
    """A prefix tree of words."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.word = word
        node.count += 1

    def search(self, word: str) -> bool:
        """Whether ``word`` itself was inserted."""
        node = _walk(self._root, word)
        return node is not None and node.word is not None

    def starts_with(self, prefix: str) -> bool:
        """Whether any inserted word begins with ``prefix``."""
        return _walk(self._root, prefix) is not None


def count_matching_subsequences(s: str, words: Iterable[str]) -> int:
    """How many of ``words`` (with repeats) are subsequences of ``s``."""
    root = _build(words)
    total = root.count
    pending: list[tuple[_Node, int]] = [(root, 0)]
    while pending:
        node, start = pending.pop()
        for ch, child in node.children.items():
            index = s.find(ch, start)
            if index < 0:
                continue
            total += child.count
            pending.append((child, index + 1))
    return total


def _words_in_order(node: _Node) -> Iterator[str]:
    if node.word is not None:
        yield node.word
    for ch in sorted(node.children):
        yield from _words_in_order(node.children[ch])


def suggested_products(
    products: Iterable[str], search_word: str
) -> list[list[str]]:
    """For each typed prefix of ``search_word``, up to three products in order."""
    node: _Node | None = _build(products)
    suggestions: list[list[str]] = []
    for ch in search_word:
        node = node.children.get(ch) if node is not None else None
        if node is None:
            suggestions.append([])
        else:
            suggestions.append(list(islice(_words_in_order(node), SUGGESTION_LIMIT)))
    return suggestions


_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def find_words(board: Sequence[Sequence[str]], words: Iterable[str]) -> list[str]:
    """Words traceable on the board through adjacent cells, each cell used once."""
    if not board or not board[0]:
        return []
    rows, cols = len(board), len(board[0])
    root = _build(words)
    found: list[str] = []
    visited: set[tuple[int, int]] = set()

    def visit(row: int, col: int, node: _Node) -> None:
        child = node.children.get(board[row][col])
        if child is None:
            return
        if child.word is not None:
            found.append(child.word)
            child.word = None
        visited.add((row, col))
        for dr, dc in _STEPS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < rows and 0 <= nc < cols and (nr, nc) not in visited:
                visit(nr, nc, child)
        visited.discard((row, col))

    for row in range(rows):
        for col in range(cols):
            visit(row, col, root)
    return found