"""Puzzles over collections of words: anagrams, prefixes and chains."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Hashable, Iterable, Sequence
from functools import cmp_to_key


def _group_by(strings: Iterable[str], key) -> list[list[str]]:
    groups: defaultdict[Hashable, list[str]] = defaultdict(list)
    for text in strings:
        groups[key(text)].append(text)
    return list(groups.values())


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of one another, in order of first appearance."""
    return _group_by(strs, lambda text: tuple(sorted(text)))


def is_anagram(s: str, t: str) -> bool:
    """Whether ``t`` is a rearrangement of the letters of ``s``."""
    return Counter(s) == Counter(t)


def _concat_order(a: str, b: str) -> int:
    if a + b > b + a:
        return -1
    if a + b < b + a:
        return 1
    return 0


def largest_number(nums: Iterable[int]) -> str:
    """The largest number formed by concatenating all of ``nums``."""
    parts = sorted((str(num) for num in nums), key=cmp_to_key(_concat_order))
    if not parts:
        return ""
    return "".join(parts).lstrip("0") or "0"


def longest_common_prefix(strs: Sequence[str]) -> str:
    """The longest prefix shared by every string."""
    if not strs:
        raise ValueError("strs must not be empty")
    prefix = strs[0]
    for other in strs:
        shared = next(
            (i for i, (a, b) in enumerate(zip(prefix, other)) if a != b),
            min(len(prefix), len(other)),
        )
        prefix = prefix[:shared]
    return prefix


def longest_str_chain(words: Iterable[str]) -> int:
    """Length of the longest chain where each word adds one letter to the last."""
    chain: dict[str, int] = {}
    longest = 0
    for word in sorted(words, key=len):
        best = max(
            (chain.get(word[:i] + word[i + 1 :], 0) + 1 for i in range(len(word))),
            default=0,
        )
        chain[word] = best
        longest = max(longest, best)
    return longest


def is_isomorphic(s: str, t: str) -> bool:
    """Whether the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def _shift_key(text: str) -> tuple[int, ...]:
    return tuple((ord(ch) - ord(text[0])) % 26 for ch in text)


def group_shifted(strings: Iterable[str]) -> list[list[str]]:
    """Group strings that turn into each other by shifting every letter alike."""
    return _group_by(strings, _shift_key)


def differ_by_one(words: Iterable[str]) -> bool:
    """Whether two of the words differ in exactly one position."""
    seen: dict[tuple[str, str], set[str]] = {}
    for word in words:
        keys = [(word[:i], word[i + 1 :]) for i in range(len(word))]
        for key, ch in zip(keys, word):
            if seen.get(key, set()) - {ch}:
                return True
        for key, ch in zip(keys, word):
            seen.setdefault(key, set()).add(ch)
    return False