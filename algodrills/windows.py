"""Sliding-window and subsequence searches over strings."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter, defaultdict
from collections.abc import Iterable, Mapping, Sequence


def longest_unique_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    longest = 0
    for index, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = index
        longest = max(longest, index - start + 1)
    return longest


def _longest_with_unique_limit(s: str, k: int, limit: int) -> int:
    freq: Counter[str] = Counter()
    left = unique = at_least_k = longest = 0
    for right, ch in enumerate(s):
        freq[ch] += 1
        unique += freq[ch] == 1
        at_least_k += freq[ch] == k
        while unique > limit:
            out = s[left]
            freq[out] -= 1
            unique -= freq[out] == 0
            at_least_k -= freq[out] == k - 1
            left += 1
        if unique == at_least_k:
            longest = max(longest, right + 1 - left)
    return longest


def longest_substring_k_repeating(s: str, k: int) -> int:
    """Longest substring in which every character occurs at least ``k`` times."""
    return max(
        (_longest_with_unique_limit(s, k, limit) for limit in range(1, len(set(s)) + 1)),
        default=0,
    )


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` holding every character of ``t``, or ""."""
    if not t:
        return ""
    need = Counter(t)
    missing = len(t)
    best_start, best_len = -1, len(s) + 1
    left = 0
    for right, ch in enumerate(s):
        if need[ch] > 0:
            missing -= 1
        need[ch] -= 1
        while missing == 0:
            if right + 1 - left < best_len:
                best_start, best_len = left, right + 1 - left
            out = s[left]
            if need[out] == 0:
                missing += 1
            need[out] += 1
            left += 1
    return "" if best_start < 0 else s[best_start : best_start + best_len]


def _is_subsequence(word: str, positions: Mapping[str, Sequence[int]]) -> bool:
    after = 0
    for ch in word:
        spots = positions.get(ch, ())
        found = bisect_left(spots, after)
        if found == len(spots):
            return False
        after = spots[found] + 1
    return True


def num_matching_subseq(s: str, words: Iterable[str]) -> int:
    """How many of ``words`` are subsequences of ``s``."""
    positions: defaultdict[str, list[int]] = defaultdict(list)
    for index, ch in enumerate(s):
        positions[ch].append(index)
    return sum(_is_subsequence(word, positions) for word in words)