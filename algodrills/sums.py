"""Finding tuples of numbers with a given sum."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence


def _pairs_with_sum(
    values: Sequence[int], start: int, target: int
) -> Iterator[tuple[int, int]]:
    """Distinct pairs from sorted ``values[start:]`` that add up to ``target``."""
    lo, hi = start, len(values) - 1
    while lo < hi:
        total = values[lo] + values[hi]
        if total < target:
            lo += 1
        elif total > target:
            hi -= 1
        else:
            low, high = values[lo], values[hi]
            yield low, high
            while lo < hi and values[lo] == low:
                lo += 1
            while lo < hi and values[hi] == high:
                hi -= 1


def _distinct_positions(values: Sequence[int], start: int = 0) -> Iterator[int]:
    """Indices from ``start`` on, skipping repeats of the previous value."""
    for index in range(start, len(values)):
        if index > start and values[index] == values[index - 1]:
            continue
        yield index


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct triplets that sum to zero, each in ascending order."""
    values = sorted(nums)
    return [
        [values[i], b, c]
        for i in _distinct_positions(values)
        for b, c in _pairs_with_sum(values, i + 1, -values[i])
    ]


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """All distinct quadruplets that sum to ``target``, each in ascending order."""
    values = sorted(nums)
    return [
        [values[i], values[j], c, d]
        for i in _distinct_positions(values)
        for j in _distinct_positions(values, i + 1)
        for c, d in _pairs_with_sum(values, j + 1, target - values[i] - values[j])
    ]


def four_sum_count(
    a: Sequence[int], b: Sequence[int], c: Sequence[int], d: Sequence[int]
) -> int:
    """Number of index tuples (i, j, k, l) with a[i] + b[j] + c[k] + d[l] == 0."""
    pair_sums = Counter(x + y for x in a for y in b)
    return sum(pair_sums[-(x + y)] for x in c for y in d)