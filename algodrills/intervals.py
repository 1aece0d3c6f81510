"""Interval scheduling: room counts and merging."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from itertools import accumulate
from operator import itemgetter


def min_meeting_rooms(intervals: Sequence[Sequence[int]]) -> int:
    """Fewest rooms needed so that no two meetings share a room at once."""
    calendar: defaultdict[int, int] = defaultdict(int)
    for start, end in intervals:
        calendar[start] += 1
        calendar[end] -= 1
    occupancy = accumulate(calendar[time] for time in sorted(calendar))
    return max(occupancy, default=0)


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching intervals, sorted by start."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals, key=itemgetter(0)):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged