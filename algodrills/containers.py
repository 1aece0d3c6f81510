"""Small container designs: randomised set, hash map, rate limiter, LRU cache."""

from __future__ import annotations

import random
from collections import Counter, OrderedDict
from collections.abc import Sequence

MISSING = -1


class RandomizedSet:
    """A set with constant-time insert, remove and uniform random choice."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._values: list[int] = []
        self._positions: dict[int, int] = {}
        self._rng = rng if rng is not None else random.Random()

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, val: object) -> bool:
        return val in self._positions

    def insert(self, val: int) -> bool:
        """Add ``val``; return False if it was already present."""
        if val in self._positions:
            return False
        self._positions[val] = len(self._values)
        self._values.append(val)
        return True

    def remove(self, val: int) -> bool:
        """Remove ``val``; return False if it was not present."""
        position = self._positions.pop(val, None)
        if position is None:
            return False
        last = self._values.pop()
        if position < len(self._values):
            self._values[position] = last
            self._positions[last] = position
        return True

    def get_random(self) -> int:
        """A uniformly chosen member of the set."""
        if not self._values:
            raise IndexError("get_random from an empty set")
        return self._rng.choice(self._values)


class HashMap:
    """Integer-keyed map using separate chaining over a fixed bucket array."""

    CAPACITY = 19991

    def __init__(self) -> None:
        self._buckets: list[list[list[int]]] = [[] for _ in range(self.CAPACITY)]

    def _bucket(self, key: int) -> list[list[int]]:
        return self._buckets[key % self.CAPACITY]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])

    def get(self, key: int) -> int:
        """The value stored under ``key``, or -1 when there is none."""
        return next(
            (value for stored, value in self._bucket(key) if stored == key), MISSING
        )

    def remove(self, key: int) -> None:
        """Drop ``key`` if it is present."""
        bucket = self._bucket(key)
        bucket[:] = [entry for entry in bucket if entry[0] != key]


class Logger:
    """Rate limiter letting each message through at most once per interval."""

    INTERVAL = 10

    def __init__(self) -> None:
        self._next_allowed: dict[str, int] = {}

    def should_print_message(self, timestamp: int, message: str) -> bool:
        """Whether ``message`` may be printed at ``timestamp``."""
        if timestamp < self._next_allowed.get(message, timestamp):
            return False
        self._next_allowed[message] = timestamp + self.INTERVAL
        return True


class LRUCache:
    """Fixed-capacity cache that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: int) -> int:
        """The value under ``key`` (marking it recently used), or -1."""
        if key not in self._entries:
            return MISSING
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest key when full."""
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value


class DetectSquares:
    """Counts axis-aligned squares that a query point completes."""

    def __init__(self) -> None:
        self._points: Counter[tuple[int, int]] = Counter()

    def add(self, point: Sequence[int]) -> None:
        """Record one more occurrence of ``point``."""
        x, y = point
        self._points[(x, y)] += 1

    def count(self, point: Sequence[int]) -> int:
        """Number of ways to pick three stored points forming a square with ``point``."""
        qx, qy = point
        total = 0
        for (x, y), freq in self._points.items():
            if x == qx or abs(qx - x) != abs(qy - y):
                continue
            total += self._points.get((x, qy), 0) * self._points.get((qx, y), 0) * freq
        return total