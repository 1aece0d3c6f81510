"""Point-set geometry: collinear points and axis-aligned rectangles."""

from __future__ import annotations

import math
from collections import Counter, defaultdict
from collections.abc import Sequence
from itertools import combinations, pairwise


def _direction(dx: int, dy: int) -> tuple[int, int]:
    """Canonical reduced direction of a non-zero vector, ignoring its sign."""
    divisor = math.gcd(dx, dy)
    dx, dy = dx // divisor, dy // divisor
    if dx < 0 or (dx == 0 and dy < 0):
        dx, dy = -dx, -dy
    return dx, dy


def max_points(points: Sequence[Sequence[int]]) -> int:
    """Largest number of points lying on one straight line."""
    coords = [(x, y) for x, y in points]
    best = 0
    for i, (x1, y1) in enumerate(coords):
        slopes: Counter[tuple[int, int]] = Counter()
        duplicates = 0
        for x2, y2 in coords[i + 1 :]:
            dx, dy = x2 - x1, y2 - y1
            if dx == 0 and dy == 0:
                duplicates += 1
                continue
            slopes[_direction(dx, dy)] += 1
        best = max(best, max(slopes.values(), default=0) + duplicates + 1)
    return best


def min_area_rect(points: Sequence[Sequence[int]]) -> int:
    """Smallest area of an axis-aligned rectangle with corners among the points, or 0."""
    columns: defaultdict[int, set[int]] = defaultdict(set)
    for x, y in points:
        columns[x].add(y)
    usable = [(x, ys) for x, ys in columns.items() if len(ys) >= 2]
    best = math.inf
    for (xa, ys_a), (xb, ys_b) in combinations(usable, 2):
        width = abs(xb - xa)
        for low, high in pairwise(sorted(ys_a & ys_b)):
            best = min(best, width * (high - low))
    return 0 if best == math.inf else int(best)