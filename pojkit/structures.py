"""Data structures: weighted union-find, Fenwick trees, segment trees and a timed queue."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def count_false_statements(animal_count: int, statements: Iterable[tuple[int, int, int]]) -> int:
    """Number of false statements (kind, x, y) about a food chain of three species.

    Kind 1 says x and y are of the same species, kind 2 says x eats y. A
    statement is false when it names an animal out of range, says an animal
    eats itself, or contradicts the true statements before it.
    """
    parent = list(range(animal_count + 1))
    offset = [0] * (animal_count + 1)

    def find(x: int) -> int:
        path = []
        while parent[x] != x:
            path.append(x)
            x = parent[x]
        root = x
        for node in reversed(path):
            up = parent[node]
            if up != root:
                offset[node] = (offset[node] + offset[up]) % 3
            parent[node] = root
        return root

    false = 0
    for kind, x, y in statements:
        if kind not in (1, 2):
            raise ValueError("statement kind must be 1 or 2")
        if not (1 <= x <= animal_count and 1 <= y <= animal_count) or (kind == 2 and x == y):
            false += 1
            continue
        relation = kind - 1
        rx, ry = find(x), find(y)
        if rx == ry:
            if (offset[x] - offset[y]) % 3 != relation:
                false += 1
        else:
            parent[ry] = rx
            offset[ry] = (offset[x] - offset[y] - relation) % 3
    return false


class FenwickGrid:
    """A size x size grid of counters with point updates and rectangle sums, 0-based."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._tree = [[0] * (size + 1) for _ in range(size + 1)]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError("cell lies outside the grid")

    def add(self, x: int, y: int, value: int) -> None:
        """Add value to the cell (x, y)."""
        self._check(x, y)
        i = x + 1
        while i <= self.size:
            j = y + 1
            row = self._tree[i]
            while j <= self.size:
                row[j] += value
                j += j & -j
            i += i & -i

    def _prefix(self, x: int, y: int) -> int:
        total = 0
        i = x
        while i > 0:
            j = y
            row = self._tree[i]
            while j > 0:
                total += row[j]
                j -= j & -j
            i -= i & -i
        return total

    def range_sum(self, left: int, bottom: int, right: int, top: int) -> int:
        """Sum of cells with left <= x <= right and bottom <= y <= top."""
        self._check(left, bottom)
        self._check(right, top)
        if left > right or bottom > top:
            raise ValueError("empty rectangle")
        return (
            self._prefix(right + 1, top + 1)
            - self._prefix(left, top + 1)
            - self._prefix(right + 1, bottom)
            + self._prefix(left, bottom)
        )


def star_levels(stars: Iterable[tuple[int, int]]) -> list[int]:
    """How many stars have each level 0..n-1, a star's level counting earlier stars not right of it.

    Stars are expected in increasing y, then increasing x.
    """
    stars = list(stars)
    if not stars:
        return []
    if any(x < 0 for x, _ in stars):
        raise ValueError("coordinates must be non-negative")
    width = max(x for x, _ in stars) + 1
    tree = [0] * (width + 1)
    levels = [0] * len(stars)
    for x, _ in stars:
        i, level = x + 1, 0
        while i > 0:
            level += tree[i]
            i -= i & -i
        levels[level] += 1
        i = x + 1
        while i <= width:
            tree[i] += 1
            i += i & -i
    return levels


class ColorBoard:
    """A board of unit segments 1..length, all painted colour 1, repainted in ranges."""

    def __init__(self, length: int, colors: int = 30) -> None:
        if length < 1 or colors < 1:
            raise ValueError("length and colour count must be positive")
        self.length = length
        self.colors = colors
        self._color = [1] * (4 * length)

    def _check(self, left: int, right: int) -> None:
        if not 1 <= left <= right <= self.length:
            raise ValueError("range must satisfy 1 <= left <= right <= length")

    def paint(self, left: int, right: int, color: int) -> None:
        """Paint segments left..right with the colour."""
        self._check(left, right)
        if not 1 <= color <= self.colors:
            raise ValueError("colour out of range")
        self._paint(1, 1, self.length, left, right, color)

    def _paint(self, node: int, lo: int, hi: int, left: int, right: int, color: int) -> None:
        if left <= lo and hi <= right:
            self._color[node] = color
            return
        if self._color[node]:
            self._color[2 * node] = self._color[2 * node + 1] = self._color[node]
            self._color[node] = 0
        mid = (lo + hi) // 2
        if left <= mid:
            self._paint(2 * node, lo, mid, left, right, color)
        if right > mid:
            self._paint(2 * node + 1, mid + 1, hi, left, right, color)

    def count_colors(self, left: int, right: int) -> int:
        """Number of distinct colours on segments left..right."""
        self._check(left, right)
        seen: set[int] = set()
        self._collect(1, 1, self.length, left, right, seen)
        return len(seen)

    def _collect(
        self, node: int, lo: int, hi: int, left: int, right: int, seen: set[int]
    ) -> None:
        if self._color[node]:
            seen.add(self._color[node])
            return
        mid = (lo + hi) // 2
        if left <= mid:
            self._collect(2 * node, lo, mid, left, right, seen)
        if right > mid:
            self._collect(2 * node + 1, mid + 1, hi, left, right, seen)


def argus_schedule(registrations: Iterable[tuple[int, int]], count: int) -> list[int]:
    """First count query numbers returned by queries (number, period), ties to the lower number."""
    heap = []
    for number, period in registrations:
        if period <= 0:
            raise ValueError("periods must be positive")
        heap.append((period, number, period))
    if count < 0:
        raise ValueError("count must be non-negative")
    if count and not heap:
        raise ValueError("no queries registered")
    heapq.heapify(heap)
    result = []
    for _ in range(count):
        time, number, period = heapq.heappop(heap)
        result.append(number)
        heapq.heappush(heap, (time + period, number, period))
    return result