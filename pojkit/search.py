"""Backtracking searches with pruning."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from functools import lru_cache

_UNBOUNDED = 9999999
_MAX_HEIGHT = 1000
_VASE_BITS = 36


def _min_volume(layers: int) -> int:
    return layers * layers * (layers + 1) * (layers + 1) // 4


def birthday_cake(volume: int, layers: int) -> int:
    """Smallest exposed surface (without pi) of a cake of the given volume and layers, or 0."""
    if layers < 1:
        raise ValueError("need at least one layer")
    if volume < _min_volume(layers):
        return 0
    best = _UNBOUNDED

    def dfs(level: int, radius: int, height: int, left: int, surface: int) -> None:
        nonlocal best
        if surface + 2 * left // radius >= best:
            return
        if left < _min_volume(level):
            return
        if level == 0:
            if left == 0 and surface < best:
                best = surface
            return
        for r in range(radius - 1, level - 1, -1):
            if level == layers:
                surface = r * r
            tallest = min((left - _min_volume(level - 1)) // (r * r), height - 1)
            for h in range(tallest, level - 1, -1):
                dfs(level - 1, r, h, left - r * r * h, surface + 2 * r * h)

    top_radius = math.isqrt((volume - _min_volume(layers)) // layers) + 1
    dfs(layers, top_radius, _MAX_HEIGHT, volume, 0)
    return 0 if best == _UNBOUNDED else best


def min_stick_length(pieces: Sequence[int]) -> int:
    """Smallest original length for sticks of equal length cut into the given pieces."""
    if not pieces or any(p <= 0 for p in pieces):
        raise ValueError("pieces must be positive and non-empty")
    lengths = sorted(pieces, reverse=True)
    total = sum(lengths)
    used = [False] * len(lengths)

    def fits(target: int, sticks: int) -> bool:
        def search(partial: int, done: int, taken: int, start: int) -> bool:
            if done == sticks and taken == len(lengths):
                return True
            last = 0
            for i in range(start, len(lengths)):
                piece = lengths[i]
                if used[i] or partial + piece > target or piece == last:
                    continue
                last = piece
                used[i] = True
                if partial + piece == target:
                    ok = search(0, done + 1, taken + 1, 0)
                else:
                    ok = search(partial + piece, done, taken + 1, i + 1)
                used[i] = False
                if ok:
                    return True
                if start == 0:
                    return False
            return False

        return search(0, 0, 0, 0)

    for target in range(lengths[0], total + 1):
        if total % target == 0 and fits(target, total // target):
            return target
    return total


def vase_collection(vases: Iterable[tuple[int, int]]) -> int:
    """Largest k with k shapes and k decorations such that every pairing is owned."""
    rows = [0] * (_VASE_BITS + 1)
    for shape, decoration in vases:
        if not (1 <= shape <= _VASE_BITS and 1 <= decoration <= _VASE_BITS):
            raise ValueError("shapes and decorations run from 1 to 36")
        rows[shape] |= 1 << (decoration - 1)
    best = 0

    def dfs(last: int, chosen: int, common: int) -> None:
        nonlocal best
        if bin(common).count("1") < chosen:
            return
        best = max(best, chosen)
        for shape in range(last + 1, _VASE_BITS + 1):
            dfs(shape, chosen + 1, common & rows[shape])

    dfs(0, 0, (1 << _VASE_BITS) - 1)
    return best


def chessboard_placements(board: Sequence[str], pieces: int) -> int:
    """Ways to put pieces on '#' cells with no two in one row or column."""
    size = len(board)
    if any(len(row) != size for row in board):
        raise ValueError("board must be square")
    taken = [False] * size

    def dfs(row: int, left: int) -> int:
        if left == 0:
            return 1
        if row == size:
            return 0
        ways = 0
        for col in range(size):
            if not taken[col] and board[row][col] == "#":
                taken[col] = True
                ways += dfs(row + 1, left - 1)
                taken[col] = False
        return ways + dfs(row + 1, left)

    return dfs(0, pieces)


def is_interleaving(first: str, second: str, combined: str) -> bool:
    """Whether combined interleaves first and second keeping each one's order."""
    if len(combined) != len(first) + len(second):
        return False

    @lru_cache(maxsize=None)
    def match(a: int, b: int) -> bool:
        c = a + b
        if c == len(combined):
            return True
        if a < len(first) and first[a] == combined[c] and match(a + 1, b):
            return True
        return b < len(second) and second[b] == combined[c] and match(a, b + 1)

    result = match(0, 0)
    match.cache_clear()
    return result