"""Integer puzzles: sequences, games, cubes and small closed forms."""

from __future__ import annotations

import math
from collections import Counter, defaultdict
from collections.abc import Iterable, Iterator
from itertools import count, islice

_GOLDEN_RATIO = (1 + math.sqrt(5.0)) / 2.0
_PI = 3.1415926
_HEX_MOVES = ((0, 1), (0, -1), (1, 1), (1, 0), (-1, 0), (-1, -1))


def nth_term(position: int) -> int:
    """Value at a 1-based position of the sequence 1, 1 2, 1 2 3, 1 2 3 4, ..."""
    if position < 1:
        raise ValueError("position must be at least 1")
    block = math.isqrt(2 * position)
    while block * (block + 1) // 2 > position:
        block -= 1
    rest = position - block * (block + 1) // 2
    return rest if rest else block


def first_player_wins(a: int, b: int) -> bool:
    """Whether the player to move wins Wythoff's game on piles of a and b stones."""
    if a < 0 or b < 0:
        raise ValueError("pile sizes must be non-negative")
    low, high = sorted((a, b))
    return low != int((high - low) * _GOLDEN_RATIO)


def _digit_sum(number: int) -> int:
    return sum(int(digit) for digit in str(number))


def self_numbers(limit: int = 10000) -> list[int]:
    """Positive numbers below limit that are not n plus the digit sum of n."""
    generated = {n + _digit_sum(n) for n in range(1, limit)}
    return [n for n in range(1, limit) if n not in generated]


def _ugly_numbers() -> Iterator[int]:
    ugly = [1]
    i2 = i3 = i5 = 0
    yield 1
    while True:
        following = min(ugly[i2] * 2, ugly[i3] * 3, ugly[i5] * 5)
        ugly.append(following)
        if following == ugly[i2] * 2:
            i2 += 1
        if following == ugly[i3] * 3:
            i3 += 1
        if following == ugly[i5] * 5:
            i5 += 1
        yield following


def nth_ugly_number(n: int) -> int:
    """The n-th number (1-based) whose only prime factors are 2, 3 and 5."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return next(islice(_ugly_numbers(), n - 1, None))


def perfect_cubes(limit: int) -> list[tuple[int, int, int, int]]:
    """All (a, b, c, d) with a**3 == b**3 + c**3 + d**3, 1 < b <= c <= d and a <= limit.

    Results are ordered by a, then by (b, c, d).
    """
    cubes = {a**3: a for a in range(6, limit + 1)}
    bound = limit**3
    found: dict[int, list[tuple[int, int, int]]] = defaultdict(list)
    b = 2
    while 3 * b**3 <= bound:
        c = b
        while b**3 + 2 * c**3 <= bound:
            for d in count(c):
                total = b**3 + c**3 + d**3
                if total > bound:
                    break
                a = cubes.get(total)
                if a is not None:
                    found[a].append((b, c, d))
            c += 1
        b += 1
    return [(a, *triple) for a in sorted(found) for triple in found[a]]


def gnawed_diameter(outer: float, volume: float) -> float:
    """Inner diameter left when a beaver gnaws the given volume from a trunk of diameter outer."""
    remaining = outer**3 - 6 * volume / _PI
    if remaining < 0:
        raise ValueError("volume exceeds what the trunk can lose")
    return remaining ** (1.0 / 3.0)


def cow_multiplication(a: int, b: int) -> int:
    """Sum of products of every digit of a with every digit of b."""
    if a < 0 or b < 0:
        raise ValueError("operands must be non-negative")
    return sum(int(x) * int(y) for x in str(a) for y in str(b))


def hexagon_walks(steps: int) -> int:
    """Number of walks of the given length on a honeycomb that end where they started."""
    if steps < 0:
        raise ValueError("steps must be non-negative")
    walks: Counter[tuple[int, int]] = Counter({(0, 0): 1})
    for _ in range(steps):
        following: Counter[tuple[int, int]] = Counter()
        for (x, y), ways in walks.items():
            for dx, dy in _HEX_MOVES:
                following[(x + dx, y + dy)] += ways
        walks = following
    return walks[(0, 0)]


def moo_volume(positions: Iterable[int]) -> int:
    """Total volume of all moos: twice the sum of distances over all pairs of cows."""
    total = 0
    prefix = 0
    for index, position in enumerate(sorted(positions)):
        total += position * index - prefix
        prefix += position
    return 2 * total