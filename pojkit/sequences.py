"""Subsequence problems: chains, decreasing runs and palindromes."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable


def _longest_increasing(values: Iterable[int], strict: bool = True) -> int:
    place = bisect_left if strict else bisect_right
    tails: list[int] = []
    for value in values:
        position = place(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def wooden_sticks(sticks: Iterable[tuple[int, int]]) -> int:
    """Fewest machine setups to process sticks given as (length, weight)."""
    weights = [weight for _, weight in sorted(sticks)]
    return _longest_increasing((-w for w in weights), strict=True)


def buy_low(prices: Iterable[int]) -> tuple[int, int]:
    """Length of the longest strictly falling price run and the number of distinct such runs."""
    entries: list[tuple[int, int, int]] = []
    for price in prices:
        length, ways = 1, 1
        for earlier, earlier_length, earlier_ways in reversed(entries):
            if earlier > price and earlier_length + 1 > length:
                length, ways = earlier_length + 1, earlier_ways
            elif earlier > price and earlier_length + 1 == length:
                ways += earlier_ways
            elif earlier == price:
                if length == 1:
                    ways = 0
                break
        entries.append((price, length, ways))
    best = max((length for _, length, _ in entries), default=0)
    return best, sum(ways for _, length, ways in entries if length == best)


def longest_increasing(values: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    return _longest_increasing(values, strict=True)


def nested_dolls(dolls: Iterable[tuple[int, int]]) -> int:
    """Fewest nested dolls left when dolls (width, height) nest strictly in both."""
    heights = [height for _, height in sorted(dolls, key=lambda d: (d[0], -d[1]))]
    return _longest_increasing((-h for h in heights), strict=False)


def palindrome_insertions(text: str) -> int:
    """Fewest characters to insert to make the text a palindrome."""
    backwards = text[::-1]
    previous = [0] * (len(text) + 1)
    for char in text:
        current = [0]
        for j, other in enumerate(backwards):
            if char == other:
                current.append(previous[j] + 1)
            else:
                current.append(max(current[j], previous[j + 1]))
        previous = current
    return len(text) - previous[-1]