"""Greedy and single-pass counting problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

# Remaining 3x3 parcels in a box -> (2x2 parcels that still fit, free unit cells).
_THREES_REMAINDER = {1: (5, 27), 2: (3, 18), 3: (1, 9)}


def count_parcels(counts: Sequence[int]) -> int:
    """Fewest 6x6 boxes that hold the given numbers of 1x1 .. 6x6 square parcels."""
    if len(counts) != 6:
        raise ValueError("expected six parcel counts")
    if any(c < 0 for c in counts):
        raise ValueError("parcel counts must be non-negative")
    ones, twos, threes, fours, fives, sixes = counts

    boxes = sixes + fives + fours
    ones = max(0, ones - 11 * fives)
    if twos - 5 * fours < 0:
        ones = max(0, ones - 20 * fours + 4 * twos)
        twos = 0
    else:
        twos -= 5 * fours

    boxes += threes // 4
    threes %= 4
    if threes:
        boxes += 1
        fitting, free = _THREES_REMAINDER[threes]
        used = min(fitting, twos)
        twos = max(0, twos - fitting)
        ones = max(0, ones - (free - 4 * used))

    boxes += twos // 9
    twos %= 9
    if twos:
        boxes += 1
        ones = max(0, ones - 36 + 4 * twos)

    return boxes + -(-ones // 36)


def lost_cows(smaller_counts: Iterable[int]) -> list[int]:
    """Brands of cows in line, given for each cow after the first how many earlier ones have smaller brands."""
    ranks = [1]
    for seen, smaller in enumerate(smaller_counts, start=1):
        if not 0 <= smaller <= seen:
            raise ValueError("count of smaller cows out of range")
        rank = smaller + 1
        ranks = [r + 1 if r >= rank else r for r in ranks]
        ranks.append(rank)
    return ranks


def guaranteed_wins(players: int, cards: Sequence[int]) -> int:
    """Tricks certainly won holding the given cards, each player holding as many from 1..players*len(cards)."""
    top = players * len(cards)
    taken = set(cards)
    if len(taken) != len(cards) or any(not 1 <= c <= top for c in cards):
        raise ValueError("cards must be distinct and within the deck")
    for index, card in enumerate(sorted(cards)):
        beater = next((c for c in range(card + 1, top + 1) if c not in taken), None)
        if beater is None:
            return len(cards) - index
        taken.add(beater)
    return 0


def cover_interval(shifts: Iterable[tuple[int, int]], total: int) -> int | None:
    """Fewest shifts (start, end) covering slots 1..total, or None when impossible."""
    if total < 1:
        return 0
    ordered = sorted(shifts)
    if not ordered or ordered[0][0] > 1:
        return None
    covered, reach, used, index = 0, 1, 0, 0
    while covered < total:
        while index < len(ordered) and ordered[index][0] <= covered + 1:
            reach = max(reach, ordered[index][1])
            index += 1
        if reach == covered:
            return None
        used += 1
        covered = reach
    return used


def count_turns(values: Iterable[int]) -> int:
    """Length of the longest up-down alternating subsequence, counted from a start below -1's first rise."""
    turns = 0
    previous = -1
    rising = True
    for value in values:
        if (rising and previous < value) or (not rising and previous > value):
            turns += 1
            rising = not rising
        previous = value
    return turns


def max_alternating_sum(strengths: Iterable[int]) -> int:
    """Largest s1 - s2 + s3 - ... over subsequences of the strengths."""
    plus = minus = 0
    for strength in strengths:
        plus, minus = max(plus, minus + strength), max(minus, plus - strength)
    return max(plus, minus)