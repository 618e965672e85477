"""String matching: predictive text, KMP and its variants, common substrings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}
_END_KEY = "1"


def predictive_text(
    dictionary: Iterable[tuple[str, int]], keys: str
) -> list[str | None]:
    """Most probable word prefix after each key press, or None where typing must be manual.

    The dictionary holds (word, frequency) pairs of lower-case words; a prefix
    is as probable as the summed frequencies of the words it starts. Keys are
    the digits 2-9, optionally ended by 1. Ties go to the alphabetically first
    prefix; once no prefix fits, every later press is manual too.
    """
    weight: Counter[str] = Counter()
    for word, frequency in dictionary:
        if not word or not word.isalpha() or not word.islower():
            raise ValueError(f"words must be lower-case letters: {word!r}")
        for end in range(1, len(word) + 1):
            weight[word[:end]] += frequency
    if keys.endswith(_END_KEY):
        keys = keys[: -len(_END_KEY)]
    try:
        letter_groups = [_KEYPAD[key] for key in keys]
    except KeyError as exc:
        raise ValueError(f"unknown key {exc.args[0]!r}") from None

    suggestions: list[str | None] = []
    candidates = {""}
    for letters in letter_groups:
        candidates = {
            prefix + letter
            for prefix in candidates
            for letter in letters
            if prefix + letter in weight
        }
        if candidates:
            suggestions.append(min(candidates, key=lambda p: (-weight[p], p)))
        else:
            suggestions.append(None)
    return suggestions


def prefix_function(pattern: Sequence[Hashable]) -> list[int]:
    """For each prefix, the length of its longest proper prefix that is also a suffix."""
    borders = [0] * len(pattern)
    matched = 0
    for i in range(1, len(pattern)):
        while matched and pattern[matched] != pattern[i]:
            matched = borders[matched - 1]
        if pattern[matched] == pattern[i]:
            matched += 1
        borders[i] = matched
    return borders


def string_power(text: str) -> int:
    """Largest n such that the text is some string repeated n times."""
    if not text:
        raise ValueError("text must not be empty")
    period = len(text) - prefix_function(text)[-1]
    return len(text) // period if len(text) % period == 0 else 1


def count_occurrences(pattern: str, text: str) -> int:
    """Number of possibly overlapping occurrences of the pattern in the text."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    borders = prefix_function(pattern)
    count = matched = 0
    for char in text:
        while matched and pattern[matched] != char:
            matched = borders[matched - 1]
        if pattern[matched] == char:
            matched += 1
        if matched == len(pattern):
            count += 1
            matched = borders[matched - 1]
    return count


def longest_common_substring(strings: Sequence[str]) -> str | None:
    """Longest substring shared by all strings, alphabetically first on ties, or None."""
    if not strings:
        raise ValueError("need at least one string")
    shortest = min(strings, key=len)
    for length in range(len(shortest), 0, -1):
        pieces = {shortest[i : i + length] for i in range(len(shortest) - length + 1)}
        shared = [p for p in pieces if all(p in other for other in strings)]
        if shared:
            return min(shared)
    return None


def _rank_prefixes(ranks: Sequence[int], width: int) -> list[list[int]]:
    rows = [[0] * width]
    for rank in ranks:
        row = rows[-1].copy()
        row[rank] += 1
        rows.append(row)
    return rows


def _signature(
    ranks: Sequence[int], prefixes: Sequence[Sequence[int]], start: int, end: int
) -> tuple[int, int]:
    """Counts of values equal to and smaller than ranks[end] among ranks[start:end]."""
    rank = ranks[end]
    low, high = prefixes[start], prefixes[end]
    equal = high[rank] - low[rank]
    smaller = sum(high[:rank]) - sum(low[:rank])
    return equal, smaller


def pattern_positions(sequence: Sequence[int], pattern: Sequence[int]) -> list[int]:
    """1-based starts of windows of the sequence whose values are ordered like the pattern."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    order = {value: rank for rank, value in enumerate(sorted(set(sequence) | set(pattern)))}
    width = len(order)
    text = [order[v] for v in sequence]
    pat = [order[v] for v in pattern]
    text_prefix = _rank_prefixes(text, width)
    pat_prefix = _rank_prefixes(pat, width)

    def pat_sig(start: int, end: int) -> tuple[int, int]:
        return _signature(pat, pat_prefix, start, end)

    def text_sig(start: int, end: int) -> tuple[int, int]:
        return _signature(text, text_prefix, start, end)

    size = len(pat)
    fail = [0] * (size + 1)
    matched = 0
    for i in range(1, size):
        while matched and pat_sig(0, matched) != pat_sig(i - matched, i):
            matched = fail[matched]
        if pat_sig(0, matched) == pat_sig(i - matched, i):
            matched += 1
        fail[i + 1] = matched

    positions = []
    matched = 0
    for i in range(len(text)):
        while matched and pat_sig(0, matched) != text_sig(i - matched, i):
            matched = fail[matched]
        if pat_sig(0, matched) == text_sig(i - matched, i):
            matched += 1
        if matched == size:
            positions.append(i - size + 2)
            matched = fail[matched]
    return positions