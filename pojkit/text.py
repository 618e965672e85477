"""String transformations, decodings and enumerations."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator
from itertools import combinations

_UPPER = string.ascii_uppercase
_CAESAR = str.maketrans(_UPPER, _UPPER[-5:] + _UPPER[:-5])

_KEYBOARD_ROWS = ("1234567890-=", "QWERTYUIOP[]\\", "ASDFGHJKL;'", "ZXCVBNM,./")
_WERTYU = str.maketrans(
    "".join(row[1:] for row in _KEYBOARD_ROWS),
    "".join(row[:-1] for row in _KEYBOARD_ROWS),
)

_VOWELS = frozenset("aeiou")


def caesar_decode(line: str) -> str:
    """Shift every capital letter five places back; leave everything else alone."""
    return line.translate(_CAESAR)


def decode_messages(lines: Iterable[str]) -> Iterator[str]:
    """Decode each line that follows a START line, stopping at ENDOFINPUT."""
    stream = (line.rstrip("\r\n") for line in lines)
    for line in stream:
        if line == "ENDOFINPUT":
            return
        if line == "START":
            message = next(stream, None)
            if message is None:
                return
            yield caesar_decode(message)


def wertyu(text: str) -> str:
    """Undo typing with hands shifted one key to the right."""
    return text.translate(_WERTYU)


def count_decodings(digits: str) -> int:
    """Number of ways to read a digit string as letters coded 1..26."""
    if not digits or any(d not in string.digits for d in digits):
        raise ValueError("expected a non-empty string of digits")
    if digits[0] == "0":
        raise ValueError("a code cannot start with 0")
    previous, current = 1, 1
    for head, digit in zip(digits, digits[1:]):
        if head == "0" or head > "2" or (head == "2" and digit > "6"):
            previous = current
        elif digit == "0":
            previous, current = current, previous
        else:
            previous, current = current, previous + current
    return current


def _advance(items: list[str]) -> bool:
    pivot = next((i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]), None)
    if pivot is None:
        return False
    successor = next(j for j in range(len(items) - 1, pivot, -1) if items[j] > items[pivot])
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1 :] = reversed(items[pivot + 1 :])
    return True


def ordered_permutations(letters: str) -> Iterator[str]:
    """Distinct rearrangements of the letters in lexicographic order."""
    current = sorted(letters)
    while True:
        yield "".join(current)
        if not _advance(current):
            return


def barn_passwords(length: int, letters: Iterable[str]) -> Iterator[str]:
    """Passwords of sorted distinct letters of the given length that hold at least one vowel."""
    if length < 0:
        raise ValueError("length must be non-negative")
    pool = sorted(set(letters))
    for combo in combinations(pool, length):
        if _VOWELS.intersection(combo):
            yield "".join(combo)


def is_prefix_free(numbers: Iterable[str]) -> bool:
    """Whether no phone number is a prefix of another."""
    ordered = sorted(numbers)
    return not any(b.startswith(a) for a, b in zip(ordered, ordered[1:]))