"""Dynamic-programming problems over sequences, grids and knapsacks."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import product

_GAP = 0
_BASES = {"A": 1, "C": 2, "G": 3, "T": 4}
_SCORES = (
    (0, -3, -4, -2, -1),
    (-3, 5, -1, -2, -1),
    (-4, -1, 5, -3, -2),
    (-2, -2, -3, 5, -2),
    (-1, -1, -2, -2, 5),
)
_PAIRS = {"(": ")", "[": "]"}
_UNBOUNDED = 9999999


def communication_system(devices: Sequence[Sequence[tuple[int, int]]]) -> float:
    """Bandwidth-to-price ratio reached by greedily picking, device by device, one offer (bandwidth, price)."""
    bandwidth, price, rate = _UNBOUNDED, 0, 0.0
    for offers in devices:
        best_rate, best_bandwidth, best_price = 0.0, 0, 0
        for offer_bandwidth, offer_price in offers:
            total = price + offer_price
            if total <= 0:
                raise ValueError("prices must be positive")
            narrowest = min(bandwidth, offer_bandwidth)
            ratio = narrowest // total
            if ratio > best_rate:
                best_rate, best_bandwidth, best_price = float(ratio), narrowest, total
        rate, bandwidth, price = best_rate, best_bandwidth, best_price
    return rate


def _max_run(values: Sequence[int]) -> int:
    best = running = values[0]
    for value in values[1:]:
        running = running + value if running > 0 else value
        best = max(best, running)
    return best


def max_submatrix(matrix: Sequence[Sequence[int]]) -> int:
    """Largest sum of a non-empty rectangular submatrix."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix must not be empty")
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows must have equal length")
    best = None
    for top in range(len(matrix)):
        columns = [0] * width
        for row in matrix[top:]:
            columns = [c + v for c, v in zip(columns, row)]
            candidate = _max_run(columns)
            if best is None or candidate > best:
                best = candidate
    return best


def gene_similarity(first: str, second: str) -> int:
    """Best alignment score of two DNA strings under the fixed scoring table."""
    try:
        a = [_BASES[c] for c in first]
        b = [_BASES[c] for c in second]
    except KeyError as exc:
        raise ValueError(f"unknown base {exc.args[0]!r}") from None
    previous = [0]
    for base in b:
        previous.append(previous[-1] + _SCORES[_GAP][base])
    for row_base in a:
        current = [previous[0] + _SCORES[row_base][_GAP]]
        for j, base in enumerate(b, start=1):
            current.append(
                max(
                    previous[j - 1] + _SCORES[row_base][base],
                    current[j - 1] + _SCORES[_GAP][base],
                    previous[j] + _SCORES[row_base][_GAP],
                )
            )
        previous = current
    return previous[-1]


def complete_brackets(text: str) -> str:
    """Shortest regular bracket sequence containing the text as a subsequence."""
    n = len(text)
    cost = [[0] * (n + 1) for _ in range(n + 1)]
    split = [[0] * n for _ in range(n)]
    for i in range(n):
        cost[i][i] = 1
    for width in range(1, n):
        for left in range(n - width):
            right = left + width
            best = _UNBOUNDED
            if _PAIRS.get(text[left]) == text[right]:
                best = cost[left + 1][right - 1] if left + 1 <= right - 1 else 0
                split[left][right] = -1
            for middle in range(left, right):
                candidate = cost[left][middle] + cost[middle + 1][right]
                if best > candidate:
                    best = candidate
                    split[left][right] = middle
            cost[left][right] = best

    out: list[str] = []

    def emit(left: int, right: int) -> None:
        if left > right:
            return
        if left == right:
            if text[left] in "()":
                out.append("()")
            elif text[left] in "[]":
                out.append("[]")
        elif split[left][right] == -1:
            out.append(text[left])
            emit(left + 1, right - 1)
            out.append(text[right])
        else:
            emit(left, split[left][right])
            emit(split[left][right] + 1, right)

    emit(0, n - 1)
    return "".join(out)


def shopping_offers(
    items: Sequence[tuple[int, int, int]],
    offers: Iterable[tuple[dict[int, int], int]],
) -> int:
    """Cheapest price for items (code, quantity, unit price) using offers ({code: count}, price)."""
    if len(items) > 5:
        raise ValueError("at most five kinds of item")
    slot = {code: index for index, (code, _, _) in enumerate(items)}
    bundles = []
    for contents, price in offers:
        need = [0] * len(items)
        for code, amount in contents.items():
            if code in slot:
                need[slot[code]] = amount
        bundles.append((tuple(need), price))
    quantities = [quantity for _, quantity, _ in items]
    prices = [price for _, _, price in items]
    best: dict[tuple[int, ...], int] = {}
    for state in product(*(range(q + 1) for q in quantities)):
        cost = sum(s * p for s, p in zip(state, prices))
        for need, price in bundles:
            rest = tuple(s - n for s, n in zip(state, need))
            if all(r >= 0 for r in rest):
                cost = min(cost, best[rest] + price)
        best[state] = cost
    return best[tuple(quantities)]


def artillery_placement(grid: Sequence[str]) -> int:
    """Most guns placed on 'P' cells with no two within two cells in a row or column."""
    if not grid:
        return 0
    width = len(grid[0])
    masks = [m for m in range(1 << width) if not (m & (m << 1)) and not (m & (m << 2))]
    states: dict[tuple[int, int], int] = {(0, 0): 0}
    for row in grid:
        if len(row) != width:
            raise ValueError("grid rows must have equal length")
        hills = sum(1 << k for k, cell in enumerate(row) if cell == "H")
        following: dict[tuple[int, int], int] = {}
        for mask in masks:
            if mask & hills:
                continue
            guns = bin(mask).count("1")
            for (before, last), value in states.items():
                if mask & before or mask & last:
                    continue
                key = (last, mask)
                if following.get(key, -1) < value + guns:
                    following[key] = value + guns
        states = following
    return max(states.values(), default=0)


def domino_flips(dominoes: Sequence[tuple[int, int]]) -> int:
    """Fewest flips that make the difference between top and bottom sums smallest."""
    if not dominoes:
        raise ValueError("need at least one domino")
    first_top, first_bottom = dominoes[0]
    flips = {first_top: 0}
    if first_bottom != first_top:
        flips[first_bottom] = 1
    total = first_top + first_bottom
    for top, bottom in dominoes[1:]:
        total += top + bottom
        following: dict[int, int] = {}
        for value, count in flips.items():
            for added, extra in ((top, 0), (bottom, 1)):
                key = value + added
                if key not in following or count + extra < following[key]:
                    following[key] = count + extra
        flips = following
    half = total // 2
    low = max(v for v in flips if v <= half) if any(v <= half for v in flips) else None
    high = min(v for v in flips if v >= half) if any(v >= half for v in flips) else None
    if low is None:
        return flips[high]
    if high is None:
        return flips[low]
    low_gap, high_gap = total - 2 * low, 2 * high - total
    if low_gap < high_gap:
        return flips[low]
    if low_gap > high_gap:
        return flips[high]
    return min(flips[low], flips[high])


def investment(capital: int, years: int, bonds: Sequence[tuple[int, int]]) -> int:
    """Capital after reinvesting each year in bonds (value, yearly interest) bought in multiples of 1000."""
    units = []
    for value, interest in bonds:
        if value < 1000:
            raise ValueError("bond values must be at least 1000")
        units.append((value // 1000, interest))
    for _ in range(years):
        budget = capital // 1000
        earned = [0] * (budget + 1)
        for cost, interest in units:
            for k in range(cost, budget + 1):
                earned[k] = max(earned[k], earned[k - cost] + interest)
        capital += max(earned)
    return capital


def cowties_length(fields: Sequence[Sequence[tuple[int, int]]]) -> int:
    """Shortest closed tour through one point of each field in order, in hundredths, truncated."""
    if len(fields) < 2 or any(not f for f in fields):
        raise ValueError("need at least two non-empty fields")
    best = math.inf
    for start in fields[0]:
        reach = [math.dist(start, p) for p in fields[1]]
        for previous_field, field in zip(fields[1:], fields[2:]):
            reach = [
                min(r + math.dist(q, p) for r, q in zip(reach, previous_field))
                for p in field
            ]
        for r, p in zip(reach, fields[-1]):
            best = min(best, r + math.dist(p, start))
    return int(best * 100.0)


def smart_cows(cows: Iterable[tuple[int, int]]) -> int:
    """Largest total smartness plus funness over herds whose totals of each are non-negative."""
    best: dict[int, int] = {0: 0}
    for smart, fun in cows:
        following = dict(best)
        for total, f in best.items():
            key = total + smart
            if following.get(key, -math.inf) < f + fun:
                following[key] = f + fun
        best = following
    return max((s + f for s, f in best.items() if s >= 0 and f >= 0), default=0)


def gone_fishing(
    hours: int, fish: Sequence[int], decrease: Sequence[int], travel: Sequence[int]
) -> tuple[list[int], int]:
    """Minutes to spend at each lake and the fish expected, for the best plan."""
    lakes = len(fish)
    if lakes == 0 or len(decrease) != lakes or len(travel) != lakes - 1:
        raise ValueError("inconsistent lake data")
    slots = hours * 12
    elapsed = [0]
    for t in travel:
        elapsed.append(elapsed[-1] + t)
    best_plan, best_total = [0] * lakes, -1
    for reached in range(1, lakes + 1):
        left = slots - elapsed[reached - 1]
        if left < 0:
            break
        stock = list(fish[:reached])
        plan = [0] * lakes
        total = 0
        for _ in range(left):
            lake = max(range(reached), key=lambda i: (stock[i], -i))
            total += stock[lake]
            plan[lake] += 1
            stock[lake] = max(0, stock[lake] - decrease[lake])
        if total > best_total:
            best_plan, best_total = plan, total
    return [5 * p for p in best_plan], max(best_total, 0)