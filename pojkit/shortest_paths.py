"""Single-source shortest paths: trading for a dowry, trails home and tree costs."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

Edge = tuple[int, int, int]


@dataclass(frozen=True)
class Good:
    """An item for sale: its price, its owner's level and discounted prices given other items."""

    price: int
    level: int
    substitutes: Mapping[int, int] = field(default_factory=dict)


def _adjacency(node_count: int, edges: Iterable[Edge]) -> dict[int, dict[int, int]]:
    adjacency: dict[int, dict[int, int]] = defaultdict(dict)
    for a, b, weight in edges:
        if not (1 <= a <= node_count and 1 <= b <= node_count):
            raise ValueError("edge end lies outside the graph")
        if weight < 0:
            raise ValueError("edge weights must be non-negative")
        for x, y in ((a, b), (b, a)):
            if y not in adjacency[x] or weight < adjacency[x][y]:
                adjacency[x][y] = weight
    return adjacency


def _dijkstra(adjacency: Mapping[int, Mapping[int, int]], source: int) -> dict[int, int]:
    distance = {source: 0}
    heap = [(0, source)]
    done: set[int] = set()
    while heap:
        dist, node = heapq.heappop(heap)
        if node in done:
            continue
        done.add(node)
        for neighbour, weight in adjacency.get(node, {}).items():
            candidate = dist + weight
            if candidate < distance.get(neighbour, math.inf):
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distance


def _cheapest(goods: Sequence[Good], low: int, high: int) -> int:
    def allowed(item: int) -> bool:
        return low <= goods[item - 1].level <= high

    distance = {1: 0}
    heap = [(0, 1)]
    done: set[int] = set()
    best = math.inf
    while heap:
        spent, item = heapq.heappop(heap)
        if item in done:
            continue
        done.add(item)
        best = min(best, spent + goods[item - 1].price)
        for other, price in goods[item - 1].substitutes.items():
            if other in done or not allowed(other):
                continue
            candidate = spent + price
            if candidate < distance.get(other, math.inf):
                distance[other] = candidate
                heapq.heappush(heap, (candidate, other))
    return int(best)


def min_dowry(level_gap: int, goods: Sequence[Good]) -> int:
    """Least money to obtain good 1 trading only with owners whose levels differ by at most level_gap."""
    if level_gap < 0:
        raise ValueError("level gap must be non-negative")
    if not goods:
        raise ValueError("need at least one good")
    for good in goods:
        if any(not 1 <= item <= len(goods) for item in good.substitutes):
            raise ValueError("substitute refers to an unknown good")
    top = goods[0].level
    return min(
        _cheapest(goods, low, low + level_gap) for low in range(top - level_gap, top + 1)
    )


def shortest_distance(node_count: int, edges: Iterable[Edge]) -> int | None:
    """Length of the shortest path from node node_count to node 1 over undirected edges, or None."""
    if node_count < 1:
        raise ValueError("need at least one node")
    distance = _dijkstra(_adjacency(node_count, edges), 1)
    return distance.get(node_count)


def christmas_tree_cost(weights: Sequence[int], edges: Iterable[Edge]) -> int | None:
    """Sum over nodes of weight times distance from node 1, or None when a node is unreachable."""
    node_count = len(weights)
    if node_count == 0:
        return 0
    distance = _dijkstra(_adjacency(node_count, edges), 1)
    if len(distance) < node_count:
        return None
    return sum(distance[node] * weight for node, weight in enumerate(weights, start=1))