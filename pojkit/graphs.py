"""Graph problems: spanning trees, semi-connectivity and ordering by constraints."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Iterable, Sequence


def _check_square(distances: Sequence[Sequence[int]]) -> int:
    size = len(distances)
    if any(len(row) != size for row in distances):
        raise ValueError("distance matrix must be square")
    return size


def road_cost(
    distances: Sequence[Sequence[int]], existing: Iterable[tuple[int, int]]
) -> int:
    """Least total length of new roads connecting all villages, given already built roads (1-based)."""
    size = _check_square(distances)
    parent = list(range(size))

    def find(x: int) -> int:
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def union(x: int, y: int) -> bool:
        rx, ry = find(x), find(y)
        if rx == ry:
            return False
        parent[rx] = ry
        return True

    built: set[tuple[int, int]] = set()
    for a, b in existing:
        if not (1 <= a <= size and 1 <= b <= size):
            raise ValueError("road end lies outside the map")
        union(a - 1, b - 1)
        built.update({(a - 1, b - 1), (b - 1, a - 1)})
    candidates = sorted(
        (distances[i][j], i, j)
        for i in range(size)
        for j in range(i + 1, size)
        if distances[i][j] and (i, j) not in built
    )
    return sum(length for length, i, j in candidates if union(i, j))


def longest_highway(distances: Sequence[Sequence[int]]) -> int:
    """Length of the longest highway in a minimum spanning network of the towns."""
    size = _check_square(distances)
    if size == 0:
        return 0
    reach = [math.inf] * size
    reach[0] = 0
    joined = [False] * size
    longest = 0
    for _ in range(size):
        town = min((t for t in range(size) if not joined[t]), key=lambda t: reach[t])
        joined[town] = True
        longest = max(longest, reach[town])
        for other, length in enumerate(distances[town]):
            if not joined[other] and length < reach[other]:
                reach[other] = length
    return int(longest)


def _components(node_count: int, adjacency: dict[int, list[int]]) -> list[int]:
    order: list[int] = []
    visited = [False] * node_count
    for start in range(node_count):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            following = next((n for n in neighbours if not visited[n]), None)
            if following is None:
                stack.pop()
                order.append(node)
            else:
                visited[following] = True
                stack.append((following, iter(adjacency[following])))
    reverse: dict[int, list[int]] = defaultdict(list)
    for node, targets in adjacency.items():
        for target in targets:
            reverse[target].append(node)
    component = [-1] * node_count
    label = 0
    for start in reversed(order):
        if component[start] >= 0:
            continue
        component[start] = label
        stack = [start]
        while stack:
            node = stack.pop()
            for source in reverse[node]:
                if component[source] < 0:
                    component[source] = label
                    stack.append(source)
        label += 1
    return component


def is_semi_connected(node_count: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether for every pair of nodes one can reach the other along the directed edges (1-based)."""
    adjacency: dict[int, list[int]] = defaultdict(list)
    for a, b in edges:
        if not (1 <= a <= node_count and 1 <= b <= node_count):
            raise ValueError("edge end lies outside the graph")
        adjacency[a - 1].append(b - 1)
    component = _components(node_count, adjacency)
    groups = max(component, default=-1) + 1
    condensed: dict[int, set[int]] = defaultdict(set)
    indegree = [0] * groups
    for node, targets in list(adjacency.items()):
        for target in targets:
            a, b = component[node], component[target]
            if a != b and b not in condensed[a]:
                condensed[a].add(b)
                indegree[b] += 1
    ready = [g for g in range(groups) if indegree[g] == 0]
    while ready:
        if len(ready) > 1:
            return False
        group = ready.pop()
        for following in condensed[group]:
            indegree[following] -= 1
            if indegree[following] == 0:
                ready.append(following)
    return True


def label_balls(count: int, constraints: Iterable[tuple[int, int]]) -> list[int] | None:
    """Balls ordered from lightest to heaviest so that each (a, b) puts a before b, or None on a cycle.

    Balls are visited in increasing number, heavier to lighter, and listed in
    the order their depth-first searches finish.
    """
    lighter: dict[int, set[int]] = defaultdict(set)
    for a, b in constraints:
        if not (1 <= a <= count and 1 <= b <= count):
            raise ValueError("ball number out of range")
        lighter[b].add(a)
    state = [0] * (count + 1)
    finished: list[int] = []
    for start in range(1, count + 1):
        if state[start]:
            continue
        state[start] = 1
        stack = [(start, iter(sorted(lighter[start])))]
        while stack:
            ball, neighbours = stack[-1]
            advanced = False
            for other in neighbours:
                if state[other] == 1:
                    return None
                if state[other] == 0:
                    state[other] = 1
                    stack.append((other, iter(sorted(lighter[other]))))
                    advanced = True
                    break
            if not advanced:
                stack.pop()
                state[ball] = 2
                finished.append(ball)
    return finished