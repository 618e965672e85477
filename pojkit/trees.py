"""Tree problems: common ancestors, centroids, dominating sets and colouring order."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from fractions import Fraction

Edge = tuple[int, int]


def _adjacency(node_count: int, edges: Iterable[Edge]) -> dict[int, list[int]]:
    edges = list(edges)
    if node_count < 1:
        raise ValueError("need at least one node")
    if len(edges) != node_count - 1:
        raise ValueError("a tree on n nodes has n - 1 edges")
    adjacency: dict[int, list[int]] = {node: [] for node in range(1, node_count + 1)}
    for a, b in edges:
        if not (1 <= a <= node_count and 1 <= b <= node_count):
            raise ValueError("edge end lies outside the tree")
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def _rooted(
    adjacency: dict[int, list[int]], root: int
) -> tuple[dict[int, int | None], list[int]]:
    parent: dict[int, int | None] = {root: None}
    order = [root]
    stack = [root]
    while stack:
        node = stack.pop()
        for neighbour in adjacency[node]:
            if neighbour not in parent:
                parent[neighbour] = node
                order.append(neighbour)
                stack.append(neighbour)
    if len(order) != len(adjacency):
        raise ValueError("edges do not form a tree")
    return parent, order


def _children(
    adjacency: dict[int, list[int]], parent: dict[int, int | None], node: int
) -> list[int]:
    return [n for n in adjacency[node] if parent[n] == node]


def _directed_parents(node_count: int, edges: Sequence[Edge]) -> dict[int, int]:
    parent: dict[int, int] = {}
    for p, child in edges:
        if child in parent:
            raise ValueError("a node has two parents")
        parent[child] = p
    _rooted(_adjacency(node_count, edges), 1)
    return parent


def nearest_common_ancestor(edges: Iterable[Edge], first: int, second: int) -> int:
    """Deepest node that is an ancestor of both nodes; edges are (parent, child)."""
    edges = list(edges)
    node_count = len(edges) + 1
    parent = _directed_parents(node_count, edges)
    for node in (first, second):
        if not 1 <= node <= node_count:
            raise ValueError("node lies outside the tree")
    lineage = set()
    node: int | None = first
    while node is not None:
        lineage.add(node)
        node = parent.get(node)
    node = second
    while node not in lineage:
        node = parent[node]
    return node


def _balances(node_count: int, edges: Iterable[Edge]) -> dict[int, int]:
    adjacency = _adjacency(node_count, edges)
    parent, order = _rooted(adjacency, 1)
    size = dict.fromkeys(adjacency, 1)
    for node in reversed(order[1:]):
        size[parent[node]] += size[node]
    balance = {}
    for node in adjacency:
        parts = [size[c] for c in _children(adjacency, parent, node)]
        if parent[node] is not None:
            parts.append(node_count - size[node])
        balance[node] = max(parts, default=0)
    return balance


def balancing_node(node_count: int, edges: Iterable[Edge]) -> tuple[int, int]:
    """Node whose removal leaves the smallest largest component, and that size; lowest node on ties."""
    balance = _balances(node_count, edges)
    node = min(balance, key=lambda n: (balance[n], n))
    return node, balance[node]


def cutting_points(node_count: int, edges: Iterable[Edge]) -> list[int]:
    """Nodes whose removal leaves no component larger than half the tree, in increasing order."""
    balance = _balances(node_count, edges)
    return [n for n in sorted(balance) if balance[n] <= node_count // 2]


def min_towers(node_count: int, edges: Iterable[Edge]) -> int:
    """Fewest towers on nodes so that every node has a tower on it or on a neighbour."""
    adjacency = _adjacency(node_count, edges)
    parent, order = _rooted(adjacency, 1)
    unreachable = node_count + 1
    tower: dict[int, int] = {}
    covered: dict[int, int] = {}
    watched: dict[int, int] = {}
    for node in reversed(order):
        children = _children(adjacency, parent, node)
        tower[node] = 1 + sum(min(tower[c], covered[c], watched[c]) for c in children)
        base = sum(min(tower[c], covered[c]) for c in children)
        watched[node] = base
        if children:
            covered[node] = base + min(max(0, tower[c] - covered[c]) for c in children)
        else:
            covered[node] = unreachable
    return min(tower[1], covered[1])


def color_tree_cost(costs: Sequence[int], edges: Iterable[Edge], root: int) -> int:
    """Least total of cost times finishing time when colouring a tree parents first; edges are (parent, child)."""
    edges = list(edges)
    node_count = len(costs)
    if not 1 <= root <= node_count:
        raise ValueError("root lies outside the tree")
    head = _directed_parents(node_count, edges)
    if root in head:
        raise ValueError("root must not have a parent")
    weight = {i: c for i, c in enumerate(costs, start=1)}
    size = dict.fromkeys(weight, 1)
    total = dict(weight)
    merged: set[int] = set()

    def find(node: int) -> int:
        path = []
        up = head[node]
        while up in merged:
            path.append(up)
            up = head[up]
        for step in path:
            head[step] = up
        head[node] = up
        return up

    heap = [(-Fraction(c), -i, i) for i, c in weight.items()]
    heapq.heapify(heap)
    while heap:
        average, _, node = heapq.heappop(heap)
        if node in merged or node == root or -average != Fraction(weight[node], size[node]):
            continue
        merged.add(node)
        target = find(node)
        total[target] += weight[node] * size[target] + total[node]
        weight[target] += weight[node]
        size[target] += size[node]
        heapq.heappush(heap, (-Fraction(weight[target], size[target]), -target, target))
    return total[root]