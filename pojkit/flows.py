"""Maximum flow and the problems it solves: plugs and dual-core scheduling."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Hashable, Iterable, Sequence


class FlowNetwork:
    """A directed network with capacities on which maximum flows can be computed."""

    def __init__(self) -> None:
        self._index: dict[Hashable, int] = {}
        self._heads: list[list[int]] = []
        self._targets: list[int] = []
        self._capacities: list[int] = []

    def _node(self, name: Hashable) -> int:
        if name not in self._index:
            self._index[name] = len(self._heads)
            self._heads.append([])
        return self._index[name]

    def add_edge(self, source: Hashable, target: Hashable, capacity: int) -> None:
        """Add a directed edge of the given capacity."""
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        u, v = self._node(source), self._node(target)
        self._heads[u].append(len(self._targets))
        self._targets.append(v)
        self._capacities.append(capacity)
        self._heads[v].append(len(self._targets))
        self._targets.append(u)
        self._capacities.append(0)

    def _levels(self, residual: list[int], s: int, t: int) -> list[int] | None:
        level = [-1] * len(self._heads)
        level[s] = 0
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for edge in self._heads[u]:
                v = self._targets[edge]
                if residual[edge] > 0 and level[v] < 0:
                    level[v] = level[u] + 1
                    queue.append(v)
        return level if level[t] >= 0 else None

    def _blocking_flow(self, residual: list[int], level: list[int], s: int, t: int) -> int:
        pointer = [0] * len(self._heads)
        total = 0
        while True:
            path: list[int] = []
            u = s
            while u != t:
                heads = self._heads[u]
                while pointer[u] < len(heads):
                    edge = heads[pointer[u]]
                    v = self._targets[edge]
                    if residual[edge] > 0 and level[v] == level[u] + 1:
                        break
                    pointer[u] += 1
                if pointer[u] < len(heads):
                    edge = heads[pointer[u]]
                    path.append(edge)
                    u = self._targets[edge]
                    continue
                if u == s:
                    return total
                level[u] = -1
                edge = path.pop()
                u = self._targets[edge ^ 1]
                pointer[u] += 1
            push = min(residual[edge] for edge in path)
            for edge in path:
                residual[edge] -= push
                residual[edge ^ 1] += push
            total += push

    def max_flow(self, source: Hashable, sink: Hashable) -> int:
        """Value of a maximum flow from source to sink; the network itself is left unchanged."""
        if source == sink:
            raise ValueError("source and sink must differ")
        if source not in self._index or sink not in self._index:
            return 0
        s, t = self._index[source], self._index[sink]
        residual = list(self._capacities)
        flow = 0
        while (level := self._levels(residual, s, t)) is not None:
            flow += self._blocking_flow(residual, level, s, t)
        return flow


_SOURCE = ("source",)
_SINK = ("sink",)


def unplugged_devices(
    receptacles: Iterable[str],
    devices: Sequence[tuple[str, str]],
    adapters: Iterable[tuple[str, str]],
) -> int:
    """Fewest devices (name, plug) left unplugged; an adapter (a, b) takes plug a into receptacle b."""
    network = FlowNetwork()
    for kind, amount in Counter(receptacles).items():
        network.add_edge(("type", kind), _SINK, amount)
    for index, (_, plug) in enumerate(devices):
        network.add_edge(_SOURCE, ("device", index), 1)
        network.add_edge(("device", index), ("type", plug), 1)
    unlimited = len(devices)
    for plug, receptacle in adapters:
        network.add_edge(("type", plug), ("type", receptacle), unlimited)
    return len(devices) - network.max_flow(_SOURCE, _SINK)


def dual_core_cost(
    costs: Sequence[tuple[int, int]], edges: Iterable[tuple[int, int, int]]
) -> int:
    """Least total cost to run modules (cost on core A, cost on core B) plus exchange costs between cores."""
    network = FlowNetwork()
    sink = len(costs) + 1
    network.add_edge(0, sink, 0)
    for module, (on_a, on_b) in enumerate(costs, start=1):
        network.add_edge(0, module, on_a)
        network.add_edge(module, sink, on_b)
    for a, b, weight in edges:
        if not (1 <= a <= len(costs) and 1 <= b <= len(costs)):
            raise ValueError("edge refers to an unknown module")
        network.add_edge(a, b, weight)
        network.add_edge(b, a, weight)
    return network.max_flow(0, sink)