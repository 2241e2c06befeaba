"""Single-source sweeps and the all-pairs path index.

Each sweep owns its distance and predecessor tables and only reads the
graph, so sweeps from different roots never interfere. Ties between equal
length paths go to whichever predecessor is discovered first under the
graph's neighbour order.
"""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal

from wordladder.infrastructure.graph.engine import Graph

type Algorithm = Literal["bfs", "dijkstra"]


@dataclass
class Sweep:
    """Distances and predecessors from one root to every reachable vertex."""

    root: str
    distances: dict[str, int] = field(default_factory=dict)
    predecessors: dict[str, str | None] = field(default_factory=dict)

    def path_to(self, target: str) -> tuple[str, ...] | None:
        """Follow predecessors back from *target* to the root, then reverse.

        Returns None when *target* was not reached.
        """
        if target not in self.predecessors:
            return None
        steps: list[str] = []
        current: str | None = target
        while current is not None:
            steps.append(current)
            current = self.predecessors[current]
        steps.reverse()
        return tuple(steps)


def bfs_sweep(graph: Graph, root: str) -> Sweep:
    """Breadth-first layering from *root*. O(V + E)."""
    sweep = Sweep(root=root)
    if root not in graph:
        return sweep
    sweep.distances[root] = 0
    sweep.predecessors[root] = None
    queue: deque[str] = deque([root])
    while queue:
        current = queue.popleft()
        next_distance = sweep.distances[current] + 1
        for neighbor in graph.neighbors(current):
            if neighbor not in sweep.distances:
                sweep.distances[neighbor] = next_distance
                sweep.predecessors[neighbor] = current
                queue.append(neighbor)
    return sweep


def dijkstra_sweep(graph: Graph, root: str) -> Sweep:
    """Dijkstra with uniform edge weight 1 on a binary heap.

    Heap entries carry a discovery counter so equal distances pop in
    discovery order, matching the breadth-first tie-breaking.
    """
    sweep = Sweep(root=root)
    if root not in graph:
        return sweep
    sweep.distances[root] = 0
    sweep.predecessors[root] = None
    settled: set[str] = set()
    counter = 0
    heap: list[tuple[int, int, str]] = [(0, counter, root)]
    while heap:
        distance, _, current = heapq.heappop(heap)
        if current in settled:
            continue
        settled.add(current)
        for neighbor in graph.neighbors(current):
            if neighbor in settled:
                continue
            candidate = distance + 1
            if candidate < sweep.distances.get(neighbor, candidate + 1):
                sweep.distances[neighbor] = candidate
                sweep.predecessors[neighbor] = current
                counter += 1
                heapq.heappush(heap, (candidate, counter, neighbor))
    return sweep


SWEEPS: dict[str, Callable[[Graph, str], Sweep]] = {
    "bfs": bfs_sweep,
    "dijkstra": dijkstra_sweep,
}


class PathIndex:
    """One shortest path per reachable ordered pair ``(source, target)``.

    Built wholesale from a graph snapshot. Records the graph version it
    was computed at; it never follows later graph mutations.
    """

    def __init__(self, version: int) -> None:
        self.version = version
        self._paths: dict[tuple[str, str], tuple[str, ...]] = {}
        self._roots: set[str] = set()

    @classmethod
    def build(cls, graph: Graph, *, algorithm: Algorithm = "bfs") -> PathIndex:
        """Run one sweep per vertex and record every reachable path."""
        sweep_fn = SWEEPS[algorithm]
        index = cls(graph.version)
        for root in graph.all_vertices():
            index.record(sweep_fn(graph, root))
        return index

    def record(self, sweep: Sweep) -> None:
        """Store the paths of one sweep. Unreached targets are left out."""
        self._roots.add(sweep.root)
        for target in sweep.predecessors:
            path = sweep.path_to(target)
            if path is not None:
                self._paths[(sweep.root, target)] = path

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, pair: object) -> bool:
        return pair in self._paths

    def knows(self, word: str) -> bool:
        """Whether *word* was a vertex when the index was built."""
        return word in self._roots

    def path(self, source: str, target: str) -> tuple[str, ...] | None:
        return self._paths.get((source, target))

    def distance(self, source: str, target: str) -> int | None:
        path = self._paths.get((source, target))
        if path is None:
            return None
        return len(path) - 1
