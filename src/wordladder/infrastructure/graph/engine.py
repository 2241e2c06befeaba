"""Graph — undirected, unweighted vertex set with symmetric adjacency.

Vertices are string labels. Each label receives a stable integer handle
on insertion; adjacency is a mapping from handle to the set of neighbour
handles. Removing a vertex never renumbers the others, so there is no
index shifting to get wrong.

INVARIANT: ``b in adj[a]`` iff ``a in adj[b]``, and ``a not in adj[a]``.
INVARIANT: ``len(adj) == len(vertices)``.

Every operation on a missing vertex returns a sentinel (False, [] or
None) instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import networkx as nx

logger = logging.getLogger(__name__)


class Graph:
    """Symmetric adjacency over unique string labels."""

    def __init__(self, *, allow_empty_labels: bool = False) -> None:
        self._allow_empty_labels = allow_empty_labels
        # Insertion-ordered; handles are monotonic, so handle order is index order.
        self._handles: dict[str, int] = {}
        self._labels: dict[int, str] = {}
        self._adj: dict[int, set[int]] = {}
        self._next_handle = 0
        self._version = 0

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def version(self) -> int:
        """Counter bumped by every successful mutation."""
        return self._version

    def __len__(self) -> int:
        return len(self._handles)

    def __contains__(self, label: object) -> bool:
        return label in self._handles

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._handles))

    def has_vertex(self, label: str | None) -> bool:
        return label is not None and label in self._handles

    def index_of(self, label: str) -> int | None:
        """Positional index of *label* among present vertices, or None."""
        if label not in self._handles:
            return None
        return list(self._handles).index(label)

    def all_vertices(self) -> list[str]:
        """Snapshot of all labels in insertion order."""
        return list(self._handles)

    def neighbors(self, label: str) -> list[str]:
        """Adjacent labels in ascending index order. Empty if *label* is absent."""
        handle = self._handles.get(label)
        if handle is None:
            return []
        return [self._labels[h] for h in sorted(self._adj[handle])]

    def degree(self, label: str) -> int | None:
        handle = self._handles.get(label)
        if handle is None:
            return None
        return len(self._adj[handle])

    def is_adjacent(self, a: str, b: str) -> bool:
        if a == b:
            return False
        ha = self._handles.get(a)
        hb = self._handles.get(b)
        if ha is None or hb is None:
            return False
        return hb in self._adj[ha]

    def edge_count(self) -> int:
        return sum(len(nbrs) for nbrs in self._adj.values()) // 2

    def edges(self) -> list[tuple[str, str]]:
        """Each undirected edge once, endpoints in index order."""
        pairs: list[tuple[str, str]] = []
        for handle, nbrs in self._adj.items():
            for other in sorted(nbrs):
                if other > handle:
                    pairs.append((self._labels[handle], self._labels[other]))
        return pairs

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, label: str | None) -> bool:
        """Append *label* with no edges. False on None, empty or duplicate labels."""
        if label is None or (not label and not self._allow_empty_labels):
            return False
        if label in self._handles:
            return False
        handle = self._next_handle
        self._next_handle += 1
        self._handles[label] = handle
        self._labels[handle] = label
        self._adj[handle] = set()
        self._version += 1
        logger.debug("Added vertex %s", label)
        return True

    def remove_vertex(self, label: str) -> bool:
        """Remove *label* and every incident edge. False if absent."""
        handle = self._handles.pop(label, None)
        if handle is None:
            return False
        for other in self._adj.pop(handle):
            self._adj[other].discard(handle)
        del self._labels[handle]
        self._version += 1
        logger.debug("Removed vertex %s", label)
        return True

    def add_edge(self, a: str, b: str) -> bool:
        """Connect *a* and *b* in both directions. Re-adding is a successful no-op."""
        pair = self._endpoints(a, b)
        if pair is None:
            return False
        ha, hb = pair
        if hb not in self._adj[ha]:
            self._adj[ha].add(hb)
            self._adj[hb].add(ha)
            self._version += 1
            logger.debug("Added edge %s - %s", a, b)
        return True

    def remove_edge(self, a: str, b: str) -> bool:
        """Disconnect *a* and *b* in both directions."""
        pair = self._endpoints(a, b)
        if pair is None:
            return False
        ha, hb = pair
        if hb in self._adj[ha]:
            self._adj[ha].discard(hb)
            self._adj[hb].discard(ha)
            self._version += 1
            logger.debug("Removed edge %s - %s", a, b)
        return True

    def _endpoints(self, a: str, b: str) -> tuple[int, int] | None:
        if a == b:
            return None
        ha = self._handles.get(a)
        hb = self._handles.get(b)
        if ha is None or hb is None:
            return None
        return ha, hb

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_networkx(self) -> nx.Graph[str]:
        """Build a NetworkX copy of the graph.

        Adds all vertices first so isolated words appear in the result.
        """
        g: nx.Graph[str] = nx.Graph()
        g.add_nodes_from(self._handles)
        g.add_edges_from(self.edges())
        return g
