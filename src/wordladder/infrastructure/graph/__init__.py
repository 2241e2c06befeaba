"""Undirected graph storage and shortest-path machinery."""

from wordladder.infrastructure.graph.engine import Graph
from wordladder.infrastructure.graph.paths import PathIndex, Sweep

__all__ = [
    "Graph",
    "PathIndex",
    "Sweep",
]
