"""PathEngine — build the word graph and answer shortest-ladder queries.

Lifecycle: ``populate`` -> ``precompute`` -> ``shortest_path`` /
``shortest_distance``. The path index is rebuilt wholesale by every
``precompute`` and goes stale on any later graph mutation; queries
against a stale index fail with ``NOT_PRECOMPUTED``.

Each engine owns its graph and index, so independent engines coexist.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable
from pathlib import Path

import networkx as nx
import structlog

from wordladder.config.models import PrecomputeConfig
from wordladder.domain.types import ErrorCode
from wordladder.domain.words import edit_kind, is_adjacent_words, normalize_word
from wordladder.infrastructure.graph.engine import Graph
from wordladder.infrastructure.graph.paths import PathIndex
from wordladder.infrastructure.wordsource import read_words
from wordladder.services.result import ServiceResult
from wordladder.services.telemetry import trace_span, traced

log = structlog.get_logger(__name__)


class PathEngine:
    """Word graph plus an all-pairs shortest-path index."""

    def __init__(
        self,
        graph: Graph | None = None,
        *,
        config: PrecomputeConfig | None = None,
    ) -> None:
        self._graph = graph if graph is not None else Graph()
        self._config = config or PrecomputeConfig()
        self._index: PathIndex | None = None

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def index(self) -> PathIndex | None:
        """The last computed index, stale or not."""
        return self._index

    @property
    def is_precomputed(self) -> bool:
        """True when an index exists and matches the current graph."""
        return self._index is not None and self._index.version == self._graph.version

    # ------------------------------------------------------------------
    # populate: vertices, then one-edit edges
    # ------------------------------------------------------------------

    @traced
    def populate(self, words: Iterable[str]) -> ServiceResult:
        """Insert *words* as vertices and connect every adjacent pair.

        Duplicates and blank entries are skipped and reported as warnings.
        New words are connected to each other and to words already in the
        graph; each unordered pair is evaluated once.
        """
        added: list[str] = []
        duplicates = 0
        rejected = 0
        with trace_span("insert_vertices") as span:
            for raw in words:
                word = normalize_word(raw)
                if word is None:
                    rejected += 1
                elif self._graph.add_vertex(word):
                    added.append(word)
                else:
                    duplicates += 1
            if span:
                span.annotate("added", len(added))

        with trace_span("connect_pairs") as span:
            edges_before = self._graph.edge_count()
            self._connect(added)
            if span:
                span.annotate("edges", self._graph.edge_count() - edges_before)

        warnings: list[str] = []
        if duplicates:
            warnings.append(f"Skipped {duplicates} duplicate word(s)")
        if rejected:
            warnings.append(f"Skipped {rejected} blank entries")

        log.debug(
            "populate.done",
            added=len(added),
            duplicates=duplicates,
            vertices=len(self._graph),
            edges=self._graph.edge_count(),
        )
        return ServiceResult(
            ok=True,
            op="populate",
            data={
                "added": len(added),
                "duplicates": duplicates,
                "rejected": rejected,
                "vertices": len(self._graph),
                "edges": self._graph.edge_count(),
            },
            warnings=warnings,
        )

    @traced
    def populate_file(self, path: Path, *, encoding: str = "utf-8") -> ServiceResult:
        """Read words from *path* and :meth:`populate` with them.

        An unreadable file is an ``IO_ERROR`` result; the graph is left
        untouched because the file is read in full before insertion.
        """
        try:
            words = list(read_words(path, encoding=encoding))
        except (OSError, UnicodeDecodeError) as exc:
            log.debug("populate.io_error", path=str(path), error=str(exc))
            return ServiceResult.failure(
                "populate",
                ErrorCode.IO_ERROR,
                f"Cannot read word source '{path}': {exc}",
                path=str(path),
            )
        result = self.populate(words)
        return result.model_copy(update={"data": {**result.data, "path": str(path)}})

    def _connect(self, new_words: list[str]) -> None:
        if not new_words:
            return
        if self._config.pairing == "all_pairs":
            candidates = self._all_pair_candidates
        else:
            candidates = self._bucket_candidates()
        done: set[str] = set()
        for word in new_words:
            for other in candidates(word):
                if other == word or other in done:
                    continue
                if is_adjacent_words(word, other):
                    self._graph.add_edge(word, other)
            done.add(word)

    def _all_pair_candidates(self, word: str) -> Iterable[str]:
        return self._graph.all_vertices()

    def _bucket_candidates(self) -> Callable[[str], list[str]]:
        """Index every vertex by wildcard and deletion keys.

        Returns a lookup from a word to the vertices that could be one edit
        away. Candidates are still confirmed by :func:`is_adjacent_words`.
        """
        substitutions: dict[tuple[str, str], list[str]] = defaultdict(list)
        deletions: dict[str, list[str]] = defaultdict(list)
        for vertex in self._graph.all_vertices():
            for i in range(len(vertex)):
                substitutions[(vertex[:i], vertex[i + 1 :])].append(vertex)
                deletions[vertex[:i] + vertex[i + 1 :]].append(vertex)

        def lookup(word: str) -> list[str]:
            found: dict[str, None] = {}
            for i in range(len(word)):
                for other in substitutions.get((word[:i], word[i + 1 :]), ()):
                    found[other] = None
                shorter = word[:i] + word[i + 1 :]
                if shorter in self._graph:
                    found[shorter] = None
            for longer in deletions.get(word, ()):
                found[longer] = None
            return list(found)

        return lookup

    # ------------------------------------------------------------------
    # vocabulary maintenance
    # ------------------------------------------------------------------

    @traced
    def add_word(self, word: str) -> ServiceResult:
        """Insert one word and connect it to every adjacent existing word."""
        normalized = normalize_word(word)
        if normalized is None:
            return self._blank("add_word")
        if not self._graph.add_vertex(normalized):
            return ServiceResult.failure(
                "add_word",
                ErrorCode.DUPLICATE_VERTEX,
                f"Word '{normalized}' is already in the graph",
            )
        self._connect([normalized])
        return ServiceResult(
            ok=True,
            op="add_word",
            data={"word": normalized, "neighbors": self._graph.neighbors(normalized)},
        )

    @traced
    def remove_word(self, word: str) -> ServiceResult:
        """Remove one word and all of its edges."""
        normalized = normalize_word(word)
        if normalized is None:
            return self._blank("remove_word")
        if not self._graph.remove_vertex(normalized):
            return self._missing("remove_word", normalized)
        return ServiceResult(ok=True, op="remove_word", data={"word": normalized})

    @traced
    def connect(self, a: str, b: str) -> ServiceResult:
        """Add a manual edge between two existing words."""
        return self._edit_edge("connect", a, b, add=True)

    @traced
    def disconnect(self, a: str, b: str) -> ServiceResult:
        """Remove the edge between two existing words."""
        return self._edit_edge("disconnect", a, b, add=False)

    def _edit_edge(self, op: str, a: str, b: str, *, add: bool) -> ServiceResult:
        source = normalize_word(a)
        target = normalize_word(b)
        if source is None or target is None:
            return self._blank(op)
        if source == target:
            return ServiceResult.failure(
                op,
                ErrorCode.SELF_REFERENCE,
                f"Cannot {op} '{source}' to itself",
            )
        for word in (source, target):
            if word not in self._graph:
                return self._missing(op, word)
        if add:
            self._graph.add_edge(source, target)
        else:
            self._graph.remove_edge(source, target)
        return ServiceResult(ok=True, op=op, data={"source": source, "target": target})

    # ------------------------------------------------------------------
    # precompute: one sweep per root
    # ------------------------------------------------------------------

    @traced
    def precompute(self) -> ServiceResult:
        """Rebuild the path index from scratch over the current graph."""
        if len(self._graph) == 0:
            return ServiceResult.failure(
                "precompute",
                ErrorCode.EMPTY_VOCABULARY,
                "Cannot precompute paths over an empty vocabulary",
            )
        algorithm = self._config.algorithm
        with trace_span("sweeps") as span:
            self._index = PathIndex.build(self._graph, algorithm=algorithm)
            if span:
                span.annotate("roots", len(self._graph))
                span.annotate("pairs", len(self._index))

        log.debug(
            "precompute.done",
            roots=len(self._graph),
            pairs=len(self._index),
            algorithm=algorithm,
        )
        return ServiceResult(
            ok=True,
            op="precompute",
            data={
                "roots": len(self._graph),
                "pairs": len(self._index),
                "algorithm": algorithm,
            },
        )

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    @traced
    def shortest_path(self, word_a: str, word_b: str) -> ServiceResult:
        """One shortest ladder from *word_a* to *word_b*."""
        found = self._lookup("shortest_path", word_a, word_b)
        if isinstance(found, ServiceResult):
            return found
        source, target, path = found
        return ServiceResult(
            ok=True,
            op="shortest_path",
            data={
                "source": source,
                "target": target,
                "path": list(path),
                "distance": len(path) - 1,
            },
        )

    @traced
    def shortest_distance(self, word_a: str, word_b: str) -> ServiceResult:
        """Number of edits on a shortest ladder; 0 for a word against itself."""
        found = self._lookup("shortest_distance", word_a, word_b)
        if isinstance(found, ServiceResult):
            return found
        source, target, path = found
        return ServiceResult(
            ok=True,
            op="shortest_distance",
            data={"source": source, "target": target, "distance": len(path) - 1},
        )

    def _lookup(
        self, op: str, word_a: str, word_b: str
    ) -> tuple[str, str, tuple[str, ...]] | ServiceResult:
        if self._index is None or not self.is_precomputed:
            return ServiceResult.failure(
                op,
                ErrorCode.NOT_PRECOMPUTED,
                "Paths are not precomputed for the current graph; run precompute first",
            )
        source = normalize_word(word_a)
        target = normalize_word(word_b)
        if source is None or target is None:
            return self._blank(op)
        for word in (source, target):
            if not self._index.knows(word):
                return self._missing(op, word)
        path = self._index.path(source, target)
        if path is None:
            return ServiceResult.failure(
                op,
                ErrorCode.UNREACHABLE,
                f"No ladder between '{source}' and '{target}'",
                source=source,
                target=target,
            )
        return source, target, path

    @traced
    def neighbors(self, word: str) -> ServiceResult:
        """Words one edit away from *word*, with the edit that reaches each."""
        normalized = normalize_word(word)
        if normalized is None:
            return self._blank("neighbors")
        if normalized not in self._graph:
            return self._missing("neighbors", normalized)
        items = [
            {"word": other, "edit": str(edit_kind(normalized, other) or "manual")}
            for other in self._graph.neighbors(normalized)
        ]
        return ServiceResult(
            ok=True,
            op="neighbors",
            data={"word": normalized, "count": len(items), "items": items},
        )

    @traced
    def stats(self) -> ServiceResult:
        """Vertex, edge, and connectivity summary of the graph."""
        g = self._graph.to_networkx()
        components = list(nx.connected_components(g))
        return ServiceResult(
            ok=True,
            op="stats",
            data={
                "vertices": g.number_of_nodes(),
                "edges": g.number_of_edges(),
                "components": len(components),
                "largest_component": max((len(c) for c in components), default=0),
                "isolated": nx.number_of_isolates(g),
                "precomputed": self.is_precomputed,
            },
        )

    @staticmethod
    def _blank(op: str) -> ServiceResult:
        return ServiceResult.failure(op, ErrorCode.INVALID_INPUT, "Empty word")

    @staticmethod
    def _missing(op: str, word: str) -> ServiceResult:
        return ServiceResult.failure(
            op,
            ErrorCode.INVALID_VERTEX,
            f"Word '{word}' not found in graph",
            word=word,
        )
