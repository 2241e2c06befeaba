"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, wordladder.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

# --- wordladder.toml sections ---


class WordsConfig(BaseModel):
    """[words] section."""

    model_config = {"frozen": True}

    path: Path | None = None
    encoding: str = "utf-8"


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    allow_empty_labels: bool = False


class PrecomputeConfig(BaseModel):
    """[precompute] section.

    ``algorithm`` picks the single-source sweep; ``pairing`` picks how
    candidate word pairs are generated while building edges. Both choices
    yield identical distances and edge sets.
    """

    model_config = {"frozen": True}

    algorithm: Literal["bfs", "dijkstra"] = "bfs"
    pairing: Literal["buckets", "all_pairs"] = "buckets"


class LadderConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    words: WordsConfig = Field(default_factory=WordsConfig)
    graph: GraphConfig = Field(default_factory=GraphConfig)
    precompute: PrecomputeConfig = Field(default_factory=PrecomputeConfig)
