"""Locate wordladder.toml.

The search starts in the working directory and climbs parent directories
until a ``wordladder.toml`` turns up or the filesystem root is reached.
``WORDLADDER_CONFIG`` names a file directly and disables the search.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "wordladder.toml"
CONFIG_ENV_VAR = "WORDLADDER_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start*, or None.

    A ``WORDLADDER_CONFIG`` pointing at a missing file yields None rather
    than falling back to the directory search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
