"""Word file ingestion — one word per line, normalized lazily.

Blank lines are dropped, every other line is trimmed and uppercased.
Duplicates pass through untouched; the graph rejects repeats on insert.
Calling :func:`read_words` again restarts from the top of the file.

``OSError`` and ``UnicodeDecodeError`` propagate to the caller.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from wordladder.domain.words import normalize_word


def read_words(path: Path, *, encoding: str = "utf-8") -> Iterator[str]:
    """Yield normalized words from *path*, one per non-blank line."""
    with path.open(encoding=encoding) as fh:
        for line in fh:
            word = normalize_word(line)
            if word is not None:
                yield word
