"""Shared pytest fixtures and test helpers for wordladder tests."""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner

from wordladder.services.ladder import PathEngine
from wordladder.services.telemetry import _current_span, disable_telemetry

# Sample vocabulary; HEAT links the -AT words to WHEAT.
LADDER_WORDS = ["CAT", "RAT", "HAT", "HEAT", "NEAT", "WHEAT", "KIT"]


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    root_level = root.level
    app_level = logging.getLogger("wordladder").level
    yield
    root.handlers = handlers
    root.setLevel(root_level)
    logging.getLogger("wordladder").setLevel(app_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def word_file(tmp_path: Path) -> Path:
    """A word list on disk with mixed case, padding, blanks, and a repeat."""
    path = tmp_path / "words.txt"
    path.write_text(
        "cat\n  rat \nHat\n\nheat\nneat\nwheat\nkit\n   \nCAT\nDOG\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory so no stray wordladder.toml is found."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WORDLADDER_CONFIG", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def build_engine(words: Iterable[str], **kwargs: object) -> PathEngine:
    """Populate and precompute an engine, asserting both succeed."""
    engine = PathEngine(**kwargs)  # type: ignore[arg-type]
    result = engine.populate(words)
    assert result.ok, result.error
    result = engine.precompute()
    assert result.ok, result.error
    return engine
