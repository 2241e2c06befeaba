"""Tests for word file ingestion."""

from __future__ import annotations

from pathlib import Path

import pytest

from wordladder.infrastructure.wordsource import read_words


class TestReadWords:
    def test_normalizes_and_drops_blanks(self, word_file: Path) -> None:
        assert list(read_words(word_file)) == [
            "CAT",
            "RAT",
            "HAT",
            "HEAT",
            "NEAT",
            "WHEAT",
            "KIT",
            "CAT",
            "DOG",
        ]

    def test_is_lazy(self, word_file: Path) -> None:
        words = read_words(word_file)
        assert next(words) == "CAT"

    def test_restartable(self, word_file: Path) -> None:
        assert list(read_words(word_file)) == list(read_words(word_file))

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            list(read_words(tmp_path / "nope.txt"))

    def test_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.txt"
        path.write_bytes("caf\xe9\n".encode("latin-1"))
        assert list(read_words(path, encoding="latin-1")) == ["CAFÉ"]
        with pytest.raises(UnicodeDecodeError):
            list(read_words(path))
