"""Tests for LadderSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from wordladder.config.settings import LadderSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "WORDLADDER_CONFIG",
        "WORDLADDER_WORDS_PATH",
        "WORDLADDER_QUIET",
        "WORDLADDER_PRECOMPUTE__ALGORITHM",
    ):
        monkeypatch.delenv(var, raising=False)


class TestLadderSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = LadderSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.vocabulary_path is None
        assert settings.words.encoding == "utf-8"
        assert settings.graph.allow_empty_labels is False
        assert settings.precompute.algorithm == "bfs"
        assert settings.precompute.pairing == "buckets"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = LadderSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "wordladder.toml").write_text(
            '[precompute]\nalgorithm = "dijkstra"\n[graph]\nallow_empty_labels = true\n'
        )
        settings = LadderSettings.from_cli(start=tmp_path)
        assert settings.precompute.algorithm == "dijkstra"
        assert settings.precompute.pairing == "buckets"  # default preserved
        assert settings.graph.allow_empty_labels is True

    def test_discovered_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "wordladder.toml").write_text('[words]\nencoding = "latin-1"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = LadderSettings.from_cli(start=nested)
        assert settings.words.encoding == "latin-1"
        assert settings.config_path == tmp_path / "wordladder.toml"

    def test_relative_words_path_resolved_against_config(self, tmp_path: Path) -> None:
        (tmp_path / "wordladder.toml").write_text('[words]\npath = "lists/words.txt"\n')
        settings = LadderSettings.from_cli(start=tmp_path)
        assert settings.vocabulary_path == tmp_path / "lists" / "words.txt"

    def test_cli_words_flag_wins(self, tmp_path: Path) -> None:
        (tmp_path / "wordladder.toml").write_text('[words]\npath = "a.txt"\n')
        settings = LadderSettings.from_cli(start=tmp_path, words_path=Path("b.txt"))
        assert settings.vocabulary_path == Path("b.txt")

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[precompute]\npairing = "all_pairs"\n')
        settings = LadderSettings.from_cli(config_path=str(custom))
        assert settings.precompute.pairing == "all_pairs"
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "wordladder.toml").write_text("[precompute\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            LadderSettings.from_cli(start=tmp_path)

    def test_rejects_unknown_algorithm(self, tmp_path: Path) -> None:
        (tmp_path / "wordladder.toml").write_text('[precompute]\nalgorithm = "floyd"\n')
        with pytest.raises(click.ClickException, match="Invalid config"):
            LadderSettings.from_cli(start=tmp_path)

    def test_rejects_mistyped_section(self, tmp_path: Path) -> None:
        (tmp_path / "wordladder.toml").write_text('graph = "dense"\n')
        with pytest.raises(click.ClickException, match="Invalid config"):
            LadderSettings.from_cli(start=tmp_path)

    def test_empty_file_keeps_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "wordladder.toml").write_text("")
        settings = LadderSettings.from_cli(start=tmp_path)
        assert settings.config_path == tmp_path / "wordladder.toml"
        assert settings.precompute.algorithm == "bfs"
        assert settings.words.path is None


class TestEnvVars:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "wordladder.toml").write_text('[precompute]\nalgorithm = "bfs"\n')
        monkeypatch.setenv("WORDLADDER_PRECOMPUTE__ALGORITHM", "dijkstra")
        settings = LadderSettings.from_cli(start=tmp_path)
        assert settings.precompute.algorithm == "dijkstra"

    def test_cli_flag_overrides_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WORDLADDER_WORDS_PATH", "env.txt")
        settings = LadderSettings.from_cli(start=tmp_path, words_path=Path("cli.txt"))
        assert settings.words_path == Path("cli.txt")

    def test_unset_flags_fall_back_to_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WORDLADDER_WORDS_PATH", "env.txt")
        settings = LadderSettings.from_cli(start=tmp_path, words_path=None)
        assert settings.words_path == Path("env.txt")
