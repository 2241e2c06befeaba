"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``WORDLADDER_*`` prefix
  3. TOML file    — ``wordladder.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from wordladder.config.discovery import find_config
from wordladder.config.models import (
    GraphConfig,
    LadderConfig,
    PrecomputeConfig,
    WordsConfig,
)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``wordladder.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = self._load(toml_path)

    @staticmethod
    def _load(toml_path: Path) -> dict[str, Any]:
        """Parse and validate *toml_path*, keeping only the keys it sets."""
        raw = toml_path.read_text(encoding="utf-8")
        try:
            data = tomllib.loads(raw)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc
        try:
            config = LadderConfig.model_validate(data)
        except ValidationError as exc:
            msg = f"Invalid config in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc

        # Relative word paths are resolved against the config file's directory.
        words_path = config.words.path
        if words_path is not None and not words_path.is_absolute():
            words = config.words.model_copy(update={"path": toml_path.parent / words_path})
            config = config.model_copy(update={"words": words})
        return config.model_dump(exclude_unset=True)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class LadderSettings(BaseSettings):
    """Unified settings for the wordladder CLI.

    Stored on the :class:`~wordladder.commands._context.AppContext` created
    by the root CLI group.

    Attributes:
        config_path: The TOML file that was loaded, if any.
        words_path: ``--words`` override; falls back to ``[words] path``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "WORDLADDER_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    words_path: Path | None = None

    # --- TOML sections ---
    words: WordsConfig = Field(default_factory=WordsConfig)
    graph: GraphConfig = Field(default_factory=GraphConfig)
    precompute: PrecomputeConfig = Field(default_factory=PrecomputeConfig)

    @property
    def vocabulary_path(self) -> Path | None:
        """The word file to load: CLI flag first, then the ``[words]`` section."""
        return self.words_path or self.words.path

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> LadderSettings:
        """Construct settings from CLI invocation.

        Discovers ``wordladder.toml`` via walk-up from *start* (or uses an
        explicit *config_path*) and merges CLI flags as highest-priority
        overrides. Flags passed as None are treated as unset.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        flags = {k: v for k, v in cli_flags.items() if v is not None}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None
