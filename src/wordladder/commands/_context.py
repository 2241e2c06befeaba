"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy engine construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click
import structlog

from wordladder.domain.types import ErrorCode
from wordladder.output.formatters import OutputSettings, format_result
from wordladder.services.result import ServiceResult

if TYPE_CHECKING:
    from wordladder.config.settings import LadderSettings
    from wordladder.services.ladder import PathEngine

log = structlog.get_logger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The engine is built on first use so ``--help`` and ``--version``
    never read the word list.
    """

    def __init__(self, settings: LadderSettings) -> None:
        self.settings = settings
        self._engine: PathEngine | None = None

        from wordladder.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from wordladder.services.telemetry import enable_telemetry

            enable_telemetry()

    def engine(self, *, precompute: bool = False) -> PathEngine:
        """Return the populated engine, precomputing paths if asked.

        Fails the command (exit 1) when the word list is missing or
        unreadable, or precomputation fails.
        """
        if self._engine is None:
            self._engine = self._load_engine()

        if precompute and not self._engine.is_precomputed:
            result = self._engine.precompute()
            if not result.ok:
                self.fail(result)
        return self._engine

    def _load_engine(self) -> PathEngine:
        from wordladder.infrastructure.graph.engine import Graph
        from wordladder.services.ladder import PathEngine

        path = self.settings.vocabulary_path
        if path is None:
            self.fail(
                ServiceResult.failure(
                    "populate",
                    ErrorCode.INVALID_INPUT,
                    "No word list given; pass --words or set [words] path",
                )
            )

        engine = PathEngine(
            Graph(allow_empty_labels=self.settings.graph.allow_empty_labels),
            config=self.settings.precompute,
        )
        result = engine.populate_file(path, encoding=self.settings.words.encoding)
        if not result.ok:
            self.fail(result)
        for warning in result.warnings:
            log.info("populate.warning", warning=warning)
        return engine

    def _output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        if not result.ok:
            self.fail(result)
        settings = self._output_settings()
        click.echo(format_result(result, settings=settings))
        # In JSON mode, warnings are already in the serialized payload.
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def fail(self, result: ServiceResult) -> NoReturn:
        """Write a failed result to stderr and exit 1."""
        click.echo(format_result(result, settings=self._output_settings()), err=True)
        raise SystemExit(1)
