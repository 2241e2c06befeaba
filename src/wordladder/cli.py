"""Root CLI group for wordladder with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from wordladder import __version__
from wordladder.commands import register_commands
from wordladder.commands._base import LadderGroup
from wordladder.commands._context import AppContext
from wordladder.config.settings import LadderSettings


@click.group(cls=LadderGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="wordladder")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-w",
    "--words",
    "words_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Word list, one word per line.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    words_path: Path | None,
) -> None:
    """wordladder — shortest one-letter-edit ladders between words."""
    settings = LadderSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        words_path=words_path,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
