"""Command: vocabulary graph summary."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wordladder.commands._base import LadderCommand

if TYPE_CHECKING:
    from wordladder.commands._context import AppContext


@click.command(
    cls=LadderCommand,
    examples="""\
  wordladder -w words.txt stats
  wordladder --json -w words.txt stats""",
)
@click.pass_obj
def stats(app: AppContext) -> None:
    """Summarize vertices, edges, and connected components."""
    app.emit(app.engine().stats())
