"""Command: list the words one edit away."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wordladder.commands._base import LadderCommand

if TYPE_CHECKING:
    from wordladder.commands._context import AppContext


@click.command(
    cls=LadderCommand,
    examples="""\
  wordladder -w words.txt neighbors cat
  wordladder --json -w words.txt neighbors heat""",
)
@click.argument("word")
@click.pass_obj
def neighbors(app: AppContext, word: str) -> None:
    """List the words one substitution, insertion, or deletion from WORD."""
    app.emit(app.engine().neighbors(word))
