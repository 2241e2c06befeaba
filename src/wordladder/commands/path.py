"""Commands: shortest ladder and ladder length between two words."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wordladder.commands._base import LadderCommand

if TYPE_CHECKING:
    from wordladder.commands._context import AppContext


@click.command(
    cls=LadderCommand,
    examples="""\
  wordladder -w words.txt path cat wheat
  wordladder --json -w words.txt path COMEDO CHARGE
  wordladder -q -w words.txt path bellies jollies""",
)
@click.argument("word_a")
@click.argument("word_b")
@click.pass_obj
def path(app: AppContext, word_a: str, word_b: str) -> None:
    """Show a shortest word ladder from WORD_A to WORD_B."""
    app.emit(app.engine(precompute=True).shortest_path(word_a, word_b))


@click.command(
    cls=LadderCommand,
    examples="""\
  wordladder -w words.txt distance cat wheat
  wordladder -q -w words.txt distance define shinny""",
)
@click.argument("word_a")
@click.argument("word_b")
@click.pass_obj
def distance(app: AppContext, word_a: str, word_b: str) -> None:
    """Show the number of one-letter edits between WORD_A and WORD_B."""
    app.emit(app.engine(precompute=True).shortest_distance(word_a, word_b))
