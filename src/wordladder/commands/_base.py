"""Click base classes shared by every wordladder command.

Each command may carry an ``examples`` block, shown by ``--examples``
instead of cluttering ``--help``. Every command reads a word list, so the
help epilog says where that list comes from.
"""

from __future__ import annotations

import inspect
from typing import Any

import click

WORDS_HINT = (
    "The word list comes from -w/--words, WORDLADDER_WORDS_PATH, "
    "or [words] path in wordladder.toml."
)


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag that prints *examples* and exits."""
    lines = inspect.cleandoc(examples).splitlines()

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for line in lines:
            click.echo(f"  {line}")
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class LadderCommand(click.Command):
    """A command that reads the word list and may offer ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("epilog", WORDS_HINT)
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class LadderGroup(click.Group):
    """Root group: subcommands default to :class:`LadderCommand` and are
    listed in registration order (queries first, then inspection)."""

    command_class = LadderCommand

    def list_commands(self, ctx: click.Context) -> list[str]:
        return list(self.commands)
