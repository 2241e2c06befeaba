"""Subcommand modules for wordladder.

Provides register_commands() which uses deferred imports to keep
``wordladder --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from wordladder.commands.neighbors import neighbors
    from wordladder.commands.path import distance, path
    from wordladder.commands.stats import stats

    cli.add_command(path)
    cli.add_command(distance)
    cli.add_command(neighbors)
    cli.add_command(stats)
