"""Rich Console factory and theme for wordladder output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LADDER_THEME = Theme(
    {
        "wl.ok": "bold green",
        "wl.error": "bold red",
        "wl.warning": "bold yellow",
        "wl.op": "bold cyan",
        "wl.key": "dim",
        "wl.word": "bold blue",
        "wl.code": "magenta",
        "wl.edit.substitution": "green",
        "wl.edit.insertion": "yellow",
        "wl.edit.deletion": "red",
    }
)

_EDIT_STYLES: dict[str, str] = {
    "substitution": "wl.edit.substitution",
    "insertion": "wl.edit.insertion",
    "deletion": "wl.edit.deletion",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=LADDER_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_edit(edit: str) -> str:
    """Return the Rich style name for an edit kind."""
    return _EDIT_STYLES.get(edit, "")
