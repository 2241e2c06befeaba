"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from wordladder.output.console import create_console, get_output, style_for_edit

if TYPE_CHECKING:
    from rich.console import Console

    from wordladder.services.result import ServiceResult

type _Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "shortest_path":
        return "\n".join(result.data.get("path", []))
    if result.op == "shortest_distance":
        return str(result.data.get("distance", ""))
    if result.op == "neighbors":
        return "\n".join(item["word"] for item in result.data.get("items", []))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="wl.ok")
    op = Text(f"  {result.op}", style="wl.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="wl.key")
    if key in ("word", "source", "target"):
        v = Text(str(value), style="wl.word")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="wl.error")
    op = Text(f"  {result.op}", style="wl.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)
    if err:
        console.print(Text("  code: ", style="wl.key"), Text(err.code, style="wl.code"))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Ladder renderers ──────────────────────────────────────────────────


def _render_path(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a shortest ladder as a chain of words."""
    path = result.data.get("path", [])
    distance = result.data.get("distance", 0)

    _status_line(console, result)
    console.print("  " + " → ".join(f"[wl.word]{word}[/wl.word]" for word in path))
    _field(console, "distance", distance)
    if verbose:
        _render_meta(console, result)


def _render_neighbors(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render one-edit neighbours as a table."""
    _status_line(console, result)
    _field(console, "word", result.data.get("word", ""))
    _field(console, "count", result.data.get("count", 0))

    items = result.data.get("items", [])
    if items:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Word", style="wl.word", no_wrap=True)
        table.add_column("Edit")
        for item in items:
            edit = str(item.get("edit", ""))
            table.add_row(str(item.get("word", "")), Text(edit, style=style_for_edit(edit)))
        console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, _Renderer] = {
    "shortest_path": _render_path,
    "neighbors": _render_neighbors,
}
