"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from sdbootconf.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from sdbootconf.services.result import ServiceResult


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


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="sdb.ok")
    op = Text(f"  {result.op}", style="sdb.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="sdb.key")
    if value is None:
        v = Text("(unset)", style="dim")
    elif key == "id":
        v = Text(str(value), style="sdb.id")
    elif key in ("path", "working_dir", "linux"):
        v = Text(str(value), style="sdb.path")
    elif key == "title":
        v = Text(str(value), style="sdb.title")
    elif key == "default":
        v = Text(str(value), style="sdb.default")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _entry_table(items: list[dict[str, Any]], *, default: str | None = None) -> Table:
    """Build a Rich Table of entry summaries; the default entry is starred."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("", no_wrap=True)
    table.add_column("ID", style="sdb.id", no_wrap=True)
    table.add_column("Title", style="sdb.title")
    table.add_column("Version")
    table.add_column("Linux", style="sdb.path")

    for item in items:
        entry_id = str(item.get("id", ""))
        marker = "*" if default == f"{entry_id}.conf" else ""
        table.add_row(
            marker,
            Text(entry_id),
            Text(str(item.get("title") or "")),
            Text(str(item.get("version") or "")),
            Text(str(item.get("linux") or "")),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="sdb.error")
    op = Text(f"  {result.op}", style="sdb.op")
    sep = Text(" - ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("working_dir", "default", "timeout"):
        _field(console, key, result.data.get(key))
    items = result.data.get("items", [])
    if items:
        console.print(_entry_table(items, default=result.data.get("default")))
    else:
        console.print(Text("  (no entries)", style="dim"))


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    if items:
        console.print(_entry_table(items))
    _field(console, "count", result.data.get("count", len(items)))


def _render_entry(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render one entry as its file would read."""
    _status_line(console, result)
    for key in ("default", "id"):
        if key in result.data:
            _field(console, key, result.data[key])
    tokens = result.data.get("tokens")
    if tokens is None:
        return
    for token in tokens:
        console.print(Text(f"    {token['keyword']} ", style="sdb.key"), Text(token["value"]), sep="")
    if verbose:
        _render_meta(console, result)


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("default", "id", "title", "timeout"):
        if key in result.data:
            _field(console, key, result.data[key])
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

_OP_RENDERERS: dict[str, Any] = {
    "show": _render_show,
    "list_entries": _render_list,
    "get_entry": _render_entry,
    "get_default": _render_entry,
    "set_default": _render_mutation,
    "set_timeout": _render_mutation,
}
