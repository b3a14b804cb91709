"""Rich console and theme for rendering results.

Renderers print to a Console backed by StringIO so ``format_result``
can return a plain string; Rich drops color when the CLI output is not
a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SDB_THEME = Theme(
    {
        "sdb.ok": "bold green",
        "sdb.error": "bold red",
        "sdb.op": "bold cyan",
        "sdb.key": "dim",
        "sdb.id": "bold blue",
        "sdb.path": "dim",
        "sdb.title": "bold",
        "sdb.default": "bold magenta",
    }
)

# Wide enough that an entry table row (id, title, version, kernel path) stays on one line.
CONSOLE_WIDTH = 120


def create_console(*, width: int = CONSOLE_WIDTH) -> Console:
    return Console(file=StringIO(), theme=SDB_THEME, highlight=False, width=width)


def get_output(console: Console) -> str:
    """Text printed so far to a console made by :func:`create_console`."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
