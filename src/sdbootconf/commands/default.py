"""Commands: read and change the loader's default entry and timeout."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sdbootconf.commands._base import SdbCommand

if TYPE_CHECKING:
    from sdbootconf.commands._context import AppContext


@click.command(
    "get-default",
    cls=SdbCommand,
    examples="""\
  sdbootconf get-default
  sdbootconf --json get-default""",
)
@click.pass_obj
def get_default(app: AppContext) -> None:
    """Show the entry selected by ``default`` in loader.conf."""
    app.emit(app.service.get_default())


@click.command(
    "set-default",
    cls=SdbCommand,
    examples="""\
  sdbootconf set-default 5.12.0-aosc-main
  sdbootconf -C /boot/efi/loader set-default 5.12.0-aosc-main.conf""",
)
@click.argument("entry_id")
@click.pass_obj
def set_default(app: AppContext, entry_id: str) -> None:
    """Make ENTRY_ID the default entry (it must exist under entries/)."""
    app.emit(app.service.set_default(entry_id))


@click.command(
    "set-timeout",
    cls=SdbCommand,
    examples="""\
  sdbootconf set-timeout 5
  sdbootconf set-timeout 0""",
)
@click.argument("seconds", type=click.IntRange(min=0, max=2**32 - 1))
@click.pass_obj
def set_timeout(app: AppContext, seconds: int) -> None:
    """Set the menu timeout in seconds."""
    app.emit(app.service.set_timeout(seconds))
