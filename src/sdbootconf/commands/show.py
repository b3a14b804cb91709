"""Commands: inspect loader settings and entries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sdbootconf.commands._base import SdbCommand

if TYPE_CHECKING:
    from sdbootconf.commands._context import AppContext


@click.command(
    cls=SdbCommand,
    examples="""\
  sdbootconf show
  sdbootconf -C /boot/efi/loader show
  sdbootconf --json show""",
)
@click.pass_obj
def show(app: AppContext) -> None:
    """Show loader settings and all entries."""
    app.emit(app.service.show())


@click.command(
    "list",
    cls=SdbCommand,
    examples="""\
  sdbootconf list
  sdbootconf --json list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List boot menu entries."""
    app.emit(app.service.list_entries())


@click.command(
    cls=SdbCommand,
    examples="""\
  sdbootconf entry 5.12.0-aosc-main
  sdbootconf entry 5.12.0-aosc-main.conf""",
)
@click.argument("entry_id")
@click.pass_obj
def entry(app: AppContext, entry_id: str) -> None:
    """Show every field of one entry."""
    app.emit(app.service.get_entry(entry_id))
