"""Subcommand modules for sdbootconf.

Provides register_commands() which uses deferred imports to keep
``sdbootconf --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from sdbootconf.commands.default import get_default, set_default, set_timeout
    from sdbootconf.commands.show import entry, list_cmd, show

    cli.add_command(show)
    cli.add_command(list_cmd)
    cli.add_command(entry)
    cli.add_command(get_default)
    cli.add_command(set_default)
    cli.add_command(set_timeout)
