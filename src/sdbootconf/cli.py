"""Root CLI group for sdbootconf with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from sdbootconf import __version__
from sdbootconf.commands import register_commands
from sdbootconf.commands._context import AppContext
from sdbootconf.config.settings import SdbSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="sdbootconf")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-C",
    "--working-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Loader directory holding loader.conf and entries/.",
)
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    working_dir: Path | None,
    config_path: str | None,
) -> None:
    """sdbootconf — inspect and edit systemd-boot loader configuration."""
    ctx.ensure_object(dict)
    settings = SdbSettings.from_cli(
        config_path=config_path,
        working_dir=working_dir,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
