"""Shared pytest fixtures and test helpers for sdbootconf tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

AOSC_ENTRY = (
    "title AOSC OS x86_64 (5.12.0-aosc-main)\n"
    "version 5.12.0-aosc-main\n"
    "linux /EFI/linux/vmlinux-5.12.0-aosc-main\n"
    "initrd /EFI/linux/initramfs-5.12.0-aosc-main.img\n"
    "options root=/dev/sda1 rw quiet\n"
)

LTS_ENTRY = (
    "title AOSC OS x86_64 (5.10.0-aosc-lts)\n"
    "linux /EFI/linux/vmlinux-5.10.0-aosc-lts\n"
    "options root=/dev/sda1 rw\n"
)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def loader_root(tmp_path: Path) -> Path:
    """Temporary loader directory with ``loader.conf`` and two entries.

    This is the single source of truth for the loader directory layout
    used across store, service, and command tests.
    """
    root = tmp_path / "loader"
    entries = root / "entries"
    entries.mkdir(parents=True)
    (root / "loader.conf").write_text("default 5.12.0-aosc-main.conf\ntimeout 5\n")
    (entries / "5.12.0-aosc-main.conf").write_text(AOSC_ENTRY)
    (entries / "5.10.0-aosc-lts.conf").write_text(LTS_ENTRY)
    return root


@pytest.fixture
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings discovery away from the developer's environment.

    Use via ``@pytest.mark.usefixtures("_isolated_env")``: clears the
    ``SDBOOTCONF_*`` variables and runs from an empty directory so no
    ``sdbootconf.toml`` is found by walk-up.
    """
    for var in ("SDBOOTCONF_CONFIG", "SDBOOTCONF_WORKING_DIR", "SDBOOTCONF_STORE__SORT_ENTRIES"):
        monkeypatch.delenv(var, raising=False)
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the root handler swap done by ``configure_logging``."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    sdb = logging.getLogger("sdbootconf")
    sdb_level = sdb.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    sdb.setLevel(sdb_level)
