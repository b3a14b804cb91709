"""Loader directory layout and entry-file discovery.

A working directory (usually the ``loader`` directory of an EFI system
partition) holds ``loader.conf`` and an ``entries/`` directory with one
``<id>.conf`` file per boot menu entry.
"""

from __future__ import annotations

import os
from pathlib import Path

from sdbootconf.domain.errors import wrap_io

LOADER_FILENAME = "loader.conf"
ENTRIES_DIRNAME = "entries"


def loader_path(working_dir: Path) -> Path:
    return working_dir / LOADER_FILENAME


def entries_path(working_dir: Path) -> Path:
    return working_dir / ENTRIES_DIRNAME


def find_entry_files(entries_dir: Path, *, sort: bool = False) -> list[Path]:
    """List the regular files directly under *entries_dir*.

    Subdirectories and other non-regular files are skipped; symlinks are
    followed. Files are returned in directory-enumeration order, which
    depends on the filesystem, unless *sort* is set (then by file name).
    No suffix filtering happens here: a stray file without ``.conf`` is
    returned and fails when loaded as an entry.

    Raises:
        BootConfIOError: The directory cannot be listed.
    """
    with wrap_io(entries_dir):
        with os.scandir(entries_dir) as it:
            paths = [Path(item.path) for item in it if item.is_file()]
    if sort:
        paths.sort(key=lambda p: p.name)
    return paths


def ensure_dir(path: Path) -> None:
    """Create *path* and its parents if missing."""
    with wrap_io(path):
        path.mkdir(parents=True, exist_ok=True)
