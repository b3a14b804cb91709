"""Fluent builders for loader settings, entries, and whole loader directories.

Example::

    conf = (
        SystemdBootConfBuilder("/efi/loader")
        .config(ConfigBuilder().default("5.12.0-aosc-main").timeout(5).build())
        .entry(
            EntryBuilder("5.12.0-aosc-main")
            .title("AOSC OS x86_64 (5.12.0-aosc-main)")
            .linux("/EFI/linux/vmlinux-5.12.0-aosc-main")
            .initrd("/EFI/linux/initramfs-5.12.0-aosc-main.img")
            .options("root=/dev/sda1 rw")
            .build()
        )
        .build()
    )
    conf.write_all()
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Self

from sdbootconf.domain.entry import Entry
from sdbootconf.domain.loader import LoaderConfig
from sdbootconf.domain.tokens import Efi, Initrd, Linux, MachineID, Options, Title, Token, Version
from sdbootconf.infrastructure.store import SystemdBootConf

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigBuilder:
    def __init__(self) -> None:
        self._config = LoaderConfig()

    def default(self, default: str) -> Self:
        self._config.default = default
        return self

    def timeout(self, timeout: int) -> Self:
        self._config.timeout = timeout
        return self

    def build(self) -> LoaderConfig:
        return self._config


class EntryBuilder:
    """Each method appends one token, so call order is file order."""

    def __init__(self, entry_id: str) -> None:
        self._entry = Entry(id=entry_id)

    def _push(self, token: Token) -> Self:
        self._entry.tokens.append(token)
        return self

    def title(self, title: str) -> Self:
        return self._push(Title(title))

    def version(self, version: str) -> Self:
        return self._push(Version(version))

    def machine_id(self, machine_id: str) -> Self:
        return self._push(MachineID(machine_id))

    def efi(self, efi: str | os.PathLike[str]) -> Self:
        return self._push(Efi(efi))

    def options(self, options: str) -> Self:
        return self._push(Options(options))

    def linux(self, linux: str | os.PathLike[str]) -> Self:
        return self._push(Linux(linux))

    def initrd(self, initrd: str | os.PathLike[str]) -> Self:
        return self._push(Initrd(initrd))

    def build(self) -> Entry:
        return self._entry


class SystemdBootConfBuilder:
    def __init__(self, working_dir: str | os.PathLike[str]) -> None:
        self._conf = SystemdBootConf.init(Path(working_dir))

    def config(self, config: LoaderConfig) -> Self:
        self._conf.config = config
        return self

    def entries(self, entries: Iterable[Entry]) -> Self:
        """Replace the entry list."""
        self._conf.entries = list(entries)
        return self

    def entry(self, entry: Entry) -> Self:
        self._conf.entries.append(entry)
        return self

    def build(self) -> SystemdBootConf:
        return self._conf
