"""BootConfService — inspect and edit a loader directory.

Wraps :class:`~sdbootconf.infrastructure.store.SystemdBootConf` for the
CLI. Every method returns a :class:`ServiceResult`; library exceptions
become ``ServiceError`` codes:

- ``NOT_FOUND``: a file or directory does not exist.
- ``IO_ERROR``: any other read/write/list failure.
- ``PARSE_ERROR``: malformed ``loader.conf`` or entry file.
- ``INVALID_FILENAME``: an entry path is not ``<id>.conf``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from sdbootconf.domain.entry import ENTRY_SUFFIX, Entry
from sdbootconf.domain.errors import (
    BootConfIOError,
    ConfigParseError,
    EntryParseError,
    InvalidEntryFilename,
    SdBootConfError,
)
from sdbootconf.domain.loader import LoaderConfig
from sdbootconf.infrastructure.store import SystemdBootConf
from sdbootconf.services.result import ServiceResult

logger = logging.getLogger(__name__)


def _error_code(exc: SdBootConfError) -> str:
    if isinstance(exc, BootConfIOError):
        return "NOT_FOUND" if exc.not_found else "IO_ERROR"
    if isinstance(exc, InvalidEntryFilename):
        return "INVALID_FILENAME"
    if isinstance(exc, (ConfigParseError, EntryParseError)):
        return "PARSE_ERROR"
    return "ERROR"


def _error_result(op: str, exc: SdBootConfError) -> ServiceResult:
    detail: dict[str, Any] = {}
    if exc.path is not None:
        detail["path"] = str(exc.path)
    if exc.lineno is not None:
        detail["lineno"] = exc.lineno
    logger.debug("%s failed: %s", op, exc)
    return ServiceResult.failure(op, _error_code(exc), str(exc), **detail)


def _strip_suffix(entry_id: str) -> str:
    return entry_id[: -len(ENTRY_SUFFIX)] if entry_id.endswith(ENTRY_SUFFIX) else entry_id


def entry_summary(entry: Entry) -> dict[str, Any]:
    """Flat summary of an entry for tables and JSON."""
    return {
        "id": entry.id,
        "title": entry.title,
        "version": entry.version,
        "linux": entry.linux.as_posix() if entry.linux else None,
    }


def entry_detail(entry: Entry) -> dict[str, Any]:
    """Summary plus every token in file order."""
    data = entry_summary(entry)
    data["tokens"] = [{"keyword": t.keyword, "value": t.value} for t in entry.tokens]
    return data


class BootConfService:
    """Operations over one loader working directory."""

    def __init__(self, working_dir: Path, *, sort_entries: bool = True) -> None:
        self._store = SystemdBootConf.init(working_dir)
        self._sort = sort_entries

    @property
    def store(self) -> SystemdBootConf:
        return self._store

    def show(self) -> ServiceResult:
        """Loader settings and a summary of every entry."""
        op = "show"
        try:
            self._store.load_current(sort=self._sort)
        except SdBootConfError as exc:
            return _error_result(op, exc)

        config = self._store.config
        warnings: list[str] = []
        if config.default is not None:
            if not config.default.endswith(ENTRY_SUFFIX):
                warnings.append(f"Default entry {config.default!r} is not an {ENTRY_SUFFIX} file name")
            elif self._store.get_entry(config.default[: -len(ENTRY_SUFFIX)]) is None:
                warnings.append(f"Default entry {config.default!r} not found in {self._store.entries_dir}")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "working_dir": str(self._store.working_dir),
                "default": config.default,
                "timeout": config.timeout,
                "count": len(self._store.entries),
                "items": [entry_summary(e) for e in self._store.entries],
            },
            warnings=warnings,
        )

    def list_entries(self) -> ServiceResult:
        op = "list_entries"
        try:
            self._store.load_current(sort=self._sort)
        except SdBootConfError as exc:
            return _error_result(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "count": len(self._store.entries),
                "items": [entry_summary(e) for e in self._store.entries],
            },
        )

    def get_entry(self, entry_id: str) -> ServiceResult:
        """Load one entry file; *entry_id* may include ``.conf``."""
        op = "get_entry"
        path = self._store.entries_dir / f"{_strip_suffix(entry_id)}{ENTRY_SUFFIX}"
        try:
            entry = Entry.load(path)
        except SdBootConfError as exc:
            return _error_result(op, exc)
        return ServiceResult(ok=True, op=op, data=entry_detail(entry), meta={"path": str(path)})

    def get_default(self) -> ServiceResult:
        """Resolve ``default`` from ``loader.conf`` to its entry."""
        op = "get_default"
        try:
            self._store.config = LoaderConfig.load(self._store.config_path)
            entry = self._store.resolve_default()
        except SdBootConfError as exc:
            return _error_result(op, exc)
        if entry is None:
            return ServiceResult(ok=True, op=op, data={"default": None})
        data = {"default": self._store.config.default, **entry_detail(entry)}
        return ServiceResult(ok=True, op=op, data=data)

    def set_default(self, entry_id: str) -> ServiceResult:
        """Point ``default`` at an existing entry and rewrite ``loader.conf``.

        The entry must load from ``entries/<id>.conf`` first, so the
        written default always resolves.
        """
        op = "set_default"
        path = self._store.entries_dir / f"{_strip_suffix(entry_id)}{ENTRY_SUFFIX}"
        try:
            entry = Entry.load(path)
            self._store.config = LoaderConfig.load(self._store.config_path)
            self._store.config.set_default(entry)
            self._store.write_config()
        except SdBootConfError as exc:
            return _error_result(op, exc)
        logger.info("Default entry set to %s", self._store.config.default)
        return ServiceResult(
            ok=True,
            op=op,
            data={"default": self._store.config.default, "id": entry.id, "title": entry.title},
            meta={"path": str(self._store.config_path)},
        )

    def set_timeout(self, seconds: int) -> ServiceResult:
        op = "set_timeout"
        try:
            self._store.config = LoaderConfig.load(self._store.config_path)
            self._store.config.timeout = seconds
            self._store.write_config()
        except SdBootConfError as exc:
            return _error_result(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"timeout": seconds},
            meta={"path": str(self._store.config_path)},
        )
