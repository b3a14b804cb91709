"""SystemdBootConf — the whole loader directory in memory.

Bundles the working directory, its loader settings, and every entry
found under ``entries/``. Loading replaces state only after every file
loaded; writing is per file and not transactional, so a failure part way
through :meth:`SystemdBootConf.write_entries` can leave earlier entries
written.

INVARIANT: ``config.default`` is not required to name a loaded entry.
Resolving it is an explicit, fallible lookup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self

from sdbootconf.domain.entry import Entry
from sdbootconf.domain.loader import LoaderConfig
from sdbootconf.infrastructure.filesystem import (
    ensure_dir,
    entries_path,
    find_entry_files,
    loader_path,
)

logger = logging.getLogger(__name__)


@dataclass
class SystemdBootConf:
    """Loader settings plus all entries for one working directory."""

    working_dir: Path
    config: LoaderConfig = field(default_factory=LoaderConfig)
    entries: list[Entry] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.working_dir = Path(self.working_dir)

    @classmethod
    def init(cls, working_dir: Path) -> Self:
        """Empty settings and no entries; performs no I/O."""
        return cls(working_dir=Path(working_dir))

    @classmethod
    def load(cls, working_dir: Path, *, sort: bool = False) -> Self:
        """Read an existing loader directory."""
        conf = cls.init(working_dir)
        conf.load_current(sort=sort)
        return conf

    @property
    def config_path(self) -> Path:
        return loader_path(self.working_dir)

    @property
    def entries_dir(self) -> Path:
        return entries_path(self.working_dir)

    def load_current(self, *, sort: bool = False) -> None:
        """Reload settings and entries from :attr:`working_dir`.

        Entries keep directory-enumeration order unless *sort* is set.
        Any unreadable file, unlistable directory, or malformed entry
        aborts the load and leaves the current state untouched.
        """
        config = LoaderConfig.load(self.config_path)
        entries = [Entry.load(path) for path in find_entry_files(self.entries_dir, sort=sort)]

        self.config = config
        self.entries = entries
        logger.debug("Loaded %d entries from %s", len(entries), self.working_dir)

    def write_config(self) -> None:
        ensure_dir(self.working_dir)
        self.config.write(self.config_path)

    def write_entries(self) -> None:
        """Write every entry; the first failure stops the remaining writes."""
        ensure_dir(self.entries_dir)
        for entry in self.entries:
            entry.write(self.entries_dir)

    def write_all(self) -> None:
        self.write_config()
        self.write_entries()
        logger.debug("Wrote loader settings and %d entries to %s", len(self.entries), self.working_dir)

    def get_entry(self, entry_id: str) -> Entry | None:
        """The loaded entry with *entry_id*, if any."""
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None

    def resolve_default(self) -> Entry | None:
        """Load the default entry from disk (see :meth:`LoaderConfig.resolve_default`)."""
        return self.config.resolve_default(self.entries_dir)
