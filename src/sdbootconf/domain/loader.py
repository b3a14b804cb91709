"""Loader settings — the ``loader.conf`` file.

Only ``default`` and ``timeout`` are modelled. Unlike entry files, other
keys are ignored so that settings written for newer loaders still load.
An unparseable ``timeout`` becomes ``0`` instead of failing the parse.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Self

from sdbootconf.domain.entry import ENTRY_SUFFIX, Entry, iter_content_lines
from sdbootconf.domain.errors import ConfigParseError, SdBootConfError, wrap_io

logger = logging.getLogger(__name__)

TIMEOUT_MAX = 2**32 - 1

_UNSIGNED_RE = re.compile(r"^\+?[0-9]+$")


def parse_timeout(value: str) -> int:
    """Parse an unsigned 32-bit timeout, falling back to ``0``."""
    if _UNSIGNED_RE.match(value):
        timeout = int(value)
        if timeout <= TIMEOUT_MAX:
            return timeout
    logger.warning("Unparseable timeout %r, using 0", value)
    return 0


@dataclass
class LoaderConfig:
    """Loader settings; ``None`` means the key is absent from the file."""

    default: str | None = None
    timeout: int | None = None

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse ``loader.conf`` contents.

        Raises:
            ConfigParseError: A line has a key but no value.
        """
        config = cls()
        for lineno, line in iter_content_lines(text):
            key, sep, value = line.partition(" ")
            if not sep:
                raise ConfigParseError(line).add_context(lineno=lineno)
            if key == "default":
                config.default = value
            elif key == "timeout":
                config.timeout = parse_timeout(value)
            else:
                logger.debug("Ignoring loader key %r", key)
        return config

    def render(self) -> str:
        parts: list[str] = []
        if self.default is not None:
            parts.append(f"default {self.default}\n")
        if self.timeout is not None:
            parts.append(f"timeout {self.timeout}\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def set_default(self, entry: Entry) -> None:
        """Point ``default`` at *entry*'s file name."""
        default = entry.id
        if not default.endswith(ENTRY_SUFFIX):
            default += ENTRY_SUFFIX
        self.default = default

    def resolve_default(self, entries_dir: Path) -> Entry | None:
        """Load the entry named by ``default`` from *entries_dir*.

        Returns ``None`` when ``default`` is unset. A set default that
        cannot be loaded is an error, not ``None``.

        Raises:
            BootConfIOError: The entry file cannot be read.
            InvalidEntryFilename: ``default`` lacks the ``.conf`` suffix.
            EntryParseError: The entry file is malformed.
        """
        if self.default is None:
            return None
        return Entry.load(Path(entries_dir) / self.default)

    @classmethod
    def load(cls, path: Path) -> Self:
        path = Path(path)
        with wrap_io(path):
            text = path.read_text(encoding="utf-8")
        try:
            config = cls.parse(text)
        except SdBootConfError as exc:
            raise exc.add_context(path=path)
        logger.debug("Loaded loader settings from %s", path)
        return config

    def write(self, path: Path) -> None:
        path = Path(path)
        with wrap_io(path):
            path.write_text(self.render(), encoding="utf-8", newline="")
        logger.debug("Wrote loader settings to %s", path)
