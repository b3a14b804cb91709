"""Error hierarchy for loader settings and entry files.

Every failure raised by the library derives from :class:`SdBootConfError`.
Parse errors optionally carry the offending file and 1-based line number
so callers can report where a configuration went wrong.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class SdBootConfError(Exception):
    """Base class for all sdbootconf errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.path: Path | None = None
        self.lineno: int | None = None

    def add_context(self, *, path: Path | None = None, lineno: int | None = None) -> SdBootConfError:
        """Attach file/line context (existing values win) and return self."""
        if path is not None and self.path is None:
            self.path = path
        if lineno is not None and self.lineno is None:
            self.lineno = lineno
        return self

    def __str__(self) -> str:
        if self.path is not None and self.lineno is not None:
            return f"{self.path}:{self.lineno}: {self.message}"
        if self.path is not None:
            return f"{self.path}: {self.message}"
        if self.lineno is not None:
            return f"line {self.lineno}: {self.message}"
        return self.message


class ConfigParseError(SdBootConfError):
    """A ``loader.conf`` line has a key but no value."""

    def __init__(self, line: str) -> None:
        super().__init__(f"invalid configuration line {line!r}")
        self.line = line


class EntryParseError(SdBootConfError):
    """An entry file could not be parsed."""


class MalformedLine(EntryParseError):
    """An entry line is empty or has no value after the keyword."""

    def __init__(self, line: str) -> None:
        super().__init__(f"invalid entry line {line!r}")
        self.line = line


class UnknownKeyword(EntryParseError):
    """An entry line starts with a keyword outside the recognized set."""

    def __init__(self, keyword: str) -> None:
        super().__init__(f"invalid token {keyword}")
        self.keyword = keyword


class InvalidEntryFilename(SdBootConfError):
    """An entry path has no usable ``<id>.conf`` file name."""

    def __init__(self, path: Path) -> None:
        super().__init__("invalid entry filename")
        self.path = path


class BootConfIOError(SdBootConfError):
    """Reading, writing, or listing a file failed.

    The underlying :class:`OSError` (or :class:`UnicodeDecodeError` for
    files that are not UTF-8) is available as ``__cause__``.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(reason)
        self.path = path

    @property
    def not_found(self) -> bool:
        return isinstance(self.__cause__, FileNotFoundError)


@contextmanager
def wrap_io(path: Path) -> Iterator[None]:
    """Re-raise filesystem failures under *path* as :class:`BootConfIOError`."""
    try:
        yield
    except OSError as exc:
        raise BootConfIOError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise BootConfIOError(path, f"not valid UTF-8 text ({exc.reason})") from exc
