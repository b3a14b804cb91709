"""Boot menu entries — one ``entries/<id>.conf`` file each.

An :class:`Entry` is an identifier plus the ordered tokens of its file.
The identifier is the file name without the ``.conf`` suffix: it is
derived when loading and re-appended when writing, never stored with
the suffix.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Self

from sdbootconf.domain.errors import EntryParseError, InvalidEntryFilename, wrap_io
from sdbootconf.domain.tokens import Efi, Initrd, Linux, MachineID, Options, Title, Token, Version
from sdbootconf.domain.tokens import parse_line as parse_token

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

ENTRY_SUFFIX = ".conf"


def iter_content_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(lineno, line)`` for every line that is not blank or a comment.

    Whitespace-only lines count as blank; a comment starts with ``#`` in
    the first column.

    Lines are split on ``\\n``; a trailing ``\\r`` is dropped so files with
    CRLF endings read the same. Line numbers are 1-based.
    """
    for lineno, line in enumerate(text.split("\n"), start=1):
        if line.endswith("\r"):
            line = line[:-1]
        if not line.strip() or line.startswith("#"):
            continue
        yield lineno, line


def entry_id_from_path(path: Path) -> str:
    """Derive an entry id from ``<id>.conf``.

    Raises:
        InvalidEntryFilename: The path has no file name, the name is not
            representable as UTF-8 text, or it lacks the ``.conf`` suffix.
    """
    name = path.name
    if not name or name == "..":
        raise InvalidEntryFilename(path)
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidEntryFilename(path) from None
    if not name.endswith(ENTRY_SUFFIX):
        raise InvalidEntryFilename(path)
    return name[: -len(ENTRY_SUFFIX)]


@dataclass
class Entry:
    """A boot menu entry: an id plus its tokens in file order."""

    id: str = ""
    tokens: list[Token] = field(default_factory=list)

    # --- Text codec ---

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse entry file contents; the returned entry has an empty id.

        One bad line aborts the whole parse.

        Raises:
            MalformedLine: A line has no value.
            UnknownKeyword: A line uses an unrecognized keyword.
        """
        entry = cls()
        for lineno, line in iter_content_lines(text):
            try:
                entry.tokens.append(parse_token(line))
            except EntryParseError as exc:
                raise exc.add_context(lineno=lineno)
        return entry

    def render(self) -> str:
        """Render the tokens back to entry file text."""
        return "".join(token.render() for token in self.tokens)

    def __str__(self) -> str:
        return self.render()

    # --- File I/O ---

    @property
    def filename(self) -> str:
        return f"{self.id}{ENTRY_SUFFIX}"

    def path_in(self, entries_dir: Path) -> Path:
        """Path of this entry's file under *entries_dir*."""
        return Path(entries_dir) / self.filename

    @classmethod
    def load(cls, path: Path) -> Self:
        """Load an entry file, taking the id from its file name."""
        path = Path(path)
        entry_id = entry_id_from_path(path)
        with wrap_io(path):
            text = path.read_text(encoding="utf-8")
        try:
            entry = cls.parse(text)
        except EntryParseError as exc:
            raise exc.add_context(path=path)
        entry.id = entry_id
        logger.debug("Loaded entry %s (%d tokens)", entry_id, len(entry.tokens))
        return entry

    def write(self, entries_dir: Path) -> Path:
        """Write ``<entries_dir>/<id>.conf``, overwriting any existing file."""
        path = self.path_in(entries_dir)
        with wrap_io(path):
            path.write_text(self.render(), encoding="utf-8", newline="")
        logger.debug("Wrote entry %s to %s", self.id, path)
        return path

    # --- Token accessors ---

    def _first(self, token_cls: type[Token]) -> str | None:
        for token in self.tokens:
            if type(token) is token_cls:
                return token.value
        return None

    def tokens_of(self, token_cls: type[Token]) -> list[Token]:
        """All tokens of exactly *token_cls*, in file order."""
        return [token for token in self.tokens if type(token) is token_cls]

    @property
    def title(self) -> str | None:
        return self._first(Title)

    @property
    def version(self) -> str | None:
        return self._first(Version)

    @property
    def machine_id(self) -> str | None:
        return self._first(MachineID)

    @property
    def options(self) -> str | None:
        return self._first(Options)

    @property
    def efi(self) -> Path | None:
        value = self._first(Efi)
        return Path(value) if value is not None else None

    @property
    def linux(self) -> Path | None:
        value = self._first(Linux)
        return Path(value) if value is not None else None

    @property
    def initrd(self) -> list[Path]:
        """Every initrd, in order (an entry may list several)."""
        return [token.path for token in self.tokens_of(Initrd)]
