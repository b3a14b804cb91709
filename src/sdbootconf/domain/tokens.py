"""Entry tokens — the recognized ``keyword value`` lines of an entry file.

Each keyword maps to exactly one token class. Payloads are opaque text:
path-valued tokens (``efi``, ``linux``, ``initrd``) accept any
``os.PathLike`` and keep its native text form so that rendering never
rewrites what was read. See
<https://www.freedesktop.org/wiki/Software/systemd/systemd-boot/>.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from sdbootconf.domain.errors import MalformedLine, UnknownKeyword


@dataclass(frozen=True)
class Token:
    """Base token — subclasses bind a keyword to the payload."""

    value: str

    keyword: ClassVar[str] = ""
    is_path: ClassVar[bool] = False

    def __post_init__(self) -> None:
        if not self.keyword:
            msg = f"{type(self).__name__} has no keyword; use one of {sorted(TOKEN_REGISTRY)}"
            raise TypeError(msg)
        if self.is_path and not isinstance(self.value, str):
            object.__setattr__(self, "value", os.fspath(self.value))

    @property
    def path(self) -> Path:
        """The payload as a :class:`~pathlib.Path` (path-valued tokens only)."""
        if not self.is_path:
            msg = f"{self.keyword!r} token does not hold a path"
            raise TypeError(msg)
        return Path(self.value)

    def render(self) -> str:
        return render_token(self)


@dataclass(frozen=True)
class Title(Token):
    """Text to show in the menu."""

    keyword: ClassVar[str] = "title"


@dataclass(frozen=True)
class Version(Token):
    """Version string appended to the title when the title is not unique."""

    keyword: ClassVar[str] = "version"


@dataclass(frozen=True)
class MachineID(Token):
    """Machine identifier appended to the title when the title is not unique."""

    keyword: ClassVar[str] = "machine-id"


@dataclass(frozen=True)
class Efi(Token):
    """Executable EFI image."""

    keyword: ClassVar[str] = "efi"
    is_path: ClassVar[bool] = True


@dataclass(frozen=True)
class Options(Token):
    """Options passed to the EFI image / kernel command line."""

    keyword: ClassVar[str] = "options"


@dataclass(frozen=True)
class Linux(Token):
    """Linux kernel image (must carry an EFI stub)."""

    keyword: ClassVar[str] = "linux"
    is_path: ClassVar[bool] = True


@dataclass(frozen=True)
class Initrd(Token):
    """Initramfs image, added by the loader as ``initrd=``."""

    keyword: ClassVar[str] = "initrd"
    is_path: ClassVar[bool] = True


TOKEN_REGISTRY: dict[str, type[Token]] = {
    cls.keyword: cls for cls in (Title, Version, MachineID, Efi, Options, Linux, Initrd)
}

KEYWORDS: frozenset[str] = frozenset(TOKEN_REGISTRY)


def token_class(keyword: str) -> type[Token]:
    """Look up the token class for *keyword*.

    Raises:
        UnknownKeyword: If *keyword* is not recognized.
    """
    try:
        return TOKEN_REGISTRY[keyword]
    except KeyError:
        raise UnknownKeyword(keyword) from None


def parse_line(line: str) -> Token:
    """Parse one ``keyword value`` line into a token.

    The line is split on the first space; everything after it, including
    further spaces, is the value. Comment and blank lines must be filtered
    by the caller.

    Raises:
        MalformedLine: The line is empty or has no space.
        UnknownKeyword: The keyword is not recognized.
    """
    keyword, sep, value = line.partition(" ")
    if not sep:
        raise MalformedLine(line)
    return token_class(keyword)(value)


def render_token(token: Token) -> str:
    """Render *token* as ``"<keyword> <value>\\n"``."""
    return f"{token.keyword} {token.value}\n"
