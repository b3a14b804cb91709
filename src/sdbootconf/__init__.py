"""Parse, edit, and write systemd-boot loader configuration.

A loader directory holds ``loader.conf`` (default entry and menu timeout)
and ``entries/<id>.conf`` files, one per boot menu entry::

    from sdbootconf import SystemdBootConf

    conf = SystemdBootConf.load("/efi/loader")
    conf.config.set_default(conf.entries[0])
    conf.write_config()

Only the fields listed on
<https://www.freedesktop.org/wiki/Software/systemd/systemd-boot/> are
modelled.
"""

from __future__ import annotations

__version__ = "0.1.0"

from sdbootconf.builders import ConfigBuilder, EntryBuilder, SystemdBootConfBuilder
from sdbootconf.domain.entry import Entry
from sdbootconf.domain.errors import (
    BootConfIOError,
    ConfigParseError,
    EntryParseError,
    InvalidEntryFilename,
    MalformedLine,
    SdBootConfError,
    UnknownKeyword,
)
from sdbootconf.domain.loader import LoaderConfig
from sdbootconf.domain.tokens import (
    Efi,
    Initrd,
    Linux,
    MachineID,
    Options,
    Title,
    Token,
    Version,
    parse_line,
    render_token,
)
from sdbootconf.infrastructure.store import SystemdBootConf

__all__ = [
    "BootConfIOError",
    "ConfigBuilder",
    "ConfigParseError",
    "Efi",
    "Entry",
    "EntryBuilder",
    "EntryParseError",
    "Initrd",
    "InvalidEntryFilename",
    "Linux",
    "LoaderConfig",
    "MachineID",
    "MalformedLine",
    "Options",
    "SdBootConfError",
    "SystemdBootConf",
    "SystemdBootConfBuilder",
    "Title",
    "Token",
    "UnknownKeyword",
    "Version",
    "__version__",
    "parse_line",
    "render_token",
]
