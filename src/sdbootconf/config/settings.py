"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``SDBOOTCONF_*`` prefix
  3. TOML file    — ``sdbootconf.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`sdbootconf.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from sdbootconf.config.discovery import find_config
from sdbootconf.config.models import StoreConfig

DEFAULT_WORKING_DIR = Path("/efi/loader")


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``sdbootconf.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc
            # A relative working_dir is relative to the file that sets it.
            root = self._data.get("working_dir")
            if isinstance(root, str) and not Path(root).is_absolute():
                self._data["working_dir"] = str(toml_path.parent / root)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class SdbSettings(BaseSettings):
    """Unified settings for the sdbootconf CLI.

    Attributes:
        working_dir: Loader directory holding ``loader.conf`` and ``entries/``.
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SDBOOTCONF_",
        "env_nested_delimiter": "__",
    }

    working_dir: Path = DEFAULT_WORKING_DIR
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    store: StoreConfig = Field(default_factory=StoreConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        working_dir: Path | None = None,
        **cli_flags: Any,
    ) -> SdbSettings:
        """Construct settings from CLI invocation.

        Discovers ``sdbootconf.toml`` via walk-up (or explicit
        *config_path*). An explicit *working_dir* overrides env vars and
        TOML; otherwise they decide, falling back to ``/efi/loader``. A
        relative ``working_dir`` in the TOML file is taken from the file's
        directory.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config()

        overrides: dict[str, Any] = dict(cli_flags)
        if working_dir is not None:
            overrides["working_dir"] = working_dir

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
