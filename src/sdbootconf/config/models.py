"""Pydantic settings sections with code-baked defaults.

Sparse TOML contract: defaults live here, ``sdbootconf.toml`` only holds
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    # Directory enumeration order is filesystem-dependent; sort for stable output.
    sort_entries: bool = True
