"""Command implementations for the fdl CLI."""

from __future__ import annotations

from typing import Optional

from fdl.config import FDLConfig, load_config


def resolve_config(args) -> FDLConfig:
    """Build the loading configuration from ``--config``, if given."""
    source: Optional[str] = getattr(args, "config", None)
    return load_config(source)
