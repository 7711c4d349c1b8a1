"""Fetch command implementation."""

from __future__ import annotations

import logging

from fdl.cli import resolve_config
from fdl.errors import ConfigurationError, LoadError
from fdl.store import Store

logger = logging.getLogger("fdl.cli.fetch")


def fetch_command(args) -> int:
    """Print a single field value to stdout, verbatim.

    Args:
        args: Parsed command-line arguments containing:
            - path: Document to load
            - section: Section name
            - field: Field name

    Returns:
        int: 0 when found, 1 when the value is missing, 2 on load failure.
    """
    try:
        store = Store.load(args.path, resolve_config(args))
    except (ConfigurationError, LoadError) as exc:
        logger.error("%s", exc)
        return 2

    value = store.fetch(args.section, args.field)
    if value is None:
        logger.warning("No field %r in section %r", args.field, args.section)
        return 1

    print(value)
    return 0
