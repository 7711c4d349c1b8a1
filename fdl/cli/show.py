"""Show command: render the section tree of a document."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from fdl.cli import resolve_config
from fdl.errors import ConfigurationError, LoadError
from fdl.store import Store

logger = logging.getLogger("fdl.cli.show")


def show_command(args, console: Console | None = None) -> int:
    """Print every section and field of ``args.path`` as a tree.

    Returns:
        int: Exit code (0 for success, 2 on load failure).
    """
    console = console or Console()

    try:
        store = Store.load(args.path, resolve_config(args))
    except (ConfigurationError, LoadError) as exc:
        logger.error("%s", exc)
        return 2

    root = Tree(escape(str(args.path)))
    for section in store:
        branch = root.add(f"[bold]\\[{escape(section.name)}][/bold]")
        for field in section.fields:
            branch.add(f"{escape(repr(field.name))} = {escape(repr(field.value))}")

    console.print(root)
    return 0
