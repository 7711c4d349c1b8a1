"""Tokens command: dump the raw token stream for debugging documents."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fdl.cli import resolve_config
from fdl.errors import ConfigurationError, UnexpectedCharacter
from fdl.parsing.lexer import tokenize

logger = logging.getLogger("fdl.cli.tokens")


def tokens_command(args, console: Console | None = None) -> int:
    """Print the tokens of ``args.path`` in source order.

    Returns:
        int: Exit code (0 for success, 2 on open or lex failure).
    """
    console = console or Console()
    path = Path(args.path)

    try:
        config = resolve_config(args)
        with open(path, "rb") as handle:
            tokens = tokenize(handle, config)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 2
    except OSError as exc:
        logger.error("could not open file: %s (%s)", path, exc.strerror or exc)
        return 2
    except UnexpectedCharacter as exc:
        logger.error("%s", exc.with_path(path))
        return 2
    except UnicodeError as exc:
        logger.error("%s: could not decode document: %s", path, exc)
        return 2

    table = Table(title=escape(str(path)))
    table.add_column("#", justify="right")
    table.add_column("kind")
    table.add_column("text")
    for idx, token in enumerate(tokens):
        text = "" if token.text is None else repr(token.text)
        table.add_row(str(idx), token.kind.name, escape(text))

    console.print(table)
    return 0
