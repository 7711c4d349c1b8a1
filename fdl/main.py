"""Main CLI entry point for fdl.

Provides commands: fetch, show, tokens
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from fdl.cli.fetch import fetch_command
from fdl.cli.show import show_command
from fdl.cli.tokens import tokens_command

logger = logging.getLogger("fdl.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="fdl",
        description="FDL - sectioned key/value document reader",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional loading configuration. Can be a path to a TOML/JSON "
            "file or an inline TOML/JSON string. When omitted, built-in "
            "defaults are used."
        ),
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    fetch_parser = subparsers.add_parser(
        "fetch",
        help="Print the value of one field",
    )
    fetch_parser.add_argument("path", help="FDL document to read")
    fetch_parser.add_argument("section", help="Section name")
    fetch_parser.add_argument("field", help="Field name")

    show_parser = subparsers.add_parser(
        "show",
        help="Print every section and field as a tree",
    )
    show_parser.add_argument("path", help="FDL document to read")

    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Print the token stream (for debugging malformed documents)",
    )
    tokens_parser.add_argument("path", help="FDL document to read")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command == "fetch":
        return fetch_command(args)
    elif args.command == "show":
        return show_command(args)
    elif args.command == "tokens":
        return tokens_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
