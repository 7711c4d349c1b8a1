"""Exception hierarchy for fdl.

Errors fall into two families:

1. LoadError - surfaced to callers of ``load``/``loads`` when a document
   cannot be opened or tokenized.
2. ScanError - internal control signals raised by the Reader while it scans
   for a delimiter. The lexer turns them into "no match" and they never
   escape a load.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class FDLError(Exception):
    """Base class for every error raised by fdl."""
    pass


# =============================================================================
# Load errors
# =============================================================================

class LoadError(FDLError):
    """A document could not be loaded.

    Attributes:
        path: Source path, or None when loading from memory.
    """

    def __init__(self, message: str, path: Optional[PathLike] = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class OpenError(LoadError):
    """The byte source could not be opened (missing file, permissions, ...).

    The originating ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, path: PathLike, reason: str = "") -> None:
        message = f"could not open file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, path)


class ParseError(LoadError):
    """The document is malformed and was rejected by the lexer."""
    pass


class UnexpectedCharacter(ParseError):
    """The lexer met a byte it could not classify.

    Attributes:
        offset: Absolute byte offset where no construct matched.
    """

    def __init__(self, offset: int, path: Optional[PathLike] = None) -> None:
        where = f"{path}: " if path is not None else ""
        super().__init__(f"{where}unexpected character at byte {offset}", path)
        self.offset = offset

    def with_path(self, path: PathLike) -> "UnexpectedCharacter":
        """Return a copy of this error bound to ``path``."""
        return UnexpectedCharacter(self.offset, path)


class ConfigurationError(FDLError):
    """Configuration source is unreadable or fails validation."""
    pass


# =============================================================================
# Scan signals
# =============================================================================

class ScanError(FDLError):
    """A delimiter scan stopped before reaching its target byte."""
    pass


class EndOfLine(ScanError):
    """A line terminator appeared before the delimiter."""
    pass


class EndOfFile(ScanError):
    """The stream ended before the delimiter or a line terminator."""
    pass


__all__ = [
    "FDLError",
    "LoadError",
    "OpenError",
    "ParseError",
    "UnexpectedCharacter",
    "ConfigurationError",
    "ScanError",
    "EndOfLine",
    "EndOfFile",
]
