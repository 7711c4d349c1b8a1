"""Loading facade: owns a parsed document and answers lookups.

A Store is built once per load and never mutated afterwards, so a single
instance can serve ``fetch`` calls from any number of threads.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Tuple, Union

from fdl.config.schema import FDLConfig
from fdl.errors import OpenError, ParseError, UnexpectedCharacter
from fdl.parsing.lexer import tokenize
from fdl.parsing.parser import Parser
from fdl.parsing.tree import Document, Section, find_section

logger = logging.getLogger("fdl.store")

PADDING = " "


class Store:
    """Read-only view over a loaded FDL document."""

    def __init__(self, tree: Document, path: Optional[Path] = None) -> None:
        self._tree: Document = tuple(tree)
        self._path = path

    @classmethod
    def load(
        cls,
        path: Union[str, Path],
        config: Optional[FDLConfig] = None,
    ) -> "Store":
        """Load and parse the document at ``path``.

        Args:
            path: File to read.
            config: Reader and decoding options; defaults when omitted.

        Returns:
            Store: Facade over the parsed tree.

        Raises:
            OpenError: The file could not be opened.
            ParseError: The file cannot be decoded with the configured codec.
            UnexpectedCharacter: The file is malformed.
        """
        path = Path(path)
        try:
            handle = open(path, "rb")
        except OSError as exc:
            logger.debug("Failed to open %s: %s", path, exc)
            raise OpenError(path, exc.strerror or str(exc)) from exc

        with handle:
            store = cls._build(handle, config, path)

        logger.info("Loaded %s: %d section(s)", path, len(store))
        return store

    @classmethod
    def loads(
        cls,
        data: Union[bytes, str],
        config: Optional[FDLConfig] = None,
    ) -> "Store":
        """Parse an in-memory document.

        ``str`` input is encoded with the configured encoding first.

        Raises:
            ParseError: The text cannot be encoded with the configured codec.
            UnexpectedCharacter: The document is malformed.
        """
        config = config or FDLConfig.default()
        if isinstance(data, str):
            try:
                data = data.encode(config.decode.encoding)
            except UnicodeError as exc:
                raise ParseError(f"could not encode document: {exc}") from exc
        return cls._build(data, config, None)

    @classmethod
    def _build(
        cls,
        source: Union[bytes, BinaryIO],
        config: Optional[FDLConfig],
        path: Optional[Path],
    ) -> "Store":
        try:
            tokens = tokenize(source, config)
        except UnexpectedCharacter as exc:
            if path is None:
                raise
            raise exc.with_path(path) from None
        except UnicodeError as exc:
            where = f"{path}: " if path is not None else ""
            raise ParseError(f"{where}could not decode document: {exc}", path) from exc
        return cls(Parser.parse(tokens), path)

    @property
    def path(self) -> Optional[Path]:
        """Source file, or None for documents parsed from memory."""
        return self._path

    @property
    def sections(self) -> Tuple[Section, ...]:
        return self._tree

    def __len__(self) -> int:
        return len(self._tree)

    def __iter__(self) -> Iterator[Section]:
        return iter(self._tree)

    def __contains__(self, section: object) -> bool:
        return isinstance(section, str) and find_section(self._tree, section) is not None

    def fetch(self, section: str, field: str) -> Optional[str]:
        """Look up a field value.

        Only the first section named ``section`` is searched. Inside it an
        exact field name match wins and its value is returned verbatim.
        Failing that, names are compared without the optional spaces around
        ``=`` and the matched value is returned without them as well.

        An exact match therefore beats an earlier field whose name only
        matches once padding is stripped; this is the one exception to
        first-match lookup.

        Returns:
            Optional[str]: The value, or None when either lookup misses.
        """
        found = find_section(self._tree, section)
        if found is None:
            return None

        value = found.get(field)
        if value is not None:
            return value

        wanted = field.strip(PADDING)
        for candidate in found.fields:
            if candidate.name.strip(PADDING) == wanted:
                return candidate.value.strip(PADDING)
        return None

    def __repr__(self) -> str:
        return f"Store(path={self._path!s}, sections={len(self._tree)})"


def load(path: Union[str, Path], config: Optional[FDLConfig] = None) -> Store:
    """Load the document at ``path``. See ``Store.load``."""
    return Store.load(path, config)


def loads(data: Union[bytes, str], config: Optional[FDLConfig] = None) -> Store:
    """Parse an in-memory document. See ``Store.loads``."""
    return Store.loads(data, config)


__all__ = ["Store", "load", "loads"]
