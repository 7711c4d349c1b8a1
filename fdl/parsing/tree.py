"""Immutable document tree built by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Field:
    """A single ``name = value`` entry, both captured verbatim."""

    name: str
    value: str


@dataclass(frozen=True)
class Section:
    """A named group of fields delimited by ``[name]`` ... ``[/]``.

    Attributes:
        name: Header text between the brackets.
        fields: Fields in source order. Names may repeat.
    """

    name: str
    fields: Tuple[Field, ...] = ()

    def get(self, name: str) -> Optional[str]:
        """Return the value of the first field called ``name``."""
        for field in self.fields:
            if field.name == name:
                return field.value
        return None


Document = Tuple[Section, ...]


def find_section(document: Document, name: str) -> Optional[Section]:
    """Return the first section called ``name``, or None."""
    for section in document:
        if section.name == name:
            return section
    return None


__all__ = ["Field", "Section", "Document", "find_section"]
