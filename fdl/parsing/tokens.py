"""Token model produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenKind(str, Enum):
    """Classified lexical units of an FDL document."""

    SECTION_START = "section_start"
    SECTION_END = "section_end"
    FIELD = "field"
    VALUE = "value"


@dataclass(frozen=True)
class Token:
    """Immutable lexer token.

    Attributes:
        kind: Which construct this token represents.
        text: Section name, field name or value text. None for SECTION_END.
    """

    kind: TokenKind
    text: Optional[str] = None

    @classmethod
    def section_start(cls, name: str) -> "Token":
        return cls(TokenKind.SECTION_START, name)

    @classmethod
    def section_end(cls) -> "Token":
        return cls(TokenKind.SECTION_END)

    @classmethod
    def field(cls, name: str) -> "Token":
        return cls(TokenKind.FIELD, name)

    @classmethod
    def value(cls, text: str) -> "Token":
        return cls(TokenKind.VALUE, text)

    def __repr__(self) -> str:
        if self.text is None:
            return f"Token({self.kind.name})"
        return f"Token({self.kind.name}, {self.text!r})"


__all__ = ["Token", "TokenKind"]
