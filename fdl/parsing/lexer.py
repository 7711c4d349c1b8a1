"""Tokenizer for FDL documents.

The lexer walks the Reader once and tries, in fixed order, to recognize a
line terminator, a section marker, a field value and a field name. Lexing is
all-or-nothing: the first position none of them accepts aborts the whole run
with ``UnexpectedCharacter``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, BinaryIO, List, Optional, Union

from fdl.errors import ScanError, UnexpectedCharacter
from fdl.parsing.reader import CARRIAGE_RETURN, NEWLINE, Reader
from fdl.parsing.tokens import Token

if TYPE_CHECKING:
    from fdl.config.schema import FDLConfig

logger = logging.getLogger("fdl.parsing.lexer")

SQ_BR_O = ord("[")
SQ_BR_C = ord("]")
EQ = ord("=")
END_MARKER = b"/"


class Lexer:
    """Turns a Reader into a flat list of Tokens."""

    def __init__(
        self,
        reader: Reader,
        encoding: str = "utf-8",
        errors: str = "replace",
    ) -> None:
        """Initialize lexer.

        Args:
            reader: Byte cursor positioned at the start of the document.
            encoding: Codec used to turn collected bytes into text.
            errors: Codec error handler; "replace" keeps undecodable bytes
                as U+FFFD instead of failing.
        """
        self._reader = reader
        self._encoding = encoding
        self._errors = errors

    def _text(self, seq: bytes) -> str:
        return seq.decode(self._encoding, self._errors)

    def _newline(self) -> bool:
        if self._reader.consume_if(NEWLINE):
            return True
        if self._reader.peek() == CARRIAGE_RETURN and self._reader.peek(2) == NEWLINE:
            self._reader.consume(2)
            return True
        return False

    def _section(self) -> Optional[Token]:
        if self._reader.peek() != SQ_BR_O:
            return None
        self._reader.consume()
        try:
            seq = self._reader.consume_until_newline_or(SQ_BR_C)
        except ScanError as exc:
            logger.debug("Section marker declined: %s", exc)
            return None
        self._reader.consume()
        if seq == END_MARKER:
            return Token.section_end()
        return Token.section_start(self._text(seq))

    def _value(self) -> Optional[Token]:
        if self._reader.peek() != EQ:
            return None
        self._reader.consume()
        seq = self._reader.consume_until(NEWLINE)
        if seq.endswith(b"\r"):
            seq = seq[:-1]
        return Token.value(self._text(seq))

    def _field(self) -> Optional[Token]:
        # Leaves the cursor on "=" so the next pass reads the value.
        try:
            seq = self._reader.consume_until_newline_or(EQ)
        except ScanError as exc:
            logger.debug("Field declined: %s", exc)
            return None
        return Token.field(self._text(seq))

    def lex(self) -> List[Token]:
        """Tokenize the whole stream.

        Returns:
            List[Token]: Tokens in source order.

        Raises:
            UnexpectedCharacter: A position matched no construct. Carries the
                byte offset where the failed attempt started.
        """
        tokens: List[Token] = []
        line_start = True

        while not self._reader.is_eof():
            start = self._reader.cursor
            if self._newline():
                line_start = True
                continue

            token = self._section()
            # A line starting with "=" is an empty field name, not a value.
            if token is None and not line_start:
                token = self._value()
            if token is None:
                token = self._field()
            if token is None:
                logger.debug("No construct matched at byte %d", start)
                raise UnexpectedCharacter(start)

            tokens.append(token)
            line_start = False

        logger.debug("Lexed %d token(s) from %d byte(s)", len(tokens), self._reader.cursor)
        return tokens


def tokenize(
    source: Union[bytes, bytearray, BinaryIO],
    config: Optional["FDLConfig"] = None,
) -> List[Token]:
    """Tokenize in-memory bytes or a binary stream.

    Args:
        source: Document bytes or a readable binary stream.
        config: Reader and decoding options; defaults when omitted.

    Returns:
        List[Token]: Tokens in source order.
    """
    if config is None:
        from fdl.config.schema import FDLConfig

        config = FDLConfig.default()

    if isinstance(source, (bytes, bytearray)):
        reader = Reader.from_bytes(bytes(source), chunk_size=config.reader.chunk_size)
    else:
        reader = Reader(source, chunk_size=config.reader.chunk_size)

    lexer = Lexer(reader, encoding=config.decode.encoding, errors=config.decode.errors)
    return lexer.lex()


__all__ = ["Lexer", "tokenize"]
