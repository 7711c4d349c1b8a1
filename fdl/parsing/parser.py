"""Folds a token list into the document tree.

The parser is deliberately lenient: tokens that do not fit the
section/field shape are dropped, never reported as errors. All rejection of
malformed input happens in the lexer.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Iterable, List

from fdl.parsing.tokens import Token, TokenKind
from fdl.parsing.tree import Document, Field, Section

logger = logging.getLogger("fdl.parsing.parser")


class Parser:
    """Token-to-tree builder with one token of look-ahead."""

    @classmethod
    def parse(cls, tokens: Iterable[Token]) -> Document:
        """Build the section tree.

        Args:
            tokens: Tokens in source order.

        Returns:
            Document: Sections in source order.
        """
        queue: Deque[Token] = deque(tokens)
        tree: List[Section] = []

        while queue:
            token = queue.popleft()
            if token.kind is TokenKind.SECTION_START:
                fields = cls._collect_fields(queue)
                tree.append(Section(name=token.text or "", fields=tuple(fields)))
            else:
                logger.debug("Ignoring stray top-level token %r", token)

        logger.debug("Parsed %d section(s)", len(tree))
        return tuple(tree)

    @staticmethod
    def _collect_fields(queue: Deque[Token]) -> List[Field]:
        # Runs until [/] or the end of the tokens; unterminated sections close silently.
        fields: List[Field] = []

        while queue:
            token = queue.popleft()
            if token.kind is TokenKind.SECTION_END:
                break
            if token.kind is TokenKind.FIELD:
                if queue and queue[0].kind is TokenKind.VALUE:
                    value = queue.popleft()
                    fields.append(Field(name=token.text or "", value=value.text or ""))
                else:
                    logger.debug("Dropping field %r without a value", token.text)
            else:
                logger.debug("Ignoring token %r inside section", token)

        return fields


__all__ = ["Parser"]
