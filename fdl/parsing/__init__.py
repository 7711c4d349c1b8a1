"""Byte cursor, tokenizer and tree builder for FDL documents."""

from .reader import Reader
from .tokens import Token, TokenKind
from .lexer import Lexer, tokenize
from .parser import Parser
from .tree import Document, Field, Section, find_section

__all__ = [
    "Reader",
    "Token",
    "TokenKind",
    "Lexer",
    "tokenize",
    "Parser",
    "Document",
    "Field",
    "Section",
    "find_section",
]
