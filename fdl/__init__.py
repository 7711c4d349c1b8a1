"""Reader for FDL, a sectioned ``name = value`` text format.

Typical use::

    import fdl

    store = fdl.load("sprites.fdl")
    frames = store.fetch("flap", "frames")
"""

from fdl.config import FDLConfig, load_config
from fdl.errors import (
    ConfigurationError,
    EndOfFile,
    EndOfLine,
    FDLError,
    LoadError,
    OpenError,
    ParseError,
    ScanError,
    UnexpectedCharacter,
)
from fdl.parsing import (
    Document,
    Field,
    Lexer,
    Parser,
    Reader,
    Section,
    Token,
    TokenKind,
    tokenize,
)
from fdl.store import Store, load, loads

__all__ = [
    "FDLConfig",
    "load_config",
    "ConfigurationError",
    "EndOfFile",
    "EndOfLine",
    "FDLError",
    "LoadError",
    "OpenError",
    "ParseError",
    "ScanError",
    "UnexpectedCharacter",
    "Document",
    "Field",
    "Lexer",
    "Parser",
    "Reader",
    "Section",
    "Token",
    "TokenKind",
    "tokenize",
    "Store",
    "load",
    "loads",
]
