"""Lexer regression tests."""

from __future__ import annotations

import io

import pytest

from fdl.config import FDLConfig
from fdl.errors import UnexpectedCharacter
from fdl.parsing.lexer import Lexer, tokenize
from fdl.parsing.reader import Reader
from fdl.parsing.tokens import Token, TokenKind


def test_lex_simple_section() -> None:
    tokens = tokenize(b"[flap]\nframes = 1\n[/]\n")

    assert tokens == [
        Token.section_start("flap"),
        Token.field("frames "),
        Token.value(" 1"),
        Token.section_end(),
    ]


def test_names_and_values_keep_whitespace() -> None:
    tokens = tokenize(b"[a]\n  spacedname  =  spacedvalue  \n[/]\n")

    assert tokens[1] == Token.field("  spacedname  ")
    assert tokens[2] == Token.value("  spacedvalue  ")


def test_blank_lines_are_skipped() -> None:
    tokens = tokenize(b"\n\n[a]\n\nx=1\n\n\n[/]\n\n")

    assert [t.kind for t in tokens] == [
        TokenKind.SECTION_START,
        TokenKind.FIELD,
        TokenKind.VALUE,
        TokenKind.SECTION_END,
    ]


def test_empty_header_is_a_section_start() -> None:
    assert tokenize(b"[]\n") == [Token.section_start("")]


@pytest.mark.parametrize("header, name", [(b"[x]", "x"), (b"[ ]", " "), (b"[//]", "//")])
def test_only_slash_is_an_end_marker(header: bytes, name: str) -> None:
    assert tokenize(header + b"\n") == [Token.section_start(name)]


def test_empty_value() -> None:
    assert tokenize(b"x=\n") == [Token.field("x"), Token.value("")]


def test_leading_equals_is_an_empty_field_name() -> None:
    assert tokenize(b"= value\n") == [Token.field(""), Token.value(" value")]


def test_value_keeps_later_delimiters() -> None:
    """Only the first "=" splits; the value runs to the end of the line."""
    assert tokenize(b"k = a=b[c]\n") == [Token.field("k "), Token.value(" a=b[c]")]


def test_value_at_end_of_stream_without_newline() -> None:
    assert tokenize(b"[a]\nx=1") == [
        Token.section_start("a"),
        Token.field("x"),
        Token.value("1"),
    ]


def test_crlf_line_endings() -> None:
    tokens = tokenize(b"[a]\r\nx = 1\r\n\r\n[/]\r\n")

    assert tokens == [
        Token.section_start("a"),
        Token.field("x "),
        Token.value(" 1"),
        Token.section_end(),
    ]


def test_line_without_equals_fails_at_line_start() -> None:
    with pytest.raises(UnexpectedCharacter) as excinfo:
        tokenize(b"[a]\nnoequals\n[/]\n")

    assert excinfo.value.offset == 4


@pytest.mark.parametrize("data", [b"[abc", b"[ab\n", b"[a=b\n"])
def test_unterminated_header_fails(data: bytes) -> None:
    with pytest.raises(UnexpectedCharacter) as excinfo:
        tokenize(data)

    assert excinfo.value.offset == 0


def test_failure_is_all_or_nothing() -> None:
    """A bad line late in the document still aborts the whole lex."""
    data = b"[a]\nx = 1\n[/]\n[b]\ny = 2\nbroken\n[/]\n"

    with pytest.raises(UnexpectedCharacter) as excinfo:
        tokenize(data)

    assert excinfo.value.offset == data.index(b"broken")


def test_undecodable_bytes_are_replaced() -> None:
    assert tokenize(b"k=\xff\n")[1] == Token.value("\ufffd")


def test_configured_encoding_is_used() -> None:
    config = FDLConfig.from_dict({"decode": {"encoding": "latin-1"}})

    assert tokenize(b"k=\xe9\n", config)[1] == Token.value("\xe9")


def test_stream_and_bytes_lex_identically() -> None:
    data = b"[one]\na = 1\nb = 2\n[/]\n[two]\nc=\n[/]\n"
    config = FDLConfig.from_dict({"reader": {"chunk_size": 1}})

    assert tokenize(io.BytesIO(data), config) == tokenize(data)


def test_lexer_over_reader() -> None:
    lexer = Lexer(Reader.from_bytes(b"[s]\n[/]\n"))

    assert lexer.lex() == [Token.section_start("s"), Token.section_end()]


def test_empty_input_has_no_tokens() -> None:
    assert tokenize(b"") == []


def test_token_repr() -> None:
    assert repr(Token.section_end()) == "Token(SECTION_END)"
    assert repr(Token.field("x")) == "Token(FIELD, 'x')"


def test_equals_after_header_is_a_stray_value() -> None:
    """Only an "=" at the start of a line opens an empty field name."""
    assert tokenize(b"[a]=x\n") == [Token.section_start("a"), Token.value("x")]


def test_equals_on_later_line_is_an_empty_field_name() -> None:
    assert tokenize(b"[a]\n=x\n") == [
        Token.section_start("a"),
        Token.field(""),
        Token.value("x"),
    ]
