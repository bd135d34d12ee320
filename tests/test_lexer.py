"""Tests for the quoted string lexer."""

from __future__ import annotations

import pytest

from bkmtree.bkm.lexer import parse_quoted, quote, try_parse_quoted
from bkmtree.errors import MalformedTitle


def test_parse_quoted_returns_position_after_closing_quote() -> None:
    """It should decode the content and stop right after the closing quote."""

    text = '"Chapter 1" font:bold'
    value, end = parse_quoted(text)
    assert value == "Chapter 1"
    assert text[end:] == " font:bold"


def test_parse_quoted_unescapes_backslash_and_quote() -> None:
    """It should unescape backslash and double quote."""

    value, _ = parse_quoted(r'"say \"hi\" C:\\temp"')
    assert value == 'say "hi" C:\\temp'


def test_parse_quoted_keeps_unknown_escapes_verbatim() -> None:
    """It should keep the backslash of an unknown escape and read the next char normally."""

    value, _ = parse_quoted(r'"a\nb"')
    assert value == "a\\nb"
    assert len(value) == 4


def test_parse_quoted_escaped_backslash_before_closing_quote() -> None:
    """It should not treat the quote after an escaped backslash as escaped."""

    value, end = parse_quoted(r'"x\\" rest')
    assert value == "x\\"
    assert end == 5


def test_parse_quoted_from_offset() -> None:
    """It should start at the given position."""

    value, end = parse_quoted('    "Nested"', 4)
    assert value == "Nested"
    assert end == 12


def test_parse_quoted_empty_string() -> None:
    """It should accept an empty quoted string."""

    assert parse_quoted('""') == ("", 2)


@pytest.mark.parametrize(
    "text",
    [
        "",
        '"',
        "no quotes",
        '"unterminated',
        '"ends with escaped quote\\"',
        '"trailing backslash\\',
    ],
)
def test_parse_quoted_rejects_malformed(text: str) -> None:
    """It should raise MalformedTitle when there is no complete quoted string."""

    with pytest.raises(MalformedTitle):
        parse_quoted(text)


def test_quote_escapes_only_backslash_and_quote() -> None:
    """It should escape backslash and double quote and leave everything else alone."""

    assert quote('a "b" \\ c\td') == '"a \\"b\\" \\\\ c\td"'


def test_quote_then_parse_reproduces_title() -> None:
    """Quoting then parsing should give back the original title."""

    title = 'He said "\\o/" \\\\ done'
    assert parse_quoted(quote(title))[0] == title


def test_try_parse_quoted_returns_none_when_malformed() -> None:
    """It should report malformed input as None and decode valid input like parse_quoted."""

    assert try_parse_quoted('"unterminated') is None
    assert try_parse_quoted("bare", 0) is None
    assert try_parse_quoted('k:"v" x', 2) == ("v", 5)
