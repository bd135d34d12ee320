"""Tests for header and metadata token scanning."""

from __future__ import annotations

from bkmtree.bkm.scanner import Token, iter_tokens, next_token, parse_header


def test_parse_header_returns_value() -> None:
    """It should return the trimmed value after `key:`."""

    assert parse_header("file: report.pdf", "file") == "report.pdf"
    assert parse_header("title:default view ", "title") == "default view"


def test_parse_header_wrong_or_empty_key() -> None:
    """It should return an empty string for other keys or an empty value."""

    assert parse_header("title: x", "file") == ""
    assert parse_header("file:", "file") == ""
    assert parse_header("file:   ", "file") == ""
    assert parse_header("", "file") == ""


def test_next_token_bare_and_key_value() -> None:
    """It should split bare keys and key:value pairs at spaces."""

    tokens = list(iter_tokens("  open-default  font:bold page:3"))
    assert tokens == [
        Token(raw="open-default", key="open-default"),
        Token(raw="font:bold", key="font", value="bold"),
        Token(raw="page:3", key="page", value="3"),
    ]


def test_next_token_quoted_value_may_contain_spaces() -> None:
    """It should decode a quoted value as one token."""

    text = 'destname:"my \\"target\\"" destpage:2'
    token, pos = next_token(text, 0)
    assert token == Token(raw='destname:"my \\"target\\""', key="destname", value='my "target"')
    token, pos = next_token(text, pos)
    assert token is not None and token.raw == "destpage:2"
    assert next_token(text, pos) == (None, len(text))


def test_next_token_malformed_quote_falls_back_to_bare_value() -> None:
    """It should read an unterminated quoted value up to the next space."""

    token, _ = next_token('destname:"oops more', 0)
    assert token == Token(raw='destname:"oops', key="destname", value='"oops')


def test_next_token_empty_value() -> None:
    """It should accept a key with an empty value."""

    token, _ = next_token("page: x", 0)
    assert token == Token(raw="page:", key="page", value="")


def test_iter_tokens_nothing_left() -> None:
    """It should yield nothing for blank input."""

    assert list(iter_tokens("")) == []
    assert list(iter_tokens("    ")) == []
