"""Key/value scanning for header lines and node metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from bkmtree.bkm.lexer import try_parse_quoted

__all__ = ["Token", "iter_tokens", "next_token", "parse_header"]


def parse_header(line: str, key: str) -> str:
    """Return the value of a `key: value` header line.

    Returns:
        The trimmed value, or ``""`` when `line` is not a `key:` line.
    """

    prefix = key + ":"
    if not line.startswith(prefix):
        return ""
    return line[len(prefix):].strip()


@dataclass(frozen=True)
class Token:
    """One space-delimited metadata token.

    Forms: `key`, `key:value` and `key:"quoted value"`. `raw` is the exact source text.
    """

    raw: str
    key: str
    value: str | None = None


def next_token(text: str, pos: int) -> tuple[Token | None, int]:
    """Scan the token starting at or after `pos`.

    Returns:
        ``(token, end)``; `token` is ``None`` once only spaces remain.
    """

    end = len(text)
    while pos < end and text[pos] == " ":
        pos += 1
    if pos >= end:
        return None, end

    start = pos
    while pos < end and text[pos] not in (":", " "):
        pos += 1
    key = text[start:pos]
    if pos >= end or text[pos] == " ":
        return Token(raw=key, key=key), pos

    pos += 1  # ':'
    quoted = try_parse_quoted(text, pos)
    if quoted is not None:
        value, pos = quoted
        return Token(raw=text[start:pos], key=key, value=value), pos

    value_start = pos
    while pos < end and text[pos] != " ":
        pos += 1
    return Token(raw=text[start:pos], key=key, value=text[value_start:pos]), pos


def iter_tokens(text: str, pos: int = 0) -> Iterator[Token]:
    """Yield every token of `text` from `pos` on."""

    while True:
        token, pos = next_token(text, pos)
        if token is None:
            return
        yield token
