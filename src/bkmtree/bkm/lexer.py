r"""Quoted string lexer.

Only `\\` and `\"` are escape sequences. A backslash followed by any other character is
kept as a literal backslash and that character is then read as an ordinary one, so
`"a\nb"` decodes to the four characters `a`, `\`, `n`, `b`.
"""

from __future__ import annotations

from bkmtree.errors import MalformedTitle

__all__ = ["parse_quoted", "quote", "try_parse_quoted"]

_ESCAPED = ("\\", '"')


def parse_quoted(text: str, pos: int = 0) -> tuple[str, int]:
    """Decode the quoted string starting at `text[pos]`.

    Args:
        text: Source text.
        pos: Index of the opening quote.

    Returns:
        ``(decoded, end)`` where `end` is the index just past the closing quote.

    Raises:
        MalformedTitle: No opening quote at `pos`, or no closing quote before the end.
    """

    end = len(text)
    # must be at least: ""
    if end - pos < 2:
        raise MalformedTitle("expected a quoted string")
    if text[pos] != '"':
        raise MalformedTitle("quoted string must start with '\"'")

    decoded = _decode(text, pos + 1)
    if decoded is None:
        raise MalformedTitle("unterminated quoted string")
    return decoded


def try_parse_quoted(text: str, pos: int = 0) -> tuple[str, int] | None:
    """Like `parse_quoted` but returns ``None`` instead of raising."""

    if len(text) - pos < 2 or text[pos] != '"':
        return None
    return _decode(text, pos + 1)


def _decode(text: str, i: int) -> tuple[str, int] | None:
    end = len(text)
    out: list[str] = []
    while i < end:
        c = text[i]
        if c == '"':
            return "".join(out), i + 1
        if c != "\\":
            out.append(c)
            i += 1
            continue
        i += 1
        if i >= end:
            break
        c2 = text[i]
        if c2 not in _ESCAPED:
            # keep the backslash, re-read c2 on the next iteration
            out.append(c)
            continue
        out.append(c2)
        i += 1
    return None


def quote(text: str) -> str:
    """Quote `text`, escaping only backslash and double quote."""

    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
