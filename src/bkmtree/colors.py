"""Color tokens used in .bkm files (`#rrggbb` or `#aarrggbb`)."""

from __future__ import annotations

import re

from bkmtree.models import Color

__all__ = ["parse_color", "format_color"]

_COLOR_RE = re.compile(r"^#(?P<a>[0-9a-fA-F]{2})?(?P<rgb>[0-9a-fA-F]{6})$")


def parse_color(token: str) -> Color | None:
    """Parse a hex color token.

    Returns:
        The color, or ``None`` when `token` is not a color spec.
    """

    m = _COLOR_RE.match(token)
    if not m:
        return None
    rgb = m.group("rgb")
    alpha = m.group("a")
    return Color(
        r=int(rgb[0:2], 16),
        g=int(rgb[2:4], 16),
        b=int(rgb[4:6], 16),
        a=int(alpha, 16) if alpha is not None else None,
    )


def format_color(color: Color) -> str:
    """Canonical lower-case token for `color`."""

    if color.a is None:
        return f"#{color.r:02x}{color.g:02x}{color.b:02x}"
    return f"#{color.a:02x}{color.r:02x}{color.g:02x}{color.b:02x}"
