"""On-screen column width of text."""

from __future__ import annotations

import wcwidth as _wcwidth


def char_width(ch: str) -> int:
    """Columns taken by a single code point; control characters take none."""

    return max(_wcwidth.wcwidth(ch), 0)


def display_width(text: str) -> int:
    """Sum of per-code-point column widths.

    Wide East Asian glyphs count as 2, combining marks as 0. The measure is
    additive, i.e. ``display_width(a + b) == display_width(a) + display_width(b)``.
    """

    if text.isascii():
        return sum(1 for ch in text if ch.isprintable())
    return sum(char_width(ch) for ch in text)


__all__ = ["char_width", "display_width"]
