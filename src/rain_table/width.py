"""Display width helpers.

Terminal cells are counted per character: East-Asian wide (``W``) and
fullwidth (``F``) characters take two cells, everything else takes one.
"""

from __future__ import annotations

import re
import unicodedata

WIDE_CLASSES = frozenset({"W", "F"})

# Real-number grammar used for auto alignment:
# - optional surrounding whitespace and sign
# - digits, optionally grouped with single underscores
# - optional fraction and exponent
REAL_NUMBER_PATTERN = re.compile(
    r"^\s*[+-]?\d+(?:_\d+)*(?:\.\d+(?:_\d+)*)?(?:[eE][+-]?\d+(?:_\d+)*)?\s*$"
)


def char_width(char: str) -> int:
    """Return the number of terminal cells a single character occupies."""
    if unicodedata.east_asian_width(char) in WIDE_CLASSES:
        return 2
    return 1


def display_width(text: str) -> int:
    """
    Return the display width of a string.

    Args:
        text: String to measure

    Returns:
        Width in terminal cells

    Example:
        >>> display_width("abc")
        3
        >>> display_width("あいう")
        6
    """
    return sum(char_width(char) for char in text)


def truncate_to_width(text: str, limit: int) -> str:
    """
    Truncate a string so its display width does not exceed ``limit``.

    Characters are taken greedily from the left. A wide character that would
    cross the limit is dropped whole, so the result may be narrower than
    ``limit``.

    Args:
        text: String to truncate
        limit: Maximum display width

    Returns:
        The longest prefix of ``text`` that fits, possibly empty

    Example:
        >>> truncate_to_width("あいうえお", 5)
        'あい'
        >>> truncate_to_width("0123456789", 5)
        '01234'
    """
    width = 0
    for index, char in enumerate(text):
        width += char_width(char)
        if width > limit:
            return text[:index]
    return text


def is_real_number(text: str) -> bool:
    """Return True if ``text`` reads as an integer or decimal number."""
    return REAL_NUMBER_PATTERN.match(text) is not None


def justify(text: str, width: int, align: str | None = None) -> str:
    """
    Pad ``text`` with spaces to ``width`` display cells.

    Args:
        text: Cell value
        width: Target display width
        align: ``"right"``, ``"left"`` or None for auto (numbers right,
            everything else left)

    Returns:
        The padded string; unchanged if already at least ``width`` wide
    """
    if align is None:
        align = "right" if is_real_number(text) else "left"
    fill = " " * max(width - display_width(text), 0)
    if align == "right":
        return fill + text
    return text + fill
