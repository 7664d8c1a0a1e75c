"""
Box-drawing table renderer.

This module provides the TableRenderer class, which lays out already
stringified cells as a bordered text table with per-column alignment and
padding, measuring every cell by display width.
"""

from __future__ import annotations

from collections.abc import Sequence

from .width import display_width, justify


def column_widths(headers: Sequence[str] | None, rows: Sequence[Sequence[str]]) -> list[int]:
    """
    Calculate the display width of each column.

    Args:
        headers: Header labels, or None when the header is hidden
        rows: Body rows, each a list of cell strings

    Returns:
        The widest header or cell per column
    """
    lines = ([list(headers)] if headers is not None else []) + [list(row) for row in rows]
    if not lines:
        return []
    widths = [0] * max(len(line) for line in lines)
    for line in lines:
        for i, cell in enumerate(line):
            widths[i] = max(widths[i], display_width(cell))
    return widths


class TableRenderer:
    """Render cells as a box-drawing table.

    Example output:
        +--------+-------+--------+
        | Name   | Count | Status |
        +--------+-------+--------+
        | item-1 |    10 | active |
        | item-2 |     5 | paused |
        +--------+-------+--------+
    """

    def __init__(
        self,
        alignments: Sequence[str | None] | None = None,
        paddings: Sequence[str] | None = None,
        vertical: str = "|",
        intersection: str = "+",
        horizon: str = "-",
    ) -> None:
        """Initialize the table renderer.

        Args:
            alignments: Alignment per column ('left', 'right', or None for
                auto). Defaults to auto for all columns.
            paddings: Padding text per column. Defaults to one space.
            vertical: Character drawn between cells
            intersection: Character drawn where separator segments meet
            horizon: Character filling separator segments
        """
        self._alignments = list(alignments) if alignments is not None else []
        self._paddings = list(paddings) if paddings is not None else []
        self._vertical = vertical
        self._intersection = intersection
        self._horizon = horizon

    def _alignment(self, index: int) -> str | None:
        return self._alignments[index] if index < len(self._alignments) else None

    def _padding(self, index: int) -> str:
        return self._paddings[index] if index < len(self._paddings) else " "

    def separator(self, widths: Sequence[int]) -> str:
        """Build a separator line for the given column widths."""
        segments = []
        for i, width in enumerate(widths):
            pad_width = display_width(self._padding(i))
            segments.append(self._horizon * (pad_width + width + pad_width))
        return self._intersection + self._intersection.join(segments) + self._intersection

    def line(self, cells: Sequence[str], widths: Sequence[int]) -> str:
        """Build a content line (header or body row)."""
        segments = []
        for i, cell in enumerate(cells):
            padding = self._padding(i)
            segments.append(padding + justify(cell, widths[i], self._alignment(i)) + padding)
        return self._vertical + self._vertical.join(segments) + self._vertical

    def render_lines(
        self, headers: Sequence[str] | None, rows: Sequence[Sequence[str]]
    ) -> list[str]:
        """Render headers and rows as a list of table lines.

        Args:
            headers: Header labels, or None to omit the header line
            rows: Body rows, each with one cell per column

        Returns:
            Separator, optional header and separator, body lines, separator
        """
        widths = column_widths(headers, rows)
        separator = self.separator(widths)

        lines: list[str] = [separator]
        if headers is not None:
            lines.append(self.line(headers, widths))
            lines.append(separator)
        for row in rows:
            lines.append(self.line(row, widths))
        lines.append(separator)
        return lines

    def render(self, headers: Sequence[str] | None, rows: Sequence[Sequence[str]]) -> str:
        """Render headers and rows as a formatted table.

        Returns:
            Table text with a trailing newline, or "" when there is nothing
            to draw
        """
        if headers is None and not rows:
            return ""
        return "\n".join(self.render_lines(headers, rows)) + "\n"
