"""
Table generator.

Turns a list of records, or a single record, into box-drawing table text:

    rows = [
        {"id": 1, "name": "alice", "description": "0123456789"},
        {"id": 2, "name": "bob", "description": "あいうえお"},
    ]
    select = [
        {"key": "id", "label": "ID"},
        {"key": "name", "label": "名前"},
        {"key": "description", "label": "説明", "size": 8},
    ]
    print(generate(rows, select=select))
    +----+-------+----------+
    | ID | 名前  | 説明     |
    +----+-------+----------+
    |  1 | alice | 01234567 |
    |  2 | bob   | あいうえ |
    +----+-------+----------+
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from operator import itemgetter
from typing import Any

from .exceptions import SortKeyError, ValidationError
from .models import TableOptions
from .naming import titleize
from .table import TableRenderer
from .width import truncate_to_width

logger = logging.getLogger(__name__)

SCALAR_KEY = "(value)"
"""Column key used for sequence elements that are not mappings."""

Record = Mapping[Any, Any]


def stringify(value: Any) -> str:
    """Convert a cell value to its display text; None becomes ""."""
    if value is None:
        return ""
    return str(value)


def generate(
    rows: Any,
    options: TableOptions | Mapping[str, Any] | None = None,
    configure: Callable[[TableOptions], None] | None = None,
    **overrides: Any,
) -> str:
    """
    Render rows as a table.

    Args:
        rows: A list of records (mappings) or scalars, or a single record
        options: TableOptions, or a mapping of option fields
        configure: Called with the working options before rendering
        **overrides: Option fields applied on top of ``options``

    Returns:
        Table text ending in a newline, or "" for empty input

    Raises:
        ValidationError: If the input or an option is invalid
        SortKeyError: If rows cannot be sorted by ``sort_by``

    Example:
        >>> print(generate([{"id": 1, "name": "alice"}]), end="")
        +----+-------+
        | id | name  |
        +----+-------+
        |  1 | alice |
        +----+-------+
    """
    return Generator(rows, options, configure=configure, **overrides).generate()


class Generator:
    """
    Lays out one table.

    Stages run in order: input coercion, normalization, sorting, column
    planning, then grid rendering. A Generator holds no state between
    ``generate()`` calls apart from its input and options.
    """

    def __init__(
        self,
        rows: Any = None,
        options: TableOptions | Mapping[str, Any] | None = None,
        configure: Callable[[TableOptions], None] | None = None,
        **overrides: Any,
    ) -> None:
        if options is None:
            options = TableOptions()
        elif not isinstance(options, TableOptions):
            options = TableOptions.from_mapping(options)
        self.options = options.merge(**overrides)
        if configure is not None:
            configure(self.options)
            # the callback may assign raw values; validate and coerce them again
            self.options = self.options.merge()
        if isinstance(rows, Iterable) and not isinstance(rows, (Mapping, str, bytes)):
            rows = list(rows)
        self.rows = rows

    def generate(self) -> str:
        """Render the table text."""
        lines = self.lines()
        if not lines:
            return ""
        return "\n".join(lines) + "\n"

    def lines(self) -> list[str]:
        """Render the table as a list of lines (empty for empty input)."""
        if not self.rows:
            return []

        records, header = self._coerce_rows(self.rows)
        if not records:
            return []
        if self.options.normalize:
            records = [self._normalize_row(record) for record in records]
        records = self._sort_rows(records)

        if self.options.select is not None:
            headers, cells = self._plan_selected(records, header)
        else:
            headers, cells = self._plan_auto(records, header)

        column_count = len(headers) if headers is not None else len(cells[0])
        renderer = TableRenderer(
            alignments=[self.options.column_align(i) for i in range(column_count)],
            paddings=[self.options.column_padding(i) for i in range(column_count)],
            vertical=self.options.vertical,
            intersection=self.options.intersection,
            horizon=self.options.horizon,
        )
        return renderer.render_lines(headers, cells)

    # ------------------------------------------------------------------
    # Input coercion
    # ------------------------------------------------------------------

    def _coerce_rows(self, rows: Any) -> tuple[list[Record], bool]:
        """Return the records to render and whether the header is shown."""
        header = self.options.header

        if isinstance(rows, Mapping):
            logger.debug("Rendering single record with %d fields vertically", len(rows))
            records: list[Record] = [
                {"key": stringify(key), "value": stringify(value)} for key, value in rows.items()
            ]
            return records, False if header is None else header

        if isinstance(rows, (str, bytes)) or not isinstance(rows, Iterable):
            raise ValidationError(
                "rows",
                rows,
                "Must be a mapping or a sequence of mappings/values",
            )

        records = []
        has_scalar = False
        for element in rows:
            if isinstance(element, Mapping):
                records.append(element)
                continue
            # one scalar hides the header for the whole table
            has_scalar = True
            if not isinstance(element, str):
                element = repr(element)
            records.append({SCALAR_KEY: element})

        logger.debug("Rendering %d rows (scalars=%s)", len(records), has_scalar)
        if has_scalar:
            return records, False
        return records, True if header is None else header

    # ------------------------------------------------------------------
    # Row processing
    # ------------------------------------------------------------------

    def _normalize_value(self, value: Any) -> Any:
        encoding = self.options.in_code
        if isinstance(value, bytes):
            return value.decode(encoding, errors="replace")
        if isinstance(value, str):
            normalized = value.encode(encoding, errors="replace").decode(
                encoding, errors="replace"
            )
            if normalized != value:
                logger.debug("Replaced unencodable characters in %r", value)
            return normalized
        return value

    def _normalize_row(self, row: Record) -> Record:
        return {key: self._normalize_value(value) for key, value in row.items()}

    def _sort_rows(self, rows: list[Record]) -> list[Record]:
        sort_by = self.options.sort_by
        if sort_by is None or sort_by is False:
            return rows

        if callable(sort_by):
            key_func = sort_by
        else:
            missing = [i for i, row in enumerate(rows) if sort_by not in row]
            if missing:
                raise SortKeyError(sort_by, f"Key missing from row(s) {missing}")
            key_func = itemgetter(sort_by)

        try:
            rows = sorted(rows, key=key_func)
        except KeyError as e:
            raise SortKeyError(sort_by, f"Key {e} missing from a row") from e
        except TypeError as e:
            raise SortKeyError(sort_by, f"Values are not comparable ({e})") from e

        if self.options.reverse:
            rows.reverse()
        return rows

    # ------------------------------------------------------------------
    # Column planning
    # ------------------------------------------------------------------

    def _plan_selected(
        self, rows: list[Record], header: bool
    ) -> tuple[list[str] | None, list[list[str]]]:
        select = self.options.select or []
        logger.debug("Using %d selected columns", len(select))

        cells = []
        for row in rows:
            line = []
            for column in select:
                text = stringify(row.get(column.key))
                if column.size is not None:
                    text = truncate_to_width(text, column.size)
                line.append(text)
            cells.append(line)

        if not header:
            return None, cells

        headers = []
        for column in select:
            label = column.label if column.label is not None else titleize(column.key)
            if column.size is not None:
                label = truncate_to_width(label, column.size)
            headers.append(label)
        return headers, cells

    def _plan_auto(
        self, rows: list[Record], header: bool
    ) -> tuple[list[str] | None, list[list[str]]]:
        # dict keys keep first-seen order across rows
        columns = list(dict.fromkeys(key for row in rows for key in row))
        logger.debug("Discovered %d columns", len(columns))

        cells = [[stringify(row.get(key)) for key in columns] for row in rows]
        if not header:
            return None, cells
        return [stringify(key) for key in columns], cells
