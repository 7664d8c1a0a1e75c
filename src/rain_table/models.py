"""Core models for rain-table."""

from __future__ import annotations

import codecs
from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any

from .exceptions import ValidationError

Padding = str | int | bool | None
"""Padding value: text used verbatim, a space count, or a one-space switch."""

GRID_FIELDS = ("vertical", "intersection", "horizon")
"""Options that hold a single box-drawing character."""


class Align(Enum):
    """Horizontal alignment of a column."""

    LEFT = "left"
    RIGHT = "right"


def resolve_padding(value: Padding) -> str:
    """
    Resolve a padding setting to the literal text placed on each side of a cell.

    Args:
        value: ``str`` (used verbatim), ``bool`` (True means one space),
            ``int`` (that many spaces), anything else means no padding

    Returns:
        Padding text
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return " " if value else ""
    if isinstance(value, int):
        return " " * max(value, 0)
    return ""


def _coerce_align(value: Align | str | None) -> Align | None:
    if value is None or isinstance(value, Align):
        return value
    try:
        return Align(str(value).lower())
    except ValueError:
        raise ValidationError(
            "align",
            value,
            "Must be 'left' or 'right'",
        ) from None


@dataclass(frozen=True)
class ColumnSpec:
    """
    Explicit column selection entry.

    Attributes:
        key: Record key the column reads from
        label: Header label (default: title-cased key)
        size: Maximum display width; longer values are truncated
        align: Fixed alignment (default: numbers right, text left)
        padding: Per-column padding; None falls back to the table padding
    """

    key: Any
    label: str | None = None
    size: int | None = None
    align: Align | None = None
    padding: Padding = None

    def __post_init__(self) -> None:
        if self.size is not None:
            if isinstance(self.size, bool) or not isinstance(self.size, int):
                raise ValidationError("size", self.size, "Must be an integer")
            if self.size < 0:
                raise ValidationError("size", self.size, "Must not be negative")
        # frozen: coerce "left"/"right" strings in place
        object.__setattr__(self, "align", _coerce_align(self.align))

    @classmethod
    def from_value(cls, value: ColumnSpec | Mapping[str, Any] | Any) -> ColumnSpec:
        """
        Build a column spec from a spec, a mapping of fields, or a bare key.

        Raises:
            ValidationError: If a mapping has no ``key`` or unknown fields
        """
        if isinstance(value, ColumnSpec):
            return value
        if isinstance(value, Mapping):
            allowed = {f.name for f in fields(cls)}
            unknown = set(value) - allowed
            if unknown:
                raise ValidationError(
                    "select",
                    dict(value),
                    f"Unknown column fields: {', '.join(sorted(map(str, unknown)))}",
                )
            if "key" not in value:
                raise ValidationError("select", dict(value), "Column needs a 'key'")
            return cls(**value)
        return cls(key=value)

    def resolve_padding(self, default: Padding) -> str:
        """Padding text for this column, falling back to ``default``."""
        return resolve_padding(default if self.padding is None else self.padding)


@dataclass
class TableOptions:
    """
    Rendering options.

    Attributes:
        header: Show the header line; None means on unless the input is a
            single mapping
        select: Explicit columns; None auto-discovers them from the rows
        vertical: Column border character
        intersection: Separator crossing character
        horizon: Separator fill character
        padding: Cell padding (see ``resolve_padding``)
        sort_by: Column key or key function to sort rows by
        reverse: Reverse rows after sorting (only when ``sort_by`` is set)
        normalize: Round-trip string values through ``in_code``
        in_code: Encoding used by the normalize pass
    """

    header: bool | None = None
    select: list[ColumnSpec] | None = None
    vertical: str = "|"
    intersection: str = "+"
    horizon: str = "-"
    padding: Padding = " "
    sort_by: Any | Callable[[Mapping[Any, Any]], Any] = None
    reverse: bool = False
    normalize: bool = True
    in_code: str = "utf-8"

    def __post_init__(self) -> None:
        for name in GRID_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValidationError(name, value, "Must be a single character")
        if self.select is not None:
            if isinstance(self.select, (str, bytes, Mapping)):
                raise ValidationError("select", self.select, "Must be a list of columns")
            self.select = [ColumnSpec.from_value(column) for column in self.select]
        try:
            codecs.lookup(self.in_code)
        except (LookupError, TypeError):
            raise ValidationError("in_code", self.in_code, "Unknown encoding") from None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TableOptions:
        """
        Build options from a plain mapping, e.g. a parsed YAML file.

        Raises:
            ValidationError: If the mapping contains unknown option names
        """
        allowed = {f.name for f in fields(cls) if f.init}
        unknown = set(data) - allowed
        if unknown:
            raise ValidationError(
                "options",
                sorted(map(str, unknown)),
                f"Unknown option(s). Valid options: {', '.join(sorted(allowed))}",
            )
        return cls(**data)

    def merge(self, **overrides: Any) -> TableOptions:
        """Return a copy with ``overrides`` applied."""
        if not overrides:
            return replace(self)
        allowed = {f.name for f in fields(self) if f.init}
        unknown = set(overrides) - allowed
        if unknown:
            raise ValidationError(
                "options",
                sorted(unknown),
                f"Unknown option(s). Valid options: {', '.join(sorted(allowed))}",
            )
        return replace(self, **overrides)

    def column_padding(self, index: int) -> str:
        """Padding text for the column at ``index``."""
        if self.select is not None:
            return self.select[index].resolve_padding(self.padding)
        return resolve_padding(self.padding)

    def column_align(self, index: int) -> str | None:
        """Fixed alignment name for the column at ``index``, or None for auto."""
        if self.select is not None:
            align = self.select[index].align
            if align is not None:
                return align.value
        return None
