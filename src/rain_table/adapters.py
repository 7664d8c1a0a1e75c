"""
Adapters that render arbitrary objects.

The core ``generate()`` only understands mappings and sequences. This module
bridges everything else:

- ``Renderable``: objects that know how to describe themselves as a record
- ``RecordSource``: collections (e.g. an ORM model or query) exposing
  ``all()``; every item is rendered as one row
- dataclasses, namedtuples and objects with an ``attributes`` mapping are
  converted automatically

Example:
    from rain_table.adapters import echo, render

    @dataclass
    class User:
        id: int
        name: str

    print(render([User(1, "alice"), User(2, "bob")]))
    echo(User(1, "alice"))  # vertical, one row per field
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

import click

from .exceptions import ValidationError
from .generator import generate
from .models import TableOptions


@runtime_checkable
class Renderable(Protocol):
    """Protocol for objects that can describe themselves as a record."""

    def to_record(self) -> Mapping[str, Any]:
        """Return the fields to display, in display order."""
        ...


@runtime_checkable
class RecordSource(Protocol):
    """Protocol for collections of records, such as a persistence-layer model."""

    def all(self) -> Iterable[Any]:
        """Return every item in the collection."""
        ...


def _is_record_like(obj: Any) -> bool:
    if isinstance(obj, (Renderable, Mapping)):
        return True
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return True
    if isinstance(obj, tuple) and hasattr(obj, "_asdict"):
        return True
    return isinstance(getattr(obj, "attributes", None), Mapping)


def to_record(obj: Any) -> Mapping[Any, Any]:
    """
    Convert an object to a record.

    Args:
        obj: A Renderable, mapping, dataclass instance, namedtuple, or an
            object with an ``attributes`` mapping

    Returns:
        Field name to value mapping, in field order

    Raises:
        ValidationError: If the object has no record shape
    """
    if isinstance(obj, Renderable):
        return obj.to_record()
    if isinstance(obj, Mapping):
        return obj
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        # shallow on purpose: nested values render via str()
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, tuple) and hasattr(obj, "_asdict"):
        return obj._asdict()
    attributes = getattr(obj, "attributes", None)
    if isinstance(attributes, Mapping):
        return attributes
    raise ValidationError(
        "object",
        obj,
        "Cannot be converted to a record (implement to_record())",
    )


def render(
    obj: Any,
    options: TableOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """
    Render any object as a table.

    - Record-like objects render vertically (field name, value)
    - Lists, tuples, sets and other iterables render one row per element;
      record-like elements become records, anything else a ``(value)`` cell
    - Scalars render as a single cell headed by their type name, with the
      header hidden unless ``header=True`` is passed

    Args:
        obj: Object to render
        options: TableOptions, or a mapping of option fields
        **overrides: Option fields applied on top of ``options``

    Returns:
        Table text
    """
    if _is_record_like(obj):
        return generate(to_record(obj), options, **overrides)

    if isinstance(obj, Iterable) and not isinstance(obj, (str, bytes)):
        rows = [to_record(item) if _is_record_like(item) else item for item in obj]
        return generate(rows, options, **overrides)

    if not isinstance(options, TableOptions):
        options = TableOptions.from_mapping(options or {})
    if options.header is None:
        overrides.setdefault("header", False)
    return generate([{type(obj).__name__: obj}], options, **overrides)


def render_all(
    source: RecordSource,
    options: TableOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """
    Render every item of a record source, one row per item.

    Args:
        source: Collection exposing ``all()``
        options: TableOptions, or a mapping of option fields
        **overrides: Option fields applied on top of ``options``

    Returns:
        Table text
    """
    return generate([to_record(item) for item in source.all()], options, **overrides)


def echo(
    obj: Any,
    options: TableOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> None:
    """Render an object and write the table to stdout."""
    if isinstance(obj, RecordSource) and not _is_record_like(obj):
        text = render_all(obj, options, **overrides)
    else:
        text = render(obj, options, **overrides)
    click.echo(text, nl=False)
