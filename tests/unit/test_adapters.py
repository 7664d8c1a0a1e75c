"""Tests for object adapters."""

from __future__ import annotations

from collections import namedtuple
from dataclasses import dataclass
from typing import Any

import pytest

from rain_table.adapters import (
    RecordSource,
    Renderable,
    echo,
    render,
    render_all,
    to_record,
)
from rain_table.exceptions import ValidationError
from rain_table.generator import generate


@dataclass
class User:
    id: int
    name: str


Point = namedtuple("Point", ["x", "y"])


class Badge:
    """Renderable with a custom record."""

    def __init__(self, code: str) -> None:
        self.code = code

    def to_record(self) -> dict[str, Any]:
        return {"code": self.code, "length": len(self.code)}


class Row:
    """ORM-style object exposing an ``attributes`` mapping."""

    def __init__(self, **attributes: Any) -> None:
        self.attributes = attributes


class Table:
    """ORM-style model class exposing ``all()``."""

    def __init__(self, rows: list[Row]) -> None:
        self._rows = rows

    def all(self) -> list[Row]:
        return list(self._rows)


class TestProtocols:
    """Runtime protocol checks."""

    def test_renderable(self) -> None:
        """Objects with to_record() are Renderable."""
        assert isinstance(Badge("a"), Renderable)
        assert not isinstance(User(1, "a"), Renderable)

    def test_record_source(self) -> None:
        """Objects with all() are RecordSources."""
        assert isinstance(Table([]), RecordSource)
        assert not isinstance([], RecordSource)


class TestToRecord:
    """Tests for to_record."""

    def test_renderable(self) -> None:
        """Renderable objects describe themselves."""
        assert to_record(Badge("abc")) == {"code": "abc", "length": 3}

    def test_mapping(self) -> None:
        """Mappings are returned as-is."""
        record = {"a": 1}
        assert to_record(record) is record

    def test_dataclass(self) -> None:
        """Dataclass fields become the record, in field order."""
        assert list(to_record(User(1, "alice")).items()) == [("id", 1), ("name", "alice")]

    def test_namedtuple(self) -> None:
        """Namedtuple fields become the record."""
        assert to_record(Point(1, 2)) == {"x": 1, "y": 2}

    def test_attributes(self) -> None:
        """An attributes mapping is used when present."""
        assert to_record(Row(id=1)) == {"id": 1}

    def test_unsupported_raises(self) -> None:
        """Objects without a record shape raise ValidationError."""
        with pytest.raises(ValidationError, match="to_record"):
            to_record(object())

    def test_dataclass_class_is_not_a_record(self) -> None:
        """The dataclass type itself has no record shape."""
        with pytest.raises(ValidationError):
            to_record(User)


class TestRender:
    """Tests for render."""

    def test_list_of_dataclasses(self) -> None:
        """Dataclass elements render like dict rows."""
        users = [User(1, "alice"), User(2, "bob")]
        expected = generate([{"id": 1, "name": "alice"}, {"id": 2, "name": "bob"}])
        assert render(users) == expected

    def test_single_dataclass_is_vertical(self) -> None:
        """A single record-like object renders one row per field."""
        assert render(User(1, "alice")) == (
            "+------+-------+\n"
            "| id   |     1 |\n"
            "| name | alice |\n"
            "+------+-------+\n"
        )

    def test_renderable(self) -> None:
        """Renderable objects render their record vertically."""
        assert "| length |  2 |" in render(Badge("ab"))

    def test_mapping(self) -> None:
        """Mappings render vertically."""
        assert render({"a": 1}) == generate({"a": 1})

    def test_generator_of_records(self) -> None:
        """Any iterable of records renders as rows."""
        output = render(Point(i, i * 2) for i in range(2))
        assert output.splitlines()[1] == "| x | y |"

    def test_scalar(self) -> None:
        """Scalars render as one cell without header."""
        assert render(42) == "+----+\n| 42 |\n+----+\n"

    def test_string_scalar(self) -> None:
        """Strings are scalars, not sequences."""
        assert render("hi") == "+----+\n| hi |\n+----+\n"

    def test_scalar_header_can_be_enabled(self) -> None:
        """header=True shows the type name."""
        assert render(42, header=True) == (
            "+-----+\n"
            "| int |\n"
            "+-----+\n"
            "|  42 |\n"
            "+-----+\n"
        )

    def test_options_are_passed_through(self) -> None:
        """Options reach the generator."""
        assert render([User(1, "a")], {"padding": 0}).startswith("+--+----+")

    def test_list_of_scalars(self) -> None:
        """Scalar elements keep the (value) behaviour."""
        assert render(["a", "b"]) == generate(["a", "b"])


class TestRenderAll:
    """Tests for render_all."""

    def test_renders_every_item(self) -> None:
        """Each item of the source is one row."""
        source = Table([Row(id=1, name="0"), Row(id=2, name="1")])
        assert render_all(source) == (
            "+----+------+\n"
            "| id | name |\n"
            "+----+------+\n"
            "|  1 |    0 |\n"
            "|  2 |    1 |\n"
            "+----+------+\n"
        )

    def test_empty_source(self) -> None:
        """An empty source renders nothing."""
        assert render_all(Table([])) == ""


class TestEcho:
    """Tests for echo."""

    def test_writes_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        """echo prints the rendered table."""
        echo([{"a": 1}])
        assert capsys.readouterr().out == generate([{"a": 1}])

    def test_record_source(self, capsys: pytest.CaptureFixture[str]) -> None:
        """echo renders record sources in bulk."""
        echo(Table([Row(id=1)]))
        assert capsys.readouterr().out == "+----+\n| id |\n+----+\n|  1 |\n+----+\n"
