from dataclasses import dataclass

import pytest

from recordcsv.domain.fields import csv_field
from recordcsv.errors import UnsupportedFieldTypeError
from recordcsv.io.projection import (
    ColumnSchema,
    RowProjector,
    SchemaLocker,
    discover_columns,
)


@dataclass
class _Row:
    Foo: str = ""
    Bar: str = ""
    Baz: str = ""


def test_schema_locks_once() -> None:
    locker = SchemaLocker()

    assert locker.lock(None) is None
    assert locker.schema is None

    schema = locker.lock(_Row("a"))
    assert schema is not None
    assert schema.columns == ("Foo", "Bar", "Baz")
    assert dict(schema.index) == {"Foo": 0, "Bar": 1, "Baz": 2}

    assert locker.lock({"other": 1}) is None
    assert locker.schema is schema


def test_mapping_columns_are_sorted() -> None:
    assert discover_columns({"foo": 1, "bar": 2, "baz": 3, "ip": 4}) == [
        "bar",
        "baz",
        "foo",
        "ip",
    ]


def test_discovery_skips_embedded_private_and_excluded_fields() -> None:
    @dataclass
    class _Mixed:
        Embedded: str = csv_field(embedded=True, default="e")
        Exported: str = "a"
        _hidden: str = "b"
        Ignored: str = csv_field(exclude=True, default="c")

    assert discover_columns(_Mixed()) == ["Exported"]


def test_duplicate_columns_last_position_wins() -> None:
    schema = ColumnSchema.from_columns(["A", "B", "A"])

    assert schema.columns == ("A", "B", "A")
    assert schema.index["A"] == 2
    assert schema.width == 3


def test_empty_schema() -> None:
    locker = SchemaLocker()
    schema = locker.lock({})

    assert schema is not None
    assert schema.is_empty


def test_project_fills_missing_columns_and_drops_unknown() -> None:
    projector = RowProjector(ColumnSchema.from_columns(["Foo", "Bar", "Baz"]))

    assert projector.project({"Bar": "b", "Other": "x"}) == ["", "b", ""]
    assert projector.project({"Other": "x"}) is None


def test_project_considers_embedded_fields_by_name() -> None:
    @dataclass
    class _WithEmbedded:
        Base: str = csv_field(embedded=True, default="base")
        Foo: str = "foo"

    projector = RowProjector(ColumnSchema.from_columns(["Base", "Foo"]))

    assert projector.project(_WithEmbedded()) == ["base", "foo"]


def test_project_never_matches_excluded_fields() -> None:
    @dataclass
    class _Excluded:
        Foo: str = csv_field(exclude=True, default="x")

    projector = RowProjector(ColumnSchema.from_columns(["Foo", "-"]))

    assert projector.project(_Excluded()) is None


def test_project_raises_on_unsupported_value() -> None:
    projector = RowProjector(ColumnSchema.from_columns(["tags"]))

    with pytest.raises(UnsupportedFieldTypeError, match="column 'tags'"):
        projector.project({"tags": ["a", "b"]})
