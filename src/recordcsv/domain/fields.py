from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, is_dataclass
from typing import Any, Iterable, Iterator, Protocol, runtime_checkable

from pydantic import BaseModel

from recordcsv.errors import UnsupportedRecordError

CSV_TAG = "csv"
CSV_EMBEDDED = "csv_embedded"
EXCLUDE = "-"


@dataclass(frozen=True)
class RecordField:
    """One named field of a structured record, resolved against its csv annotations."""

    name: str
    column: str
    value: Any
    excluded: bool = False
    embedded: bool = False

    @property
    def visible(self) -> bool:
        return not self.name.startswith("_")

    @classmethod
    def from_tag(
        cls,
        name: str,
        value: Any,
        tag: str | None = None,
        *,
        embedded: bool = False,
    ) -> "RecordField":
        if tag == EXCLUDE:
            return cls(name=name, column=EXCLUDE, value=value, excluded=True, embedded=embedded)
        return cls(name=name, column=tag or name, value=value, embedded=embedded)


@runtime_checkable
class SupportsCsvFields(Protocol):
    def __csv_fields__(self) -> Iterable[RecordField]:
        ...


def csv_field(
    name: str | None = None,
    *,
    exclude: bool = False,
    embedded: bool = False,
    **kwargs: Any,
) -> Any:
    """dataclasses.field() carrying a column rename, exclusion or embedded marker."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    if exclude:
        metadata[CSV_TAG] = EXCLUDE
    elif name:
        metadata[CSV_TAG] = name
    if embedded:
        metadata[CSV_EMBEDDED] = True
    return dataclasses.field(metadata=metadata, **kwargs)


def is_mapping_record(record: Any) -> bool:
    return isinstance(record, Mapping)


def is_structured_record(record: Any) -> bool:
    if isinstance(record, type):
        return False
    if isinstance(record, SupportsCsvFields):
        return True
    if is_dataclass(record):
        return True
    if isinstance(record, BaseModel):
        return True
    return _is_namedtuple(record)


def check_record(record: Any) -> None:
    """Raise UnsupportedRecordError unless ``record`` can be encoded."""
    if is_mapping_record(record):
        if not all(isinstance(key, str) for key in record):
            raise UnsupportedRecordError(record)
        return
    if not is_structured_record(record):
        raise UnsupportedRecordError(record)


def iter_record_fields(record: Any) -> Iterator[RecordField]:
    """Yield every field of a structured record in declaration order."""
    if isinstance(record, SupportsCsvFields) and not isinstance(record, type):
        yield from record.__csv_fields__()
        return
    if is_dataclass(record) and not isinstance(record, type):
        for f in dataclasses.fields(record):
            yield RecordField.from_tag(
                f.name,
                getattr(record, f.name),
                f.metadata.get(CSV_TAG),
                embedded=bool(f.metadata.get(CSV_EMBEDDED, False)),
            )
        return
    if isinstance(record, BaseModel):
        for name, info in type(record).model_fields.items():
            extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
            yield RecordField.from_tag(
                name,
                getattr(record, name),
                extra.get(CSV_TAG),
                embedded=bool(extra.get(CSV_EMBEDDED, False)),
            )
        return
    if _is_namedtuple(record):
        for name, value in zip(type(record)._fields, record):
            yield RecordField.from_tag(name, value)
        return
    raise UnsupportedRecordError(record)


def _is_namedtuple(record: Any) -> bool:
    return isinstance(record, tuple) and hasattr(type(record), "_fields")
