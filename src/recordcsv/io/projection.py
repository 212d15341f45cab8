from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from recordcsv.domain.fields import is_mapping_record, iter_record_fields
from recordcsv.domain.values import to_cell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnSchema:
    """Ordered header plus the row position of every column name."""

    columns: tuple[str, ...]
    index: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_columns(cls, columns: list[str]) -> "ColumnSchema":
        index: dict[str, int] = {}
        for pos, name in enumerate(columns):
            if name in index:
                logger.debug(
                    "Column '%s' repeated at position %d; later position wins", name, pos
                )
            index[name] = pos
        return cls(columns=tuple(columns), index=MappingProxyType(index))

    @property
    def width(self) -> int:
        return len(self.columns)

    @property
    def is_empty(self) -> bool:
        return not self.columns


class SchemaLocker:
    """Derives the column schema from the first record (header locked on first row)."""

    def __init__(self) -> None:
        self._schema: ColumnSchema | None = None

    @property
    def schema(self) -> ColumnSchema | None:
        return self._schema

    def lock(self, record: Any) -> ColumnSchema | None:
        """Lock the schema from ``record``; return it only when this call locked it."""
        if self._schema is not None or record is None:
            return None
        self._schema = ColumnSchema.from_columns(discover_columns(record))
        if self._schema.is_empty:
            logger.debug("First record has no encodable fields; output stays empty")
        else:
            logger.debug("Locked CSV header with %d columns", self._schema.width)
        return self._schema


class RowProjector:
    """Projects records onto a locked schema as rows of cell text."""

    def __init__(self, schema: ColumnSchema) -> None:
        self._schema = schema

    def project(self, record: Any) -> list[str] | None:
        row = [""] * self._schema.width
        matched = False
        for column, value in _named_values(record):
            pos = self._schema.index.get(column)
            if pos is None:
                continue
            row[pos] = to_cell(value, column)
            matched = True
        if not matched:
            logger.debug(
                "Skipping %s record: no fields match the header", type(record).__name__
            )
            return None
        return row


def discover_columns(record: Any) -> list[str]:
    if is_mapping_record(record):
        return sorted(record.keys())
    return [
        f.column
        for f in iter_record_fields(record)
        if f.visible and not f.embedded and not f.excluded
    ]


def _named_values(record: Any):
    if is_mapping_record(record):
        yield from record.items()
        return
    for f in iter_record_fields(record):
        if f.visible and not f.excluded:
            yield f.column, f.value
