from __future__ import annotations

import io
import logging
from typing import IO, Any, Iterable, Optional

from recordcsv.config.options import EncodeOptions
from recordcsv.domain.fields import check_record
from recordcsv.errors import EncoderStateError
from recordcsv.io.projection import RowProjector, SchemaLocker
from recordcsv.io.writers import RowWriter

logger = logging.getLogger(__name__)


class Encoder:
    """Encodes records into CSV rows on an output stream.

    The first non-None record fixes the header: dataclass, pydantic and
    NamedTuple fields in declaration order, or the sorted keys of a mapping.
    Every record, the first included, is then written as one row projected
    onto that header. Records sharing no column with the header are skipped.

    Not safe for concurrent use; serialize calls to ``encode_next``.
    """

    def __init__(self, stream: IO[Any], options: EncodeOptions | None = None):
        self._stream = stream
        self._options = options or EncodeOptions()
        self._writer: Optional[RowWriter] = None
        self._locker = SchemaLocker()
        self._projector: Optional[RowProjector] = None

    @property
    def options(self) -> EncodeOptions:
        return self._options

    @property
    def columns(self) -> tuple[str, ...] | None:
        schema = self._locker.schema
        return schema.columns if schema is not None else None

    def configure(self, options: EncodeOptions | None = None, **overrides: Any) -> "Encoder":
        """Overlay options before the first record is encoded.

        Accepts field names (``skip_header``) or their aliases (``SkipHeader``).
        """
        if self._writer is not None or self._locker.schema is not None:
            raise EncoderStateError("options must be configured before the first record")
        base = options or self._options
        self._options = base.overlay(**overrides)
        return self

    def encode_next(self, record: Any) -> bool:
        """Encode ``record`` as the next row; return whether a row was written."""
        if record is None:
            return False
        check_record(record)

        schema = self._locker.lock(record)
        if schema is not None:
            self._projector = RowProjector(schema)
            if not schema.is_empty and not self._options.skip_header:
                self._row_writer().write_row(schema.columns)

        if self._locker.schema.is_empty:
            return False

        row = self._projector.project(record)
        if row is None:
            return False
        writer = self._row_writer()
        writer.write_row(row)
        writer.flush()
        return True

    def encode_all(self, records: Iterable[Any]) -> int:
        """Encode every record in order; return the number of rows written."""
        written = 0
        for record in records:
            if self.encode_next(record):
                written += 1
        logger.debug("Encoded %d CSV rows", written)
        return written

    def _row_writer(self) -> RowWriter:
        if self._writer is None:
            self._writer = RowWriter(self._stream, self._options)
        return self._writer


def encode_records(
    records: Iterable[Any],
    stream: IO[Any] | None = None,
    options: EncodeOptions | None = None,
    **overrides: Any,
) -> str | int:
    """Encode ``records`` in one go.

    With no ``stream`` the CSV text is returned; otherwise rows are written to
    ``stream`` and the number of data rows is returned.
    """
    target = stream if stream is not None else io.StringIO()
    encoder = Encoder(target).configure(options, **overrides)
    written = encoder.encode_all(records)
    if stream is None:
        return target.getvalue()
    return written
