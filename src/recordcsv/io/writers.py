from __future__ import annotations

import csv
import io
from typing import IO, Any, Sequence

from recordcsv.config.options import EncodeOptions


class BinaryTextAdapter:
    """Text facade over a binary stream (encodes every write)."""

    def __init__(self, stream: IO[bytes], encoding: str = "utf-8"):
        self.stream = stream
        self.encoding = encoding

    def write(self, text: str) -> int:
        self.stream.write(text.encode(self.encoding))
        return len(text)

    def flush(self) -> None:
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()


def is_binary_stream(stream: Any) -> bool:
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return "b" in getattr(stream, "mode", "")


class RowWriter:
    """Writes delimited rows to a text or binary stream via csv.writer."""

    def __init__(self, stream: IO[Any], options: EncodeOptions | None = None):
        self.options = options or EncodeOptions()
        if is_binary_stream(stream):
            self.fh = BinaryTextAdapter(stream, self.options.encoding)
        else:
            self.fh = stream
        self.writer = csv.writer(
            self.fh,
            delimiter=self.options.comma,
            lineterminator=self.options.line_terminator,
            quoting=csv.QUOTE_MINIMAL,
        )

    def write_row(self, cells: Sequence[str]) -> None:
        self.writer.writerow(cells)

    def flush(self) -> None:
        flush = getattr(self.fh, "flush", None)
        if flush is not None:
            flush()
