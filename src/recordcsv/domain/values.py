from __future__ import annotations

import math
from typing import Any, Protocol, runtime_checkable

from recordcsv.errors import UnsupportedFieldTypeError


@runtime_checkable
class TextMarshaler(Protocol):
    """A value that renders its own CSV cell text."""

    def marshal_text(self) -> str | bytes:
        ...


def to_cell(value: Any, column: str | None = None) -> str:
    """Convert a scalar field value to its CSV cell text.

    None (an absent optional) becomes an empty cell. Values exposing
    ``marshal_text()`` are rendered by it before the fixed scalar rules apply.
    Floats always carry six fractional digits; non-finite floats render as
    ``NaN``, ``+Inf`` and ``-Inf``.
    """
    if value is None:
        return ""
    if isinstance(value, TextMarshaler):
        text = value.marshal_text()
        if isinstance(text, (bytes, bytearray)):
            try:
                return bytes(text).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise UnsupportedFieldTypeError(text, column) from exc
        if isinstance(text, str):
            return text
        raise UnsupportedFieldTypeError(text, column)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "+Inf" if value > 0 else "-Inf"
        return f"{value:.6f}"
    raise UnsupportedFieldTypeError(value, column)
