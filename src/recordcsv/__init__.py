from recordcsv.config.options import EncodeOptions, load_encode_options
from recordcsv.domain.fields import RecordField, SupportsCsvFields, csv_field
from recordcsv.domain.values import TextMarshaler, to_cell
from recordcsv.encoder import Encoder, encode_records
from recordcsv.errors import (
    EncodeError,
    EncoderStateError,
    UnsupportedFieldTypeError,
    UnsupportedRecordError,
)

__all__ = [
    "EncodeError",
    "EncodeOptions",
    "Encoder",
    "EncoderStateError",
    "RecordField",
    "SupportsCsvFields",
    "TextMarshaler",
    "UnsupportedFieldTypeError",
    "UnsupportedRecordError",
    "csv_field",
    "encode_records",
    "load_encode_options",
    "to_cell",
]
