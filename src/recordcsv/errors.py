class EncodeError(ValueError):
    """Base class for errors raised while encoding records."""


class UnsupportedRecordError(EncodeError, TypeError):
    """Raised when a record is neither a structured value nor a str-keyed mapping."""

    def __init__(self, record: object) -> None:
        self.record_type = type(record)
        super().__init__(
            f"Unsupported record type '{self.record_type.__name__}': "
            "expected a dataclass, pydantic model, NamedTuple, "
            "__csv_fields__ provider or a mapping with str keys"
        )


class UnsupportedFieldTypeError(EncodeError, TypeError):
    """Raised when a field value cannot be converted to a CSV cell."""

    def __init__(self, value: object, column: str | None = None) -> None:
        self.value_type = type(value)
        self.column = column
        where = f" in column '{column}'" if column is not None else ""
        super().__init__(f"Can't encode value of type '{self.value_type.__name__}'{where}")


class EncoderStateError(EncodeError):
    """Raised when an encoder is reconfigured after output has started."""
