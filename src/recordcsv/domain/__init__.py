from .fields import RecordField, SupportsCsvFields, csv_field
from .values import TextMarshaler, to_cell

__all__ = ["RecordField", "SupportsCsvFields", "TextMarshaler", "csv_field", "to_cell"]
