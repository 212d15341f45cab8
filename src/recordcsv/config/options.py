from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from recordcsv.utils.load import load_yaml_mapping

LF = "\n"
CRLF = "\r\n"

# Characters the csv dialect cannot use as a delimiter.
INVALID_DELIMITERS = ('"', "\r", "\n", "\x00", "\ufffd")


class EncodeOptions(BaseModel):
    """Dialect and header policy applied by an Encoder."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    comma: str = Field(
        default=",",
        alias="Comma",
        description="Single-character field delimiter.",
    )
    skip_header: bool = Field(
        default=False,
        alias="SkipHeader",
        description="Suppress the header row entirely.",
    )
    use_crlf: bool = Field(
        default=False,
        alias="UseCRLF",
        description="Terminate every line with CRLF instead of LF.",
    )
    encoding: str = Field(
        default="utf-8",
        alias="Encoding",
        description="Text encoding used when the output stream is binary.",
    )

    @field_validator("comma", mode="before")
    @classmethod
    def _validate_comma(cls, value):
        if value is None:
            return ","
        text = str(value)
        if len(text) != 1:
            raise ValueError("comma must be a single character")
        if text in INVALID_DELIMITERS:
            raise ValueError(f"comma cannot be {text!r}")
        return text

    @field_validator("encoding", mode="before")
    @classmethod
    def _normalize_encoding(cls, value):
        if value is None:
            return "utf-8"
        text = str(value).strip()
        if not text:
            raise ValueError("encoding must not be empty")
        return text

    @property
    def line_terminator(self) -> str:
        return CRLF if self.use_crlf else LF

    def overlay(self, **changes: Any) -> "EncodeOptions":
        """Return a new validated instance with ``changes`` applied on top."""
        if not changes:
            return self
        merged = self.model_dump()
        for key, value in changes.items():
            merged[_field_name(key)] = value
        return EncodeOptions.model_validate(merged)


def _field_name(key: str) -> str:
    for name, info in EncodeOptions.model_fields.items():
        if key == name or key == info.alias:
            return name
    # Let validation report the unknown key.
    return key


def load_encode_options(path: Path) -> EncodeOptions:
    """Read EncodeOptions from a YAML mapping, unwrapping an optional ``csv:`` block."""
    return EncodeOptions.model_validate(load_yaml_mapping(path, section="csv"))
