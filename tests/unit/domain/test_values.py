import ipaddress

import pytest

from recordcsv.domain.values import to_cell
from recordcsv.errors import UnsupportedFieldTypeError


class _IP:
    def __init__(self, text: str) -> None:
        self._addr = ipaddress.ip_address(text)

    def marshal_text(self) -> bytes:
        return str(self._addr).encode("ascii")


class _Label:
    def marshal_text(self) -> str:
        return "label, with comma"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("a", "a"),
        ("", ""),
        (-123456789, "-123456789"),
        (123456789, "123456789"),
        (0, "0"),
        (2**64 - 1, "18446744073709551615"),
        (123.456, "123.456000"),
        (1.0, "1.000000"),
        (True, "true"),
        (False, "false"),
        (None, ""),
        (float("nan"), "NaN"),
        (float("inf"), "+Inf"),
        (float("-inf"), "-Inf"),
    ],
)
def test_to_cell_scalars(value, expected) -> None:
    assert to_cell(value) == expected


def test_to_cell_delegates_to_marshal_text() -> None:
    assert to_cell(_IP("128.0.0.1")) == "128.0.0.1"
    assert to_cell(_Label()) == "label, with comma"


@pytest.mark.parametrize("value", [[1, 2], {"a": 1}, b"raw", 1j, object()])
def test_to_cell_rejects_unsupported_types(value) -> None:
    with pytest.raises(UnsupportedFieldTypeError, match="Can't encode value of type"):
        to_cell(value)


def test_to_cell_error_names_the_column() -> None:
    with pytest.raises(UnsupportedFieldTypeError, match="in column 'tags'") as excinfo:
        to_cell(["x"], "tags")
    assert excinfo.value.value_type is list
    assert excinfo.value.column == "tags"


def test_to_cell_rejects_undecodable_marshal_text() -> None:
    class _Raw:
        def marshal_text(self) -> bytes:
            return b"\xff"

    with pytest.raises(UnsupportedFieldTypeError, match="in column 'raw'") as excinfo:
        to_cell(_Raw(), "raw")
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
