from .errors import (
    DecodeError,
    IntegerParseError,
    InvalidBooleanValue,
    InvalidIntegerValue,
    InvalidUnsignedValue,
    MissingRequiredField,
)
from .row_decoder import unmarshal_row

__all__ = [
    "DecodeError",
    "IntegerParseError",
    "InvalidBooleanValue",
    "InvalidIntegerValue",
    "InvalidUnsignedValue",
    "MissingRequiredField",
    "unmarshal_row",
]
