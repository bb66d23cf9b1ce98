from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import Any

from ..header.resolver import ResolvedHeader
from ..models.conversion_options import ConversionOptions, default_options
from ..models.field_descriptor import FieldDescriptor, FieldKind
from .errors import (
    IntegerParseError,
    InvalidBooleanValue,
    InvalidIntegerValue,
    InvalidUnsignedValue,
    MissingRequiredField,
)

"""Row decoding.

Populates a record instance from one data row using a ResolvedHeader. Each
resolved field is coerced according to its kind; the first failure aborts the
row and fields assigned before it keep their new values.

A cell is treated as absent when the row is shorter than the field's column
position or the cell is an empty string.
"""

__all__ = [
    "parse_int",
    "wrap_signed",
    "wrap_unsigned",
    "unmarshal_row",
]

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_INT_RE = re.compile(r"([+-]?)0*([0-9]+)")
_INT64_DIGITS = 19

# Sentinel: leave the target field untouched
_SKIP = object()


def parse_int(text: str) -> int:
    """Parse a base-10 signed 64-bit integer.

    Accepts an optional sign followed by ASCII digits only (no surrounding
    whitespace, no underscores).

    Raises:
        IntegerParseError: invalid syntax or value outside the int64 range
    """
    match = _INT_RE.fullmatch(text)
    if match is None:
        raise IntegerParseError(text, "invalid syntax")
    sign, digits = match.groups()
    # 桁数で先に弾く (int() の桁数上限に当たらないように)
    if len(digits) > _INT64_DIGITS:
        raise IntegerParseError(text, "value out of range")
    value = int(sign + digits)
    if value < INT64_MIN or value > INT64_MAX:
        raise IntegerParseError(text, "value out of range")
    return value


def wrap_signed(value: int, bits: int) -> int:
    """Truncate ``value`` to a two's complement integer of ``bits`` width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def wrap_unsigned(value: int, bits: int) -> int:
    """Reinterpret ``value`` as the unsigned bit pattern of ``bits`` width.

    >>> wrap_unsigned(-1, 64)
    18446744073709551615
    >>> wrap_unsigned(-1, 8)
    255
    """
    return value & ((1 << bits) - 1)


def _cell(row: Sequence[str], index: int) -> str | None:
    if index >= len(row):
        return None
    value = row[index]
    return value if value != "" else None


def _coerce_int(col: FieldDescriptor, cell: str | None, options: ConversionOptions) -> Any:
    if cell is None:
        if col.required:
            raise MissingRequiredField(col.row_index, col.name)
        return _SKIP if col.omit_empty else wrap_signed(options.default_int, col.bits)
    try:
        value = parse_int(cell)
    except IntegerParseError as e:
        raise InvalidIntegerValue(col.row_index, e, col.name) from e
    return wrap_signed(value, col.bits)


def _coerce_uint(col: FieldDescriptor, cell: str | None, options: ConversionOptions) -> Any:
    if cell is None:
        if col.required:
            raise MissingRequiredField(col.row_index, col.name)
        return _SKIP if col.omit_empty else wrap_unsigned(options.default_uint, col.bits)
    try:
        # 符号付きパーサで解析し、負値はビットパターンとして再解釈する
        value = parse_int(cell)
    except IntegerParseError as e:
        raise InvalidUnsignedValue(col.row_index, e, col.name) from e
    return wrap_unsigned(value, col.bits)


def _coerce_string(col: FieldDescriptor, cell: str | None, options: ConversionOptions) -> Any:
    if cell is None:
        if col.required:
            raise MissingRequiredField(col.row_index, col.name)
        return _SKIP if col.omit_empty else options.default_string
    return cell


def _coerce_bool(col: FieldDescriptor, cell: str | None, options: ConversionOptions) -> Any:
    if cell is not None:
        lowered = cell.lower()
        if lowered in options.true_values:
            return True
        if lowered in options.false_values:
            return False
    if col.required:
        raise InvalidBooleanValue(col.row_index, col.name)
    if cell is None and col.omit_empty:
        return _SKIP
    return options.default_bool


_COERCERS: dict[FieldKind, Callable[[FieldDescriptor, str | None, ConversionOptions], Any]] = {
    FieldKind.INT: _coerce_int,
    FieldKind.UINT: _coerce_uint,
    FieldKind.STRING: _coerce_string,
    FieldKind.BOOL: _coerce_bool,
}


def unmarshal_row(
    header: ResolvedHeader,
    row: Sequence[str],
    target: Any,
    options: ConversionOptions | None = None,
) -> None:
    """Decode ``row`` into ``target`` in place.

    Parameters
    ----------
    header: ResolvedHeader from get_header()
    row: cell strings of one data row
    target: record instance to populate
    options: conversion options (default_options() when None)

    Raises:
        DecodeError: on the first missing required or unparsable field
    """
    if options is None:
        options = default_options()
    shape = header.shape
    for col in header:
        if not col.resolved:
            continue
        coerce = _COERCERS.get(col.kind)
        if coerce is None:
            continue
        value = coerce(col, _cell(row, col.row_index), options)
        if value is _SKIP:
            continue
        shape.setter(col.field_index)(target, value)
