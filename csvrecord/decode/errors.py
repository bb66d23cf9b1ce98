from __future__ import annotations

"""Decode error taxonomy.

Every error raised by the row decoder derives from DecodeError and identifies
the failing column. Errors are deterministic functions of the input row; the
caller decides whether to skip the row, abort the batch or log and continue.
"""

__all__ = [
    "DecodeError",
    "MissingRequiredField",
    "InvalidIntegerValue",
    "InvalidUnsignedValue",
    "InvalidBooleanValue",
    "IntegerParseError",
]


class IntegerParseError(ValueError):
    """Raised by the base-10 integer parser."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f'parsing "{text}": {reason}')
        self.text = text
        self.reason = reason


class DecodeError(Exception):
    """Base class for row decode failures.

    Attributes:
        column_index: 0-based column position in the row
        field_name: Record field the column is mapped to
    """
    error_type = "DECODE_ERROR"

    def __init__(self, message: str, column_index: int, field_name: str | None = None) -> None:
        super().__init__(message)
        self.column_index = column_index
        self.field_name = field_name

    @property
    def column(self) -> int:
        """1-based column number, as used in messages."""
        return self.column_index + 1


class MissingRequiredField(DecodeError):
    error_type = "MISSING_REQUIRED_FIELD"

    def __init__(self, column_index: int, field_name: str | None = None) -> None:
        super().__init__(
            f"Column {column_index + 1} is required and does not have a value",
            column_index,
            field_name,
        )


class _NumberValueError(DecodeError):
    """Shared message layout of the integer parse failures."""
    target = "a number"

    def __init__(self, column_index: int, cause: Exception, field_name: str | None = None) -> None:
        super().__init__(
            f"Failed to parse column {column_index + 1} to {self.target}: {cause}",
            column_index,
            field_name,
        )
        self.cause = cause


class InvalidIntegerValue(_NumberValueError):
    error_type = "INVALID_INTEGER_VALUE"
    target = "an int"


class InvalidUnsignedValue(_NumberValueError):
    error_type = "INVALID_UNSIGNED_VALUE"
    target = "an unsigned int"


class InvalidBooleanValue(DecodeError):
    error_type = "INVALID_BOOLEAN_VALUE"

    def __init__(self, column_index: int, field_name: str | None = None) -> None:
        super().__init__(
            f"Failed to parse column {column_index + 1} to a boolean",
            column_index,
            field_name,
        )
