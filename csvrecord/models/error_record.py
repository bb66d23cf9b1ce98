from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..decode.errors import DecodeError

"""ErrorRecord model for decode error logging.

This module defines the ErrorRecord dataclass used for structured error logging
when a batch of rows is decoded. A record describes one row that failed to
decode; column=-1 is used when the failing column is unknown.
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        row: Data row number (1-based, header excluded)
        column: Column number (1-based). -1 when unknown
        field: Record field name, empty when unknown
        error_type: Error classification in UPPER_SNAKE_CASE format
        message: Human readable error description
    """
    timestamp: str  # ISO8601 UTC
    row: int
    column: int  # 不明な場合 -1 許容
    field: str
    error_type: str  # UPPER_SNAKE
    message: str

    @staticmethod
    def create(row: int, column: int, field: str, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord with current UTC timestamp."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            row=row,
            column=column,
            field=field,
            error_type=error_type,
            message=message,
        )

    @staticmethod
    def from_error(row: int, error: DecodeError) -> ErrorRecord:
        """Build an ErrorRecord from a DecodeError raised for data row ``row``."""
        return ErrorRecord.create(
            row=row,
            column=error.column,
            field=error.field_name or "",
            error_type=error.error_type,
            message=str(error),
        )

    def to_json_line(self) -> str:
        """Serialize ErrorRecord to JSON Lines format.

        Returns:
            JSON string representation without extra keys
        """
        return json.dumps(asdict(self), ensure_ascii=False)
