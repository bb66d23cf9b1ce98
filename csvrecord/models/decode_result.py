from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .error_record import ErrorRecord

"""DecodeResult model.

Aggregated outcome of decoding a batch of rows that share one header row.
Contains the metrics needed for the SUMMARY output line.
"""

__all__ = [
    "DecodeResult",
]


@dataclass(frozen=True)
class DecodeResult:
    """Aggregated results of a batch decode."""
    records: list[Any] = field(default_factory=list)  # successfully decoded records, in row order
    errors: list[ErrorRecord] = field(default_factory=list)  # one per failed row
    total_rows: int = 0  # data rows seen (header excluded)
    elapsed_seconds: float = 0.0
    throughput_rows_per_sec: float = 0.0

    @property
    def decoded_rows(self) -> int:
        return len(self.records)

    @property
    def failed_rows(self) -> int:
        return len(self.errors)

    @property
    def ok(self) -> bool:
        return not self.errors
