from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from typing import Any

from ..decode.errors import DecodeError
from ..decode.row_decoder import unmarshal_row
from ..header.resolver import get_header
from ..logging.error_log import ErrorLogBuffer
from ..logging.init import log_summary
from ..models.conversion_options import ConversionOptions, default_options
from ..models.decode_result import DecodeResult
from ..models.error_record import ErrorRecord
from ..models.record_shape import shape_of
from .progress import RowProgress
from .summary import render_summary_line

"""Batch decoding of rows sharing one header row.

The header row (rows[0]) is resolved once and every following row is decoded
into a fresh record. A row that fails to decode is recorded as an ErrorRecord
and the batch continues with the next row.
"""

__all__ = [
    "unmarshal_rows",
]

logger = logging.getLogger(__name__)


def _default_factory(record_type: Any) -> Callable[[], Any]:
    shape = shape_of(record_type)
    if shape.record_type is None:
        raise TypeError("record shape has no record type; pass factory=")
    return shape.record_type


def unmarshal_rows(
    rows: Sequence[Sequence[str]],
    record_type: Any,
    options: ConversionOptions | None = None,
    *,
    factory: Callable[[], Any] | None = None,
    error_log: ErrorLogBuffer | None = None,
    show_progress: bool = False,
) -> DecodeResult:
    """Decode every data row of ``rows`` into new records.

    Parameters
    ----------
    rows: header row followed by data rows
    record_type: dataclass type or RecordShape describing the records
    options: conversion options (default_options() when None)
    factory: zero-argument callable creating an empty record
    error_log: buffer receiving an ErrorRecord per failed row
    show_progress: display a tqdm bar (TTY only)

    Returns:
        DecodeResult with decoded records in row order and one error per failed row
    """
    if options is None:
        options = default_options()
    if factory is None:
        factory = _default_factory(record_type)
    if not rows:
        logger.info("no rows to decode")
        return DecodeResult()

    start = time.perf_counter()
    header = get_header(rows[0], record_type)

    records: list[Any] = []
    errors: list[ErrorRecord] = []
    data_rows = rows[1:]
    with RowProgress(len(data_rows), enabled=show_progress) as progress:
        for row_number, row in enumerate(data_rows, start=1):
            record = factory()
            try:
                unmarshal_row(header, row, record, options)
            except DecodeError as e:
                logger.warning(f"row {row_number}: {e}")
                errors.append(ErrorRecord.from_error(row_number, e))
            else:
                records.append(record)
            progress.advance()
        progress.set_postfix(failed=len(errors))

    elapsed = time.perf_counter() - start
    throughput = len(data_rows) / elapsed if elapsed > 0 else 0.0
    result = DecodeResult(
        records=records,
        errors=errors,
        total_rows=len(data_rows),
        elapsed_seconds=elapsed,
        throughput_rows_per_sec=throughput,
    )
    if error_log is not None and errors:
        error_log.extend(errors)
    # render_summary_line は "SUMMARY " 接頭辞付きなので除去してログへ
    log_summary(render_summary_line(result)[len("SUMMARY "):], logger)
    return result
