from __future__ import annotations

from typing import Any

import pandas as pd

from ..models.conversion_options import ConversionOptions
from ..models.decode_result import DecodeResult
from .batch import unmarshal_rows

"""pandas DataFrame adapter.

Converts an in-memory DataFrame into the row-list input (header row followed
by data rows, every cell a string) consumed by unmarshal_rows().
"""

__all__ = [
    "frame_rows",
    "unmarshal_frame",
]


def _cell_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None or pd.isna(value):
        return ""
    # int 列は欠損があると float64 になるため "2.0" -> "2" に戻す
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def frame_rows(df: pd.DataFrame, *, header: bool = True) -> list[list[str]]:
    """Convert ``df`` to a list of string rows.

    Parameters
    ----------
    df: source DataFrame
    header: True -> column labels become the header row.
            False -> the first DataFrame row is the header (frames read with header=None)

    NaN/None cells become empty strings. Header labels are stripped; data cells
    keep their text as is except for str() conversion; integral floats (int
    columns upcast by NaN) are rendered without the trailing ``.0``.
    """
    rows: list[list[str]] = []
    if header:
        rows.append([str(c).strip() for c in df.columns.tolist()])
    for raw in df.itertuples(index=False, name=None):
        rows.append([_cell_text(v) for v in raw])
    if not header and rows:
        rows[0] = [c.strip() for c in rows[0]]
    return rows


def unmarshal_frame(
    df: pd.DataFrame,
    record_type: Any,
    options: ConversionOptions | None = None,
    *,
    header: bool = True,
    **kwargs: Any,
) -> DecodeResult:
    """Decode every data row of ``df`` into records (see unmarshal_rows)."""
    return unmarshal_rows(frame_rows(df, header=header), record_type, options, **kwargs)
