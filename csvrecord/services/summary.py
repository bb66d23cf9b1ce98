from __future__ import annotations

from ..models.decode_result import DecodeResult

"""Summary line rendering for batch decodes."""

__all__ = [
    "format_number",
    "render_summary_line",
]


def format_number(value: float) -> str:
    """Format a metric without scientific notation or a trailing ``.0``."""
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: DecodeResult) -> str:
    """Render the SUMMARY line for a DecodeResult.

    Format:
    SUMMARY rows={total} decoded={decoded} failed={failed} elapsed_sec={elapsed} throughput_rps={throughput}

    Examples:
        >>> result = DecodeResult(records=[object()] * 3, total_rows=3,
        ...                       elapsed_seconds=2.0, throughput_rows_per_sec=1.5)
        >>> render_summary_line(result)
        'SUMMARY rows=3 decoded=3 failed=0 elapsed_sec=2 throughput_rps=1.5'
    """
    return (
        f"SUMMARY rows={result.total_rows} "
        f"decoded={result.decoded_rows} "
        f"failed={result.failed_rows} "
        f"elapsed_sec={format_number(result.elapsed_seconds)} "
        f"throughput_rps={format_number(result.throughput_rows_per_sec)}"
    )
