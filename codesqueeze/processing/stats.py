"""
Before/after statistics for processed text.
"""

import math

from ..core.models import StatsReport

BYTE_UNITS = ["B", "KB", "MB", "GB", "TB"]


def byte_length(text: str) -> int:
    """UTF-8 encoded size of text. Lone surrogates are counted, not rejected."""
    return len(text.encode("utf-8", "surrogatepass"))


def compression_ratio(original_bytes: int, processed_bytes: int) -> int:
    """Percentage saved, rounded half up; 0 for an empty original."""
    if original_bytes == 0:
        return 0
    return math.floor((1 - processed_bytes / original_bytes) * 100 + 0.5)


def compute_stats(
    original: str,
    processed: str,
    elapsed_millis: int,
    include_lines: bool = False,
) -> StatsReport:
    """
    Compute size and timing statistics for an original/processed pair.

    Args:
        original: Text before processing
        processed: Text after processing
        elapsed_millis: Time the operation took
        include_lines: Also count lines (used for JavaScript)

    Returns:
        StatsReport for the pair
    """
    original_bytes = byte_length(original)
    processed_bytes = byte_length(processed)
    return StatsReport(
        original_bytes=original_bytes,
        processed_bytes=processed_bytes,
        compression_ratio_percent=compression_ratio(original_bytes, processed_bytes),
        elapsed_millis=max(0, elapsed_millis),
        original_line_count=len(original.split("\n")) if include_lines else None,
        processed_line_count=len(processed.split("\n")) if include_lines else None,
    )


def format_bytes(size: int) -> str:
    """Human readable size, e.g. ``1.5 KB``."""
    if size <= 0:
        return "0 B"
    exponent = 0
    value = float(size)
    while value >= 1024 and exponent < len(BYTE_UNITS) - 1:
        value /= 1024
        exponent += 1
    number = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{number} {BYTE_UNITS[exponent]}"
