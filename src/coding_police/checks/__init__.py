"""Hygiene detectors.

Every detector is a pure function of (lines, threshold) and can run in any
order or concurrently.
"""

from .duplicates import check_duplicate_blocks, find_duplicate_blocks, normalize_lines
from .file_metrics import check_export_count, check_file_length, count_exports
from .functions import check_function_lengths, find_function_spans
from .models import DuplicateMatch, FunctionSpan, NormalizedLine, Violation, ViolationKind

__all__ = [
    "Violation",
    "ViolationKind",
    "FunctionSpan",
    "DuplicateMatch",
    "NormalizedLine",
    "check_file_length",
    "check_function_lengths",
    "check_duplicate_blocks",
    "check_export_count",
    "count_exports",
    "find_function_spans",
    "find_duplicate_blocks",
    "normalize_lines",
]
