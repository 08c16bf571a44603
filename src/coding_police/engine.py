"""Violation aggregator.

Runs every detector over one file's lines in a fixed order
(file length, function lengths, duplicates, export count) and concatenates
the results. ``None`` means "no report"; an empty list is never returned.
"""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Optional, Sequence, Union

from .checks import (
    Violation,
    check_duplicate_blocks,
    check_export_count,
    check_file_length,
    check_function_lengths,
)
from .config import DEFAULT_THRESHOLDS, Thresholds
from .scanning import Line, split_lines, supports_export_check

logger = logging.getLogger(__name__)


def scan_lines(
    lines: Sequence[Line],
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
    check_exports: bool = True,
) -> Optional[list[Violation]]:
    """Run all checks over ``lines``.

    Args:
        lines: File lines from the line model
        thresholds: Limits to compare against
        check_exports: Whether the export-count check applies to this file

    Returns:
        Ordered violations, or None when the file is clean
    """
    violations: list[Violation] = []

    length_violation = check_file_length(lines, thresholds.max_file_lines)
    if length_violation is not None:
        violations.append(length_violation)

    violations.extend(check_function_lengths(lines, thresholds.max_function_lines))
    violations.extend(check_duplicate_blocks(lines, thresholds.min_duplicate_lines))

    if check_exports:
        export_violation = check_export_count(lines, thresholds.max_exports_per_file)
        if export_violation is not None:
            violations.append(export_violation)

    if not violations:
        return None
    return violations


def scan_content(
    path: Union[str, PurePath],
    content: str,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> Optional[list[Violation]]:
    """Scan already-read file content; ``path`` only selects the checks."""
    lines = split_lines(content)
    violations = scan_lines(lines, thresholds, check_exports=supports_export_check(path))
    logger.debug("Scanned %s: %d lines, %d violations", path, len(lines), len(violations or ()))
    return violations
