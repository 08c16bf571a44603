"""Whole-file metrics: total length and exported declaration count."""

from __future__ import annotations

import re
from typing import Optional, Sequence

from ..scanning.lines import Line
from .models import Violation, ViolationKind

# `export` must open the line, so commented-out exports never count.
_EXPORT_RE = re.compile(
    r"^\s*export\s+(default\s+)?(?:function|class|const|let|var|type|interface|enum|async)"
)


def check_file_length(lines: Sequence[Line], max_lines: int) -> Optional[Violation]:
    """Report a file with more than ``max_lines`` lines. Exactly at the limit is fine."""
    count = len(lines)
    if count <= max_lines:
        return None

    excess = count - max_lines
    return Violation(
        kind=ViolationKind.FILE_TOO_LONG,
        message=(
            f"FILE TOO LONG: {count} lines (limit: {max_lines}, over by {excess}).\n"
            "  Split this file into smaller modules grouped by functionality.\n"
            "  Identify logical boundaries (types, helpers, handlers, constants) and extract them."
        ),
    )


def count_exports(lines: Sequence[Line]) -> int:
    """Count lines that open with an exported declaration."""
    return sum(1 for line in lines if _EXPORT_RE.match(line.text))


def check_export_count(lines: Sequence[Line], max_exports: int) -> Optional[Violation]:
    """Report a module exporting more than ``max_exports`` declarations."""
    count = count_exports(lines)
    if count <= max_exports:
        return None

    return Violation(
        kind=ViolationKind.TOO_MANY_EXPORTS,
        message=(
            f"TOO MANY EXPORTS: {count} exports in this file (limit: {max_exports}).\n"
            "  This suggests the file has multiple responsibilities.\n"
            "  Group related exports into separate modules (e.g., types.ts, helpers.ts, constants.ts)."
        ),
    )
