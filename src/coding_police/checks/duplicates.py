"""Duplicate block detection via normalized-line windowing.

Lines are trimmed and trivial lines dropped (blank, comments, block comment
delimiters, imports, lone punctuation). A window of ``min_lines`` consecutive
normalized lines slides over the remainder; a window whose exact text was
seen before is a duplicate of the block's first occurrence.

Matching is exact: any difference after trimming, or any reordering, defeats
it. Each new occurrence site is linked back to the first occurrence only.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from ..scanning.lines import Line
from .models import DuplicateMatch, NormalizedLine, Violation, ViolationKind

logger = logging.getLogger(__name__)

_COMMENT_PREFIXES = ("//", "#", "*", "/*", "*/")
_IMPORT_RE = re.compile(r"^(import|from|require|use |using )")
_PUNCTUATION_RE = re.compile(r"^[{}()\[\];,]$")


def _is_trivial(stripped: str) -> bool:
    return (
        not stripped
        or stripped.startswith(_COMMENT_PREFIXES)
        or _IMPORT_RE.match(stripped) is not None
        or _PUNCTUATION_RE.match(stripped) is not None
    )


def normalize_lines(lines: Sequence[Line]) -> list[NormalizedLine]:
    """Trim lines and drop the ones that never take part in matching."""
    return [
        NormalizedLine(text=line.stripped, number=line.number)
        for line in lines
        if not _is_trivial(line.stripped)
    ]


def find_duplicate_blocks(lines: Sequence[Line], min_lines: int) -> list[DuplicateMatch]:
    """Find repeated blocks of at least ``min_lines`` normalized lines.

    Overlapping windows of one longer duplicated region are coalesced: when
    both occurrences advance by exactly one normalized line from the previous
    match, the window extends that match instead of starting a new one.

    Args:
        lines: File lines
        min_lines: Window size; values below 1 are treated as 1

    Returns:
        One DuplicateMatch per distinct (first, second) pair, in file order
    """
    window = max(min_lines, 1)
    normalized = normalize_lines(lines)

    seen: dict[tuple[str, ...], int] = {}  # block -> normalized index of first window
    reported: set[tuple[int, int]] = set()
    matches: list[DuplicateMatch] = []
    previous: Optional[tuple[int, int]] = None

    for i in range(len(normalized) - window + 1):
        block = tuple(entry.text for entry in normalized[i : i + window])
        first = seen.get(block)
        if first is None:
            seen[block] = i
            previous = None
            continue

        extends_previous = previous is not None and previous == (first - 1, i - 1)
        previous = (first, i)
        if extends_previous:
            continue

        pair = (normalized[first].number, normalized[i].number)
        if pair in reported:
            continue
        reported.add(pair)
        matches.append(DuplicateMatch(first_line=pair[0], second_line=pair[1], block_size=window))

    return matches


def check_duplicate_blocks(lines: Sequence[Line], min_lines: int) -> list[Violation]:
    """Report each duplicated block of at least ``min_lines`` lines once."""
    matches = find_duplicate_blocks(lines, min_lines)
    logger.debug("Found %d duplicate blocks (window=%d)", len(matches), max(min_lines, 1))
    return [
        Violation(
            kind=ViolationKind.DUPLICATE_CODE,
            message=(
                f"DUPLICATE CODE: {match.block_size}+ line block duplicated at lines "
                f"{match.first_line} and {match.second_line}."
                " Extract into a shared function to keep code DRY."
            ),
        )
        for match in matches
    ]
