"""Violation and intermediate detector models.

Defines the records the detectors produce: spans found by the boundary
scanner, matches found by the duplicate detector, and the violations that
reach the report.
"""

from dataclasses import dataclass
from enum import Enum


class ViolationKind(Enum):
    """Kinds of hygiene violations."""

    FILE_TOO_LONG = "file_too_long"
    LONG_FUNCTION = "long_function"
    DUPLICATE_CODE = "duplicate_code"
    TOO_MANY_EXPORTS = "too_many_exports"


@dataclass(frozen=True)
class Violation:
    """One reported violation.

    ``message`` is fully formatted and carries the concrete numbers
    (counts, limits, line numbers, names) downstream consumers match on.
    """

    kind: ViolationKind
    message: str


@dataclass(frozen=True)
class NormalizedLine:
    """A trimmed, non-trivial line kept for duplicate matching."""

    text: str
    number: int  # original 1-based line number


@dataclass(frozen=True)
class FunctionSpan:
    """Detected extent of one function or method body."""

    name: str
    start_line: int
    end_line: int

    @property
    def length(self) -> int:
        return self.end_line - self.start_line + 1


@dataclass(frozen=True)
class DuplicateMatch:
    """A block of normalized lines seen earlier in the same file."""

    first_line: int  # original line where the block first appears
    second_line: int  # original line where it appears again
    block_size: int
