"""Boundary scanner: heuristic function extents and the long-function check.

A single left-to-right pass with one open-span slot. While no span is open,
each line is tried against the signature matchers. While a span is open the
scanner tracks brace depth and indentation, and closes the span on whichever
signal comes first:

    brace close   depth <= 0, the line contains "}", and it is after the start
    dedent close  the line is non-blank, not a comment, does not start with a
                  closing bracket, is indented no deeper than the signature
                  line, and is at least two lines after the start
    end of file   the last line always closes an open span

Only one span is open at a time: functions nested inside an open span are
not measured separately.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..scanning.lines import Line
from ..scanning.signatures import FUNCTION_SIGNATURES, SignatureMatcher, match_signature
from .models import FunctionSpan, Violation, ViolationKind

logger = logging.getLogger(__name__)

_CLOSING_TOKENS = ("}", ")", "]")


class _OpenSpan:
    """Mutable state for the span currently being measured."""

    __slots__ = ("name", "start_line", "baseline", "depth")

    def __init__(self, name: str, start_line: int, baseline: int):
        self.name = name
        self.start_line = start_line
        self.baseline = baseline
        self.depth = 0

    def feed(self, text: str) -> None:
        self.depth += text.count("{") - text.count("}")

    def closes_at(self, line: Line) -> bool:
        text = line.text
        if self.depth <= 0 and line.number > self.start_line and "}" in text:
            return True

        if self.baseline < 0 or line.number <= self.start_line + 1:
            return False
        if line.is_blank or line.stripped.startswith("#"):
            return False
        if text.lstrip().startswith(_CLOSING_TOKENS):
            return False
        return line.indent <= self.baseline


def find_function_spans(
    lines: Sequence[Line], matchers: Sequence[SignatureMatcher] = FUNCTION_SIGNATURES
) -> list[FunctionSpan]:
    """Return every function span detected in ``lines``, in file order."""
    spans: list[FunctionSpan] = []
    current: Optional[_OpenSpan] = None
    last_number = lines[-1].number if lines else 0

    for line in lines:
        if current is None:
            found = match_signature(line.text, matchers)
            if found is not None:
                current = _OpenSpan(found.name, line.number, line.indent)

        if current is None:
            continue

        current.feed(line.text)
        if current.closes_at(line) or line.number == last_number:
            spans.append(FunctionSpan(current.name, current.start_line, line.number))
            current = None

    return spans


def check_function_lengths(lines: Sequence[Line], max_lines: int) -> list[Violation]:
    """Report every detected function longer than ``max_lines``."""
    violations: list[Violation] = []
    spans = find_function_spans(lines)

    for span in spans:
        if span.length > max_lines:
            violations.append(
                Violation(
                    kind=ViolationKind.LONG_FUNCTION,
                    message=(
                        f"LONG FUNCTION: `{span.name}` is {span.length} lines "
                        f"(limit: {max_lines}, starts at line {span.start_line})."
                        " Break it into smaller helper functions."
                    ),
                )
            )

    logger.debug("Found %d function spans, %d over limit", len(spans), len(violations))
    return violations
