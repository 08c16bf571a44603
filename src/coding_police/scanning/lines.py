"""Line model: raw file text as an ordered sequence of numbered lines.

Every detector works on ``Line`` objects so that line numbers reported in
violations always refer to the original file, even after filtering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Line:
    """One physical line of a source file.

    Attributes:
        text: Line content without the trailing newline
        number: 1-based position in the original file
    """

    text: str
    number: int

    @property
    def stripped(self) -> str:
        return self.text.strip()

    @property
    def indent(self) -> int:
        """Width of leading whitespace, or -1 for a blank line."""
        stripped = self.text.lstrip()
        if not stripped:
            return -1
        return len(self.text) - len(stripped)

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


def number_lines(texts: Iterable[str]) -> list[Line]:
    """Wrap already-split line texts, numbering them from 1."""
    return [Line(text=text, number=i) for i, text in enumerate(texts, start=1)]


def split_lines(content: str) -> list[Line]:
    """Split file content on newlines.

    A trailing newline yields a final empty line, so the line count matches
    ``content.split("\\n")``. Carriage returns are kept in ``text`` and are
    removed by ``stripped``.
    """
    return number_lines(content.split("\n"))
