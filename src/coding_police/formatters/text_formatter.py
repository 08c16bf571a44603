"""Plain-text advisory report, the form appended to tool output."""

from typing import List

from ..checks import Violation
from ..config import Thresholds
from .base import BaseFormatter, FileReport

HEADER = "CODING STANDARDS VIOLATION (coding-police)"
RULE = "=" * 50


class TextFormatter(BaseFormatter):
    """Numbered violations followed by the required remediation actions."""

    def format_file(self, path: str, violations: List[Violation], thresholds: Thresholds) -> str:
        numbered = "\n\n".join(f"{i}. {v.message}" for i, v in enumerate(violations, start=1))
        return (
            f"{HEADER}\n"
            f"{RULE}\n"
            f"{numbered}\n"
            "\n"
            "REQUIRED ACTIONS:\n"
            "- Keep code DRY: extract duplicated logic into shared functions.\n"
            f"- Keep files modular: split files exceeding {thresholds.max_file_lines} lines"
            " by functionality.\n"
            f"- Keep functions focused: break functions over {thresholds.max_function_lines}"
            " lines into composable helpers.\n"
            "- Apply Single Responsibility: each file should have one clear purpose.\n"
            "\n"
            "Fix these violations before proceeding."
        )

    def format(self, reports: List[FileReport], thresholds: Thresholds) -> str:
        blocks = [
            f"{r.path}\n{self.format_file(r.path, r.violations, thresholds)}" for r in reports
        ]
        return "\n\n".join(blocks)
