"""GitHub Actions formatter: one ``::warning`` annotation per violation."""

from typing import List

from ..checks import ViolationKind
from ..config import Thresholds
from .base import BaseFormatter, FileReport

_TITLES = {
    ViolationKind.FILE_TOO_LONG: "File too long",
    ViolationKind.LONG_FUNCTION: "Long function",
    ViolationKind.DUPLICATE_CODE: "Duplicate code",
    ViolationKind.TOO_MANY_EXPORTS: "Too many exports",
}


class GithubFormatter(BaseFormatter):
    """Annotations only carry the first line of each message."""

    def format(self, reports: List[FileReport], thresholds: Thresholds) -> str:
        lines: list[str] = []
        for r in reports:
            for v in r.violations:
                summary = v.message.splitlines()[0]
                lines.append(f"::warning file={r.path},title={_TITLES[v.kind]}::{summary}")
        return "\n".join(lines)
