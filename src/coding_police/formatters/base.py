"""Base formatter interface for Coding Police output rendering."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from ..checks import Violation
from ..config import Thresholds


@dataclass(frozen=True)
class FileReport:
    """Violations found in one file."""

    path: str
    violations: List[Violation]


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def render(self, reports: List[FileReport], thresholds: Thresholds) -> None:
        """Print formatted reports to stdout."""
        text = self.format(reports, thresholds)
        if text:
            print(text)

    @abstractmethod
    def format(self, reports: List[FileReport], thresholds: Thresholds) -> str:
        """Return formatted string representation of reports."""
