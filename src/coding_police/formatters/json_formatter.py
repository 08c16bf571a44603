"""JSON formatter for Coding Police."""

import json
from typing import List

from ..config import Thresholds
from .base import BaseFormatter, FileReport


class JsonFormatter(BaseFormatter):
    """Render violations as a flat JSON list."""

    def format(self, reports: List[FileReport], thresholds: Thresholds) -> str:
        data = [
            {"path": r.path, "kind": v.kind.value, "message": v.message}
            for r in reports
            for v in r.violations
        ]
        return json.dumps(data, indent=2)

    def render(self, reports: List[FileReport], thresholds: Thresholds) -> None:
        # An empty list is still valid output for consumers
        print(self.format(reports, thresholds))
