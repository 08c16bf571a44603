"""
Coding Police - post-edit code hygiene scanner

Scans a file right after an editing pipeline creates or modifies it and
reports advisory violations: files that are too long, functions that are too
long, duplicated blocks, and modules exporting too much. No grammar is used;
function extents come from brace and indentation heuristics that work across
C-family, script and indentation-based languages.
"""

__version__ = "0.1.0"

from .checks import Violation, ViolationKind
from .config import Thresholds, load_config
from .engine import scan_content, scan_lines
from .hook import handle_tool_after
from .scanning import Line, split_lines

__all__ = [
    "scan_lines",  # Main entry point
    "scan_content",
    "handle_tool_after",
    "Thresholds",
    "load_config",
    "Violation",
    "ViolationKind",
    "Line",
    "split_lines",
]
