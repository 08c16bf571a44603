"""Post-edit hook: the boundary between the editing pipeline and the scanner.

After an ``edit`` or ``write`` tool call finishes, the edited file is read
from disk, scanned, and any violations are appended to the tool's output as
advisory text. The hook never blocks an edit: every failure leaves the
output untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .config import Thresholds, load_config
from .engine import scan_content
from .exceptions import ConfigurationError, FileAccessError
from .formatters import TextFormatter
from .scanning import is_code_file, is_excluded, is_skipped_file

logger = logging.getLogger(__name__)

WATCHED_TOOLS = frozenset({"edit", "write"})


def should_scan(path: str, thresholds: Thresholds) -> bool:
    """Decide from the path alone whether an edited file is scanned."""
    if not path:
        return False
    if not is_code_file(path):
        logger.debug("Skipping non-code file %s", path)
        return False
    if is_skipped_file(path):
        logger.debug("Skipping generated or lock file %s", path)
        return False
    if is_excluded(path, thresholds.exclude_patterns):
        logger.debug("Skipping excluded file %s", path)
        return False
    return True


def read_source(path: Path) -> str:
    """Read a source file, replacing undecodable bytes."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileAccessError(path, str(e)) from e


def load_thresholds(config_file: Optional[Path] = None) -> Thresholds:
    """Load thresholds, falling back to defaults on any configuration error."""
    try:
        return load_config(config_file=config_file)
    except ConfigurationError as e:
        logger.warning("Using default thresholds: %s", e)
        return Thresholds()


def handle_tool_after(
    tool: Optional[str],
    path: Optional[str],
    output: str,
    worktree: Optional[Union[str, Path]] = None,
    thresholds: Optional[Thresholds] = None,
) -> str:
    """Return ``output``, with a violation report appended when one exists.

    Args:
        tool: Name of the tool that just ran
        path: Path of the file it touched (relative paths resolve against worktree)
        output: The tool's output text
        worktree: Base directory for relative paths (defaults to cwd)
        thresholds: Limits to use (loaded from config when omitted)

    Fields that are not strings (as decoded from a loose JSON payload) are
    treated as absent.
    """
    if not isinstance(tool, str) or tool.lower() not in WATCHED_TOOLS:
        return output

    if thresholds is None:
        thresholds = load_thresholds()

    if not isinstance(path, str) or not should_scan(path, thresholds):
        return output

    file_path = Path(path)
    if not file_path.is_absolute():
        if not isinstance(worktree, (str, Path)) or not worktree:
            worktree = Path.cwd()
        file_path = Path(worktree) / file_path

    try:
        content = read_source(file_path)
    except FileAccessError as e:
        logger.debug("Not scanning: %s", e)
        return output

    violations = scan_content(path, content, thresholds)
    if violations is None:
        return output

    report = TextFormatter().format_file(path, violations, thresholds)
    return f"{output}\n\n{report}"
