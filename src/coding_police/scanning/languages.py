"""File-type dispatch: which edited files get scanned and with which checks.

Dispatch is purely extension based. Detectors never look at paths.
"""

import re as _re
from pathlib import PurePath
from typing import Union

# Source extensions that are scanned after an edit.
CODE_EXTENSIONS: frozenset[str] = frozenset(
    {
        "ts",
        "tsx",
        "js",
        "jsx",
        "py",
        "rb",
        "go",
        "rs",
        "java",
        "kt",
        "cs",
        "cpp",
        "c",
        "h",
        "hpp",
        "swift",
        "scala",
        "vue",
        "svelte",
    }
)

# Extensions where `export` declarations exist and are counted.
EXPORT_EXTENSIONS: frozenset[str] = frozenset({"ts", "tsx", "js", "jsx"})

# Files that are legitimately long: lockfiles, minified or generated output,
# snapshots, type declarations.
_SKIP_FILE_RE = _re.compile(
    r"\.(lock|min\.\w+|generated\.\w+|snap|d\.ts)$|package-lock\.json|yarn\.lock|pnpm-lock\.yaml"
)

PathLike = Union[str, PurePath]


def _extension(path: PathLike) -> str:
    return PurePath(str(path)).suffix.lstrip(".")


def is_code_file(path: PathLike) -> bool:
    """True if the path has a scanned source extension (case-sensitive)."""
    return _extension(path) in CODE_EXTENSIONS


def is_skipped_file(path: PathLike) -> bool:
    """True for lockfiles, minified/generated files, snapshots and .d.ts."""
    return _SKIP_FILE_RE.search(str(path)) is not None


def supports_export_check(path: PathLike) -> bool:
    """True for JS/TS sources, the only family with `export` declarations."""
    return _extension(path) in EXPORT_EXTENSIONS


def is_excluded(path: PathLike, exclude_patterns) -> bool:
    """True if any exclude pattern occurs as a substring of the path."""
    text = str(path)
    return any(pattern and pattern in text for pattern in exclude_patterns)
