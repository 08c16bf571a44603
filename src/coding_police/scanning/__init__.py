"""Line model, signature matchers and file-type dispatch."""

from .languages import (
    CODE_EXTENSIONS,
    EXPORT_EXTENSIONS,
    is_code_file,
    is_excluded,
    is_skipped_file,
    supports_export_check,
)
from .lines import Line, number_lines, split_lines
from .signatures import FUNCTION_SIGNATURES, SignatureMatch, SignatureMatcher, match_signature

__all__ = [
    "Line",
    "number_lines",
    "split_lines",
    "SignatureMatch",
    "SignatureMatcher",
    "FUNCTION_SIGNATURES",
    "match_signature",
    "CODE_EXTENSIONS",
    "EXPORT_EXTENSIONS",
    "is_code_file",
    "is_excluded",
    "is_skipped_file",
    "supports_export_check",
]
