"""Exception hierarchy for Coding Police."""

from .analysis import AnalysisError, FileAccessError
from .base import CodingPoliceError
from .config import ConfigFileError, ConfigurationError, InvalidConfigError

__all__ = [
    "CodingPoliceError",
    "AnalysisError",
    "FileAccessError",
    "ConfigurationError",
    "ConfigFileError",
    "InvalidConfigError",
]
