"""Exception hierarchy for Resource Ranker."""

from .analysis import AnalysisError, FileAccessError
from .base import ResourceRankerError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "ResourceRankerError",
    "AnalysisError",
    "FileAccessError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
