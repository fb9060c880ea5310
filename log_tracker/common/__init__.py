from .exceptions import (
    ArgumentError,
    ConfigurationError,
    DuplicateKeyError,
    FileNotFoundError,
    LogTrackerException,
    TailError,
    ValidationError,
)

__all__ = [
    "ArgumentError",
    "ConfigurationError",
    "DuplicateKeyError",
    "FileNotFoundError",
    "LogTrackerException",
    "TailError",
    "ValidationError",
]
