"""Exception handling module."""

from scoreline.core.exceptions.base import (
    ConfigError,
    DecodeError,
    ResourceIOError,
    ScorelineError,
)
from scoreline.core.exceptions.codes import ErrorCode

__all__ = [
    "ScorelineError",
    "DecodeError",
    "ResourceIOError",
    "ConfigError",
    "ErrorCode",
]
