"""scoreline core exception classes."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from scoreline.core.exceptions.codes import ErrorCode


class ScorelineError(Exception):
    """Base class for every error raised by scoreline."""

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.GENERAL_ERROR.value,
        details: dict[str, Any] | None = None,
    ):
        """Initialise the error.

        Args:
            message: human readable message
            error_code: value of an :class:`ErrorCode`
            details: extra structured context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_payload(self) -> dict[str, Any]:
        """Return a serializable payload representing the error."""

        payload: dict[str, Any] = {"code": self.error_code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload


class DecodeError(ScorelineError):
    """A raw row could not be turned into a typed record."""

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        field: str | None = None,
        value: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if line_number is not None:
            super_details["line_number"] = line_number
        if field is not None:
            super_details["field"] = field
        if value is not None:
            super_details["value"] = value
        super().__init__(message, ErrorCode.DECODE_ERROR.value, super_details)
        self.line_number = line_number
        self.field = field
        self.value = value

    def at_line(self, line_number: int, line: str | None = None) -> DecodeError:
        """Return a copy of this error located at ``line_number`` of the source."""

        return DecodeError(
            f"line {line_number}: {self.message}",
            line_number=line_number,
            field=self.field,
            value=self.value,
            details={"line": line} if line is not None else None,
        )


class ResourceIOError(ScorelineError, OSError):
    """A file could not be read or written."""

    def __init__(
        self,
        message: str,
        path: str | Path,
        operation: str,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        super_details["path"] = str(path)
        super_details["operation"] = operation
        super().__init__(message, ErrorCode.IO_ERROR.value, super_details)
        self.path = Path(path)
        self.operation = operation


class ConfigError(ScorelineError):
    """Invalid configuration value."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if key is not None:
            super_details["key"] = key
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR.value, super_details)
        self.key = key
