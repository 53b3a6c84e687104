"""Standardized error codes."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error code enumeration shared by every scoreline error."""

    GENERAL_ERROR = "GENERAL_ERROR"
    DECODE_ERROR = "DECODE_ERROR"
    IO_ERROR = "IO_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
