"""Logging utilities."""

from scoreline.core.logging.config import LogConfig
from scoreline.core.logging.logger import HUMAN_FORMAT, configure_logging, log_context, logger

__all__ = ["LogConfig", "HUMAN_FORMAT", "configure_logging", "log_context", "logger"]
