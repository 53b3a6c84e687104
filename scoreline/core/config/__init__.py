"""Configuration module."""

from scoreline.core.config.settings import (
    LOG_LEVELS,
    LoggingConfig,
    ReaderConfig,
    ReportConfig,
    ScorelineConfig,
    get_default_config,
    load_config,
    load_config_from_env,
    parse_bool,
)

__all__ = [
    "LOG_LEVELS",
    "LoggingConfig",
    "ReaderConfig",
    "ReportConfig",
    "ScorelineConfig",
    "get_default_config",
    "load_config",
    "load_config_from_env",
    "parse_bool",
]
