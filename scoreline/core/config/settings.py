"""Configuration handling for readers, reports and logging."""

import os
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from scoreline.core.exceptions import ConfigError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class ReaderConfig:
    """Input file settings"""

    delimiter: str = ","
    encoding: str = "utf-8"
    has_header: bool = False
    date_format: str = "%d/%m/%Y"

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ConfigError(
                f"Delimiter must be a single character, got '{self.delimiter}'",
                key="reader.delimiter",
            )


@dataclass
class ReportConfig:
    """File report settings"""

    path: str = "report.html"
    encoding: str = "utf-8"


@dataclass
class LoggingConfig:
    """Logging settings"""

    level: str = "WARNING"
    serialize: bool = False
    file_path: str | None = None

    def __post_init__(self) -> None:
        self.level = str(self.level).upper()
        if self.level not in LOG_LEVELS:
            raise ConfigError(
                f"Unknown log level '{self.level}'. Allowed values: {', '.join(LOG_LEVELS)}",
                key="logging.level",
            )


@dataclass
class ScorelineConfig:
    """Top level configuration"""

    reader: ReaderConfig = field(default_factory=ReaderConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ScorelineConfig":
        """Build a configuration from a nested dictionary."""
        unknown = set(config_dict) - {"reader", "report", "logging"}
        if unknown:
            raise ConfigError(f"Unknown configuration sections: {', '.join(sorted(unknown))}")

        return cls(
            reader=_build_section(ReaderConfig, "reader", config_dict.get("reader", {})),
            report=_build_section(ReportConfig, "report", config_dict.get("report", {})),
            logging=_build_section(LoggingConfig, "logging", config_dict.get("logging", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "reader": asdict(self.reader),
            "report": asdict(self.report),
            "logging": asdict(self.logging),
        }


def _build_section(section_cls: type, name: str, values: dict[str, Any]) -> Any:
    if not isinstance(values, dict):
        raise ConfigError(f"Section [{name}] must be a table", key=name)
    allowed = {f.name for f in fields(section_cls)}
    unknown = set(values) - allowed
    if unknown:
        raise ConfigError(
            f"Unknown keys in [{name}]: {', '.join(sorted(unknown))}",
            key=name,
        )
    return section_cls(**values)


def parse_bool(value: str, key: str) -> bool:
    """Parse a boolean flag from its textual form."""
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean value '{value}'", key=key)


def load_config_from_env() -> dict[str, Any]:
    """Collect configuration overrides from ``SCORELINE_*`` environment variables."""
    config: dict[str, Any] = {}

    reader_config: dict[str, Any] = {}
    delimiter = os.getenv("SCORELINE_DELIMITER")
    if delimiter is not None:
        reader_config["delimiter"] = delimiter
    encoding = os.getenv("SCORELINE_ENCODING")
    if encoding is not None:
        reader_config["encoding"] = encoding
    has_header = os.getenv("SCORELINE_HAS_HEADER")
    if has_header is not None:
        reader_config["has_header"] = parse_bool(has_header, "SCORELINE_HAS_HEADER")
    date_format = os.getenv("SCORELINE_DATE_FORMAT")
    if date_format is not None:
        reader_config["date_format"] = date_format

    if reader_config:
        config["reader"] = reader_config

    report_path = os.getenv("SCORELINE_REPORT_PATH")
    if report_path is not None:
        config["report"] = {"path": report_path}

    logging_config: dict[str, Any] = {}
    log_level = os.getenv("SCORELINE_LOG_LEVEL")
    if log_level is not None:
        logging_config["level"] = log_level
    log_file = os.getenv("SCORELINE_LOG_FILE")
    if log_file is not None:
        logging_config["file_path"] = log_file

    if logging_config:
        config["logging"] = logging_config

    return config


def _deep_update(d: dict[str, Any], u: dict[str, Any]) -> dict[str, Any]:
    for k, v in u.items():
        if isinstance(v, dict):
            current = d.get(k, {})
            if not isinstance(current, dict):
                raise ConfigError(f"Section [{k}] must be a table", key=k)
            d[k] = _deep_update(current, v)
        else:
            d[k] = v
    return d


def load_config(config_path: Path | None = None) -> ScorelineConfig:
    """Load configuration from an optional TOML file, then environment overrides.

    Args:
        config_path: TOML file to read; a missing file is a configuration error

    Raises:
        ConfigError: if the file is missing, unreadable or malformed, or a value
            is invalid
    """
    config_dict: dict[str, Any] = {}
    if config_path is not None:
        try:
            with open(config_path, "rb") as f:
                config_dict = tomllib.load(f)
        except FileNotFoundError as exc:
            raise ConfigError(f"Config file not found: {config_path}", key="config") from exc
        except OSError as exc:
            raise ConfigError(f"Unable to read config file {config_path}: {exc}", key="config") from exc
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Malformed config file {config_path}: {exc}", key="config") from exc

    _deep_update(config_dict, load_config_from_env())
    return ScorelineConfig.from_dict(config_dict)


def get_default_config() -> ScorelineConfig:
    return ScorelineConfig()
