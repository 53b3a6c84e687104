"""
Tests for configuration loading.

Covers defaults, TOML files, environment overrides and validation.
"""

from pathlib import Path

import pytest

from scoreline.core.config import (
    LoggingConfig,
    ReaderConfig,
    ScorelineConfig,
    get_default_config,
    load_config,
    load_config_from_env,
    parse_bool,
)
from scoreline.core.exceptions import ConfigError

ENV_VARS = (
    "SCORELINE_DELIMITER",
    "SCORELINE_ENCODING",
    "SCORELINE_HAS_HEADER",
    "SCORELINE_DATE_FORMAT",
    "SCORELINE_REPORT_PATH",
    "SCORELINE_LOG_LEVEL",
    "SCORELINE_LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    """Test default configuration values."""

    def test_default_config(self):
        config = get_default_config()

        assert config.reader.delimiter == ","
        assert config.reader.encoding == "utf-8"
        assert config.reader.has_header is False
        assert config.reader.date_format == "%d/%m/%Y"
        assert config.report.path == "report.html"
        assert config.logging.level == "WARNING"

    def test_round_trip_through_dict(self):
        config = get_default_config()

        assert ScorelineConfig.from_dict(config.to_dict()) == config


class TestValidation:
    """Test configuration validation."""

    @pytest.mark.parametrize("delimiter", ["", ";;", 1])
    def test_bad_delimiter(self, delimiter):
        with pytest.raises(ConfigError) as exc_info:
            ReaderConfig(delimiter=delimiter)

        assert exc_info.value.key == "reader.delimiter"

    def test_log_level_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ConfigError, match="Unknown log level"):
            LoggingConfig(level="LOUD")

    def test_unknown_section(self):
        with pytest.raises(ConfigError, match="Unknown configuration sections: cache"):
            ScorelineConfig.from_dict({"cache": {}})

    def test_unknown_key(self):
        with pytest.raises(ConfigError) as exc_info:
            ScorelineConfig.from_dict({"reader": {"quote": '"'}})

        assert exc_info.value.key == "reader"

    def test_section_must_be_table(self):
        with pytest.raises(ConfigError, match="must be a table"):
            ScorelineConfig.from_dict({"report": "report.html"})

    @pytest.mark.parametrize(("value", "expected"), [("true", True), ("YES", True), ("0", False), (" off ", False)])
    def test_parse_bool(self, value, expected):
        assert parse_bool(value, "flag") is expected

    def test_parse_bool_rejects_garbage(self):
        with pytest.raises(ConfigError):
            parse_bool("maybe", "flag")


class TestLoading:
    """Test loading from files and environment."""

    def test_no_file_no_env_gives_defaults(self):
        assert load_config() == get_default_config()

    def test_load_toml(self, tmp_path: Path):
        path = tmp_path / "scoreline.toml"
        path.write_text(
            '[reader]\ndelimiter = ";"\nhas_header = true\n\n[report]\npath = "out/wins.html"\n',
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.reader.delimiter == ";"
        assert config.reader.has_header is True
        assert config.report.path == "out/wins.html"
        assert config.logging.level == "WARNING"

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "scoreline.toml"
        path.write_text('[reader]\ndelimiter = ";"\n', encoding="utf-8")
        monkeypatch.setenv("SCORELINE_DELIMITER", "|")
        monkeypatch.setenv("SCORELINE_LOG_LEVEL", "info")

        config = load_config(path)

        assert config.reader.delimiter == "|"
        assert config.logging.level == "INFO"

    def test_env_values(self, monkeypatch):
        monkeypatch.setenv("SCORELINE_HAS_HEADER", "yes")
        monkeypatch.setenv("SCORELINE_DATE_FORMAT", "%Y-%m-%d")
        monkeypatch.setenv("SCORELINE_REPORT_PATH", "wins.html")

        assert load_config_from_env() == {
            "reader": {"has_header": True, "date_format": "%Y-%m-%d"},
            "report": {"path": "wins.html"},
        }

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.toml")

    def test_malformed_file(self, tmp_path: Path):
        path = tmp_path / "bad.toml"
        path.write_text("[reader\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="Malformed"):
            load_config(path)

    def test_unreadable_path(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Unable to read config file") as exc_info:
            load_config(tmp_path)

        assert isinstance(exc_info.value.__cause__, OSError)

    def test_non_table_section_with_env_override(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "scoreline.toml"
        path.write_text('reader = "x"\n', encoding="utf-8")
        monkeypatch.setenv("SCORELINE_DELIMITER", ";")

        with pytest.raises(ConfigError, match="must be a table") as exc_info:
            load_config(path)

        assert exc_info.value.key == "reader"

    def test_log_file_from_env(self, monkeypatch):
        monkeypatch.setenv("SCORELINE_LOG_FILE", "logs/scoreline.log")

        assert load_config().logging.file_path == "logs/scoreline.log"
