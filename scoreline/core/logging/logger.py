"""loguru setup shared by the library and the CLI."""

from __future__ import annotations

import json
import os
import sys
from contextlib import contextmanager
from datetime import datetime
from typing import IO, Any, Iterator

from loguru import logger

from scoreline.core.logging.config import LogConfig

HUMAN_FORMAT = "{time:HH:mm:ss} | {level: <8} | {name} | {message}"


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def _format_payload(record: dict[str, Any]) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "logger": record["name"],
        "message": record["message"],
    }
    extra = record.get("extra") or {}
    if extra:
        payload["context"] = dict(extra)
    exception = record.get("exception")
    if exception:
        payload["exception"] = str(exception.value)
    return payload


class _StreamJsonSink:
    """Sink writing JSON lines to a text stream."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream

    def __call__(self, message: Any) -> None:
        self._stream.write(json.dumps(_format_payload(message.record), default=_json_default))
        self._stream.write("\n")
        self._stream.flush()


class _FileJsonSink:
    """Sink appending JSON lines to a file path."""

    def __init__(self, path: str) -> None:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self._path = path

    def __call__(self, message: Any) -> None:
        with open(self._path, "a", encoding="utf-8") as file:
            file.write(json.dumps(_format_payload(message.record), default=_json_default))
            file.write("\n")


def _configure_from_config(config: LogConfig) -> None:
    handlers: list[dict[str, Any]] = []
    level = config.level.upper()
    if config.console_output:
        stream = config.console_stream or sys.stderr
        if config.serialize:
            handlers.append({"sink": _StreamJsonSink(stream), "level": level})
        else:
            handlers.append(
                {"sink": stream, "level": level, "format": HUMAN_FORMAT, "colorize": config.colorize}
            )
    if config.file_output and config.file_path:
        handlers.append({"sink": _FileJsonSink(config.file_path), "level": level})

    logger.configure(handlers=handlers)


def configure_logging(level: str = "WARNING", **kwargs: Any) -> LogConfig:
    """Replace every loguru handler according to the given options.

    Returns the resolved :class:`LogConfig`.
    """

    config = LogConfig(level=level, **kwargs)
    _configure_from_config(config)
    return config


@contextmanager
def log_context(**extra: Any) -> Iterator[None]:
    """Attach ``extra`` to every record logged inside the block."""

    with logger.contextualize(**extra):
        yield


__all__ = ["HUMAN_FORMAT", "configure_logging", "log_context", "logger"]
