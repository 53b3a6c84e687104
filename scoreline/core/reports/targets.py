"""Output targets rendering a summary string to a destination."""

from __future__ import annotations

import html
import sys
from pathlib import Path
from typing import Any, TextIO

from loguru import logger

from scoreline.core.exceptions import ConfigError, ResourceIOError

DEFAULT_REPORT_PATH = "report.html"

HTML_TEMPLATE = """
<div>
    <h1>Analysis Output</h1>
    <div>{report}</div>
</div>
"""


class OutputTarget:
    """Protocol-like base class for report destinations."""

    name: str

    def print(self, report: str) -> None:
        """Render ``report`` to the destination."""

        raise NotImplementedError


class ConsoleReport(OutputTarget):
    """Write the report as one line on a text stream (stdout by default)."""

    name = "console"

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # resolved lazily so a replaced sys.stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def print(self, report: str) -> None:
        self.stream.write(report)
        self.stream.write("\n")
        self.stream.flush()


class FileReport(OutputTarget):
    """Write the report wrapped in a minimal HTML document, replacing the file."""

    name = "file"

    def __init__(self, path: str | Path = DEFAULT_REPORT_PATH, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def render(self, report: str) -> str:
        return HTML_TEMPLATE.format(report=html.escape(report))

    def print(self, report: str) -> None:
        try:
            self.path.write_text(self.render(report), encoding=self.encoding)
        except OSError as exc:
            raise ResourceIOError(f"Unable to write '{self.path}': {exc}", self.path, "write") from exc
        logger.debug("Wrote report to {}", self.path)


def create_target(name: str, **options: Any) -> OutputTarget:
    """Instantiate an output target by name.

    ``options`` are passed to the target constructor: ``stream`` for
    ``console``; ``path`` and ``encoding`` for ``file``.
    """

    normalized = name.strip().lower()
    if normalized == ConsoleReport.name:
        return ConsoleReport(**options)
    if normalized == FileReport.name:
        return FileReport(**options)
    msg = f"Unsupported target '{name}'. Available targets: console, file."
    raise ConfigError(msg, key="target")


__all__ = [
    "DEFAULT_REPORT_PATH",
    "HTML_TEMPLATE",
    "OutputTarget",
    "ConsoleReport",
    "FileReport",
    "create_target",
]
