"""Report output targets."""

from scoreline.core.reports.targets import (
    DEFAULT_REPORT_PATH,
    HTML_TEMPLATE,
    ConsoleReport,
    FileReport,
    OutputTarget,
    create_target,
)

__all__ = [
    "DEFAULT_REPORT_PATH",
    "HTML_TEMPLATE",
    "ConsoleReport",
    "FileReport",
    "OutputTarget",
    "create_target",
]
