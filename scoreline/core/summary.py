"""Report orchestration binding one analyzer to one output target."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, TextIO

from loguru import logger

from scoreline.core.analysis import Analyzer, WinsAnalysis
from scoreline.core.models import MatchRecord
from scoreline.core.reports import DEFAULT_REPORT_PATH, ConsoleReport, FileReport, OutputTarget


class Summary:
    """Run an analysis and hand its summary to an output target."""

    def __init__(self, analyzer: Analyzer, output_target: OutputTarget) -> None:
        self.analyzer = analyzer
        self.output_target = output_target

    @classmethod
    def wins_analysis_with_file_report(
        cls, team: str, path: str | Path = DEFAULT_REPORT_PATH
    ) -> Summary:
        return cls(WinsAnalysis(team), FileReport(path))

    @classmethod
    def wins_analysis_with_console_report(cls, team: str, stream: TextIO | None = None) -> Summary:
        return cls(WinsAnalysis(team), ConsoleReport(stream))

    def build_and_print(self, matches: Sequence[MatchRecord]) -> None:
        report = self.analyzer.run(matches)
        logger.debug("Summary from {}: {}", type(self.analyzer).__name__, report)
        self.output_target.print(report)


__all__ = ["Summary"]
