"""Core pipeline: reading, analysis, reporting."""

from scoreline.core.analysis import Analyzer, WinsAnalysis
from scoreline.core.models import MatchRecord, MatchResult
from scoreline.core.reading import MatchRecordDecoder, RecordDecoder, TabularReader
from scoreline.core.reports import ConsoleReport, FileReport, OutputTarget, create_target
from scoreline.core.summary import Summary

__all__ = [
    "Analyzer",
    "WinsAnalysis",
    "MatchRecord",
    "MatchResult",
    "MatchRecordDecoder",
    "RecordDecoder",
    "TabularReader",
    "ConsoleReport",
    "FileReport",
    "OutputTarget",
    "create_target",
    "Summary",
]
