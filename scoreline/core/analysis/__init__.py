"""Match analyses."""

from scoreline.core.analysis.analyzers import Analyzer, WinsAnalysis

__all__ = ["Analyzer", "WinsAnalysis"]
