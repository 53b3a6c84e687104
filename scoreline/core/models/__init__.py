"""Data models module."""

from scoreline.core.models.match import MatchRecord, MatchResult

__all__ = ["MatchRecord", "MatchResult"]
