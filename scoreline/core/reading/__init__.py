"""Tabular input reading."""

from scoreline.core.reading.decoders import MATCH_FIELDS, MatchRecordDecoder, RecordDecoder
from scoreline.core.reading.reader import TabularReader

__all__ = ["MATCH_FIELDS", "MatchRecordDecoder", "RecordDecoder", "TabularReader"]
