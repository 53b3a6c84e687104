"""Row decoders turning split text fields into typed records."""

from __future__ import annotations

from datetime import date, datetime
from typing import Generic, Sequence, TypeVar

from scoreline.core.exceptions import DecodeError
from scoreline.core.models import MatchRecord, MatchResult

T = TypeVar("T")

MATCH_FIELDS = (
    "date",
    "home_team",
    "away_team",
    "home_goals",
    "away_goals",
    "result",
    "competition",
)

ISO_DATE_FORMAT = "%Y-%m-%d"


class RecordDecoder(Generic[T]):
    """Protocol-like base class for decoders used by :class:`TabularReader`."""

    def decode(self, fields: Sequence[str]) -> T:
        """Decode one row of text fields.

        Raises:
            DecodeError: if the row cannot be represented as ``T``.
        """

        raise NotImplementedError


class MatchRecordDecoder(RecordDecoder[MatchRecord]):
    """Decode football-data style rows into :class:`MatchRecord` instances.

    Fields are positional: date, home team, away team, home goals,
    away goals, result token (H/A/D) and competition. Team and competition
    names are kept verbatim.
    """

    def __init__(self, date_format: str = "%d/%m/%Y") -> None:
        self.date_format = date_format

    def decode(self, fields: Sequence[str]) -> MatchRecord:
        if len(fields) != len(MATCH_FIELDS):
            raise DecodeError(f"Expected {len(MATCH_FIELDS)} fields, got {len(fields)}")

        raw_date, home_team, away_team, home_goals, away_goals, result, competition = fields
        return MatchRecord(
            date=self._parse_date(raw_date),
            home_team=home_team,
            away_team=away_team,
            home_goals=_parse_goals(home_goals, "home_goals"),
            away_goals=_parse_goals(away_goals, "away_goals"),
            result=MatchResult.from_token(result),
            competition=competition,
        )

    def encode(self, record: MatchRecord) -> list[str]:
        """Inverse of :meth:`decode` using the configured date format."""

        return [
            record.date.strftime(self.date_format),
            record.home_team,
            record.away_team,
            str(record.home_goals),
            str(record.away_goals),
            record.result.value,
            record.competition,
        ]

    def _parse_date(self, value: str) -> date:
        text = value.strip()
        for fmt in dict.fromkeys((self.date_format, ISO_DATE_FORMAT)):
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        raise DecodeError(
            f"Invalid date '{value}', expected format {self.date_format}",
            field="date",
            value=value,
        )


def _parse_goals(value: str, field: str) -> int:
    text = value.strip()
    # plain ASCII digits only, so encode() reproduces the source text
    if not (text.isascii() and text.isdigit()):
        raise DecodeError(f"Invalid goal count '{value}' for {field}", field=field, value=value)
    return int(text)


__all__ = ["RecordDecoder", "MatchRecordDecoder", "MATCH_FIELDS", "ISO_DATE_FORMAT"]
