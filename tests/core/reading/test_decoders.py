"""Tests for row decoders."""

from datetime import date

import pytest

from scoreline.core.exceptions import DecodeError
from scoreline.core.models import MatchResult
from scoreline.core.reading import MatchRecordDecoder, RecordDecoder


@pytest.fixture
def decoder() -> MatchRecordDecoder:
    return MatchRecordDecoder()


def test_decode_football_data_row(decoder: MatchRecordDecoder) -> None:
    record = decoder.decode(["10/08/2018", "Man United", "Leicester", "2", "1", "H", "A Marriner"])

    assert record.date == date(2018, 8, 10)
    assert record.home_team == "Man United"
    assert record.away_team == "Leicester"
    assert record.home_goals == 2
    assert record.away_goals == 1
    assert record.result is MatchResult.HOME_WIN
    assert record.competition == "A Marriner"


def test_iso_dates_always_accepted(decoder: MatchRecordDecoder) -> None:
    record = decoder.decode(["2024-01-01", "A", "B", "2", "1", "H", "Cup"])

    assert record.date == date(2024, 1, 1)


def test_custom_date_format() -> None:
    decoder = MatchRecordDecoder(date_format="%m/%d/%Y")

    record = decoder.decode(["08/25/2018", "Burnley", "Man United", "0", "2", "A", "Cup"])

    assert record.date == date(2018, 8, 25)


def test_encode_round_trips_core_fields(decoder: MatchRecordDecoder) -> None:
    row = ["19/08/2018", "Brighton", "Man United", "3", "2", "H", "K Friend"]

    assert decoder.encode(decoder.decode(row)) == row


def test_team_names_are_not_trimmed(decoder: MatchRecordDecoder) -> None:
    record = decoder.decode(["10/08/2018", " Man United", "Leicester ", "2", "1", "H", "Cup"])

    assert record.home_team == " Man United"
    assert record.away_team == "Leicester "


@pytest.mark.parametrize(
    ("row", "field"),
    [
        (["10/08/2018", "A", "B", "two", "1", "H", "Cup"], "home_goals"),
        (["10/08/2018", "A", "B", "2", "", "H", "Cup"], "away_goals"),
        (["10/08/2018", "A", "B", "2", "-1", "A", "Cup"], "away_goals"),
        (["10/08/2018", "A", "B", "1_0", "1", "H", "Cup"], "home_goals"),
        (["10/08/2018", "A", "B", "+2", "1", "H", "Cup"], "home_goals"),
        (["10/08/2018", "A", "B", "2", "\uff11", "H", "Cup"], "away_goals"),
        (["2018/31/12", "A", "B", "2", "1", "H", "Cup"], "date"),
        (["10/08/2018", "A", "B", "2", "1", "X", "Cup"], "result"),
    ],
)
def test_invalid_fields_raise_decode_error(decoder: MatchRecordDecoder, row: list[str], field: str) -> None:
    with pytest.raises(DecodeError) as exc_info:
        decoder.decode(row)

    assert exc_info.value.field == field


@pytest.mark.parametrize("row", [[""], ["10/08/2018", "A", "B", "2", "1", "H"], ["x"] * 8])
def test_wrong_field_count(decoder: MatchRecordDecoder, row: list[str]) -> None:
    with pytest.raises(DecodeError, match="Expected 7 fields"):
        decoder.decode(row)


def test_base_decoder_is_abstract() -> None:
    with pytest.raises(NotImplementedError):
        RecordDecoder().decode(["a"])
