"""scoreline - match result reports

Read comma separated match results, compute a statistic for one team and
send the summary to the console or to an HTML file.
"""

from pathlib import Path
from typing import Any

from scoreline.core.analysis import Analyzer, WinsAnalysis
from scoreline.core.exceptions import ConfigError, DecodeError, ResourceIOError, ScorelineError
from scoreline.core.models import MatchRecord, MatchResult
from scoreline.core.reading import MatchRecordDecoder, RecordDecoder, TabularReader
from scoreline.core.reports import ConsoleReport, FileReport, OutputTarget, create_target
from scoreline.core.summary import Summary


def load_matches(path: str | Path, **reader_options: Any) -> tuple[MatchRecord, ...]:
    """Load every match in ``path``.

    Args:
        path: comma separated file, one match per line
        **reader_options: ``date_format``, ``delimiter``, ``encoding``, ``has_header``

    Returns:
        The decoded matches in file order.

    Examples:
        >>> import scoreline
        >>> matches = scoreline.load_matches("football.csv")
        >>> len(matches)
        380
    """
    return TabularReader.for_matches(**reader_options).load(path)


def wins_report(
    matches: tuple[MatchRecord, ...] | list[MatchRecord],
    team: str,
    target: str = "console",
    **target_options: Any,
) -> None:
    """Print how many of ``matches`` ``team`` won.

    Args:
        matches: decoded matches
        team: exact team name
        target: ``console`` or ``file``
        **target_options: passed to the target, e.g. ``path`` for ``file``

    Examples:
        >>> import scoreline
        >>> scoreline.wins_report(scoreline.load_matches("football.csv"), "Man United")
        Man United won 18 games
    """
    Summary(WinsAnalysis(team), create_target(target, **target_options)).build_and_print(matches)


__version__ = "0.1.0"

__all__ = [
    "Analyzer",
    "WinsAnalysis",
    "ScorelineError",
    "DecodeError",
    "ResourceIOError",
    "ConfigError",
    "MatchRecord",
    "MatchResult",
    "RecordDecoder",
    "MatchRecordDecoder",
    "TabularReader",
    "OutputTarget",
    "ConsoleReport",
    "FileReport",
    "create_target",
    "Summary",
    "load_matches",
    "wins_report",
]
