"""Analyses turning decoded matches into a summary string."""

from __future__ import annotations

from typing import Iterable, Sequence

from scoreline.core.models import MatchRecord


class Analyzer:
    """Protocol-like base class for analyses consumed by :class:`Summary`."""

    def run(self, matches: Sequence[MatchRecord]) -> str:
        """Compute the textual summary for ``matches``."""

        raise NotImplementedError


class WinsAnalysis(Analyzer):
    """Count the matches won by one team.

    A home win counts when the team is the home side, an away win when it is
    the away side. Team names are compared exactly.
    """

    def __init__(self, team: str) -> None:
        self.team = team

    def count_wins(self, matches: Iterable[MatchRecord]) -> int:
        return sum(1 for match in matches if match.won_by(self.team))

    def run(self, matches: Sequence[MatchRecord]) -> str:
        return f"{self.team} won {self.count_wins(matches)} games"

    def __repr__(self) -> str:
        return f"WinsAnalysis(team={self.team!r})"


__all__ = ["Analyzer", "WinsAnalysis"]
