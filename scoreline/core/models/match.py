"""Match result models."""

import datetime as dt
from enum import Enum

from pydantic import BaseModel, Field
from pydantic import ConfigDict as PydanticConfigDict

from scoreline.core.exceptions import DecodeError


class MatchResult(str, Enum):
    """Full-time result of a match, valued by its source token."""

    HOME_WIN = "H"
    AWAY_WIN = "A"
    DRAW = "D"

    @classmethod
    def from_token(cls, token: str) -> "MatchResult":
        """Map a raw result token to its enum member.

        Raises:
            DecodeError: if ``token`` is not one of H, A or D.
        """
        try:
            return cls(token.strip())
        except ValueError as exc:
            allowed = ", ".join(member.value for member in cls)
            raise DecodeError(
                f"Unsupported result '{token}'. Allowed values: {allowed}",
                field="result",
                value=token,
            ) from exc


class MatchRecord(BaseModel):
    """A single decoded match row."""

    date: dt.date
    home_team: str
    away_team: str
    home_goals: int = Field(ge=0)
    away_goals: int = Field(ge=0)
    result: MatchResult
    competition: str

    model_config = PydanticConfigDict(frozen=True)

    def won_by(self, team: str) -> bool:
        return (self.home_team == team and self.result is MatchResult.HOME_WIN) or (
            self.away_team == team and self.result is MatchResult.AWAY_WIN
        )
