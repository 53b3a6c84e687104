"""Pytest configuration for the scoreline test suite."""

from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger

SEASON_ROWS = [
    "10/08/2018,Man United,Leicester,2,1,H,A Marriner",
    "11/08/2018,Bournemouth,Cardiff,2,0,H,K Friend",
    "11/08/2018,Fulham,Crystal Palace,0,2,A,M Dean",
    "19/08/2018,Brighton,Man United,3,2,H,K Friend",
    "25/08/2018,Burnley,Man United,0,2,A,J Moss",
    "01/09/2018,Man United,Bournemouth,1,1,D,M Oliver",
]


@pytest.fixture(autouse=True)
def _reset_loguru():
    """Drop handlers added by a test so later tests never write to stale streams."""

    yield
    logger.remove()


@pytest.fixture
def season_csv(tmp_path: Path) -> Path:
    path = tmp_path / "football.csv"
    path.write_text("\n".join(SEASON_ROWS) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def log_messages() -> list[str]:
    """Collect loguru messages emitted during the test."""

    messages: list[str] = []
    logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    return messages
