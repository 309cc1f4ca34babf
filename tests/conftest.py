"""Shared fixtures: leagues and a fixed reference time."""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from sportspage.leagues import LEAGUES

EASTERN = ZoneInfo("America/New_York")


@pytest.fixture
def nhl():
    return LEAGUES["nhl"]


@pytest.fixture
def nba():
    return LEAGUES["nba"]


@pytest.fixture
def nfl():
    return LEAGUES["nfl"]


@pytest.fixture
def epl():
    return LEAGUES["epl"]


@pytest.fixture
def reference_now():
    """Sunday, October 19, 2025, noon Eastern."""
    return datetime(2025, 10, 19, 12, 0, tzinfo=EASTERN)
