"""Core types for The Sports Page.

All data structures are frozen dataclasses with attribute access.
"""

from sportspage.core.types import (
    AWAY,
    COMPLETED,
    HOME,
    LIVE,
    NOT_STARTED,
    DateSection,
    Game,
    Leader,
    League,
    LeagueView,
    Odds,
    Performer,
    SportsPageModel,
    StandingsGroup,
    StandingsRow,
    Team,
    TeamGameEntry,
)

__all__ = [
    # Constants
    "AWAY",
    "COMPLETED",
    "HOME",
    "LIVE",
    "NOT_STARTED",
    # Types
    "DateSection",
    "Game",
    "Leader",
    "League",
    "LeagueView",
    "Odds",
    "Performer",
    "SportsPageModel",
    "StandingsGroup",
    "StandingsRow",
    "Team",
    "TeamGameEntry",
]
