"""ESPN provider: HTTP client and feed normalization."""

from sportspage.providers.espn.adapter import (
    adapt_events,
    adapt_scoreboard,
    adapt_standings,
    adapt_teams,
)
from sportspage.providers.espn.client import ESPNClient

__all__ = [
    "ESPNClient",
    "adapt_events",
    "adapt_scoreboard",
    "adapt_standings",
    "adapt_teams",
]
