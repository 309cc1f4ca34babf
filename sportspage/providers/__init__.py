"""Data providers. ESPN is the only feed source."""

from sportspage.providers.espn import ESPNClient

__all__ = ["ESPNClient"]
