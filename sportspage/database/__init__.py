"""Preferences persistence.

The core never touches storage directly; it receives a FavoriteSet and a
list of leagues resolved here.
"""

from sportspage.database.preferences import (
    ACTIVE_LEAGUES_KEY,
    FAVORITES_KEY,
    StartupState,
    load_active_leagues,
    load_favorites,
    load_startup_state,
    save_active_leagues,
    save_favorites,
    toggle_active_league,
    toggle_favorite,
)
from sportspage.database.store import KeyValueStore

__all__ = [
    "ACTIVE_LEAGUES_KEY",
    "FAVORITES_KEY",
    "KeyValueStore",
    "StartupState",
    "load_active_leagues",
    "load_favorites",
    "load_startup_state",
    "save_active_leagues",
    "save_favorites",
    "toggle_active_league",
    "toggle_favorite",
]
