"""User preferences: favorite teams and active leagues.

Both are sets persisted as JSON lists under fixed keys. Core services only
ever see FavoriteSet / league lists; the storage format stays here.
"""

import logging
from dataclasses import dataclass

from sportspage.config import Settings
from sportspage.database.store import KeyValueStore
from sportspage.leagues import LEAGUES, all_league_ids
from sportspage.services.favorites import FavoriteSet, favorite_key

logger = logging.getLogger(__name__)

FAVORITES_KEY = "fav_teams"
ACTIVE_LEAGUES_KEY = "active_leagues"


def load_favorites(store: KeyValueStore) -> FavoriteSet | None:
    """Persisted favorites, or None if never saved."""
    value = store.get(FAVORITES_KEY)
    if value is None:
        return None
    return FavoriteSet.from_list(value)


def save_favorites(store: KeyValueStore, favorites: FavoriteSet) -> None:
    store.set(FAVORITES_KEY, favorites.to_list())


def toggle_favorite(
    store: KeyValueStore, favorites: FavoriteSet, league_id: str, team_id: str
) -> bool:
    """Flip a team's favorite status and persist. Returns the new status."""
    now_favorite = favorites.toggle(favorite_key(league_id, team_id))
    save_favorites(store, favorites)
    logger.info(
        "[PREFS] %s %s:%s", "Added favorite" if now_favorite else "Removed favorite", league_id, team_id
    )
    return now_favorite


def _known_leagues(league_ids: object) -> list[str]:
    """Keep known ids only, in registry order, without duplicates."""
    if not isinstance(league_ids, (list, tuple, set)):
        return []
    wanted = {lid for lid in league_ids if isinstance(lid, str)}
    return [lid for lid in LEAGUES if lid in wanted]


def load_active_leagues(store: KeyValueStore) -> list[str] | None:
    """Persisted active league ids, or None if never saved."""
    value = store.get(ACTIVE_LEAGUES_KEY)
    if value is None:
        return None
    return _known_leagues(value)


def save_active_leagues(store: KeyValueStore, league_ids: list[str]) -> None:
    store.set(ACTIVE_LEAGUES_KEY, _known_leagues(league_ids))


def toggle_active_league(store: KeyValueStore, active: list[str], league_id: str) -> list[str]:
    """Return the new active list with league_id flipped, and persist it.

    Raises:
        KeyError: league_id is not a known league
    """
    if league_id not in LEAGUES:
        raise KeyError(league_id)
    current = set(active)
    current.symmetric_difference_update({league_id})
    updated = _known_leagues(current)
    save_active_leagues(store, updated)
    return updated


@dataclass
class StartupState:
    """Preferences in effect for this process."""

    active_leagues: list[str]
    favorites: FavoriteSet
    headless: bool


def load_startup_state(settings: Settings, store: KeyValueStore) -> StartupState:
    """Resolve launch overrides, then persisted values, then defaults."""
    if settings.league_overrides is not None:
        active = _known_leagues(list(settings.league_overrides))
    else:
        persisted = load_active_leagues(store)
        active = persisted if persisted is not None else all_league_ids()

    if settings.favorite_overrides is not None:
        favorites = FavoriteSet.from_list(list(settings.favorite_overrides))
    else:
        favorites = load_favorites(store) or FavoriteSet()

    logger.info(
        "[PREFS] Active leagues: %s; %d favorites; headless=%s",
        ",".join(active) or "(none)",
        len(favorites),
        settings.headless,
    )
    return StartupState(active_leagues=active, favorites=favorites, headless=settings.headless)
