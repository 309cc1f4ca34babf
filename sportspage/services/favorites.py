"""Favorite teams.

A favorite is identified by a key "<league_id>:<team_id>". FavoriteSet is
a plain set abstraction; persisting it is the preferences store's job
(see database/preferences.py), which goes through to_list/from_list.
"""

import logging
from collections.abc import Collection, Iterable, Iterator
from dataclasses import dataclass

from sportspage.core import Game, League

logger = logging.getLogger(__name__)

KEY_SEPARATOR = ":"


def favorite_key(league_id: str, team_id: str) -> str:
    """Build a favorite key, e.g. favorite_key("nhl", "30") -> "nhl:30"."""
    return f"{league_id}{KEY_SEPARATOR}{team_id}"


def parse_favorite_key(key: str) -> tuple[str, str] | None:
    """Split a key into (league_id, team_id); None if malformed."""
    league_id, sep, team_id = key.partition(KEY_SEPARATOR)
    if not sep or not league_id or not team_id:
        return None
    return league_id, team_id


class FavoriteSet:
    """Set of favorite keys. Membership only; no ordering semantics."""

    def __init__(self, keys: Iterable[str] = ()):
        self._keys: set[str] = set()
        for key in keys:
            self.add(key)

    @classmethod
    def from_list(cls, values: object) -> "FavoriteSet":
        """Build from a persisted list, skipping anything that is not a valid key."""
        if not isinstance(values, list):
            return cls()
        keys = []
        for value in values:
            if isinstance(value, str) and parse_favorite_key(value):
                keys.append(value)
            else:
                logger.debug("[FAVORITES] Dropping malformed key %r", value)
        return cls(keys)

    def to_list(self) -> list[str]:
        """Sorted list for persistence (sorted only so output is stable)."""
        return sorted(self._keys)

    def add(self, key: str) -> None:
        if parse_favorite_key(key) is None:
            raise ValueError(f"Invalid favorite key: {key!r}")
        self._keys.add(key)

    def remove(self, key: str) -> None:
        self._keys.discard(key)

    def toggle(self, key: str) -> bool:
        """Flip membership. Returns True if the key is now a favorite."""
        if key in self._keys:
            self._keys.discard(key)
            return False
        self.add(key)
        return True

    def for_league(self, league_id: str) -> set[str]:
        """Team ids favorited in one league."""
        ids = set()
        for key in self._keys:
            parsed = parse_favorite_key(key)
            if parsed and parsed[0] == league_id:
                ids.add(parsed[1])
        return ids

    def copy(self) -> "FavoriteSet":
        return FavoriteSet(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FavoriteSet):
            return self._keys == other._keys
        return NotImplemented

    def __repr__(self) -> str:
        return f"FavoriteSet({self.to_list()!r})"


@dataclass(frozen=True)
class FavoriteSplit:
    """Games split into favorites and others, each in input order."""

    favorites: tuple[Game, ...]
    others: tuple[Game, ...]


def is_favorite(game: Game, league: League, favorites: Collection[str]) -> bool:
    """True if either team of the game is a favorite in this league."""
    return any(favorite_key(league.id, team_id) in favorites for team_id in game.team_ids)


def split(games: Iterable[Game], league: League, favorites: Collection[str]) -> FavoriteSplit:
    """Partition games into favorites and others.

    Every game lands in exactly one side.
    """
    fav: list[Game] = []
    others: list[Game] = []
    for game in games:
        (fav if is_favorite(game, league, favorites) else others).append(game)
    return FavoriteSplit(favorites=tuple(fav), others=tuple(others))
