"""Tests for settings, the preferences store and the refresher."""

import sqlite3
from datetime import datetime
from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

import pytest

from sportspage.config import DEFAULT_REFRESH_SECONDS, Settings
from sportspage.core import SportsPageModel
from sportspage.database import (
    ACTIVE_LEAGUES_KEY,
    FAVORITES_KEY,
    KeyValueStore,
    StartupState,
    load_active_leagues,
    load_favorites,
    load_startup_state,
    save_active_leagues,
    toggle_active_league,
    toggle_favorite,
)
from sportspage.leagues import LEAGUES, all_league_ids, get_league, resolve_leagues
from sportspage.services.favorites import FavoriteSet
from sportspage.services.refresh import Refresher


class TestLeagueRegistry:
    def test_known_leagues(self):
        assert all_league_ids() == ["nba", "nfl", "mlb", "nhl", "epl"]
        assert get_league("epl").is_extended_range
        assert not get_league("nhl").is_extended_range
        assert get_league("xfl") is None

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            LEAGUES["xfl"] = None

    def test_resolve_keeps_order_and_drops_unknown(self):
        leagues = resolve_leagues(["nhl", "xfl", "nba", "nhl"])
        assert [lg.id for lg in leagues] == ["nhl", "nba"]


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.league_overrides is None
        assert settings.favorite_overrides is None
        assert settings.headless is False
        assert settings.timezone == "America/New_York"
        assert settings.refresh_seconds == DEFAULT_REFRESH_SECONDS

    def test_overrides(self):
        settings = Settings.from_env(
            {
                "SPORTSPAGE_LEAGUES": "nhl, nba",
                "SPORTSPAGE_FAVS": "nhl:30",
                "SPORTSPAGE_HEADLESS": "TRUE",
                "SPORTSPAGE_TZ": "UTC",
                "SPORTSPAGE_REFRESH_SECONDS": "60",
                "SPORTSPAGE_LOG_LEVEL": "debug",
            }
        )
        assert settings.league_overrides == ("nhl", "nba")
        assert settings.favorite_overrides == ("nhl:30",)
        assert settings.headless is True
        assert settings.timezone == "UTC"
        assert settings.refresh_seconds == 60
        assert settings.log_level == "DEBUG"

    def test_blank_list_is_not_an_override(self):
        settings = Settings.from_env({"SPORTSPAGE_LEAGUES": "", "SPORTSPAGE_FAVS": "  "})
        assert settings.league_overrides is None
        assert settings.favorite_overrides is None

    def test_blank_leagues_fall_back_to_persisted(self):
        store = KeyValueStore(None)
        store.set(ACTIVE_LEAGUES_KEY, ["nhl"])
        settings = Settings.from_env({"SPORTSPAGE_LEAGUES": ""})
        assert load_startup_state(settings, store).active_leagues == ["nhl"]

    def test_bad_numbers_fall_back(self):
        settings = Settings.from_env(
            {"SPORTSPAGE_REFRESH_SECONDS": "soon", "SPORTSPAGE_HTTP_TIMEOUT": "x"}
        )
        assert settings.refresh_seconds == DEFAULT_REFRESH_SECONDS
        assert settings.http_timeout == 10.0

    def test_non_positive_interval_rejected(self):
        assert Settings.from_env({"SPORTSPAGE_REFRESH_SECONDS": "0"}).refresh_seconds == (
            DEFAULT_REFRESH_SECONDS
        )


class TestKeyValueStore:
    def test_memory_store(self):
        store = KeyValueStore(None)
        assert not store.is_persistent
        assert store.get("missing") is None
        store.set("k", ["a", 1])
        assert store.get("k") == ["a", 1]

    def test_sqlite_persists_across_instances(self, tmp_path):
        path = tmp_path / "prefs" / "sportspage.db"
        store = KeyValueStore(path)
        assert store.is_persistent
        store.set("k", {"x": [1, 2]})
        store.close()

        reopened = KeyValueStore(path)
        assert reopened.get("k") == {"x": [1, 2]}
        reopened.close()

    def test_overwrite(self, tmp_path):
        store = KeyValueStore(tmp_path / "db.sqlite")
        store.set("k", 1)
        store.set("k", 2)
        assert store.get("k") == 2
        store.close()

    def test_unopenable_path_falls_back_to_memory(self, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("file")
        store = KeyValueStore(blocker / "sportspage.db")

        assert not store.is_persistent
        store.set("k", "v")
        assert store.get("k") == "v"

    def test_corrupt_value_reads_as_none(self, tmp_path):
        path = tmp_path / "db.sqlite"
        store = KeyValueStore(path)
        store.close()
        conn = sqlite3.connect(path)
        with conn:
            conn.execute("INSERT INTO preferences (key, value) VALUES (?, ?)", ("k", "{not json"))
        conn.close()

        store = KeyValueStore(path)
        assert store.get("k") is None
        store.close()


class TestPreferences:
    def test_favorites_round_trip(self):
        store = KeyValueStore(None)
        assert load_favorites(store) is None

        favorites = FavoriteSet()
        assert toggle_favorite(store, favorites, "nhl", "30") is True
        assert store.get(FAVORITES_KEY) == ["nhl:30"]
        assert load_favorites(store) == FavoriteSet(["nhl:30"])

        assert toggle_favorite(store, favorites, "nhl", "30") is False
        assert load_favorites(store) == FavoriteSet()

    def test_active_leagues_drop_unknown_and_use_registry_order(self):
        store = KeyValueStore(None)
        save_active_leagues(store, ["epl", "xfl", "nba"])
        assert store.get(ACTIVE_LEAGUES_KEY) == ["nba", "epl"]
        assert load_active_leagues(store) == ["nba", "epl"]

    def test_toggle_active_league(self):
        store = KeyValueStore(None)
        assert toggle_active_league(store, ["nba", "nhl"], "nhl") == ["nba"]
        assert toggle_active_league(store, ["nba"], "epl") == ["nba", "epl"]
        assert load_active_leagues(store) == ["nba", "epl"]

    def test_toggle_unknown_league(self):
        with pytest.raises(KeyError):
            toggle_active_league(KeyValueStore(None), [], "xfl")


class TestStartupState:
    """Override > persisted > default."""

    def test_defaults(self):
        state = load_startup_state(Settings(), KeyValueStore(None))
        assert state.active_leagues == all_league_ids()
        assert len(state.favorites) == 0
        assert state.headless is False

    def test_persisted_beats_default(self):
        store = KeyValueStore(None)
        store.set(ACTIVE_LEAGUES_KEY, ["nhl"])
        store.set(FAVORITES_KEY, ["nhl:30"])
        state = load_startup_state(Settings(), store)
        assert state.active_leagues == ["nhl"]
        assert state.favorites == FavoriteSet(["nhl:30"])

    def test_override_beats_persisted(self):
        store = KeyValueStore(None)
        store.set(ACTIVE_LEAGUES_KEY, ["nhl"])
        store.set(FAVORITES_KEY, ["nhl:30"])
        settings = Settings(
            league_overrides=("epl", "nba", "bogus"),
            favorite_overrides=("nba:2", "junk"),
            headless=True,
        )
        state = load_startup_state(settings, store)
        assert state.active_leagues == ["nba", "epl"]
        assert state.favorites == FavoriteSet(["nba:2"])
        assert state.headless is True

    def test_empty_override_means_nothing_active(self):
        store = KeyValueStore(None)
        store.set(ACTIVE_LEAGUES_KEY, ["nhl"])
        state = load_startup_state(Settings(league_overrides=()), store)
        assert state.active_leagues == []


class TestRefresher:
    def _refresher(self, headless=False, leagues=("nhl",), favorites=()):
        aggregator = MagicMock()
        aggregator.refresh_all.side_effect = lambda leagues, favs, now: SportsPageModel(
            generated_at=now, reference_date=now.date()
        )
        state = StartupState(
            active_leagues=list(leagues), favorites=FavoriteSet(favorites), headless=headless
        )
        refresher = Refresher(aggregator, state, KeyValueStore(None), ZoneInfo("UTC"))
        return refresher, aggregator

    def test_refresh_swaps_model(self):
        refresher, aggregator = self._refresher(favorites=["nhl:30"])
        assert refresher.model is None

        now = datetime(2025, 10, 19, 12, 0, tzinfo=ZoneInfo("UTC"))
        model = refresher.refresh(now)

        assert refresher.model is model
        assert refresher.last_refresh == now
        leagues, favorites, _ = aggregator.refresh_all.call_args.args
        # Every known league is fetched, whichever are active
        assert [lg.id for lg in leagues] == all_league_ids()
        assert "nhl:30" in favorites

    def test_headless_start_refreshes_once_without_thread(self):
        refresher, aggregator = self._refresher(headless=True)
        refresher.start()
        assert aggregator.refresh_all.call_count == 1
        assert refresher.model is not None
        refresher.stop()

    def test_toggles_update_preferences(self):
        refresher, aggregator = self._refresher()
        assert refresher.toggle_favorite("nhl", "25") is True
        assert refresher.toggle_league("nba") == ["nba", "nhl"]
        assert refresher.active_leagues == ["nba", "nhl"]

        refresher.refresh()
        leagues, favorites, _ = aggregator.refresh_all.call_args.args
        assert [lg.id for lg in leagues] == all_league_ids()
        assert list(favorites) == ["nhl:25"]
        assert refresher.favorites == ["nhl:25"]

    def test_toggle_unknown_league(self):
        refresher, _ = self._refresher()
        with pytest.raises(KeyError):
            refresher.toggle_league("xfl")
        assert refresher.active_leagues == ["nhl"]
