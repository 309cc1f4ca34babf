"""Periodic and on-demand refresh of the sports page model.

The Refresher keeps the latest SportsPageModel and replaces it wholesale
after every refresh. Every known league is fetched; the active leagues
and favorites are applied when the model is served. Refreshes it runs
are serialized with a lock. In headless mode it refreshes once at start
and never starts the timer.
"""

import logging
import threading
from datetime import datetime, tzinfo

from sportspage.core import SportsPageModel
from sportspage.database import KeyValueStore, StartupState, toggle_active_league, toggle_favorite
from sportspage.leagues import all_league_ids, resolve_leagues
from sportspage.services.aggregation import AggregationService
from sportspage.utilities.tz import now_local

logger = logging.getLogger(__name__)


class Refresher:
    """Owns the current model and the preferences it is built from."""

    def __init__(
        self,
        aggregator: AggregationService,
        state: StartupState,
        store: KeyValueStore,
        tz: tzinfo,
        interval_seconds: int = 300,
    ):
        self._aggregator = aggregator
        self._state = state
        self._store = store
        self._tz = tz
        self._interval = interval_seconds

        self._refresh_lock = threading.Lock()
        self._prefs_lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

        self._model: SportsPageModel | None = None
        self._last_refresh: datetime | None = None

    @property
    def model(self) -> SportsPageModel | None:
        """Latest model, or None before the first refresh completes."""
        return self._model

    @property
    def last_refresh(self) -> datetime | None:
        return self._last_refresh

    @property
    def headless(self) -> bool:
        return self._state.headless

    @property
    def active_leagues(self) -> list[str]:
        with self._prefs_lock:
            return list(self._state.active_leagues)

    @property
    def favorites(self) -> list[str]:
        with self._prefs_lock:
            return self._state.favorites.to_list()

    def refresh(self, reference_now: datetime | None = None) -> SportsPageModel:
        """Run a full refresh now and swap in the new model."""
        with self._prefs_lock:
            favorites = self._state.favorites.copy()

        # Every known league is fetched; active leagues only filter what is
        # shown, so toggling one on needs no refetch.
        with self._refresh_lock:
            now = reference_now or now_local(self._tz)
            model = self._aggregator.refresh_all(resolve_leagues(all_league_ids()), favorites, now)
            self._model = model
            self._last_refresh = now
        return model

    def toggle_favorite(self, league_id: str, team_id: str) -> bool:
        """Flip a favorite. Served pages reflect it immediately."""
        with self._prefs_lock:
            return toggle_favorite(self._store, self._state.favorites, league_id, team_id)

    def toggle_league(self, league_id: str) -> list[str]:
        """Flip an active league. Served pages reflect it immediately.

        Raises:
            KeyError: unknown league id
        """
        with self._prefs_lock:
            updated = toggle_active_league(self._store, self._state.active_leagues, league_id)
            self._state.active_leagues = updated
            return list(updated)

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                self.refresh()
            except Exception as e:
                logger.error("[REFRESH] Refresh failed: %s", e, exc_info=True)
            self._stop.wait(self._interval)

    def start(self) -> None:
        """Start refreshing.

        Headless: one synchronous refresh, no timer. Otherwise a daemon
        thread refreshes immediately and then every interval.
        """
        if self._state.headless:
            logger.info("[REFRESH] Headless mode, single refresh")
            self.refresh()
            return

        if self._thread is not None and self._thread.is_alive():
            return

        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="sportspage-refresh", daemon=True)
        self._thread.start()
        logger.info("[REFRESH] Periodic refresh every %ds", self._interval)

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=5)
            self._thread = None
