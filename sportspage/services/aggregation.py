"""Cross-league aggregation.

One refresh fetches, per league, the scoreboard days covering its date
window, the standings and the team roster. Every request is independent
and they all go into one thread pool; the refresh returns once all of
them have settled. Then each league is normalized, split into favorites
and others, bucketed by date and its standings ranked.

Leagues are isolated: a league whose requests fail ends up with empty
slices. Within a league, games, standings and teams are assembled
separately, so a slice that raises is emptied without touching the
others or any other league.
"""

import logging
from collections.abc import Callable, Collection, Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from sportspage.core import DateSection, Game, League, LeagueView, SportsPageModel
from sportspage.providers.espn import ESPNClient, adapt_events, adapt_standings, adapt_teams
from sportspage.services import buckets, favorites, standings

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 32


@dataclass
class LeaguePayloads:
    """Raw responses for one league; None marks a failed request."""

    scoreboards: list[dict | None] = field(default_factory=list)
    standings: dict | None = None
    teams: dict | None = None


def dedupe_games(games: list[Game]) -> list[Game]:
    """Drop repeat game ids, keeping the first occurrence.

    Adjacent scoreboard days can both list a game that straddles
    midnight UTC. Games without an id are never merged.
    """
    seen: set[str] = set()
    result = []
    for game in games:
        if game.id:
            if game.id in seen:
                continue
            seen.add(game.id)
        result.append(game)
    return result


def build_sections(
    league: League,
    games: Iterable[Game],
    favorite_keys: Collection[str],
    reference_now: datetime,
) -> tuple[DateSection, ...]:
    """Split games into favorites and others, then bucket both by date."""
    games = list(games)
    split = favorites.split(games, league, favorite_keys)
    fav_buckets = buckets.bucket(split.favorites, league, reference_now)
    other_buckets = buckets.bucket(split.others, league, reference_now)

    # Label order comes from bucketing everything together, so sections
    # stay chronological across both sides.
    return tuple(
        DateSection(
            label=label,
            favorites=tuple(fav_buckets.get(label, ())),
            others=tuple(other_buckets.get(label, ())),
        )
        for label in buckets.bucket(games, league, reference_now)
    )


def _build_slice(league: League, name: str, build: Callable[[], tuple]) -> tuple:
    """Build one slice of a league view; a failure empties only that slice."""
    try:
        return build()
    except Exception as e:
        logger.error("[AGGREGATE] Failed to build %s %s: %s", league.id, name, e, exc_info=True)
        return ()


def build_league_view(
    league: League,
    payloads: LeaguePayloads,
    favorite_keys: Collection[str],
    reference_now: datetime,
) -> LeagueView:
    """Normalize one league's raw payloads into its view. No I/O."""
    events: list[Any] = []
    for payload in payloads.scoreboards:
        if isinstance(payload, dict) and isinstance(payload.get("events"), list):
            events.extend(payload["events"])

    games = _build_slice(league, "games", lambda: tuple(dedupe_games(adapt_events(league, events))))
    sections = _build_slice(
        league, "sections", lambda: build_sections(league, games, favorite_keys, reference_now)
    )
    groups = _build_slice(
        league,
        "standings",
        lambda: tuple(
            standings.rank_groups(adapt_standings(league, payloads.standings), league.sport)
        ),
    )
    teams = _build_slice(league, "teams", lambda: tuple(adapt_teams(league, payloads.teams)))

    return LeagueView(
        league=league,
        games=games,
        sections=sections,
        standings=groups,
        teams=teams,
    )


class AggregationService:
    """Drives a full refresh across leagues.

    Usage:
        service = AggregationService(ESPNClient())
        model = service.refresh_all(leagues, favorite_set, now_local(tz))
    """

    def __init__(self, client: ESPNClient, max_workers: int = DEFAULT_MAX_WORKERS):
        self._client = client
        self._max_workers = max_workers

    def _safe_fetch(self, label: str, fetch: Callable[..., dict | None], *args: Any) -> dict | None:
        """Run one request; anything raised counts as no data."""
        try:
            return fetch(*args)
        except Exception as e:
            logger.warning("[AGGREGATE] %s fetch failed: %s", label, e)
            return None

    def fetch_all(
        self, leagues: list[League], reference_now: datetime
    ) -> dict[str, LeaguePayloads]:
        """Fetch every feed of every league concurrently."""
        if not leagues:
            return {}

        scoreboard_futures: dict[str, list[Future]] = {}
        standings_futures: dict[str, Future] = {}
        teams_futures: dict[str, Future] = {}

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            for league in leagues:
                scoreboard_futures[league.id] = [
                    executor.submit(
                        self._safe_fetch,
                        f"{league.id} scoreboard {day:%Y%m%d}",
                        self._client.get_scoreboard,
                        league,
                        day.strftime("%Y%m%d"),
                    )
                    for day in buckets.fetch_dates(league, reference_now)
                ]
                standings_futures[league.id] = executor.submit(
                    self._safe_fetch, f"{league.id} standings", self._client.get_standings, league
                )
                teams_futures[league.id] = executor.submit(
                    self._safe_fetch, f"{league.id} teams", self._client.get_teams, league
                )

        # Executor exit waits for every request to settle
        return {
            league.id: LeaguePayloads(
                scoreboards=[f.result() for f in scoreboard_futures[league.id]],
                standings=standings_futures[league.id].result(),
                teams=teams_futures[league.id].result(),
            )
            for league in leagues
        }

    def refresh_all(
        self,
        leagues: list[League],
        favorite_keys: Collection[str],
        reference_now: datetime,
    ) -> SportsPageModel:
        """Build the full model for one refresh cycle.

        Args:
            leagues: Leagues to include, in display order
            favorite_keys: Favorite keys ("nhl:30"), e.g. a FavoriteSet
            reference_now: Current time in the display timezone

        Returns:
            SportsPageModel with one LeagueView per league
        """
        start = datetime.now()
        payloads = self.fetch_all(leagues, reference_now)

        views: dict[str, LeagueView] = {}
        for league in leagues:
            try:
                views[league.id] = build_league_view(
                    league, payloads[league.id], favorite_keys, reference_now
                )
            except Exception as e:
                logger.error("[AGGREGATE] Failed to build %s: %s", league.id, e, exc_info=True)
                views[league.id] = LeagueView(league=league)

        elapsed = (datetime.now() - start).total_seconds()
        logger.info(
            "[AGGREGATE] Refreshed %d leagues (%d games) in %.2fs",
            len(views),
            sum(v.game_count for v in views.values()),
            elapsed,
        )

        return SportsPageModel(
            generated_at=reference_now,
            reference_date=reference_now.date(),
            leagues=views,
        )
