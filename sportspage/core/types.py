"""Core data types for The Sports Page.

All data structures are frozen dataclasses with attribute access.
Entities are built once per refresh from a raw feed and never mutated;
the next refresh replaces them wholesale.

Use attribute access: game.home, row.points, league.sport, etc.
"""

from dataclasses import dataclass, field
from datetime import date, datetime

# Game status values
NOT_STARTED = "not_started"
LIVE = "live"
COMPLETED = "completed"

HOME = "home"
AWAY = "away"


@dataclass(frozen=True)
class League:
    """A supported league."""

    id: str
    display_name: str
    feed_path: str  # e.g., "basketball/nba"
    sport: str  # e.g., "hockey", "basketball", "soccer"
    extended_range_days: int = 0  # 0 = yesterday/today/tomorrow window
    logo_url: str | None = None

    @property
    def is_extended_range(self) -> bool:
        return self.extended_range_days > 0


@dataclass(frozen=True)
class Team:
    """Roster entry, used by the favorite picker."""

    id: str
    abbreviation: str
    short_name: str
    logo_url: str | None = None


@dataclass(frozen=True)
class TeamGameEntry:
    """One side of a game."""

    team_id: str
    abbreviation: str
    display_name: str
    short_name: str
    home_away: str  # "home" | "away" | "" when the feed omits it
    score: str | None = None
    is_winner: bool | None = None
    record: str = ""  # "10-2" style summary
    period_scores: tuple[int | float | None, ...] = ()


@dataclass(frozen=True)
class Odds:
    """Betting line for a game (scoreboard only, pre-game)."""

    details: str = ""  # "BOS -3.5"
    over_under: float | None = None
    spread: float | None = None
    over_odds: float | None = None
    under_odds: float | None = None
    away_moneyline: int | None = None
    home_moneyline: int | None = None
    provider_name: str = ""


@dataclass(frozen=True)
class Performer:
    """Top performer in a leader category."""

    name: str
    value: str


@dataclass(frozen=True)
class Leader:
    """Stat leader category with its single top performer."""

    category: str  # raw feed name, e.g. "passingYards"
    top_performer: Performer | None = None


@dataclass(frozen=True)
class Game:
    """A single game as shown on the scoreboard."""

    id: str
    name: str
    scheduled_at: datetime | None
    status: str = NOT_STARTED  # not_started | live | completed
    status_detail: str = ""
    venue: str = ""
    teams: tuple[TeamGameEntry, ...] = ()
    odds: Odds | None = None
    headline: str = ""
    leaders: tuple[Leader, ...] = ()

    @property
    def home(self) -> TeamGameEntry | None:
        return next((t for t in self.teams if t.home_away == HOME), None)

    @property
    def away(self) -> TeamGameEntry | None:
        return next((t for t in self.teams if t.home_away == AWAY), None)

    @property
    def matchup(self) -> tuple[TeamGameEntry, TeamGameEntry] | None:
        """(away, home) when both sides are present, else None."""
        away, home = self.away, self.home
        if away is None or home is None:
            return None
        return away, home

    @property
    def team_ids(self) -> tuple[str, ...]:
        return tuple(t.team_id for t in self.teams if t.team_id)

    @property
    def is_live(self) -> bool:
        return self.status == LIVE

    @property
    def is_completed(self) -> bool:
        return self.status == COMPLETED

    @property
    def is_not_started(self) -> bool:
        return self.status == NOT_STARTED


@dataclass(frozen=True)
class StandingsRow:
    """A team's line in a standings table.

    Stat values are the feed's display strings ("0.600", "W3", "+12").
    Fields that do not apply to the league's sport stay None, which is
    different from a "0" value.
    """

    team_id: str
    abbreviation: str
    short_name: str
    logo_url: str | None = None
    wins: str = "0"
    losses: str = "0"
    win_pct: str = ""
    ties: str | None = None  # football
    draws: str | None = None  # soccer
    games_behind: str | None = None
    streak: str | None = None
    last_ten: str | None = None
    ot_losses: str | None = None  # hockey
    points: str | None = None  # hockey, soccer
    points_for: str | None = None
    points_against: str | None = None
    games_played: str | None = None
    point_differential: str | None = None


@dataclass(frozen=True)
class StandingsGroup:
    """One conference/division table."""

    name: str
    rows: tuple[StandingsRow, ...] = ()


# =============================================================================
# View model
# Built by the aggregation orchestrator, consumed by rendering.
# =============================================================================


@dataclass(frozen=True)
class DateSection:
    """A date bucket with its games split into favorites and others."""

    label: str
    favorites: tuple[Game, ...] = ()
    others: tuple[Game, ...] = ()

    @property
    def total(self) -> int:
        return len(self.favorites) + len(self.others)


@dataclass(frozen=True)
class LeagueView:
    """Everything rendered for one league.

    games holds the deduplicated scoreboard in feed order, so sections can
    be rebuilt against a newer favorite set without refetching.
    """

    league: League
    games: tuple[Game, ...] = ()
    sections: tuple[DateSection, ...] = ()
    standings: tuple[StandingsGroup, ...] = ()
    teams: tuple[Team, ...] = ()

    @property
    def game_count(self) -> int:
        return sum(s.total for s in self.sections)


@dataclass(frozen=True)
class SportsPageModel:
    """The full cross-league model for one refresh cycle."""

    generated_at: datetime
    reference_date: date
    leagues: dict[str, LeagueView] = field(default_factory=dict)
