"""ESPN feed normalization.

Maps raw scoreboard, standings and teams payloads into core entities.
All absence handling for a feed lives here: every optional field is
defaulted to an empty/neutral value, so consumers never null-check raw
JSON. Functions are pure; adapting the same payload twice gives equal
results.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from sportspage.core import (
    AWAY,
    COMPLETED,
    HOME,
    LIVE,
    NOT_STARTED,
    Game,
    Leader,
    League,
    Odds,
    Performer,
    StandingsGroup,
    StandingsRow,
    Team,
    TeamGameEntry,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Defensive accessors
# =============================================================================


def _dig(obj: Any, *path: str | int, default: Any = None) -> Any:
    """Walk nested dicts/lists; return default on any missing step."""
    cur = obj
    for key in path:
        if isinstance(key, int):
            if not isinstance(cur, list) or not -len(cur) <= key < len(cur):
                return default
            cur = cur[key]
        else:
            if not isinstance(cur, dict):
                return default
            cur = cur.get(key)
        if cur is None:
            return default
    return cur


def _list(obj: Any, *path: str | int) -> list:
    """Like _dig but always returns a list."""
    value = _dig(obj, *path)
    return value if isinstance(value, list) else []


def _str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _opt_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _number(value: Any) -> int | float | None:
    """Coerce a feed number; integral floats become int."""
    if value is None or isinstance(value, bool):
        return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    if num != num:  # NaN
        return None
    return int(num) if num.is_integer() else num


def _moneyline(value: Any) -> int | None:
    num = _number(value)
    return int(num) if num is not None else None


def _parse_datetime(value: Any) -> datetime | None:
    """Parse an ESPN ISO timestamp ("2025-10-19T23:00Z") as an aware datetime."""
    if not isinstance(value, str) or not value:
        return None
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("[ADAPT] Unparseable date %r", value)
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def _first_logo(team: Any) -> str | None:
    return _opt_str(_dig(team, "logos", 0, "href"))


# =============================================================================
# Scoreboard
# =============================================================================


def _parse_status(competition: Any) -> tuple[str, str]:
    """Return (status, detail) from a competition's status block."""
    type_data = _dig(competition, "status", "type", default={})
    state = _dig(type_data, "state", default="")
    detail = _str(_dig(type_data, "shortDetail"))

    if _dig(type_data, "completed") is True or state == "post":
        return COMPLETED, detail
    if state == "in":
        return LIVE, detail
    return NOT_STARTED, detail


def _parse_competitor(data: Any) -> TeamGameEntry:
    team = _dig(data, "team", default={})
    home_away = _dig(data, "homeAway", default="")
    winner = _dig(data, "winner")

    return TeamGameEntry(
        team_id=_str(_dig(team, "id")),
        abbreviation=_str(_dig(team, "abbreviation")),
        display_name=_str(_dig(team, "displayName")),
        short_name=_str(_dig(team, "shortDisplayName")),
        home_away=home_away if home_away in (HOME, AWAY) else "",
        score=_opt_str(_dig(data, "score")),
        is_winner=winner if isinstance(winner, bool) else None,
        record=_str(_dig(data, "records", 0, "summary")),
        period_scores=tuple(_number(_dig(ls, "value")) for ls in _list(data, "linescores")),
    )


def _parse_odds(competition: Any) -> Odds | None:
    """Odds from the first provider; None when the block is absent."""
    data = _dig(competition, "odds", 0)
    if not isinstance(data, dict):
        return None

    return Odds(
        details=_str(data.get("details")),
        over_under=_number(data.get("overUnder")),
        spread=_number(data.get("spread")),
        over_odds=_number(data.get("overOdds")),
        under_odds=_number(data.get("underOdds")),
        away_moneyline=_moneyline(_dig(data, "awayTeamOdds", "moneyLine")),
        home_moneyline=_moneyline(_dig(data, "homeTeamOdds", "moneyLine")),
        provider_name=_str(_dig(data, "provider", "name")),
    )


def _parse_headline(competition: Any) -> str:
    """Short link text, else description, else the first note's headline."""
    headline = _dig(competition, "headlines", 0, default={})
    return _str(
        _dig(headline, "shortLinkText")
        or _dig(headline, "description")
        or _dig(competition, "notes", 0, "headline")
    )


def _parse_leaders(competition: Any) -> tuple[Leader, ...]:
    """One Leader per category, keeping only the top performer."""
    leaders = []
    for category in _list(competition, "leaders"):
        top = _dig(category, "leaders", 0)
        performer = None
        if isinstance(top, dict):
            performer = Performer(
                name=_str(
                    _dig(top, "athlete", "shortName") or _dig(top, "athlete", "displayName")
                ),
                value=_str(top.get("displayValue")),
            )
        leaders.append(Leader(category=_str(_dig(category, "name")), top_performer=performer))
    return tuple(leaders)


def _parse_event(data: dict) -> Game:
    competition = _dig(data, "competitions", 0, default={})
    status, detail = _parse_status(competition)

    return Game(
        id=_str(data.get("id")),
        name=_str(data.get("name")),
        scheduled_at=_parse_datetime(data.get("date")),
        status=status,
        status_detail=detail,
        venue=_str(_dig(competition, "venue", "fullName")),
        teams=tuple(_parse_competitor(c) for c in _list(competition, "competitors")),
        odds=_parse_odds(competition),
        headline=_parse_headline(competition),
        leaders=_parse_leaders(competition),
    )


def _partial_event(data: Any) -> Game:
    """Minimal game for an event the full parser choked on."""
    return Game(
        id=_str(_dig(data, "id")),
        name=_str(_dig(data, "name")),
        scheduled_at=_parse_datetime(_dig(data, "date")),
    )


def adapt_events(league: League, events: list) -> list[Game]:
    """Normalize a list of raw scoreboard events.

    Each event is mapped on its own; a failure yields a partial game
    instead of dropping the batch.
    """
    games = []
    for data in events:
        if not isinstance(data, dict):
            logger.warning("[ADAPT] %s: skipping non-object event %r", league.id, data)
            continue
        try:
            games.append(_parse_event(data))
        except Exception as e:
            logger.warning(
                "[ADAPT] %s: failed to parse event %s: %s", league.id, data.get("id"), e
            )
            games.append(_partial_event(data))
    return games


def adapt_scoreboard(league: League, payload: Any) -> list[Game]:
    """Normalize one scoreboard response (events[])."""
    return adapt_events(league, _list(payload, "events"))


# =============================================================================
# Standings
# =============================================================================


def _stats_map(entry: Any) -> dict[str, str]:
    """stats[] name/displayValue pairs as a dict."""
    stats = {}
    for stat in _list(entry, "stats"):
        name = _dig(stat, "name")
        value = _dig(stat, "displayValue")
        if name and value is not None:
            stats[str(name)] = str(value)
    return stats


def _last_ten(stats: dict[str, str]) -> str | None:
    # "7-3, 2 OTL" -> "7-3"
    value = stats.get("Last Ten Games")
    if not value:
        return None
    return value.split(",")[0].strip()


def _sport_fields(sport: str, stats: dict[str, str]) -> dict[str, str | None]:
    """StandingsRow fields that apply to the sport; the rest stay None."""
    get = stats.get
    if sport in ("basketball", "baseball"):
        return {
            "games_behind": get("gamesBehind"),
            "last_ten": _last_ten(stats),
            "streak": get("streak"),
        }
    if sport == "football":
        return {
            "ties": get("ties"),
            "points_for": get("pointsFor"),
            "points_against": get("pointsAgainst"),
        }
    if sport == "hockey":
        return {
            "ot_losses": get("OTLosses") or get("otLosses"),
            "points": get("points"),
            "games_played": get("gamesPlayed"),
            "last_ten": _last_ten(stats),
            "streak": get("streak"),
        }
    if sport == "soccer":
        return {
            "draws": get("draws") or get("ties"),
            "points": get("points"),
            "games_played": get("gamesPlayed"),
            "points_for": get("pointsFor"),
            "points_against": get("pointsAgainst"),
            "point_differential": get("pointDifferential") or get("differential"),
        }
    return {}


def _parse_standings_entry(sport: str, entry: Any) -> StandingsRow:
    team = _dig(entry, "team", default={})
    stats = _stats_map(entry)

    return StandingsRow(
        team_id=_str(_dig(team, "id")),
        abbreviation=_str(_dig(team, "abbreviation")),
        short_name=_str(_dig(team, "shortDisplayName")),
        logo_url=_first_logo(team),
        wins=stats.get("wins") or "0",
        losses=stats.get("losses") or "0",
        win_pct=stats.get("winPercent") or "",
        **_sport_fields(sport, stats),
    )


def adapt_standings(league: League, payload: Any) -> list[StandingsGroup]:
    """Normalize a standings response (children[] conference/division groups).

    Rows keep feed order; ranking is a separate step.
    """
    groups = []
    for child in _list(payload, "children"):
        if not isinstance(child, dict):
            continue
        rows = []
        for entry in _list(child, "standings", "entries"):
            try:
                rows.append(_parse_standings_entry(league.sport, entry))
            except Exception as e:
                logger.warning("[ADAPT] %s: failed to parse standings entry: %s", league.id, e)
        groups.append(
            StandingsGroup(
                name=_str(child.get("name") or child.get("abbreviation")),
                rows=tuple(rows),
            )
        )
    return groups


# =============================================================================
# Teams
# =============================================================================


def adapt_teams(league: League, payload: Any) -> list[Team]:
    """Normalize a teams response (sports[0].leagues[0].teams[])."""
    teams = []
    for item in _list(payload, "sports", 0, "leagues", 0, "teams"):
        team = _dig(item, "team")
        if not isinstance(team, dict) or team.get("id") is None:
            continue
        teams.append(
            Team(
                id=_str(team.get("id")),
                abbreviation=_str(team.get("abbreviation")),
                short_name=_str(team.get("shortDisplayName")),
                logo_url=_first_logo(team),
            )
        )
    logger.debug("[ADAPT] %s: %d teams", league.id, len(teams))
    return teams
