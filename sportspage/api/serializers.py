"""View model → API response conversion.

This is where rendering-level extras (odds strings, box scores, leader
lines, kickoff time) are attached to games.
"""

from collections.abc import Collection
from datetime import datetime, tzinfo

from sportspage.api.models import (
    BoxScoreLineModel,
    BoxScoreModel,
    DateSectionModel,
    GameModel,
    LeagueModel,
    PageModel,
    StandingsGroupModel,
    StandingsRowModel,
    TeamEntryModel,
    TeamModel,
)
from sportspage.core import Game, League, LeagueView, SportsPageModel, StandingsGroup, Team, TeamGameEntry
from sportspage.services.aggregation import build_sections
from sportspage.services.box_score import BoxScore, BoxScoreLine, build_box_score, leader_lines
from sportspage.services.favorites import favorite_key
from sportspage.services.odds import format_line, format_moneyline
from sportspage.services.standings import standings_columns
from sportspage.utilities.tz import format_time


def _entry(entry: TeamGameEntry | None, moneyline: str | None) -> TeamEntryModel | None:
    if entry is None:
        return None
    return TeamEntryModel(
        team_id=entry.team_id,
        abbreviation=entry.abbreviation,
        display_name=entry.display_name,
        short_name=entry.short_name,
        home_away=entry.home_away,
        score=entry.score,
        is_winner=entry.is_winner,
        record=entry.record,
        moneyline=moneyline or None,
    )


def _box_line(line: BoxScoreLine) -> BoxScoreLineModel:
    return BoxScoreLineModel(abbreviation=line.abbreviation, cells=list(line.cells), total=line.total)


def _box_score(box: BoxScore | None) -> BoxScoreModel | None:
    if box is None:
        return None
    return BoxScoreModel(headers=list(box.headers), away=_box_line(box.away), home=_box_line(box.home))


def serialize_game(game: Game, league: League, is_favorite: bool, tz: tzinfo) -> GameModel:
    odds = game.odds if game.is_not_started else None
    moneyline = format_moneyline(odds) or [None, None]

    return GameModel(
        id=game.id,
        name=game.name,
        scheduled_at=game.scheduled_at,
        start_time=format_time(game.scheduled_at, tz) if game.scheduled_at else None,
        status=game.status,
        status_detail=game.status_detail,
        venue=game.venue,
        headline=game.headline,
        is_favorite=is_favorite,
        away=_entry(game.away, moneyline[0]),
        home=_entry(game.home, moneyline[1]),
        odds_line=format_line(odds),
        odds_provider=(odds.provider_name or None) if odds else None,
        box_score=_box_score(build_box_score(game, league.sport)) if is_favorite else None,
        leaders=leader_lines(game) if is_favorite else None,
    )


def serialize_standings(
    group: StandingsGroup, league: League, favorites: Collection[str]
) -> StandingsGroupModel:
    columns = standings_columns(league.sport)
    return StandingsGroupModel(
        name=group.name,
        columns=[header for header, _ in columns],
        rows=[
            StandingsRowModel(
                rank=i,
                team_id=row.team_id,
                abbreviation=row.abbreviation,
                short_name=row.short_name,
                logo_url=row.logo_url,
                values=[getattr(row, attr) for _, attr in columns],
                is_favorite=favorite_key(league.id, row.team_id) in favorites,
            )
            for i, row in enumerate(group.rows, 1)
        ],
    )


def serialize_league(
    view: LeagueView, favorites: Collection[str], tz: tzinfo, reference_now: datetime
) -> LeagueModel:
    """Serialize one league, splitting its games by the current favorites."""
    league = view.league
    sections = build_sections(league, view.games, favorites, reference_now)
    return LeagueModel(
        id=league.id,
        name=league.display_name,
        sport=league.sport,
        logo_url=league.logo_url,
        sections=[
            DateSectionModel(
                label=section.label,
                favorites=[serialize_game(g, league, True, tz) for g in section.favorites],
                others=[serialize_game(g, league, False, tz) for g in section.others],
            )
            for section in sections
        ],
        standings=[serialize_standings(g, league, favorites) for g in view.standings],
    )


def serialize_page(
    model: SportsPageModel,
    favorites: Collection[str],
    active_leagues: Collection[str],
    tz: tzinfo,
    headless: bool = False,
) -> PageModel:
    """Serialize the active leagues, in model order."""
    return PageModel(
        generated_at=model.generated_at,
        reference_date=model.reference_date,
        headless=headless,
        leagues=[
            serialize_league(view, favorites, tz, model.generated_at)
            for league_id, view in model.leagues.items()
            if league_id in active_leagues
        ],
    )


def serialize_teams(teams: tuple[Team, ...], league: League, favorites: Collection[str]) -> list[TeamModel]:
    return [
        TeamModel(
            id=team.id,
            abbreviation=team.abbreviation,
            short_name=team.short_name,
            logo_url=team.logo_url,
            is_favorite=favorite_key(league.id, team.id) in favorites,
        )
        for team in teams
    ]
