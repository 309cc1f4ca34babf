"""Pydantic response models for the API."""

from datetime import date, datetime

from pydantic import BaseModel


class TeamEntryModel(BaseModel):
    """One side of a game."""

    team_id: str
    abbreviation: str
    display_name: str
    short_name: str
    home_away: str
    score: str | None = None
    is_winner: bool | None = None
    record: str = ""
    moneyline: str | None = None


class BoxScoreLineModel(BaseModel):
    abbreviation: str
    cells: list[str]
    total: str


class BoxScoreModel(BaseModel):
    headers: list[str]
    away: BoxScoreLineModel
    home: BoxScoreLineModel


class GameModel(BaseModel):
    """A game with display-ready extras.

    odds_line/moneyline are only set before kickoff; box_score and leaders
    only for favorite games that are under way or final.
    """

    id: str
    name: str
    scheduled_at: datetime | None = None
    start_time: str | None = None
    status: str
    status_detail: str = ""
    venue: str = ""
    headline: str = ""
    is_favorite: bool = False
    away: TeamEntryModel | None = None
    home: TeamEntryModel | None = None
    odds_line: str | None = None
    odds_provider: str | None = None
    box_score: BoxScoreModel | None = None
    leaders: list[str] | None = None


class DateSectionModel(BaseModel):
    label: str
    favorites: list[GameModel]
    others: list[GameModel]


class StandingsRowModel(BaseModel):
    rank: int
    team_id: str
    abbreviation: str
    short_name: str
    logo_url: str | None = None
    values: list[str | None]
    is_favorite: bool = False


class StandingsGroupModel(BaseModel):
    name: str
    columns: list[str]
    rows: list[StandingsRowModel]


class LeagueModel(BaseModel):
    id: str
    name: str
    sport: str
    logo_url: str | None = None
    sections: list[DateSectionModel]
    standings: list[StandingsGroupModel]


class PageModel(BaseModel):
    """The whole page for one refresh."""

    generated_at: datetime
    reference_date: date
    headless: bool = False
    leagues: list[LeagueModel]


class TeamModel(BaseModel):
    id: str
    abbreviation: str
    short_name: str
    logo_url: str | None = None
    is_favorite: bool = False


class LeagueTeamsModel(BaseModel):
    league_id: str
    name: str
    teams: list[TeamModel]


class FavoritesResponse(BaseModel):
    favorites: list[str]


class FavoriteToggleResponse(BaseModel):
    key: str
    is_favorite: bool


class LeagueInfoModel(BaseModel):
    id: str
    name: str
    sport: str
    active: bool


class LeaguesResponse(BaseModel):
    active: list[str]
    leagues: list[LeagueInfoModel]
