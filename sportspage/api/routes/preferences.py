"""Favorite teams and active league endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from sportspage.api.dependencies import current_model, get_refresher
from sportspage.api.models import (
    FavoritesResponse,
    FavoriteToggleResponse,
    LeagueInfoModel,
    LeaguesResponse,
    LeagueTeamsModel,
)
from sportspage.api.serializers import serialize_teams
from sportspage.leagues import LEAGUES
from sportspage.services.favorites import favorite_key
from sportspage.services.refresh import Refresher

router = APIRouter()


def _leagues_response(active: list[str]) -> LeaguesResponse:
    return LeaguesResponse(
        active=active,
        leagues=[
            LeagueInfoModel(id=lg.id, name=lg.display_name, sport=lg.sport, active=lg.id in active)
            for lg in LEAGUES.values()
        ],
    )


@router.get("/teams", response_model=list[LeagueTeamsModel])
def get_teams(refresher: Refresher = Depends(get_refresher)):
    """Get team rosters for every known league, for the favorite picker."""
    model = current_model(refresher)
    favorites = set(refresher.favorites)
    return [
        LeagueTeamsModel(
            league_id=view.league.id,
            name=view.league.display_name,
            teams=serialize_teams(view.teams, view.league, favorites),
        )
        for view in model.leagues.values()
    ]


@router.get("/favorites", response_model=FavoritesResponse)
def get_favorites(refresher: Refresher = Depends(get_refresher)):
    """Get favorite team keys."""
    return FavoritesResponse(favorites=refresher.favorites)


@router.post("/favorites/{league_id}/{team_id}", response_model=FavoriteToggleResponse)
def toggle_favorite(league_id: str, team_id: str, refresher: Refresher = Depends(get_refresher)):
    """Toggle a team's favorite status. Applies from the next refresh."""
    if league_id not in LEAGUES:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown league '{league_id}'",
        )
    is_favorite = refresher.toggle_favorite(league_id, team_id)
    return FavoriteToggleResponse(key=favorite_key(league_id, team_id), is_favorite=is_favorite)


@router.get("/leagues", response_model=LeaguesResponse)
def get_leagues(refresher: Refresher = Depends(get_refresher)):
    """Get known leagues and which are active."""
    return _leagues_response(refresher.active_leagues)


@router.post("/leagues/{league_id}", response_model=LeaguesResponse)
def toggle_league(league_id: str, refresher: Refresher = Depends(get_refresher)):
    """Toggle a league on or off. Applies from the next refresh."""
    try:
        active = refresher.toggle_league(league_id)
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown league '{league_id}'",
        ) from None
    return _leagues_response(active)
