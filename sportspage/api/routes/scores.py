"""Scoreboard and standings API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from sportspage.api.dependencies import current_model, get_refresher
from sportspage.api.models import LeagueModel, PageModel
from sportspage.api.serializers import serialize_league, serialize_page
from sportspage.core import SportsPageModel
from sportspage.services.refresh import Refresher

logger = logging.getLogger(__name__)

router = APIRouter()


def _page(request: Request, refresher: Refresher, model: SportsPageModel) -> PageModel:
    return serialize_page(
        model,
        set(refresher.favorites),
        set(refresher.active_leagues),
        request.app.state.tz,
        headless=refresher.headless,
    )


@router.get("/scores", response_model=PageModel)
def get_scores(request: Request, refresher: Refresher = Depends(get_refresher)):
    """Get the full page: every active league's scoreboard and standings."""
    return _page(request, refresher, current_model(refresher))


@router.get("/scores/{league_id}", response_model=LeagueModel)
def get_league_scores(
    league_id: str, request: Request, refresher: Refresher = Depends(get_refresher)
):
    """Get one active league's scoreboard and standings."""
    model = current_model(refresher)
    view = model.leagues.get(league_id)
    if view is None or league_id not in refresher.active_leagues:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"League '{league_id}' is not active",
        )
    return serialize_league(
        view, set(refresher.favorites), request.app.state.tz, model.generated_at
    )


@router.post("/refresh", response_model=PageModel)
def refresh_now(request: Request, refresher: Refresher = Depends(get_refresher)):
    """Refresh immediately and return the new page."""
    logger.info("[API] Manual refresh requested")
    return _page(request, refresher, refresher.refresh())
