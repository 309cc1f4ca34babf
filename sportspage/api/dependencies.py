"""Shared FastAPI dependencies."""

from fastapi import Request

from sportspage.core import SportsPageModel
from sportspage.services.refresh import Refresher


def get_refresher(request: Request) -> Refresher:
    return request.app.state.refresher


def current_model(refresher: Refresher) -> SportsPageModel:
    """Latest model, refreshing inline if none has completed yet."""
    model = refresher.model
    if model is None:
        model = refresher.refresh()
    return model
