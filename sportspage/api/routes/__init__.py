"""API routers."""

from sportspage.api.routes import preferences, scores

__all__ = ["preferences", "scores"]
