"""HTTP API for the rendering front end."""

from sportspage.api.app import create_app

__all__ = ["create_app"]
