"""FastAPI application factory."""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from sportspage.api.routes import preferences, scores
from sportspage.config import Settings
from sportspage.database import KeyValueStore, load_startup_state
from sportspage.providers.espn import ESPNClient
from sportspage.services.aggregation import AggregationService
from sportspage.services.refresh import Refresher
from sportspage.utilities.tz import get_timezone

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    client: ESPNClient | None = None,
    store: KeyValueStore | None = None,
    start_refresher: bool = True,
) -> FastAPI:
    """Build the app and its refresher.

    Args:
        settings: Process settings (read from the environment if omitted)
        client: ESPN client (a real one if omitted)
        store: Preferences store (sqlite at settings.db_path if omitted)
        start_refresher: Start periodic refresh on startup (tests pass False)
    """
    settings = settings or Settings.from_env()
    client = client or ESPNClient(timeout=settings.http_timeout)
    store = store or KeyValueStore(settings.db_path)
    tz = get_timezone(settings.timezone)

    refresher = Refresher(
        aggregator=AggregationService(client),
        state=load_startup_state(settings, store),
        store=store,
        tz=tz,
        interval_seconds=settings.refresh_seconds,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if start_refresher:
            # Headless start refreshes synchronously
            await asyncio.to_thread(refresher.start)
        yield
        refresher.stop()
        client.close()
        store.close()

    app = FastAPI(title="The Sports Page", version="1.0.0", lifespan=lifespan)
    app.state.refresher = refresher
    app.state.settings = settings
    app.state.tz = tz

    @app.get("/api/health")
    def health():
        return {
            "status": "ok",
            "last_refresh": refresher.last_refresh.isoformat() if refresher.last_refresh else None,
            "headless": refresher.headless,
        }

    app.include_router(scores.router, prefix="/api", tags=["scores"])
    app.include_router(preferences.router, prefix="/api", tags=["preferences"])

    return app
