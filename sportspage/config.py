"""Process-start configuration for The Sports Page.

Read once from the environment. Launch overrides (active leagues,
favorites, headless) win over persisted preferences, which win over the
hardcoded defaults (all leagues, no favorites); see
database/preferences.py for that resolution.

Environment variables:
  - SPORTSPAGE_LEAGUES: comma list of league ids ("nba,nhl")
  - SPORTSPAGE_FAVS: comma list of favorite keys ("nhl:30,nba:2")
  - SPORTSPAGE_HEADLESS: 1/true/yes for single-shot automation runs
  - SPORTSPAGE_TZ: display timezone (default America/New_York)
  - SPORTSPAGE_DB_PATH: preferences database (default ./data/sportspage.db)
  - SPORTSPAGE_REFRESH_SECONDS: periodic refresh interval (default 300)
  - SPORTSPAGE_HTTP_TIMEOUT: per-request timeout in seconds (default 10)
  - SPORTSPAGE_LOG_LEVEL: logging level name (default INFO)
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from sportspage.utilities.tz import DEFAULT_TIMEZONE

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "./data/sportspage.db"
DEFAULT_REFRESH_SECONDS = 300
DEFAULT_HTTP_TIMEOUT = 10.0

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_list(env: Mapping[str, str], name: str) -> list[str] | None:
    """Comma list from the environment; None when unset or blank (not an override)."""
    raw = env.get(name)
    if raw is None or not raw.strip():
        return None
    return [x.strip() for x in raw.split(",") if x.strip()]


def _env_bool(env: Mapping[str, str], name: str) -> bool:
    return env.get(name, "").strip().lower() in _TRUE_VALUES


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    try:
        return int(env.get(name, str(default)))
    except ValueError:
        logger.warning("Invalid %s, using %d", name, default)
        return default


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    try:
        return float(env.get(name, str(default)))
    except ValueError:
        logger.warning("Invalid %s, using %s", name, default)
        return default


@dataclass(frozen=True)
class Settings:
    """Immutable process configuration."""

    league_overrides: tuple[str, ...] | None = None
    favorite_overrides: tuple[str, ...] | None = None
    headless: bool = False
    timezone: str = DEFAULT_TIMEZONE
    db_path: str = DEFAULT_DB_PATH
    refresh_seconds: int = DEFAULT_REFRESH_SECONDS
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables (os.environ by default)."""
        env = os.environ if env is None else env

        leagues = _env_list(env, "SPORTSPAGE_LEAGUES")
        favs = _env_list(env, "SPORTSPAGE_FAVS")
        refresh = _env_int(env, "SPORTSPAGE_REFRESH_SECONDS", DEFAULT_REFRESH_SECONDS)

        return cls(
            league_overrides=tuple(leagues) if leagues is not None else None,
            favorite_overrides=tuple(favs) if favs is not None else None,
            headless=_env_bool(env, "SPORTSPAGE_HEADLESS"),
            timezone=env.get("SPORTSPAGE_TZ") or DEFAULT_TIMEZONE,
            db_path=env.get("SPORTSPAGE_DB_PATH") or DEFAULT_DB_PATH,
            refresh_seconds=refresh if refresh > 0 else DEFAULT_REFRESH_SECONDS,
            http_timeout=_env_float(env, "SPORTSPAGE_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
            log_level=(env.get("SPORTSPAGE_LOG_LEVEL") or "INFO").upper(),
        )
