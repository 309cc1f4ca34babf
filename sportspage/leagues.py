"""League registry - single source of truth for supported leagues.

The table is built once at import and is read-only afterwards.
Adding a league means adding one entry to _LEAGUES; every other part of
the system (fetching, bucketing, ranking, labeling) keys off the
league's sport tag and extended-range days.
"""

import logging
from types import MappingProxyType

from sportspage.core import League

logger = logging.getLogger(__name__)

_LOGO_BASE = "https://a.espncdn.com/combiner/i?img=/i/teamlogos/leagues/500"

# EPL plays once or twice a week, so it gets a +/-7 day window
EXTENDED_RANGE_DAYS = 7

_LEAGUES = (
    League(
        id="nba",
        display_name="NBA",
        feed_path="basketball/nba",
        sport="basketball",
        logo_url=f"{_LOGO_BASE}/nba.png&h=40&w=40",
    ),
    League(
        id="nfl",
        display_name="NFL",
        feed_path="football/nfl",
        sport="football",
        logo_url=f"{_LOGO_BASE}/nfl.png&h=40&w=40",
    ),
    League(
        id="mlb",
        display_name="MLB",
        feed_path="baseball/mlb",
        sport="baseball",
        logo_url=f"{_LOGO_BASE}/mlb.png&h=40&w=40",
    ),
    League(
        id="nhl",
        display_name="NHL",
        feed_path="hockey/nhl",
        sport="hockey",
        logo_url=f"{_LOGO_BASE}/nhl.png&h=40&w=40",
    ),
    League(
        id="epl",
        display_name="EPL",
        feed_path="soccer/eng.1",
        sport="soccer",
        extended_range_days=EXTENDED_RANGE_DAYS,
    ),
)

LEAGUES: MappingProxyType = MappingProxyType({lg.id: lg for lg in _LEAGUES})


def get_league(league_id: str) -> League | None:
    """Get a league by id, or None if unknown."""
    return LEAGUES.get(league_id)


def all_league_ids() -> list[str]:
    """All known league ids, in registry order."""
    return list(LEAGUES.keys())


def resolve_leagues(league_ids: list[str]) -> list[League]:
    """Map ids to leagues, dropping unknown ids and duplicates.

    Order follows the input list, so the caller controls display order.
    """
    result: list[League] = []
    seen: set[str] = set()
    for league_id in league_ids:
        league = LEAGUES.get(league_id)
        if league is None:
            logger.warning("[REGISTRY] Unknown league '%s', ignoring", league_id)
            continue
        if league_id in seen:
            continue
        seen.add(league_id)
        result.append(league)
    return result
