"""Box scores and stat leader lines for favorite games.

Both builders need a well-formed game (one home and one away entry) and
return None otherwise, so callers can skip the section without
special-casing raw data.
"""

import re
from dataclasses import dataclass

from sportspage.core import Game, TeamGameEntry
from sportspage.services.periods import labels

MAX_LEADER_CATEGORIES = 3
EMPTY_CELL = "-"

_CAMEL_BOUNDARY = re.compile(r"([A-Z])")


@dataclass(frozen=True)
class BoxScoreLine:
    """One team's row: abbreviation, per-period cells, total."""

    abbreviation: str
    cells: tuple[str, ...]
    total: str


@dataclass(frozen=True)
class BoxScore:
    """Period-by-period score table, away row first."""

    headers: tuple[str, ...]
    away: BoxScoreLine
    home: BoxScoreLine


def _cell(value: int | float | None) -> str:
    if value is None:
        return EMPTY_CELL
    return str(value)


def _line(entry: TeamGameEntry, period_count: int) -> BoxScoreLine:
    scores = list(entry.period_scores) + [None] * (period_count - len(entry.period_scores))
    return BoxScoreLine(
        abbreviation=entry.abbreviation,
        cells=tuple(_cell(v) for v in scores[:period_count]),
        total=entry.score or "",
    )


def build_box_score(game: Game, sport: str) -> BoxScore | None:
    """Box score for a live or completed game with period data.

    Returns None for games that have not started, have no period scores,
    or lack a home or away entry.
    """
    matchup = game.matchup
    if matchup is None or game.is_not_started:
        return None

    away, home = matchup
    period_count = max(len(away.period_scores), len(home.period_scores))
    if period_count == 0:
        return None

    return BoxScore(
        headers=tuple(labels(sport, period_count)),
        away=_line(away, period_count),
        home=_line(home, period_count),
    )


def humanize_category(category: str) -> str:
    """'passingYards' -> 'passing Yards'."""
    return _CAMEL_BOUNDARY.sub(r" \1", category).strip()


def leader_lines(game: Game) -> list[str] | None:
    """'passing Yards: J. Allen 285' lines for the first three categories.

    Only completed, well-formed games have leaders worth showing.
    """
    if game.matchup is None or not game.is_completed:
        return None

    lines = []
    for leader in game.leaders[:MAX_LEADER_CATEGORIES]:
        top = leader.top_performer
        if top is None:
            continue
        lines.append(f"{humanize_category(leader.category)}: {top.name} {top.value}".rstrip())
    return lines
