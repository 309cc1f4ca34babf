"""Standings ordering and display columns.

Ordering dispatches on the league's sport tag:
- hockey: points descending, when both rows carry points
- everything else: win percentage descending, then wins descending

Sorting is stable, so rows that compare equal keep feed order.
"""

import math
from functools import cmp_to_key

from sportspage.core import StandingsGroup, StandingsRow


def _to_float(value: str | None) -> float | None:
    """Parse a stat; empty, unparseable and non-finite values are None."""
    if value is None or value == "":
        return None
    try:
        num = float(value)
    except ValueError:
        return None
    return num if math.isfinite(num) else None


def _to_int(value: str | None) -> int | None:
    num = _to_float(value)
    return int(num) if num is not None else None


def _compare_default(a: StandingsRow, b: StandingsRow) -> int:
    pct_a = _to_float(a.win_pct) or 0.0
    pct_b = _to_float(b.win_pct) or 0.0
    if pct_a != pct_b:
        return -1 if pct_a > pct_b else 1

    wins_a = _to_int(a.wins) or 0
    wins_b = _to_int(b.wins) or 0
    return wins_b - wins_a


def _compare_hockey(a: StandingsRow, b: StandingsRow) -> int:
    pts_a = _to_int(a.points)
    pts_b = _to_int(b.points)
    if pts_a is None or pts_b is None:
        return _compare_default(a, b)
    return pts_b - pts_a


_COMPARATORS = {
    "hockey": _compare_hockey,
}


def rank(rows: list[StandingsRow] | tuple[StandingsRow, ...], sport: str) -> list[StandingsRow]:
    """Return rows in standings order for the sport."""
    comparator = _COMPARATORS.get(sport, _compare_default)
    return sorted(rows, key=cmp_to_key(comparator))


def rank_groups(groups: list[StandingsGroup], sport: str) -> list[StandingsGroup]:
    """Rank the rows of every group; group order is untouched."""
    return [StandingsGroup(name=g.name, rows=tuple(rank(g.rows, sport))) for g in groups]


# (header, StandingsRow attribute) per sport
_COLUMNS: dict[str, list[tuple[str, str]]] = {
    "basketball": [
        ("W", "wins"),
        ("L", "losses"),
        ("PCT", "win_pct"),
        ("GB", "games_behind"),
        ("L10", "last_ten"),
        ("STRK", "streak"),
    ],
    "football": [
        ("W", "wins"),
        ("L", "losses"),
        ("T", "ties"),
        ("PCT", "win_pct"),
        ("PF", "points_for"),
        ("PA", "points_against"),
    ],
    "hockey": [
        ("W", "wins"),
        ("L", "losses"),
        ("OTL", "ot_losses"),
        ("PTS", "points"),
        ("L10", "last_ten"),
        ("STRK", "streak"),
    ],
    "soccer": [
        ("W", "wins"),
        ("L", "losses"),
        ("D", "draws"),
        ("PTS", "points"),
        ("GF", "points_for"),
        ("GA", "points_against"),
        ("GD", "point_differential"),
    ],
}
_COLUMNS["baseball"] = _COLUMNS["basketball"]

_DEFAULT_COLUMNS = [("W", "wins"), ("L", "losses")]


def standings_columns(sport: str) -> list[tuple[str, str]]:
    """Column headers and row attributes shown for a sport's standings."""
    return list(_COLUMNS.get(sport, _DEFAULT_COLUMNS))
