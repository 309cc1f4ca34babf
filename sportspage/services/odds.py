"""Betting line display strings."""

from sportspage.core import Odds

LINE_SEPARATOR = "  ·  "


def _format_number(value: float) -> str:
    # 47.0 -> "47", 47.5 -> "47.5"
    return str(int(value)) if float(value).is_integer() else str(value)


def format_line(odds: Odds | None) -> str | None:
    """Spread details and over/under, e.g. "BOS -3.5  ·  O/U 221.5".

    Returns None when there is nothing to show.
    """
    if odds is None:
        return None

    parts = []
    if odds.details:
        parts.append(odds.details)
    if odds.over_under:
        parts.append(f"O/U {_format_number(odds.over_under)}")
    return LINE_SEPARATOR.join(parts) if parts else None


def format_moneyline_value(value: int) -> str:
    return f"+{value}" if value > 0 else str(value)


def format_moneyline(odds: Odds | None) -> list[str] | None:
    """[away, home] moneylines, e.g. ["+150", "-200"].

    A missing side is an empty string so index 0 is always away and
    index 1 always home. None when neither side has a line.
    """
    if odds is None or (odds.away_moneyline is None and odds.home_moneyline is None):
        return None

    return [
        format_moneyline_value(odds.away_moneyline) if odds.away_moneyline is not None else "",
        format_moneyline_value(odds.home_moneyline) if odds.home_moneyline is not None else "",
    ]
