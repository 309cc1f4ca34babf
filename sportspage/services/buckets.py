"""Date bucketing for a league's scoreboard.

Two policies, picked by league.extended_range_days:

Standard leagues (0) always get three buckets, YESTERDAY / TODAY /
TOMORROW. Anything dated before yesterday collapses into YESTERDAY and
anything after tomorrow into TOMORROW, so every game lands in exactly one
bucket even when the feed returns a wider range than was asked for.

Extended-range leagues get one bucket per calendar day, ordered by date.
The reference day is labeled TODAY; other days get 'WED, OCT 21' style
labels.

Dates are compared in reference_now's timezone. The bucketer never
fetches; the caller must already hold the full window.
"""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from sportspage.core import Game, League
from sportspage.utilities.tz import format_day_label, local_date

YESTERDAY = "YESTERDAY"
TODAY = "TODAY"
TOMORROW = "TOMORROW"

STANDARD_LABELS = (YESTERDAY, TODAY, TOMORROW)


def game_date(game: Game, reference_now: datetime) -> date:
    """Calendar date of a game; undated games count as the reference day."""
    if game.scheduled_at is None:
        return reference_now.date()
    return local_date(game.scheduled_at, reference_now)


def _standard_label(day: date, today: date) -> str:
    if day == today:
        return TODAY
    if day < today:
        # Yesterday, or older games collapsed into it
        return YESTERDAY
    return TOMORROW


def _bucket_standard(games: Iterable[Game], reference_now: datetime) -> dict[str, list[Game]]:
    today = reference_now.date()
    buckets: dict[str, list[Game]] = {label: [] for label in STANDARD_LABELS}
    for game in games:
        buckets[_standard_label(game_date(game, reference_now), today)].append(game)
    return buckets


def _bucket_by_day(games: Iterable[Game], reference_now: datetime) -> dict[str, list[Game]]:
    today = reference_now.date()
    by_day: dict[date, list[Game]] = {}
    for game in games:
        by_day.setdefault(game_date(game, reference_now), []).append(game)

    return {
        TODAY if day == today else format_day_label(day): by_day[day]
        for day in sorted(by_day)
    }


def bucket(games: Iterable[Game], league: League, reference_now: datetime) -> dict[str, list[Game]]:
    """Group games into ordered date buckets.

    Within a bucket, games keep the order they arrived in.
    """
    if league.is_extended_range:
        return _bucket_by_day(games, reference_now)
    return _bucket_standard(games, reference_now)


def fetch_dates(league: League, reference_now: datetime) -> list[date]:
    """Calendar days whose scoreboards cover the league's window.

    Standard leagues need yesterday..tomorrow; extended-range leagues
    need +/- extended_range_days.
    """
    span = league.extended_range_days if league.is_extended_range else 1
    today = reference_now.date()
    return [today + timedelta(days=offset) for offset in range(-span, span + 1)]
