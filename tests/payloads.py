"""Raw ESPN payload builders for tests."""


def make_competitor(
    team_id: str,
    abbr: str,
    home_away: str,
    score: str | None = None,
    linescores: list | None = None,
    winner: bool | None = None,
) -> dict:
    data = {
        "homeAway": home_away,
        "team": {
            "id": team_id,
            "abbreviation": abbr,
            "displayName": f"{abbr} Team",
            "shortDisplayName": abbr.title(),
        },
        "records": [{"summary": "10-5"}],
    }
    if score is not None:
        data["score"] = score
    if linescores is not None:
        data["linescores"] = [{"value": v} for v in linescores]
    if winner is not None:
        data["winner"] = winner
    return data


def make_event(
    event_id: str,
    date: str,
    home: tuple[str, str] = ("1", "HOM"),
    away: tuple[str, str] = ("2", "AWY"),
    state: str = "pre",
    completed: bool = False,
    **competition_extra,
) -> dict:
    """Minimal scoreboard event; extra kwargs land on the competition."""
    competition = {
        "status": {"type": {"state": state, "completed": completed, "shortDetail": "7:00 PM"}},
        "venue": {"fullName": "Home Arena"},
        "competitors": [
            make_competitor(home[0], home[1], "home"),
            make_competitor(away[0], away[1], "away"),
        ],
    }
    competition.update(competition_extra)
    return {
        "id": event_id,
        "name": f"{away[1]} at {home[1]}",
        "date": date,
        "competitions": [competition],
    }


def make_standings_entry(team_id: str, abbr: str, **stats) -> dict:
    return {
        "team": {
            "id": team_id,
            "abbreviation": abbr,
            "shortDisplayName": abbr.title(),
            "logos": [{"href": f"https://logos.example/{abbr}.png"}],
        },
        "stats": [{"name": name, "displayValue": value} for name, value in stats.items()],
    }


def make_standings(groups: dict[str, list[dict]]) -> dict:
    return {
        "children": [
            {"name": name, "standings": {"entries": entries}} for name, entries in groups.items()
        ]
    }


def make_teams(teams: list[tuple[str, str]]) -> dict:
    return {
        "sports": [
            {
                "leagues": [
                    {
                        "teams": [
                            {
                                "team": {
                                    "id": team_id,
                                    "abbreviation": abbr,
                                    "shortDisplayName": abbr.title(),
                                    "logos": [{"href": f"https://logos.example/{abbr}.png"}],
                                }
                            }
                            for team_id, abbr in teams
                        ]
                    }
                ]
            }
        ]
    }

