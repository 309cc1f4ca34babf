"""Tests for favorite keys, FavoriteSet and the favorite split."""

import pytest

from sportspage.core import Game, TeamGameEntry
from sportspage.services.favorites import (
    FavoriteSet,
    favorite_key,
    parse_favorite_key,
    split,
)


def game(game_id: str, home_id: str, away_id: str) -> Game:
    return Game(
        id=game_id,
        name=game_id,
        scheduled_at=None,
        teams=(
            TeamGameEntry(team_id=home_id, abbreviation="H", display_name="H", short_name="H", home_away="home"),
            TeamGameEntry(team_id=away_id, abbreviation="A", display_name="A", short_name="A", home_away="away"),
        ),
    )


class TestFavoriteKeys:
    def test_build_and_parse(self):
        key = favorite_key("nhl", "30")
        assert key == "nhl:30"
        assert parse_favorite_key(key) == ("nhl", "30")

    @pytest.mark.parametrize("bad", ["", "nhl", "nhl:", ":30"])
    def test_malformed(self, bad):
        assert parse_favorite_key(bad) is None


class TestFavoriteSet:
    """Set semantics with explicit list serialization."""

    def test_duplicates_collapse(self):
        favs = FavoriteSet(["nhl:30", "nhl:30", "nba:2"])
        assert len(favs) == 2
        assert favs.to_list() == ["nba:2", "nhl:30"]

    def test_toggle(self):
        favs = FavoriteSet()
        assert favs.toggle("nhl:30") is True
        assert "nhl:30" in favs
        assert favs.toggle("nhl:30") is False
        assert "nhl:30" not in favs

    def test_add_rejects_malformed(self):
        with pytest.raises(ValueError):
            FavoriteSet().add("garbage")

    def test_remove_missing_is_noop(self):
        favs = FavoriteSet(["nhl:30"])
        favs.remove("nba:1")
        assert favs.to_list() == ["nhl:30"]

    def test_from_list_skips_junk(self):
        favs = FavoriteSet.from_list(["nhl:30", 42, "junk", None, "epl:359"])
        assert favs.to_list() == ["epl:359", "nhl:30"]

    def test_from_non_list(self):
        assert len(FavoriteSet.from_list({"nhl:30": True})) == 0

    def test_for_league(self):
        favs = FavoriteSet(["nhl:30", "nhl:25", "nba:30"])
        assert favs.for_league("nhl") == {"30", "25"}

    def test_copy_is_independent(self):
        favs = FavoriteSet(["nhl:30"])
        snapshot = favs.copy()
        favs.add("nhl:1")
        assert snapshot.to_list() == ["nhl:30"]


class TestSplit:
    """Strict bipartition by favorite membership."""

    def test_bipartition(self, nhl):
        games = [game("g1", "30", "25"), game("g2", "1", "2"), game("g3", "4", "30"), game("g4", "5", "6")]
        result = split(games, nhl, FavoriteSet(["nhl:30"]))

        assert [g.id for g in result.favorites] == ["g1", "g3"]
        assert [g.id for g in result.others] == ["g2", "g4"]
        fav_ids = {g.id for g in result.favorites}
        other_ids = {g.id for g in result.others}
        assert fav_ids | other_ids == {g.id for g in games}
        assert fav_ids & other_ids == set()

    def test_same_team_id_in_other_league_does_not_match(self, nhl):
        result = split([game("g1", "30", "25")], nhl, {"nba:30"})
        assert result.favorites == ()
        assert len(result.others) == 1

    def test_accepts_plain_set(self, nhl):
        result = split([game("g1", "30", "25")], nhl, {"nhl:25"})
        assert [g.id for g in result.favorites] == ["g1"]

    def test_game_without_teams_is_other(self, nhl):
        bare = Game(id="x", name="x", scheduled_at=None)
        result = split([bare], nhl, FavoriteSet(["nhl:30"]))
        assert result.others == (bare,)

    def test_empty_team_id_never_matches(self, nhl):
        result = split([game("g1", "", "2")], nhl, {"nhl:"})
        assert result.favorites == ()

    def test_no_favorites(self, nhl):
        games = [game("g1", "1", "2"), game("g2", "3", "4")]
        result = split(games, nhl, FavoriteSet())
        assert result.favorites == ()
        assert list(result.others) == games
