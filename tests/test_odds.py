"""Tests for betting line formatting."""

from sportspage.core import Odds
from sportspage.services.odds import format_line, format_moneyline


class TestFormatLine:
    """Spread details and over/under line."""

    def test_none_odds(self):
        assert format_line(None) is None

    def test_details_and_over_under(self):
        odds = Odds(details="BOS -3.5", over_under=221.5)
        assert format_line(odds) == "BOS -3.5  ·  O/U 221.5"

    def test_integral_over_under_drops_decimal(self):
        assert format_line(Odds(over_under=47.0)) == "O/U 47"

    def test_details_only(self):
        assert format_line(Odds(details="EVEN")) == "EVEN"

    def test_nothing_displayable(self):
        assert format_line(Odds()) is None
        assert format_line(Odds(provider_name="ESPN BET", spread=-3.5)) is None


class TestFormatMoneyline:
    """[away, home] moneyline strings."""

    def test_both_sides(self):
        odds = Odds(away_moneyline=150, home_moneyline=-200)
        assert format_moneyline(odds) == ["+150", "-200"]

    def test_no_moneylines(self):
        assert format_moneyline(Odds()) is None

    def test_none_odds(self):
        assert format_moneyline(None) is None

    def test_missing_side_keeps_slot(self):
        assert format_moneyline(Odds(home_moneyline=-120)) == ["", "-120"]
        assert format_moneyline(Odds(away_moneyline=110)) == ["+110", ""]

    def test_zero_has_no_sign(self):
        assert format_moneyline(Odds(away_moneyline=0, home_moneyline=100)) == ["0", "+100"]
