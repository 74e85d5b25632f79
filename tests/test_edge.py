"""
Tests for edge.py - model edge, payout and comparisons.
"""

from pathlib import Path

import pytest

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import Golfer, SimulationStats, Matchup, BookOdds, TieRule
from selection import SelectionState
from odds import implied_probability
from edge import (
    edge_percent, potential_payout, edge_label, head_to_head, edge_board, matchup_edge,
    FAVORABLE, UNFAVORABLE,
)


class TestEdgePercent:
    """Tests for edge_percent."""

    def test_scenario_edge(self, scenario_matchup, scenario_roster):
        """Test the A vs B scenario: model -110 vs book +105."""
        state = SelectionState(scenario_roster, stake_amount=100)
        state.select_matchup(scenario_matchup)
        state.set_bookmaker("bookX")
        expected = (implied_probability("-110") - implied_probability("+105")) * 100
        assert edge_percent(state) == pytest.approx(expected)
        assert edge_percent(state) == pytest.approx(3.6, abs=0.05)

    def test_p2_edge_negative(self, scenario_matchup):
        state = SelectionState()
        state.select_matchup(scenario_matchup)
        state.set_pick_side(False)
        # Model -110 vs book -130 on B
        assert edge_percent(state) < 0

    def test_no_matchup(self):
        assert edge_percent(SelectionState()) is None

    def test_no_bookmaker(self):
        state = SelectionState()
        state.select_matchup(Matchup("A", "B", odds={"datagolf": BookOdds("-110", "-110")}))
        assert edge_percent(state) is None

    def test_missing_model_odds(self):
        """Test that edge is unavailable without the model line even with a book."""
        state = SelectionState()
        state.select_matchup(Matchup("A", "B", odds={"bookX": BookOdds("+105", "-130")}))
        assert state.quoted_odds == "+105"
        assert edge_percent(state) is None

    def test_missing_book_side(self):
        state = SelectionState()
        state.select_matchup(Matchup("A", "B", odds={
            "datagolf": BookOdds("-110", "-110"), "bookX": BookOdds(p1="+105"),
        }))
        state.set_pick_side(False)
        assert edge_percent(state) is None

    def test_invalid_odds_is_unavailable(self):
        state = SelectionState()
        state.select_matchup(Matchup("A", "B", odds={
            "datagolf": BookOdds("-110", "-110"), "bookX": BookOdds("even", "-130"),
        }))
        assert edge_percent(state) is None

    def test_custom_model_source(self):
        m = Matchup("A", "B", odds={"house": BookOdds("-110", "-110"), "bookX": BookOdds("+105", "-130")})
        state = SelectionState(model_source="house")
        state.select_matchup(m)
        assert state.available_bookmakers() == ["bookX"]
        assert edge_percent(state) == pytest.approx(3.6, abs=0.05)

    def test_matchup_edge_rejects_model_as_book(self, scenario_matchup):
        assert matchup_edge(scenario_matchup, "datagolf") is None


class TestPotentialPayout:
    """Tests for potential_payout."""

    def test_scenario_payout(self, scenario_matchup):
        state = SelectionState(stake_amount=100)
        state.select_matchup(scenario_matchup)
        assert potential_payout(state) == 105.00

    def test_negative_odds_payout(self, scenario_matchup):
        state = SelectionState(stake_amount=130)
        state.select_matchup(scenario_matchup)
        state.set_pick_side(False)
        assert potential_payout(state) == 100.00

    def test_no_stake(self, scenario_matchup):
        state = SelectionState()
        state.select_matchup(scenario_matchup)
        assert potential_payout(state) is None

    def test_no_quoted_odds(self):
        assert potential_payout(SelectionState(stake_amount=100)) is None

    def test_invalid_quoted_odds(self):
        state = SelectionState(stake_amount=100)
        state.select_matchup(Matchup("A", "B", odds={"bookX": BookOdds("0", "-130")}))
        assert potential_payout(state) is None


class TestEdgeLabel:
    """Tests for edge_label."""

    def test_labels(self):
        assert edge_label(3.6) == FAVORABLE
        assert edge_label(-1.0) == UNFAVORABLE
        assert edge_label(0.0) == UNFAVORABLE
        assert edge_label(None) == UNFAVORABLE


class TestHeadToHead:
    """Tests for head_to_head."""

    def test_rows(self):
        yours = Golfer("A", 1.5, SimulationStats(30.0, 5.0, 20.0))
        theirs = Golfer("B", 0.5, SimulationStats(25.0, 3.0, 24.0))
        rows = head_to_head(yours, theirs)
        assert [r.metric for r in rows] == ["SG: Total", "Top 10 %", "Win %", "Average Finish"]
        assert rows[0].difference == pytest.approx(1.0)
        assert rows[0].formatted() == ("1.50", "0.50")
        assert rows[1].formatted() == ("30.0%", "25.0%")


class TestEdgeBoard:
    """Tests for edge_board."""

    def test_sorted_desc_and_skips_model(self, scenario_matchup):
        rows = edge_board([scenario_matchup])
        assert len(rows) == 2
        assert [r.bookmaker for r in rows] == ["bookX", "bookX"]
        assert rows[0].pick == "A"
        assert rows[0].is_favorable
        assert rows[0].edge_percent >= rows[1].edge_percent
        assert rows[1].pick == "B"
        assert rows[1].opponent == "A"

    def test_skips_matchups_without_model(self):
        m = Matchup("A", "B", odds={"bookX": BookOdds("+105", "-130")})
        assert edge_board([m]) == []

    def test_skips_incomplete_sides(self):
        m = Matchup("A", "B", odds={"datagolf": BookOdds("-110", "-110"), "bookX": BookOdds(p1="+105")})
        rows = edge_board([m])
        assert len(rows) == 1
        assert rows[0].pick == "A"
