"""
Shared pytest fixtures for Golf Matchup Edge tests.
"""

import json
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import Golfer, SimulationStats, Matchup, BookOdds, TieRule


ENV_KEYS = (
    "GOLF_EDGE_MODEL_SOURCE",
    "GOLF_EDGE_DEFAULT_STAKE",
    "GOLF_EDGE_PAYOUT_DECIMALS",
    "GOLF_EDGE_LOG_LEVEL",
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env(monkeypatch):
    """Environment with no GOLF_EDGE_* settings."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def mock_env_custom():
    """Environment with every setting overridden."""
    with patch.dict(os.environ, {
        "GOLF_EDGE_MODEL_SOURCE": "pinnacle_model",
        "GOLF_EDGE_DEFAULT_STAKE": "25",
        "GOLF_EDGE_PAYOUT_DECIMALS": "1",
        "GOLF_EDGE_LOG_LEVEL": "debug",
    }, clear=False):
        yield


def make_golfer(name, sg=0.0, top10=0.0, win=0.0, avg=0.0):
    return Golfer(
        name=name,
        strokes_gained_total=sg,
        simulation_stats=SimulationStats(top_10_percentage=top10, win_percentage=win, average_finish=avg),
    )


@pytest.fixture
def roster():
    """Golfer roster from the statistics provider."""
    return [
        make_golfer("Scottie Scheffler", 2.85, 55.0, 20.1, 8.2),
        make_golfer("Jon Rahm", 1.90, 38.5, 9.4, 14.0),
        make_golfer("Rory McIlroy", 2.10, 42.0, 11.2, 12.5),
        make_golfer("Xander Schauffele", 1.75, 35.2, 7.5, 15.1),
    ]


@pytest.fixture
def scenario_roster():
    return [make_golfer("A", 1.0, 30.0, 5.0, 20.0), make_golfer("B", 0.5, 25.0, 3.0, 24.0)]


@pytest.fixture
def scenario_matchup():
    """A vs B with a model line and one book."""
    return Matchup(
        p1_name="A",
        p2_name="B",
        ties=TieRule.VOID,
        odds={
            "datagolf": BookOdds(p1="-110", p2="-110"),
            "bookX": BookOdds(p1="+105", p2="-130"),
        },
    )


@pytest.fixture
def sample_feed_response():
    """Sample matchup feed response."""
    return {
        "event_name": "The Masters",
        "last_updated": "2026-04-08 14:05:00 UTC",
        "market": "tournament_matchups",
        "match_list": [
            {
                "p1_player_name": "Scottie Scheffler",
                "p2_player_name": "Rory McIlroy",
                "ties": "void",
                "odds": {
                    "datagolf": {"p1": "-160", "p2": "+140"},
                    "draftkings": {"p1": "-150", "p2": "+125"},
                    "fanduel": {"p1": "-145", "p2": "+120"},
                },
            },
            {
                "p1_player_name": " jon RAHM ",
                "p2_player_name": "Xander Schauffele",
                "ties": "separate bet offered",
                "odds": {
                    "bet365": {"p1": "+110", "p2": "-105", "tie": "+1800"},
                    "datagolf": {"p1": "-102", "p2": "+102"},
                },
            },
            {
                "p1_player_name": "Ludvig Aberg",
                "p2_player_name": "Rory McIlroy",
                "ties": "void",
                "odds": {
                    "datagolf": {"p1": "+115", "p2": "-115"},
                    "draftkings": {"p1": "+120", "p2": "-140"},
                },
            },
            {
                "p1_player_name": "Ludvig Aberg",
                "p2_player_name": "Tommy Fleetwood",
                "ties": "void",
                "odds": {
                    "datagolf": {"p1": "-125", "p2": "+105"},
                },
            },
        ],
    }


@pytest.fixture
def feed_file(temp_dir, sample_feed_response):
    path = temp_dir / "feed.json"
    path.write_text(json.dumps(sample_feed_response), encoding="utf-8")
    return path


@pytest.fixture
def roster_file(temp_dir):
    path = temp_dir / "roster.json"
    path.write_text(json.dumps({"golfers": [
        {"name": "Scottie Scheffler", "strokesGainedTotal": 2.85,
         "simulationStats": {"top10Percentage": 55.0, "winPercentage": 20.1, "averageFinish": 8.2}},
        {"name": "Jon Rahm", "strokesGainedTotal": 1.9,
         "simulationStats": {"top10Percentage": 38.5, "winPercentage": 9.4, "averageFinish": 14.0}},
        {"name": "Rory McIlroy", "strokesGainedTotal": 2.1,
         "simulationStats": {"top10Percentage": 42.0, "winPercentage": 11.2, "averageFinish": 12.5}},
        {"name": "Xander Schauffele", "strokesGainedTotal": 1.75,
         "simulationStats": {"top10Percentage": 35.2, "winPercentage": 7.5, "averageFinish": 15.1}},
    ]}), encoding="utf-8")
    return path
