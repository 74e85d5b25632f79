"""
Golf Matchup Edge
Reconciles golf matchup odds with golfer statistics and prices the model edge.
"""

__version__ = "1.0.0"
__author__ = "Eric"

from .models import (
    Golfer, SimulationStats, BookOdds, Matchup, MatchupFeed, TieRule,
    SelectionSnapshot, ComparisonRow, EdgeBoardRow, EngineView
)
from .config import Config, get_config, DEFAULT_MODEL_SOURCE
from .exceptions import (
    MatchupEdgeError, FeedUnavailable, InvalidOddsFormat, InvalidStake,
    UnknownBookmaker, NoResolvableGolfer
)
from .odds import implied_probability, payout
from .reconciler import find_golfer, matchup_is_resolvable, filter_resolvable, key_of, FilterResult
from .selection import SelectionState, available_bookmakers
from .edge import edge_percent, potential_payout, edge_board, head_to_head
from .engine import MatchupEngine

__all__ = [
    # Models
    "Golfer", "SimulationStats", "BookOdds", "Matchup", "MatchupFeed", "TieRule",
    "SelectionSnapshot", "ComparisonRow", "EdgeBoardRow", "EngineView",
    # Config
    "Config", "get_config", "DEFAULT_MODEL_SOURCE",
    # Errors
    "MatchupEdgeError", "FeedUnavailable", "InvalidOddsFormat", "InvalidStake",
    "UnknownBookmaker", "NoResolvableGolfer",
    # Core
    "implied_probability", "payout",
    "find_golfer", "matchup_is_resolvable", "filter_resolvable", "key_of", "FilterResult",
    "SelectionState", "available_bookmakers",
    "edge_percent", "potential_payout", "edge_board", "head_to_head",
    "MatchupEngine",
]
