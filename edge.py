"""
Model edge and payout for a selection.
Invalid odds never raise here; the metric becomes None.
"""

import logging
from typing import Iterable, List, Optional

try:
    from .config import DEFAULT_MODEL_SOURCE, DEFAULT_PAYOUT_DECIMALS
    from .exceptions import InvalidOddsFormat, InvalidStake
    from .models import ComparisonRow, EdgeBoardRow, Golfer, Matchup
    from .odds import implied_probability, payout
    from .reconciler import key_of
    from .selection import SelectionState, available_bookmakers
except ImportError:
    from config import DEFAULT_MODEL_SOURCE, DEFAULT_PAYOUT_DECIMALS
    from exceptions import InvalidOddsFormat, InvalidStake
    from models import ComparisonRow, EdgeBoardRow, Golfer, Matchup
    from odds import implied_probability, payout
    from reconciler import key_of
    from selection import SelectionState, available_bookmakers

logger = logging.getLogger(__name__)

FAVORABLE = "Favorable Edge"
UNFAVORABLE = "Unfavorable Edge"


def _edge(model_odds: Optional[str], book_odds: Optional[str]) -> Optional[float]:
    if not model_odds or not book_odds:
        return None
    try:
        model_prob = implied_probability(model_odds)
        book_prob = implied_probability(book_odds)
    except InvalidOddsFormat as e:
        logger.warning(f"Edge unavailable: {e}")
        return None
    # Raw implied probabilities, vig not removed
    return (model_prob - book_prob) * 100


def matchup_edge(
    matchup: Matchup,
    bookmaker: str,
    pick_is_p1: bool = True,
    model_source: str = DEFAULT_MODEL_SOURCE,
) -> Optional[float]:
    """Edge in percentage points for one side of a matchup at one book."""
    model = matchup.odds.get(model_source)
    book = matchup.odds.get(bookmaker)
    if model is None or book is None or bookmaker == model_source:
        return None
    return _edge(model.side(pick_is_p1), book.side(pick_is_p1))


def edge_percent(selection: SelectionState) -> Optional[float]:
    """
    Model edge for the current selection.

    Model implied probability minus the bookmaker's, times 100. Positive
    means the book underprices the pick relative to the model. None when
    there is no matchup or bookmaker, or either odds entry is missing.
    """
    if selection.matchup is None or selection.bookmaker is None:
        return None
    return matchup_edge(selection.matchup, selection.bookmaker, selection.pick_is_p1, selection.model_source)


def potential_payout(selection: SelectionState, decimals: int = DEFAULT_PAYOUT_DECIMALS) -> Optional[float]:
    """Profit if the pick wins at the quoted odds, or None."""
    if selection.quoted_odds is None or selection.stake_amount is None:
        return None
    try:
        return payout(selection.quoted_odds, selection.stake_amount, decimals)
    except (InvalidOddsFormat, InvalidStake) as e:
        logger.warning(f"Payout unavailable: {e}")
        return None


def edge_label(edge: Optional[float]) -> str:
    return FAVORABLE if edge is not None and edge > 0 else UNFAVORABLE


def head_to_head(yours: Golfer, opponent: Golfer) -> List[ComparisonRow]:
    """Side-by-side stats for the two golfers in a matchup."""
    ys, os_ = yours.simulation_stats, opponent.simulation_stats
    return [
        ComparisonRow("SG: Total", yours.strokes_gained_total, opponent.strokes_gained_total, "{:.2f}"),
        ComparisonRow("Top 10 %", ys.top_10_percentage, os_.top_10_percentage, "{:.1f}%"),
        ComparisonRow("Win %", ys.win_percentage, os_.win_percentage, "{:.1f}%"),
        ComparisonRow("Average Finish", ys.average_finish, os_.average_finish, "{:.1f}"),
    ]


def edge_board(matchups: Iterable[Matchup], model_source: str = DEFAULT_MODEL_SOURCE) -> List[EdgeBoardRow]:
    """
    Every matchup side at every bookmaker, best edge first.
    Rows without a computable edge are left out.
    """
    rows = []
    for matchup in matchups:
        model = matchup.odds.get(model_source)
        if model is None:
            continue
        for book in available_bookmakers(matchup, model_source):
            entry = matchup.odds[book]
            for is_p1 in (True, False):
                edge = _edge(model.side(is_p1), entry.side(is_p1))
                if edge is None:
                    continue
                rows.append(EdgeBoardRow(
                    matchup_key=key_of(matchup),
                    pick=matchup.p1_name if is_p1 else matchup.p2_name,
                    opponent=matchup.p2_name if is_p1 else matchup.p1_name,
                    bookmaker=book,
                    odds=entry.side(is_p1),
                    model_odds=model.side(is_p1),
                    edge_percent=edge,
                ))

    rows.sort(key=lambda r: r.edge_percent, reverse=True)
    return rows
