"""
Matchup engine: ties the odds feed, the golfer roster and the selection together.

Feed and roster arrive independently. Every arrival re-runs reconciliation,
and a selection whose matchup vanished from the filtered list is cleared.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

try:
    from .config import Config, get_config, get_model_source
    from .edge import edge_board, edge_percent, head_to_head, potential_payout
    from .exceptions import FeedUnavailable, InvalidStake, MatchupEdgeError, NoResolvableGolfer
    from .models import ComparisonRow, EdgeBoardRow, EngineView, Golfer, Matchup, MatchupFeed
    from .reconciler import FilterResult, RosterIndex, filter_resolvable, find_by_key, key_of, KEY_SEPARATOR
    from .selection import SelectionState
except ImportError:
    from config import Config, get_config, get_model_source
    from edge import edge_board, edge_percent, head_to_head, potential_payout
    from exceptions import FeedUnavailable, InvalidStake, MatchupEdgeError, NoResolvableGolfer
    from models import ComparisonRow, EdgeBoardRow, EngineView, Golfer, Matchup, MatchupFeed
    from reconciler import FilterResult, RosterIndex, filter_resolvable, find_by_key, key_of, KEY_SEPARATOR
    from selection import SelectionState

logger = logging.getLogger(__name__)

FEED = "feed"
ROSTER = "roster"


class MatchupEngine:
    """Reconciles provider results and owns the selection."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or get_config()
        self.model_source = get_model_source(self.config)
        self.selection = SelectionState(model_source=self.model_source)
        try:
            self.selection.set_stake_amount(self.config.default_stake)
        except InvalidStake as e:
            logger.warning(f"Default stake ignored: {e}")
        self._feed: Optional[MatchupFeed] = None
        self._roster: Tuple[Golfer, ...] = ()
        self._result = FilterResult()
        self._sequences: Dict[str, Optional[int]] = {FEED: None, ROSTER: None}
        self.status = ""

    # ------------------------------------------------------------------
    # Provider input
    # ------------------------------------------------------------------

    def _is_stale(self, provider: str, sequence: Optional[int]) -> bool:
        """Latest wins: results older than the last one applied are dropped."""
        if sequence is None:
            return False
        last = self._sequences[provider]
        if last is not None and sequence < last:
            logger.warning(f"Ignoring stale {provider} result #{sequence} (latest applied #{last})")
            return True
        return False

    def _commit(self, provider: str, sequence: Optional[int]) -> None:
        """Record a sequence number once its result has been parsed."""
        if sequence is not None:
            self._sequences[provider] = sequence

    def update_feed(self, response: Union[MatchupFeed, Dict[str, Any]], sequence: Optional[int] = None) -> bool:
        """
        Apply a feed response. A string match_list becomes the status
        message with no matchups.

        Returns:
            False if the response was stale and ignored
        """
        if self._is_stale(FEED, sequence):
            return False

        feed = response if isinstance(response, MatchupFeed) else MatchupFeed.from_response(response)
        self._commit(FEED, sequence)
        self._feed = feed

        if feed.is_available:
            self.status = ""
            logger.info(f"Feed for {feed.event_name or 'unknown event'}: {len(feed.matchups)} matchups")
        else:
            self.status = str(FeedUnavailable(feed.unavailable_reason))
            logger.info(f"Feed unavailable: {self.status}")

        self._reconcile()
        return True

    def feed_failed(self, message: str, sequence: Optional[int] = None) -> bool:
        """Record a failure reported by the feed provider."""
        if self._is_stale(FEED, sequence):
            return False
        self._commit(FEED, sequence)
        logger.error(f"Matchup feed failed: {message}")
        previous = self._feed or MatchupFeed()
        self._feed = MatchupFeed(
            event_name=previous.event_name,
            last_updated=previous.last_updated,
            market=previous.market,
            unavailable_reason=message,
        )
        self.status = message
        self._reconcile()
        return True

    def update_roster(self, golfers: Iterable[Union[Golfer, Dict[str, Any]]], sequence: Optional[int] = None) -> bool:
        """
        Apply a golfer roster. An empty roster means golfer data has not
        loaded yet; nothing resolves until it does.
        """
        if self._is_stale(ROSTER, sequence):
            return False
        roster = tuple(g if isinstance(g, Golfer) else Golfer.from_dict(g) for g in golfers)
        self._commit(ROSTER, sequence)
        self._roster = roster
        logger.info(f"Roster updated: {len(self._roster)} golfers")
        self._reconcile()
        return True

    def _reconcile(self) -> None:
        if self._feed is None or not self._roster:
            self._result = FilterResult()
        else:
            self._result = filter_resolvable(self._feed.matchups, self._roster)

        key = self.selection.key
        current = find_by_key(self._result.resolved, key) if key is not None else None
        if key is not None and current is None:
            logger.info(f"Selected matchup {key} no longer available, clearing selection")
            self.selection.clear()

        # A vanished selection is cleared before the roster swap
        self.selection.set_roster(self._roster)
        if current is not None:
            self.selection.refresh_matchup(current)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_matchup(self, matchup: Matchup) -> None:
        self.selection.select_matchup(matchup)

    def select_key(self, key: str) -> Matchup:
        """Select a filtered matchup by its 'p1|p2|ties' key."""
        matchup = find_by_key(self._result.resolved, key)
        if matchup is None:
            index = RosterIndex(self._roster)
            names = [n for n in key.split(KEY_SEPARATOR)[:2] if n not in index]
            if not names:
                raise MatchupEdgeError(f"Matchup not available: {key}")
            raise NoResolvableGolfer(names, f"Matchup not available: {key}")
        self.selection.select_matchup(matchup)
        return matchup

    def set_bookmaker(self, bookmaker: str) -> None:
        self.selection.set_bookmaker(bookmaker)

    def set_pick_side(self, is_p1: bool) -> None:
        self.selection.set_pick_side(is_p1)

    def set_stake_amount(self, value: Union[str, int, float]) -> None:
        self.selection.set_stake_amount(value)

    def clear_selection(self) -> None:
        self.selection.clear()

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    @property
    def roster(self) -> Tuple[Golfer, ...]:
        return self._roster

    @property
    def filtered_matchups(self) -> Tuple[Matchup, ...]:
        return self._result.resolved

    @property
    def unresolved_names(self) -> Tuple[str, ...]:
        return self._result.unresolved_names

    @property
    def matchup_keys(self) -> List[str]:
        return [key_of(m) for m in self._result.resolved]

    def edge_percent(self) -> Optional[float]:
        return edge_percent(self.selection)

    def potential_payout(self) -> Optional[float]:
        return potential_payout(self.selection, self.config.payout_decimals)

    def head_to_head(self) -> List[ComparisonRow]:
        """Comparison rows with your pick first; empty until both golfers resolve."""
        yours, opponent = self.selection.your_golfer, self.selection.opponent_golfer
        if yours is None or opponent is None:
            return []
        return head_to_head(yours, opponent)

    def edge_board(self) -> List[EdgeBoardRow]:
        return edge_board(self._result.resolved, self.model_source)

    def view(self) -> EngineView:
        """Snapshot for the presentation layer."""
        feed = self._feed or MatchupFeed()
        return EngineView(
            event_name=feed.event_name,
            last_updated=feed.last_updated,
            market=feed.market,
            filtered_matchups=self._result.resolved,
            selection=self.selection.snapshot(),
            edge_percent=self.edge_percent(),
            potential_payout=self.potential_payout(),
            your_golfer=self.selection.your_golfer,
            opponent_golfer=self.selection.opponent_golfer,
            status=self.status,
            unresolved_names=self._result.unresolved_names,
        )
