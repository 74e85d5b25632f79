"""
Selection state for the matchup tool.

Holds the chosen matchup, the picked side, the chosen bookmaker and the
stake. The quoted odds are derived from (matchup, bookmaker, side) and are
recomputed inside every mutator; nothing outside this class can set them.
"""

import logging
from typing import List, Optional, Sequence, Union

try:
    from .config import DEFAULT_MODEL_SOURCE
    from .exceptions import UnknownBookmaker
    from .models import Golfer, Matchup, SelectionSnapshot, TieRule
    from .odds import validate_stake
    from .reconciler import RosterIndex, key_of
except ImportError:
    from config import DEFAULT_MODEL_SOURCE
    from exceptions import UnknownBookmaker
    from models import Golfer, Matchup, SelectionSnapshot, TieRule
    from odds import validate_stake
    from reconciler import RosterIndex, key_of

logger = logging.getLogger(__name__)


def available_bookmakers(matchup: Optional[Matchup], model_source: str = DEFAULT_MODEL_SOURCE) -> List[str]:
    """Selectable bookmakers for a matchup, in feed order, without the model source."""
    if matchup is None:
        return []
    return [book for book in matchup.odds if book != model_source]


class SelectionState:
    """The user's current matchup, side, bookmaker and stake."""

    def __init__(
        self,
        roster: Sequence[Golfer] = (),
        model_source: str = DEFAULT_MODEL_SOURCE,
        stake_amount: Optional[float] = None,
    ):
        self.model_source = model_source
        self._index = RosterIndex(roster)
        self._matchup: Optional[Matchup] = None
        self._pick_is_p1 = True
        self._bookmaker: Optional[str] = None
        self._quoted_odds: Optional[str] = None
        self._p1_golfer: Optional[Golfer] = None
        self._p2_golfer: Optional[Golfer] = None
        self._stake_amount: Optional[float] = None
        if stake_amount is not None:
            self.set_stake_amount(stake_amount)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def matchup(self) -> Optional[Matchup]:
        return self._matchup

    @property
    def pick_is_p1(self) -> bool:
        return self._pick_is_p1

    @property
    def bookmaker(self) -> Optional[str]:
        return self._bookmaker

    @property
    def quoted_odds(self) -> Optional[str]:
        """Odds for the picked side at the chosen bookmaker."""
        return self._quoted_odds

    @property
    def stake_amount(self) -> Optional[float]:
        return self._stake_amount

    @property
    def is_empty(self) -> bool:
        return self._matchup is None

    @property
    def key(self) -> Optional[str]:
        return key_of(self._matchup) if self._matchup else None

    @property
    def p1_golfer(self) -> Optional[Golfer]:
        return self._p1_golfer

    @property
    def p2_golfer(self) -> Optional[Golfer]:
        return self._p2_golfer

    @property
    def your_golfer(self) -> Optional[Golfer]:
        return self._p1_golfer if self._pick_is_p1 else self._p2_golfer

    @property
    def opponent_golfer(self) -> Optional[Golfer]:
        return self._p2_golfer if self._pick_is_p1 else self._p1_golfer

    @property
    def pick_name(self) -> Optional[str]:
        if not self._matchup:
            return None
        return self._matchup.p1_name if self._pick_is_p1 else self._matchup.p2_name

    @property
    def tie_odds(self) -> Optional[str]:
        """Tie price at the chosen book when ties are a separate bet."""
        if not self._matchup or self._matchup.ties is not TieRule.SEPARATE_BET or not self._bookmaker:
            return None
        entry = self._matchup.odds.get(self._bookmaker)
        return entry.tie if entry else None

    def available_bookmakers(self) -> List[str]:
        return available_bookmakers(self._matchup, self.model_source)

    def snapshot(self) -> SelectionSnapshot:
        return SelectionSnapshot(
            matchup=self._matchup,
            pick_is_p1=self._pick_is_p1,
            bookmaker=self._bookmaker,
            quoted_odds=self._quoted_odds,
            stake_amount=self._stake_amount,
            tie_odds=self.tie_odds,
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def select_matchup(self, matchup: Matchup) -> None:
        """Choose a matchup: pick player 1 and the first available bookmaker."""
        books = available_bookmakers(matchup, self.model_source)
        self._matchup = matchup
        self._pick_is_p1 = True
        self._bookmaker = books[0] if books else None
        self._resolve_golfers()
        self._recompute()
        logger.debug(f"Selected {key_of(matchup)} at {self._bookmaker or 'no bookmaker'}")

    def set_bookmaker(self, bookmaker: str) -> None:
        """Choose a bookmaker offered by the selected matchup."""
        books = self.available_bookmakers()
        if bookmaker not in books:
            raise UnknownBookmaker(bookmaker, books)
        self._bookmaker = bookmaker
        self._recompute()

    def set_pick_side(self, is_p1: bool) -> None:
        """Pick player 1 (True) or player 2 (False)."""
        self._pick_is_p1 = bool(is_p1)
        self._recompute()

    def set_stake_amount(self, value: Union[str, int, float]) -> None:
        """Store a validated stake; the previous stake stays on InvalidStake."""
        self._stake_amount = validate_stake(value)

    def set_roster(self, roster: Sequence[Golfer]) -> None:
        """Swap in a new roster and re-resolve the selected golfers."""
        self._index = RosterIndex(roster)
        self._resolve_golfers()

    def refresh_matchup(self, matchup: Matchup) -> None:
        """
        Point at a newer snapshot of the selected matchup.
        Side is kept; bookmaker is kept when still offered.
        """
        books = available_bookmakers(matchup, self.model_source)
        self._matchup = matchup
        if self._bookmaker not in books:
            self._bookmaker = books[0] if books else None
        self._resolve_golfers()
        self._recompute()

    def clear(self) -> None:
        """Back to empty. The stake is kept."""
        self._matchup = None
        self._pick_is_p1 = True
        self._bookmaker = None
        self._p1_golfer = None
        self._p2_golfer = None
        self._recompute()

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def _resolve_golfers(self) -> None:
        if self._matchup is None:
            self._p1_golfer = self._p2_golfer = None
            return
        self._p1_golfer = self._index.get(self._matchup.p1_name)
        self._p2_golfer = self._index.get(self._matchup.p2_name)
        if self._p1_golfer is None or self._p2_golfer is None:
            logger.warning(f"Selected matchup {key_of(self._matchup)} has a player missing from golfer data")

    def _recompute(self) -> None:
        if self._matchup is None or self._bookmaker is None:
            self._quoted_odds = None
            return
        entry = self._matchup.odds.get(self._bookmaker)
        self._quoted_odds = entry.side(self._pick_is_p1) if entry else None
