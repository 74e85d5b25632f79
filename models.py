"""
Data models for the Golf Matchup Edge engine.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Tuple, Any
from enum import Enum

logger = logging.getLogger(__name__)


class TieRule(Enum):
    """How a tied matchup is settled."""
    VOID = "void"  # Push if tied
    SEPARATE_BET = "separate bet offered"  # Tie is its own market

    @classmethod
    def parse(cls, value: Any) -> "TieRule":
        """Parse a feed value; accepts spaces or underscores."""
        if isinstance(value, TieRule):
            return value
        text = str(value or "").strip().lower().replace("_", " ")
        for rule in cls:
            if rule.value == text:
                return rule
        raise ValueError(f"Unknown tie rule: {value!r}")

    @property
    def label(self) -> str:
        return "Void" if self is TieRule.VOID else "Offered"


@dataclass(frozen=True)
class SimulationStats:
    """Simulation output for a golfer, in percentage points."""
    top_10_percentage: float = 0.0
    win_percentage: float = 0.0
    average_finish: float = 0.0


@dataclass(frozen=True)
class Golfer:
    """A golfer from the statistics provider."""
    name: str
    strokes_gained_total: float = 0.0
    simulation_stats: SimulationStats = field(default_factory=SimulationStats)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Golfer":
        """Build from a provider record (camelCase or snake_case keys)."""
        stats = data.get("simulationStats") or data.get("simulation_stats") or {}
        if isinstance(stats, SimulationStats):
            sim = stats
        else:
            sim = SimulationStats(
                top_10_percentage=float(stats.get("top10Percentage", stats.get("top_10_percentage", 0.0)) or 0.0),
                win_percentage=float(stats.get("winPercentage", stats.get("win_percentage", 0.0)) or 0.0),
                average_finish=float(stats.get("averageFinish", stats.get("average_finish", 0.0)) or 0.0),
            )
        return cls(
            name=str(data.get("name", "")),
            strokes_gained_total=float(data.get("strokesGainedTotal", data.get("strokes_gained_total", 0.0)) or 0.0),
            simulation_stats=sim,
        )


@dataclass(frozen=True)
class BookOdds:
    """One bookmaker's American odds for a matchup."""
    p1: Optional[str] = None
    p2: Optional[str] = None
    tie: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        """Both sides quoted."""
        return bool(self.p1) and bool(self.p2)

    def side(self, is_p1: bool) -> Optional[str]:
        """Odds for player 1 or player 2."""
        return self.p1 if is_p1 else self.p2

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BookOdds":
        def _text(value):
            if value is None or value == "":
                return None
            return str(value)

        return cls(p1=_text(data.get("p1")), p2=_text(data.get("p2")), tie=_text(data.get("tie")))


@dataclass(frozen=True)
class Matchup:
    """A head-to-head matchup from the odds feed."""
    p1_name: str
    p2_name: str
    ties: TieRule = TieRule.VOID
    odds: Dict[str, BookOdds] = field(default_factory=dict)  # bookmaker -> odds, feed order

    def __post_init__(self):
        if not self.p1_name or not self.p2_name:
            raise ValueError("Matchup requires both player names")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Matchup":
        """Build from a feed entry."""
        odds = {}
        for book, entry in (data.get("odds") or {}).items():
            if isinstance(entry, BookOdds):
                odds[book] = entry
            elif isinstance(entry, dict):
                odds[book] = BookOdds.from_dict(entry)
        return cls(
            p1_name=str(data.get("p1_player_name") or data.get("p1_name") or ""),
            p2_name=str(data.get("p2_player_name") or data.get("p2_name") or ""),
            ties=TieRule.parse(data.get("ties", TieRule.VOID.value)),
            odds=odds,
        )


@dataclass(frozen=True)
class MatchupFeed:
    """A parsed response from the odds feed provider."""
    event_name: str = ""
    last_updated: str = ""
    market: str = ""
    matchups: Tuple[Matchup, ...] = ()
    unavailable_reason: Optional[str] = None  # Set when the feed sent a message instead of a list

    @property
    def is_available(self) -> bool:
        return self.unavailable_reason is None

    @classmethod
    def from_response(cls, response: Dict[str, Any]) -> "MatchupFeed":
        """
        Parse a feed response.
        A string match_list is the provider's reason for having no matchups.
        Malformed entries are skipped.
        """
        match_list = response.get("match_list")
        reason = None
        matchups: List[Matchup] = []

        if isinstance(match_list, str):
            reason = match_list
        else:
            for i, entry in enumerate(match_list or []):
                try:
                    matchups.append(Matchup.from_dict(entry))
                except (ValueError, TypeError, AttributeError) as e:
                    logger.warning(f"Skipping malformed matchup #{i}: {e}")

        return cls(
            event_name=str(response.get("event_name", "") or ""),
            last_updated=str(response.get("last_updated", "") or ""),
            market=str(response.get("market", "") or ""),
            matchups=tuple(matchups),
            unavailable_reason=reason,
        )


@dataclass(frozen=True)
class SelectionSnapshot:
    """Read-only view of the current selection."""
    matchup: Optional[Matchup] = None
    pick_is_p1: bool = True
    bookmaker: Optional[str] = None
    quoted_odds: Optional[str] = None
    stake_amount: Optional[float] = None
    tie_odds: Optional[str] = None


@dataclass(frozen=True)
class ComparisonRow:
    """One metric in a head-to-head comparison."""
    metric: str
    yours: float
    opponent: float
    fmt: str = "{:.2f}"

    @property
    def difference(self) -> float:
        return self.yours - self.opponent

    def formatted(self) -> Tuple[str, str]:
        return self.fmt.format(self.yours), self.fmt.format(self.opponent)


@dataclass(frozen=True)
class EdgeBoardRow:
    """Edge for one side of one matchup at one bookmaker."""
    matchup_key: str
    pick: str
    opponent: str
    bookmaker: str
    odds: str
    model_odds: str
    edge_percent: float

    @property
    def is_favorable(self) -> bool:
        return self.edge_percent > 0


@dataclass(frozen=True)
class EngineView:
    """Everything the presentation layer needs."""
    event_name: str = ""
    last_updated: str = ""
    market: str = ""
    filtered_matchups: Tuple[Matchup, ...] = ()
    selection: SelectionSnapshot = field(default_factory=SelectionSnapshot)
    edge_percent: Optional[float] = None
    potential_payout: Optional[float] = None
    your_golfer: Optional[Golfer] = None
    opponent_golfer: Optional[Golfer] = None
    status: str = ""
    unresolved_names: Tuple[str, ...] = ()
