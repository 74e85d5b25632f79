"""
Name reconciliation between the odds feed and the golfer roster.
Matching is exact after trimming and case-folding; there is no fuzzy matching.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

try:
    from .models import Golfer, Matchup
except ImportError:
    from models import Golfer, Matchup

logger = logging.getLogger(__name__)

KEY_SEPARATOR = "|"


def normalize_name(name: str) -> str:
    """Trim and case-fold a name for comparison."""
    return (name or "").strip().casefold()


def find_golfer(name: str, roster: Iterable[Golfer]) -> Optional[Golfer]:
    """First roster entry whose name matches, or None."""
    target = normalize_name(name)
    for golfer in roster:
        if normalize_name(golfer.name) == target:
            return golfer
    return None


def matchup_is_resolvable(matchup: Matchup, roster: Sequence[Golfer]) -> bool:
    """True if both players in the matchup are on the roster."""
    return find_golfer(matchup.p1_name, roster) is not None and find_golfer(matchup.p2_name, roster) is not None


class RosterIndex:
    """Normalized-name lookup over a roster. First occurrence wins."""

    def __init__(self, roster: Iterable[Golfer]):
        self._by_name: Dict[str, Golfer] = {}
        for golfer in roster:
            self._by_name.setdefault(normalize_name(golfer.name), golfer)

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: str) -> bool:
        return normalize_name(name) in self._by_name

    def get(self, name: str) -> Optional[Golfer]:
        return self._by_name.get(normalize_name(name))


@dataclass(frozen=True)
class FilterResult:
    """Outcome of a reconciliation pass."""
    resolved: Tuple[Matchup, ...] = ()
    unresolved_names: Tuple[str, ...] = ()  # Distinct, as spelled in the feed, first-seen order

    @property
    def keys(self) -> List[str]:
        return [key_of(m) for m in self.resolved]


def filter_resolvable(matchups: Iterable[Matchup], roster: Sequence[Golfer]) -> FilterResult:
    """
    Keep matchups whose players are both on the roster, in feed order.

    Unresolved names are collected for diagnostics. An empty roster
    resolves nothing; that is the normal state before golfer data loads.
    """
    matchups = list(matchups)
    index = RosterIndex(roster)

    if not len(index):
        logger.debug(f"Roster empty, {len(matchups)} matchups held back")

    resolved = []
    missing: Dict[str, None] = {}

    for matchup in matchups:
        ok = True
        for name in (matchup.p1_name, matchup.p2_name):
            if name not in index:
                missing.setdefault(name, None)
                ok = False
        if ok:
            resolved.append(matchup)

    logger.info(f"Resolved {len(resolved)} of {len(matchups)} matchups against {len(index)} golfers")
    if missing:
        logger.info(f"{len(missing)} players missing from golfer data")
        logger.debug(f"Missing players: {sorted(missing)}")

    return FilterResult(resolved=tuple(resolved), unresolved_names=tuple(missing))


def key_of(matchup: Matchup) -> str:
    """Identity key: 'p1|p2|ties'."""
    return KEY_SEPARATOR.join((matchup.p1_name, matchup.p2_name, matchup.ties.value))


def find_by_key(matchups: Iterable[Matchup], key: str) -> Optional[Matchup]:
    """Matchup with the given key; the last one wins on duplicates."""
    found = None
    for matchup in matchups:
        if key_of(matchup) == key:
            found = matchup
    return found


def display_text(matchup: Matchup) -> str:
    """e.g. 'Jon Rahm vs Rory McIlroy (Tie: Void)'."""
    return f"{matchup.p1_name} vs {matchup.p2_name} (Tie: {matchup.ties.label})"
