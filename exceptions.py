"""
Error types for the Golf Matchup Edge engine.
All of them are recoverable; none should take the process down.
"""

from typing import Iterable, Optional


class MatchupEdgeError(ValueError):
    """Base class for matchup engine errors."""


class FeedUnavailable(MatchupEdgeError):
    """The odds feed answered with a reason string instead of a matchup list."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class InvalidOddsFormat(MatchupEdgeError):
    """An odds string is not a non-zero signed integer."""

    def __init__(self, odds: object):
        self.odds = odds
        super().__init__(f"Invalid American odds {odds!r}: expected a non-zero signed integer like '+120' or '-150'")


class InvalidStake(MatchupEdgeError):
    """A stake is non-numeric, non-finite or negative."""

    def __init__(self, stake: object):
        self.stake = stake
        super().__init__(f"Invalid stake {stake!r}: must be a finite number >= 0")


class UnknownBookmaker(MatchupEdgeError):
    """A bookmaker key is not offered by the selected matchup."""

    def __init__(self, bookmaker: object, available: Optional[Iterable[str]] = None):
        self.bookmaker = bookmaker
        self.available = list(available or [])
        offered = ", ".join(self.available) if self.available else "none"
        super().__init__(f"Unknown bookmaker {bookmaker!r} (available: {offered})")


class NoResolvableGolfer(MatchupEdgeError):
    """A matchup references a name with no counterpart in the golfer roster."""

    def __init__(self, names: Iterable[str], message: str = ""):
        self.names = list(names)
        super().__init__(message or f"No golfer data for: {', '.join(self.names)}")
