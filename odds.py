"""
American odds conversion.
Pure functions: implied probability and payout from an odds string.
"""

import math
from typing import Union

try:
    from .exceptions import InvalidOddsFormat, InvalidStake
except ImportError:
    from exceptions import InvalidOddsFormat, InvalidStake

Number = Union[int, float]

# Beyond this the implied probability rounds to exactly 0 or 1
MAX_ODDS_MAGNITUDE = 100_000


def parse_american(odds: Union[str, int]) -> int:
    """
    Parse an American odds string into a signed integer.
    Accepts surrounding whitespace and a leading '+'. Zero and magnitudes
    above MAX_ODDS_MAGNITUDE are rejected.
    """
    if isinstance(odds, bool):
        raise InvalidOddsFormat(odds)
    if isinstance(odds, int):
        value = odds
    else:
        try:
            value = int(str(odds).strip())
        except (TypeError, ValueError):
            raise InvalidOddsFormat(odds) from None
    if value == 0 or abs(value) > MAX_ODDS_MAGNITUDE:
        raise InvalidOddsFormat(odds)
    return value


def format_american(value: int) -> str:
    """Display form: '+120' or '-150'."""
    return f"+{value}" if value > 0 else str(value)


def implied_probability(odds: Union[str, int]) -> float:
    """
    Break-even win probability implied by American odds (vig included).

        implied_probability("+100") -> 0.5
        implied_probability("-150") -> 0.6
    """
    value = parse_american(odds)
    if value > 0:
        return 100 / (value + 100)
    return abs(value) / (abs(value) + 100)


def validate_stake(stake: object) -> float:
    """Return stake as a float, or raise InvalidStake."""
    if isinstance(stake, bool):
        raise InvalidStake(stake)
    if isinstance(stake, str):
        try:
            value = float(stake.strip())
        except ValueError:
            raise InvalidStake(stake) from None
    elif isinstance(stake, (int, float)):
        value = float(stake)
    else:
        raise InvalidStake(stake)
    if not math.isfinite(value) or value < 0:
        raise InvalidStake(stake)
    return value


def raw_payout(odds: Union[str, int], stake: Number) -> float:
    """Profit on a winning bet at full precision (stake not included)."""
    amount = validate_stake(stake)
    value = parse_american(odds)
    if value > 0:
        return amount * (value / 100)
    return amount * (100 / abs(value))


def payout(odds: Union[str, int], stake: Number, decimals: int = 2) -> float:
    """Profit on a winning bet, rounded for display."""
    return round(raw_payout(odds, stake), decimals)
