"""
Configuration management for the Golf Matchup Edge engine.
"""

import math
import os
import logging
from typing import List, Optional
from dataclasses import dataclass, field

from dotenv import load_dotenv


# Load environment variables from .env file
load_dotenv()


# Reserved odds key for the model's own reference line (never a selectable book)
DEFAULT_MODEL_SOURCE = "datagolf"
DEFAULT_STAKE = 100.0
DEFAULT_PAYOUT_DECIMALS = 2
DEFAULT_LOG_LEVEL = "INFO"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Application configuration."""
    model_source: str = DEFAULT_MODEL_SOURCE
    default_stake: float = DEFAULT_STAKE
    payout_decimals: int = DEFAULT_PAYOUT_DECIMALS
    log_level: str = DEFAULT_LOG_LEVEL

    # Raw env values that failed to parse, reported by validate_config()
    _invalid: List[str] = field(default_factory=list, repr=False)

    def __post_init__(self):
        """Load settings from environment."""
        self.model_source = os.getenv("GOLF_EDGE_MODEL_SOURCE", self.model_source).strip()
        self.log_level = os.getenv("GOLF_EDGE_LOG_LEVEL", self.log_level).strip().upper()

        stake = os.getenv("GOLF_EDGE_DEFAULT_STAKE")
        if stake:
            try:
                self.default_stake = float(stake)
            except ValueError:
                self._invalid.append(f"GOLF_EDGE_DEFAULT_STAKE={stake!r} is not a number")

        decimals = os.getenv("GOLF_EDGE_PAYOUT_DECIMALS")
        if decimals:
            try:
                self.payout_decimals = int(decimals)
            except ValueError:
                self._invalid.append(f"GOLF_EDGE_PAYOUT_DECIMALS={decimals!r} is not an integer")

    @property
    def log_level_value(self) -> int:
        """Numeric logging level, INFO if unknown."""
        return getattr(logging, self.log_level, logging.INFO) if self.log_level in LOG_LEVELS else logging.INFO

    def validate_config(self) -> List[str]:
        """
        Check configuration for problems.

        Returns:
            List of error messages (empty if valid)
        """
        errors = list(self._invalid)
        if not self.model_source:
            errors.append("GOLF_EDGE_MODEL_SOURCE must not be empty")
        if not math.isfinite(self.default_stake) or self.default_stake < 0:
            errors.append("GOLF_EDGE_DEFAULT_STAKE must be a finite number >= 0")
        if self.payout_decimals < 0:
            errors.append("GOLF_EDGE_PAYOUT_DECIMALS must be >= 0")
        if self.log_level not in LOG_LEVELS:
            errors.append(f"GOLF_EDGE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return errors

    def is_valid(self) -> bool:
        return not self.validate_config()


def get_config() -> Config:
    """Get application configuration."""
    return Config()


def get_model_source(config: Optional[Config] = None) -> str:
    """Reserved model-source identifier, falling back to the default if unset."""
    config = config or get_config()
    return config.model_source or DEFAULT_MODEL_SOURCE
