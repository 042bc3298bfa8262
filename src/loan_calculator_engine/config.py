# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .errors import InvalidParameterError

__version__ = "0.1.0"


# =============================================================================
# Frequencies
# =============================================================================

class Frequency(IntEnum):
    """
    Supported cadences, expressed as occurrences per year.

    Rates, terms and repayments are each tagged with one of these so that the
    engine can re-express them in units of the repayment frequency.
    """
    YEAR = 1
    HALF_YEAR = 2
    QUARTER = 4
    MONTH = 12
    FORTNIGHT = 26
    WEEK = 52
    DAY = 365


# =============================================================================
# Engine Configuration
# =============================================================================

# Balances at or below this are treated as paid off (floating point residue).
# The loop stops there, so up to this much principal can be left unpaid before
# the term ends; in practice the payoff period is capped to a zero balance.
PAYOFF_TOLERANCE: float = 0.001

# Hard ceiling on schedule length; 100 years of daily repayments fits well inside.
MAX_PERIODS: int = 100_000


@dataclass(frozen=True)
class EngineConfig:
    """
    Read-only configuration shared by calculation engines.

    Attributes:
        frequency: The Frequency enumeration (e.g. config().frequency.MONTH)
        max_periods: Iteration ceiling for a single calculate() run
        payoff_tolerance: Balance at or below which a loan is considered repaid
    """
    frequency: type[Frequency] = Frequency
    max_periods: int = MAX_PERIODS
    payoff_tolerance: float = PAYOFF_TOLERANCE

    def __post_init__(self) -> None:
        if self.max_periods <= 0:
            raise InvalidParameterError(f"max_periods must be positive, got {self.max_periods}")
        if self.payoff_tolerance < 0:
            raise InvalidParameterError(f"payoff_tolerance must be non-negative, got {self.payoff_tolerance}")


_DEFAULT_CONFIG = EngineConfig()


def config() -> EngineConfig:
    """Return the default engine configuration."""
    return _DEFAULT_CONFIG
