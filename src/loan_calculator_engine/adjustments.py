# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
"""
Adjustments: time-scoped changes applied to a period's context.

Each adjustment covers an inclusive period range [start_period, end_period]
(end_period=None runs to the end of the loan) and writes one or more fields of
the PeriodContext it is applied to. The set of kinds is closed:

    Fee                 -> fee            (cash flow only)
    Offset              -> offset         (reduces interest-bearing balance)
    LumpSum             -> lump_sum       (single period)
    ExtraRepayment      -> eff_extra_repayment
    InterestRateChange  -> interest_rate, interest_rate_frequency, eff_interest_rate

Adjustments overwrite, they never accumulate: when two active adjustments write
the same field in a period, the one registered last wins.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .context import PeriodContext
from .errors import InvalidParameterError
from . import financial_math as fm

__version__ = "0.1.0"


class Adjustment(ABC):
    """Shared range logic for adjustment kinds."""

    start_period: int
    end_period: int | None

    def applies(self, period: int) -> bool:
        """True if `period` falls inside this adjustment's inclusive range."""
        if period < self.start_period:
            return False
        return self.end_period is None or period <= self.end_period

    @abstractmethod
    def apply(self, context: PeriodContext) -> PeriodContext:
        """Write this adjustment's fields into `context` (in place) and return it."""

    def _validate_range(self) -> None:
        if self.start_period < 1:
            raise InvalidParameterError(
                f"{type(self).__name__}: start_period must be at least 1, got {self.start_period}"
            )
        if self.end_period is not None and self.end_period < self.start_period:
            raise InvalidParameterError(
                f"{type(self).__name__}: end_period ({self.end_period}) cannot be before "
                f"start_period ({self.start_period})"
            )

    def _validate_non_negative(self, name: str, value: float) -> None:
        if value < 0:
            raise InvalidParameterError(f"{type(self).__name__}: {name} must be non-negative, got {value}")


# =============================================================================
# Adjustment Kinds
# =============================================================================

@dataclass(frozen=True)
class Fee(Adjustment):
    """A fee charged each period in range. Added to the period's cash flow only."""
    amount: float
    start_period: int
    end_period: int | None = None

    def __post_init__(self) -> None:
        self._validate_range()
        self._validate_non_negative("amount", self.amount)

    def apply(self, context: PeriodContext) -> PeriodContext:
        context.fee = self.amount
        return context


@dataclass(frozen=True)
class Offset(Adjustment):
    """An offset balance netted against the principal when charging interest."""
    amount: float
    start_period: int
    end_period: int | None = None

    def __post_init__(self) -> None:
        self._validate_range()
        self._validate_non_negative("amount", self.amount)

    def apply(self, context: PeriodContext) -> PeriodContext:
        context.offset = self.amount
        return context


@dataclass(frozen=True)
class LumpSum(Adjustment):
    """A one-off extra principal payment at `period`."""
    amount: float
    period: int

    def __post_init__(self) -> None:
        self._validate_range()
        self._validate_non_negative("amount", self.amount)

    @property
    def start_period(self) -> int:
        return self.period

    @property
    def end_period(self) -> int:
        return self.period

    def apply(self, context: PeriodContext) -> PeriodContext:
        context.lump_sum = self.amount
        return context


@dataclass(frozen=True)
class ExtraRepayment(Adjustment):
    """
    An extra amount repaid every period in range, on top of the base repayment.

    `frequency` is the cadence `amount` is quoted in (e.g. 100 per month on a
    fortnightly loan). None means the amount is already per repayment period.
    """
    amount: float
    start_period: int
    end_period: int | None = None
    frequency: int | None = None

    def __post_init__(self) -> None:
        self._validate_range()
        self._validate_non_negative("amount", self.amount)
        if self.frequency is not None and self.frequency <= 0:
            raise InvalidParameterError(f"ExtraRepayment: frequency must be positive, got {self.frequency}")

    def apply(self, context: PeriodContext) -> PeriodContext:
        if self.frequency is None:
            context.eff_extra_repayment = self.amount
        else:
            context.eff_extra_repayment = self.amount * self.frequency / context.repayment_frequency
        return context


@dataclass(frozen=True)
class InterestRateChange(Adjustment):
    """
    A new nominal interest rate for the periods in range.

    The rate is normalized to the repayment frequency with the same rule used
    when the loan context is first built. `interest_rate_frequency=None` keeps
    the loan's own rate frequency.
    """
    interest_rate: float
    start_period: int
    end_period: int | None = None
    interest_rate_frequency: int | None = None

    def __post_init__(self) -> None:
        self._validate_range()
        self._validate_non_negative("interest_rate", self.interest_rate)
        if self.interest_rate_frequency is not None and self.interest_rate_frequency <= 0:
            raise InvalidParameterError(
                f"InterestRateChange: interest_rate_frequency must be positive, "
                f"got {self.interest_rate_frequency}"
            )

    def apply(self, context: PeriodContext) -> PeriodContext:
        frequency = self.interest_rate_frequency or context.interest_rate_frequency
        context.interest_rate = self.interest_rate
        context.interest_rate_frequency = frequency
        context.eff_interest_rate = fm.eff_interest_rate(
            self.interest_rate, frequency, context.repayment_frequency
        )
        return context


ADJUSTMENT_KINDS: tuple[type[Adjustment], ...] = (
    Fee,
    Offset,
    LumpSum,
    InterestRateChange,
    ExtraRepayment,
)
