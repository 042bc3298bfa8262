# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum

from .config import Frequency
from .errors import InvalidParameterError
from . import financial_math as fm

__version__ = "0.1.0"


class RepaymentType(Enum):
    """How the base repayment of a period is computed."""
    INTEREST_ONLY = "interest-only"
    PRINCIPAL_AND_INTEREST = "principal-and-interest"


# =============================================================================
# Loan Parameters (user input)
# =============================================================================

@dataclass(frozen=True)
class LoanParameters:
    """
    User inputs for a loan calculation. Immutable once a calculation starts.

    Rate convention:
        - interest_rate is a nominal decimal rate (0.06 for 6%) quoted per
          interest_rate_frequency.
        - term is a count of term_frequency periods (10 with Frequency.YEAR is
          ten years).
        - When term is None it is derived from fixed_repayment (see
          PeriodContext.from_parameters). When both are given, term wins.
    """
    principal: float = 0.0
    interest_rate: float = 0.0
    interest_rate_frequency: int = Frequency.YEAR
    term: float | None = None
    term_frequency: int = Frequency.YEAR
    fixed_repayment: float | None = None
    repayment_type: RepaymentType = RepaymentType.PRINCIPAL_AND_INTEREST
    repayment_frequency: int = Frequency.MONTH

    def __post_init__(self) -> None:
        """Validate loan inputs; nothing is silently clamped."""
        if self.principal < 0:
            raise InvalidParameterError(f"principal must be non-negative, got {self.principal}")
        if self.interest_rate < 0:
            raise InvalidParameterError(f"interest_rate must be non-negative, got {self.interest_rate}")
        if self.term is not None and self.term < 0:
            raise InvalidParameterError(f"term must be non-negative, got {self.term}")
        if self.fixed_repayment is not None and self.fixed_repayment <= 0:
            raise InvalidParameterError(
                f"fixed_repayment must be positive, got {self.fixed_repayment}"
            )
        for name in ("interest_rate_frequency", "term_frequency", "repayment_frequency"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidParameterError(f"{name} must be positive, got {value}")
        if not isinstance(self.repayment_type, RepaymentType):
            try:
                object.__setattr__(self, "repayment_type", RepaymentType(self.repayment_type))
            except ValueError as e:
                raise InvalidParameterError(f"unknown repayment_type {self.repayment_type!r}") from e
        if self.principal > 0:
            if self.term is None and self.fixed_repayment is None:
                raise InvalidParameterError("either term or fixed_repayment must be given")
            if self.term == 0:
                raise InvalidParameterError("term must be positive for a non-zero principal")


# =============================================================================
# Period Context
# =============================================================================

@dataclass
class PeriodContext:
    """
    Normalized inputs valid for one period.

    eff_interest_rate and eff_term are expressed per repayment period. They are
    computed once, in from_parameters(); per-period copies made by for_period()
    carry them unchanged unless an interest rate change adjustment rewrites
    eff_interest_rate.

    The trailing optional fields are written by adjustments and stay None when
    no adjustment touches them.
    """
    period: int
    present_value: float
    interest_rate: float
    interest_rate_frequency: int
    eff_interest_rate: float
    term: float
    term_frequency: int
    eff_term: float
    repayment_type: RepaymentType
    repayment_frequency: int
    repayment: float = 0.0
    eff_extra_repayment: float | None = None
    lump_sum: float | None = None
    offset: float | None = None
    fee: float | None = None

    @classmethod
    def from_parameters(cls, parameters: LoanParameters) -> PeriodContext:
        """
        Build the base (period 0) context from loan parameters.

        If no term is given, the number of repayment periods needed to repay the
        principal with fixed_repayment is computed with nper and rounded to the
        nearest whole period, ties away from zero, and never below one period
        while there is a balance to repay. The derived term is measured in
        repayment periods. An unbounded term (repayment below interest) is
        kept as math.inf and rejected when the schedule is calculated.
        """
        rate = fm.eff_interest_rate(
            parameters.interest_rate,
            parameters.interest_rate_frequency,
            parameters.repayment_frequency,
        )

        term = parameters.term
        term_frequency = parameters.term_frequency
        if term is None:
            if parameters.fixed_repayment is None:
                term = 0.0
            else:
                periods = fm.nper(parameters.principal, rate, parameters.fixed_repayment)
                term = fm.round_half_away(periods)
                if periods > 0:
                    # a repayment above the balance still needs one period
                    term = max(1.0, term)
            term_frequency = parameters.repayment_frequency

        return cls(
            period=0,
            present_value=parameters.principal,
            interest_rate=parameters.interest_rate,
            interest_rate_frequency=parameters.interest_rate_frequency,
            eff_interest_rate=rate,
            term=term,
            term_frequency=term_frequency,
            eff_term=fm.eff_term(term, term_frequency, parameters.repayment_frequency),
            repayment_type=parameters.repayment_type,
            repayment_frequency=parameters.repayment_frequency,
        )

    @property
    def eff_term_remaining(self) -> float:
        """Repayment periods left including the current one (eff_term - period + 1)."""
        return self.eff_term - self.period + 1

    @property
    def last_period(self) -> int:
        """Index of the final scheduled period (a fractional term adds a short last period)."""
        if not math.isfinite(self.eff_term):
            raise OverflowError("eff_term is unbounded")
        return math.ceil(self.eff_term)

    def for_period(self, period: int, present_value: float) -> PeriodContext:
        """Fresh copy of this context for `period`, starting at `present_value`."""
        return replace(self, period=period, present_value=present_value)
