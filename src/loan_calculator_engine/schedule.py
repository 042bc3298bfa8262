# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import numpy as np
from dataclasses import dataclass, field

from .amortization import Amortization
from .config import Frequency
from .context import PeriodContext
from . import financial_math as fm

__version__ = "0.1.0"


# =============================================================================
# Schedule Containers
# =============================================================================

@dataclass
class ScheduleEntry:
    """One row of the schedule: period 0 is the opening state, then 1..N."""
    period: int
    context: PeriodContext
    amortization: Amortization


@dataclass
class Totals:
    """
    Aggregates over the non-initial schedule entries.

    repayment includes fees; principal_paid and fees are reported separately so
    that repayment == principal_paid + interest_paid + fees.
    """
    repayment: float = 0.0
    interest_paid: float = 0.0
    principal_paid: float = 0.0
    fees: float = 0.0
    periods: int = 0


@dataclass
class ScheduleArrays:
    """
    Column view of a schedule, one element per entry (index 0 is the opening state).

    Field names:
    - beginning_balance: balance entering the period (PV)
    - ending_balance: balance after the period (FV)
    - eff_interest_rate: rate per repayment period applied in the period
    """
    period: np.ndarray
    beginning_balance: np.ndarray
    repayment: np.ndarray
    interest_paid: np.ndarray
    principal_paid: np.ndarray
    ending_balance: np.ndarray
    fee: np.ndarray
    eff_interest_rate: np.ndarray


@dataclass
class ScheduleResult:
    """Return value of LoanCalculatorEngine.calculate()."""
    totals: Totals
    schedule_list: list[ScheduleEntry] = field(default_factory=list)

    def as_arrays(self) -> ScheduleArrays:
        """Schedule as numpy columns, for vectorized analysis."""
        entries = self.schedule_list
        return ScheduleArrays(
            period=np.array([e.period for e in entries], dtype=int),
            beginning_balance=np.array([e.context.present_value for e in entries], dtype=float),
            repayment=np.array([e.amortization.repayment for e in entries], dtype=float),
            interest_paid=np.array([e.amortization.interest_paid for e in entries], dtype=float),
            principal_paid=np.array([e.amortization.principal_paid for e in entries], dtype=float),
            ending_balance=np.array([e.amortization.future_value for e in entries], dtype=float),
            fee=np.array([e.context.fee or 0.0 for e in entries], dtype=float),
            eff_interest_rate=np.array([e.context.eff_interest_rate for e in entries], dtype=float),
        )


# =============================================================================
# Totals Aggregator
# =============================================================================

def aggregate_totals(schedule_list: list[ScheduleEntry]) -> Totals:
    """
    Sum repayment and interest over entries with period >= 1.

    The opening entry contributes nothing. An empty running range (a zero
    principal loan) gives zero totals rather than an error.
    """
    running = [e for e in schedule_list if e.period >= 1]
    if not running:
        return Totals()
    return Totals(
        repayment=float(np.sum([e.amortization.repayment for e in running])),
        interest_paid=float(np.sum([e.amortization.interest_paid for e in running])),
        principal_paid=float(np.sum([e.amortization.principal_paid for e in running])),
        fees=float(np.sum([e.context.fee or 0.0 for e in running])),
        periods=len(running),
    )


# =============================================================================
# Comparison Rate
# =============================================================================

def comparison_rate(result: ScheduleResult, frequency: int = Frequency.YEAR) -> float:
    """
    Nominal rate, quoted per `frequency`, that equates the schedule's cash flows
    with the amount borrowed.

    Cash flows are the period repayments including fees, so the rate reflects the
    full cost of the loan. A balance still outstanding after the last period (an
    interest-only loan at term) is treated as repaid with the last repayment.

    Args:
        result: A calculated schedule
        frequency: Frequency to quote the rate in (default yearly)

    Returns:
        Nominal rate as decimal

    Raises:
        ValueError: If the schedule has no running periods
    """
    entries = result.schedule_list
    running = [e for e in entries if e.period >= 1]
    if not running:
        raise ValueError("schedule has no repayment periods")

    principal = entries[0].amortization.future_value
    flows = np.array([e.amortization.repayment for e in running], dtype=float)
    flows[-1] += max(running[-1].amortization.future_value, 0.0)

    periodic = fm.implied_rate(principal, flows)
    return fm.eff_interest_rate(periodic, running[0].context.repayment_frequency, frequency)
