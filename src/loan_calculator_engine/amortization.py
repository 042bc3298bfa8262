# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

from dataclasses import dataclass

from .context import PeriodContext, RepaymentType
from . import financial_math as fm

__version__ = "0.1.0"


@dataclass
class Amortization:
    """
    Breakdown of one period's repayment.

    repayment is the total cash paid in the period: base repayment, extra
    repayment, lump sum and fee. future_value is the balance after the period;
    it can land fractionally below zero on the payoff period.
    """
    repayment: float = 0.0
    interest_paid: float = 0.0
    principal_paid: float = 0.0
    future_value: float = 0.0


# =============================================================================
# Repayment Policy
# =============================================================================

def needs_recalculation(period: int, context: PeriodContext, previous: PeriodContext) -> bool:
    """
    True on the first period and whenever the effective rate differs from the
    previous period's. Exact comparison: normalization is deterministic.
    """
    return period == 1 or context.eff_interest_rate != previous.eff_interest_rate


def decide_repayment(period: int, context: PeriodContext, previous: PeriodContext) -> float:
    """
    Base repayment for `period`.

    The repayment is level: it is carried over from the previous period and only
    recomputed on the first period or after an interest rate change. When
    recomputed it is:

        interest-only:            PV * r
        principal-and-interest:   pmt(PV, r, n_remaining)

    Args:
        period: Period being calculated (1-indexed)
        context: This period's context, adjustments already applied
        previous: The previous period's context (period 0 context for period 1)

    Returns:
        Base repayment, excluding extra repayments, lump sums and fees
    """
    if not needs_recalculation(period, context, previous):
        return previous.repayment
    if context.repayment_type is RepaymentType.INTEREST_ONLY:
        return context.present_value * context.eff_interest_rate
    return fm.pmt(context.present_value, context.eff_interest_rate, context.eff_term_remaining)


# =============================================================================
# Period Settlement
# =============================================================================

def settle(context: PeriodContext) -> Amortization:
    """
    Split a period's repayment into interest and principal.

    Steps:
        1. repayment = base + extra repayment + lump sum
        2. interest-bearing balance = PV - offset
        3. interest = max(0, interest-bearing balance * r)
        4. if repayment > PV: repayment = PV + interest (payoff period)
        5. principal = repayment - interest
        6. future value = PV - principal
        7. fee added to repayment; it never touches interest or principal

    Args:
        context: Context with repayment decided and adjustments applied

    Returns:
        Amortization for the period
    """
    repayment = context.repayment + (context.eff_extra_repayment or 0.0) + (context.lump_sum or 0.0)

    considered_principal = context.present_value - (context.offset or 0.0)
    interest_paid = max(0.0, considered_principal * context.eff_interest_rate)

    if repayment > context.present_value:
        repayment = context.present_value + interest_paid

    principal_paid = repayment - interest_paid
    future_value = context.present_value - principal_paid

    return Amortization(
        repayment=repayment + (context.fee or 0.0),
        interest_paid=interest_paid,
        principal_paid=principal_paid,
        future_value=future_value,
    )
