# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import math
import warnings

import numpy as np
from scipy.optimize import brentq

__version__ = "0.1.0"


# =============================================================================
# Frequency Normalization
# =============================================================================
#
# A frequency is a count of occurrences per year (1 = yearly, 12 = monthly).
# Rates are nominal, so re-expressing them is a straight proportion; terms are
# counts of periods, so they scale the other way round.
# =============================================================================

def eff_interest_rate(
        interest_rate: float,
        from_frequency: int,
        to_frequency: int
) -> float:
    """
    Re-express a nominal interest rate quoted per `from_frequency` as a rate per
    `to_frequency` period.

    Formula:
        r_eff = r * from_frequency / to_frequency

    Example:
        6% per year paid monthly: 0.06 * 1 / 12 = 0.005 per month.

    Args:
        interest_rate: Nominal rate as decimal (e.g. 0.06 for 6%)
        from_frequency: Frequency the rate is quoted in (occurrences per year)
        to_frequency: Frequency to express the rate in (occurrences per year)

    Returns:
        Rate per `to_frequency` period as decimal

    Raises:
        ValueError: If either frequency is not positive
    """
    _check_frequencies(from_frequency, to_frequency)
    return interest_rate * from_frequency / to_frequency


def eff_term(
        term: float,
        from_frequency: int,
        to_frequency: int
) -> float:
    """
    Re-express a term measured in `from_frequency` periods as a number of
    `to_frequency` periods.

    Formula:
        n_eff = n * to_frequency / from_frequency

    Example:
        10 years repaid monthly: 10 * 12 / 1 = 120 periods.

    Args:
        term: Term length in `from_frequency` periods
        from_frequency: Frequency the term is measured in (occurrences per year)
        to_frequency: Frequency to express the term in (occurrences per year)

    Returns:
        Number of `to_frequency` periods (may be fractional)

    Raises:
        ValueError: If either frequency is not positive
    """
    _check_frequencies(from_frequency, to_frequency)
    return term * to_frequency / from_frequency


def _check_frequencies(from_frequency: int, to_frequency: int) -> None:
    if from_frequency <= 0:
        raise ValueError(f"from_frequency must be positive, got {from_frequency}")
    if to_frequency <= 0:
        raise ValueError(f"to_frequency must be positive, got {to_frequency}")


def round_half_away(value: float) -> float:
    """Round to the nearest whole number, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


# =============================================================================
# Annuity Primitives
# =============================================================================

def pmt(
        present_value: float,
        rate: float,
        periods: float
) -> float:
    """
    Level payment that fully amortizes `present_value` over `periods` payments
    at `rate` per period.

    Formula:
        PMT = PV * r / [1 - (1 + r)^-n]        (r > 0)
        PMT = PV / n                           (r = 0)

    The annuity factor r / [1 - (1 + r)^-n] always exceeds 1 / n for r > 0, so
    PMT * n >= PV: every payment covers its interest plus some principal.

    Args:
        present_value: Balance to amortize
        rate: Interest rate per period as decimal
        periods: Number of remaining payments (may be fractional)

    Returns:
        Payment per period

    Raises:
        ValueError: If periods or rate is negative
        Warning: If periods is zero (the whole balance is due)
    """
    if periods < 0:
        raise ValueError(f"periods must be non-negative, got {periods}")
    if rate < 0:
        raise ValueError(f"rate must be non-negative, got {rate}")
    if periods == 0:
        warnings.warn("periods is zero, returning outstanding balance")
        return present_value
    if rate == 0.0:
        return present_value / periods
    return present_value * rate / (1.0 - (1.0 + rate) ** (-periods))


def nper(
        present_value: float,
        rate: float,
        payment: float
) -> float:
    """
    Number of level payments of `payment` needed to repay `present_value` at
    `rate` per period.

    Formula (inverse of pmt):
        n = -ln(1 - PV * r / PMT) / ln(1 + r)     (r > 0)
        n = PV / PMT                               (r = 0)

    The result is fractional; callers round to whole periods.

    Args:
        present_value: Balance to repay
        rate: Interest rate per period as decimal
        payment: Payment per period

    Returns:
        Number of periods, or math.inf when the payment never covers the interest

    Raises:
        ValueError: If payment is not positive or rate is negative
        Warning: If the payment does not exceed the first period's interest
    """
    if payment <= 0:
        raise ValueError(f"payment must be positive, got {payment}")
    if rate < 0:
        raise ValueError(f"rate must be non-negative, got {rate}")
    if present_value <= 0:
        return 0.0
    if rate == 0.0:
        return present_value / payment
    if payment <= present_value * rate:
        warnings.warn(
            f"payment {payment:.2f} does not cover interest {present_value * rate:.2f}, "
            f"balance never repaid"
        )
        return math.inf
    return -math.log(1.0 - present_value * rate / payment) / math.log(1.0 + rate)


# =============================================================================
# Implied Rates
# =============================================================================

def implied_rate(
        present_value: float,
        cash_flows: np.ndarray | list[float],
        tolerance: float = 1e-12,
        max_iterations: int = 200
) -> float:
    """
    Periodic rate at which `cash_flows` (paid at the end of periods 1..n)
    discount back to `present_value`.

    Solves for r in:
        sum_t CF_t / (1 + r)^t - PV = 0

    Uses Brent's method (scipy.optimize.brentq). The NPV is decreasing in r for
    non-negative cash flows, so the root is bracketed by expanding the upper bound
    until the NPV turns negative.

    Args:
        present_value: Amount advanced at period 0 (positive)
        cash_flows: Repayments received at periods 1..n
        tolerance: Absolute tolerance on the rate
        max_iterations: Iteration cap passed to brentq

    Returns:
        Rate per period as decimal

    Raises:
        ValueError: If there are no cash flows, present_value is not positive, or
                    the cash flows do not repay present_value (no non-negative rate)
    """
    flows = np.asarray(cash_flows, dtype=float)
    if flows.size == 0:
        raise ValueError("cash_flows must not be empty")
    if present_value <= 0:
        raise ValueError(f"present_value must be positive, got {present_value}")
    if flows.sum() < present_value:
        raise ValueError(
            f"cash flows total {flows.sum():.2f} is less than present value {present_value:.2f}, "
            f"no non-negative rate exists"
        )

    periods = np.arange(1, flows.size + 1, dtype=float)

    def npv(r: float) -> float:
        return float(np.sum(flows / (1.0 + r) ** periods)) - present_value

    if npv(0.0) == 0.0:
        return 0.0
    upper = 1.0
    while npv(upper) > 0:
        upper *= 2.0
        if upper > 1e6:
            raise ValueError("Could not bracket implied rate")
    try:
        return brentq(npv, 0.0, upper, xtol=tolerance, maxiter=max_iterations)
    except (ValueError, RuntimeError) as e:
        raise ValueError(
            f"Could not find implied rate for present value {present_value:.2f} "
            f"over {flows.size} periods. Original error: {e}"
        ) from e


def rate(
        present_value: float,
        payment: float,
        periods: int
) -> float:
    """
    Periodic rate at which `periods` level payments of `payment` repay
    `present_value` (the inverse of pmt in its rate argument).

    Args:
        present_value: Balance repaid
        payment: Level payment per period
        periods: Number of whole payments

    Returns:
        Rate per period as decimal
    """
    if periods <= 0:
        raise ValueError(f"periods must be positive, got {periods}")
    return implied_rate(present_value, np.full(int(periods), payment, dtype=float))
