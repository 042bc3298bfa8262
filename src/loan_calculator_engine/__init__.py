# Requires Python 3.12+
"""
Loan Calculator Engine: amortization schedules with time-scoped adjustments.

Computes period-by-period repayment, interest, principal and balance for a loan,
with fees, offset balances, lump sums, extra repayments and interest rate
changes applied over period ranges.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Configuration and errors
from loan_calculator_engine.config import (
    Frequency,
    EngineConfig,
    config,
    PAYOFF_TOLERANCE,
    MAX_PERIODS,
)
from loan_calculator_engine.errors import (
    LoanCalculatorError,
    InvalidParameterError,
    NonConvergentScheduleError,
)

# Math primitives
from loan_calculator_engine.financial_math import (
    eff_interest_rate,
    eff_term,
    pmt,
    nper,
    rate,
    implied_rate,
    round_half_away,
)

# Inputs, contexts and adjustments
from loan_calculator_engine.context import (
    RepaymentType,
    LoanParameters,
    PeriodContext,
)
from loan_calculator_engine.adjustments import (
    Adjustment,
    Fee,
    Offset,
    LumpSum,
    ExtraRepayment,
    InterestRateChange,
    ADJUSTMENT_KINDS,
)

# Calculation
from loan_calculator_engine.amortization import (
    Amortization,
    needs_recalculation,
    decide_repayment,
    settle,
)
from loan_calculator_engine.schedule import (
    ScheduleEntry,
    Totals,
    ScheduleArrays,
    ScheduleResult,
    aggregate_totals,
    comparison_rate,
)
from loan_calculator_engine.engine import CalculatorEngine
from loan_calculator_engine.loan import LoanCalculatorEngine

__all__ = [
    "__version__",
    # Configuration and errors
    "Frequency",
    "EngineConfig",
    "config",
    "PAYOFF_TOLERANCE",
    "MAX_PERIODS",
    "LoanCalculatorError",
    "InvalidParameterError",
    "NonConvergentScheduleError",
    # Math primitives
    "eff_interest_rate",
    "eff_term",
    "pmt",
    "nper",
    "rate",
    "implied_rate",
    "round_half_away",
    # Inputs, contexts and adjustments
    "RepaymentType",
    "LoanParameters",
    "PeriodContext",
    "Adjustment",
    "Fee",
    "Offset",
    "LumpSum",
    "ExtraRepayment",
    "InterestRateChange",
    "ADJUSTMENT_KINDS",
    # Calculation
    "Amortization",
    "needs_recalculation",
    "decide_repayment",
    "settle",
    "ScheduleEntry",
    "Totals",
    "ScheduleArrays",
    "ScheduleResult",
    "aggregate_totals",
    "comparison_rate",
    "CalculatorEngine",
    "LoanCalculatorEngine",
]
