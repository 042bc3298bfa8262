# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
"""
Loan calculator: builds an amortization schedule one period at a time.

Example:

    >>> from loan_calculator_engine import LoanCalculatorEngine, LumpSum
    >>> loan = LoanCalculatorEngine(
    ...     principal=100_000,
    ...     interest_rate=0.06,
    ...     term=10,
    ...     adjustments=[LumpSum(10_000, period=12)],
    ... )
    >>> result = loan.calculate()
    >>> result.totals.interest_paid      # doctest: +SKIP
"""
from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from .adjustments import ADJUSTMENT_KINDS, Adjustment
from .amortization import Amortization, decide_repayment, settle
from .config import EngineConfig
from .context import LoanParameters, RepaymentType
from .engine import CalculatorEngine
from .errors import InvalidParameterError, NonConvergentScheduleError
from .schedule import ScheduleEntry, ScheduleResult, aggregate_totals

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


class LoanCalculatorEngine(CalculatorEngine):
    """
    Calculates a loan and its amortization schedule.

    Loan parameters are given either as a LoanParameters instance or as keyword
    arguments (principal, interest_rate, term, ...). All five adjustment kinds
    are registered; `adjustments` are added in the order given.

    Schedule states:
        INITIAL  period 0, balance = principal, no adjustments
        RUNNING  periods 1..ceil(eff_term)
        DONE     balance <= payoff tolerance, or the term is exhausted

    Raises:
        InvalidParameterError: On invalid loan inputs or adjustments
    """

    def __init__(
            self,
            parameters: LoanParameters | None = None,
            adjustments: Iterable[Adjustment] = (),
            config: EngineConfig | None = None,
            **kwargs,
    ) -> None:
        if parameters is None:
            parameters = LoanParameters(**kwargs)
        elif kwargs:
            raise InvalidParameterError("pass either parameters or keyword arguments, not both")
        super().__init__(parameters, config)
        self.use(*ADJUSTMENT_KINDS)
        self.add(*adjustments)

    def calculate(self) -> ScheduleResult:
        """
        Run the schedule to completion.

        Each period starts from a fresh copy of the base context whose present
        value is the previous period's future value. Active adjustments are then
        applied in registration order, the base repayment is decided (carried
        over unless this is the first period or the rate changed) and the period
        is settled.

        Returns:
            ScheduleResult with totals and the schedule list (period 0 first)

        Raises:
            NonConvergentScheduleError: If the term is unbounded or longer than
                                        the configured max_periods
        """
        cfg = self.config()
        base = self.context()

        if not math.isfinite(base.eff_term) or math.ceil(base.eff_term) > cfg.max_periods:
            raise NonConvergentScheduleError(
                f"schedule of {base.eff_term} periods exceeds the limit of {cfg.max_periods}; "
                f"check that the repayment covers the interest"
            )
        last_period = base.last_period

        logger.debug(
            f"Calculating loan: principal={base.present_value}, "
            f"eff_interest_rate={base.eff_interest_rate}, eff_term={base.eff_term}"
        )

        previous = ScheduleEntry(
            period=0,
            context=base,
            amortization=Amortization(future_value=base.present_value),
        )
        schedule_list = [previous]

        period = 1
        while period <= last_period and previous.amortization.future_value > cfg.payoff_tolerance:
            context = base.for_period(period, previous.amortization.future_value)
            for adjustment in self.get_adjustments_at(period):
                logger.debug(f"Period {period}: applying {adjustment!r}")
                adjustment.apply(context)

            context.repayment = decide_repayment(period, context, previous.context)
            entry = ScheduleEntry(period=period, context=context, amortization=settle(context))
            schedule_list.append(entry)

            previous = entry
            period += 1

        balance = previous.amortization.future_value
        if (
            balance > cfg.payoff_tolerance
            and base.repayment_type is RepaymentType.PRINCIPAL_AND_INTEREST
        ):
            logger.warning(f"Term exhausted after {previous.period} periods with balance {balance:.2f} outstanding")
        logger.debug(f"Loan calculated over {previous.period} periods, final balance {balance}")

        return ScheduleResult(totals=aggregate_totals(schedule_list), schedule_list=schedule_list)
