# Requires Python 3.12+
"""
Exception types raised by the loan calculator engine.

InvalidParameterError derives from ValueError so that callers catching the
ValueError raised by the math primitives also catch bad loan inputs.
"""
from __future__ import annotations


class LoanCalculatorError(Exception):
    """Base class for all loan calculator errors."""


class InvalidParameterError(LoanCalculatorError, ValueError):
    """A loan parameter or adjustment definition is out of range."""


class NonConvergentScheduleError(LoanCalculatorError, ArithmeticError):
    """
    The schedule cannot reach payoff within the iteration ceiling.

    Typically raised when a fixed repayment never covers the period interest,
    so the number of periods needed to repay the loan is unbounded.
    """
