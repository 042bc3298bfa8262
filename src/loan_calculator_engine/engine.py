# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

from dataclasses import replace

from .adjustments import Adjustment
from .config import EngineConfig, config as default_config
from .context import LoanParameters, PeriodContext
from .errors import InvalidParameterError

__version__ = "0.1.0"


class CalculatorEngine:
    """
    Base for period-by-period calculators.

    Holds the loan parameters and their normalized base context, the set of
    adjustment kinds the calculator understands, and the adjustments registered
    against it. Subclasses implement calculate().

    Adjustments are kept in registration order; get_adjustments_at() preserves
    that order so that later registrations overwrite earlier ones.
    """

    def __init__(
            self,
            parameters: LoanParameters,
            config: EngineConfig | None = None,
    ) -> None:
        self._config = config if config is not None else default_config()
        self._parameters = parameters
        self._base_context = PeriodContext.from_parameters(parameters)
        self._kinds: list[type[Adjustment]] = []
        self._adjustments: list[Adjustment] = []

    def config(self) -> EngineConfig:
        """Engine configuration (frequency constants, iteration ceiling)."""
        return self._config

    @property
    def parameters(self) -> LoanParameters:
        return self._parameters

    def context(self, **overrides) -> PeriodContext:
        """
        Get or replace the base context.

        With no arguments, returns a fresh copy of the base context that the
        caller may mutate freely. With keyword overrides, replaces the matching
        LoanParameters fields (re-validating and re-normalizing them) and returns
        a copy of the new base context.

        Raises:
            InvalidParameterError: If an override is not a LoanParameters field or
                                   the new parameters are invalid
        """
        if overrides:
            try:
                self._parameters = replace(self._parameters, **overrides)
            except TypeError as e:
                raise InvalidParameterError(f"invalid loan parameter override: {e}") from e
            self._base_context = PeriodContext.from_parameters(self._parameters)
        return replace(self._base_context)

    def use(self, *kinds: type[Adjustment]) -> CalculatorEngine:
        """Register the adjustment kinds this engine accepts."""
        for kind in kinds:
            if kind not in self._kinds:
                self._kinds.append(kind)
        return self

    def add(self, *adjustments: Adjustment) -> CalculatorEngine:
        """
        Register adjustments, in order.

        Raises:
            InvalidParameterError: If an adjustment's kind has not been registered
                                   with use()
        """
        for adjustment in adjustments:
            if type(adjustment) not in self._kinds:
                raise InvalidParameterError(
                    f"adjustment kind {type(adjustment).__name__} is not registered with this engine"
                )
            self._adjustments.append(adjustment)
        return self

    @property
    def adjustments(self) -> tuple[Adjustment, ...]:
        return tuple(self._adjustments)

    def get_adjustments_at(self, period: int) -> list[Adjustment]:
        """Adjustments active at `period`, in registration order."""
        return [a for a in self._adjustments if a.applies(period)]
