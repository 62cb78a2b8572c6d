"""Holds the current loan inputs and their latest calculation."""

from __future__ import annotations

import logging
from dataclasses import replace

from .config import DEFAULT_PARAMETERS
from .loan import LoanParameters
from .scenario import CalculationResult, calculate

logger = logging.getLogger(__name__)


class ScenarioController:
    """Recalculates on every parameter change.

    The held result is always the output of ``calculate`` for the held
    parameters and is swapped as a whole, never edited in place.
    """

    def __init__(self, params: LoanParameters | None = None):
        self._params = params or DEFAULT_PARAMETERS
        self._result = calculate(self._params)

    @property
    def params(self) -> LoanParameters:
        return self._params

    @property
    def result(self) -> CalculationResult:
        return self._result

    def set_params(self, params: LoanParameters) -> CalculationResult:
        """Replace all inputs and recalculate."""
        self._params = params
        self._result = calculate(params)
        return self._result

    def update(self, **changes) -> CalculationResult:
        """Change some inputs by field name and recalculate.

        Unchanged inputs skip the recalculation.
        """
        params = replace(self._params, **changes)
        if params == self._params:
            logger.debug("No parameter change, keeping current result")
            return self._result
        return self.set_params(params)
