"""Error types raised by the calculators."""

from __future__ import annotations

from typing import List, Union


class CalculationError(ValueError):
    """Raised before a result is built; callers never see a partial result."""

    reason = "calculation_error"

    def __init__(self, errors: Union[str, List[str]]):
        if isinstance(errors, str):
            errors = [errors]
        super().__init__("; ".join(errors))
        self.errors = errors


class InvalidInput(CalculationError):
    """A required field is missing, non-finite, or outside its domain."""

    reason = "invalid_input"


class DegenerateGoal(CalculationError):
    """The savings rate cannot ever reach the reserve target."""

    reason = "degenerate_goal"
