"""Emergency-reserve sizing."""

from __future__ import annotations

import logging
import math
from typing import List

from finance_backend.core.errors import DegenerateGoal, InvalidInput
from finance_backend.schemas.reserve import ReserveInput, ReserveResult

logger = logging.getLogger(__name__)


def validate_reserve_input(inp: ReserveInput) -> List[str]:
    errors: List[str] = []
    for name in ("fixed_monthly_cost", "monthly_income", "savings_percent"):
        value = getattr(inp, name)
        if not math.isfinite(value):
            errors.append(f"{name} must be a finite number")
        elif value <= 0:
            errors.append(f"{name} must be greater than zero")
    if inp.safety_months <= 0:
        errors.append("safety_months must be a positive whole number")
    return errors


def months_to_reach(target_reserve: float, monthly_savings: float) -> int:
    """Months of saving needed to reach the target; a partial month counts as a full one."""
    if monthly_savings <= 0:
        raise DegenerateGoal("monthly savings must be greater than zero to reach the reserve")
    months = target_reserve / monthly_savings
    if not math.isfinite(months):
        raise DegenerateGoal("monthly savings are too small to reach the reserve")
    return math.ceil(months)


def size_emergency_reserve(inp: ReserveInput) -> ReserveResult:
    errors = validate_reserve_input(inp)
    if errors:
        logger.warning("Rejected reserve input: %s", "; ".join(errors))
        raise InvalidInput(errors)

    try:
        target_reserve = inp.fixed_monthly_cost * inp.safety_months
    except OverflowError:
        target_reserve = math.inf
    monthly_savings = inp.monthly_income * inp.savings_percent / 100

    overflowed = [
        name
        for name, value in (("target_reserve", target_reserve), ("monthly_savings", monthly_savings))
        if not math.isfinite(value)
    ]
    if overflowed:
        errors = [f"{name} is too large to compute" for name in overflowed]
        logger.warning("Rejected reserve input: %s", "; ".join(errors))
        raise InvalidInput(errors)

    try:
        months = months_to_reach(target_reserve, monthly_savings)
    except DegenerateGoal:
        logger.warning(
            "Reserve goal unreachable: income=%r percent=%r", inp.monthly_income, inp.savings_percent
        )
        raise

    logger.info(
        "Reserve of %.2f (%d months, %s) reached in %d months at %.2f/month",
        target_reserve,
        inp.safety_months,
        inp.employment_type.value,
        months,
        monthly_savings,
    )
    return ReserveResult(
        target_reserve=target_reserve,
        monthly_savings=monthly_savings,
        months_to_reach=months,
        safety_months=inp.safety_months,
        employment_type=inp.employment_type,
    )
