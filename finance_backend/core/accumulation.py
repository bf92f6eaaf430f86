"""Compound-interest accumulation logic."""

from __future__ import annotations

import logging
import math
from typing import List

from finance_backend.core.errors import InvalidInput
from finance_backend.core.money import round_money
from finance_backend.core.rates import effective_monthly_rate, horizon_to_months
from finance_backend.schemas.accumulation import (
    ContributionTiming,
    ProjectionInput,
    ProjectionPoint,
    ProjectionResult,
)

logger = logging.getLogger(__name__)

# 500 years
MAX_PROJECTION_MONTHS = 6000


def validate_projection_input(inp: ProjectionInput) -> List[str]:
    errors: List[str] = []

    for name in ("initial_amount", "monthly_contribution", "nominal_rate"):
        if not math.isfinite(getattr(inp, name)):
            errors.append(f"{name} must be a finite number")

    if errors:
        return errors

    if inp.initial_amount <= 0:
        errors.append("initial_amount must be greater than zero")
    if inp.monthly_contribution < 0:
        errors.append("monthly_contribution cannot be negative")
    if inp.nominal_rate <= 0:
        errors.append("nominal_rate must be greater than zero")
    if inp.horizon <= 0:
        errors.append("horizon must be a positive whole number")
    elif horizon_to_months(inp.horizon, inp.horizon_basis) > MAX_PROJECTION_MONTHS:
        errors.append(f"horizon cannot exceed {MAX_PROJECTION_MONTHS} months")
    return errors


def simulate_accumulation(
    initial_amount: float,
    monthly_contribution: float,
    monthly_rate: float,
    total_months: int,
    timing: ContributionTiming = ContributionTiming.END,
) -> ProjectionResult:
    """
    Run the month-by-month projection.

    Order of operations (per month, END timing):
      1) Apply growth to the running balance.
      2) Add the month's contribution (it earns nothing this month).
    START timing deposits first, so the contribution grows in its own month.

    Samples are taken at month 0, every 12th month, and the final month.
    Sampled values are rounded to cents; the running balance is not.
    A balance that overflows the float range is rejected as InvalidInput.
    """
    if total_months < 1:
        raise InvalidInput("total_months must be at least 1")

    balance = initial_amount
    contributed = initial_amount
    series: List[ProjectionPoint] = [
        ProjectionPoint(month_index=0, accumulated_value=balance, total_contributed=contributed)
    ]

    for month in range(1, total_months + 1):
        if timing == ContributionTiming.START:
            balance += monthly_contribution
            balance *= 1 + monthly_rate
        else:
            balance *= 1 + monthly_rate
            balance += monthly_contribution
        contributed += monthly_contribution

        if month % 12 == 0 or month == total_months:
            series.append(
                ProjectionPoint(
                    month_index=month,
                    accumulated_value=round_money(balance),
                    total_contributed=round_money(contributed),
                )
            )

    if not (math.isfinite(balance) and math.isfinite(contributed)):
        raise InvalidInput("projection grows beyond a representable amount; lower the rate or horizon")

    return ProjectionResult(
        final_value=balance,
        total_contributed=contributed,
        total_interest=balance - contributed,
        monthly_rate=monthly_rate,
        total_months=total_months,
        series=series,
    )


def project_compound_interest(inp: ProjectionInput) -> ProjectionResult:
    """Validate, normalize units, and simulate."""
    errors = validate_projection_input(inp)
    if errors:
        logger.warning("Rejected projection input: %s", "; ".join(errors))
        raise InvalidInput(errors)

    monthly_rate = effective_monthly_rate(inp.nominal_rate, inp.rate_basis)
    total_months = horizon_to_months(inp.horizon, inp.horizon_basis)

    result = simulate_accumulation(
        inp.initial_amount,
        inp.monthly_contribution,
        monthly_rate,
        total_months,
        timing=inp.contribution_timing,
    )
    logger.info(
        "Projected %d months at %.6f/month: final=%.2f contributed=%.2f",
        total_months,
        monthly_rate,
        result.final_value,
        result.total_contributed,
    )
    return result
