"""Unit normalization for rates and horizons."""

from __future__ import annotations

from enum import Enum


class RateBasis(str, Enum):
    ANNUAL = "annual"
    MONTHLY = "monthly"


class HorizonBasis(str, Enum):
    YEARS = "years"
    MONTHS = "months"


def effective_monthly_rate(nominal_rate: float, basis: RateBasis) -> float:
    """
    Return the monthly growth rate for a percentage rate.

    Monthly rates pass straight through. Annual rates are converted to the
    geometric equivalent, (1 + annual) ** (1/12) - 1, so twelve months of
    compounding reproduce the annual figure exactly.
    """
    if basis == RateBasis.MONTHLY:
        return nominal_rate / 100
    return (1 + nominal_rate / 100) ** (1 / 12) - 1


def horizon_to_months(horizon: float, basis: HorizonBasis) -> int:
    months = horizon * 12 if basis == HorizonBasis.YEARS else horizon
    return int(months)
