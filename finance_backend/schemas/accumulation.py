"""Data contracts for compound-interest accumulation."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from finance_backend.core.money import cents_to_major
from finance_backend.core.rates import HorizonBasis, RateBasis


class ContributionTiming(str, Enum):
    # END: growth first, then deposit (the deposit does not earn interest that month)
    END = "end"
    START = "start"


class ProjectionInput(BaseModel):
    """Inputs for a projection, with money already in major units."""

    initial_amount: float = Field(..., description="Balance at month 0.")
    monthly_contribution: float = Field(0.0, description="Deposit made every month.")
    nominal_rate: float = Field(
        ...,
        description="Interest rate as a percentage (e.g. 12 for 12%).",
    )
    rate_basis: RateBasis = RateBasis.ANNUAL
    horizon: int = Field(..., description="Projection length, in horizon_basis units.")
    horizon_basis: HorizonBasis = HorizonBasis.YEARS
    contribution_timing: ContributionTiming = ContributionTiming.END


class CompoundInterestRequest(BaseModel):
    """Payload posted by the dashboard; money fields are integer cents."""

    initial_amount_cents: int
    monthly_contribution_cents: int = 0
    nominal_rate: float
    rate_basis: RateBasis = RateBasis.ANNUAL
    horizon: int
    horizon_basis: HorizonBasis = HorizonBasis.YEARS
    contribution_timing: ContributionTiming = ContributionTiming.END

    def to_projection_input(self) -> ProjectionInput:
        return ProjectionInput(
            initial_amount=cents_to_major(self.initial_amount_cents, "initial_amount_cents"),
            monthly_contribution=cents_to_major(
                self.monthly_contribution_cents, "monthly_contribution_cents"
            ),
            nominal_rate=self.nominal_rate,
            rate_basis=self.rate_basis,
            horizon=self.horizon,
            horizon_basis=self.horizon_basis,
            contribution_timing=self.contribution_timing,
        )


class ProjectionPoint(BaseModel):
    """Single sampled row of a projection."""

    month_index: int = Field(..., ge=0)
    accumulated_value: float
    total_contributed: float


class ProjectionResult(BaseModel):
    """Projected accumulation with a yearly-sampled series."""

    final_value: float
    total_contributed: float
    total_interest: float
    monthly_rate: float
    total_months: int
    series: List[ProjectionPoint]
