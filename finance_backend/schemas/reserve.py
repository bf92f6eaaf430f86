"""Data contracts for emergency-reserve sizing."""

from enum import Enum

from pydantic import BaseModel, Field

from finance_backend.core.money import cents_to_major


class EmploymentType(str, Enum):
    CLT = "clt"
    SELF_EMPLOYED = "self_employed"
    FREELANCER = "freelancer"


class ReserveInput(BaseModel):
    """Inputs for reserve sizing, with money already in major units."""

    fixed_monthly_cost: float
    monthly_income: float
    savings_percent: float = Field(10.0, description="Share of income saved each month, 0-100.")
    safety_months: int = Field(6, description="Months of fixed costs to cover (usually 3, 6 or 12).")
    employment_type: EmploymentType = EmploymentType.CLT


class EmergencyReserveRequest(BaseModel):
    fixed_monthly_cost_cents: int
    monthly_income_cents: int
    savings_percent: float = 10.0
    safety_months: int = 6
    employment_type: EmploymentType = EmploymentType.CLT

    def to_reserve_input(self) -> ReserveInput:
        return ReserveInput(
            fixed_monthly_cost=cents_to_major(self.fixed_monthly_cost_cents, "fixed_monthly_cost_cents"),
            monthly_income=cents_to_major(self.monthly_income_cents, "monthly_income_cents"),
            savings_percent=self.savings_percent,
            safety_months=self.safety_months,
            employment_type=self.employment_type,
        )


class ReserveResult(BaseModel):
    target_reserve: float
    monthly_savings: float
    months_to_reach: int
    safety_months: int
    employment_type: EmploymentType
