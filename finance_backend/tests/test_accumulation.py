from __future__ import annotations

from math import isclose

import pytest

from finance_backend.core.accumulation import (
    project_compound_interest,
    simulate_accumulation,
    validate_projection_input,
)
from finance_backend.core.errors import InvalidInput
from finance_backend.core.rates import HorizonBasis, RateBasis
from finance_backend.schemas.accumulation import ContributionTiming, ProjectionInput


def make_input(**overrides) -> ProjectionInput:
    values = {
        "initial_amount": 1000.0,
        "monthly_contribution": 100.0,
        "nominal_rate": 12.0,
        "rate_basis": RateBasis.ANNUAL,
        "horizon": 1,
        "horizon_basis": HorizonBasis.YEARS,
    }
    values.update(overrides)
    return ProjectionInput(**values)


def test_one_year_annual_rate_scenario():
    result = project_compound_interest(make_input())

    assert isclose(result.monthly_rate, 0.009489, abs_tol=1e-6)
    assert result.total_months == 12
    assert isclose(result.total_contributed, 2200.0, abs_tol=1e-9)
    assert result.final_value > result.total_contributed
    assert isclose(result.total_interest, result.final_value - result.total_contributed)


def test_pure_compounding_with_monthly_rate():
    """
    With no contributions, twelve months at 1% should equal a single 1.01**12 step.
    """
    result = project_compound_interest(
        make_input(
            monthly_contribution=0.0,
            nominal_rate=1.0,
            rate_basis=RateBasis.MONTHLY,
            horizon=12,
            horizon_basis=HorizonBasis.MONTHS,
        )
    )

    assert isclose(result.final_value, 1000 * 1.01**12, rel_tol=1e-12)
    assert result.total_contributed == 1000.0


def test_annual_rate_compounds_back_to_nominal_figure():
    result = project_compound_interest(make_input(monthly_contribution=0.0, horizon=1))
    assert isclose(result.final_value, 1120.0, rel_tol=1e-9)


def test_series_bounds_and_sampling():
    result = project_compound_interest(
        make_input(initial_amount=1234.565, horizon=30, horizon_basis=HorizonBasis.MONTHS)
    )

    months = [point.month_index for point in result.series]
    assert months == [0, 12, 24, 30]
    # month 0 is the raw starting state, not a rounded sample
    assert result.series[0].accumulated_value == 1234.565
    assert result.series[-1].month_index == result.total_months
    assert result.series[-1].accumulated_value == round(result.final_value, 2)


def test_horizon_in_years_samples_every_twelve_months():
    result = project_compound_interest(make_input(horizon=3))
    assert [point.month_index for point in result.series] == [0, 12, 24, 36]


def test_running_balance_keeps_full_precision():
    result = simulate_accumulation(1000.0, 33.333, 0.0071, 7)
    assert result.series[-1].accumulated_value == round(result.final_value, 2)
    assert result.final_value != result.series[-1].accumulated_value


def test_contribution_monotonicity():
    base = project_compound_interest(make_input(horizon=10))
    richer = project_compound_interest(make_input(horizon=10, monthly_contribution=250.0))
    bigger_start = project_compound_interest(make_input(horizon=10, initial_amount=5000.0))

    assert richer.final_value >= base.final_value
    assert bigger_start.final_value >= base.final_value


def test_identical_inputs_are_deterministic():
    first = project_compound_interest(make_input(horizon=25))
    second = project_compound_interest(make_input(horizon=25))

    assert first == second
    assert first.final_value == second.final_value


def test_zero_contribution_is_a_valid_case():
    result = project_compound_interest(make_input(monthly_contribution=0.0, horizon=2))
    assert result.total_contributed == 1000.0
    assert all(point.total_contributed == 1000.0 for point in result.series)


def test_end_timing_contribution_skips_its_own_month():
    """
    With growth-then-deposit, a single month leaves the deposit untouched.
    """
    result = simulate_accumulation(1000.0, 100.0, 0.01, 1)
    assert isclose(result.final_value, 1000.0 * 1.01 + 100.0)


def test_start_timing_contribution_grows_in_its_own_month():
    single = simulate_accumulation(1000.0, 100.0, 0.01, 1, ContributionTiming.START)
    assert isclose(single.final_value, 1100.0 * 1.01)

    end = simulate_accumulation(1000.0, 100.0, 0.01, 24, ContributionTiming.END)
    start = simulate_accumulation(1000.0, 100.0, 0.01, 24, ContributionTiming.START)
    assert start.final_value > end.final_value
    assert start.total_contributed == end.total_contributed


def test_zero_initial_amount_is_rejected():
    with pytest.raises(InvalidInput) as excinfo:
        project_compound_interest(make_input(initial_amount=0.0))
    assert any("initial_amount" in message for message in excinfo.value.errors)


def test_all_violations_are_reported_together():
    errors = validate_projection_input(
        make_input(initial_amount=-1.0, monthly_contribution=-5.0, nominal_rate=0.0, horizon=0)
    )
    assert len(errors) == 4


def test_non_finite_values_are_rejected():
    errors = validate_projection_input(make_input(nominal_rate=float("nan")))
    assert errors == ["nominal_rate must be a finite number"]


def test_simulator_refuses_empty_horizon():
    with pytest.raises(InvalidInput):
        simulate_accumulation(1000.0, 0.0, 0.01, 0)


def test_horizon_is_capped():
    assert validate_projection_input(make_input(horizon=500)) == []
    assert validate_projection_input(make_input(horizon=501)) == [
        "horizon cannot exceed 6000 months"
    ]
    assert validate_projection_input(
        make_input(horizon=6001, horizon_basis=HorizonBasis.MONTHS)
    ) == ["horizon cannot exceed 6000 months"]


def test_overflowing_balance_is_rejected():
    with pytest.raises(InvalidInput) as excinfo:
        project_compound_interest(
            make_input(nominal_rate=1e6, rate_basis=RateBasis.MONTHLY, horizon=100)
        )
    assert "representable" in excinfo.value.errors[0]
