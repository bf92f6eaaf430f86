import pytest

from finance_backend.core.errors import InvalidInput
from finance_backend.core.money import cents_to_major, round_money


def test_cents_become_major_units():
    assert cents_to_major(12345) == 123.45
    assert cents_to_major(0) == 0.0
    assert cents_to_major(1) == 0.01


@pytest.mark.parametrize("bad", [12.5, "100", True, None])
def test_non_integer_cents_are_rejected(bad):
    with pytest.raises(InvalidInput) as excinfo:
        cents_to_major(bad, "initial_amount_cents")
    assert excinfo.value.errors == ["initial_amount_cents must be an integer number of cents"]


def test_round_money():
    assert round_money(1.23456) == 1.23
    assert round_money(2200.0) == 2200.0


def test_cents_beyond_float_range_are_rejected():
    with pytest.raises(InvalidInput) as excinfo:
        cents_to_major(10**400, "monthly_income_cents")
    assert excinfo.value.errors == ["monthly_income_cents is too large"]
