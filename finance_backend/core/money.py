"""Currency helpers for the boundary between cents and major units."""

from __future__ import annotations

from numbers import Integral

from finance_backend.core.errors import InvalidInput

CENTS_PER_UNIT = 100


def cents_to_major(cents: int, field: str = "amount") -> float:
    """
    Convert integer minor units (e.g. 12345) into major units (123.45).

    This is the engine's own boundary: the HTTP request models already coerce
    cents to int, but direct callers of the engine are checked here too.
    """
    # bool is an Integral subclass but never a valid amount
    if isinstance(cents, bool) or not isinstance(cents, Integral):
        raise InvalidInput(f"{field} must be an integer number of cents")
    try:
        return int(cents) / CENTS_PER_UNIT
    except OverflowError:
        raise InvalidInput(f"{field} is too large") from None


def round_money(value: float) -> float:
    return round(value, 2)
