"""
Credit score engine: converts one ``Customer`` into an integer score.

Score formula (weighted sum, range 0–100)
-----------------------------------------
    raw = (
        0.4 * payment_history                 # on-time payment percentage
        + 0.3 * (100 - credit_utilization)    # unused share of credit limit
        + 0.3 * min(age_of_credit_history, 10)  # history age, capped at 10 years
    )

Input clamping (applied before the formula, never reported as an error)
-----------------------------------------------------------------------
    payment_history        -> [0, 100]
    credit_utilization     -> [0, 100]
    age_of_credit_history  -> [0, inf)   (the 10-year cap lives in the formula)

Rounding
--------
``raw`` is rounded half away from zero (55.5 -> 56, 16.5 -> 17).  Python's
built-in ``round()`` rounds half to even and would give 56 but 16, so the
engine rounds through ``decimal`` instead.  The rounded value is returned
as-is; the clamps above already bound it to [0, 100].

All functions here are pure and do no I/O or logging.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from credit_risk.models.customer import Customer

PAYMENT_HISTORY_WEIGHT = 0.4
UTILIZATION_WEIGHT = 0.3
HISTORY_AGE_WEIGHT = 0.3

PERCENT_MIN = 0
PERCENT_MAX = 100
HISTORY_AGE_CAP_YEARS = 10


class NullInputError(ValueError):
    """Raised when a score is requested without a customer.

    Distinct from any valid score: a missing record is a data-integrity
    problem and must never be turned into a default score.
    """

    def __init__(self, argument: str = "customer") -> None:
        self.argument = argument
        super().__init__(f"{argument} cannot be None.")


def clamp(value: int, lower: int, upper: Optional[int] = None) -> int:
    """Clamp ``value`` to ``[lower, upper]``; ``upper=None`` means unbounded."""
    if upper is not None:
        value = min(upper, value)
    return max(lower, value)


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties going away from zero.

    ``Decimal(value)`` is the exact binary value of the float, so only true
    ``.5`` ties are affected (``0.49999999999999994`` still rounds to 0).
    """
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def raw_score(payment_history: int, credit_utilization: int, age_of_credit_history: int) -> float:
    """Return the unrounded weighted score for already-clamped inputs."""
    return (
        PAYMENT_HISTORY_WEIGHT * payment_history
        + UTILIZATION_WEIGHT * (PERCENT_MAX - credit_utilization)
        + HISTORY_AGE_WEIGHT * min(age_of_credit_history, HISTORY_AGE_CAP_YEARS)
    )


def compute_score(customer: Optional[Customer]) -> int:
    """Compute the integer credit score for one customer.

    Args:
        customer: The customer to score.  Out-of-range signal values are
            clamped, not rejected.

    Returns:
        Integer credit score in [0, 100].

    Raises:
        NullInputError: If ``customer`` is ``None``.
    """
    if customer is None:
        raise NullInputError("customer")

    payment_history = clamp(customer.payment_history, PERCENT_MIN, PERCENT_MAX)
    credit_utilization = clamp(customer.credit_utilization, PERCENT_MIN, PERCENT_MAX)
    age_of_credit_history = clamp(customer.age_of_credit_history, 0)

    return round_half_away_from_zero(
        raw_score(payment_history, credit_utilization, age_of_credit_history)
    )
