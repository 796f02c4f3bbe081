"""
Ship rating computation.

The rating is derived from speed, usage and production year:

    rating = (80 * speed * k) / (3019 - year + 1),  k = 0.5 if used else 1

rounded half-up to two decimal places. The quotient is computed in binary
floating point and the rounding is applied to that float's exact decimal
expansion, so results match clients that compute the same way.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal, ROUND_HALF_UP

# Latest production year accepted; the rating denominator is measured from it.
CURRENT_YEAR = 3019

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_TWO_PLACES = Decimal("0.01")


def prod_year(prod_date: int) -> int:
    """Return the UTC calendar year of an epoch-milliseconds timestamp.

    Raises OverflowError for timestamps outside the supported date range.
    """
    return (_EPOCH + timedelta(milliseconds=prod_date)).year


def compute_rating(speed: float, is_used: bool, prod_date: int) -> float:
    """Compute the rating for the given ship fields."""
    year = prod_year(prod_date)
    raw = (80 * speed * (0.5 if is_used else 1)) / (CURRENT_YEAR - year + 1)
    return float(Decimal(raw).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))
