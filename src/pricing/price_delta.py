# src/pricing/price_delta.py

"""Signed price change between two observations of the same product.

A price decrease is reported as a negative ``change`` and a negative
``change_percent``.  When there is no usable previous price (absent or
zero) the result is a zero, unchanged delta rather than an error, so a
freshly tracked product renders like one whose price has not moved.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from src.config.settings import Settings


class InvalidInputError(ValueError):
    """A negative price was supplied where amounts must be non-negative."""


class Direction(str, Enum):
    """Which way a price moved."""

    UP = "up"
    DOWN = "down"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class PriceDeltaResult:
    """Derived change between a previous and a current price."""

    change: float
    change_percent: float
    direction: Direction


UNCHANGED_DELTA = PriceDeltaResult(
    change=0.0, change_percent=0.0, direction=Direction.UNCHANGED,
)


def round_half_up(value: float, places: int) -> float:
    """Round *value* to *places* decimals, halves away from zero."""
    step = Decimal(1).scaleb(-places)
    return float(
        Decimal(str(value)).quantize(step, rounding=ROUND_HALF_UP)
    )


def compute(
    previous: float | None,
    current: float,
) -> PriceDeltaResult:
    """Compute the change from *previous* to *current*.

    Raises:
        InvalidInputError: if either price is negative.
    """
    if current < 0:
        raise InvalidInputError(
            f"current price must be non-negative, got {current}"
        )
    if previous is not None and previous < 0:
        raise InvalidInputError(
            f"previous price must be non-negative, got {previous}"
        )

    if not previous:
        return UNCHANGED_DELTA

    change = current - previous
    change_percent = round_half_up(
        change / previous * 100, Settings.PERCENT_DECIMALS,
    )

    if change < 0:
        direction = Direction.DOWN
    elif change > 0:
        direction = Direction.UP
    else:
        direction = Direction.UNCHANGED

    return PriceDeltaResult(
        change=change,
        change_percent=change_percent,
        direction=direction,
    )
