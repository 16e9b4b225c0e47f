# src/models/price_observation.py

"""A dated price sample for a tracked product."""

from dataclasses import dataclass
from datetime import date

from src.pricing.price_delta import InvalidInputError


@dataclass(frozen=True)
class PriceObservation:
    """A single price observation, immutable once recorded."""

    date: date
    price: float

    def __post_init__(self) -> None:
        if self.price < 0:
            raise InvalidInputError(
                f"observed price must be non-negative, got {self.price}"
            )
