# src/models/product.py

"""Tracked product model for inter-module data flow."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from src.models.price_observation import PriceObservation
from src.pricing.price_delta import (
    InvalidInputError,
    PriceDeltaResult,
    compute,
)

logger = logging.getLogger("price_track.models")


class Platform(str, Enum):
    """E-commerce marketplace a listing belongs to."""

    TOKOPEDIA = "tokopedia"
    SHOPEE = "shopee"
    BUKALAPAK = "bukalapak"

    @property
    def label(self) -> str:
        """Human-readable marketplace name."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: str) -> "Platform":
        """Resolve a platform from its id or label, case-insensitively."""
        wanted = value.strip().lower()
        for platform in cls:
            if wanted in (platform.value, platform.label.lower()):
                return platform
        raise ValueError(f"Unknown platform: {value!r}")


@dataclass(frozen=True)
class Product:
    """A tracked product listing and its chronological price history.

    ``current_price`` is expected to be the price of the latest history
    entry; :meth:`from_history` derives it that way.
    """

    id: int
    name: str
    platform: Platform
    current_price: float
    price_history: tuple[PriceObservation, ...] = field(default=())
    url: str = ""

    def __post_init__(self) -> None:
        if self.current_price < 0:
            raise InvalidInputError(
                f"current price must be non-negative, got {self.current_price}"
            )
        ordered = tuple(sorted(self.price_history, key=lambda o: o.date))
        object.__setattr__(self, "price_history", ordered)
        if ordered and ordered[-1].price != self.current_price:
            logger.warning(
                "Product %s current price %s differs from latest "
                "observation %s",
                self.id,
                self.current_price,
                ordered[-1].price,
            )

    @classmethod
    def from_history(
        cls,
        product_id: int,
        name: str,
        platform: Platform,
        history: Iterable[PriceObservation],
        url: str = "",
    ) -> "Product":
        """Build a product whose current price is its latest observation."""
        ordered = tuple(sorted(history, key=lambda o: o.date))
        current = ordered[-1].price if ordered else 0.0
        return cls(
            id=product_id,
            name=name,
            platform=platform,
            current_price=current,
            price_history=ordered,
            url=url,
        )

    @property
    def previous_price(self) -> float | None:
        """Price of the observation before the latest one, if any."""
        if len(self.price_history) < 2:
            return None
        return self.price_history[-2].price

    def price_delta(self) -> PriceDeltaResult:
        """Change from the previous observation to the current price."""
        return compute(self.previous_price, self.current_price)
