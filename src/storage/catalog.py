# src/storage/catalog.py

"""In-memory product catalog with change subscriptions."""

import logging
from collections.abc import Callable
from datetime import date

from src.models.price_observation import PriceObservation
from src.models.product import Platform, Product

logger = logging.getLogger("price_track.catalog")

CatalogListener = Callable[[list[Product]], None]


def sample_products() -> list[Product]:
    """Seed data shown before any product has been tracked."""
    return [
        Product.from_history(
            product_id=1,
            name="Smartphone X",
            platform=Platform.TOKOPEDIA,
            history=[
                PriceObservation(date(2024, 1, 1), 3_900_000),
                PriceObservation(date(2024, 1, 8), 3_700_000),
                PriceObservation(date(2024, 1, 15), 3_500_000),
            ],
            url="https://www.tokopedia.com/example/smartphone-x",
        ),
        Product.from_history(
            product_id=2,
            name="Laptop Y",
            platform=Platform.SHOPEE,
            history=[
                PriceObservation(date(2024, 1, 1), 8_200_000),
                PriceObservation(date(2024, 1, 8), 7_990_000),
                PriceObservation(date(2024, 1, 15), 7_640_000),
            ],
            url="https://shopee.co.id/example/laptop-y",
        ),
        Product.from_history(
            product_id=3,
            name="Sendal Jepit",
            platform=Platform.BUKALAPAK,
            history=[
                PriceObservation(date(2024, 1, 1), 29_000),
                PriceObservation(date(2024, 1, 8), 29_000),
                PriceObservation(date(2024, 1, 15), 30_000),
            ],
            url="https://www.bukalapak.com/example/sendal-jepit",
        ),
    ]


class ProductCatalog:
    """Session-scoped store of tracked products.

    Listeners registered with :meth:`subscribe` receive a fresh copy of
    the product list after every change.
    """

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = []
        self._listeners: list[CatalogListener] = []
        seed = sample_products() if products is None else products
        for product in seed:
            self._insert(product)
        logger.debug(
            "ProductCatalog initialised with %d products",
            len(self._products),
        )

    def all(self) -> list[Product]:
        """Return every product in insertion order."""
        return list(self._products)

    def get(self, product_id: int) -> Product | None:
        """Look up a product by id."""
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def next_id(self) -> int:
        """Smallest id greater than any in the catalog."""
        return max((p.id for p in self._products), default=0) + 1

    def add(self, product: Product) -> None:
        """Add *product* and notify subscribers.

        Raises:
            ValueError: if a product with the same id already exists.
        """
        self._insert(product)
        logger.info(
            "Tracking product %d (%s on %s)",
            product.id,
            product.name,
            product.platform.label,
        )
        self._notify()

    def subscribe(self, listener: CatalogListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _insert(self, product: Product) -> None:
        if self.get(product.id) is not None:
            raise ValueError(f"Duplicate product id: {product.id}")
        self._products.append(product)

    def _notify(self) -> None:
        snapshot = self.all()
        for listener in list(self._listeners):
            listener(snapshot)
