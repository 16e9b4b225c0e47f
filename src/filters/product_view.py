# src/filters/product_view.py

"""Search-and-sort view over the tracked product list."""

import logging
import unicodedata
from collections.abc import Sequence
from enum import Enum

from src.models.product import Product

logger = logging.getLogger("price_track.filters")


class SortKey(str, Enum):
    """Orderings offered by the product list."""

    NAME = "name"
    PRICE = "price"

    @classmethod
    def parse(cls, value: str) -> "SortKey":
        """Resolve a sort key from its string value."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(k.value for k in cls)
            raise ValueError(
                f"Unknown sort key {value!r} (expected one of: {valid})"
            ) from None


def collation_key(name: str) -> tuple[str, str]:
    """Locale-insensitive ordering key: accents folded, then case folded.

    The raw name breaks ties so ``"apple"`` and ``"Apple"`` still order
    deterministically.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(
        ch for ch in decomposed if not unicodedata.combining(ch)
    )
    return base.casefold(), name


class ProductView:
    """Filter products by name and order them for display."""

    @staticmethod
    def filter_by_query(
        products: Sequence[Product],
        query: str,
    ) -> list[Product]:
        """Keep products whose name contains *query*, ignoring case."""
        if not query:
            return list(products)
        needle = query.casefold()
        return [p for p in products if needle in p.name.casefold()]

    @staticmethod
    def sort(
        products: Sequence[Product],
        sort_key: SortKey,
    ) -> list[Product]:
        """Return a new, stably sorted list."""
        if sort_key is SortKey.PRICE:
            return sorted(products, key=lambda p: p.current_price)
        return sorted(products, key=lambda p: collation_key(p.name))

    @classmethod
    def view(
        cls,
        products: Sequence[Product],
        query: str,
        sort_key: SortKey,
    ) -> list[Product]:
        """Filter by *query*, then order by *sort_key*.

        The input sequence is never mutated.
        """
        kept = cls.filter_by_query(products, query)
        if len(kept) != len(products):
            logger.debug(
                "Query %r kept %d of %d products",
                query,
                len(kept),
                len(products),
            )
        return cls.sort(kept, sort_key)
