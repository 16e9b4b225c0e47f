# src/services/tracking_service.py

"""Track New form submission: validate and register a product."""

import logging
from urllib.parse import unquote, urlparse

from src.models.product import Platform, Product
from src.services.toast_queue import ToastQueue
from src.storage.catalog import ProductCatalog

logger = logging.getLogger("price_track.tracking")

SUCCESS_TITLE = "Success"
SUCCESS_MESSAGE = "Product tracking started successfully"
ERROR_TITLE = "Error"
ERROR_MESSAGE = "Failed to start tracking product"


class TrackingError(ValueError):
    """The Track New form data was rejected."""


def validate_url(raw_url: str) -> str:
    """Return the stripped URL, or raise if it is not http(s) with a host."""
    url = raw_url.strip()
    if not url:
        raise TrackingError("Product URL is required")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise TrackingError(f"Not a valid product URL: {url}")
    return url


def name_from_url(url: str) -> str:
    """Derive a display name from the last path segment of *url*."""
    parsed = urlparse(url)
    segments = [s for s in parsed.path.split("/") if s]
    if not segments:
        return parsed.netloc
    slug = unquote(segments[-1])
    words = slug.replace("-", " ").replace("_", " ").split()
    return " ".join(w.capitalize() for w in words) or parsed.netloc


class TrackingService:
    """Handle Track New submissions against a catalog.

    Outcomes are reported through *toasts* when one is given.
    """

    def __init__(
        self,
        catalog: ProductCatalog,
        toasts: ToastQueue | None = None,
    ) -> None:
        self.catalog = catalog
        self.toasts = toasts

    def register(self, url: str, platform: str | Platform) -> Product:
        """Validate the form data and add a placeholder product.

        Raises:
            TrackingError: on an invalid URL or unknown platform.
        """
        clean_url = validate_url(url)
        if isinstance(platform, Platform):
            resolved = platform
        else:
            if not platform.strip():
                raise TrackingError("Platform is required")
            try:
                resolved = Platform.parse(platform)
            except ValueError as exc:
                raise TrackingError(str(exc)) from exc

        for existing in self.catalog.all():
            if existing.url == clean_url:
                raise TrackingError(f"Already tracking {clean_url}")

        product = Product(
            id=self.catalog.next_id(),
            name=name_from_url(clean_url),
            platform=resolved,
            current_price=0.0,
            url=clean_url,
        )
        self.catalog.add(product)
        return product

    def submit(self, url: str, platform: str | Platform) -> Product | None:
        """Form handler: register and report the outcome as a toast.

        Returns the new product, or ``None`` when the submission failed.
        """
        try:
            product = self.register(url, platform)
        except TrackingError as exc:
            logger.warning("Tracking request rejected: %s", exc)
            if self.toasts is not None:
                self.toasts.push(
                    ERROR_TITLE, ERROR_MESSAGE, variant="destructive",
                )
            return None

        if self.toasts is not None:
            self.toasts.push(SUCCESS_TITLE, SUCCESS_MESSAGE)
        return product
