# tests/test_tracking_service.py

"""Tests for Track New form handling."""

import unittest

from src.models.product import Platform
from src.services.toast_queue import ToastQueue
from src.services.tracking_service import (
    ERROR_MESSAGE,
    SUCCESS_MESSAGE,
    TrackingError,
    TrackingService,
    name_from_url,
    validate_url,
)
from src.storage.catalog import ProductCatalog


class TestValidateUrl(unittest.TestCase):
    """validate_url behaviour."""

    def test_accepts_https(self) -> None:
        url = "https://shopee.co.id/item/123"
        self.assertEqual(validate_url(f"  {url} "), url)

    def test_rejects_empty(self) -> None:
        with self.assertRaises(TrackingError):
            validate_url("   ")

    def test_rejects_missing_scheme(self) -> None:
        with self.assertRaises(TrackingError):
            validate_url("shopee.co.id/item/123")

    def test_rejects_other_scheme(self) -> None:
        with self.assertRaises(TrackingError):
            validate_url("ftp://example.com/file")


class TestNameFromUrl(unittest.TestCase):
    """name_from_url behaviour."""

    def test_slug_to_title(self) -> None:
        self.assertEqual(
            name_from_url("https://www.tokopedia.com/shop/kopi-arabika_1kg"),
            "Kopi Arabika 1kg",
        )

    def test_no_path_uses_host(self) -> None:
        self.assertEqual(
            name_from_url("https://shopee.co.id/"), "shopee.co.id"
        )


class TestTrackingService(unittest.TestCase):
    """TrackingService register/submit."""

    def setUp(self) -> None:
        self.catalog = ProductCatalog()
        self.toasts = ToastQueue(timeout=5.0)
        self.service = TrackingService(self.catalog, self.toasts)

    def test_register_adds_product(self) -> None:
        product = self.service.register(
            "https://shopee.co.id/kipas-angin", "shopee",
        )
        self.assertEqual(product.id, 4)
        self.assertEqual(product.name, "Kipas Angin")
        self.assertIs(product.platform, Platform.SHOPEE)
        self.assertEqual(product.current_price, 0.0)
        self.assertEqual(product.price_history, ())
        self.assertIs(self.catalog.get(4), product)

    def test_register_accepts_platform_enum(self) -> None:
        product = self.service.register(
            "https://www.bukalapak.com/p/sepatu", Platform.BUKALAPAK,
        )
        self.assertIs(product.platform, Platform.BUKALAPAK)

    def test_register_unknown_platform(self) -> None:
        with self.assertRaises(TrackingError):
            self.service.register("https://example.com/x", "lazada")

    def test_register_blank_platform(self) -> None:
        with self.assertRaises(TrackingError):
            self.service.register("https://example.com/x", "")

    def test_register_duplicate_url(self) -> None:
        existing = self.catalog.all()[0]
        with self.assertRaises(TrackingError):
            self.service.register(existing.url, "tokopedia")

    def test_submit_success_toast(self) -> None:
        product = self.service.submit(
            "https://shopee.co.id/kipas-angin", "shopee",
        )
        self.assertIsNotNone(product)
        toasts = self.toasts.active()
        self.assertEqual(len(toasts), 1)
        self.assertEqual(toasts[0].title, "Success")
        self.assertEqual(toasts[0].description, SUCCESS_MESSAGE)
        self.assertEqual(toasts[0].variant, "default")

    def test_submit_failure_toast(self) -> None:
        product = self.service.submit("not a url", "shopee")
        self.assertIsNone(product)
        toasts = self.toasts.active()
        self.assertEqual(len(toasts), 1)
        self.assertEqual(toasts[0].title, "Error")
        self.assertEqual(toasts[0].description, ERROR_MESSAGE)
        self.assertEqual(toasts[0].variant, "destructive")
        self.assertEqual(len(self.catalog.all()), 3)

    def test_submit_without_toasts(self) -> None:
        service = TrackingService(ProductCatalog([]))
        self.assertIsNone(service.submit("", "shopee"))


if __name__ == "__main__":
    unittest.main()
