# tests/test_formatting.py

"""Tests for IDR currency and percentage formatting."""

import unittest

from src.utils.formatting import format_currency, format_percent


class TestFormatCurrency(unittest.TestCase):
    """format_currency output."""

    def test_thousands_use_dots(self) -> None:
        self.assertEqual(format_currency(3_500_000), "Rp 3.500.000,00")

    def test_small_amount(self) -> None:
        self.assertEqual(format_currency(999), "Rp 999,00")

    def test_zero(self) -> None:
        self.assertEqual(format_currency(0), "Rp 0,00")

    def test_fraction_uses_comma(self) -> None:
        self.assertEqual(format_currency(1234.5), "Rp 1.234,50")

    def test_negative(self) -> None:
        self.assertEqual(format_currency(-10_000), "-Rp 10.000,00")


class TestFormatPercent(unittest.TestCase):
    """format_percent output."""

    def test_one_decimal(self) -> None:
        self.assertEqual(format_percent(-5.4), "-5.4%")
        self.assertEqual(format_percent(10), "10.0%")


if __name__ == "__main__":
    unittest.main()
