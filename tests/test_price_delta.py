# tests/test_price_delta.py

"""Tests for the price delta computation."""

import unittest

from src.pricing.price_delta import (
    Direction,
    InvalidInputError,
    PriceDeltaResult,
    compute,
    round_half_up,
)


class TestCompute(unittest.TestCase):
    """compute() behaviour."""

    def test_absent_previous_is_unchanged(self) -> None:
        """No previous price yields a zero, unchanged delta."""
        result = compute(None, 100)
        self.assertEqual(result.change, 0)
        self.assertEqual(result.change_percent, 0)
        self.assertEqual(result.direction, Direction.UNCHANGED)

    def test_zero_previous_is_unchanged(self) -> None:
        """A zero previous price avoids division by zero."""
        result = compute(0, 250)
        self.assertEqual(result.change, 0)
        self.assertEqual(result.direction, Direction.UNCHANGED)

    def test_decrease_is_negative(self) -> None:
        """100 -> 90 is a 10% drop."""
        result = compute(100, 90)
        self.assertEqual(result.change, -10)
        self.assertEqual(result.change_percent, -10.0)
        self.assertEqual(result.direction, Direction.DOWN)

    def test_increase_is_positive(self) -> None:
        """100 -> 110 is a 10% rise."""
        result = compute(100, 110)
        self.assertEqual(result.change, 10)
        self.assertEqual(result.change_percent, 10.0)
        self.assertEqual(result.direction, Direction.UP)

    def test_same_price_is_unchanged(self) -> None:
        """Equal prices give a zero delta for any positive price."""
        for price in (0.01, 1, 29_000, 7_640_000):
            with self.subTest(price=price):
                result = compute(price, price)
                self.assertEqual(result.change, 0)
                self.assertEqual(result.change_percent, 0)
                self.assertEqual(
                    result.direction, Direction.UNCHANGED
                )

    def test_percent_rounded_to_one_decimal(self) -> None:
        """3,700,000 -> 3,500,000 is -5.4%."""
        result = compute(3_700_000, 3_500_000)
        self.assertEqual(result.change, -200_000)
        self.assertEqual(result.change_percent, -5.4)

    def test_current_zero_is_full_drop(self) -> None:
        """Dropping to zero is a -100% change."""
        result = compute(50, 0)
        self.assertEqual(result.change_percent, -100.0)
        self.assertEqual(result.direction, Direction.DOWN)

    def test_half_percent_rounds_away_from_zero(self) -> None:
        """A 0.25% move shows as 0.3%, not the banker's 0.2%."""
        up = compute(400, 401)
        self.assertEqual(up.change_percent, 0.3)
        self.assertEqual(up.direction, Direction.UP)
        down = compute(400, 399)
        self.assertEqual(down.change_percent, -0.3)
        self.assertEqual(down.direction, Direction.DOWN)

    def test_negative_current_raises(self) -> None:
        """Negative current price is rejected."""
        with self.assertRaises(InvalidInputError):
            compute(100, -1)

    def test_negative_previous_raises(self) -> None:
        """Negative previous price is rejected."""
        with self.assertRaises(InvalidInputError):
            compute(-5, 10)

    def test_invalid_input_is_value_error(self) -> None:
        """InvalidInputError can be caught as ValueError."""
        self.assertTrue(issubclass(InvalidInputError, ValueError))

    def test_result_is_frozen(self) -> None:
        """Results are immutable value objects."""
        result = compute(100, 90)
        self.assertIsInstance(result, PriceDeltaResult)
        with self.assertRaises(AttributeError):
            result.change = 5  # type: ignore[misc]

    def test_direction_values(self) -> None:
        """Direction serialises to lowercase strings."""
        self.assertEqual(Direction.UP.value, "up")
        self.assertEqual(Direction.DOWN.value, "down")
        self.assertEqual(Direction.UNCHANGED.value, "unchanged")



class TestRoundHalfUp(unittest.TestCase):
    """round_half_up helper."""

    def test_halves(self) -> None:
        self.assertEqual(round_half_up(0.25, 1), 0.3)
        self.assertEqual(round_half_up(-0.25, 1), -0.3)
        self.assertEqual(round_half_up(2.5, 0), 3.0)

    def test_non_halves_unchanged(self) -> None:
        self.assertEqual(round_half_up(-5.405, 1), -5.4)
        self.assertEqual(round_half_up(10.0, 1), 10.0)


if __name__ == "__main__":
    unittest.main()
