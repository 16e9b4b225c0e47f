# src/utils/formatting.py

"""Display formatting for Indonesian rupiah amounts and percentages."""

from src.config.settings import Settings


def format_currency(amount: float) -> str:
    """Format *amount* the way id-ID locales print IDR.

    ``3500000`` becomes ``Rp 3.500.000,00``; negatives carry a leading
    minus (``-Rp 10.000,00``).
    """
    sign = "-" if amount < 0 else ""
    # Swap separators: 3,500,000.00 -> 3.500.000,00
    grouped = f"{abs(amount):,.2f}"
    localized = (
        grouped.replace(",", "\x00")
        .replace(".", ",")
        .replace("\x00", ".")
    )
    return f"{sign}{Settings.CURRENCY_SYMBOL} {localized}"


def format_percent(value: float) -> str:
    """Format a change percentage with the configured precision."""
    return f"{value:.{Settings.PERCENT_DECIMALS}f}%"
