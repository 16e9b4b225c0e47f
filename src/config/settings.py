# src/config/settings.py

"""Central configuration for the PriceTrack dashboard."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the PriceTrack dashboard."""

    # --- Display ---
    CURRENCY: str = "IDR"
    CURRENCY_SYMBOL: str = "Rp"
    PERCENT_DECIMALS: int = 1           # Rounding for change percentages
    NAME_COLUMN_WIDTH: int = 40         # Truncation width in tables

    # --- Notifications ---
    TOAST_TIMEOUT: float = float(
        os.getenv("PRICE_TRACK_TOAST_TIMEOUT", "5.0")
    )                                   # Seconds before auto-dismiss

    # --- Logging ---
    CONSOLE_LOG_LEVEL: str = os.getenv(
        "PRICE_TRACK_LOG_LEVEL", "WARNING"
    ).upper()                           # stderr handler threshold
    LOG_KEEP_RUNS: int = 20             # Per-run log files retained

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    DATA_DIR: Path = Path(
        os.getenv("PRICE_TRACK_DATA_DIR", str(BASE_DIR / "data"))
    )
    CHARTS_DIR: Path = DATA_DIR / "charts"
    LOGS_DIR: Path = BASE_DIR / "logs"

    # --- Platforms (registry mirrored by models.product.Platform) ---
    AVAILABLE_PLATFORMS: list[dict[str, str]] = [
        {"id": "tokopedia", "label": "Tokopedia"},
        {"id": "shopee", "label": "Shopee"},
        {"id": "bukalapak", "label": "Bukalapak"},
    ]
