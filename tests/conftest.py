# tests/conftest.py

"""Shared pytest fixtures for all PriceTrack tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_charts(tmp_path: Path) -> Generator[Path, None, None]:
    """Write charts to a temp dir and never launch a browser."""
    charts_dir = tmp_path / "charts"
    with patch(
        "src.storage.chart_exporter._CHARTS_DIR", charts_dir
    ), patch("webbrowser.open"):
        yield charts_dir
