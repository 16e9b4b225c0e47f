# src/storage/chart_exporter.py

"""Generate interactive Plotly HTML charts from product price history."""

import importlib
import logging
import re
import webbrowser
from datetime import datetime
from pathlib import Path
from types import ModuleType
from typing import Any

from src.config.settings import Settings
from src.models.product import Product
from src.utils.formatting import format_currency

logger = logging.getLogger("price_track.chart")

_CHARTS_DIR: Path = Settings.CHARTS_DIR


def _get_plotly_go() -> ModuleType:
    """Import plotly.graph_objects lazily."""
    return importlib.import_module("plotly.graph_objects")


def _ensure_charts_dir() -> Path:
    """Create charts directory if it doesn't exist."""
    _CHARTS_DIR.mkdir(parents=True, exist_ok=True)
    return _CHARTS_DIR


def _slugify(name: str) -> str:
    return re.sub(r"[^A-Za-z0-9]+", "_", name[:30]).strip("_") or "product"


def _write_chart(fig: Any, stem: str, open_browser: bool) -> Path:
    charts_dir = _ensure_charts_dir()
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filepath = charts_dir / f"{stem}_{stamp}.html"
    fig.write_html(str(filepath))
    logger.info("Chart saved to %s", filepath)

    if open_browser:
        webbrowser.open(filepath.as_uri())

    return filepath


def build_price_chart(product: Product) -> Any:
    """Build a Plotly line chart of one product's observations."""
    go = _get_plotly_go()
    dates = [o.date for o in product.price_history]
    prices = [o.price for o in product.price_history]

    fig: Any = go.Figure()
    fig.add_trace(go.Scatter(
        x=dates,
        y=prices,
        mode="lines+markers",
        name=product.name[:50],
        hovertemplate=(
            "%{x|%Y-%m-%d}<br>"
            f"Price: {Settings.CURRENCY_SYMBOL} %{{y:,.0f}}"
            "<extra></extra>"
        ),
    ))

    min_price = min(prices)
    max_price = max(prices)
    min_idx = prices.index(min_price)
    max_idx = prices.index(max_price)

    fig.add_annotation(
        x=dates[min_idx], y=min_price,
        text=f"Min: {format_currency(min_price)}",
        showarrow=True, arrowhead=2,
    )
    fig.add_annotation(
        x=dates[max_idx], y=max_price,
        text=f"Max: {format_currency(max_price)}",
        showarrow=True, arrowhead=2,
    )

    fig.update_layout(
        title=(
            f"Price History: {product.name[:60]} "
            f"({product.platform.label})"
        ),
        xaxis_title="Date",
        yaxis_title=f"Price ({Settings.CURRENCY})",
        hovermode="x unified",
        template="plotly_white",
    )
    return fig


def export_price_chart(
    product: Product,
    open_browser: bool = True,
) -> Path | None:
    """Export a single product's price chart as HTML.

    Returns ``None`` when the product has fewer than two observations.
    """
    if len(product.price_history) < 2:
        logger.warning(
            "Not enough data points for chart: %s",
            product.name[:60],
        )
        return None

    fig = build_price_chart(product)
    return _write_chart(fig, _slugify(product.name), open_browser)


def export_comparison_chart(
    products: list[Product],
    open_browser: bool = True,
) -> Path | None:
    """Export an overlay chart comparing multiple products."""
    go = _get_plotly_go()
    fig: Any = go.Figure()
    for product in products:
        if len(product.price_history) < 2:
            continue
        fig.add_trace(go.Scatter(
            x=[o.date for o in product.price_history],
            y=[o.price for o in product.price_history],
            mode="lines+markers",
            name=f"{product.name[:40]} ({product.platform.label})",
            hovertemplate=(
                "%{x|%Y-%m-%d}<br>"
                "Price: %{y:,.0f}"
                "<extra></extra>"
            ),
        ))

    if not fig.data:
        logger.warning("No trend data for comparison chart")
        return None

    fig.update_layout(
        title="Price Comparison",
        xaxis_title="Date",
        yaxis_title=f"Price ({Settings.CURRENCY})",
        hovermode="x unified",
        template="plotly_white",
        legend={"orientation": "h", "y": -0.15},
    )
    return _write_chart(fig, "comparison", open_browser)
