# src/cli/runner.py

"""Headless CLI commands over the product catalog."""

import json
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.filters.product_view import ProductView, SortKey
from src.models.product import Product
from src.services.tracking_service import TrackingError, TrackingService
from src.storage.catalog import ProductCatalog
from src.storage.chart_exporter import export_price_chart
from src.ui.product_table import change_cell
from src.utils.formatting import format_currency

logger = logging.getLogger("price_track.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _products_to_dicts(products: list[Product]) -> list[dict[str, object]]:
    """Serialise products and their deltas to plain dicts for JSON output."""
    rows: list[dict[str, object]] = []
    for p in products:
        delta = p.price_delta()
        rows.append({
            "id": p.id,
            "name": p.name,
            "platform": p.platform.label,
            "current_price": p.current_price,
            "change": delta.change,
            "change_percent": delta.change_percent,
            "direction": delta.direction.value,
            "url": p.url,
            "price_history": [
                {"date": o.date.isoformat(), "price": o.price}
                for o in p.price_history
            ],
        })
    return rows


def _print_table(products: list[Product]) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title="Tracked Products",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("ID", style="dim", width=4)
    table.add_column("Name", max_width=40)
    table.add_column("Platform", style="magenta")
    table.add_column("Price", justify="right")
    table.add_column("Change", justify="right")

    for p in products:
        table.add_row(
            str(p.id),
            escape(p.name),
            p.platform.label,
            format_currency(p.current_price),
            change_cell(p),
        )

    Console().print(table)


def run_list(
    query: str,
    sort: str,
    output_format: str,
    catalog: ProductCatalog | None = None,
) -> int:
    """Print the filtered, ordered catalog. Exit 1 when nothing matches."""
    catalog = catalog or ProductCatalog()
    products = ProductView.view(
        catalog.all(), query, SortKey.parse(sort),
    )

    if not products:
        _err.print(f"[yellow]No products match '{escape(query)}'.[/yellow]")
        return 1

    _err.print(f"[green]✓ {len(products)} products[/green]")
    if output_format == "table":
        _print_table(products)
    else:
        json.dump(
            _products_to_dicts(products),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")
    return 0


def run_chart(
    product_id: int,
    open_browser: bool = True,
    catalog: ProductCatalog | None = None,
) -> int:
    """Export one product's price-history chart."""
    catalog = catalog or ProductCatalog()
    product = catalog.get(product_id)
    if product is None:
        _err.print(f"[red]Unknown product id: {product_id}[/red]")
        return 1

    path = export_price_chart(product, open_browser=open_browser)
    if path is None:
        _err.print(
            f"[yellow]Not enough price history for {escape(product.name)}.[/yellow]"
        )
        return 1

    _err.print(f"[green]✓ Chart saved → {escape(str(path))}[/green]")
    return 0


def run_track(
    url: str,
    platform: str,
    catalog: ProductCatalog | None = None,
) -> int:
    """Register a product for tracking in this session's catalog."""
    service = TrackingService(catalog or ProductCatalog())
    try:
        product = service.register(url, platform)
    except TrackingError as exc:
        logger.warning("Track request rejected: %s", exc)
        _err.print(f"[red]{escape(str(exc))}[/red]")
        return 1

    _err.print(
        f"[green]✓ Tracking #{product.id} {escape(product.name)}"
        f" on {product.platform.label}[/green]"
    )
    return 0
