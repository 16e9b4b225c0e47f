# src/ui/app.py

"""Terminal dashboard for tracked product prices."""

import logging
from datetime import datetime

from rich.markup import escape
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import (
    Button,
    Footer,
    Header,
    Input,
    Label,
    Select,
    Static,
    TabbedContent,
    TabPane,
)

from src.config.settings import Settings
from src.filters.product_view import ProductView, SortKey
from src.models.product import Product
from src.services.toast_queue import Toast, ToastQueue
from src.services.tracking_service import TrackingService
from src.storage.catalog import ProductCatalog
from src.storage.chart_exporter import export_price_chart
from src.ui.product_table import ProductTable

logger = logging.getLogger("price_track.ui")

NO_ALERTS_MESSAGE = "You have no active price alerts."
CHART_HINT = "Select a product and press g to export its chart"


class PriceTrackApp(App[object]):
    """Terminal dashboard for tracked product prices."""

    CSS_PATH = "styles.css"
    TITLE = "PriceTrack"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("n", "sort_name", "Name Sort"),
        Binding("p", "sort_price", "Price Sort"),
        Binding("g", "export_chart", "Chart"),
        Binding("c", "copy_url", "Copy URL"),
        Binding("t", "track_new", "Track New"),
    ]

    def __init__(
        self,
        catalog: ProductCatalog | None = None,
        toasts: ToastQueue | None = None,
    ) -> None:
        super().__init__()
        self.settings = Settings()
        self.catalog = catalog or ProductCatalog()
        self.toasts = toasts or ToastQueue()
        self.tracking = TrackingService(self.catalog, self.toasts)
        self.search_query: str = ""
        self.sort_key: SortKey = SortKey.NAME
        self.visible_products: list[Product] = []
        self.selected_product: Product | None = None
        self.chart_message: str = CHART_HINT

    def compose(self) -> ComposeResult:
        """Build the widget tree for the dashboard."""
        platform_options = [
            (p["label"], p["id"])
            for p in self.settings.AVAILABLE_PLATFORMS
        ]

        yield Header()
        with Container(id="main_container"):
            yield Input(
                placeholder="Search products...",
                type="text",
                id="search_input",
            )
            with TabbedContent(id="tabs", initial="my_products_tab"):
                with TabPane("My Products", id="my_products_tab"):
                    yield Horizontal(
                        Button("Sort by Name", id="sort_name_btn"),
                        Button("Sort by Price", id="sort_price_btn"),
                        id="sort_bar",
                    )
                    yield ProductTable(
                        on_select=self.select_product,
                        id="products_table",
                    )
                with TabPane("Price Alerts", id="price_alerts_tab"):
                    yield Static(NO_ALERTS_MESSAGE, id="alerts_empty")
                with TabPane("Track New", id="track_tab"):
                    yield Vertical(
                        Static("Track New Product", id="track_title"),
                        Label("Product URL:"),
                        Input(
                            placeholder="Enter product URL",
                            id="url_input",
                        ),
                        Label("Platform:"),
                        Select(
                            platform_options,
                            prompt="Select a platform",
                            id="platform_select",
                        ),
                        Button(
                            "Start Tracking",
                            variant="primary",
                            id="track_btn",
                        ),
                        id="track_form",
                    )
            yield Vertical(
                Static("Price History Chart", id="chart_title"),
                Static(self.chart_message, id="chart_status"),
                id="chart_panel",
            )
            yield Static(
                f"© {datetime.now().year} PriceTrack App",
                id="copyright",
            )
        yield Footer()

    def on_mount(self) -> None:
        """Wire subscriptions and fill the product table."""
        self.catalog.subscribe(self._on_catalog_changed)
        self.toasts.subscribe(self._show_toast)
        self.set_interval(1.0, self.toasts.expire)
        self.refresh_products()

    # ── Product list ─────────────────────────────────────

    def refresh_products(self) -> None:
        """Re-run the search/sort view and redraw the table."""
        self.visible_products = ProductView.view(
            self.catalog.all(), self.search_query, self.sort_key,
        )
        table = self.query_one("#products_table", ProductTable)
        table.show(self.visible_products)

    def _on_catalog_changed(self, _products: list[Product]) -> None:
        self.refresh_products()

    def select_product(self, product: Product) -> None:
        """Remember the chosen product for chart export and URL copy."""
        self.selected_product = product
        self._set_chart_status(
            f"Selected {product.name}; press g to export its chart"
        )

    def _set_chart_status(self, message: str) -> None:
        self.chart_message = message
        self.query_one("#chart_status", Static).update(Text(message))

    def _current_product(self) -> Product | None:
        table = self.query_one("#products_table", ProductTable)
        return table.selected_product() or self.selected_product

    def on_input_changed(self, event: Input.Changed) -> None:
        """Filter the list as the search query changes."""
        if event.input.id == "search_input":
            self.search_query = event.value
            self.refresh_products()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button click events."""
        if event.button.id == "sort_name_btn":
            self.action_sort_name()
        elif event.button.id == "sort_price_btn":
            self.action_sort_price()
        elif event.button.id == "track_btn":
            self.submit_tracking()

    def action_sort_name(self) -> None:
        """Sort products by name."""
        self._set_sort(SortKey.NAME)

    def action_sort_price(self) -> None:
        """Sort products by current price, ascending."""
        self._set_sort(SortKey.PRICE)

    def _set_sort(self, sort_key: SortKey) -> None:
        self.sort_key = sort_key
        name_btn = self.query_one("#sort_name_btn", Button)
        price_btn = self.query_one("#sort_price_btn", Button)
        name_btn.set_class(sort_key is SortKey.NAME, "active-sort")
        price_btn.set_class(sort_key is SortKey.PRICE, "active-sort")
        self.refresh_products()

    # ── Track New form ───────────────────────────────────

    def action_track_new(self) -> None:
        """Switch to the Track New tab."""
        self.query_one("#tabs", TabbedContent).active = "track_tab"

    def submit_tracking(self) -> Product | None:
        """Submit the Track New form."""
        url_input = self.query_one("#url_input", Input)
        select = self.query_one("#platform_select", Select)
        value = select.value
        platform = value if isinstance(value, str) else ""

        product = self.tracking.submit(url_input.value, platform)
        if product is not None:
            url_input.value = ""
        return product

    def _show_toast(self, toast: Toast) -> None:
        severity = (
            "error" if toast.variant == "destructive" else "information"
        )
        self.notify(
            toast.description,
            title=toast.title,
            severity=severity,
            timeout=self.toasts.timeout,
        )

    # ── Chart / clipboard ────────────────────────────────

    def action_export_chart(self) -> None:
        """Export the selected product's price history chart."""
        product = self._current_product()
        if product is None:
            self.notify("No product selected", severity="warning")
            return
        try:
            path = export_price_chart(product)
        except Exception as e:
            logger.error("Chart export failed", exc_info=True)
            self.notify(
                f"Chart export failed: {escape(str(e))}", severity="error"
            )
            return
        if path is None:
            self._set_chart_status(
                f"Not enough price history for {product.name}"
            )
            self.notify(
                "Not enough price history for a chart",
                severity="warning",
            )
            return
        self._set_chart_status(f"Chart saved to {path}")
        self.notify(f"Chart saved to {escape(str(path))}")

    def action_copy_url(self) -> None:
        """Copy the selected product's URL to the clipboard."""
        product = self._current_product()
        if product is None or not product.url:
            self.notify("No product URL to copy", severity="warning")
            return
        try:
            import pyperclip  # type: ignore[import-untyped]

            pyperclip.copy(product.url)
            self.notify("URL Copied")
        except Exception:
            logger.error(
                "Failed to copy URL to clipboard",
                exc_info=True,
            )
            self.notify(
                "Clipboard unavailable", severity="warning"
            )
