# src/ui/product_table.py

"""DataTable of tracked products with price-change rendering."""

from collections.abc import Callable

from rich.text import Text
from textual.widgets import DataTable

from src.config.settings import Settings
from src.models.product import Product
from src.pricing.price_delta import Direction
from src.utils.formatting import format_currency, format_percent

COLUMNS: tuple[str, ...] = ("Name", "Platform", "Price", "Change")

_ARROWS: dict[Direction, str] = {
    Direction.DOWN: "▼",
    Direction.UP: "▲",
    Direction.UNCHANGED: "•",
}

_STYLES: dict[Direction, str] = {
    Direction.DOWN: "red",
    Direction.UP: "green",
    Direction.UNCHANGED: "dim",
}


def change_cell(product: Product) -> Text:
    """Arrow, absolute change and percentage for one product."""
    delta = product.price_delta()
    return Text(
        f"{_ARROWS[delta.direction]} "
        f"{format_currency(abs(delta.change))} "
        f"({format_percent(delta.change_percent)})",
        style=_STYLES[delta.direction],
    )


class ProductTable(DataTable[str | Text]):
    """Product rows; selecting one calls the handler given at construction."""

    def __init__(
        self,
        on_select: Callable[[Product], None],
        **kwargs: object,
    ) -> None:
        super().__init__(
            zebra_stripes=True, cursor_type="row", **kwargs,  # type: ignore[arg-type]
        )
        self._on_select = on_select
        self.products: list[Product] = []

    def show(self, products: list[Product]) -> None:
        """Replace the rows with *products*, in the given order."""
        if not self.columns:
            self.add_columns(*COLUMNS)
        self.clear()
        self.products = list(products)
        width = Settings.NAME_COLUMN_WIDTH
        for p in self.products:
            self.add_row(
                Text(p.name[:width]),
                p.platform.label,
                Text(format_currency(p.current_price), style="bold"),
                change_cell(p),
            )

    def selected_product(self) -> Product | None:
        """Product under the cursor, if any."""
        row = self.cursor_row
        if 0 <= row < len(self.products):
            return self.products[row]
        return None

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Forward the selected product to the owner's handler."""
        if 0 <= event.cursor_row < len(self.products):
            self._on_select(self.products[event.cursor_row])
