from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from woolabels.woocommerce.entities import SummaryEntry
from woolabels.woocommerce.labels import PackageLabel, ShippingLabel

ADDRESS_CITY = "Milano"
ADDRESS_COUNTRY = "Italia"


class LabelRenderer:
    """Renders shipping labels and the product summary with Rich tables.

    Cell text is wrapped in ``Text`` so product names are never read as
    console markup.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def _address_block(self, label: ShippingLabel) -> Table:
        order = label.order
        grid = Table.grid(expand=True, padding=(0, 2))
        grid.add_column(ratio=3)
        grid.add_column(ratio=2)

        left = Text("\n").join(
            [
                Text(f"Ordine N.: {order.order_id}"),
                Text(f"Data: {order.order_date}"),
                Text(f"Tel.: {order.phone}"),
            ]
        )
        right = Text("\n").join(
            [
                Text("Indirizzo:", style="bold"),
                Text(order.customer_name),
                Text(order.address_line_1),
                Text(order.address_line_2),
                Text(f"{ADDRESS_CITY}, {order.postcode}"),
                Text(ADDRESS_COUNTRY),
                Text(label.package_summary, style="bold"),
            ]
        )
        grid.add_row(left, right)
        return grid

    def _package_table(self, package: PackageLabel) -> Table:
        show_ean = any(line.ean for line in package.lines)
        table = Table(
            title=f"Collo {package.package_number}/{package.package_count}",
            expand=True,
        )
        table.add_column("Quantità", justify="center")
        table.add_column("Prodotto")
        if show_ean:
            table.add_column("EAN", justify="right")

        for line in package.lines:
            row = [Text(str(line.quantity)), Text(line.product_name, style="bold")]
            if show_ean:
                row.append(Text(line.ean or ""))
            table.add_row(*row)

        for detail in package.details:
            style = "bold reverse" if detail.highlighted else ""
            row = [
                Text(detail.label, style="bold", justify="right"),
                Text(detail.value, style=style, justify="center"),
            ]
            if show_ean:
                row.append(Text(""))
            table.add_row(*row)

        return table

    def render_labels(self, labels: Sequence[ShippingLabel]) -> None:
        for label in labels:
            self._console.print(self._address_block(label))
            for package in label.packages:
                self._console.print(self._package_table(package))
            self._console.print()

        self._console.rule()
        self._console.print(Text(f"Number of deliveries: {len(labels)}"))

    def render_summary(self, entries: Sequence[SummaryEntry]) -> None:
        table = Table(title="Summary")
        table.add_column("Prodotto", justify="left")
        table.add_column("Quantità", justify="right")

        for entry in entries:
            table.add_row(Text(entry.product_name), Text(str(entry.total_quantity)))

        self._console.print(table)
