"""WooCommerce order entities used by grouping, packaging and summary logic."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from woolabels.config import PackagingConfig


@dataclass(frozen=True, slots=True)
class LineItemRow:
    """One line of the WooCommerce export: a single purchased product."""

    order_id: int
    order_date: str
    order_status: str
    customer_name: str
    order_total_display: str
    shipping_cost: float
    payment_gateway: str
    shipping_method: str
    address_line_1: str
    address_line_2: str
    postcode: str
    phone: str
    transaction_id: str  # Carried through, never read downstream
    product_name: str
    quantity: int
    item_price_display: str


@dataclass(frozen=True, slots=True)
class OrderItem:
    """A product line inside an order, with its price normalized."""

    product_name: str
    quantity: int
    item_price: float
    item_price_display: str


@dataclass(frozen=True, slots=True)
class Package:
    """One physical parcel: a consecutive slice of an order's sorted items."""

    items: tuple[OrderItem, ...]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[OrderItem]:
        return iter(self.items)


@dataclass(frozen=True, slots=True)
class Order:
    """All rows sharing an order id, with header fields from the first row."""

    order_id: int
    order_date: str
    customer_name: str
    order_total_display: str
    order_total: float
    shipping_cost: float
    delivery: str
    payment_gateway: str
    address_line_1: str
    address_line_2: str
    postcode: str
    phone: str
    items: tuple[OrderItem, ...]
    packages: tuple[Package, ...]

    @property
    def package_count(self) -> int:
        return len(self.packages)


@dataclass(frozen=True, slots=True)
class SummaryEntry:
    """Number of rows (line items) naming a product across the whole export."""

    product_name: str
    total_quantity: int


@dataclass(frozen=True, slots=True)
class DeliveryDetail:
    """A label/value line printed under a package's item table."""

    label: str
    value: str
    highlighted: bool = False


@dataclass(frozen=True, slots=True)
class InputData:
    """Ordered rows produced by a single parse of an export."""

    rows: tuple[LineItemRow, ...] = ()

    def __len__(self) -> int:
        return len(self.rows)

    def orders(
        self,
        config: PackagingConfig | None = None,
        *,
        multipack: bool | None = None,
    ) -> list[Order]:
        """Group rows into packed orders. See ``orders.build_orders``."""
        from woolabels.woocommerce.orders import build_orders

        return build_orders(self, config, multipack=multipack)

    def summary(self) -> list[SummaryEntry]:
        """Per-product row counts sorted by product name."""
        from woolabels.woocommerce.summary import summarize

        return summarize(self.rows)
