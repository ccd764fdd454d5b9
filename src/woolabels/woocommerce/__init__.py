"""WooCommerce export parsing, order grouping, packaging and summary."""

from woolabels.woocommerce.csv_loader import WooCommerceCSVLoader, parse_csv
from woolabels.woocommerce.delivery import delivery_description, delivery_details
from woolabels.woocommerce.entities import (
    DeliveryDetail,
    InputData,
    LineItemRow,
    Order,
    OrderItem,
    Package,
    SummaryEntry,
)
from woolabels.woocommerce.labels import ShippingLabel, assemble_labels
from woolabels.woocommerce.orders import build_orders, group_rows
from woolabels.woocommerce.prices import Price, parse_price
from woolabels.woocommerce.splitter import package_count, split_packages
from woolabels.woocommerce.summary import summarize

__all__ = [
    "DeliveryDetail",
    "InputData",
    "LineItemRow",
    "Order",
    "OrderItem",
    "Package",
    "Price",
    "ShippingLabel",
    "SummaryEntry",
    "WooCommerceCSVLoader",
    "assemble_labels",
    "build_orders",
    "delivery_description",
    "delivery_details",
    "group_rows",
    "package_count",
    "parse_csv",
    "parse_price",
    "split_packages",
    "summarize",
]
