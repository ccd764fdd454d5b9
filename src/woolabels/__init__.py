"""Shipping labels and packing summaries from WooCommerce order exports."""

from woolabels.errors import (
    FieldParseError,
    PriceParseError,
    RowParseError,
    WooLabelsError,
)
from woolabels.woocommerce.csv_loader import parse_csv

__all__ = [
    "FieldParseError",
    "PriceParseError",
    "RowParseError",
    "WooLabelsError",
    "parse_csv",
]
