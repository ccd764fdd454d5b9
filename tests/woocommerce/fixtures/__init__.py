"""Fixtures for WooCommerce export parsing and packaging tests."""

from tests.woocommerce.fixtures.woocommerce_export import (
    EXPORT_CSV,
    HEADER,
    PRODUCT_CSV,
    make_row,
)

__all__ = [
    "EXPORT_CSV",
    "HEADER",
    "PRODUCT_CSV",
    "make_row",
]
