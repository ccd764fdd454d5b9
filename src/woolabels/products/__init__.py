"""Product lookup data (barcodes by product name)."""

from woolabels.products.csv_loader import (
    ProductCatalog,
    ProductCSVLoader,
    ProductRow,
    parse_product_data,
)

__all__ = [
    "ProductCSVLoader",
    "ProductCatalog",
    "ProductRow",
    "parse_product_data",
]
