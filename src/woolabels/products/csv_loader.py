"""Semicolon-delimited product list loader and name -> EAN lookup."""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from pathlib import Path

from woolabels.errors import FieldParseError, RowParseError
from woolabels.woocommerce.fields import parse_locale_decimal, parse_unsigned
from woolabels.woocommerce.logger import WooCommerceLogger

PRODUCT_COLUMN_COUNT = 15


@dataclass(frozen=True, slots=True)
class ProductRow:
    """One product of the shop's product list."""

    id: int
    category: str
    provenance: str
    net_weight: float
    product_type: int
    departure_code: str
    product_name: str
    price: str
    unit: str
    vat: str
    department: int
    plu_code: str
    ean_12_chars: str
    ean_13_own: str
    ean_13_vendor: str

    @property
    def ean(self) -> str | None:
        """Best barcode for the product: vendor EAN-13, own EAN-13, then EAN-12."""
        for code in (self.ean_13_vendor, self.ean_13_own, self.ean_12_chars):
            if code:
                return code
        return None


class ProductCatalog:
    """Product rows indexed by exact product name."""

    def __init__(self, rows: list[ProductRow]) -> None:
        self._rows = rows
        self._by_name: dict[str, ProductRow] = {}
        for row in rows:
            # First row wins on duplicate names
            self._by_name.setdefault(row.product_name, row)

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> list[ProductRow]:
        return list(self._rows)

    def get(self, product_name: str) -> ProductRow | None:
        return self._by_name.get(product_name)

    def ean_for(self, product_name: str) -> str | None:
        """Barcode for ``product_name``; usable as a label ``ean_lookup``."""
        row = self.get(product_name)
        return row.ean if row else None


def _parse_product_row(record: list[str], line_number: int) -> ProductRow:
    if len(record) < PRODUCT_COLUMN_COUNT:
        raise RowParseError(
            line_number,
            record,
            f"expected {PRODUCT_COLUMN_COUNT} columns, found {len(record)}",
        )

    try:
        return ProductRow(
            id=parse_unsigned(record[0], "id"),
            category=record[1],
            provenance=record[2],
            net_weight=parse_locale_decimal(record[3], "net_weight"),
            product_type=parse_unsigned(record[4], "product_type"),
            departure_code=record[5],
            product_name=record[6],
            price=record[7],
            unit=record[8],
            vat=record[9],
            department=parse_unsigned(record[10], "department"),
            plu_code=record[11],
            ean_12_chars=record[12],
            ean_13_own=record[13],
            ean_13_vendor=record[14],
        )
    except FieldParseError as e:
        raise RowParseError(line_number, record, str(e), e) from e


def parse_product_data(
    data: str,
    *,
    woo_logger: WooCommerceLogger | None = None,
) -> ProductCatalog:
    """Parse the product list (header row skipped, ``;`` delimited).

    Raises:
        RowParseError: On the first malformed row.
    """
    woo_logger = woo_logger or WooCommerceLogger()
    reader = csv.reader(io.StringIO(data, newline=""), delimiter=";", strict=True)
    rows: list[ProductRow] = []
    header_seen = False

    try:
        for record in reader:
            if not record:
                continue
            if not header_seen:
                header_seen = True
                continue
            rows.append(_parse_product_row(record, reader.line_num))
    except csv.Error as e:
        raise RowParseError(reader.line_num, [], f"malformed CSV: {e}") from e

    woo_logger.products_loaded(len(rows))
    return ProductCatalog(rows)


class ProductCSVLoader:
    """Loads the product list from disk."""

    def __init__(self, csv_path: Path) -> None:
        self._csv_path = csv_path

    def load(self) -> ProductCatalog:
        text = self._csv_path.read_text(encoding="utf-8")
        return parse_product_data(text)
