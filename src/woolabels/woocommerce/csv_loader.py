"""WooCommerce order export loader."""

from __future__ import annotations

import csv
import io
from pathlib import Path

from woolabels.errors import FieldParseError, RowParseError
from woolabels.woocommerce.entities import InputData, LineItemRow
from woolabels.woocommerce.fields import parse_locale_decimal, parse_unsigned
from woolabels.woocommerce.logger import WooCommerceLogger

# Positional export schema; the header row's own titles are ignored.
COLUMNS = (
    "order_id",
    "order_date",
    "order_status",
    "customer_name",
    "order_total",
    "shipping_cost",
    "payment_gateway",
    "shipping_method",
    "address_line_1",
    "address_line_2",
    "postcode",
    "phone",
    "transaction_id",
    "product_name",
    "quantity",
    "item_price",
)
COLUMN_COUNT = len(COLUMNS)


def parse_csv(data: str, *, woo_logger: WooCommerceLogger | None = None) -> InputData:
    """Parse a full WooCommerce export into ordered line-item rows.

    The first record is the header and is skipped. Blank lines are ignored,
    so empty or header-only text parses to an empty ``InputData``.

    Args:
        data: CSV text, comma delimited with double-quote escaping
        woo_logger: Logger for parse events (defaults to WooCommerceLogger())

    Returns:
        InputData holding one LineItemRow per data row, in file order

    Raises:
        RowParseError: On the first row that is short, malformed or has an
            unparsable order id, shipping cost or quantity. No rows are
            returned in that case.
    """
    woo_logger = woo_logger or WooCommerceLogger()
    reader = csv.reader(io.StringIO(data, newline=""), strict=True)
    rows: list[LineItemRow] = []
    header_seen = False

    try:
        for record in reader:
            if not record:
                continue
            if not header_seen:
                header_seen = True
                continue
            rows.append(_parse_row(record, reader.line_num))
    except csv.Error as e:
        error = RowParseError(reader.line_num, [], f"malformed CSV: {e}")
        woo_logger.row_rejected(error.line_number, error.reason)
        raise error from e
    except RowParseError as e:
        woo_logger.row_rejected(e.line_number, e.reason)
        raise

    woo_logger.rows_ingested(len(rows))
    return InputData(rows=tuple(rows))


def _parse_row(record: list[str], line_number: int) -> LineItemRow:
    if len(record) < COLUMN_COUNT:
        raise RowParseError(
            line_number,
            record,
            f"expected {COLUMN_COUNT} columns, found {len(record)}",
        )

    try:
        return LineItemRow(
            order_id=parse_unsigned(record[0], "order_id"),
            order_date=record[1],
            order_status=record[2],
            customer_name=record[3],
            order_total_display=record[4],
            shipping_cost=parse_locale_decimal(record[5], "shipping_cost"),
            payment_gateway=record[6],
            shipping_method=record[7],
            address_line_1=record[8],
            address_line_2=record[9],
            postcode=record[10],
            phone=record[11],
            transaction_id=record[12],
            product_name=record[13],
            quantity=parse_unsigned(record[14], "quantity"),
            item_price_display=record[15],
        )
    except FieldParseError as e:
        raise RowParseError(line_number, record, str(e), e) from e


class WooCommerceCSVLoader:
    """Loads a WooCommerce order export from disk."""

    def __init__(self, csv_path: Path, *, woo_logger: WooCommerceLogger | None = None):
        """Initialize loader with the export path.

        Args:
            csv_path: UTF-8 encoded WooCommerce order export
            woo_logger: Logger for parse events
        """
        self._csv_path = csv_path
        self._woo_logger = woo_logger

    def load(self) -> InputData:
        """Read and parse the export. See ``parse_csv``."""
        text = self._csv_path.read_text(encoding="utf-8")
        return parse_csv(text, woo_logger=self._woo_logger)
