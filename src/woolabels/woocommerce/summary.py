"""Cross-order product summary for shopping and packing."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from woolabels.woocommerce.entities import LineItemRow, SummaryEntry
from woolabels.woocommerce.logger import WooCommerceLogger


def summarize(
    rows: Sequence[LineItemRow],
    *,
    woo_logger: WooCommerceLogger | None = None,
) -> list[SummaryEntry]:
    """Count rows per product name across every order.

    Each row adds one regardless of its quantity column.

    Args:
        rows: All ingested rows, before grouping
        woo_logger: Logger for summary events

    Returns:
        One SummaryEntry per distinct product name, sorted by name
    """
    woo_logger = woo_logger or WooCommerceLogger()
    counts = Counter(row.product_name for row in rows)

    entries = [
        SummaryEntry(product_name=name, total_quantity=count)
        for name, count in sorted(counts.items())
    ]
    woo_logger.summary_built(len(entries), len(rows))
    return entries
