"""Logging for export ingestion and label building.

Keeps log formatting out of the parsing and packaging modules.
"""

from __future__ import annotations

import loguru
from loguru import logger


class WooCommerceLogger:
    """Handles all logging for ingestion, grouping and summary building."""

    def __init__(self, logger_instance: loguru.Logger = logger) -> None:
        """Initialize logger.

        Args:
            logger_instance: Logger instance to use (defaults to loguru.logger)
        """
        self._logger = logger_instance

    def rows_ingested(self, row_count: int) -> None:
        """Log a successful export parse."""
        if row_count == 0:
            self._logger.info("Export contained no order rows")
            return

        self._logger.bind(rows=row_count).info(
            "Parsed {} order rows from export", row_count
        )

    def row_rejected(self, line_number: int, reason: str) -> None:
        """Log the row that aborted a parse."""
        self._logger.bind(line=line_number, reason=reason).warning(
            "Rejected export row {}: {}", line_number, reason
        )

    def order_packed(
        self,
        order_id: int,
        item_count: int,
        package_count: int,
        order_total: float,
    ) -> None:
        """Log how one order was split into packages."""
        self._logger.bind(
            order_id=order_id,
            items=item_count,
            packages=package_count,
            order_total=order_total,
        ).debug(
            "Order {} ({} items, {:.2f} €) packed into {} package(s)",
            order_id,
            item_count,
            order_total,
            package_count,
        )

    def orders_built(self, order_count: int, package_count: int) -> None:
        """Log the grouping result."""
        self._logger.bind(orders=order_count, packages=package_count).info(
            "Built {} orders in {} packages", order_count, package_count
        )

    def summary_built(self, product_count: int, row_count: int) -> None:
        """Log the product summary size."""
        self._logger.bind(products=product_count, rows=row_count).debug(
            "Summary covers {} products over {} rows", product_count, row_count
        )

    def products_loaded(self, product_count: int) -> None:
        """Log the product lookup dataset size."""
        self._logger.bind(products=product_count).info(
            "Product data loaded: {} products", product_count
        )
