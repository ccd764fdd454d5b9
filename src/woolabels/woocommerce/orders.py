"""Regroup export rows into packed orders."""

from __future__ import annotations

from collections.abc import Sequence
import dataclasses
from itertools import groupby

from woolabels.config import PackagingConfig
from woolabels.woocommerce.delivery import delivery_description
from woolabels.woocommerce.entities import InputData, LineItemRow, Order, OrderItem
from woolabels.woocommerce.logger import WooCommerceLogger
from woolabels.woocommerce.prices import parse_price
from woolabels.woocommerce.splitter import sort_items, split_packages


def group_rows(rows: Sequence[LineItemRow]) -> list[tuple[int, list[LineItemRow]]]:
    """Group rows by runs of consecutive equal order ids.

    An order id that shows up again after a different one starts a new group;
    groups are never merged. Groups come back in file order.
    """
    return [
        (order_id, list(group))
        for order_id, group in groupby(rows, key=lambda row: row.order_id)
    ]


def _to_item(row: LineItemRow) -> OrderItem:
    price = parse_price(row.item_price_display)
    return OrderItem(
        product_name=row.product_name,
        quantity=row.quantity,
        item_price=price.value,
        item_price_display=price.display,
    )


def build_order(
    order_id: int,
    rows: Sequence[LineItemRow],
    config: PackagingConfig,
) -> Order:
    """Build one order from its rows; header fields come from the first row.

    Raises:
        PriceParseError: If the order total or any item price is not numeric.
        ValueError: If ``rows`` is empty.
    """
    if not rows:
        raise ValueError(f"Order {order_id} has no rows")

    head = rows[0]
    total = parse_price(head.order_total_display)
    items = [_to_item(row) for row in rows]

    return Order(
        order_id=order_id,
        order_date=head.order_date,
        customer_name=head.customer_name,
        order_total_display=total.display,
        order_total=total.value,
        shipping_cost=head.shipping_cost,
        delivery=delivery_description(head.shipping_cost),
        payment_gateway=head.payment_gateway,
        address_line_1=head.address_line_1,
        address_line_2=head.address_line_2,
        postcode=head.postcode,
        phone=head.phone,
        items=tuple(sort_items(items)),
        packages=split_packages(items, total.value, config),
    )


def build_orders(
    input_data: InputData,
    config: PackagingConfig | None = None,
    *,
    multipack: bool | None = None,
    woo_logger: WooCommerceLogger | None = None,
) -> list[Order]:
    """Turn parsed rows into packed orders, in first-encounter order.

    Args:
        input_data: Rows from ``parse_csv``
        config: Packaging thresholds (defaults to PackagingConfig())
        multipack: Overrides ``config.multipack`` when given; False ships
            every order as a single package
        woo_logger: Logger for grouping events

    Returns:
        One Order per contiguous run of an order id

    Raises:
        PriceParseError: On the first unparsable total or item price; no
            orders are returned in that case.
    """
    config = config or PackagingConfig()
    if multipack is not None:
        config = dataclasses.replace(config, multipack=multipack)
    woo_logger = woo_logger or WooCommerceLogger()

    orders: list[Order] = []
    for order_id, rows in group_rows(input_data.rows):
        order = build_order(order_id, rows, config)
        woo_logger.order_packed(
            order.order_id, len(order.items), order.package_count, order.order_total
        )
        orders.append(order)

    woo_logger.orders_built(len(orders), sum(o.package_count for o in orders))
    return orders
