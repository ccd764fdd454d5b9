"""Delivery description and per-package delivery lines for labels."""

from __future__ import annotations

from decimal import Decimal

from woolabels.woocommerce.entities import DeliveryDetail, Order

LOCAL_PICK_UP = "local pick up"

DELIVERY_LABEL = "Consegna"
PAYMENT_LABEL = "Pagamento"
TOTAL_LABEL = "Totale"


def format_amount(value: float) -> str:
    """Render a number in positional notation without a trailing ``.0``.

    5.0 -> "5", 5.5 -> "5.5", 1e-05 -> "0.00001".
    """
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def delivery_description(shipping_cost: float) -> str:
    """Describe how an order is delivered from its shipping cost."""
    if shipping_cost == 0:
        return LOCAL_PICK_UP
    return f"{format_amount(shipping_cost)} €"


def package_marker(order: Order, package_index: int) -> DeliveryDetail:
    """Highlighted "COLLO i DI n" line for multi-package orders.

    The first package carries no customer name; later ones do.
    """
    name = order.customer_name if package_index > 0 else ""
    return DeliveryDetail(
        label=name,
        value=f"COLLO {package_index + 1} DI {order.package_count}",
        highlighted=True,
    )


def delivery_details(order: Order, package_index: int) -> tuple[DeliveryDetail, ...]:
    """Lines printed under package ``package_index`` of ``order``.

    Only the last package lists delivery, payment and total. Every package of
    a multi-package order also gets a package marker.

    Raises:
        IndexError: If ``package_index`` does not name one of the order's packages.
    """
    if not 0 <= package_index < order.package_count:
        raise IndexError(
            f"Order {order.order_id} has no package {package_index} "
            f"({order.package_count} packages)"
        )

    details: list[DeliveryDetail] = []
    if package_index == order.package_count - 1:
        details.extend(
            [
                DeliveryDetail(DELIVERY_LABEL, order.delivery),
                DeliveryDetail(PAYMENT_LABEL, order.payment_gateway),
                DeliveryDetail(TOTAL_LABEL, f"{order.order_total_display}€"),
            ]
        )
    if order.package_count > 1:
        details.append(package_marker(order, package_index))

    return tuple(details)
