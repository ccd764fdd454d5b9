"""Shipping label assembly: one label block per order, one table per package."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from woolabels.woocommerce.delivery import delivery_details
from woolabels.woocommerce.entities import DeliveryDetail, Order, Package

EanLookup = Callable[[str], str | None]


@dataclass(frozen=True, slots=True)
class LabelLine:
    """A product row on a package label, with its barcode if one is known."""

    quantity: int
    product_name: str
    ean: str | None = None


@dataclass(frozen=True, slots=True)
class PackageLabel:
    """Contents and delivery lines of one package."""

    package_number: int  # 1-based
    package_count: int
    lines: tuple[LabelLine, ...]
    details: tuple[DeliveryDetail, ...]


@dataclass(frozen=True, slots=True)
class ShippingLabel:
    """Address header plus per-package labels for one order."""

    order: Order
    packages: tuple[PackageLabel, ...]

    @property
    def package_summary(self) -> str:
        return f"{len(self.packages)} collo/i"


def _label_lines(package: Package, ean_lookup: EanLookup | None) -> tuple[LabelLine, ...]:
    return tuple(
        LabelLine(
            quantity=item.quantity,
            product_name=item.product_name,
            ean=ean_lookup(item.product_name) if ean_lookup else None,
        )
        for item in package
    )


def assemble_label(order: Order, ean_lookup: EanLookup | None = None) -> ShippingLabel:
    """Build the printable label for a single order."""
    packages = tuple(
        PackageLabel(
            package_number=index + 1,
            package_count=order.package_count,
            lines=_label_lines(package, ean_lookup),
            details=delivery_details(order, index),
        )
        for index, package in enumerate(order.packages)
    )
    return ShippingLabel(order=order, packages=packages)


def assemble_labels(
    orders: Sequence[Order],
    ean_lookup: EanLookup | None = None,
) -> list[ShippingLabel]:
    """Build labels for every order, keeping order.

    Args:
        orders: Packed orders from ``build_orders``
        ean_lookup: Optional product name -> EAN resolver used to print
            barcodes; products it returns None for get no barcode

    Returns:
        One ShippingLabel per order
    """
    return [assemble_label(order, ean_lookup) for order in orders]
