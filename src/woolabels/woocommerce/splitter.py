"""Order-to-package splitting driven by the order's total value."""

from __future__ import annotations

from collections.abc import Sequence

from woolabels.config import PackagingConfig
from woolabels.woocommerce.entities import OrderItem, Package


def package_count(order_total: float, config: PackagingConfig) -> int:
    """Number of packages an order of ``order_total`` ships in (1 to 3)."""
    if not config.multipack:
        return 1
    if order_total <= config.single_package_max:
        return 1
    if order_total <= config.double_package_max:
        return 2
    return 3


def sort_items(items: Sequence[OrderItem]) -> list[OrderItem]:
    """Sort by product name; ties keep their original order."""
    return sorted(items, key=lambda item: item.product_name)


def split_packages(
    items: Sequence[OrderItem],
    order_total: float,
    config: PackagingConfig,
) -> tuple[Package, ...]:
    """Split an order's items into consecutive packages.

    Items are sorted by product name and cut into chunks of
    ``ceil(len(items) / count)``, so the last package may be smaller than the
    others. When the package count exceeds the number of items, fewer
    packages are produced.

    Args:
        items: The order's items in encounter order
        order_total: Normalized order total deciding the package count
        config: Packaging thresholds

    Returns:
        Tuple of non-empty packages whose concatenation is the sorted item list.
        Empty when ``items`` is empty.
    """
    sorted_items = sort_items(items)
    if not sorted_items:
        return ()

    count = package_count(order_total, config)
    base, remainder = divmod(len(sorted_items), count)
    chunk_size = base + 1 if remainder > 0 else base

    return tuple(
        Package(items=tuple(sorted_items[start : start + chunk_size]))
        for start in range(0, len(sorted_items), chunk_size)
    )
