"""Locale-aware price parsing that keeps the original display text."""

from __future__ import annotations

from dataclasses import dataclass

from woolabels.errors import PriceParseError
from woolabels.woocommerce.fields import is_decimal, normalize_decimal_separator


@dataclass(frozen=True, slots=True)
class Price:
    """Numeric price plus the text it was parsed from."""

    value: float
    display: str


def parse_price(display: str) -> Price:
    """Parse a monetary string such as ``"57,10"`` or ``"3.5"``.

    Args:
        display: Price text as exported, comma or period as decimal separator

    Returns:
        Price with the numeric value and ``display`` kept verbatim

    Raises:
        PriceParseError: If the text is not a decimal number once the comma
            is replaced by a period.
    """
    normalized = normalize_decimal_separator(display)
    if not is_decimal(normalized):
        raise PriceParseError(display)
    return Price(value=float(normalized), display=display)
