"""Typed conversion of individual CSV cells."""

from __future__ import annotations

import re

from woolabels.errors import FieldParseError

_UNSIGNED_RE = re.compile(r"\+?\d+", re.ASCII)
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)


def normalize_decimal_separator(text: str) -> str:
    """Swap the comma decimal separator for a period ("57,10" -> "57.10")."""
    return text.replace(",", ".", 1)


def is_decimal(text: str) -> bool:
    return _DECIMAL_RE.fullmatch(text) is not None


def parse_unsigned(text: str, column: str) -> int:
    """Parse a non-negative integer cell.

    Raises:
        FieldParseError: If ``text`` is not a plain run of digits.
    """
    if _UNSIGNED_RE.fullmatch(text) is None:
        raise FieldParseError(column, text, "unsigned integer")
    return int(text)


def parse_locale_decimal(text: str, column: str) -> float:
    """Parse a decimal cell written with either a comma or a period separator.

    Raises:
        FieldParseError: If the normalized text is not a decimal number.
    """
    normalized = normalize_decimal_separator(text)
    if not is_decimal(normalized):
        raise FieldParseError(column, text, "decimal number")
    return float(normalized)
