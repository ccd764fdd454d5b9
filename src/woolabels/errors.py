"""Exceptions raised while parsing order exports and product data."""

from __future__ import annotations

from collections.abc import Sequence


class WooLabelsError(Exception):
    """Base error for every parse failure surfaced to callers."""


class FieldParseError(WooLabelsError):
    """A single cell does not match its expected type."""

    def __init__(self, column: str, text: str, expected: str) -> None:
        self.column = column
        self.text = text
        self.expected = expected
        super().__init__(f"Invalid {column}: {text!r} (expected {expected})")


class RowParseError(WooLabelsError):
    """A CSV row could not be turned into a typed record."""

    def __init__(
        self,
        line_number: int,
        fields: Sequence[str],
        reason: str,
        field_error: FieldParseError | None = None,
    ) -> None:
        self.line_number = line_number
        self.fields = tuple(fields)
        self.reason = reason
        self.field_error = field_error
        super().__init__(f"Row {line_number}: {reason}; row={list(self.fields)!r}")


class PriceParseError(WooLabelsError):
    """A monetary display string is not numeric after locale normalization."""

    def __init__(self, display: str) -> None:
        self.display = display
        super().__init__(f"Invalid price: {display!r}")
