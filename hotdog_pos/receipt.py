"""Checkout arithmetic."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from hotdog_pos.config import TAX_RATE
from hotdog_pos.models import CartLine, ReceiptTotals

CENTS = Decimal("0.01")


def to_cents(amount: Decimal) -> Decimal:
    """Round a currency amount half-up to two decimal places."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def compute_totals(lines: Iterable[CartLine], tax_rate: Decimal = TAX_RATE) -> ReceiptTotals:
    """Compute subtotal, tax and grand total for a non-empty set of cart lines."""
    copied_lines = list(lines)
    if not copied_lines:
        raise ValueError("Cannot compute totals for an empty cart")
    if tax_rate < 0:
        raise ValueError("tax_rate must be non-negative")

    subtotal = sum((line.line_total for line in copied_lines), Decimal("0"))
    tax = subtotal * tax_rate
    return ReceiptTotals(
        subtotal=to_cents(subtotal),
        tax=to_cents(tax),
        grand_total=to_cents(subtotal + tax),
    )
