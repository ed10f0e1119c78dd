"""Domain models for hotdog-pos."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass
class MenuItem:
    """A catalog entry with live stock levels."""

    name: str
    price: Decimal
    quantity: int
    max_stock: int

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0

    @property
    def restock_needed(self) -> int:
        return self.max_stock - self.quantity


@dataclass(frozen=True)
class CartLine:
    """Snapshot of one confirmed order entry."""

    name: str
    price: Decimal
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


@dataclass
class Cart:
    """Cart lines confirmed during a single order."""

    lines: list[CartLine] = field(default_factory=list)

    def add(self, line: CartLine) -> None:
        self.lines.append(line)

    @property
    def subtotal(self) -> Decimal:
        return sum((line.line_total for line in self.lines), Decimal("0"))

    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class ReceiptTotals:
    """Checkout amounts, rounded to cents."""

    subtotal: Decimal
    tax: Decimal
    grand_total: Decimal
