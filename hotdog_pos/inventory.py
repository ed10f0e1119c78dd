"""Stock lookups and mutations for orders and restocks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from hotdog_pos.models import CartLine, MenuItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderResult:
    """Outcome of taking units from stock for a cart line."""

    line: CartLine
    requested: int
    available: int

    @property
    def clamped(self) -> bool:
        return self.line.quantity < self.requested


@dataclass(frozen=True)
class RestockResult:
    """Outcome of adding units to an item's stock."""

    requested: int
    added: int
    new_quantity: int

    @property
    def clamped(self) -> bool:
        return self.added < self.requested


def item_for_display_id(menu: Sequence[MenuItem], display_id: int) -> MenuItem | None:
    """Map a 1-based display id to its menu item, or None when out of range."""
    if not (1 <= display_id <= len(menu)):
        return None
    return menu[display_id - 1]


def orderable_items(menu: Sequence[MenuItem]) -> list[tuple[int, MenuItem]]:
    """Return (display id, item) pairs for items that can still be ordered."""
    return [(idx + 1, item) for idx, item in enumerate(menu) if item.in_stock]


def take_from_stock(item: MenuItem, requested: int) -> OrderResult:
    """Take up to `requested` units, clamped to what is on hand."""
    if requested <= 0:
        raise ValueError("Quantity must be greater than zero")
    if not item.in_stock:
        raise ValueError(f"{item.name} is out of stock")

    available = item.quantity
    quantity = min(requested, available)
    # Snapshot before the live record changes.
    line = CartLine(name=item.name, price=item.price, quantity=quantity)
    item.quantity -= quantity

    logger.debug(
        "order item=%r requested=%d taken=%d remaining=%d", item.name, requested, quantity, item.quantity
    )
    return OrderResult(line=line, requested=requested, available=available)


def add_to_stock(item: MenuItem, requested: int) -> RestockResult:
    """Add up to `requested` units without exceeding max stock."""
    if requested < 0:
        raise ValueError("Restock amount must be non-negative")

    added = min(requested, max(0, item.restock_needed))
    item.quantity += added

    logger.debug(
        "restock item=%r requested=%d added=%d stock=%d/%d",
        item.name,
        requested,
        added,
        item.quantity,
        item.max_stock,
    )
    return RestockResult(requested=requested, added=added, new_quantity=item.quantity)
