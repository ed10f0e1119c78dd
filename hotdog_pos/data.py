"""Static menu data."""

from __future__ import annotations

from decimal import Decimal

from hotdog_pos.constant import CATALOG
from hotdog_pos.models import MenuItem


def initialize_menu() -> list[MenuItem]:
    """Build a fresh, fully independent copy of the catalog."""
    return [
        MenuItem(name=name, price=Decimal(price), quantity=quantity, max_stock=max_stock)
        for name, price, quantity, max_stock in CATALOG
    ]
