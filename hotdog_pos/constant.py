"""Editable static catalog."""

from __future__ import annotations

# (name, unit price, initial stock, max stock). Prices are strings so they
# convert to Decimal without float noise.
CATALOG: list[tuple[str, str, int, int]] = [
    # Hotdogs
    ("Classic Hotdog", "30.00", 50, 100),
    ("Chili Cheese Dog", "50.00", 30, 50),
    ("Chicken Hotdog", "45.00", 20, 40),
    # Drinks
    ("Soda (Can)", "36.00", 100, 200),
    ("Bottled Water", "15.00", 80, 150),
    ("Lemonade", "20.00", 40, 70),
]
