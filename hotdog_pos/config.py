"""Runtime configuration defaults for pricing, display and logging."""

from __future__ import annotations

from decimal import Decimal

STORE_NAME = "Mainit na Aso's"
CURRENCY_SYMBOL = "$"

# Flat sales tax applied to the order subtotal at checkout.
TAX_RATE = Decimal("0.07")

# Diagnostics are written to a file only when LOG_PATH_ENV is set.
LOG_PATH_ENV = "HOTDOG_POS_LOG_PATH"
LOG_LEVEL_ENV = "HOTDOG_POS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "DEBUG"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
