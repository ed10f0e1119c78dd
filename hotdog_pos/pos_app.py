"""Interactive point-of-sale loop: main menu, order flow and restock flow."""

from __future__ import annotations

import logging
import sys
from decimal import Decimal
from typing import TextIO

from rich.console import Console
from rich.text import Text

from hotdog_pos.config import STORE_NAME, TAX_RATE
from hotdog_pos.data import initialize_menu
from hotdog_pos.inventory import add_to_stock, item_for_display_id, take_from_stock
from hotdog_pos.models import Cart, MenuItem
from hotdog_pos.prompts import OperatorInput
from hotdog_pos.receipt import compute_totals
from hotdog_pos.rendering import (
    render_cancelled_receipt,
    render_menu,
    render_receipt,
    render_restock_row,
    render_running_total,
)

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0


class PosApp:
    """A line-oriented terminal app for taking orders and restocking the stall."""

    def __init__(
        self,
        menu: list[MenuItem] | None = None,
        console: Console | None = None,
        stdin: TextIO | None = None,
        tax_rate: Decimal = TAX_RATE,
    ) -> None:
        self.menu = menu if menu is not None else initialize_menu()
        self.console = console or Console(highlight=False)
        self.stdin = stdin or sys.stdin
        self.input = OperatorInput(self.console, self.stdin)
        self.tax_rate = tax_rate

    def run(self) -> int:
        """Dispatch main-menu commands until the operator exits."""
        logger.info("session_start items=%d", len(self.menu))
        try:
            while True:
                self._say(f"\n\n=== {STORE_NAME} System Menu ===", style="bold")
                self._say("[O]rder | [R]estock | [E]xit")
                command = self.input.read_command("Enter choice: ")

                if command is None:
                    self._warn("Invalid input. Please try again.")
                    continue
                if command == "O":
                    self.process_order()
                elif command == "R":
                    self.restock_inventory()
                elif command == "E":
                    self._say(f"\nExiting {STORE_NAME} System. Goodbye!")
                    logger.info("session_end reason=exit")
                    return EXIT_SUCCESS
                else:
                    self._warn("Invalid option. Please choose 'O', 'R', or 'E'.")
        except EOFError:
            self._say("")
            logger.info("session_end reason=eof")
            return EXIT_SUCCESS

    def process_order(self) -> Cart:
        """Take one order against current stock and print its receipt."""
        cart = Cart()
        self._say(f"\nWelcome to {STORE_NAME}! Start your order (Type '0' to finish order).")

        while True:
            self.console.print(render_menu(self.menu))
            choice = self._read_int(f"\nEnter Item ID (1-{len(self.menu)}) or '0' to checkout: ")
            if choice == 0:
                break

            item = item_for_display_id(self.menu, choice)
            if item is None:
                self._warn("Invalid item ID. Please try again.")
                continue
            if not item.in_stock:
                self._warn(f"Sorry, {item.name} is currently out of stock!")
                continue

            requested = self._read_int(f"How many {item.name}s do you want? (Max {item.quantity}): ")
            if requested <= 0:
                self._warn("Quantity must be greater than zero.")
                continue

            result = take_from_stock(item, requested)
            if result.clamped:
                self._warn(f"Only {result.available} are in stock. Adding all available.")
            cart.add(result.line)
            self.console.print(render_running_total(result.line, cart.subtotal))

        self.checkout(cart)
        return cart

    def checkout(self, cart: Cart) -> None:
        """Print the receipt for a finished order, or a cancellation for an empty one."""
        if cart.is_empty():
            self.console.print(render_cancelled_receipt())
            logger.info("checkout cancelled reason=empty_cart")
            return

        totals = compute_totals(cart.lines, self.tax_rate)
        self.console.print(render_receipt(cart.lines, totals, self.tax_rate))
        logger.info(
            "checkout lines=%d subtotal=%s tax=%s grand_total=%s",
            len(cart.lines),
            totals.subtotal,
            totals.tax,
            totals.grand_total,
        )

    def restock_inventory(self) -> None:
        """Walk every item once, offering to top it up to max stock."""
        self._say("\n*** INVENTORY RESTOCK MODE ***", style="bold")

        for display_id, item in enumerate(self.menu, start=1):
            self.console.print(render_restock_row(display_id, item))
            needed = item.restock_needed
            if needed <= 0:
                self._say("  -> Stock is full.")
                continue

            self._say(f"  -> Recommended Restock: {needed}")
            amount = self._read_int("  Enter amount to add (0 to skip): ")
            if amount == 0:
                continue

            result = add_to_stock(item, amount)
            if result.clamped:
                self._warn(f"  Warning: Can only add {result.added} to reach max capacity.")
            self._say(
                f"  Successfully restocked {result.added} units. New stock: {result.new_quantity}",
                style="green",
            )

        self._say("\n*** RESTOCK COMPLETE ***", style="bold")

    def _read_int(self, prompt: str) -> int:
        return self.input.read_non_negative_int(prompt)

    def _say(self, message: str, style: str = "") -> None:
        self.console.print(Text(message, style=style))

    def _warn(self, message: str) -> None:
        self._say(message, style="yellow")
