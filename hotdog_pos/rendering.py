"""Rendering helpers for menus, restock rows and receipts."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from rich.text import Text

from hotdog_pos.config import CURRENCY_SYMBOL, STORE_NAME
from hotdog_pos.inventory import orderable_items
from hotdog_pos.models import CartLine, MenuItem, ReceiptTotals
from hotdog_pos.receipt import to_cents

MENU_RULE = "=" * 38
MENU_DIVIDER = "-" * 38
RECEIPT_RULE = "*" * 38
LABEL_WIDTH = 31


def format_money(amount: Decimal) -> str:
    """Format an amount as currency with exactly two decimals."""
    return f"{CURRENCY_SYMBOL}{to_cents(amount):.2f}"


def render_menu(menu: Sequence[MenuItem]) -> Text:
    """Render the ordering view: only items with stock left."""
    text = Text()
    text.append(f"\n{MENU_RULE}\n")
    text.append(f"        {STORE_NAME} Hotdog Menu\n", style="bold")
    text.append(f"{MENU_RULE}\n")
    text.append(f"{'Item Id':<5}{'Item':<25}{'Price':<10}Stocks\n", style="bold")
    text.append(f"{MENU_DIVIDER}\n")
    for display_id, item in orderable_items(menu):
        text.append(f"{display_id:<5}{item.name:<25}{format_money(item.price):<9}{item.quantity}\n")
    text.append(MENU_RULE)
    return text


def render_restock_row(display_id: int, item: MenuItem) -> Text:
    """Render one item's stock position in restock mode."""
    text = Text()
    text.append(f"\nCode {display_id}: ")
    text.append(item.name, style="bold")
    text.append(f" | Current Stock: {item.quantity} | Max Capacity: {item.max_stock}")
    return text


def render_running_total(line: CartLine, running_total: Decimal) -> Text:
    """Render the confirmation printed after each cart line."""
    text = Text()
    text.append(f"\nAdded {line.quantity} x {line.name} to your order. ")
    text.append(f"Current total: {format_money(running_total)}", style="bold")
    return text


def _receipt_header() -> Text:
    text = Text()
    text.append(f"\n\n{RECEIPT_RULE}\n")
    text.append("             ORDER RECEIPT\n", style="bold")
    text.append(RECEIPT_RULE)
    return text


def render_cancelled_receipt() -> Text:
    """Render the checkout notice for an empty cart."""
    text = _receipt_header()
    text.append("\nYou didn't order anything. Order canceled.\n", style="yellow")
    text.append(RECEIPT_RULE)
    return text


def render_receipt(lines: Sequence[CartLine], totals: ReceiptTotals, tax_rate: Decimal) -> Text:
    """Render the itemized receipt with subtotal, tax and grand total."""
    text = _receipt_header()
    for line in lines:
        text.append(f"\n{line.quantity:<5} x {line.name:<25} {format_money(line.line_total)}")

    tax_percent = (tax_rate * 100).normalize()
    text.append(f"\n{MENU_DIVIDER}\n")
    text.append(f"{'Subtotal:':<{LABEL_WIDTH}} {format_money(totals.subtotal)}\n")
    text.append(f"{f'Tax ({tax_percent:f}%):':<{LABEL_WIDTH}} {format_money(totals.tax)}\n")
    text.append(f"{RECEIPT_RULE}\n")
    text.append(
        f"{'** GRAND TOTAL **:':<{LABEL_WIDTH}} ** {format_money(totals.grand_total)} **\n",
        style="bold green",
    )
    text.append(f"{RECEIPT_RULE}\n")
    text.append(f"Thank you for visiting {STORE_NAME} Hotdog!")
    return text
