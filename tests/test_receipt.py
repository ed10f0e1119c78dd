from decimal import Decimal

import pytest

from hotdog_pos.models import Cart, CartLine
from hotdog_pos.receipt import compute_totals, to_cents
from hotdog_pos.rendering import format_money


def test_totals_for_hotdogs_and_sodas():
    lines = [
        CartLine("Classic Hotdog", Decimal("30.00"), 3),
        CartLine("Soda (Can)", Decimal("36.00"), 2),
    ]

    totals = compute_totals(lines)

    assert totals.subtotal == Decimal("162.00")
    assert totals.tax == Decimal("11.34")
    assert totals.grand_total == Decimal("173.34")


def test_grand_total_is_subtotal_times_rate_rounded():
    lines = [CartLine("Bottled Water", Decimal("15.00"), 1), CartLine("Lemonade", Decimal("20.00"), 3)]

    totals = compute_totals(lines)

    assert totals.subtotal == sum(line.price * line.quantity for line in lines)
    assert totals.grand_total == to_cents(totals.subtotal * Decimal("1.07"))


def test_rounds_half_up():
    totals = compute_totals([CartLine("Odd", Decimal("0.50"), 1)])

    # 0.035 rounds up to 0.04
    assert totals.tax == Decimal("0.04")
    assert totals.grand_total == Decimal("0.54")


def test_empty_cart_has_no_totals():
    with pytest.raises(ValueError):
        compute_totals([])


def test_cart_running_subtotal():
    cart = Cart()
    assert cart.is_empty()

    cart.add(CartLine("Classic Hotdog", Decimal("30.00"), 3))
    cart.add(CartLine("Chicken Hotdog", Decimal("45.00"), 1))

    assert cart.subtotal == Decimal("135.00")
    assert not cart.is_empty()


def test_format_money_has_symbol_and_two_decimals():
    assert format_money(Decimal("173.34")) == "$173.34"
    assert format_money(Decimal("5")) == "$5.00"
    assert format_money(Decimal("0.005")) == "$0.01"
