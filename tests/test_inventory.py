from decimal import Decimal

import pytest

from hotdog_pos.data import initialize_menu
from hotdog_pos.inventory import add_to_stock, item_for_display_id, orderable_items, take_from_stock
from hotdog_pos.models import MenuItem


def _item(quantity=10, max_stock=20):
    return MenuItem(name="Test Dog", price=Decimal("12.50"), quantity=quantity, max_stock=max_stock)


def test_display_id_maps_to_zero_based_slot():
    menu = initialize_menu()

    assert item_for_display_id(menu, 1).name == "Classic Hotdog"
    assert item_for_display_id(menu, 6).name == "Lemonade"
    assert item_for_display_id(menu, 0) is None
    assert item_for_display_id(menu, 7) is None


def test_orderable_items_skip_sold_out_but_keep_ids():
    menu = initialize_menu()
    menu[1].quantity = 0

    ids = [display_id for display_id, _ in orderable_items(menu)]

    assert ids == [1, 3, 4, 5, 6]


@pytest.mark.parametrize("requested, expected_taken", [(1, 1), (10, 10), (25, 10)])
def test_take_from_stock_clamps_to_available(requested, expected_taken):
    item = _item(quantity=10)

    result = take_from_stock(item, requested)

    assert result.line.quantity == expected_taken
    assert item.quantity == 10 - expected_taken
    assert result.clamped is (requested > 10)
    assert result.available == 10


def test_cart_line_is_snapshot_of_ordered_amount():
    item = _item(quantity=10)

    result = take_from_stock(item, 4)
    item.price = Decimal("99.00")

    assert result.line.quantity == 4
    assert result.line.price == Decimal("12.50")
    assert result.line.line_total == Decimal("50.00")


def test_take_from_stock_rejects_zero_and_sold_out():
    with pytest.raises(ValueError):
        take_from_stock(_item(), 0)
    with pytest.raises(ValueError):
        take_from_stock(_item(quantity=0), 1)


@pytest.mark.parametrize("amount, expected_stock", [(0, 30), (5, 35), (20, 50), (25, 50)])
def test_add_to_stock_caps_at_max(amount, expected_stock):
    item = _item(quantity=30, max_stock=50)

    result = add_to_stock(item, amount)

    assert item.quantity == expected_stock == result.new_quantity
    assert result.added == expected_stock - 30
    assert result.clamped is (amount > 20)


def test_add_to_stock_on_full_item_is_noop():
    item = _item(quantity=20, max_stock=20)

    result = add_to_stock(item, 5)

    assert result.added == 0
    assert item.quantity == 20


def test_add_to_stock_rejects_negative():
    with pytest.raises(ValueError):
        add_to_stock(_item(), -1)
