from hotdog_pos.data import initialize_menu
from hotdog_pos.rendering import render_menu


def test_menu_rows_use_register_column_widths():
    rows = render_menu(initialize_menu()).plain.splitlines()

    assert "1    Classic Hotdog           $30.00   50" in rows
    assert "4    Soda (Can)               $36.00   100" in rows


def test_menu_header_columns():
    header = next(line for line in render_menu(initialize_menu()).plain.splitlines() if "Stocks" in line)

    assert header == "Item IdItem                     Price     Stocks"
