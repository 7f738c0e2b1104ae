from decimal import Decimal

import pytest

from app.core.exceptions import EmptySale, InvalidItem
from app.modules.sales.line_items import LineItem, build_line_items


ITEMS = [
    {"product_id": 5, "quantity": 2, "subtotal": 20.0},
    {"product_id": 7, "quantity": 1, "subtotal": 9.5},
    {"product_id": 6, "quantity": 3, "subtotal": 13.35},
]


def test_total_is_sum_of_subtotals():
    items, total = build_line_items(ITEMS[:2])
    assert total == Decimal("29.5")
    assert len(items) == 2


def test_total_does_not_depend_on_order():
    _, forward = build_line_items(ITEMS)
    _, backward = build_line_items(list(reversed(ITEMS)))
    assert forward == backward == Decimal("42.85")


def test_order_and_positions_are_preserved():
    items, _ = build_line_items(ITEMS)
    assert [item.product_id for item in items] == [5, 7, 6]
    assert [item.position for item in items] == [0, 1, 2]


def test_identical_input_gives_identical_output():
    assert build_line_items(ITEMS) == build_line_items(ITEMS)


@pytest.mark.parametrize("raw_items", [[], None, (), {"product_id": 5}, 5, "items", (item for item in ITEMS)])
def test_empty_or_non_sequence_input_is_an_empty_sale(raw_items):
    with pytest.raises(EmptySale):
        build_line_items(raw_items)


def test_fails_on_first_invalid_item():
    raw = [
        {"product_id": 5, "quantity": 2, "subtotal": 20.0},
        {"product_id": 7, "subtotal": 9.5},
        {"product_id": 6},
    ]
    with pytest.raises(InvalidItem) as exc_info:
        build_line_items(raw)

    assert exc_info.value.position == 1
    assert exc_info.value.field == "quantity"


def test_to_row_binds_item_to_sale():
    item = LineItem(product_id=5, quantity=2, subtotal=Decimal("20.0"), position=0)
    assert item.to_row(3) == {
        "sale_id": 3,
        "product_id": 5,
        "quantity": 2,
        "subtotal": Decimal("20.0"),
        "position": 0
    }
