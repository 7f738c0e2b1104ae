from decimal import Decimal

import pytest

from app.core.exceptions import InvalidItem
from app.modules.sales.rules import normalize_item
from app.modules.sales.schemas import SaleItemIn


def test_normalize_item_accepts_dict():
    product_id, quantity, subtotal = normalize_item(
        {"product_id": 5, "quantity": 2, "subtotal": 20.0}, 0
    )
    assert (product_id, quantity) == (5, 2)
    assert subtotal == Decimal("20.0")


def test_normalize_item_accepts_model_attributes():
    item = SaleItemIn(product_id=7, quantity=1, subtotal=9.5)
    assert normalize_item(item, 3) == (7, 1, Decimal("9.5"))


def test_subtotal_float_is_converted_without_binary_noise():
    _, _, subtotal = normalize_item({"product_id": 1, "quantity": 1, "subtotal": 0.1}, 0)
    assert subtotal == Decimal("0.1")


def test_integer_and_decimal_subtotals_are_numeric():
    assert normalize_item({"product_id": 1, "quantity": 1, "subtotal": 3}, 0)[2] == Decimal("3")
    assert normalize_item({"product_id": 1, "quantity": 1, "subtotal": Decimal("1.25")}, 0)[2] == Decimal("1.25")


@pytest.mark.parametrize("missing", ["product_id", "quantity", "subtotal"])
def test_missing_field_is_rejected(missing):
    raw = {"product_id": 5, "quantity": 2, "subtotal": 20.0}
    del raw[missing]

    with pytest.raises(InvalidItem) as exc_info:
        normalize_item(raw, 4)

    assert exc_info.value.field == missing
    assert exc_info.value.position == 4


@pytest.mark.parametrize("subtotal", ["20.0", float("nan"), float("inf"), Decimal("NaN"), True, [1]])
def test_non_numeric_or_non_finite_subtotal_is_rejected(subtotal):
    with pytest.raises(InvalidItem) as exc_info:
        normalize_item({"product_id": 5, "quantity": 1, "subtotal": subtotal}, 0)
    assert exc_info.value.field == "subtotal"


def test_non_integer_quantity_is_rejected():
    with pytest.raises(InvalidItem) as exc_info:
        normalize_item({"product_id": 5, "quantity": 1.5, "subtotal": 1}, 0)
    assert exc_info.value.field == "quantity"


def test_none_item_is_rejected():
    with pytest.raises(InvalidItem):
        normalize_item(None, 0)


def test_zero_subtotal_is_accepted():
    assert normalize_item({"product_id": 5, "quantity": 0, "subtotal": 0}, 0)[2] == Decimal("0")


@pytest.mark.parametrize("subtotal", [0.005, 9.999, Decimal("1.001"), Decimal("1E-30")])
def test_subtotal_finer_than_cents_is_rejected(subtotal):
    with pytest.raises(InvalidItem) as exc_info:
        normalize_item({"product_id": 5, "quantity": 1, "subtotal": subtotal}, 2)

    assert exc_info.value.field == "subtotal"
    assert exc_info.value.position == 2


def test_trailing_zeros_within_cents_are_accepted():
    assert normalize_item({"product_id": 5, "quantity": 1, "subtotal": Decimal("1.250")}, 0)[2] == Decimal("1.25")


def test_model_keeps_raw_values_for_the_rules():
    item = SaleItemIn(product_id=5, quantity="2", subtotal="20")

    with pytest.raises(InvalidItem) as exc_info:
        normalize_item(item, 0)
    assert exc_info.value.field == "quantity"
