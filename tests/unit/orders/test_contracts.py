"""Unit tests for OrderRequestContract.

Covers:
- Positive integers pass and are normalized to ``int``.
- Absent, ``None`` and blank values report "is missing".
- Zero and negatives report "must be greater than 0".
- Non-numeric input reports "must be an integer".
- Both fields report independently.
"""

from __future__ import annotations

import pytest

from modules.orders.contracts import OrderRequestContract
from modules.orders.dtos import PlaceOrderDTO

pytestmark = pytest.mark.unit


@pytest.fixture()
def contract():
    return OrderRequestContract()


class TestValidInput:
    def test_positive_integers_pass(self, contract):
        result = contract.call(product_id=1, quantity=1)

        assert result.is_success
        assert result.unwrap() == PlaceOrderDTO(product_id=1, quantity=1)

    def test_integer_strings_are_coerced(self, contract):
        result = contract.call(product_id="12", quantity="3")

        dto = result.unwrap()
        assert dto.product_id == 12
        assert dto.quantity == 3

    def test_unknown_keys_are_ignored(self, contract):
        result = contract.call(product_id=1, quantity=2, coupon="FREE")
        assert result.is_success


class TestProductId:
    @pytest.mark.parametrize("product_id", [0, -1, "-5"])
    def test_non_positive_fails(self, contract, product_id):
        result = contract.call(product_id=product_id, quantity=1)

        assert result.is_failure
        assert result.error == {"product_id": ["must be greater than 0"]}

    def test_absent_fails(self, contract):
        result = contract.call(quantity=1)
        assert result.error["product_id"] == ["is missing"]

    @pytest.mark.parametrize("product_id", [None, "", "   "])
    def test_null_or_blank_counts_as_missing(self, contract, product_id):
        result = contract.call(product_id=product_id, quantity=1)
        assert result.error["product_id"] == ["is missing"]

    @pytest.mark.parametrize(
        "product_id",
        ["abc", 1.5, True, [1], float("nan"), float("inf"), "9" * 5000, b"3"],
    )
    def test_non_integer_fails(self, contract, product_id):
        result = contract.call(product_id=product_id, quantity=1)
        assert result.error["product_id"] == ["must be an integer"]


class TestQuantity:
    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_fails(self, contract, quantity):
        result = contract.call(product_id=1, quantity=quantity)
        assert result.error == {"quantity": ["must be greater than 0"]}

    def test_absent_fails(self, contract):
        result = contract.call(product_id=1)
        assert result.error == {"quantity": ["is missing"]}

    @pytest.mark.parametrize("quantity", [float("-inf"), bytearray(b"2"), False])
    def test_non_integer_fails(self, contract, quantity):
        result = contract.call(product_id=1, quantity=quantity)
        assert result.error == {"quantity": ["must be an integer"]}


class TestBothFields:
    def test_both_fields_report_together(self, contract):
        result = contract.call(product_id=-1, quantity=None)

        assert result.error == {
            "product_id": ["must be greater than 0"],
            "quantity": ["is missing"],
        }

    def test_same_input_gives_same_errors(self, contract):
        first = contract.call(product_id=0, quantity=0)
        second = contract.call(product_id=0, quantity=0)
        assert first == second
