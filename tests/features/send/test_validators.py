"""Tests for send address and amount predicates."""

from decimal import Decimal

import pytest

from xec_send.features.send.validators import (
    AMOUNT_TOO_LARGE_ERROR,
    PRICE_UNAVAILABLE_ERROR,
    address_error,
    is_valid_address,
    is_valid_etoken_address,
    is_valid_multi_send_amount,
    is_valid_send_amount,
)

BALANCE = Decimal("1000")


class TestAddressPredicates:
    def test_valid_xec_address(self, xec_address, p2sh_xec_address):
        assert is_valid_address(xec_address) is True
        assert is_valid_address(p2sh_xec_address) is True

    def test_etoken_address_is_not_xec(self, etoken_address):
        assert is_valid_address(etoken_address) is False
        assert is_valid_etoken_address(etoken_address) is True

    @pytest.mark.parametrize("value", [None, "", "ecash:", "hello", 42])
    def test_garbage(self, value):
        assert is_valid_address(value) is False

    def test_address_error_valid(self, xec_address):
        assert address_error(xec_address) is False

    def test_address_error_wrong_network(self, etoken_address):
        assert address_error(etoken_address) == "eToken addresses are not supported for XEC sends"

    def test_address_error_invalid(self):
        assert address_error("ecash:qqqqqq") == "Invalid address"


class TestIsValidSendAmount:
    def test_valid_native(self):
        assert is_valid_send_amount("10", BALANCE, None) is False

    def test_single_send_has_no_dust_floor(self):
        assert is_valid_send_amount("1", BALANCE, None) is False

    @pytest.mark.parametrize("value", ["", "abc", None, "1..2"])
    def test_not_a_number(self, value):
        assert is_valid_send_amount(value, BALANCE, None) == "Amount must be a number"

    @pytest.mark.parametrize("value", ["0", "-3"])
    def test_not_positive(self, value):
        assert is_valid_send_amount(value, BALANCE, None) == "Amount must be greater than 0"

    def test_exceeds_balance(self):
        assert is_valid_send_amount("1000.01", BALANCE, None) == "Amount cannot exceed your XEC balance"

    def test_full_balance_allowed(self):
        assert is_valid_send_amount("1000", BALANCE, None) is False

    def test_too_many_decimals(self):
        error = is_valid_send_amount("1.123", BALANCE, None)
        assert error == "XEC transactions do not support more than 2 decimal places"

    def test_fiat_converted_before_balance_check(self):
        rate = Decimal("0.01")
        assert is_valid_send_amount("5", BALANCE, rate, "usd") is False
        assert is_valid_send_amount("11", BALANCE, rate, "usd") == "Amount cannot exceed your XEC balance"

    def test_fiat_without_rate_is_price_unavailable(self):
        assert is_valid_send_amount("5", BALANCE, None, "usd") == PRICE_UNAVAILABLE_ERROR

    def test_any_error_is_truthy(self):
        assert is_valid_send_amount("0", BALANCE, None)

    def test_huge_fiat_amount_is_reported_not_raised(self):
        amount = "9" * 30
        assert is_valid_send_amount(amount, BALANCE, Decimal("1"), "usd") == AMOUNT_TOO_LARGE_ERROR
        assert is_valid_send_amount(amount, BALANCE, Decimal("0.00003"), "usd") == AMOUNT_TOO_LARGE_ERROR

    def test_amount_above_supply(self):
        huge = Decimal("1e30")
        assert is_valid_send_amount("22000000000000", huge, None) == AMOUNT_TOO_LARGE_ERROR

    def test_exponent_notation_is_not_a_number(self):
        assert is_valid_send_amount("1e30", BALANCE, Decimal("1"), "usd") == "Amount must be a number"


class TestIsValidMultiSendAmount:
    @pytest.mark.parametrize("value", ["5.5", "5.50", "700", " 6 "])
    def test_at_or_above_floor(self, value):
        assert is_valid_multi_send_amount(value) is True

    @pytest.mark.parametrize("value", ["5.49", "2", "0", "-10", "", None, "abc"])
    def test_below_floor_or_invalid(self, value):
        assert is_valid_multi_send_amount(value) is False
