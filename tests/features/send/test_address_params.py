"""Tests for address query-parameter parsing."""

from decimal import Decimal

import pytest

from xec_send.features.send.address_params import (
    QueryParameters,
    parse_address_for_params,
    query_string_warning,
    strip_query,
)
from xec_send.features.send.validators import is_valid_address


class TestParseAddressForParams:
    def test_plain_valid_address(self, xec_address):
        assert is_valid_address(xec_address)
        assert parse_address_for_params(xec_address) == QueryParameters(
            address=xec_address, query_string=None, amount=None
        )

    def test_amount_param(self):
        result = parse_address_for_params("ecash:qpX?amount=25")
        assert result.address == "ecash:qpX"
        assert result.query_string == "amount=25"
        assert result.amount == Decimal("25")
        assert result.amount_text == "25"

    def test_decimal_amount(self, xec_address):
        result = parse_address_for_params(f"{xec_address}?amount=12.5")
        assert result.amount == Decimal("12.5")

    def test_unrecognized_params_kept_in_query_string(self, xec_address):
        result = parse_address_for_params(f"{xec_address}?label=coffee&amount=3")
        assert result.query_string == "label=coffee&amount=3"
        assert result.amount == Decimal("3")

    def test_no_amount_param(self, xec_address):
        result = parse_address_for_params(f"{xec_address}?label=coffee")
        assert result.query_string == "label=coffee"
        assert result.amount is None

    @pytest.mark.parametrize(
        "query", ["amount=abc", "amount=-5", "amount=", "amount=NaN", "amount=inf", "&&=="]
    )
    def test_malformed_amount_is_ignored(self, query):
        result = parse_address_for_params(f"ecash:qpX?{query}")
        assert result.address == "ecash:qpX"
        assert result.query_string == query
        assert result.amount is None

    def test_only_first_question_mark_splits(self):
        result = parse_address_for_params("ecash:qpX?amount=1?x=2")
        assert result.address == "ecash:qpX"
        assert result.query_string == "amount=1?x=2"

    def test_empty_query_string(self):
        result = parse_address_for_params("ecash:qpX?")
        assert result.query_string == ""
        assert result.amount is None

    def test_empty_input(self):
        assert parse_address_for_params("") == QueryParameters(address="")
        assert parse_address_for_params(None) == QueryParameters(address="")

    def test_does_not_validate_address(self):
        result = parse_address_for_params("not-an-address?amount=1")
        assert result.address == "not-an-address"
        assert result.amount == Decimal("1")


def test_strip_query():
    assert strip_query("ecash:qpX?amount=1") == "ecash:qpX"
    assert strip_query("ecash:qpX") == "ecash:qpX"


def test_query_string_warning():
    assert query_string_warning(None) is None
    warning = query_string_warning("amount=1&label=x")
    assert '"amount=1&label=x."' in warning
    assert '"amount" parameter' in warning
