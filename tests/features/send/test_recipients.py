"""Tests for one-to-many recipient list parsing."""

from decimal import Decimal

import pytest

from xec_send.features.send.recipients import (
    BELOW_MINIMUM_ERROR,
    BLANK_INPUT_ERROR,
    BLANK_ROW_ERROR,
    INVALID_ADDRESS_ERROR,
    RecipientLine,
    normalize_recipient_batch,
)


def test_error_messages():
    assert BLANK_INPUT_ERROR == "Input must not be blank"
    assert BLANK_ROW_ERROR == "Empty spaces and rows must be removed"
    assert INVALID_ADDRESS_ERROR == "Ensure each XEC address is valid"
    assert BELOW_MINIMUM_ERROR == "Ensure each tx is at least 5.5 XEC"


def test_accepts_valid_batch(xec_address, second_xec_address):
    result = normalize_recipient_batch(f"{xec_address},500\n{second_xec_address},700")
    assert result.ok is True
    assert result.recipients == (
        RecipientLine(address=xec_address, amount=Decimal("500")),
        RecipientLine(address=second_xec_address, amount=Decimal("700")),
    )
    assert result.total_amount == Decimal("1200")


def test_minimum_is_inclusive(xec_address):
    result = normalize_recipient_batch(f"{xec_address},5.5")
    assert result.ok is True
    assert result.recipients[0].amount == Decimal("5.5")


def test_below_minimum_accepts_nothing(xec_address):
    result = normalize_recipient_batch(f"{xec_address},2")
    assert result.error == BELOW_MINIMUM_ERROR
    assert result.recipients == ()


@pytest.mark.parametrize("text", ["", None])
def test_blank_input(text):
    result = normalize_recipient_batch(text)
    assert result.error == BLANK_INPUT_ERROR
    assert result.line_number is None


@pytest.mark.parametrize("blank", ["", "   ", "\t"])
def test_blank_row_rejects_whole_batch(xec_address, second_xec_address, blank):
    result = normalize_recipient_batch(f"{xec_address},500\n{blank}\n{second_xec_address},700")
    assert result.error == BLANK_ROW_ERROR
    assert result.line_number == 2
    assert result.recipients == ()


def test_trailing_newline_is_a_blank_row(xec_address):
    result = normalize_recipient_batch(f"{xec_address},500\n")
    assert result.error == BLANK_ROW_ERROR
    assert result.line_number == 2


def test_invalid_address(xec_address):
    result = normalize_recipient_batch(f"{xec_address},500\necash:nope,600")
    assert result.error == INVALID_ADDRESS_ERROR
    assert result.line_number == 2


def test_etoken_address_is_invalid(etoken_address):
    assert normalize_recipient_batch(f"{etoken_address},600").error == INVALID_ADDRESS_ERROR


def test_missing_amount(xec_address):
    assert normalize_recipient_batch(xec_address).error == BELOW_MINIMUM_ERROR


def test_first_failure_wins_address_before_amount(xec_address):
    # line 1: bad address, line 2: bad amount
    result = normalize_recipient_batch(f"ecash:bad,500\n{xec_address},1")
    assert result.error == INVALID_ADDRESS_ERROR
    assert result.line_number == 1


def test_first_failure_wins_amount_before_address(xec_address):
    result = normalize_recipient_batch(f"{xec_address},1\necash:bad,500")
    assert result.error == BELOW_MINIMUM_ERROR
    assert result.line_number == 1


def test_first_failure_wins_over_blank_row(xec_address):
    result = normalize_recipient_batch(f"{xec_address},500\n{xec_address},3\n\n")
    assert result.error == BELOW_MINIMUM_ERROR
    assert result.line_number == 2


def test_address_checked_before_amount_on_same_line():
    result = normalize_recipient_batch("ecash:bad,1")
    assert result.error == INVALID_ADDRESS_ERROR


def test_more_than_two_decimals_rejected(xec_address):
    result = normalize_recipient_batch(f"{xec_address},500\n{xec_address},5.555")
    assert result.error == "XEC transactions do not support more than 2 decimal places"
    assert result.line_number == 2
    assert result.recipients == ()


def test_amount_above_supply_rejected(xec_address):
    result = normalize_recipient_batch(f"{xec_address},22000000000000")
    assert result.error == "Amount exceeds maximum allowed value"


def test_splits_on_first_comma_only(xec_address):
    result = normalize_recipient_batch(f"{xec_address},500,extra")
    assert result.error == BELOW_MINIMUM_ERROR
