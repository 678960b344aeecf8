"""Send-specific address and amount predicates.

Every predicate returns ``False`` when the input is acceptable, or a
human-readable reason string. Any non-False value blocks submission.
"""

from __future__ import annotations

from decimal import Decimal

from xec_send import currency
from xec_send.features.send.conversion import fiat_to_crypto, is_native, usable_rate
from xec_send.shared.validation import AddressValidator, AmountValidator

PRICE_UNAVAILABLE_ERROR = "Price unavailable. Switch to XEC to enter an amount"
AMOUNT_TOO_LARGE_ERROR = "Amount exceeds maximum allowed value"


def is_valid_address(address: str | None) -> bool:
    return AddressValidator.validate(address, currency.ADDRESS_PREFIX).is_valid


def is_valid_etoken_address(address: str | None) -> bool:
    return AddressValidator.validate(address, currency.TOKEN_PREFIX).is_valid


def address_error(address: str | None) -> str | bool:
    if is_valid_address(address):
        return False
    if is_valid_etoken_address(address):
        return f"eToken addresses are not supported for {currency.TICKER} sends"
    return "Invalid address"


def is_valid_send_amount(
    amount: str | None,
    balance: Decimal,
    rate: Decimal | None,
    selected_currency: str = currency.TICKER,
) -> str | bool:
    """Check a single-recipient amount against the wallet balance.

    Fiat entries are converted to XEC before the balance comparison. No dust
    floor applies here; batch lines are held to it separately.
    """
    parsed = AmountValidator.parse_human_amount(amount)
    if not parsed.is_valid:
        return "Amount must be a number"

    tested = parsed.normalized_value
    if not is_native(selected_currency):
        if usable_rate(rate) is None:
            return PRICE_UNAVAILABLE_ERROR
        tested = fiat_to_crypto(tested, rate)
        if tested is None:
            return AMOUNT_TOO_LARGE_ERROR

    for check in (
        AmountValidator.validate_positive(tested),
        AmountValidator.convert_to_satoshis(tested),
        AmountValidator.validate_against_balance(tested, Decimal(balance)),
        AmountValidator.validate_decimal_places(tested),
    ):
        if not check.is_valid:
            return check.error_message or "Invalid amount"

    return False


def is_valid_multi_send_amount(value: str | None) -> bool:
    parsed = AmountValidator.parse_human_amount(value)
    if not parsed.is_valid:
        return False
    return AmountValidator.validate_minimum(parsed.normalized_value).is_valid
