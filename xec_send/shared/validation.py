"""Input validation utilities for XEC amounts and addresses."""

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from xec_send import currency
from xec_send.exceptions import InvalidAddressError
from xec_send.shared import cashaddr


@dataclass
class ValidationResult:
    is_valid: bool
    error_message: str | None = None
    normalized_value: Any = None


class AmountValidator:
    MAX_SATOSHIS = 21_000_000_000_000 * currency.SATOSHIS_PER_XEC
    AMOUNT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

    @staticmethod
    def parse_human_amount(value: str | None) -> ValidationResult:
        if value is None or not str(value).strip():
            return ValidationResult(
                is_valid=False,
                error_message="Amount is required",
            )

        raw_amount = str(value).strip()

        # plain ASCII digits only: no exponents, underscores or other scripts
        if not AmountValidator.AMOUNT_PATTERN.fullmatch(raw_amount):
            return ValidationResult(
                is_valid=False,
                error_message="Amount must be a number",
            )

        return ValidationResult(
            is_valid=True,
            normalized_value=Decimal(raw_amount),
        )

    @staticmethod
    def validate_positive(amount: Decimal) -> ValidationResult:
        if amount <= 0:
            return ValidationResult(
                is_valid=False,
                error_message="Amount must be greater than 0",
            )
        return ValidationResult(is_valid=True, normalized_value=amount)

    @staticmethod
    def validate_decimal_places(
        amount: Decimal, decimals: int = currency.CASH_DECIMALS
    ) -> ValidationResult:
        exponent = amount.as_tuple().exponent
        if not isinstance(exponent, int):
            return ValidationResult(
                is_valid=False,
                error_message="Amount must be a number",
            )

        if max(0, -exponent) > decimals:
            return ValidationResult(
                is_valid=False,
                error_message=f"{currency.TICKER} transactions do not support more than {decimals} decimal places",
            )

        return ValidationResult(is_valid=True, normalized_value=amount)

    @staticmethod
    def validate_against_balance(amount: Decimal, balance: Decimal) -> ValidationResult:
        if amount > balance:
            return ValidationResult(
                is_valid=False,
                error_message=f"Amount cannot exceed your {currency.TICKER} balance",
            )
        return ValidationResult(is_valid=True, normalized_value=amount)

    @staticmethod
    def validate_minimum(
        amount: Decimal, minimum: Decimal | None = None
    ) -> ValidationResult:
        floor = currency.dust_xec() if minimum is None else minimum
        if amount < floor:
            return ValidationResult(
                is_valid=False,
                error_message=f"Ensure each tx is at least {floor} {currency.TICKER}",
            )
        return ValidationResult(is_valid=True, normalized_value=amount)

    @staticmethod
    def convert_to_satoshis(amount: Decimal) -> ValidationResult:
        satoshis = int(amount * currency.SATOSHIS_PER_XEC)
        if satoshis > AmountValidator.MAX_SATOSHIS:
            return ValidationResult(
                is_valid=False,
                error_message="Amount exceeds maximum allowed value",
            )
        return ValidationResult(is_valid=True, normalized_value=satoshis)


class AddressValidator:
    SUPPORTED_TYPES = (cashaddr.P2PKH, cashaddr.P2SH)

    @staticmethod
    def validate(value: str | None, prefix: str = currency.ADDRESS_PREFIX) -> ValidationResult:
        if not isinstance(value, str) or not value.strip():
            return ValidationResult(
                is_valid=False,
                error_message="Address is required",
            )

        if not value.lower().startswith(f"{prefix}:"):
            return ValidationResult(
                is_valid=False,
                error_message=f"Address must start with '{prefix}:'",
            )

        try:
            decoded = cashaddr.decode(value)
        except InvalidAddressError as e:
            return ValidationResult(is_valid=False, error_message=str(e))

        if decoded.prefix != prefix or decoded.type not in AddressValidator.SUPPORTED_TYPES:
            return ValidationResult(
                is_valid=False,
                error_message="Unsupported address type",
            )

        return ValidationResult(is_valid=True, normalized_value=value.lower())
