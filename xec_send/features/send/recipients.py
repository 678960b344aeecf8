"""Parsing of one-to-many recipient lists (``address,amount`` per line)."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from functools import reduce

from xec_send import currency
from xec_send.features.send.validators import (
    is_valid_address,
    is_valid_multi_send_amount,
)
from xec_send.shared.validation import AmountValidator

BLANK_INPUT_ERROR = "Input must not be blank"
BLANK_ROW_ERROR = "Empty spaces and rows must be removed"
INVALID_ADDRESS_ERROR = f"Ensure each {currency.TICKER} address is valid"
BELOW_MINIMUM_ERROR = (
    f"Ensure each tx is at least {currency.dust_xec()} {currency.TICKER}"
)


@dataclass(frozen=True)
class RecipientLine:
    address: str
    amount: Decimal


@dataclass(frozen=True)
class BatchResult:
    recipients: tuple[RecipientLine, ...] = ()
    error: str | None = None
    line_number: int | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def total_amount(self) -> Decimal:
        return sum((line.amount for line in self.recipients), Decimal(0))


@dataclass
class _Scan:
    accepted: list[RecipientLine] = field(default_factory=list)
    error: str | None = None
    line_number: int | None = None


def _check_line(line: str) -> RecipientLine | str:
    if not line.strip():
        return BLANK_ROW_ERROR

    address, _, amount = line.partition(",")
    if not is_valid_address(address):
        return INVALID_ADDRESS_ERROR
    if not is_valid_multi_send_amount(amount):
        return BELOW_MINIMUM_ERROR

    value = AmountValidator.parse_human_amount(amount).normalized_value
    for check in (
        AmountValidator.validate_decimal_places(value),
        AmountValidator.convert_to_satoshis(value),
    ):
        if not check.is_valid:
            return str(check.error_message)
    return RecipientLine(address=address, amount=value)


def _step(scan: _Scan, numbered_line: tuple[int, str]) -> _Scan:
    if scan.error is not None:
        return scan

    line_number, line = numbered_line
    checked = _check_line(line)
    if isinstance(checked, str):
        scan.error = checked
        scan.line_number = line_number
    else:
        scan.accepted.append(checked)
    return scan


def normalize_recipient_batch(text: str | None) -> BatchResult:
    """Validate a newline-separated batch, reporting only the first bad line.

    Lines are checked top to bottom and the scan halts at the first failure,
    so the reported error always belongs to the earliest invalid line. A
    failing batch accepts no recipients.
    """
    if not text:
        return BatchResult(error=BLANK_INPUT_ERROR)

    scan = reduce(_step, enumerate(text.split("\n"), start=1), _Scan())
    if scan.error is not None:
        return BatchResult(error=scan.error, line_number=scan.line_number)
    return BatchResult(recipients=tuple(scan.accepted))
