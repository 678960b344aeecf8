"""Fee estimation and the "send max" amount."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Protocol

from xec_send import currency
from xec_send.features.send.conversion import satoshis_to_xec

logger = logging.getLogger(__name__)

TX_OVERHEAD_BYTES = 10
P2PKH_INPUT_BYTES = 148
P2PKH_OUTPUT_BYTES = 34
DEFAULT_OUTPUT_COUNT = 2

MAX_AMOUNT_ERROR = "Unable to calculate the max value due to network errors"


@dataclass(frozen=True)
class Utxo:
    txid: str
    out_idx: int
    value: int


class SpendableOutputSource(Protocol):
    """Wallet-side view of spendable (non-token) outputs."""

    def spendable_outputs(self) -> list[Utxo]: ...
    def total_balance(self) -> Decimal: ...


@dataclass(frozen=True)
class MaxAmountResult:
    amount: Decimal | None = None
    fee_sats: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def estimate_byte_count(
    input_count: int, output_count: int = DEFAULT_OUTPUT_COUNT
) -> int:
    return (
        TX_OVERHEAD_BYTES
        + P2PKH_INPUT_BYTES * input_count
        + P2PKH_OUTPUT_BYTES * output_count
    )


def calc_fee(
    utxos: Iterable[Utxo],
    fee_rate: Decimal = currency.DEFAULT_FEE_RATE,
    output_count: int = DEFAULT_OUTPUT_COUNT,
) -> int:
    """Fee in satoshis for spending every output in ``utxos``."""
    byte_count = estimate_byte_count(len(list(utxos)), output_count)
    return math.ceil(Decimal(fee_rate) * byte_count)


def calc_max_sendable(
    utxos: list[Utxo], fee_rate: Decimal = currency.DEFAULT_FEE_RATE
) -> tuple[Decimal, int]:
    """Return ``(max_xec, fee_sats)``; the amount is never negative."""
    fee_sats = calc_fee(utxos, fee_rate)
    total_sats = sum(utxo.value for utxo in utxos)
    return satoshis_to_xec(max(total_sats - fee_sats, 0)), fee_sats


def calculate_max_amount(
    source: SpendableOutputSource, fee_rate: Decimal = currency.DEFAULT_FEE_RATE
) -> MaxAmountResult:
    try:
        utxos = list(source.spendable_outputs())
        amount, fee_sats = calc_max_sendable(utxos, fee_rate)
    except Exception as e:
        logger.warning("Failed to calculate max sendable amount: %s", e)
        return MaxAmountResult(error=MAX_AMOUNT_ERROR)

    logger.debug(
        "Max sendable %s %s over %d outputs (fee %d sats)",
        amount,
        currency.TICKER,
        len(utxos),
        fee_sats,
    )
    return MaxAmountResult(amount=amount, fee_sats=fee_sats)
