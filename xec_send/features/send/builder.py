"""Assembly of the request handed to the broadcast service."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from xec_send import currency
from xec_send.exceptions import FormNotSubmittableError, PriceUnavailableError
from xec_send.features.send.address_params import strip_query
from xec_send.features.send.conversion import (
    fiat_to_crypto,
    is_native,
    xec_to_satoshis,
)
from xec_send.features.send.form import Multi, SendFormState, SendMode, Single
from xec_send.features.send.message import active_message_mode, truncate_message
from xec_send.features.send.recipients import normalize_recipient_batch
from xec_send.shared.validation import AmountValidator


@dataclass(frozen=True)
class Recipient:
    address: str
    amount_native: Decimal

    @property
    def amount_sats(self) -> int:
        return xec_to_satoshis(self.amount_native)

    def to_dict(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "amount": format(self.amount_native, "f"),
            "satoshis": self.amount_sats,
        }


@dataclass(frozen=True)
class OutgoingMessage:
    text: str
    encrypted: bool = False


@dataclass(frozen=True)
class SendMetadata:
    airdrop_token_id: str | None = None


@dataclass(frozen=True)
class SendRequest:
    mode: SendMode
    recipients: tuple[Recipient, ...]
    fee_rate_per_byte: Decimal
    message: OutgoingMessage | None = None
    metadata: SendMetadata | None = None

    def __post_init__(self):
        if not self.recipients:
            raise ValueError("A send request needs at least one recipient")
        if isinstance(self.mode, Single) and len(self.recipients) != 1:
            raise ValueError("Single-recipient requests carry exactly one recipient")
        if isinstance(self.mode, Multi) and self.message is not None:
            raise ValueError("Messages cannot be attached to one-to-many sends")

    @property
    def is_multi(self) -> bool:
        return isinstance(self.mode, Multi)

    @property
    def total_native(self) -> Decimal:
        return sum((r.amount_native for r in self.recipients), Decimal(0))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "mode": "multi" if self.is_multi else "single",
            "recipients": [r.to_dict() for r in self.recipients],
            "fee_rate_per_byte": format(self.fee_rate_per_byte, "f"),
        }
        if self.message is not None:
            data["message"] = {
                "text": self.message.text,
                "encrypted": self.message.encrypted,
            }
        if self.metadata is not None:
            data["metadata"] = {"airdrop_token_id": self.metadata.airdrop_token_id}
        return data


def _native_amount(state: SendFormState, rate: Decimal | None) -> Decimal:
    if is_native(state.selected_currency):
        parsed = AmountValidator.parse_human_amount(state.amount)
        if not parsed.is_valid:
            raise FormNotSubmittableError(parsed.error_message or "Invalid amount")
        return parsed.normalized_value

    converted = fiat_to_crypto(state.amount, rate)
    if converted is None:
        raise PriceUnavailableError(
            f"No {state.selected_currency.upper()} price available for conversion"
        )
    return converted


def _metadata(state: SendFormState) -> SendMetadata | None:
    if not state.is_airdrop:
        return None
    return SendMetadata(airdrop_token_id=state.airdrop_token_id)


def build_send_request(
    state: SendFormState,
    rate: Decimal | None = None,
    fee_rate: Decimal = currency.DEFAULT_FEE_RATE,
) -> SendRequest:
    """Build a fresh request from a form whose errors the caller has cleared.

    Validation is not repeated here. Only failures that make the request
    impossible to express (an unparseable batch or amount, a missing price
    for a fiat amount) raise.
    """
    metadata = _metadata(state)

    if isinstance(state.mode, Multi):
        batch = normalize_recipient_batch(state.recipient_batch)
        if not batch.ok:
            raise FormNotSubmittableError(batch.error or "Invalid recipient list")
        return SendRequest(
            mode=state.mode,
            recipients=tuple(
                Recipient(address=line.address, amount_native=line.amount)
                for line in batch.recipients
            ),
            fee_rate_per_byte=fee_rate,
            metadata=metadata,
        )

    message = None
    if state.message:
        mode = active_message_mode(state.mode.encrypted, state.is_airdrop)
        message = OutgoingMessage(
            text=truncate_message(state.message, mode),
            encrypted=state.mode.encrypted,
        )

    return SendRequest(
        mode=state.mode,
        recipients=(
            Recipient(
                address=strip_query(state.recipient_address),
                amount_native=_native_amount(state, rate),
            ),
        ),
        fee_rate_per_byte=fee_rate,
        message=message,
        metadata=metadata,
    )
