"""Send form state and the reducer that keeps its fields consistent.

The UI owns a ``SendFormState`` and replaces it with the result of
``update_field`` on every input event. Cross-field rules live here:

- changing the selected currency clears the amount;
- encryption is only possible in single-recipient mode, so enabling it
  leaves multi-recipient mode and entering multi-recipient mode drops it;
- multi-recipient sends carry no message, so the message stays empty there;
- address and amount errors are re-derived from the new values;
- the message is truncated to the limit of the active message mode.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Union
from urllib.parse import parse_qsl

from xec_send import currency
from xec_send.features.send.address_params import (
    parse_address_for_params,
    strip_query,
)
from xec_send.features.send.message import active_message_mode, truncate_message
from xec_send.features.send.recipients import normalize_recipient_batch
from xec_send.features.send.validators import (
    PRICE_UNAVAILABLE_ERROR,
    address_error,
    is_valid_send_amount,
)


@dataclass(frozen=True)
class Single:
    encrypted: bool = False


@dataclass(frozen=True)
class Multi:
    pass


SendMode = Union[Single, Multi]


class FormField(Enum):
    ADDRESS = "address"
    RECIPIENT_BATCH = "recipient_batch"
    AMOUNT = "amount"
    CURRENCY = "currency"
    MESSAGE = "message"
    ENCRYPTED = "encrypted"
    MULTI_RECIPIENT = "multi_recipient"


@dataclass(frozen=True)
class FormContext:
    """Wallet data the validators need at the moment of an update."""

    balance: Decimal = Decimal(0)
    rate: Decimal | None = None

    @property
    def fiat_entry_enabled(self) -> bool:
        return self.rate is not None and self.rate > 0


@dataclass(frozen=True)
class SendFormState:
    mode: SendMode = Single()
    recipient_address: str = ""
    recipient_batch: str = ""
    amount: str = ""
    selected_currency: str = currency.TICKER
    message: str = ""
    airdrop_token_id: str | None = None
    query_string: str | None = None
    address_error: str | bool = False
    amount_error: str | bool = False
    sending: bool = False
    from_url: bool = False

    @property
    def is_multi(self) -> bool:
        return isinstance(self.mode, Multi)

    @property
    def encrypted(self) -> bool:
        return isinstance(self.mode, Single) and self.mode.encrypted

    @property
    def is_airdrop(self) -> bool:
        return bool(self.airdrop_token_id)

    @property
    def has_errors(self) -> bool:
        return self.address_error is not False or self.amount_error is not False

    def cleared(self) -> "SendFormState":
        """State after a successful send: inputs emptied, mode kept."""
        return replace(
            self,
            recipient_address="",
            recipient_batch="",
            amount="",
            message="",
            airdrop_token_id=None,
            query_string=None,
            address_error=False,
            amount_error=False,
            from_url=False,
        )


def _amount_error(
    amount: str, selected_currency: str, context: FormContext
) -> str | bool:
    return is_valid_send_amount(amount, context.balance, context.rate, selected_currency)


def _single_address_error(address: str) -> str | bool:
    if not address:
        return False
    return address_error(parse_address_for_params(address).address)


def _batch_error(batch: str) -> str | bool:
    if not batch:
        return False
    return normalize_recipient_batch(batch).error or False


def _retruncate(state: SendFormState) -> SendFormState:
    mode = active_message_mode(state.encrypted, state.is_airdrop)
    return replace(state, message=truncate_message(state.message, mode))


def _set_address(
    state: SendFormState, value: str, context: FormContext
) -> SendFormState:
    params = parse_address_for_params(value)
    state = replace(
        state,
        recipient_address=value,
        query_string=params.query_string,
        address_error=address_error(params.address) if value else False,
    )
    if params.amount is None:
        return state

    amount = params.amount_text or ""
    return replace(
        state,
        selected_currency=currency.TICKER,
        amount=amount,
        amount_error=_amount_error(amount, currency.TICKER, context),
    )


def _set_currency(
    state: SendFormState, value: str, context: FormContext
) -> SendFormState:
    amount_error: str | bool = False
    if value != currency.TICKER and not context.fiat_entry_enabled:
        amount_error = PRICE_UNAVAILABLE_ERROR
    return replace(state, selected_currency=value, amount="", amount_error=amount_error)


def _set_encrypted(state: SendFormState, enabled: bool) -> SendFormState:
    if enabled:
        state = replace(
            state,
            mode=Single(encrypted=True),
            address_error=_single_address_error(state.recipient_address),
        )
    elif isinstance(state.mode, Single):
        state = replace(state, mode=Single(encrypted=False))
    return _retruncate(state)


def _set_multi(state: SendFormState, enabled: bool) -> SendFormState:
    if enabled:
        state = replace(
            state,
            mode=Multi(),
            message="",
            address_error=_batch_error(state.recipient_batch),
        )
    else:
        state = replace(
            state,
            mode=Single(encrypted=False),
            address_error=_single_address_error(state.recipient_address),
        )
    return _retruncate(state)


def update_field(
    state: SendFormState,
    field: FormField,
    value: Any,
    context: FormContext | None = None,
) -> SendFormState:
    """Return a new state with ``field`` set to ``value`` and invariants applied."""
    context = context or FormContext()

    if field is FormField.ADDRESS:
        return _set_address(state, value or "", context)
    if field is FormField.RECIPIENT_BATCH:
        batch = value or ""
        return replace(
            state,
            recipient_batch=batch,
            address_error=normalize_recipient_batch(batch).error or False,
        )
    if field is FormField.AMOUNT:
        amount = "" if value is None else str(value)
        return replace(
            state,
            amount=amount,
            amount_error=_amount_error(amount, state.selected_currency, context),
        )
    if field is FormField.CURRENCY:
        return _set_currency(state, value, context)
    if field is FormField.MESSAGE:
        if state.is_multi:
            return replace(state, message="")
        mode = active_message_mode(state.encrypted, state.is_airdrop)
        return replace(state, message=truncate_message(value, mode))
    if field is FormField.ENCRYPTED:
        return _set_encrypted(state, bool(value))
    if field is FormField.MULTI_RECIPIENT:
        return _set_multi(state, bool(value))
    raise ValueError(f"Unknown form field: {field!r}")


def submission_error(state: SendFormState, context: FormContext) -> str | None:
    """Re-derive every validation from the current values.

    Cached ``address_error``/``amount_error`` flags may have been computed
    against earlier input, so they are not trusted here.
    """
    if state.sending:
        return "A transaction is already being sent"

    if state.is_multi:
        return normalize_recipient_batch(state.recipient_batch).error

    if not state.recipient_address:
        return "Address is required"
    error = address_error(strip_query(state.recipient_address))
    if error:
        return str(error)

    error = _amount_error(state.amount, state.selected_currency, context)
    if error:
        return str(error)
    return None


@dataclass(frozen=True)
class RouteParams:
    """One-shot parameters handed over when navigating to the send screen."""

    reply_address: str | None = None
    contact_address: str | None = None
    airdrop_recipients: str | None = None
    airdrop_token_id: str | None = None


def parse_tx_info_from_url(url_hash: str | None) -> dict[str, str]:
    """Read ``address``/``value`` style parameters from a ``#/send?...`` hash."""
    if not url_hash or "?" not in url_hash:
        return {}
    return dict(parse_qsl(url_hash.split("?", 1)[1], keep_blank_values=True))


def from_route(
    route: RouteParams | None = None,
    url_hash: str | None = None,
    context: FormContext | None = None,
) -> SendFormState:
    """Build the initial form from navigation state and URL parameters."""
    context = context or FormContext()
    state = SendFormState()
    route = route or RouteParams()

    if route.reply_address:
        state = update_field(state, FormField.ADDRESS, route.reply_address, context)
        state = update_field(
            state, FormField.AMOUNT, str(currency.dust_xec()), context
        )

    if route.contact_address:
        state = update_field(state, FormField.ADDRESS, route.contact_address, context)

    if route.airdrop_recipients and route.airdrop_token_id:
        state = replace(state, airdrop_token_id=route.airdrop_token_id)
        state = update_field(state, FormField.MULTI_RECIPIENT, True, context)
        state = update_field(
            state, FormField.RECIPIENT_BATCH, route.airdrop_recipients, context
        )

    tx_info = parse_tx_info_from_url(url_hash)
    if tx_info.get("address") and tx_info.get("value"):
        state = update_field(state, FormField.ADDRESS, tx_info["address"], context)
        state = update_field(state, FormField.AMOUNT, tx_info["value"], context)
        state = replace(state, from_url=True)

    return state
