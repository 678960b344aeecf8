"""Send business logic service for xec-send."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Callable, Protocol

from xec_send import currency
from xec_send.config import SendConfig
from xec_send.exceptions import SendError
from xec_send.features.send.builder import (
    OutgoingMessage,
    Recipient,
    SendMetadata,
    SendRequest,
    build_send_request,
)
from xec_send.features.send.errors import classify_send_error
from xec_send.features.send.form import (
    FormContext,
    FormField,
    SendFormState,
    submission_error,
    update_field,
)
from xec_send.features.send.max_amount import (
    MaxAmountResult,
    SpendableOutputSource,
    calculate_max_amount,
)
from xec_send.features.send.rates import ExchangeRateProvider
from xec_send.shared.logging import ContextAdapter, log_with_context

logger = ContextAdapter(logging.getLogger(__name__))


class BroadcastService(Protocol):
    """Builds, signs and broadcasts the transaction for a request."""

    def send(
        self,
        recipients: list[Recipient],
        fee_rate: Decimal,
        message: OutgoingMessage | None = None,
        metadata: SendMetadata | None = None,
    ) -> dict[str, Any]: ...


@dataclass(frozen=True)
class SendOutcome:
    success: bool
    transaction_link: str | None = None
    error: str | None = None
    request: SendRequest | None = None


class SendService:
    """Owns one send form and drives validation and submission for it."""

    def __init__(
        self,
        broadcaster: BroadcastService,
        rate_provider: ExchangeRateProvider,
        output_source: SpendableOutputSource,
        config: SendConfig | None = None,
        state: SendFormState | None = None,
    ):
        self.broadcaster = broadcaster
        self.rate_provider = rate_provider
        self.output_source = output_source
        self.config = config or SendConfig()
        self._state = state or SendFormState()
        self._lock = threading.Lock()

    @property
    def state(self) -> SendFormState:
        return self._state

    def _swap(self, transform: Callable[[SendFormState], SendFormState]) -> SendFormState:
        with self._lock:
            self._state = transform(self._state)
            return self._state

    def _current_rate(self) -> Decimal | None:
        try:
            return self.rate_provider.current_rate()
        except Exception as e:
            logger.warning("Exchange rate unavailable: %s", e)
            return None

    def _current_balance(self) -> Decimal:
        try:
            return Decimal(self.output_source.total_balance())
        except Exception as e:
            logger.warning("Balance unavailable: %s", e)
            return Decimal(0)

    def context(self) -> FormContext:
        return FormContext(balance=self._current_balance(), rate=self._current_rate())

    def update(self, field: FormField, value: Any) -> SendFormState:
        context = self.context()
        return self._swap(lambda state: update_field(state, field, value, context))

    def use_max(self) -> MaxAmountResult:
        """Fill the amount with the balance net of the estimated fee.

        Only the amount, its error and the currency change; on failure the
        amount is left alone and the error is reported.
        """
        result = calculate_max_amount(self.output_source, self.config.fee_rate_per_byte)
        if result.ok and result.amount is not None:
            amount = format(result.amount, "f")
            self._swap(
                lambda state: replace(
                    state,
                    selected_currency=currency.TICKER,
                    amount=amount,
                    amount_error=False,
                )
            )
        else:
            self._swap(lambda state: replace(state, amount_error=result.error))
        return result

    def requires_confirmation(self) -> bool:
        return self._state.from_url or self.config.send_modal

    def submit(self) -> SendOutcome:
        context = self.context()
        with self._lock:
            snapshot = self._state
            error = submission_error(snapshot, context)
            if error is None:
                self._state = replace(snapshot, sending=True)

        if error is not None:
            logger.info("Send blocked: %s", error)
            return SendOutcome(success=False, error=error)

        try:
            return self._dispatch(snapshot, context)
        finally:
            self._swap(lambda state: replace(state, sending=False))

    def _dispatch(self, snapshot: SendFormState, context: FormContext) -> SendOutcome:
        try:
            request = build_send_request(
                snapshot, context.rate, self.config.fee_rate_per_byte
            )
        except SendError as e:
            logger.warning("Could not build send request: %s", e)
            return SendOutcome(success=False, error=str(e))

        log_with_context(
            logger,
            logging.INFO,
            "Sending transaction",
            mode="multi" if request.is_multi else "single",
            recipients=len(request.recipients),
            total=format(request.total_native, "f"),
        )

        try:
            result = self.broadcaster.send(
                list(request.recipients),
                request.fee_rate_per_byte,
                request.message,
                request.metadata,
            )
        except Exception as e:
            message = classify_send_error(e, request.mode)
            return SendOutcome(success=False, error=message, request=request)

        link = result.get("transaction_link") if isinstance(result, dict) else None
        logger.info("Transaction sent: %s", link or "no link returned")
        self._swap(lambda state: state.cleared())
        return SendOutcome(success=True, transaction_link=link, request=request)

    def submit_in_background(
        self, on_finished: Callable[[SendOutcome], None] | None = None
    ) -> threading.Thread:
        def worker() -> None:
            outcome = self.submit()
            if on_finished:
                on_finished(outcome)

        thread = threading.Thread(target=worker, daemon=True)
        thread.start()
        return thread
