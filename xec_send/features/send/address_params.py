"""Parsing of addresses that carry BIP21-style query parameters."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from urllib.parse import parse_qs

from xec_send import currency

AMOUNT_PARAM = "amount"


@dataclass(frozen=True)
class QueryParameters:
    address: str
    query_string: str | None = None
    amount: Decimal | None = None

    @property
    def amount_text(self) -> str | None:
        if self.amount is None:
            return None
        return format(self.amount, "f")


def _parse_amount(query_string: str) -> Decimal | None:
    try:
        params = parse_qs(query_string, keep_blank_values=True)
    except ValueError:
        return None

    values = params.get(AMOUNT_PARAM)
    if not values:
        return None

    try:
        amount = Decimal(values[0].strip())
    except (InvalidOperation, ValueError):
        return None

    if not amount.is_finite() or amount < 0:
        return None
    return amount


def parse_address_for_params(address_string: str | None) -> QueryParameters:
    """Split ``address?param=value`` into the bare address and its parameters.

    Only the first ``?`` separates the address; the query string is kept
    verbatim. ``amount`` is set only when an ``amount`` key parses as a
    non-negative number. The address itself is not validated.
    """
    if not address_string:
        return QueryParameters(address="")

    address, separator, query_string = address_string.partition("?")
    if not separator:
        return QueryParameters(address=address)

    return QueryParameters(
        address=address,
        query_string=query_string,
        amount=_parse_amount(query_string),
    )


def strip_query(address_string: str) -> str:
    return address_string.split("?", 1)[0]


def query_string_warning(query_string: str | None) -> str | None:
    if query_string is None:
        return None
    return (
        "You are sending a transaction to an address including query parameters "
        f'"{query_string}." Only the "{AMOUNT_PARAM}" parameter, in units of '
        f"{currency.TICKER}, is currently supported."
    )
