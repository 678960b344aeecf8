"""Fiat and XEC amount conversion."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from xec_send import currency

FIAT_DECIMALS = 2


def _quantize(value: Decimal, places: int) -> Decimal:
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def _to_decimal(value: Decimal | str | int | float | None) -> Decimal | None:
    if value is None:
        return None
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return result if result.is_finite() else None


def usable_rate(rate: Decimal | str | float | None) -> Decimal | None:
    value = _to_decimal(rate)
    if value is None or value <= 0:
        return None
    return value


def fiat_to_crypto(
    fiat_amount: Decimal | str | int | float,
    rate: Decimal | str | float | None,
    decimals: int = currency.CASH_DECIMALS,
) -> Decimal | None:
    """Convert a fiat amount into XEC at ``rate`` fiat per XEC.

    Returns None when the rate is missing or not positive, the amount is not
    a number, or the result does not fit the decimal context; never zero as
    a stand-in for an unknown price.
    """
    price = usable_rate(rate)
    amount = _to_decimal(fiat_amount)
    if price is None or amount is None:
        return None
    try:
        return _quantize(amount / price, decimals)
    except InvalidOperation:
        return None


def crypto_to_fiat(
    xec_amount: Decimal | str | int | float,
    rate: Decimal | str | float | None,
) -> Decimal | None:
    price = usable_rate(rate)
    amount = _to_decimal(xec_amount)
    if price is None or amount is None:
        return None
    try:
        return _quantize(amount * price, FIAT_DECIMALS)
    except InvalidOperation:
        return None


def xec_to_satoshis(amount: Decimal) -> int:
    return int(_quantize(amount, currency.CASH_DECIMALS) * currency.SATOSHIS_PER_XEC)


def satoshis_to_xec(satoshis: int) -> Decimal:
    return _quantize(Decimal(satoshis) / currency.SATOSHIS_PER_XEC, currency.CASH_DECIMALS)


def is_native(selected_currency: str) -> bool:
    return selected_currency == currency.TICKER


def format_fiat_estimate(
    amount: str,
    selected_currency: str,
    rate: Decimal | str | float | None,
    fiat_currency: str = currency.DEFAULT_FIAT_CURRENCY,
) -> str:
    """Build the equivalent-value hint shown beside the amount field.

    Native entry shows the fiat value (``$ 1.23 USD``); fiat entry shows the
    XEC value (``100 XEC``). Empty when the rate or amount is unusable.
    """
    if _to_decimal(amount) is None:
        return ""

    if is_native(selected_currency):
        fiat_value = crypto_to_fiat(amount, rate)
        if fiat_value is None:
            return ""
        symbol = currency.FIAT_CURRENCIES.get(fiat_currency, {}).get("symbol", "$")
        return f"{symbol} {fiat_value:,.{FIAT_DECIMALS}f} {fiat_currency.upper()}"

    xec_value = fiat_to_crypto(amount, rate)
    if xec_value is None:
        return ""
    return f"{xec_value:,.{currency.CASH_DECIMALS}f} {currency.TICKER}"
