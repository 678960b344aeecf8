"""Offline checks for send input: ``python -m xec_send address|batch <value>``.

``address`` parses an address (with optional query parameters) and reports
whether it is a valid XEC address. ``batch`` reads a one-to-many recipient
list from a file (``-`` for stdin) and reports the first invalid line.
"""

from __future__ import annotations

import math
import sys
from pathlib import Path

from xec_send import currency
from xec_send.config import SendConfig
from xec_send.features.send.address_params import (
    parse_address_for_params,
    query_string_warning,
)
from xec_send.features.send.max_amount import estimate_byte_count
from xec_send.features.send.recipients import normalize_recipient_batch
from xec_send.features.send.validators import address_error
from xec_send.shared.logging import LoggingConfig, get_logger, setup_logging

USAGE = "usage: python -m xec_send (address <address> | batch <file|->)"


def check_address(raw: str) -> int:
    params = parse_address_for_params(raw)
    error = address_error(params.address)
    if error:
        print(f"{params.address}: {error}")
        return 1

    print(f"{params.address}: valid {currency.TICKER} address")
    if params.amount is not None:
        print(f"amount: {params.amount_text} {currency.TICKER}")
    warning = query_string_warning(params.query_string)
    if warning:
        print(warning)
    return 0


def check_batch(source: str, config: SendConfig) -> int:
    text = sys.stdin.read() if source == "-" else Path(source).read_text()
    result = normalize_recipient_batch(text.rstrip("\n"))
    if not result.ok:
        print(f"line {result.line_number or '-'}: {result.error}")
        return 1

    count = len(result.recipients)
    fee_estimate = math.ceil(
        config.fee_rate_per_byte * estimate_byte_count(1, count + 1)
    )
    print(f"{count} recipients, total {result.total_amount} {currency.TICKER}")
    print(f"estimated fee from a single input: {fee_estimate} sats")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2 or args[0] not in ("address", "batch"):
        print(USAGE)
        return 2

    setup_logging(LoggingConfig.from_environment())
    logger = get_logger(__name__)
    config = SendConfig.load()

    command, value = args
    logger.debug("Running %s check", command)
    try:
        if command == "address":
            return check_address(value)
        return check_batch(value, config)
    except OSError as exc:
        print(f"failed to read {value}: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
