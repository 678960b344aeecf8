"""Translation of broadcast failures into notification text."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any

from xec_send import currency
from xec_send.features.send.form import Multi, SendMode

logger = logging.getLogger(__name__)


@dataclass
class ErrorMapping:
    error_pattern: str
    user_message: str


ERROR_MAPPINGS: list[ErrorMapping] = [
    ErrorMapping(
        error_pattern=re.escape(currency.CONGESTION_SIGNATURE),
        user_message=(
            f"The {currency.TICKER} you are trying to send has too many unconfirmed "
            f"ancestors to send (limit {currency.UNCONFIRMED_ANCESTOR_LIMIT}). "
            "Sending will be possible after a block confirmation. "
            "Try again in about 10 minutes."
        ),
    ),
]


def _field(failure: Any, name: str) -> str | None:
    if isinstance(failure, dict):
        value = failure.get(name)
    else:
        value = getattr(failure, name, None)
    if value is None or value == "":
        return None
    return value if isinstance(value, str) else str(value)


def _serialize(failure: Any) -> str:
    if isinstance(failure, BaseException):
        return str(failure) or type(failure).__name__
    if not isinstance(failure, (dict, list, tuple)):
        return str(failure)
    try:
        return json.dumps(failure, default=str)
    except (TypeError, ValueError):
        return repr(failure)


def _candidates(failure: Any) -> list[str]:
    texts = [_field(failure, "error"), _field(failure, "message")]
    if isinstance(failure, (str, BaseException)):
        texts.append(str(failure))
    return [text for text in texts if text]


def _classify(failure: Any) -> str:
    for text in _candidates(failure):
        for mapping in ERROR_MAPPINGS:
            if re.search(mapping.error_pattern, text):
                return mapping.user_message

    return _field(failure, "message") or _field(failure, "error") or _serialize(failure)


def classify_send_error(failure: Any, mode: SendMode | None = None) -> str:
    """Return the message to show for a failed send.

    The failure shape is not trusted: any attribute access problem degrades
    to a plain string form instead of raising.
    """
    try:
        message = _classify(failure)
    except Exception:
        logger.exception("Failed to classify send error")
        try:
            message = str(failure)
        except Exception:
            message = f"<unprintable {type(failure).__name__}>"

    logger.error("%s failed: %s", notification_title(mode), message)
    return message


def notification_title(mode: SendMode | None) -> str:
    if isinstance(mode, Multi):
        return f"Sending {currency.TICKER} one to many"
    return f"Sending {currency.TICKER}"
