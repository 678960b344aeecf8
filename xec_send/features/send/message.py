"""Character limits for the optional OP_RETURN message."""

from __future__ import annotations

from enum import Enum

from xec_send import currency


class MessageMode(Enum):
    PUBLIC = "public"
    ENCRYPTED = "encrypted"
    AIRDROP_PUBLIC = "airdrop_public"


MESSAGE_CHAR_LIMITS: dict[MessageMode, int] = {
    MessageMode.PUBLIC: currency.UNENCRYPTED_MSG_CHAR_LIMIT,
    MessageMode.ENCRYPTED: currency.ENCRYPTED_MSG_CHAR_LIMIT,
    MessageMode.AIRDROP_PUBLIC: currency.UNENCRYPTED_AIRDROP_MSG_CHAR_LIMIT,
}


def active_message_mode(encrypted: bool, airdrop: bool = False) -> MessageMode:
    if encrypted:
        return MessageMode.ENCRYPTED
    if airdrop:
        return MessageMode.AIRDROP_PUBLIC
    return MessageMode.PUBLIC


def message_char_limit(mode: MessageMode) -> int:
    return MESSAGE_CHAR_LIMITS[mode]


def truncate_message(text: str | None, mode: MessageMode) -> str:
    """Keep at most the active limit of characters; longer input is cut, not rejected."""
    if not text:
        return ""
    return text[: message_char_limit(mode)]


def limit_hint(mode: MessageMode) -> str:
    return f"(max {message_char_limit(mode)} characters)"
