"""Runtime configuration for xec-send."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from xec_send import currency
from xec_send.shared.network import RetryConfig, TimeoutConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"
DEFAULT_PRICE_API_URL = "https://api.coingecko.com/api/v3"


def resolve_config_dir(config_dir: str | Path | None = None) -> Path:
    if config_dir is not None:
        return Path(config_dir)
    env_dir = os.getenv("XEC_SEND_DIR")
    if env_dir:
        return Path(env_dir)
    return Path.home() / ".config" / "xec-send"


@dataclass
class SendConfig:
    fee_rate_per_byte: Decimal = currency.DEFAULT_FEE_RATE
    fiat_currency: str = currency.DEFAULT_FIAT_CURRENCY
    send_modal: bool = False
    price_api_url: str = DEFAULT_PRICE_API_URL
    timeout_config: TimeoutConfig = field(default_factory=TimeoutConfig)
    retry_config: RetryConfig = field(default_factory=RetryConfig)

    def __post_init__(self):
        if self.fiat_currency not in currency.FIAT_CURRENCIES:
            logger.warning(
                "Unsupported fiat currency %r, falling back to %s",
                self.fiat_currency,
                currency.DEFAULT_FIAT_CURRENCY,
            )
            self.fiat_currency = currency.DEFAULT_FIAT_CURRENCY

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SendConfig":
        config = cls()
        try:
            config.fee_rate_per_byte = Decimal(
                str(data.get("fee_rate_per_byte", config.fee_rate_per_byte))
            )
        except (InvalidOperation, ValueError):
            logger.warning("Invalid fee_rate_per_byte in config, using default")

        fiat = str(data.get("fiat_currency", config.fiat_currency)).lower()
        config.fiat_currency = (
            fiat if fiat in currency.FIAT_CURRENCIES else currency.DEFAULT_FIAT_CURRENCY
        )
        config.send_modal = bool(data.get("send_modal", config.send_modal))
        config.price_api_url = data.get("price_api_url", config.price_api_url)

        timeout_cfg = data.get("timeout", {})
        if timeout_cfg:
            config.timeout_config = TimeoutConfig(
                connect_timeout=timeout_cfg.get("connect_timeout", 5.0),
                read_timeout=timeout_cfg.get("read_timeout", 15.0),
            )
        retry_cfg = data.get("retry", {})
        if retry_cfg:
            config.retry_config = RetryConfig(
                max_retries=retry_cfg.get("max_retries", 3),
                base_delay=retry_cfg.get("base_delay", 1.0),
                max_delay=retry_cfg.get("max_delay", 30.0),
            )
        return config

    @classmethod
    def load(cls, config_dir: str | Path | None = None) -> "SendConfig":
        config_file = resolve_config_dir(config_dir) / CONFIG_FILENAME
        if not config_file.exists():
            return cls()
        try:
            with open(config_file, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to read %s, using defaults: %s", config_file, e)
            return cls()
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed config file %s", config_file)
            return cls()
        return cls.from_dict(data)
