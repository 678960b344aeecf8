"""Centralized logging configuration for xec-send.

This module provides:
- Configurable log levels (DEBUG for dev, INFO for prod)
- Sensitive data sanitization (WIF keys, mnemonics, passwords)
- Structured logging with context fields
"""

from __future__ import annotations

import json
import logging
import os
import re
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class LoggingConfig:
    log_level: LogLevel = LogLevel.INFO
    log_to_file: bool = True
    log_to_stdout: bool = False
    log_dir: Path | None = None
    log_filename: str = "xec-send.log"
    sanitize_sensitive: bool = True
    include_context: bool = True

    @classmethod
    def from_environment(cls) -> "LoggingConfig":
        env_level = os.getenv("XEC_SEND_LOG_LEVEL", "INFO").upper()
        try:
            log_level = LogLevel(env_level)
        except ValueError:
            log_level = LogLevel.INFO

        log_to_stdout = os.getenv("XEC_SEND_LOG_STDOUT", "").lower() in (
            "1",
            "true",
            "yes",
        )

        return cls(
            log_level=log_level,
            log_to_stdout=log_to_stdout,
        )


SENSITIVE_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (
        re.compile(
            r"(wif['\"]?\s*[:=]\s*['\"]?)([5KL][1-9A-HJ-NP-Za-km-z]{50,51})",
            re.IGNORECASE,
        ),
        r"\1[REDACTED]",
    ),
    (
        re.compile(
            r"(mnemonic['\"]?\s*[:=]\s*['\"]?)([a-z]+(?:\s+[a-z]+){11,23})",
            re.IGNORECASE,
        ),
        r"\1[REDACTED]",
    ),
    (
        re.compile(
            r"(password['\"]?\s*[:=]\s*['\"]?)([^\s'\"]+)",
            re.IGNORECASE,
        ),
        r"\1[REDACTED]",
    ),
    (
        re.compile(r"\b[KL][1-9A-HJ-NP-Za-km-z]{51}\b"),
        "[WIF_REDACTED]",
    ),
    (
        re.compile(r"\b[A-Fa-f0-9]{64}\b"),
        "[KEY_REDACTED]",
    ),
]


def sanitize_message(message: str) -> str:
    if not message:
        return message

    sanitized = message
    for pattern, replacement in SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)

    return sanitized


def sanitize_dict(data: dict[str, Any]) -> dict[str, Any]:
    result = {}
    for key, value in data.items():
        key_lower = key.lower()
        if any(
            sensitive in key_lower
            for sensitive in ["wif", "mnemonic", "private_key", "password", "secret"]
        ):
            result[key] = "[REDACTED]"
        elif isinstance(value, str):
            result[key] = sanitize_message(value)
        elif isinstance(value, dict):
            result[key] = sanitize_dict(value)
        elif isinstance(value, list):
            result[key] = [
                sanitize_dict(item)
                if isinstance(item, dict)
                else sanitize_message(item)
                if isinstance(item, str)
                else item
                for item in value
            ]
        else:
            result[key] = value
    return result


class StructuredFormatter(logging.Formatter):
    def __init__(
        self,
        sanitize: bool = True,
        include_context: bool = True,
    ):
        super().__init__()
        self.sanitize = sanitize
        self.include_context = include_context

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self.include_context:
            log_data["module"] = record.module
            log_data["function"] = record.funcName
            log_data["line"] = record.lineno

        extra_data = getattr(record, "context", None)
        if extra_data and isinstance(extra_data, dict):
            if self.sanitize:
                extra_data = sanitize_dict(extra_data)
            log_data["context"] = extra_data

        if record.exc_info:
            exc_text = self.formatException(record.exc_info)
            if self.sanitize:
                exc_text = sanitize_message(exc_text)
            log_data["exception"] = exc_text

        if self.sanitize:
            log_data["message"] = sanitize_message(log_data["message"])

        try:
            return json.dumps(log_data, default=str)
        except (TypeError, ValueError):
            return f"{log_data['timestamp']} - {log_data['logger']} - {log_data['level']} - {log_data['message']}"


class HumanReadableFormatter(logging.Formatter):
    def __init__(self, sanitize: bool = True):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        self.sanitize = sanitize

    def format(self, record: logging.LogRecord) -> str:
        if self.sanitize and record.msg:
            record.msg = sanitize_message(str(record.msg))
            if record.args and isinstance(record.args, tuple):
                record.args = tuple(
                    sanitize_message(arg) if isinstance(arg, str) else arg
                    for arg in record.args
                )

        return super().format(record)


class ContextAdapter(logging.LoggerAdapter):
    def __init__(
        self,
        logger: logging.Logger,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(logger, context or {})

    def process(
        self,
        msg: str,
        kwargs: dict[str, Any],
    ) -> tuple[str, dict[str, Any]]:
        extra = kwargs.get("extra", {})
        if self.extra:
            context = {**self.extra, **extra.get("context", {})}
            extra = {**extra, "context": context}
        kwargs["extra"] = extra
        return msg, kwargs


_logging_initialized = False


def _build_handler(handler: logging.Handler, config: LoggingConfig) -> logging.Handler:
    log_format = (
        "json"
        if os.getenv("XEC_SEND_LOG_FORMAT", "human").lower() == "json"
        else "human"
    )
    if log_format == "json":
        handler.setFormatter(
            StructuredFormatter(
                sanitize=config.sanitize_sensitive,
                include_context=config.include_context,
            )
        )
    else:
        handler.setFormatter(HumanReadableFormatter(sanitize=config.sanitize_sensitive))
    return handler


def setup_logging(config: LoggingConfig | None = None) -> None:
    global _logging_initialized

    if _logging_initialized:
        return

    if config is None:
        config = LoggingConfig.from_environment()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.log_level.value))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers: list[logging.Handler] = []

    if config.log_to_file:
        if config.log_dir is None:
            env_dir = os.getenv("XEC_SEND_DIR")
            config.log_dir = (
                Path(env_dir) if env_dir else Path.home() / ".config" / "xec-send"
            )
        config.log_dir.mkdir(parents=True, exist_ok=True)
        log_file = config.log_dir / config.log_filename
        handlers.append(
            _build_handler(
                logging.FileHandler(log_file, mode="a", encoding="utf-8"), config
            )
        )

    if config.log_to_stdout:
        handlers.append(_build_handler(logging.StreamHandler(sys.stdout), config))

    for handler in handlers:
        root_logger.addHandler(handler)

    _logging_initialized = True


def get_logger(
    name: str,
    context: dict[str, Any] | None = None,
) -> ContextAdapter:
    if not _logging_initialized:
        setup_logging()

    logger = logging.getLogger(name)
    return ContextAdapter(logger, context)


def log_with_context(
    logger: logging.Logger | ContextAdapter,
    level: int,
    message: str,
    **context: Any,
) -> None:
    logger.log(level, message, extra={"context": context})


__all__ = [
    "LogLevel",
    "LoggingConfig",
    "ContextAdapter",
    "StructuredFormatter",
    "HumanReadableFormatter",
    "sanitize_message",
    "sanitize_dict",
    "setup_logging",
    "get_logger",
    "log_with_context",
]
