"""Shared utilities for xec-send."""

from xec_send.shared.logging import (
    ContextAdapter,
    LoggingConfig,
    LogLevel,
    get_logger,
    sanitize_dict,
    sanitize_message,
    setup_logging,
)
from xec_send.shared.network import (
    NetworkClient,
    NetworkError,
    NetworkErrorType,
    RetryConfig,
    TimeoutConfig,
)
from xec_send.shared.validation import (
    AddressValidator,
    AmountValidator,
    ValidationResult,
)

__all__ = [
    "NetworkClient",
    "NetworkError",
    "NetworkErrorType",
    "RetryConfig",
    "TimeoutConfig",
    "AddressValidator",
    "AmountValidator",
    "ValidationResult",
    "ContextAdapter",
    "LoggingConfig",
    "LogLevel",
    "get_logger",
    "sanitize_dict",
    "sanitize_message",
    "setup_logging",
]
