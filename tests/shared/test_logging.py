"""Tests for logging configuration and sanitization."""

import json
import logging

import pytest

from xec_send.shared import logging as send_logging
from xec_send.shared.logging import (
    ContextAdapter,
    HumanReadableFormatter,
    LoggingConfig,
    LogLevel,
    StructuredFormatter,
    log_with_context,
    sanitize_dict,
    sanitize_message,
    setup_logging,
)

WIF = "KwDiBf89QgGbjEhKnhXJuH7LrciVrZi3qYjgd9M7rFU73sVHnoWn"


def _record(msg, *args, context=None):
    record = logging.LogRecord("xec_send.test", logging.INFO, __file__, 1, msg, args, None)
    if context is not None:
        record.context = context
    return record


class TestLoggingConfig:
    def test_defaults(self):
        config = LoggingConfig()
        assert config.log_level == LogLevel.INFO
        assert config.log_to_file is True
        assert config.log_to_stdout is False

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("XEC_SEND_LOG_LEVEL", "debug")
        monkeypatch.setenv("XEC_SEND_LOG_STDOUT", "yes")
        config = LoggingConfig.from_environment()
        assert config.log_level == LogLevel.DEBUG
        assert config.log_to_stdout is True

    def test_invalid_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("XEC_SEND_LOG_LEVEL", "chatty")
        assert LoggingConfig.from_environment().log_level == LogLevel.INFO


class TestSanitize:
    def test_wif_redacted(self):
        assert WIF not in sanitize_message(f"loaded key {WIF}")

    def test_labelled_wif_redacted(self):
        assert sanitize_message(f"wif={WIF}") == "wif=[REDACTED]"

    def test_mnemonic_redacted(self):
        phrase = " ".join(["abandon"] * 11 + ["about"])
        assert sanitize_message(f"mnemonic: {phrase}") == "mnemonic: [REDACTED]"

    def test_password_redacted(self):
        assert sanitize_message("password=hunter2") == "password=[REDACTED]"

    def test_addresses_preserved_by_default(self, xec_address):
        assert sanitize_message(f"to {xec_address}") == f"to {xec_address}"

    def test_sanitize_dict_nested(self):
        data = {"mnemonic": "words", "nested": {"note": f"key {WIF}"}, "count": 3}
        result = sanitize_dict(data)
        assert result["mnemonic"] == "[REDACTED]"
        assert WIF not in result["nested"]["note"]
        assert result["count"] == 3


class TestFormatters:
    def test_structured_formatter_includes_context(self):
        formatter = StructuredFormatter()
        output = json.loads(formatter.format(_record("sent %s", "ok", context={"recipients": 2})))
        assert output["message"] == "sent ok"
        assert output["level"] == "INFO"
        assert output["context"] == {"recipients": 2}

    def test_human_formatter_sanitizes_args(self):
        formatter = HumanReadableFormatter()
        output = formatter.format(_record("key %s", WIF))
        assert WIF not in output
        assert "INFO" in output


class TestContextAdapter:
    def test_adapter_context_merges_with_call_context(self, caplog):
        adapter = ContextAdapter(logging.getLogger("xec_send.test"), {"mode": "single"})
        with caplog.at_level(logging.INFO, logger="xec_send.test"):
            log_with_context(adapter, logging.INFO, "sending", recipients=1)

        record = caplog.records[-1]
        assert record.context == {"mode": "single", "recipients": 1}

    def test_plain_logger_gets_context_extra(self, caplog):
        logger = logging.getLogger("xec_send.test")
        with caplog.at_level(logging.INFO, logger="xec_send.test"):
            log_with_context(logger, logging.INFO, "sending", recipients=3)
        assert caplog.records[-1].context == {"recipients": 3}


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self, monkeypatch):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        monkeypatch.setattr(send_logging, "_logging_initialized", False)
        yield
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)

    def test_writes_log_file(self, tmp_path):
        setup_logging(LoggingConfig(log_dir=tmp_path, log_level=LogLevel.DEBUG))
        logging.getLogger("xec_send.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello" in (tmp_path / "xec-send.log").read_text()

    def test_only_initializes_once(self, tmp_path):
        setup_logging(LoggingConfig(log_dir=tmp_path))
        count = len(logging.getLogger().handlers)
        setup_logging(LoggingConfig(log_dir=tmp_path, log_to_stdout=True))
        assert len(logging.getLogger().handlers) == count
