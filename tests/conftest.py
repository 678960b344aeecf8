import tempfile
from decimal import Decimal
from pathlib import Path

import pytest

from xec_send.shared import cashaddr


@pytest.fixture
def xec_address():
    """Fixture providing a valid ecash P2PKH address"""
    return cashaddr.encode("ecash", cashaddr.P2PKH, bytes(range(20)))


@pytest.fixture
def second_xec_address():
    """Fixture providing another valid ecash address"""
    return cashaddr.encode("ecash", cashaddr.P2PKH, bytes([0xAB] * 20))


@pytest.fixture
def p2sh_xec_address():
    """Fixture providing a valid ecash P2SH address"""
    return cashaddr.encode("ecash", cashaddr.P2SH, bytes([0x11] * 20))


@pytest.fixture
def etoken_address():
    """Fixture providing an etoken address for the same hash as xec_address"""
    return cashaddr.encode("etoken", cashaddr.P2PKH, bytes(range(20)))


@pytest.fixture
def usd_rate():
    """Fixture providing an XEC price in USD"""
    return Decimal("0.00003")


@pytest.fixture(autouse=True)
def isolate_config_dir(monkeypatch):
    """Run tests with an isolated config directory."""
    with tempfile.TemporaryDirectory(prefix="xec-send-test-") as tmp_dir:
        monkeypatch.setenv("XEC_SEND_DIR", str(Path(tmp_dir)))
        yield Path(tmp_dir)
