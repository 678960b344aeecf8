"""Send-request construction and validation for eCash (XEC) wallets."""

__version__ = "0.1.0"
