"""eCash network constants."""

from decimal import Decimal

TICKER = "XEC"
ADDRESS_PREFIX = "ecash"
TOKEN_PREFIX = "etoken"

CASH_DECIMALS = 2
SATOSHIS_PER_XEC = 10**CASH_DECIMALS
DUST_SATS = 550
DEFAULT_FEE_RATE = Decimal("2.01")

ENCRYPTED_MSG_CHAR_LIMIT = 94
UNENCRYPTED_MSG_CHAR_LIMIT = 160
UNENCRYPTED_AIRDROP_MSG_CHAR_LIMIT = 190

UNCONFIRMED_ANCESTOR_LIMIT = 50
CONGESTION_SIGNATURE = (
    "too-long-mempool-chain, too many unconfirmed ancestors "
    f"[limit: {UNCONFIRMED_ANCESTOR_LIMIT}] (code 64)"
)

DEFAULT_FIAT_CURRENCY = "usd"

FIAT_CURRENCIES: dict[str, dict[str, str]] = {
    "usd": {"name": "US Dollar", "symbol": "$", "slug": "usd"},
    "idr": {"name": "Indonesian Rupiah", "symbol": "Rp", "slug": "idr"},
    "krw": {"name": "Won", "symbol": "₩", "slug": "krw"},
    "cny": {"name": "Yuan", "symbol": "元", "slug": "cny"},
    "zar": {"name": "Rand", "symbol": "R", "slug": "zar"},
    "vnd": {"name": "Dong", "symbol": "₫", "slug": "vnd"},
    "cad": {"name": "Canadian Dollar", "symbol": "$", "slug": "cad"},
    "nok": {"name": "Norwegian Krone", "symbol": "kr", "slug": "nok"},
    "eur": {"name": "Euro", "symbol": "€", "slug": "eur"},
    "gbp": {"name": "British Pound", "symbol": "£", "slug": "gbp"},
    "jpy": {"name": "Japanese Yen", "symbol": "¥", "slug": "jpy"},
    "try": {"name": "Turkish Lira", "symbol": "₺", "slug": "try"},
    "rub": {"name": "Russian Ruble", "symbol": "р.", "slug": "rub"},
    "inr": {"name": "Indian Rupee", "symbol": "₹", "slug": "inr"},
    "brl": {"name": "Brazilian Real", "symbol": "R$", "slug": "brl"},
    "php": {"name": "Philippine Peso", "symbol": "₱", "slug": "php"},
    "ils": {"name": "Israeli Shekel", "symbol": "₪", "slug": "ils"},
    "clp": {"name": "Chilean Peso", "symbol": "$", "slug": "clp"},
    "twd": {"name": "Taiwan Dollar", "symbol": "NT$", "slug": "twd"},
    "hkd": {"name": "Hong Kong Dollar", "symbol": "HK$", "slug": "hkd"},
    "bhd": {"name": "Bahraini Dinar", "symbol": "BD", "slug": "bhd"},
    "sar": {"name": "Saudi Riyal", "symbol": "﷼", "slug": "sar"},
    "aud": {"name": "Australian Dollar", "symbol": "$", "slug": "aud"},
    "nzd": {"name": "New Zealand Dollar", "symbol": "$", "slug": "nzd"},
    "chf": {"name": "Swiss Franc", "symbol": "Fr.", "slug": "chf"},
}


def dust_xec() -> Decimal:
    return Decimal(DUST_SATS) / SATOSHIS_PER_XEC
