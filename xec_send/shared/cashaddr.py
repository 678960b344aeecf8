"""CashAddr encoding used by eCash (``ecash:``) and eToken (``etoken:``) addresses.

A CashAddr string is ``<prefix>:<payload>`` where the payload is the base32
encoding of a version byte, the hash, and a 40-bit BCH checksum computed over
the prefix and the data.
"""

from __future__ import annotations

from dataclasses import dataclass

from bech32 import convertbits

from xec_send.exceptions import InvalidAddressError

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
CHECKSUM_LENGTH = 8

GENERATORS = (
    0x98F2BC8E61,
    0x79B76D99E2,
    0xF33E5FB3C4,
    0xAE2EABE2A8,
    0x1E4F43E470,
)

P2PKH = "P2PKH"
P2SH = "P2SH"

_TYPE_BITS = {P2PKH: 0, P2SH: 1}
_HASH_SIZES = {0: 20, 1: 24, 2: 28, 3: 32, 4: 40, 5: 48, 6: 56, 7: 64}


@dataclass(frozen=True)
class DecodedAddress:
    prefix: str
    type: str
    hash: bytes


def polymod(values: list[int]) -> int:
    checksum = 1
    for value in values:
        top = checksum >> 35
        checksum = ((checksum & 0x07FFFFFFFF) << 5) ^ value
        for i, generator in enumerate(GENERATORS):
            if (top >> i) & 1:
                checksum ^= generator
    return checksum ^ 1


def _prefix_expand(prefix: str) -> list[int]:
    return [ord(char) & 0x1F for char in prefix] + [0]


def _create_checksum(prefix: str, payload: list[int]) -> list[int]:
    mod = polymod(_prefix_expand(prefix) + payload + [0] * CHECKSUM_LENGTH)
    return [(mod >> 5 * (CHECKSUM_LENGTH - 1 - i)) & 0x1F for i in range(CHECKSUM_LENGTH)]


def _version_byte(address_type: str, hash_length: int) -> int:
    size_bits = next(
        (bits for bits, size in _HASH_SIZES.items() if size == hash_length), None
    )
    if size_bits is None:
        raise InvalidAddressError(f"Unsupported hash length: {hash_length}")
    if address_type not in _TYPE_BITS:
        raise InvalidAddressError(f"Unsupported address type: {address_type}")
    return (_TYPE_BITS[address_type] << 3) | size_bits


def encode(prefix: str, address_type: str, hash_bytes: bytes) -> str:
    prefix = prefix.lower()
    version = _version_byte(address_type, len(hash_bytes))
    payload = convertbits([version, *hash_bytes], 8, 5, True)
    if payload is None:
        raise InvalidAddressError("Unable to encode address payload")
    data = payload + _create_checksum(prefix, payload)
    return f"{prefix}:{''.join(CHARSET[d] for d in data)}"


def decode(address: str) -> DecodedAddress:
    """Decode a prefixed CashAddr string.

    Raises InvalidAddressError on mixed case, a missing prefix, characters
    outside the base32 alphabet, a bad checksum or an inconsistent payload.
    """
    if not isinstance(address, str) or not address:
        raise InvalidAddressError("Address must be a non-empty string")
    if address.lower() != address and address.upper() != address:
        raise InvalidAddressError("Mixed case address")

    address = address.lower()
    prefix, separator, encoded = address.rpartition(":")
    if not separator or not prefix:
        raise InvalidAddressError("Missing address prefix")
    if len(encoded) <= CHECKSUM_LENGTH:
        raise InvalidAddressError("Address payload too short")

    try:
        data = [CHARSET.index(char) for char in encoded]
    except ValueError:
        raise InvalidAddressError("Invalid character in address") from None

    if polymod(_prefix_expand(prefix) + data) != 0:
        raise InvalidAddressError("Invalid address checksum")

    decoded = convertbits(data[:-CHECKSUM_LENGTH], 5, 8, False)
    if not decoded:
        raise InvalidAddressError("Invalid address padding")

    version, hash_bytes = decoded[0], bytes(decoded[1:])
    if version & 0x80:
        raise InvalidAddressError("Reserved version bit set")

    type_bits = (version >> 3) & 0x0F
    address_type = next(
        (name for name, bits in _TYPE_BITS.items() if bits == type_bits), None
    )
    if address_type is None:
        raise InvalidAddressError(f"Unknown address type: {type_bits}")
    if _HASH_SIZES[version & 0x07] != len(hash_bytes):
        raise InvalidAddressError("Hash length does not match version byte")

    return DecodedAddress(prefix=prefix, type=address_type, hash=hash_bytes)
