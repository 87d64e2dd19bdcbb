#!/usr/bin/env python3
"""
ZKSIGNER - Field Codecs

Fixed-width field encoders for the canonical transaction messages.
Every width here is mirrored by the verification circuit; a single
byte of drift yields signatures over the wrong payload.

Compact ("packed") numbers are decimal floats:
    value = mantissa * 10 ** exponent
serialized big-endian as (mantissa << EXPONENT_BITS) | exponent.
"""

from typing import Tuple

# ═══════════════════════════════════════════════════════════════════════════
#                             FIELD WIDTHS
# ═══════════════════════════════════════════════════════════════════════════

ACCOUNT_ID_BYTES = 4
TOKEN_ID_BYTES = 2
NONCE_BYTES = 4
ADDRESS_BYTES = 20
FULL_AMOUNT_BYTES = 16

# Packed float layout
EXPONENT_BASE = 10
FEE_EXPONENT_BITS = 5
FEE_MANTISSA_BITS = 11
AMOUNT_EXPONENT_BITS = 5
AMOUNT_MANTISSA_BITS = 35

ADDRESS_PREFIXES = ("0x", "0X", "sync:")


def _uint_to_bytes(value: int, width: int, field: str) -> bytes:
    if value < 0:
        raise ValueError(f"{field} must be non-negative, got {value}")
    if value >= 1 << (8 * width):
        raise ValueError(f"{field} {value} does not fit in {width} bytes")
    return value.to_bytes(width, "big")


def account_id_to_bytes(account_id: int) -> bytes:
    return _uint_to_bytes(account_id, ACCOUNT_ID_BYTES, "account id")


def token_id_to_bytes(token_id: int) -> bytes:
    return _uint_to_bytes(token_id, TOKEN_ID_BYTES, "token id")


def nonce_to_bytes(nonce: int) -> bytes:
    return _uint_to_bytes(nonce, NONCE_BYTES, "nonce")


def amount_full_to_bytes(amount: int) -> bytes:
    """Full precision amount, used where no packing is allowed (withdrawals)."""
    return _uint_to_bytes(amount, FULL_AMOUNT_BYTES, "amount")


def address_to_bytes(address: str) -> bytes:
    """
    Decode an Ethereum address ("0x...") or a public key hash ("sync:...")
    into its raw 20 bytes. No checksum handling is applied.
    """
    body = address
    for prefix in ADDRESS_PREFIXES:
        if address.startswith(prefix):
            body = address[len(prefix):]
            break
    try:
        raw = bytes.fromhex(body)
    except ValueError as e:
        raise ValueError(f"Address is not hex: {address!r}") from e
    if len(raw) != ADDRESS_BYTES:
        raise ValueError(f"Address must be {ADDRESS_BYTES} bytes, got {len(raw)}: {address!r}")
    return raw


# ═══════════════════════════════════════════════════════════════════════════
#                           PACKED (FLOAT) NUMBERS
# ═══════════════════════════════════════════════════════════════════════════

def _max_packable(exponent_bits: int, mantissa_bits: int) -> int:
    max_mantissa = (1 << mantissa_bits) - 1
    max_exponent = (1 << exponent_bits) - 1
    return max_mantissa * EXPONENT_BASE ** max_exponent


def to_float(value: int, exponent_bits: int, mantissa_bits: int) -> Tuple[int, int]:
    """
    Find (mantissa, exponent) for the representable value closest to `value`.

    Candidates are the truncation at the smallest fitting exponent, the
    next representable value above it (one exponent higher when the mantissa
    is already at its maximum) and the full mantissa one exponent lower.
    Ties round up.
    """
    if value < 0:
        raise ValueError(f"Cannot pack negative value {value}")
    if value > _max_packable(exponent_bits, mantissa_bits):
        raise ValueError(f"Value {value} is too big to pack")

    max_mantissa = (1 << mantissa_bits) - 1
    exponent = 0
    mantissa = value
    while mantissa > max_mantissa:
        exponent += 1
        mantissa = value // EXPONENT_BASE ** exponent

    remainder = value - mantissa * EXPONENT_BASE ** exponent
    if remainder == 0:
        return mantissa, exponent

    if mantissa < max_mantissa:
        up_mantissa, up_exponent = mantissa + 1, exponent
    else:
        up_exponent = exponent + 1
        up_mantissa = -(-value // EXPONENT_BASE ** up_exponent)

    candidates = [(mantissa, exponent), (up_mantissa, up_exponent)]
    if exponent > 0:
        candidates.append((max_mantissa, exponent - 1))

    def distance(candidate):
        represented = candidate[0] * EXPONENT_BASE ** candidate[1]
        return abs(represented - value), -represented

    return min(candidates, key=distance)


def pack(value: int, exponent_bits: int, mantissa_bits: int) -> bytes:
    mantissa, exponent = to_float(value, exponent_bits, mantissa_bits)
    packed = (mantissa << exponent_bits) | exponent
    return packed.to_bytes((exponent_bits + mantissa_bits) // 8, "big")


def unpack(data: bytes, exponent_bits: int, mantissa_bits: int) -> int:
    width = (exponent_bits + mantissa_bits) // 8
    if len(data) != width:
        raise ValueError(f"Packed value must be {width} bytes, got {len(data)}")
    packed = int.from_bytes(data, "big")
    exponent = packed & ((1 << exponent_bits) - 1)
    mantissa = packed >> exponent_bits
    return mantissa * EXPONENT_BASE ** exponent


def pack_fee(fee: int) -> bytes:
    """2-byte packed fee."""
    return pack(fee, FEE_EXPONENT_BITS, FEE_MANTISSA_BITS)


def unpack_fee(data: bytes) -> int:
    return unpack(data, FEE_EXPONENT_BITS, FEE_MANTISSA_BITS)


def pack_amount(amount: int) -> bytes:
    """5-byte packed transfer amount."""
    return pack(amount, AMOUNT_EXPONENT_BITS, AMOUNT_MANTISSA_BITS)


def unpack_amount(data: bytes) -> int:
    return unpack(data, AMOUNT_EXPONENT_BITS, AMOUNT_MANTISSA_BITS)


def closest_packable_fee(fee: int) -> int:
    """The fee the network will actually charge for `fee`."""
    return unpack_fee(pack_fee(fee))


def closest_packable_amount(amount: int) -> int:
    """The amount the network will actually move for `amount`."""
    return unpack_amount(pack_amount(amount))


def is_fee_packable(fee: int) -> bool:
    try:
        return closest_packable_fee(fee) == fee
    except ValueError:
        return False


def is_amount_packable(amount: int) -> bool:
    try:
        return closest_packable_amount(amount) == amount
    except ValueError:
        return False
