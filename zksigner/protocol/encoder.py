#!/usr/bin/env python3
"""
ZKSIGNER - Transaction Encoder

Turns each transaction variant into the exact byte message the circuit
verifies:

    [opcode] || field_1 || field_2 || ...

Layouts live in one table so field order cannot drift between variants.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Tuple, Union

from .codecs import (
    account_id_to_bytes,
    address_to_bytes,
    amount_full_to_bytes,
    closest_packable_amount,
    closest_packable_fee,
    nonce_to_bytes,
    pack_amount,
    pack_fee,
    token_id_to_bytes,
)
from .transactions import ChangePubKey, ForcedExit, Transfer, Withdraw

logger = logging.getLogger(__name__)

Transaction = Union[ChangePubKey, Transfer, Withdraw, ForcedExit]

# Opcodes as assigned by the network
CHANGE_PUB_KEY_OPCODE = 0x07
TRANSFER_OPCODE = 0x05
WITHDRAW_OPCODE = 0x03
FORCED_EXIT_OPCODE = 0x08


def _packed_fee(fee: int) -> bytes:
    rounded = closest_packable_fee(fee)
    if rounded != fee:
        logger.warning("Fee %d is not packable; signing for %d", fee, rounded)
    return pack_fee(fee)


def _packed_amount(amount: int) -> bytes:
    rounded = closest_packable_amount(amount)
    if rounded != amount:
        logger.warning("Amount %d is not packable; signing for %d", amount, rounded)
    return pack_amount(amount)


@dataclass(frozen=True)
class TxLayout:
    """Opcode plus ordered (attribute, encoder) pairs."""

    opcode: int
    fields: Tuple[Tuple[str, Callable[..., bytes]], ...]

    def encode(self, tx) -> bytes:
        parts = [bytes([self.opcode])]
        for attr, encoder in self.fields:
            parts.append(encoder(getattr(tx, attr)))
        return b"".join(parts)


TX_LAYOUTS: Dict[type, TxLayout] = {
    ChangePubKey: TxLayout(CHANGE_PUB_KEY_OPCODE, (
        ("account_id", account_id_to_bytes),
        ("account", address_to_bytes),
        ("new_pk_hash", address_to_bytes),
        ("fee_token", token_id_to_bytes),
        ("fee", _packed_fee),
        ("nonce", nonce_to_bytes),
    )),
    Transfer: TxLayout(TRANSFER_OPCODE, (
        ("account_id", account_id_to_bytes),
        ("from_address", address_to_bytes),
        ("to_address", address_to_bytes),
        ("token", token_id_to_bytes),
        ("amount", _packed_amount),
        ("fee", _packed_fee),
        ("nonce", nonce_to_bytes),
    )),
    Withdraw: TxLayout(WITHDRAW_OPCODE, (
        ("account_id", account_id_to_bytes),
        ("from_address", address_to_bytes),
        ("to_address", address_to_bytes),
        ("token", token_id_to_bytes),
        ("amount", amount_full_to_bytes),
        ("fee", _packed_fee),
        ("nonce", nonce_to_bytes),
    )),
    ForcedExit: TxLayout(FORCED_EXIT_OPCODE, (
        ("initiator_account_id", account_id_to_bytes),
        ("target", address_to_bytes),
        ("token", token_id_to_bytes),
        ("fee", _packed_fee),
        ("nonce", nonce_to_bytes),
    )),
}


def encode_transaction(tx: Transaction) -> bytes:
    """Canonical message bytes for any supported transaction."""
    layout = TX_LAYOUTS.get(type(tx))
    if layout is None:
        raise TypeError(f"Unsupported transaction type: {type(tx).__name__}")
    return layout.encode(tx)


def encode_change_pub_key(tx: ChangePubKey) -> bytes:
    return TX_LAYOUTS[ChangePubKey].encode(tx)


def encode_transfer(tx: Transfer) -> bytes:
    return TX_LAYOUTS[Transfer].encode(tx)


def encode_withdraw(tx: Withdraw) -> bytes:
    return TX_LAYOUTS[Withdraw].encode(tx)


def encode_forced_exit(tx: ForcedExit) -> bytes:
    return TX_LAYOUTS[ForcedExit].encode(tx)
