"""
ZKSIGNER Protocol - Transaction records, field codecs and canonical encoding.
"""

from .codecs import (
    closest_packable_amount,
    closest_packable_fee,
    is_amount_packable,
    is_fee_packable,
    pack_amount,
    pack_fee,
    unpack_amount,
    unpack_fee,
)
from .encoder import (
    CHANGE_PUB_KEY_OPCODE,
    FORCED_EXIT_OPCODE,
    TRANSFER_OPCODE,
    TX_LAYOUTS,
    WITHDRAW_OPCODE,
    Transaction,
    encode_change_pub_key,
    encode_forced_exit,
    encode_transaction,
    encode_transfer,
    encode_withdraw,
)
from .transactions import ChangePubKey, ForcedExit, Signature, Transfer, Withdraw

__all__ = [
    "Signature",
    "ChangePubKey",
    "Transfer",
    "Withdraw",
    "ForcedExit",
    "Transaction",
    "TX_LAYOUTS",
    "CHANGE_PUB_KEY_OPCODE",
    "TRANSFER_OPCODE",
    "WITHDRAW_OPCODE",
    "FORCED_EXIT_OPCODE",
    "encode_transaction",
    "encode_change_pub_key",
    "encode_transfer",
    "encode_withdraw",
    "encode_forced_exit",
    "pack_fee",
    "unpack_fee",
    "pack_amount",
    "unpack_amount",
    "closest_packable_fee",
    "closest_packable_amount",
    "is_fee_packable",
    "is_amount_packable",
]
