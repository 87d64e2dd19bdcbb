#!/usr/bin/env python3
"""
ZKSIGNER Transaction Encoder - Test Suite

Golden messages below are the exact bytes the circuit verifies.

Run with: pytest tests/test_encoder.py -v
"""

import logging

import pytest

from conftest import ADDRESS_A, ADDRESS_B, FEE, ONE_TOKEN, TRANSFER_GOLDEN, make_transfer
from zksigner.protocol.encoder import (
    CHANGE_PUB_KEY_OPCODE,
    FORCED_EXIT_OPCODE,
    TRANSFER_OPCODE,
    TX_LAYOUTS,
    WITHDRAW_OPCODE,
    encode_change_pub_key,
    encode_forced_exit,
    encode_transaction,
    encode_transfer,
    encode_withdraw,
)
from zksigner.protocol.transactions import ChangePubKey, ForcedExit, Signature, Withdraw


class TestTransferEncoding:
    """Transfer: opcode 0x05, packed amount."""

    def test_golden_message(self):
        assert encode_transfer(make_transfer()) == TRANSFER_GOLDEN
        assert len(TRANSFER_GOLDEN) == 58

    def test_deterministic(self):
        """Same fields, same bytes."""
        assert encode_transfer(make_transfer()) == encode_transfer(make_transfer())

    def test_signature_does_not_affect_message(self):
        tx = make_transfer()
        tx.signature = Signature(pub_key="00", signature="11")
        assert encode_transfer(tx) == TRANSFER_GOLDEN

    def test_unpackable_fee_is_rounded_and_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="zksigner.protocol.encoder"):
            message = encode_transfer(make_transfer(fee=2048))
        assert message[-6:-4] == bytes.fromhex("ffe0")  # 2047 * 10^0
        assert "signing for 2047" in caplog.text
        assert "not packable" in caplog.text


class TestOtherVariants:
    """Field order and widths per variant."""

    def test_withdraw_uses_full_amount(self):
        tx = Withdraw(
            account_id=1,
            from_address=ADDRESS_A,
            to_address=ADDRESS_B,
            token=0,
            amount=ONE_TOKEN,
            fee=FEE,
            nonce=0,
        )
        expected = bytes.fromhex(
            "03"
            "00000001"
            + "aa" * 20
            + "bb" * 20
            + "0000"
            "00000000000000000de0b6b3a7640000"
            "7d0b"
            "00000000"
        )
        assert encode_withdraw(tx) == expected

    def test_withdraw_keeps_unpackable_amount(self):
        """No lossy packing for withdrawals."""
        tx = Withdraw(1, ADDRESS_A, ADDRESS_B, 0, ONE_TOKEN + 1, FEE, 0)
        assert encode_withdraw(tx)[47:63] == (ONE_TOKEN + 1).to_bytes(16, "big")

    def test_change_pub_key(self):
        tx = ChangePubKey(
            account_id=5,
            account=ADDRESS_A,
            new_pk_hash="sync:" + "cc" * 20,
            fee_token=0,
            fee=FEE,
            nonce=3,
        )
        expected = bytes.fromhex(
            "07"
            "00000005"
            + "aa" * 20
            + "cc" * 20
            + "0000"
            "7d0b"
            "00000003"
        )
        assert encode_change_pub_key(tx) == expected

    def test_forced_exit(self):
        tx = ForcedExit(initiator_account_id=2, target=ADDRESS_B, token=1, fee=FEE, nonce=4)
        expected = bytes.fromhex("08" "00000002" + "bb" * 20 + "0001" "7d0b" "00000004")
        assert encode_forced_exit(tx) == expected


class TestDispatch:
    """The layout table drives every variant."""

    def test_opcodes(self):
        assert TRANSFER_OPCODE == 0x05
        assert WITHDRAW_OPCODE == 0x03
        assert CHANGE_PUB_KEY_OPCODE == 0x07
        assert FORCED_EXIT_OPCODE == 0x08

    def test_first_byte_is_opcode(self):
        txs = [
            make_transfer(),
            Withdraw(1, ADDRESS_A, ADDRESS_B, 0, ONE_TOKEN, FEE, 0),
            ChangePubKey(1, ADDRESS_A, "sync:" + "cc" * 20, 0, FEE, 0),
            ForcedExit(1, ADDRESS_B, 0, FEE, 0),
        ]
        for tx in txs:
            assert encode_transaction(tx)[0] == TX_LAYOUTS[type(tx)].opcode

    def test_generic_matches_specific(self):
        assert encode_transaction(make_transfer()) == TRANSFER_GOLDEN

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            encode_transaction(object())

    def test_bad_field_raises_value_error(self):
        with pytest.raises(ValueError):
            encode_transfer(make_transfer(to_address="0xdead"))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
