#!/usr/bin/env python3
"""
ZKSIGNER - Transaction Records

Unsigned transactions go in, signed transactions come out.
The signature field is the only thing the signer ever touches.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Signature:
    """Public key and signature, both lowercase hex without 0x."""

    pub_key: str
    signature: str

    def to_dict(self) -> dict:
        return {"pubKey": self.pub_key, "signature": self.signature}


@dataclass
class ChangePubKey:
    """Bind a new signing key hash to an account."""

    TX_TYPE = "ChangePubKey"

    account_id: int
    account: str  # Owner Ethereum address
    new_pk_hash: str  # "sync:..." hash of the new public key
    fee_token: int
    fee: int
    nonce: int
    signature: Optional[Signature] = field(default=None, compare=False)

    @property
    def tx_type(self) -> str:
        return self.TX_TYPE

    def to_dict(self) -> dict:
        return {
            "type": self.TX_TYPE,
            "accountId": self.account_id,
            "account": self.account,
            "newPkHash": self.new_pk_hash,
            "feeToken": self.fee_token,
            "fee": str(self.fee),
            "nonce": self.nonce,
            "signature": self.signature.to_dict() if self.signature else None,
        }


@dataclass
class Transfer:
    """Move tokens between two layer-2 accounts."""

    TX_TYPE = "Transfer"

    account_id: int
    from_address: str
    to_address: str
    token: int
    amount: int
    fee: int
    nonce: int
    signature: Optional[Signature] = field(default=None, compare=False)

    @property
    def tx_type(self) -> str:
        return self.TX_TYPE

    def to_dict(self) -> dict:
        return {
            "type": self.TX_TYPE,
            "accountId": self.account_id,
            "from": self.from_address,
            "to": self.to_address,
            "token": self.token,
            "amount": str(self.amount),
            "fee": str(self.fee),
            "nonce": self.nonce,
            "signature": self.signature.to_dict() if self.signature else None,
        }


@dataclass
class Withdraw:
    """Move tokens from layer-2 back to an Ethereum address."""

    TX_TYPE = "Withdraw"

    account_id: int
    from_address: str
    to_address: str  # Ethereum recipient
    token: int
    amount: int  # Full precision, never packed
    fee: int
    nonce: int
    signature: Optional[Signature] = field(default=None, compare=False)

    @property
    def tx_type(self) -> str:
        return self.TX_TYPE

    def to_dict(self) -> dict:
        return {
            "type": self.TX_TYPE,
            "accountId": self.account_id,
            "from": self.from_address,
            "to": self.to_address,
            "token": self.token,
            "amount": str(self.amount),
            "fee": str(self.fee),
            "nonce": self.nonce,
            "signature": self.signature.to_dict() if self.signature else None,
        }


@dataclass
class ForcedExit:
    """Withdraw the whole balance of a target account on its behalf."""

    TX_TYPE = "ForcedExit"

    initiator_account_id: int
    target: str
    token: int
    fee: int
    nonce: int
    signature: Optional[Signature] = field(default=None, compare=False)

    @property
    def tx_type(self) -> str:
        return self.TX_TYPE

    def to_dict(self) -> dict:
        return {
            "type": self.TX_TYPE,
            "initiatorAccountId": self.initiator_account_id,
            "target": self.target,
            "token": self.token,
            "fee": str(self.fee),
            "nonce": self.nonce,
            "signature": self.signature.to_dict() if self.signature else None,
        }
