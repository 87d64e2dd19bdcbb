#!/usr/bin/env python3
"""
ZKSIGNER - Ethereum Message Signers

The layer-2 key is derived from an Ethereum signature over a fixed
disclosure message, so the same Ethereum account always yields the same
layer-2 identity and the derived key never has to be stored.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from eth_account.messages import encode_defunct
from eth_account.signers.local import LocalAccount


class SignatureType(Enum):
    """How an Ethereum signature should be verified."""

    ETHEREUM_SIGNATURE = "EthereumSignature"
    EIP1271_SIGNATURE = "EIP1271Signature"


@dataclass(frozen=True)
class EthSignature:
    type: SignatureType
    signature: str  # Hex, 0x prefixed


class EthSigner(ABC):
    """
    The base class for Ethereum message signers.
    """

    @property
    @abstractmethod
    def address(self) -> str:
        pass

    @abstractmethod
    def sign_message(self, message: str, is_personal: bool = True) -> EthSignature:
        """Sign `message`; personal messages get the EIP-191 prefix."""
        pass


class EthAccountSigner(EthSigner):
    """
    A signer wrapper for ``eth_account.LocalAccount``.
    """

    def __init__(self, account: LocalAccount):
        self._account = account

    @property
    def address(self) -> str:
        return self._account.address

    def sign_message(self, message: str, is_personal: bool = True) -> EthSignature:
        if not is_personal:
            raise ValueError("EthAccountSigner only signs personal messages")
        signed = self._account.sign_message(encode_defunct(text=message))
        return EthSignature(
            type=SignatureType.ETHEREUM_SIGNATURE,
            signature="0x" + bytes(signed.signature).hex(),
        )
