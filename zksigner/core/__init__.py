"""
ZKSIGNER Core - Key management, crypto backends and Ethereum signers.
"""

from .crypto import CryptoBackend, Ed25519Backend, PrivateKey
from .eth_signer import EthAccountSigner, EthSignature, EthSigner, SignatureType
from .key_manager import MESSAGE, KeyManager, eth_seed_message

__all__ = [
    "KeyManager",
    "MESSAGE",
    "eth_seed_message",
    "CryptoBackend",
    "Ed25519Backend",
    "PrivateKey",
    "EthSigner",
    "EthAccountSigner",
    "EthSignature",
    "SignatureType",
]
