"""
ZKSIGNER - Layer-2 Transaction Signer

Canonical encoding and signing of zkSync-style layer-2 transactions.

Usage:
    from zksigner import KeyManager, Transfer

    signer = KeyManager.from_seed(seed)
    signed = signer.sign_transfer(Transfer(...))
"""

__version__ = "1.0.0"

# Configuration
from zksigner.config import ChainId, SignerConfig

# Core components
from zksigner.core.crypto import CryptoBackend, Ed25519Backend, PrivateKey
from zksigner.core.eth_signer import EthAccountSigner, EthSignature, EthSigner, SignatureType
from zksigner.core.key_manager import MESSAGE, KeyManager

# Exceptions
from zksigner.exceptions import (
    ConfigError,
    CryptoError,
    IncorrectCredentialsError,
    InvalidSeedError,
    MessageTooLongError,
    SeedTooShortError,
    SigningError,
    TransactionSigningError,
    ZkSignerError,
)

# Logger
from zksigner.logger import SignerLogger

# Protocol
from zksigner.protocol.encoder import encode_transaction
from zksigner.protocol.transactions import ChangePubKey, ForcedExit, Signature, Transfer, Withdraw

__all__ = [
    # Config
    "SignerConfig",
    "ChainId",
    # Exceptions
    "ZkSignerError",
    "ConfigError",
    "CryptoError",
    "SeedTooShortError",
    "MessageTooLongError",
    "InvalidSeedError",
    "IncorrectCredentialsError",
    "SigningError",
    "TransactionSigningError",
    # Logger
    "SignerLogger",
    # Core
    "KeyManager",
    "MESSAGE",
    "CryptoBackend",
    "Ed25519Backend",
    "PrivateKey",
    "EthSigner",
    "EthAccountSigner",
    "EthSignature",
    "SignatureType",
    # Protocol
    "Signature",
    "ChangePubKey",
    "Transfer",
    "Withdraw",
    "ForcedExit",
    "encode_transaction",
]
