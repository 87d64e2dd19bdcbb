#!/usr/bin/env python3
"""
ZKSIGNER - Custom Exception Hierarchy

Structured error types for precise error handling.
"""


class ZkSignerError(Exception):
    """Base exception for all ZKSIGNER errors."""

    pass


class ConfigError(ZkSignerError):
    """Invalid or missing configuration."""

    pass


class CryptoError(ZkSignerError):
    """Failure reported by a crypto backend."""

    pass


class SeedTooShortError(CryptoError):
    """Seed is shorter than the backend accepts."""

    pass


class MessageTooLongError(CryptoError):
    """Message is longer than the backend can sign."""

    pass


class InvalidSeedError(ZkSignerError):
    """Seed or raw key material cannot produce a signing key."""

    pass


class IncorrectCredentialsError(ZkSignerError):
    """External signer answered with the wrong kind of signature."""

    pass


class SigningError(ZkSignerError):
    """Message could not be signed."""

    pass


class TransactionSigningError(ZkSignerError):
    """Encoding or signing of a transaction failed."""

    def __init__(self, tx_type: str, cause: Exception):
        self.tx_type = tx_type
        self.cause = cause
        super().__init__(f"Failed to sign {tx_type}: {cause}")
