#!/usr/bin/env python3
"""
ZKSIGNER - Crypto Backends

The signing primitive is a collaborator, not a global. KeyManager receives
one of these at construction time, which keeps tests free to swap in a fake.

Thread safety: KeyManager adds no locking of its own. Sharing a manager
across threads is only safe when the backend's methods are thread-safe;
a backend that is not must be serialized by whoever shares it.
"""

import hashlib
from abc import ABC, abstractmethod
from dataclasses import dataclass

from solders.keypair import Keypair

from zksigner.exceptions import CryptoError, MessageTooLongError, SeedTooShortError

MIN_SEED_LENGTH = 32
MAX_MESSAGE_LENGTH = 92
PRIVATE_KEY_LENGTH = 32
PUBLIC_KEY_HASH_LENGTH = 20


@dataclass
class PrivateKey:
    """Opaque secret. `data` is the exported raw form."""

    data: bytes

    def __repr__(self) -> str:
        return "PrivateKey(***)"


class CryptoBackend(ABC):
    """
    The four primitive operations the signer consumes.
    """

    @abstractmethod
    def derive_private_key(self, seed: bytes) -> PrivateKey:
        """Raises SeedTooShortError when `seed` is too short."""
        pass

    @abstractmethod
    def derive_public_key(self, private_key: PrivateKey) -> bytes:
        pass

    @abstractmethod
    def hash_public_key(self, public_key: bytes) -> bytes:
        """Fixed-width digest used as the on-chain signer identity."""
        pass

    @abstractmethod
    def sign_message(self, private_key: PrivateKey, message: bytes) -> bytes:
        """Raises MessageTooLongError when `message` exceeds the limit."""
        pass


class Ed25519Backend(CryptoBackend):
    """
    Ed25519 via solders. Deterministic: same key and message, same signature.
    Holds no state, so a single instance can be shared between threads.
    """

    def derive_private_key(self, seed: bytes) -> PrivateKey:
        if len(seed) < MIN_SEED_LENGTH:
            raise SeedTooShortError(
                f"Seed must be at least {MIN_SEED_LENGTH} bytes, got {len(seed)}"
            )
        return PrivateKey(hashlib.sha256(seed).digest())

    def _keypair(self, private_key: PrivateKey) -> Keypair:
        if len(private_key.data) != PRIVATE_KEY_LENGTH:
            raise CryptoError(
                f"Private key must be {PRIVATE_KEY_LENGTH} bytes, got {len(private_key.data)}"
            )
        return Keypair.from_seed(private_key.data)

    def derive_public_key(self, private_key: PrivateKey) -> bytes:
        return bytes(self._keypair(private_key).pubkey())

    def hash_public_key(self, public_key: bytes) -> bytes:
        return hashlib.sha256(public_key).digest()[:PUBLIC_KEY_HASH_LENGTH]

    def sign_message(self, private_key: PrivateKey, message: bytes) -> bytes:
        if len(message) > MAX_MESSAGE_LENGTH:
            raise MessageTooLongError(
                f"Message must be at most {MAX_MESSAGE_LENGTH} bytes, got {len(message)}"
            )
        return bytes(self._keypair(private_key).sign_message(message))
