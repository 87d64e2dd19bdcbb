"""
ZKSIGNER Test Suite - Shared Fixtures
"""

import hashlib

import pytest

from zksigner.config import SignerConfig
from zksigner.core.crypto import CryptoBackend, PrivateKey
from zksigner.exceptions import MessageTooLongError, SeedTooShortError
from zksigner.logger import SignerLogger
from zksigner.protocol.transactions import Transfer

SEED = bytes(range(32))

# Ed25519Backend identity for SEED: sha256(SEED) as the Ed25519 secret
SEED_PUBLIC_KEY = "0x5bf2e2423666c25ff229a291c411f875a6d0582a72e16c5e334a74b60033c2d3"
SEED_PUBLIC_KEY_HASH = "sync:5eee59933e67bdf03a698f0b1c492903b03a00a2"

ADDRESS_A = "0x" + "aa" * 20
ADDRESS_B = "0x" + "bb" * 20

ONE_TOKEN = 10**18
FEE = 100_000_000_000_000  # Exactly packable: 1000 * 10^11

# Transfer of ONE_TOKEN from ADDRESS_A (account 1) to ADDRESS_B, token 0, nonce 0
TRANSFER_GOLDEN = bytes.fromhex(
    "05"
    "00000001"
    + "aa" * 20
    + "bb" * 20
    + "0000"
    "4a817c8008"
    "7d0b"
    "00000000"
)


def make_transfer(**overrides):
    fields = dict(
        account_id=1,
        from_address=ADDRESS_A,
        to_address=ADDRESS_B,
        token=0,
        amount=ONE_TOKEN,
        fee=FEE,
        nonce=0,
    )
    fields.update(overrides)
    return Transfer(**fields)


class FakeCrypto(CryptoBackend):
    """Hash-based stand-in with the same limits as the real backend."""

    def __init__(self):
        self.signed = []

    def derive_private_key(self, seed: bytes) -> PrivateKey:
        if len(seed) < 32:
            raise SeedTooShortError(f"seed too short: {len(seed)}")
        return PrivateKey(hashlib.sha256(b"priv" + seed).digest())

    def derive_public_key(self, private_key: PrivateKey) -> bytes:
        return hashlib.sha256(b"pub" + private_key.data).digest()

    def hash_public_key(self, public_key: bytes) -> bytes:
        return hashlib.sha256(public_key).digest()[:20]

    def sign_message(self, private_key: PrivateKey, message: bytes) -> bytes:
        if len(message) > 92:
            raise MessageTooLongError(f"message too long: {len(message)}")
        self.signed.append(message)
        return hashlib.sha512(private_key.data + message).digest()[:64]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env / shell from leaking into tests."""
    for name in ("ZKSYNC_CHAIN_ID", "ZKSYNC_SIGNER_SEED", "ZKSYNC_PRIVATE_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def signer_config():
    """Default signer configuration for tests (no log file)."""
    return SignerConfig(log_file="")


@pytest.fixture
def logger(signer_config):
    """Logger instance for tests."""
    return SignerLogger(signer_config)


@pytest.fixture
def fake_crypto():
    return FakeCrypto()
