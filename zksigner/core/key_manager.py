#!/usr/bin/env python3
"""
ZKSIGNER - Key Management

Your keys, your funds. Handle with the reverence they deserve.
"""

from typing import Callable, Optional, TypeVar

from zksigner.config import ChainId, SignerConfig, decode_hex
from zksigner.core.crypto import CryptoBackend, Ed25519Backend, PrivateKey
from zksigner.core.eth_signer import EthSigner, SignatureType
from zksigner.exceptions import (
    ConfigError,
    CryptoError,
    IncorrectCredentialsError,
    InvalidSeedError,
    MessageTooLongError,
    SigningError,
    TransactionSigningError,
)
from zksigner.logger import SignerLogger
from zksigner.protocol.encoder import (
    Transaction,
    encode_change_pub_key,
    encode_forced_exit,
    encode_transaction,
    encode_transfer,
    encode_withdraw,
)
from zksigner.protocol.transactions import (
    ChangePubKey,
    ForcedExit,
    Signature,
    Transfer,
    Withdraw,
)

MESSAGE = "Access zkSync account.\n\nOnly sign this message for a trusted client!"

PUBLIC_KEY_HASH_PREFIX = "sync:"

T = TypeVar("T")


def eth_seed_message(chain_id: ChainId) -> str:
    """Text the Ethereum account signs to derive its layer-2 key."""
    if chain_id is ChainId.MAINNET:
        return MESSAGE
    return f"{MESSAGE}\nChain ID: {chain_id.value}."


class KeyManager:
    """
    Holds one layer-2 signing identity.
    Never logs private keys. The public identity is derived once and cached.
    """

    def __init__(
        self,
        private_key: PrivateKey,
        crypto: CryptoBackend,
        logger: Optional[SignerLogger] = None,
    ):
        self._private_key = private_key
        self.crypto = crypto
        self.logger = logger

        try:
            self._public_key = crypto.derive_public_key(private_key)
            self._public_key_hash = crypto.hash_public_key(self._public_key).hex()
        except CryptoError as e:
            raise InvalidSeedError(f"Key material rejected: {e}") from e

        if self.logger:
            self.logger.signer_ready(self.public_key_hash)

    # ─── Construction ──────────────────────────────────────────────────

    @classmethod
    def from_seed(
        cls,
        seed: bytes,
        crypto: Optional[CryptoBackend] = None,
        logger: Optional[SignerLogger] = None,
    ) -> "KeyManager":
        crypto = crypto or Ed25519Backend()
        try:
            private_key = crypto.derive_private_key(seed)
        except CryptoError as e:
            raise InvalidSeedError(f"Invalid seed: {e}") from e
        return cls(private_key, crypto, logger)

    @classmethod
    def from_raw_key(
        cls,
        key: bytes,
        crypto: Optional[CryptoBackend] = None,
        logger: Optional[SignerLogger] = None,
    ) -> "KeyManager":
        """Restore a previously exported key; `raw_private_key` returns `key` as is."""
        crypto = crypto or Ed25519Backend()
        try:
            # The seed path still validates length and fills backend fields
            private_key = crypto.derive_private_key(key)
        except CryptoError as e:
            raise InvalidSeedError(f"Invalid raw key: {e}") from e
        private_key.data = bytes(key)
        return cls(private_key, crypto, logger)

    @classmethod
    def from_eth_signer(
        cls,
        eth_signer: EthSigner,
        chain_id: ChainId = ChainId.MAINNET,
        crypto: Optional[CryptoBackend] = None,
        logger: Optional[SignerLogger] = None,
    ) -> "KeyManager":
        """Derive the layer-2 key from an Ethereum account's approval signature."""
        signature = eth_signer.sign_message(eth_seed_message(chain_id), True)
        if signature.type is not SignatureType.ETHEREUM_SIGNATURE:
            raise IncorrectCredentialsError(f"Invalid signature type: {signature.type.value}")

        return cls.from_seed(decode_hex(signature.signature), crypto, logger)

    @classmethod
    def from_config(
        cls,
        config: SignerConfig,
        crypto: Optional[CryptoBackend] = None,
        logger: Optional[SignerLogger] = None,
    ) -> "KeyManager":
        """Raw private key wins over seed when both are configured."""
        source = config.private_key or config.seed
        if not source:
            raise ConfigError("Key material required (set ZKSYNC_PRIVATE_KEY or ZKSYNC_SIGNER_SEED)")
        try:
            material = decode_hex(source)
        except ValueError as e:
            raise ConfigError(f"Key material must be hex encoded: {e}") from e

        if config.private_key:
            return cls.from_raw_key(material, crypto, logger)
        return cls.from_seed(material, crypto, logger)

    # ─── Identity ──────────────────────────────────────────────────────

    @property
    def public_key(self) -> str:
        return "0x" + self._public_key.hex()

    @property
    def public_key_hash(self) -> str:
        return PUBLIC_KEY_HASH_PREFIX + self._public_key_hash

    @property
    def raw_private_key(self) -> bytes:
        return self._private_key.data

    def __repr__(self) -> str:
        return f"KeyManager(public_key_hash='{self.public_key_hash}')"

    # ─── Signing ───────────────────────────────────────────────────────

    def sign(self, message: bytes) -> Signature:
        try:
            signature = self.crypto.sign_message(self._private_key, message)
        except MessageTooLongError as e:
            raise SigningError(f"Message too long to sign: {e}") from e

        return Signature(pub_key=self._public_key.hex(), signature=signature.hex())

    def _sign_with(self, tx: T, encode: Callable[[T], bytes], expected: Optional[type] = None) -> T:
        try:
            if expected is not None and type(tx) is not expected:
                raise TypeError(f"Expected {expected.__name__}, got {type(tx).__name__}")
            message = encode(tx)
            signature = self.sign(message)
        except (ValueError, TypeError, CryptoError, SigningError) as e:
            tx_type = _tx_type(tx)
            if self.logger:
                self.logger.error(f"Signing {tx_type} failed", e)
            raise TransactionSigningError(tx_type, e) from e

        tx.signature = signature
        if self.logger:
            self.logger.transaction_signed(tx.tx_type, tx.nonce, len(message))
        return tx

    def sign_change_pub_key(self, change_pub_key: ChangePubKey) -> ChangePubKey:
        return self._sign_with(change_pub_key, encode_change_pub_key, ChangePubKey)

    def sign_transfer(self, transfer: Transfer) -> Transfer:
        return self._sign_with(transfer, encode_transfer, Transfer)

    def sign_withdraw(self, withdraw: Withdraw) -> Withdraw:
        return self._sign_with(withdraw, encode_withdraw, Withdraw)

    def sign_forced_exit(self, forced_exit: ForcedExit) -> ForcedExit:
        return self._sign_with(forced_exit, encode_forced_exit, ForcedExit)

    def sign_transaction(self, tx: Transaction) -> Transaction:
        """Sign any supported variant; overwrites an existing signature."""
        return self._sign_with(tx, encode_transaction)


def _tx_type(tx) -> str:
    return getattr(tx, "tx_type", type(tx).__name__)
